"""
solvers/backtracking.py

Полный перебор с возвратом для треугольной доски.

Доска одна на весь поиск: ход делается на месте, а при неудаче
откатывается через undo_jump. История ходов — стек, который растёт
и сокращается вместе с глубиной рекурсии.
"""

import time
from typing import List, Optional

from .base import BaseSolver, SolverStats
from core.board import TriangleBoard, Move
from utils.error_handling import validate_board
from utils.monitoring import monitor_time


class BacktrackingSolver(BaseSolver):
    """
    DFS с возвратом без отсечений.

    Особенности:
    - Возвращает первое найденное решение
    - Порядок ходов фиксирован (см. TriangleBoard.find_moves)
    - Глубина рекурсии ограничена числом колышков
    """

    @monitor_time('solve')
    def solve(self, board: TriangleBoard) -> Optional[List[Move]]:
        """
        Решает головоломку на копии доски.

        Args:
            board: начальная позиция

        Returns:
            Ходы от начала к концу, [] если остался один колышек,
            None если решения нет
        """
        validate_board(board)
        self.stats = SolverStats()

        self._log(f"Starting backtracking (pegs={board.peg_count()})")
        start = time.time()

        history: List[Move] = []
        solved = self.search(board.copy(), history)

        self.stats.time_elapsed = time.time() - start
        if not solved:
            self.logger.warning(f"[{self.__class__.__name__}] No solution found")
            self._log(f"Stats: {self.stats}")
            return None

        self.stats.solution_length = len(history)
        self._log(f"Solution found: {len(history)} moves")
        self._log(f"Stats: {self.stats}")
        return history

    def search(self, board: TriangleBoard, history: List[Move],
               move: Optional[Move] = None) -> bool:
        """
        Рекурсивный шаг поиска.

        Args:
            board: текущая доска (изменяется на месте)
            history: стек сделанных ходов
            move: ход, которым пришли в этот узел; None для первого вызова

        Returns:
            True если найден путь к одному колышку. История тогда
            содержит решение, а доска остаётся в финальном состоянии.
        """
        if move is not None:
            board.apply_jump(*move)
            history.append(move)

        self.stats.nodes_visited += 1
        self.monitor.increment_counter('nodes')
        self.stats.max_depth = max(self.stats.max_depth, len(history))

        empty_count, moves = board.find_moves()

        # Победа: пустые все лунки, кроме одной
        if empty_count == board.playable_count() - 1:
            return True

        if not moves:
            return False

        for candidate in moves:
            if self.search(board, history, candidate):
                return True
            history.pop()
            board.undo_jump(*candidate)
            self.stats.backtracks += 1
            self.monitor.increment_counter('backtracks')

        return False
