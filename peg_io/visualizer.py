"""
peg_io/visualizer.py

Визуализация доски и решений.

Функции получают доску и готовый список ходов и ничего не знают
о внутреннем состоянии решателя.
"""

from typing import List, Optional, Sequence

from core.board import TriangleBoard, Move
from core.utils import index_to_pos

NO_SOLUTION = "No solution found"


def render_board(board: TriangleBoard) -> str:
    """
    Кадр доски: ROWS строк по COLS символов.

    Прокладка — пробел, пустая лунка — X, колышек — O.
    Пробелы в конце строк сохраняются.
    """
    return "\n".join("".join(cell.value for cell in row) for row in board.grid)


def replay_boards(start: TriangleBoard, moves: Sequence[Move]) -> List[TriangleBoard]:
    """
    Снимки доски: начальная позиция и по одному после каждого хода.

    Args:
        start: начальная доска (не изменяется)
        moves: ходы от начала к концу

    Returns:
        len(moves) + 1 досок
    """
    board = start.copy()
    snapshots = [board.copy()]
    for move in moves:
        board.apply_jump(*move)
        snapshots.append(board.copy())
    return snapshots


def render_solution(start: TriangleBoard, moves: Optional[Sequence[Move]]) -> str:
    """
    Форматирует решение для вывода: кадры через пустую строку.

    Args:
        start: начальная доска
        moves: ходы или None

    Returns:
        Строка для вывода
    """
    if moves is None:
        return NO_SOLUTION
    return "\n\n".join(render_board(board) for board in replay_boards(start, moves))


def format_moves(moves: Optional[Sequence[Move]]) -> List[str]:
    """
    Форматирует список ходов.

    Args:
        moves: список Move

    Returns:
        Список строк вида '1. (4, 9) → (4, 5) over (4, 7)'
    """
    if not moves:
        return []
    return [
        f"{i}. {index_to_pos(*move.source)} → {index_to_pos(*move.landing)} "
        f"over {index_to_pos(*move.jumped)}"
        for i, move in enumerate(moves, 1)
    ]
