"""
solutions/verify.py

Независимая проверка решения повторным проигрыванием ходов.
"""

from typing import Sequence

from core.board import TriangleBoard, Move


def verify_solution(board: TriangleBoard, moves: Sequence[Move]) -> bool:
    """
    Проверяет корректность решения.

    Правила:
    - каждый ход допустим на текущей доске (колышек, колышек, лунка);
    - после всех ходов остаётся ровно один колышек.
    Пустое решение корректно только для уже решённой доски.

    Исходная доска не изменяется.
    """
    current = board.copy()
    for move in moves:
        if not current.is_valid_move(*move):
            return False
        current.apply_jump(*move)
    return current.peg_count() == 1
