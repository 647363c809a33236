"""
peg_io - Ввод/вывод для треугольной доски

Экспортирует:
- Построение доски из текстовой картинки
- Визуализация доски и решений
"""

from .parser import parse_board, create_start_board
from .visualizer import (
    render_board, replay_boards, render_solution, format_moves, NO_SOLUTION
)

__all__ = [
    'parse_board',
    'create_start_board',
    'render_board',
    'replay_boards',
    'render_solution',
    'format_moves',
    'NO_SOLUTION',
]
