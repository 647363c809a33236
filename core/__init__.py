"""
core - Ядро треугольной головоломки

Базовые структуры данных и константы.
"""

from .utils import (
    Cell, Direction, Position, ROWS, COLS, START_LAYOUT,
    PLAYABLE_POSITIONS, PLAYABLE_COUNT, is_valid_position, index_to_pos
)
from .board import TriangleBoard, Move

__all__ = [
    'TriangleBoard', 'Move',
    'Cell', 'Direction', 'Position', 'ROWS', 'COLS', 'START_LAYOUT',
    'PLAYABLE_POSITIONS', 'PLAYABLE_COUNT', 'is_valid_position', 'index_to_pos'
]
