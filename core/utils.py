"""
core/utils.py

Общие константы треугольной доски: состояния клеток, направления,
размеры сетки и стартовая раскладка.

Треугольник из 15 лунок уложен в прямоугольную сетку 5x11: между
лунками одного ряда стоит клетка-прокладка, поэтому соседи по ряду
отстоят на 2 столбца, а соседи по диагонали — на (±1, ±1).
"""

from enum import Enum
from typing import FrozenSet, Tuple

Position = Tuple[int, int]

ROWS = 5
COLS = 11


class Cell(Enum):
    """Состояние клетки доски."""
    OCCUPIED = 'O'   # Колышек
    EMPTY = 'X'      # Пустая лунка
    UNUSED = ' '     # Прокладка, никогда не меняется


class Direction(Enum):
    """
    Направление прыжка: шаг (row_delta, col_delta) прыгающего колышка.

    Перепрыгиваемая клетка — в одном шаге, клетка приземления — в двух.
    Порядок объявления задаёт порядок перебора ходов.
    """
    LEFT = (0, -2)
    UP_LEFT = (-1, -1)
    UP_RIGHT = (-1, 1)
    RIGHT = (0, 2)
    DOWN_RIGHT = (1, 1)
    DOWN_LEFT = (1, -1)

    @property
    def dr(self) -> int:
        return self.value[0]

    @property
    def dc(self) -> int:
        return self.value[1]


# Стартовая раскладка: O — колышек, X — пустая лунка, . — прокладка
START_LAYOUT = (
    ". . . . . O . . . . .",
    ". . . . O . O . . . .",
    ". . . O . O . O . . .",
    ". . O . O . O . O . .",
    ". O . O . X . O . O .",
)


def _playable_positions() -> FrozenSet[Position]:
    """Лунки треугольника: ряд r занимает столбцы 5-r, 7-r, ..., 5+r."""
    positions = set()
    for r in range(ROWS):
        for c in range(5 - r, 5 + r + 1, 2):
            positions.add((r, c))
    return frozenset(positions)


PLAYABLE_POSITIONS: FrozenSet[Position] = _playable_positions()
PLAYABLE_COUNT = len(PLAYABLE_POSITIONS)


def is_valid_position(r: int, c: int) -> bool:
    """Проверяет, находится ли позиция в пределах сетки."""
    return 0 <= r < ROWS and 0 <= c < COLS


def index_to_pos(row: int, col: int) -> str:
    """Индекс (row, col) → строка вида '(4, 5)'."""
    return f"({row}, {col})"
