"""
core/board.py

Изменяемая доска 5x11 для треугольной головоломки (Cracker Barrel).

Решатель делает ход на месте и откатывает его при неудаче, поэтому
доска мутабельна: apply_jump / undo_jump работают как пара push/pop.
"""

from typing import Iterator, List, NamedTuple, Optional, Tuple

from .utils import Cell, Direction, Position, ROWS, COLS, is_valid_position
from utils.error_handling import InvalidMoveError


class Move(NamedTuple):
    """Ход: колышек в (row, col) прыгает в направлении direction."""
    row: int
    col: int
    direction: Direction

    @property
    def source(self) -> Position:
        return self.row, self.col

    @property
    def jumped(self) -> Position:
        return self.row + self.direction.dr, self.col + self.direction.dc

    @property
    def landing(self) -> Position:
        return self.row + 2 * self.direction.dr, self.col + 2 * self.direction.dc


class TriangleBoard:
    """
    Доска как сетка ROWS x COLS из значений Cell.

    Играбельны только 15 клеток треугольника, остальные — UNUSED.
    """
    __slots__ = ('grid',)

    def __init__(self, grid: List[List[Cell]]):
        self.grid = grid

    def copy(self) -> 'TriangleBoard':
        """Независимая копия доски."""
        return TriangleBoard([list(row) for row in self.grid])

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Обход клеток построчно: (row, col, cell)."""
        for r, row in enumerate(self.grid):
            for c, cell in enumerate(row):
                yield r, c, cell

    def count(self, state: Cell) -> int:
        return sum(row.count(state) for row in self.grid)

    def peg_count(self) -> int:
        """Количество колышков."""
        return self.count(Cell.OCCUPIED)

    def playable_count(self) -> int:
        """Количество лунок (занятых и пустых)."""
        return ROWS * COLS - self.count(Cell.UNUSED)

    def _jump_cells(self, row: int, col: int, direction: Direction) -> Tuple[Position, Position, Position]:
        move = Move(row, col, direction)
        for r, c in (move.source, move.jumped, move.landing):
            if not is_valid_position(r, c):
                raise InvalidMoveError(
                    f"Jump {direction.name} from ({row}, {col}) leaves the grid at ({r}, {c})"
                )
        return move.source, move.jumped, move.landing

    def is_valid_move(self, row: int, col: int, direction: Direction) -> bool:
        """Проверка допустимости хода от источника (row, col)."""
        r1, c1 = row + direction.dr, col + direction.dc
        r2, c2 = row + 2 * direction.dr, col + 2 * direction.dc
        if not (is_valid_position(row, col) and is_valid_position(r2, c2)):
            return False
        return (
            self.grid[row][col] is Cell.OCCUPIED and
            self.grid[r1][c1] is Cell.OCCUPIED and
            self.grid[r2][c2] is Cell.EMPTY
        )

    def apply_jump(self, row: int, col: int, direction: Direction) -> None:
        """
        Прыжок колышка из (row, col) через соседа в пустую лунку.

        Raises:
            InvalidMoveError: ход выходит за сетку или состояние клеток
                не позволяет прыгнуть. Доска при этом не меняется.
        """
        (r0, c0), (r1, c1), (r2, c2) = self._jump_cells(row, col, direction)
        if not self.is_valid_move(row, col, direction):
            raise InvalidMoveError(
                f"Illegal jump {direction.name} from ({row}, {col}): "
                f"{self.grid[r0][c0].name}/{self.grid[r1][c1].name}/{self.grid[r2][c2].name}"
            )
        self.grid[r0][c0] = Cell.EMPTY
        self.grid[r1][c1] = Cell.EMPTY
        self.grid[r2][c2] = Cell.OCCUPIED

    def undo_jump(self, row: int, col: int, direction: Direction) -> None:
        """
        Точная отмена apply_jump с теми же аргументами.

        Вызывать строго в обратном порядке (LIFO): состояние после
        прыжка не перепроверяется.
        """
        (r0, c0), (r1, c1), (r2, c2) = self._jump_cells(row, col, direction)
        self.grid[r0][c0] = Cell.OCCUPIED
        self.grid[r1][c1] = Cell.OCCUPIED
        self.grid[r2][c2] = Cell.EMPTY

    def valid_source(self, empty_row: int, empty_col: int, direction: Direction) -> Optional[Position]:
        """
        Ищет колышек, который может прыгнуть в пустую лунку (empty_row, empty_col).

        Идём от лунки назад против direction на один и два шага.
        Перебирать пустые лунки выгоднее, чем все колышки: их меньше.

        Returns:
            Позиция источника или None, если хода нет.
        """
        r1, c1 = empty_row - direction.dr, empty_col - direction.dc
        r2, c2 = empty_row - 2 * direction.dr, empty_col - 2 * direction.dc
        if not (is_valid_position(r1, c1) and is_valid_position(r2, c2)):
            return None
        if self.grid[r1][c1] is Cell.OCCUPIED and self.grid[r2][c2] is Cell.OCCUPIED:
            return r2, c2
        return None

    def find_moves(self) -> Tuple[int, List[Move]]:
        """
        Все допустимые ходы в порядке перебора.

        Порядок: клетки построчно, внутри лунки — направления в порядке
        объявления Direction. От порядка зависит, какое решение найдётся первым.

        Returns:
            (число пустых лунок, список ходов)
        """
        empty_count = 0
        moves: List[Move] = []
        for r, c, cell in self.cells():
            if cell is not Cell.EMPTY:
                continue
            empty_count += 1
            for direction in Direction:
                source = self.valid_source(r, c, direction)
                if source is not None:
                    moves.append(Move(source[0], source[1], direction))
        return empty_count, moves

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TriangleBoard):
            return NotImplemented
        return self.grid == other.grid

    __hash__ = None

    def __repr__(self) -> str:
        return f"TriangleBoard({self.peg_count()} pegs)"
