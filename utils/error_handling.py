"""
utils/error_handling.py

Исключения решателя и проверка доски.

"Решение не найдено" — нормальный результат, а не ошибка:
для него исключения нет.
"""


class SolverError(Exception):
    """Базовое исключение для решателей."""
    pass


class InvalidBoardError(SolverError):
    """Ошибка невалидной доски."""
    pass


class InvalidMoveError(SolverError):
    """
    Прыжок за пределы сетки или из неподходящего состояния.

    Это ошибка программиста (вызывающий код нарушил контракт),
    поэтому её не перехватывают.
    """
    pass


class ValidationError(SolverError):
    """Ошибка валидации решения."""
    pass


def validate_board(board) -> bool:
    """
    Валидирует доску.

    Args:
        board: доска для валидации (TriangleBoard)

    Returns:
        True если доска валидна

    Raises:
        InvalidBoardError: если доска невалидна
    """
    # core импортирует этот модуль, поэтому импорт локальный
    from core.utils import Cell, ROWS, COLS, PLAYABLE_POSITIONS

    if board is None:
        raise InvalidBoardError("Board must not be None")

    if len(board.grid) != ROWS or any(len(row) != COLS for row in board.grid):
        raise InvalidBoardError(f"Board must be {ROWS}x{COLS}")

    for r in range(ROWS):
        for c in range(COLS):
            cell = board.grid[r][c]
            if not isinstance(cell, Cell):
                raise InvalidBoardError(f"Unknown cell value {cell!r} at ({r}, {c})")
            playable = (r, c) in PLAYABLE_POSITIONS
            if playable and cell is Cell.UNUSED:
                raise InvalidBoardError(f"Playable cell ({r}, {c}) is marked unused")
            if not playable and cell is not Cell.UNUSED:
                raise InvalidBoardError(f"Padding cell ({r}, {c}) must be unused")

    if board.peg_count() < 1:
        raise InvalidBoardError("Board must hold at least one peg")

    return True
