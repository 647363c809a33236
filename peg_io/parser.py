"""
peg_io/parser.py

Построение доски из текстовой картинки.
"""

from typing import Iterable, List, Union

from core.board import TriangleBoard
from core.utils import Cell, ROWS, COLS, START_LAYOUT
from utils.error_handling import InvalidBoardError

SYMBOLS = {
    'O': Cell.OCCUPIED,
    'X': Cell.EMPTY,
    '.': Cell.UNUSED,
    ' ': Cell.UNUSED,
}


def _parse_row(line: str, row: int) -> List[Cell]:
    # Компактная запись, как в выводе render_board: без точек и не длиннее COLS.
    # Пробелы в конце строки могли быть обрезаны.
    # Иначе клетки разделены пробелами: ". . O . ."
    if len(line) == COLS or (len(line) < COLS and '.' not in line):
        tokens = list(line.ljust(COLS))
    else:
        tokens = line.split()
    if len(tokens) != COLS:
        raise InvalidBoardError(
            f"Row {row}: expected {COLS} cells, got {len(tokens)}"
        )
    cells = []
    for col, token in enumerate(tokens):
        cell = SYMBOLS.get(token.upper())
        if cell is None:
            raise InvalidBoardError(f"Row {row}, col {col}: unknown symbol {token!r}")
        cells.append(cell)
    return cells


def parse_board(text: Union[str, Iterable[str]]) -> TriangleBoard:
    """
    Парсит доску из ROWS строк.

    Символы: O — колышек, X — пустая лунка, '.' или пробел — прокладка.

    Args:
        text: многострочная строка или последовательность строк

    Returns:
        TriangleBoard

    Raises:
        InvalidBoardError: неверное число строк/столбцов или неизвестный символ
    """
    lines = text.splitlines() if isinstance(text, str) else list(text)
    lines = [line.rstrip('\n') for line in lines if line.strip()]
    if len(lines) != ROWS:
        raise InvalidBoardError(f"Expected {ROWS} rows, got {len(lines)}")
    return TriangleBoard([_parse_row(line, r) for r, line in enumerate(lines)])


def create_start_board() -> TriangleBoard:
    """
    Стартовая доска: 14 колышков, пустая лунка в центре нижнего ряда (4, 5).
    """
    return parse_board(START_LAYOUT)
