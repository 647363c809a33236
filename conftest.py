"""
conftest.py

Общие фикстуры для тестов.
"""

import pytest

from peg_io.parser import create_start_board, parse_board
from utils.monitoring import get_monitor


@pytest.fixture
def start_board():
    """Стартовая доска: 14 колышков, лунка в (4, 5)."""
    return create_start_board()


@pytest.fixture
def one_move_board():
    """Два колышка в нижнем ряду и лунка за ними: ровно один ход."""
    return parse_board([
        ". . . . . X . . . . .",
        ". . . . X . X . . . .",
        ". . . X . X . X . . .",
        ". . X . X . X . X . .",
        ". O . O . X . X . X .",
    ])


@pytest.fixture
def solved_board():
    """Один колышек — доска уже решена."""
    return parse_board([
        ". . . . . X . . . . .",
        ". . . . X . X . . . .",
        ". . . X . O . X . . .",
        ". . X . X . X . X . .",
        ". X . X . X . X . X .",
    ])


@pytest.fixture
def stuck_board():
    """Два изолированных колышка: ходов нет."""
    return parse_board([
        ". . . . . O . . . . .",
        ". . . . X . X . . . .",
        ". . . X . X . X . . .",
        ". . X . X . X . X . .",
        ". O . X . X . X . X .",
    ])


@pytest.fixture
def fresh_monitor():
    """Глобальный монитор, очищенный до и после теста."""
    monitor = get_monitor()
    monitor.reset()
    yield monitor
    monitor.reset()
