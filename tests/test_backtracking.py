"""
tests/test_backtracking.py

Тесты для BacktrackingSolver.
"""

import logging

import pytest

from core.board import Move
from core.utils import Cell, Direction
from peg_io.parser import parse_board
from solutions.verify import verify_solution
from solvers.backtracking import BacktrackingSolver
from utils.error_handling import InvalidBoardError


def test_solves_start_board(start_board):
    """Тест: стартовая доска решается ровно за 13 ходов."""
    solver = BacktrackingSolver(verbose=False)

    solution = solver.solve(start_board)

    assert solution is not None, "Решение должно быть найдено"
    assert len(solution) == 13, "14 колышков → 1 за 13 прыжков"
    assert verify_solution(start_board, solution), "Решение должно быть корректным"


def test_solve_does_not_mutate_board(start_board):
    """Тест: решатель работает на копии."""
    snapshot = start_board.copy()

    BacktrackingSolver().solve(start_board)

    assert start_board == snapshot


def test_solution_leaves_one_peg(start_board):
    """Тест: проигрывание решения оставляет один колышек."""
    solution = BacktrackingSolver().solve(start_board)

    final_board = start_board.copy()
    for move in solution:
        final_board.apply_jump(*move)

    assert final_board.peg_count() == 1, "Должен остаться один колышек"
    assert final_board.count(Cell.EMPTY) == 14


def test_deterministic(start_board):
    """Тест: повторный запуск даёт то же решение."""
    first = BacktrackingSolver().solve(start_board)
    second = BacktrackingSolver().solve(start_board)

    assert first == second


def test_single_move(one_move_board):
    """Тест: единственный ход."""
    solution = BacktrackingSolver().solve(one_move_board)

    assert solution == [Move(4, 1, Direction.RIGHT)]


def test_already_solved(solved_board):
    """Тест: доска уже решена — пустой список ходов, а не None."""
    solver = BacktrackingSolver()

    solution = solver.solve(solved_board)

    assert solution == [], "Решение должно быть пустым (уже решено)"
    assert solver.stats.nodes_visited == 1


def test_unsolvable(stuck_board):
    """Тест: ходов нет, колышков больше одного — None."""
    solver = BacktrackingSolver()

    assert solver.solve(stuck_board) is None
    assert solver.stats.nodes_visited == 1
    assert solver.stats.solution_length == 0


def test_dead_end_after_moves():
    """Тест: ходы есть, но все ведут в тупик — None, история пуста."""
    board = parse_board([
        ". . . . . X . . . . .",
        ". . . . X . X . . . .",
        ". . . X . X . X . . .",
        ". . X . X . X . X . .",
        ". O . O . X . X . O .",
    ])
    solver = BacktrackingSolver()

    assert solver.solve(board) is None
    assert solver.stats.backtracks == 1


def test_search_sentinel_keeps_history_in_order(start_board):
    """Тест: search без хода стартует с пустой истории и копит ходы по порядку."""
    solver = BacktrackingSolver()
    board = start_board.copy()
    history = []

    assert solver.search(board, history) is True
    assert len(history) == 13
    assert history[0].landing == (4, 5), "Первый ход должен прийти в стартовую лунку"
    # Доска остаётся в финальном состоянии
    assert board.peg_count() == 1


def test_stats(start_board):
    """Тест: проверка статистики решателя."""
    solver = BacktrackingSolver()

    solution = solver.solve(start_board)

    assert solver.stats.nodes_visited > 13
    assert solver.stats.max_depth == 13
    assert solver.stats.solution_length == len(solution)
    assert "Nodes:" in str(solver.stats)


def test_rejects_board_without_pegs():
    """Тест: доска без колышков невалидна."""
    board = parse_board([
        ". . . . . X . . . . .",
        ". . . . X . X . . . .",
        ". . . X . X . X . . .",
        ". . X . X . X . X . .",
        ". X . X . X . X . X .",
    ])

    with pytest.raises(InvalidBoardError):
        BacktrackingSolver().solve(board)


def test_verbose_logging(start_board, caplog):
    """Тест: в verbose-режиме итог пишется в лог на уровне INFO."""
    with caplog.at_level(logging.INFO, logger="peg_solver"):
        BacktrackingSolver(verbose=True).solve(start_board)

    assert "Solution found: 13 moves" in caplog.text


def test_unsolvable_logs_warning(stuck_board, caplog):
    """Тест: отсутствие решения пишется в лог как предупреждение."""
    with caplog.at_level(logging.WARNING, logger="peg_solver"):
        assert BacktrackingSolver().solve(stuck_board) is None

    assert "No solution found" in caplog.text


def test_search_updates_monitor_counters(start_board, fresh_monitor):
    """Тест: счётчики монитора совпадают со статистикой решателя."""
    solver = BacktrackingSolver()

    solver.solve(start_board)

    counters = fresh_monitor.get_stats()['counters']
    assert counters['nodes'] == solver.stats.nodes_visited
    assert counters.get('backtracks', 0) == solver.stats.backtracks
