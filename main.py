#!/usr/bin/env python3
"""
main.py

Точка входа для решателя треугольной доски (Cracker Barrel).

Использование:
    python main.py                 # решить стартовую доску и вывести кадры
    python main.py --moves         # дополнительно вывести список ходов
    python main.py --stats -v      # статистика и подробный лог в stderr
"""

import sys
import argparse
import logging

from peg_io import create_start_board, render_solution, format_moves
from solutions.verify import verify_solution
from solvers import BacktrackingSolver
from utils.error_handling import ValidationError
from utils.logging import get_logger, setup_file_logging, remove_file_logging
from utils.monitoring import get_monitor


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Triangle (Cracker Barrel) Peg Solver',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  python main.py                 # кадры решения
  python main.py --moves         # кадры и список ходов
  python main.py --stats -v      # статистика поиска
        """
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Подробный лог решателя в stderr'
    )
    parser.add_argument(
        '--log-file', metavar='PATH',
        help='Дополнительно писать лог в файл'
    )
    parser.add_argument(
        '--stats', action='store_true',
        help='Вывести статистику поиска после решения'
    )
    parser.add_argument(
        '--moves', action='store_true',
        help='Вывести список ходов после кадров'
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logger = get_logger()
    previous_level = logger.logger.level
    if args.verbose:
        logger.set_level(logging.INFO)
    file_handler = setup_file_logging(args.log_file) if args.log_file else None

    try:
        return run(args)
    finally:
        if file_handler is not None:
            remove_file_logging(file_handler)
        logger.set_level(previous_level)


def run(args) -> int:
    logger = get_logger()
    board = create_start_board()
    # Итоговые строки решателя пишутся на INFO, чтобы попасть в файл лога
    solver = BacktrackingSolver(verbose=args.verbose or bool(args.log_file))
    solution = solver.solve(board)

    if solution is not None and not verify_solution(board, solution):
        logger.error(f"Invalid solution from {solver.__class__.__name__}: {solution}")
        raise ValidationError("Solver returned an invalid move sequence")

    print(render_solution(board, solution))

    if args.moves and solution:
        print()
        print("\n".join(format_moves(solution)))

    if args.stats:
        print()
        print(f"Stats: {solver.stats}")
        print(get_monitor().format_stats())

    # "Решение не найдено" — не ошибка процесса
    return 0


if __name__ == "__main__":
    sys.exit(main())
