#!/usr/bin/env python3
"""
main.py

Точка входа для Marble Solitaire Solver.

Использование:
    python main.py                   # решить стандартную доску
    python main.py --parallel        # первые ходы по процессам
    python main.py --no-pause -v     # без ожидания Enter, подробный лог
"""

import argparse
import logging
import sys

from marble_io import display_board, format_solution
from solvers import MarbleSolitaireSolver, ParallelMarbleSolver
from utils.error_handling import safe_solve
from utils.logging import get_logger, setup_file_logging
from utils.monitoring import get_monitor, monitor_time


BANNER = """\
MarbleSolitaireSolver - a very simple program that finds a solution to the
traditional marble solitaire game."""

INSTRUCTIONS = """\
Each move consists of a coordinate, which specifies the location
of the marble to move, and a direction, which specifies the direction
to move the marble.

Coordinates are in the form (x, y), where x is the horizontal axis,
and y is the vertical axis.

A value of 0 for x indicates the far-left side of the board,
and a value of 0 for y indicates the top of the board.
Likewise, a value of 6 for x is the far-right, and a value of
6 for y is the bottom."""


def build_solver(args):
    """Создаёт решатель по аргументам командной строки."""
    if args.parallel:
        return ParallelMarbleSolver(num_workers=args.workers, verbose=args.verbose)
    return MarbleSolitaireSolver(verbose=args.verbose)


@monitor_time('solve')
def run_solver(solver):
    return safe_solve(solver)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Marble Solitaire Solver',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  python main.py                     # стандартная доска
  python main.py --parallel -w 4     # 4 процесса
  python main.py --log-file run.log  # лог в файл
        """
    )
    parser.add_argument(
        '--parallel', '-p', action='store_true',
        help='Распределить первые ходы между процессами'
    )
    parser.add_argument(
        '--workers', '-w', type=int, default=None,
        help='Количество процессов для --parallel (default: число CPU)'
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Подробный лог решателя'
    )
    parser.add_argument(
        '--log-file', default=None,
        help='Дополнительно писать лог в файл'
    )
    parser.add_argument(
        '--no-pause', action='store_true',
        help='Не ждать Enter перед запуском'
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    get_logger().set_level(level)
    if args.log_file:
        setup_file_logging(args.log_file, level)

    print("=" * 60)
    print(BANNER)
    print("=" * 60)

    solver = build_solver(args)
    print()
    print(display_board(solver.board))
    print()

    if not args.no_pause:
        input("Press Enter to begin...")

    moves = run_solver(solver)
    elapsed = get_monitor().last('solve')

    print()
    print(f"Time to find a solution: {elapsed * 1000:.0f} ms")
    print()

    if moves is None:
        print(format_solution(moves))
        return 1

    print(INSTRUCTIONS)
    print()
    print(format_solution(moves))
    return 0


if __name__ == "__main__":
    sys.exit(main())
