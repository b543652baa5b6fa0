"""
tests/test_parallel.py

Тесты для ParallelMarbleSolver.
"""

import multiprocessing

from core.board import Board
from solutions.verify import verify_solution
from solvers.parallel import ParallelMarbleSolver


def _parallel_for(board: Board) -> ParallelMarbleSolver:
    solver = ParallelMarbleSolver(num_workers=2)
    solver.board.restore(board.snapshot())
    return solver


def test_parallel_finds_valid_solution(two_move_board):
    solver = _parallel_for(two_move_board)

    solution = solver.solve()

    assert solution is not None
    assert len(solution) == 2
    assert verify_solution(solution, two_move_board)
    assert solver.stats.solution_length == 2


def test_parallel_leaves_board_unchanged(two_move_board):
    solver = _parallel_for(two_move_board)
    solver.solve()

    assert solver.board == two_move_board


def test_parallel_stuck_position(stuck_board):
    assert _parallel_for(stuck_board).solve() is None


def test_parallel_no_win_after_moves(make_board):
    assert _parallel_for(make_board((0, 3), (1, 3))).solve() is None


def test_parallel_already_winning():
    assert _parallel_for(Board.winning()).solve() == []


def test_parallel_default_workers():
    assert ParallelMarbleSolver().num_workers >= 1


def test_parallel_standard_board_stops_workers():
    """После первого решения все процессы-работники завершены."""
    solver = ParallelMarbleSolver(num_workers=4)

    solution = solver.solve()

    assert solution is not None
    assert len(solution) == 31
    assert verify_solution(solution)
    assert multiprocessing.active_children() == [], "Работники должны быть остановлены"


def test_parallel_small_board_no_live_workers(two_move_board):
    _parallel_for(two_move_board).solve()

    assert multiprocessing.active_children() == []
