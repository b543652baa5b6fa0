"""
conftest.py

Общие фикстуры для тестов.
"""

import pytest

from core.board import Board, CellState, Coordinate
from solvers.marble import MarbleSolitaireSolver


def _empty_cross() -> Board:
    """Крест без шариков: углы недоступны, все остальные клетки пусты."""
    board = Board.winning()
    board[3, 3] = CellState.OPEN
    return board


@pytest.fixture
def make_board():
    """Фабрика досок: пустой крест с шариками в заданных клетках."""
    def factory(*marbles) -> Board:
        board = _empty_cross()
        for x, y in marbles:
            board[x, y] = CellState.FULL
        return board
    return factory


@pytest.fixture
def two_move_board(make_board):
    """
    Позиция с решением в два хода:
    (4, 5) Up через (4, 4) → (4, 3), затем (5, 3) Left через (4, 3) → центр.
    Ход (4, 4) Down ведёт в тупик.
    """
    return make_board(Coordinate(5, 3), Coordinate(4, 5), Coordinate(4, 4))


@pytest.fixture
def stuck_board(make_board):
    """Два изолированных шарика: ходов нет, позиция не победная."""
    return make_board(Coordinate(3, 0), Coordinate(3, 6))


@pytest.fixture
def solver_for():
    """Создаёт решатель, стоящий в заданной позиции."""
    def factory(board: Board, **kwargs) -> MarbleSolitaireSolver:
        solver = MarbleSolitaireSolver(**kwargs)
        solver.board.restore(board.snapshot())
        return solver
    return factory


@pytest.fixture(scope="session")
def standard_solution():
    """Решение стандартной доски (ищется один раз за сессию)."""
    solver = MarbleSolitaireSolver()
    solution = solver.solve()
    return solution, solver.stats
