"""
tests/test_verify.py

Тесты для проверки решений.
"""

import pytest

from core.board import Coordinate, Direction, Move
from solutions.verify import check_solution, replay_moves, verify_solution
from utils.error_handling import InvalidMoveError, ValidationError


def test_replay_valid_prefix():
    moves = [Move.build(Coordinate(3, 1), Direction.DOWN)]

    board = replay_moves(moves)

    assert board.marble_count() == 31


def test_replay_reports_first_illegal_move():
    moves = [
        Move.build(Coordinate(3, 1), Direction.DOWN),
        # (3, 1) теперь пуста
        Move.build(Coordinate(3, 1), Direction.DOWN),
    ]

    with pytest.raises(InvalidMoveError) as exc_info:
        replay_moves(moves)

    assert exc_info.value.index == 1
    assert exc_info.value.move == moves[1]


def test_replay_rejects_out_of_bounds():
    move = Move(Coordinate(3, 1), Coordinate(3, 0), Coordinate(3, -1), Direction.UP)

    with pytest.raises(InvalidMoveError):
        replay_moves([move])


def test_check_solution_requires_win():
    moves = [Move.build(Coordinate(3, 1), Direction.DOWN)]

    with pytest.raises(ValidationError):
        check_solution(moves)
    assert verify_solution(moves) is False


def test_verify_solution_none():
    assert verify_solution(None) is False


def test_verify_given_board(two_move_board):
    moves = [
        Move.build(Coordinate(4, 5), Direction.UP),
        Move.build(Coordinate(5, 3), Direction.LEFT),
    ]

    assert verify_solution(moves, two_move_board)
    # На стартовой доске те же ходы недопустимы
    assert not verify_solution(moves)
