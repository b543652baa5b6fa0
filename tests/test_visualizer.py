"""
tests/test_visualizer.py

Тесты для вывода доски и ходов.
"""

from core.board import Board, Coordinate, Direction, Move
from core.utils import PEG, HOLE, EMPTY
from marble_io import (
    board_rows, board_to_string, display_board,
    format_move, format_solution, move_to_dict
)


def test_board_to_string_standard():
    text = board_to_string(Board.standard())

    assert len(text) == 49
    assert board_rows(Board.standard()) == [
        "0022200",
        "0022200",
        "2222222",
        "2221222",
        "2222222",
        "0022200",
        "0022200",
    ]
    assert text == "".join(board_rows(Board.standard()))


def test_board_to_string_multiline():
    lines = board_to_string(Board.winning(), multiline=True).split("\n")

    assert len(lines) == 7
    assert lines[3] == "1112111"


def test_display_board_symbols():
    lines = display_board(Board.standard()).split("\n")

    assert lines[0] == "   0 1 2 3 4 5 6"
    assert lines[1] == f"0  {EMPTY} {EMPTY} {PEG} {PEG} {PEG} {EMPTY} {EMPTY}"
    assert lines[4].split()[4] == HOLE


def test_format_move():
    move = Move.build(Coordinate(5, 3), Direction.LEFT)

    assert format_move(move) == "(5, 3) direction: Left"
    assert move_to_dict(move) == {
        'initial': [5, 3],
        'jumped': [4, 3],
        'final': [3, 3],
        'direction': 'Left',
    }


def test_format_solution():
    moves = [
        Move.build(Coordinate(4, 5), Direction.UP),
        Move.build(Coordinate(5, 3), Direction.LEFT),
    ]

    assert format_solution(moves) == (
        "Moves (2):\n"
        "(4, 5) direction: Up\n"
        "(5, 3) direction: Left"
    )
    assert "не найдено" in format_solution(None)
