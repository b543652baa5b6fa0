"""
marble_io/visualizer.py

Визуализация доски и решений.
"""

from typing import Any, Dict, List, Optional

from core.board import Board, CellState, Move
from core.utils import SIZE, PEG, HOLE, EMPTY

SYMBOLS = {
    CellState.INVALID: EMPTY,
    CellState.OPEN: HOLE,
    CellState.FULL: PEG,
}


def board_rows(board: Board) -> List[str]:
    """
    Строки цифр 0/1/2, по одной на каждый x (столбец доски).
    Тот же порядок, что у отпечатка доски.
    """
    cells = board.cells
    return [
        ''.join(str(cells[x * SIZE + y]) for y in range(SIZE))
        for x in range(SIZE)
    ]


def board_to_string(board: Board, multiline: bool = False) -> str:
    """
    49-символьное представление доски.

    Args:
        board: доска
        multiline: разбить на 7 строк (по одной на столбец x)

    Returns:
        Строка, которую понимает Board.from_string
    """
    return ('\n' if multiline else '').join(board_rows(board))


def display_board(board: Board) -> str:
    """
    Красиво форматирует доску: x по горизонтали, y по вертикали.

    Args:
        board: доска

    Returns:
        Строка для вывода
    """
    header = "   " + " ".join(str(x) for x in range(SIZE))
    lines = [header]

    for y in range(SIZE):
        row = " ".join(SYMBOLS[board[x, y]] for x in range(SIZE))
        lines.append(f"{y:<2} {row}")

    return "\n".join(lines)


def format_move(move: Move) -> str:
    """(x, y) direction: Up"""
    return f"({move.initial.x}, {move.initial.y}) direction: {move.direction.title}"


def move_to_dict(move: Move) -> Dict[str, Any]:
    """Ход в виде словаря для JSON."""
    return {
        'initial': list(move.initial),
        'jumped': list(move.jumped),
        'final': list(move.final),
        'direction': move.direction.title,
    }


def format_solution(moves: Optional[List[Move]]) -> str:
    """
    Форматирует список ходов для вывода.

    Args:
        moves: список ходов или None

    Returns:
        Форматированная строка
    """
    if moves is None:
        return "❌ Решение не найдено"

    lines = [f"Moves ({len(moves)}):"]
    for move in moves:
        lines.append(format_move(move))

    return "\n".join(lines)
