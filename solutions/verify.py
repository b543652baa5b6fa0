"""
solutions/verify.py

Проверка решений: воспроизведение ходов на свежей доске.
"""

from typing import List, Optional

from core.board import Board, Move
from solvers.marble import MarbleSolitaireSolver
from utils.error_handling import InvalidMoveError, ValidationError


def replay_moves(moves: List[Move], board: Optional[Board] = None) -> Board:
    """
    Воспроизводит ходы, проверяя каждый перед выполнением.

    Args:
        moves: список ходов
        board: начальная позиция (по умолчанию стартовая)

    Returns:
        Доска после всех ходов

    Raises:
        InvalidMoveError: очередной ход недопустим
    """
    solver = MarbleSolitaireSolver()
    if board is not None:
        solver.board.restore(board.snapshot())

    for index, move in enumerate(moves):
        if not solver.is_move_valid(move):
            raise InvalidMoveError(index, move)
        solver.execute_move(move)

    return solver.board


def check_solution(moves: List[Move], board: Optional[Board] = None) -> Board:
    """
    Как replay_moves, но дополнительно требует победную позицию в конце.

    Raises:
        InvalidMoveError: недопустимый ход
        ValidationError: ходы допустимы, но позиция не победная
    """
    final = replay_moves(moves, board)
    if not final.is_winning():
        raise ValidationError(
            f"После {len(moves)} ходов осталось шариков: {final.marble_count()}"
        )
    return final


def verify_solution(moves: Optional[List[Move]], board: Optional[Board] = None) -> bool:
    """
    Проверяет корректность решения.

    Правила:
    - каждый ход допустим на момент выполнения;
    - после всех ходов остаётся один шарик, в центре.
    """
    if moves is None:
        return False
    try:
        check_solution(moves, board)
    except (InvalidMoveError, ValidationError):
        return False
    return True
