"""
solutions - Проверка найденных решений.
"""

from .verify import replay_moves, check_solution, verify_solution

__all__ = [
    'replay_moves',
    'check_solution',
    'verify_solution',
]
