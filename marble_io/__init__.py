"""
marble_io - Вывод для марбл-солитера

Экспортирует:
- Строковое представление доски
- Визуализация доски
- Форматирование ходов и решения
"""

from .visualizer import (
    board_to_string, board_rows, display_board,
    format_move, format_solution, move_to_dict
)

__all__ = [
    'board_to_string',
    'board_rows',
    'display_board',
    'format_move',
    'format_solution',
    'move_to_dict',
]
