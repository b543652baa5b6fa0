"""
core - Ядро марбл-солитера

Базовые структуры данных и утилиты.
"""

from .board import (
    Board, CellState, Coordinate, Direction, Move,
    MOVE_CANDIDATES, START_LAYOUT, WINNING_LAYOUT
)
from .utils import SIZE, CENTER, PEG, HOLE, EMPTY, in_bounds, is_corner

__all__ = [
    'Board', 'CellState', 'Coordinate', 'Direction', 'Move',
    'MOVE_CANDIDATES', 'START_LAYOUT', 'WINNING_LAYOUT',
    'SIZE', 'CENTER', 'PEG', 'HOLE', 'EMPTY', 'in_bounds', 'is_corner',
]
