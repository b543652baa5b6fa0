"""
solvers - Решатели марбл-солитера

Экспортирует:
- MarbleSolitaireSolver: перебор с возвратом и мемоизацией тупиков
- ParallelMarbleSolver: тот же перебор, первые ходы по процессам
"""

from .base import BaseSolver, SolverStats
from .marble import MarbleSolitaireSolver
from .parallel import ParallelMarbleSolver

__all__ = [
    'BaseSolver',
    'SolverStats',
    'MarbleSolitaireSolver',
    'ParallelMarbleSolver',
]
