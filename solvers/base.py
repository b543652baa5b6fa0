"""
solvers/base.py

Базовый класс для решателей марбл-солитера.
"""

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from core.board import Board, Move
from utils.logging import get_logger


@dataclass
class SolverStats:
    """Статистика работы решателя."""
    nodes_visited: int = 0
    nodes_pruned: int = 0
    dead_states: int = 0
    max_depth: int = 0
    time_elapsed: float = 0.0
    solution_length: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def __str__(self) -> str:
        return (
            f"Nodes: {self.nodes_visited}, "
            f"Pruned: {self.nodes_pruned}, "
            f"Dead: {self.dead_states}, "
            f"Depth: {self.max_depth}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


class BaseSolver(ABC):
    """
    Базовый класс решателя.

    Решатель владеет доской: reset() выставляет стартовую позицию,
    solve() ищет решение из текущей.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.stats = SolverStats()
        self.logger = get_logger()
        self._board = Board.standard()

    @property
    def board(self) -> Board:
        """Текущая доска (для отображения)."""
        return self._board

    def reset(self) -> None:
        """Стартовая позиция: углы недоступны, центр пуст, остальное заполнено."""
        self._board.reset()

    @abstractmethod
    def solve(self) -> Optional[List[Move]]:
        """
        Решает головоломку из текущей позиции.

        Returns:
            Список ходов до победной позиции или None
        """
        pass

    def _log(self, message: str) -> None:
        """INFO если verbose=True, иначе DEBUG."""
        if self.verbose:
            self.logger.info(f"[{self.__class__.__name__}] {message}")
        else:
            self.logger.debug(f"[{self.__class__.__name__}] {message}")
