"""
solvers/marble.py

Перебор с возвратом и запоминанием тупиковых позиций.

Доска меняется на месте: перед перебором ходов из позиции делается
снимок, после каждой неудачной ветки доска восстанавливается из него.
Позиция, все ветки которой исчерпаны без победы, попадает в множество
тупиков и больше не исследуется, какими бы ходами к ней ни пришли.
"""

import time
from typing import List, Optional, Set

from core.board import CellState, Move, MOVE_CANDIDATES
from .base import BaseSolver, SolverStats

FULL = CellState.FULL
OPEN = CellState.OPEN

# Как часто (в узлах) проверяется сигнал остановки
STOP_CHECK_INTERVAL = 1024


class MarbleSolitaireSolver(BaseSolver):
    """
    DFS решатель для английской доски (33 лунки).

    Особенности:
    - Фиксированный порядок перебора: x, y, затем Up, Right, Down, Left
    - Первое найденное решение возвращается без дальнейшего поиска
    - Мемоизация тупиков по полному отпечатку доски
    """

    def __init__(self, verbose: bool = False, stop_event=None):
        """
        Args:
            verbose: выводить ход поиска в лог на уровне INFO
            stop_event: Event (threading или multiprocessing); когда он
                установлен, поиск прекращается и solve() возвращает None
        """
        super().__init__(verbose=verbose)
        self.dead: Set[bytes] = set()
        self.stop_event = stop_event
        self._stopped = False

    def solve(self) -> Optional[List[Move]]:
        """
        Запускает поиск из текущей позиции.

        После успеха доска остаётся в победной позиции, после неудачи
        возвращается в исходную. Для повторного запуска нужен reset().

        Returns:
            Список ходов или None если решения нет
        """
        self.stats = SolverStats()
        self.dead.clear()
        self._stopped = False

        self._log(f"Starting search (marbles={self._board.marble_count()})")
        start = time.perf_counter()
        result = self._solve_step([])
        self.stats.time_elapsed = time.perf_counter() - start
        self.stats.dead_states = len(self.dead)

        if result is not None:
            self.stats.solution_length = len(result)
            self._log(f"Solution found: {len(result)} moves")
        elif self._stopped:
            self._log("Search cancelled")
        else:
            self._log("No solution found")
        self._log(f"Stats: {self.stats}")
        return result

    def _solve_step(self, path: List[Move]) -> Optional[List[Move]]:
        self.stats.nodes_visited += 1
        if len(path) > self.stats.max_depth:
            self.stats.max_depth = len(path)

        if self._should_stop():
            return None

        board = self._board
        key = board.fingerprint()
        if key in self.dead:
            self.stats.nodes_pruned += 1
            return None

        moves = self.get_valid_moves()
        if not moves:
            # Лист: ходов нет, проверяем победу
            return path if board.is_winning() else None

        saved = board.snapshot()
        for move in moves:
            self.execute_move(move)
            result = self._solve_step(path + [move])
            if result is not None:
                return result
            board.restore(saved)
            if self._stopped:
                # Отменённая ветка не доказывает тупик
                return None

        # Все ветки исчерпаны: позиция тупиковая
        self.dead.add(key)
        return None

    def _should_stop(self) -> bool:
        """Проверяет stop_event раз в STOP_CHECK_INTERVAL узлов."""
        if self.stop_event is None or self._stopped:
            return self._stopped
        if (self.stats.nodes_visited - 1) % STOP_CHECK_INTERVAL == 0:
            self._stopped = self.stop_event.is_set()
        return self._stopped

    def get_valid_moves(self) -> List[Move]:
        """Все допустимые ходы из текущей позиции в порядке перебора."""
        cells = self._board.cells
        return [
            move for initial, jumped, final, move in MOVE_CANDIDATES
            if cells[initial] == FULL and cells[jumped] == FULL and cells[final] == OPEN
        ]

    def is_move_valid(self, move: Move) -> bool:
        """
        Проверяет ход на текущей доске: все три клетки в пределах 7x7,
        initial и jumped заполнены, final пуста.
        """
        if not (move.initial.in_bounds() and move.jumped.in_bounds()
                and move.final.in_bounds()):
            return False
        board = self._board
        return (
            board[move.initial] == FULL and
            board[move.jumped] == FULL and
            board[move.final] == OPEN
        )

    def execute_move(self, move: Move) -> None:
        """Выполняет ход БЕЗ проверки допустимости."""
        board = self._board
        board[move.initial] = OPEN
        board[move.jumped] = OPEN
        board[move.final] = FULL

    def execute_moves(self, moves: List[Move]) -> None:
        for move in moves:
            self.execute_move(move)

    def is_winning(self) -> bool:
        """Углы недоступны, центр заполнен, остальные клетки пусты."""
        return self._board.is_winning()

    def fingerprint(self) -> bytes:
        return self._board.fingerprint()
