"""
solvers/parallel.py

Parallel DFS — первые ходы распределяются между процессами.
"""

import multiprocessing
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import List, Optional, Tuple

from core.board import Move
from .base import BaseSolver, SolverStats
from .marble import MarbleSolitaireSolver

# Сигнал остановки в процессе-работнике (выставляется initializer'ом пула)
_stop_event = None


def _init_worker(stop_event) -> None:
    global _stop_event
    _stop_event = stop_event


def _solve_subtree(args: Tuple[bytes, Move]) -> Optional[List[Move]]:
    """Решает поддерево после первого хода (для запуска в процессе)."""
    cells, first_move = args

    # Собственная копия доски и собственное множество тупиков
    solver = MarbleSolitaireSolver(verbose=False, stop_event=_stop_event)
    solver.board.restore(cells)
    solver.execute_move(first_move)

    result = solver.solve()
    if result is not None:
        return [first_move] + result
    return None


class ParallelMarbleSolver(BaseSolver):
    """
    Параллельный DFS решатель.

    Каждый процесс получает копию доски и свой набор тупиков, поэтому
    общего изменяемого состояния нет. Побеждает первое найденное решение:
    после него выставляется общий Event, работники прекращают поиск,
    и solve() возвращается только после их завершения.
    Собственная доска решателя не меняется.
    """

    def __init__(self, num_workers: Optional[int] = None, verbose: bool = False):
        super().__init__(verbose=verbose)
        self.num_workers = num_workers or multiprocessing.cpu_count()

    def solve(self) -> Optional[List[Move]]:
        self.stats = SolverStats()
        start = time.perf_counter()
        try:
            result = self._solve_parallel()
        finally:
            self.stats.time_elapsed = time.perf_counter() - start

        if result is not None:
            self.stats.solution_length = len(result)
            self._log(f"Found! {self.stats}")
        else:
            self._log(f"No solution. {self.stats}")
        return result

    def _solve_parallel(self) -> Optional[List[Move]]:
        probe = MarbleSolitaireSolver()
        probe.board.restore(self._board.snapshot())
        moves = probe.get_valid_moves()
        if not moves:
            return [] if probe.is_winning() else None

        self._log(f"Starting Parallel DFS (workers={self.num_workers}, moves={len(moves)})")

        cells = self._board.snapshot()
        tasks = [(cells, move) for move in moves]

        context = multiprocessing.get_context()
        stop_event = context.Event()
        executor = ProcessPoolExecutor(
            max_workers=min(self.num_workers, len(tasks)),
            mp_context=context,
            initializer=_init_worker,
            initargs=(stop_event,),
        )
        try:
            futures = [executor.submit(_solve_subtree, task) for task in tasks]
            for future in as_completed(futures):
                self.stats.nodes_visited += 1
                result = future.result()
                if result is not None:
                    return result
        finally:
            # Останавливаем выполняющиеся задачи, отменяем ожидающие
            # и дожидаемся завершения процессов
            stop_event.set()
            executor.shutdown(wait=True, cancel_futures=True)
        return None
