"""
utils/monitoring.py

Замер времени операций (таймер вокруг solve()).
"""

import time
from collections import defaultdict
from functools import wraps
from typing import Dict, List, Optional

from .logging import get_logger


class PerformanceMonitor:
    """Монитор производительности."""

    def __init__(self):
        self.metrics: Dict[str, List[float]] = defaultdict(list)
        self.logger = get_logger()

    def record_time(self, operation: str, elapsed: float):
        """
        Записывает время выполнения операции.

        Args:
            operation: имя операции
            elapsed: время в секундах
        """
        self.metrics[operation].append(elapsed)
        self.logger.debug(f"{operation}: {elapsed:.3f}s")

    def last(self, operation: str) -> float:
        """Время последнего замера операции (0.0 если замеров не было)."""
        times = self.metrics.get(operation)
        return times[-1] if times else 0.0


# Глобальный монитор
_monitor: Optional[PerformanceMonitor] = None


def get_monitor() -> PerformanceMonitor:
    """Возвращает глобальный монитор."""
    global _monitor
    if _monitor is None:
        _monitor = PerformanceMonitor()
    return _monitor


def monitor_time(operation: str):
    """
    Декоратор для мониторинга времени выполнения.

    Usage:
        @monitor_time('solve')
        def run():
            ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            monitor = get_monitor()
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception:
                monitor.record_time(f"{operation}_error", time.perf_counter() - start)
                raise
            monitor.record_time(operation, time.perf_counter() - start)
            return result
        return wrapper
    return decorator
