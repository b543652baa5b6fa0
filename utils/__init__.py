"""
utils - Логирование, обработка ошибок, замер времени.
"""

from .logging import get_logger, setup_file_logging, SolverLogger
from .error_handling import (
    SolverError, InvalidBoardError, InvalidMoveError, ValidationError,
    safe_solve
)
from .monitoring import PerformanceMonitor, get_monitor, monitor_time

__all__ = [
    'get_logger', 'setup_file_logging', 'SolverLogger',
    'SolverError', 'InvalidBoardError', 'InvalidMoveError', 'ValidationError',
    'safe_solve',
    'PerformanceMonitor', 'get_monitor', 'monitor_time',
]
