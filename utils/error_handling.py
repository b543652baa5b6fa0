"""
utils/error_handling.py

Исключения и безопасный запуск решателя.
"""

from typing import Any

from .logging import get_logger


class SolverError(Exception):
    """Базовое исключение для решателей."""
    pass


class InvalidBoardError(SolverError):
    """Ошибка невалидной доски (неверная строка, нарушена форма креста)."""
    pass


class InvalidMoveError(SolverError):
    """Недопустимый ход при воспроизведении решения."""

    def __init__(self, index: int, move: Any):
        self.index = index
        self.move = move
        super().__init__(f"Ход #{index + 1} недопустим: {move}")


class ValidationError(SolverError):
    """Ошибка валидации решения."""
    pass


def safe_solve(solver, default: Any = None):
    """
    Выполнение solve() с переводом ошибок в чистый отказ.

    Отсутствие решения — это None от самого решателя, а не исключение.
    Здесь перехватываются только ошибки решателя и исчерпание ресурсов
    (глубина рекурсии, память).

    Args:
        solver: решатель с методом solve()
        default: значение при ошибке

    Returns:
        Решение, None или default
    """
    logger = get_logger()
    try:
        return solver.solve()
    except SolverError as e:
        logger.error(f"Ошибка решателя {solver.__class__.__name__}: {e}")
        return default
    except (RecursionError, MemoryError) as e:
        logger.error(
            f"Исчерпаны ресурсы в {solver.__class__.__name__}: {e!r}",
            exc_info=True
        )
        return default
