"""
tests/test_error_handling.py

Тесты для safe_solve: ошибки решателя превращаются в чистый отказ.
"""

import logging

import pytest

from utils.error_handling import InvalidBoardError, SolverError, safe_solve
from utils.logging import LOGGER_NAME


class _FailingSolver:
    """Решатель, solve() которого бросает заданное исключение."""

    def __init__(self, error: BaseException):
        self.error = error

    def solve(self):
        raise self.error


@pytest.mark.parametrize("error", [
    SolverError("сломано"),
    InvalidBoardError("плохая доска"),
    RecursionError("maximum recursion depth exceeded"),
    MemoryError(),
])
def test_safe_solve_returns_default(caplog, error):
    caplog.set_level(logging.ERROR, logger=LOGGER_NAME)

    result = safe_solve(_FailingSolver(error), default="отказ")

    assert result == "отказ"
    records = [r for r in caplog.records if r.name == LOGGER_NAME]
    assert len(records) == 1
    assert records[0].levelno == logging.ERROR
    assert "_FailingSolver" in records[0].getMessage()


def test_safe_solve_resource_errors_logged_with_traceback(caplog):
    caplog.set_level(logging.ERROR, logger=LOGGER_NAME)

    assert safe_solve(_FailingSolver(RecursionError("deep"))) is None

    record = next(r for r in caplog.records if r.name == LOGGER_NAME)
    assert record.exc_info is not None


def test_safe_solve_passes_result_through(two_move_board, solver_for):
    solution = safe_solve(solver_for(two_move_board))

    assert len(solution) == 2


def test_safe_solve_propagates_other_errors():
    """Прочие исключения не глотаются."""
    with pytest.raises(ValueError):
        safe_solve(_FailingSolver(ValueError("bug")))
