"""Raise-style bridges for the Result system

Construction of pools, jobs and validators happens before any thread
starts, and a bad argument there is a programming error. Those paths raise
``AppErrorException`` instead of returning ``Err``.
"""
from __future__ import annotations

from .types import AppError, Result, T


class AppErrorException(Exception):
    """Exception wrapper for AppError.

    Use this when you need to raise an AppError in code that
    doesn't use the Result monad (constructors, ``validate_or_raise``).
    """

    def __init__(self, error: AppError):
        self.error = error
        super().__init__(str(error))

    @property
    def code(self):
        return self.error.code


def raise_error(error: AppError) -> None:
    """Raise AppError as exception.

    Usage:
        if value is None:
            raise_error(missing_value("FuncJob").error)
    """
    raise AppErrorException(error)


def raise_result(result: Result[T, AppError]) -> T:
    """Return the Ok value, or raise if Result is Err.

    Usage:
        response = raise_result(validator.validate(values))
    """
    if result.is_err():
        raise AppErrorException(result.unwrap_err())
    return result.unwrap()
