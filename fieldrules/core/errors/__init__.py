"""Monadic Error Handling System

Result type plus typed application errors.

Key components:
- Result[T, E]: Monadic container for success/failure
- AppError: Base error type with full context
- ErrorCode: Hierarchical error code taxonomy
- Builder functions: Ergonomic error construction
- AppErrorException: Raise-style bridge for constructors

Usage:
    from fieldrules.core.errors import Ok, Err, Result, AppError, type_mismatch

    def is_even(value) -> Result[Verdict, AppError]:
        if not isinstance(value, int):
            return type_mismatch(value, "int")
        return Ok(Verdict.ok() if value % 2 == 0 else Verdict.fail("must be even"))

    match validator.validate(values):
        case Ok(response):
            print(response.errors)
        case Err(error):
            log.error(error.message, code=error.code.name)
"""
from .types import (
    # Core types
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
    # Constructors
    from_exception,
    try_result,
)

from .builders import (
    # Validation (E2xxx)
    validation_error,
    type_mismatch,
    invalid_type,
    invalid_format,
    missing_value,
    # Internal (E9xxx)
    internal_error,
    invalid_worker_count,
    invalid_job_collection,
    pool_already_run,
    nil_validator,
    unexpected_value,
)

from .handlers import (
    AppErrorException,
    raise_error,
    raise_result,
)

__all__ = [
    # Core types
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    # Constructors
    "from_exception",
    "try_result",
    # Validation (E2xxx)
    "validation_error",
    "type_mismatch",
    "invalid_type",
    "invalid_format",
    "missing_value",
    # Internal (E9xxx)
    "internal_error",
    "invalid_worker_count",
    "invalid_job_collection",
    "pool_already_run",
    "nil_validator",
    "unexpected_value",
    # Handlers
    "AppErrorException",
    "raise_error",
    "raise_result",
]
