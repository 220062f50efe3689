"""Error Builders

Ergonomic constructors for the engine's typed errors. Each builder returns
``Err[AppError]`` so predicates can ``return type_mismatch(...)`` directly;
call sites that raise take ``.error`` off the result.
"""
from typing import Any

from .types import AppError, ErrorCode, ErrorContext, Err


# =============================================================================
# Validation Errors (E2xxx)
# =============================================================================

def validation_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2000_VALIDATION_GENERIC,
    field: str | None = None,
    origin: str = "",
    cause: Exception | None = None,
    **metadata,
) -> Err[AppError]:
    """Create validation error."""
    meta = {"field": field, **metadata}
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
        cause=cause,
    ))


def type_mismatch(value: Any, desired_type: str, origin: str = "") -> Err[AppError]:
    return validation_error(
        f"{value!r} is of type {type(value).__name__}, not {desired_type}",
        code=ErrorCode.E2004_INVALID_TYPE,
        origin=origin,
        desired_type=desired_type,
        actual_type=type(value).__name__,
    )


def invalid_type(message: str, origin: str = "", **metadata) -> Err[AppError]:
    return validation_error(
        message,
        code=ErrorCode.E2004_INVALID_TYPE,
        origin=origin,
        **metadata,
    )


def invalid_format(
    value: str, expected: str, cause: Exception | None = None, origin: str = ""
) -> Err[AppError]:
    return validation_error(
        f"Invalid format: expected {expected}, got {value!r}",
        code=ErrorCode.E2002_INVALID_FORMAT,
        origin=origin,
        cause=cause,
        expected=expected,
    )


def missing_value(subject: str, origin: str = "") -> Err[AppError]:
    return validation_error(
        f"Must pass a valid value to {subject}",
        code=ErrorCode.E2006_MISSING_VALUE,
        origin=origin,
        subject=subject,
    )


# =============================================================================
# Internal Errors (E9xxx)
# =============================================================================

def internal_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E9000_INTERNAL_GENERIC,
    origin: str = "",
    cause: Exception | None = None,
    **metadata,
) -> Err[AppError]:
    """Create internal error."""
    return Err(AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata=metadata,
        cause=cause,
    ))


def invalid_worker_count(value: Any, origin: str = "") -> Err[AppError]:
    return internal_error(
        f"Worker count must be an int, got {type(value).__name__}",
        code=ErrorCode.E9004_INVALID_WORKER_COUNT,
        origin=origin,
    )


def invalid_job_collection(value: Any, origin: str = "") -> Err[AppError]:
    return internal_error(
        f"Jobs must be a list or tuple of FuncJob/RuleJob, got {type(value).__name__}",
        code=ErrorCode.E9005_INVALID_JOB_COLLECTION,
        origin=origin,
    )


def pool_already_run(origin: str = "") -> Err[AppError]:
    return internal_error(
        "Worker pool has already run; pools are single-use",
        code=ErrorCode.E9006_POOL_ALREADY_RUN,
        origin=origin,
    )


def nil_validator(origin: str = "") -> Err[AppError]:
    return internal_error(
        "Validator must not be None",
        code=ErrorCode.E9007_NIL_VALIDATOR,
        origin=origin,
    )


def unexpected_value(value: Any, expected: str, origin: str = "") -> Err[AppError]:
    return internal_error(
        f"Expected {expected}, got {type(value).__name__}",
        code=ErrorCode.E9003_ASSERTION_FAILED,
        origin=origin,
    )
