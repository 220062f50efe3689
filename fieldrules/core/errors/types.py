"""Monadic Error Handling Types

Result/Either types used for every operation that can fail at run time.
Predicates, transformers, rules and the validator all return
``Result[T, AppError]`` instead of raising, so a hard error travels back to
the caller as a value and can be inspected after a worker pool has joined.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Generic, NoReturn, TypeVar, Union, final
from uuid import uuid4

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound="AppError")


class ErrorCode(Enum):
    """Hierarchical error code taxonomy.

    E2xxx: Validation errors (bad input handed to a predicate or job)
    E9xxx: Internal errors (misuse of the engine, unexpected faults)
    """
    # Validation (E2xxx)
    E2000_VALIDATION_GENERIC = 2000
    E2002_INVALID_FORMAT = 2002
    E2004_INVALID_TYPE = 2004
    E2006_MISSING_VALUE = 2006

    # Internal (E9xxx)
    E9000_INTERNAL_GENERIC = 9000
    E9001_UNEXPECTED_ERROR = 9001
    E9003_ASSERTION_FAILED = 9003
    E9004_INVALID_WORKER_COUNT = 9004
    E9005_INVALID_JOB_COLLECTION = 9005
    E9006_POOL_ALREADY_RUN = 9006
    E9007_NIL_VALIDATOR = 9007

    @property
    def category(self) -> str:
        """Human-readable error category."""
        if 2000 <= self.value < 3000:
            return "validation"
        return "internal"


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Immutable context for error tracing and debugging."""
    correlation_id: str = field(default_factory=lambda: str(uuid4())[:8])
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    origin: str = ""


@dataclass(frozen=True, slots=True)
class AppError:
    """Engine error with full context.

    Carries a typed code, a human-readable message, structured metadata,
    tracing context and an optional chained cause (the exception a
    predicate raised, for instance).
    """
    code: ErrorCode
    message: str
    context: ErrorContext = field(default_factory=ErrorContext)
    metadata: dict = field(default_factory=dict)
    cause: Exception | None = None

    def with_metadata(self, **kwargs) -> AppError:
        """Create new error with additional metadata."""
        return AppError(
            code=self.code,
            message=self.message,
            context=self.context,
            metadata={**self.metadata, **kwargs},
            cause=self.cause,
        )

    def chain(self, cause: Exception) -> AppError:
        """Chain this error with a cause."""
        return AppError(
            code=self.code,
            message=self.message,
            context=self.context,
            metadata=self.metadata,
            cause=cause,
        )

    def to_dict(self) -> dict:
        """Serialize error for reports and structured logs."""
        return {
            "error": {
                "code": self.code.name,
                "code_num": self.code.value,
                "message": self.message,
                "category": self.code.category,
                "origin": self.context.origin,
                "correlation_id": self.context.correlation_id,
                "timestamp": self.context.timestamp.isoformat(),
                "metadata": self.metadata,
            }
        }

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message} (correlation_id={self.context.correlation_id})"


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success variant of Result."""
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise ValueError(f"Called unwrap_err on Ok: {self.value!r}")

    def map(self, f: Callable[[T], U]) -> Result[U, AppError]:
        """Transform the success value."""
        return Ok(f(self.value))

    def and_then(self, f: Callable[[T], Result[U, AppError]]) -> Result[U, AppError]:
        """Chain operations that may fail."""
        return f(self.value)


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failure variant of Result. Wraps an AppError."""
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_err(self) -> E:
        return self.error

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        return self  # type: ignore

    def and_then(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return self  # type: ignore


Result = Union[Ok[T], Err[E]]


def from_exception(
    exc: Exception,
    code: ErrorCode = ErrorCode.E9001_UNEXPECTED_ERROR,
    message: str | None = None,
    origin: str = "",
    **metadata,
) -> Err[AppError]:
    """Convert exception to Err with full context."""
    return Err(AppError(
        code=code,
        message=message or f"{type(exc).__name__}: {exc}",
        context=ErrorContext(origin=origin),
        metadata=metadata,
        cause=exc,
    ))


def try_result(
    f: Callable[[], Result[T, AppError]],
    code: ErrorCode = ErrorCode.E9001_UNEXPECTED_ERROR,
    origin: str = "",
) -> Result[T, AppError]:
    """Call a Result-returning function, turning a raised exception into Err.

    Predicates are expected to report hard errors as ``Err`` values. One that
    raises instead would take down the worker thread it runs on, so every
    call site goes through here.
    """
    try:
        result = f()
    except Exception as e:
        return from_exception(e, code=code, origin=origin)
    if not isinstance(result, (Ok, Err)):
        return Err(AppError(
            code=ErrorCode.E9003_ASSERTION_FAILED,
            message=f"Expected a Result, got {type(result).__name__}",
            context=ErrorContext(origin=origin),
        ))
    return result
