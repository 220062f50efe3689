"""Generic Predicates

Type checks, length checks and transform-then-compare checks. Each factory
returns a predicate: ``(value) -> Result[Verdict, AppError]``. A predicate
returns an invalid Verdict when the value does not conform and ``Err`` when
it cannot judge the value at all (wrong kind of value, failed transform).

Type checks are exact: ``is_int(True)`` is invalid even though ``bool``
subclasses ``int``.
"""
from __future__ import annotations

from collections.abc import Sized
from typing import Any

from fieldrules.core.errors import AppError, Err, Ok, Result, invalid_type
from fieldrules.engine.types import Predicate, Verdict

from .compare import Comparer
from .transform import Transformer


def _types_equal(*values: Any) -> Result[None, AppError]:
    if len({type(v) for v in values}) > 1:
        return invalid_type(
            "Values must all have the same type",
            origin="predicates",
            types=[type(v).__name__ for v in values],
        )
    return Ok(None)


def _sized(value: Any) -> Result[int, AppError]:
    if not isinstance(value, Sized):
        return invalid_type(
            "Can't call 'len' on this value",
            origin="predicates",
            actual_type=type(value).__name__,
        )
    return Ok(len(value))


# ============================================================================
# Type Predicates
# ============================================================================

def is_type(_type: type) -> Predicate:
    """Value's type must be exactly ``_type``."""
    def predicate(value: Any) -> Result[Verdict, AppError]:
        if type(value) is not _type:
            return Ok(Verdict.fail(f"must be a {_type.__name__}"))
        return Ok(Verdict.ok())

    return predicate


is_bool = is_type(bool)
is_int = is_type(int)
is_float = is_type(float)
is_complex = is_type(complex)
is_str = is_type(str)
is_bytes = is_type(bytes)


# ============================================================================
# Transform / Compare Predicates
# ============================================================================

def is_transformable_to(transformer: Transformer, _type: type) -> Predicate:
    """Value must transform into an instance of exactly ``_type``."""
    def predicate(value: Any) -> Result[Verdict, AppError]:
        match transformer.transform(value):
            case Err() as failure:
                return failure
            case Ok(transformed):
                if type(transformed) is not _type:
                    return Ok(Verdict.fail(f"{value} not transformable to {_type.__name__}"))
                return Ok(Verdict.ok())

    return predicate


def is_equal(transformer: Transformer, comparer: Comparer, right: Any) -> Predicate:
    """Transformed value must compare equal to ``right``."""
    def predicate(value: Any) -> Result[Verdict, AppError]:
        match transformer.transform(value):
            case Err() as failure:
                return failure
            case Ok(transformed):
                pass

        if (check := _types_equal(transformed, right)).is_err():
            return check
        if comparer.compare(transformed, right) == 0:
            return Ok(Verdict.ok())
        return Ok(Verdict.fail(f"must be equal to {right}"))

    return predicate


def is_between(transformer: Transformer, comparer: Comparer, lower: Any, upper: Any) -> Predicate:
    """Transformed value must lie in ``[lower, upper]``."""
    def predicate(value: Any) -> Result[Verdict, AppError]:
        match transformer.transform(value):
            case Err() as failure:
                return failure
            case Ok(transformed):
                pass

        if (check := _types_equal(transformed, lower, upper)).is_err():
            return check
        if comparer.compare(lower, transformed) <= 0 and comparer.compare(transformed, upper) <= 0:
            return Ok(Verdict.ok())
        return Ok(Verdict.fail(f"must be between {lower} and {upper}"))

    return predicate


# ============================================================================
# Length Predicates
# ============================================================================

def is_length(length: int) -> Predicate:
    """Value must have exactly ``length`` items/characters."""
    def predicate(value: Any) -> Result[Verdict, AppError]:
        match _sized(value):
            case Err() as failure:
                return failure
            case Ok(size):
                if size == length:
                    return Ok(Verdict.ok())
                return Ok(Verdict.fail(f"Must have length {length}"))

    return predicate


def is_length_between(lower: int, upper: int) -> Predicate:
    """Value's length must lie in ``[lower, upper]``."""
    def predicate(value: Any) -> Result[Verdict, AppError]:
        match _sized(value):
            case Err() as failure:
                return failure
            case Ok(size):
                if lower <= size <= upper:
                    return Ok(Verdict.ok())
                return Ok(Verdict.fail(f"Must be between length {lower} and {upper}"))

    return predicate
