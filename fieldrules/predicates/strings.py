"""String Predicates

Checks for values that arrive as strings (query parameters, form fields,
environment variables). A non-string value is a hard error; a string that
doesn't parse is an invalid verdict with a short message.
"""
from __future__ import annotations

import re
from typing import Any

from fieldrules.core.errors import AppError, Err, Ok, Result, invalid_type, type_mismatch
from fieldrules.engine.types import Predicate, Verdict

from . import compare, transform
from .generic import is_between, is_equal

EMAIL_PATTERN = re.compile(r"^[a-z0-9._%+\-]+@[a-z0-9.\-]+\.[a-z]{2,4}$")


def _string_parses_to(transformer: transform.Transformer, message: str) -> Predicate:
    def predicate(value: Any) -> Result[Verdict, AppError]:
        if not isinstance(value, str):
            return type_mismatch(value, "str", origin="predicates")
        if transformer.transform(value).is_err():
            return Ok(Verdict.fail(message))
        return Ok(Verdict.ok())

    return predicate


is_string_int = _string_parses_to(transform.STRING_TO_INT, "must be an integer")
is_string_uint = _string_parses_to(transform.STRING_TO_UINT, "must be an unsigned integer")
is_string_float = _string_parses_to(transform.STRING_TO_FLOAT, "must be a float")
is_string_bool = _string_parses_to(transform.STRING_TO_BOOL, "must be a boolean")


def is_email(value: Any) -> Result[Verdict, AppError]:
    if not isinstance(value, str):
        return invalid_type("must be a string", origin="predicates", actual_type=type(value).__name__)
    if EMAIL_PATTERN.match(value):
        return Ok(Verdict.ok())
    return Ok(Verdict.fail("Must be an email address"))


def _after_string_int(check: Predicate) -> Predicate:
    # A non-numeric string is reported as "must be an integer", not as a hard error
    def predicate(value: Any) -> Result[Verdict, AppError]:
        match is_string_int(value):
            case Err() as failure:
                return failure
            case Ok(verdict) if not verdict.valid:
                return Ok(verdict)
        return check(value)

    return predicate


def is_string_between_ints(lower: int, upper: int) -> Predicate:
    """String must hold an integer in ``[lower, upper]``."""
    return _after_string_int(is_between(transform.STRING_TO_INT, compare.INT, lower, upper))


def is_string_equal_to_int(right: int) -> Predicate:
    """String must hold an integer equal to ``right``."""
    return _after_string_int(is_equal(transform.STRING_TO_INT, compare.INT, right))
