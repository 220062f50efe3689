"""Value types shared by predicates, rules and the validator."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field

from fieldrules.core.errors import AppError, Err, Ok, Result, try_result, unexpected_value

REQUIRED_MESSAGE = "is required"


@dataclass(frozen=True, slots=True)
class Verdict:
    """A predicate's pass/fail judgment. ``message`` only matters when invalid."""
    valid: bool
    message: str = ""

    @classmethod
    def ok(cls) -> Verdict:
        return cls(valid=True)

    @classmethod
    def fail(cls, message: str) -> Verdict:
        return cls(valid=False, message=message)


# A predicate maps one value to a verdict, or to Err on a hard error
# (type mismatch, unparsable input, failed I/O).
Predicate = Callable[[Any], Result[Verdict, AppError]]


def apply_predicate(predicate: Predicate, value: Any, origin: str = "") -> Result[Verdict, AppError]:
    """Call ``predicate`` on ``value``.

    A raised exception, or a return value other than ``Ok(Verdict)`` /
    ``Err(AppError)``, comes back as a hard error.
    """
    result = try_result(lambda: predicate(value), origin=origin)
    match result:
        case Ok(Verdict()) | Err(AppError()):
            return result
        case Ok(other):
            return unexpected_value(other, "a Verdict", origin=origin)
        case Err(other):
            return unexpected_value(other, "an AppError", origin=origin)


@dataclass(frozen=True, slots=True)
class RuleOutcome:
    """A rule's reduced result across all of its predicates.

    ``messages`` holds one entry per predicate in predicate order, with an
    empty string for each predicate that passed. ``valid`` is the verdict of
    the last predicate evaluated.
    """
    key: str
    valid: bool
    messages: tuple[str, ...] = ()


class Response(BaseModel):
    """Per-field error report produced by ``Validator.validate``."""
    model_config = ConfigDict(frozen=True)

    errors: dict[str, list[str]] = Field(default_factory=dict)
    valid: bool = True
