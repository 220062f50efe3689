"""Runnable Jobs

A job wraps one predicate application (``FuncJob``) or one rule
application (``RuleJob``) so a ``WorkerPool`` can run it as an opaque unit.
The pool returns nothing: each job keeps its own outcome, and callers read
``result`` / ``error`` off the job objects once the pool has joined.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol, Union

from fieldrules.core.errors import (
    AppError,
    Err,
    Ok,
    Result,
    missing_value,
    raise_error,
    try_result,
)

from .types import Predicate, RuleOutcome, Verdict, apply_predicate

if TYPE_CHECKING:
    from .rule import Rule


class Signal(Protocol):
    """Anything a finished job can report completion to."""

    def done(self) -> None: ...


@dataclass(slots=True)
class FuncJob:
    """One predicate applied to one value."""
    value: Any
    predicate: Predicate
    result: Verdict | None = field(default=None, init=False)
    error: AppError | None = field(default=None, init=False)
    has_run: bool = field(default=False, init=False)

    def __post_init__(self):
        if self.value is None:
            raise_error(missing_value("FuncJob", origin="func_job").error)

    def run(self, barrier: Signal | None = None) -> None:
        try:
            match apply_predicate(self.predicate, self.value, origin="func_job"):
                case Ok(verdict):
                    self.result = verdict
                case Err(error):
                    self.error = error
        finally:
            self.has_run = True
            if barrier is not None:
                barrier.done()

    def outcome(self) -> Result[Verdict, AppError]:
        return Err(self.error) if self.error is not None else Ok(self.result)


@dataclass(slots=True)
class RuleJob:
    """One rule applied to the value of its field."""
    value: Any
    rule: Rule
    result: RuleOutcome | None = field(default=None, init=False)
    error: AppError | None = field(default=None, init=False)
    has_run: bool = field(default=False, init=False)

    def __post_init__(self):
        if self.value is None:
            raise_error(
                missing_value("RuleJob", origin="rule_job").error.with_metadata(field=self.rule.key)
            )

    def run(self, barrier: Signal | None = None) -> None:
        try:
            match try_result(lambda: self.rule.execute(self.value), origin="rule_job"):
                case Ok(outcome):
                    self.result = outcome
                case Err(error):
                    self.error = error
        finally:
            self.has_run = True
            if barrier is not None:
                barrier.done()

    def outcome(self) -> Result[RuleOutcome, AppError]:
        return Err(self.error) if self.error is not None else Ok(self.result)


Job = Union[FuncJob, RuleJob]
JOB_TYPES = (FuncJob, RuleJob)
