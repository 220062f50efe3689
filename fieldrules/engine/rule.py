"""Rule Execution

A Rule binds an ordered list of predicates to one field. ``execute`` runs
them against the field's value, either inline or on a private worker pool,
and folds the verdicts into one ``RuleOutcome``:

- every predicate contributes its message (empty when it passed)
- ``valid`` is overwritten by each verdict, so the last predicate decides
- the first hard error aborts the rule and is returned as ``Err``
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Iterable

from fieldrules.core.errors import (
    AppError,
    AppErrorException,
    Err,
    Ok,
    Result,
)
from fieldrules.core.logging import rule_logger

from .jobs import FuncJob
from .pool import WorkerPool
from .types import Predicate, RuleOutcome, apply_predicate

log = rule_logger()


@dataclass(frozen=True, slots=True)
class Rule:
    """Named, ordered set of predicates bound to one input field."""
    key: str
    predicates: tuple[Predicate, ...] = ()
    required: bool = False
    parallel: bool = False

    def __post_init__(self):
        if not isinstance(self.predicates, tuple):
            object.__setattr__(self, "predicates", tuple(self.predicates))

    def extend(self, predicates: Iterable[Predicate]) -> Rule:
        """New rule with ``predicates`` appended; flags are kept."""
        return dataclasses.replace(self, predicates=self.predicates + tuple(predicates))

    def _create_jobs(self, value: Any) -> Result[list[FuncJob], AppError]:
        jobs: list[FuncJob] = []
        for predicate in self.predicates:
            try:
                jobs.append(FuncJob(value, predicate))
            except AppErrorException as exc:
                return Err(exc.error.with_metadata(field=self.key))
        return Ok(jobs)

    def _run_parallel(self, value: Any) -> Result[RuleOutcome, AppError]:
        match self._create_jobs(value):
            case Err(error):
                return Err(error)
            case Ok(jobs):
                pass

        WorkerPool(len(jobs), jobs).run()

        # Read back in predicate order, not completion order
        messages: list[str] = []
        valid = True
        for job in jobs:
            if job.error is not None:
                return self._abort(job.error)
            messages.append(job.result.message)
            valid = job.result.valid

        return Ok(RuleOutcome(key=self.key, valid=valid, messages=tuple(messages)))

    def _run_sequential(self, value: Any) -> Result[RuleOutcome, AppError]:
        messages: list[str] = []
        valid = True
        for predicate in self.predicates:
            match apply_predicate(predicate, value, origin="rule"):
                case Err(error):
                    return self._abort(error)
                case Ok(verdict):
                    messages.append(verdict.message)
                    valid = verdict.valid

        return Ok(RuleOutcome(key=self.key, valid=valid, messages=tuple(messages)))

    def _abort(self, error: AppError) -> Err[AppError]:
        log.debug("rule_hard_error", key=self.key, code=error.code.name, message=error.message)
        return Err(error.with_metadata(field=self.key))

    def execute(self, value: Any) -> Result[RuleOutcome, AppError]:
        """Evaluate every predicate against ``value``."""
        if self.parallel:
            return self._run_parallel(value)
        return self._run_sequential(value)
