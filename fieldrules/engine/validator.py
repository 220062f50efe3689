"""Validator

Owns the rule set for a payload and turns a mapping of field values into
one ``Response``. The rule map is fixed at construction; ``add_rule``
returns a new Validator rather than mutating the receiver, so one instance
can be shared across threads.

Usage:
    validator = Validator(
        [
            Rule("page_size", (is_string_int,)),
            Rule("username", required=True),
        ],
        enable_parallel(),
    )

    match validator.validate({"page_size": "abc"}):
        case Ok(response):
            response.errors   # {"page_size": ["must be an integer"],
                              #  "username": ["is required"]}
        case Err(error):
            ...               # a predicate failed hard; no partial report
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterable, Mapping

from fieldrules.core.errors import (
    AppError,
    AppErrorException,
    Err,
    Ok,
    Result,
    raise_error,
    raise_result,
)
from fieldrules.core.logging import validator_logger

from .jobs import RuleJob
from .options import Option
from .pool import WorkerPool
from .rule import Rule
from .types import REQUIRED_MESSAGE, Predicate, Response

log = validator_logger()


def _merge_rules(rules: Iterable[Rule]) -> dict[str, Rule]:
    merged: dict[str, Rule] = {}
    for rule in rules:
        if rule.key in merged:
            merged[rule.key] = merged[rule.key].extend(rule.predicates)
        else:
            merged[rule.key] = rule
    return merged


class Validator:
    """Immutable mapping of field name to Rule."""

    __slots__ = ("_rules", "_parallel")

    def __init__(self, rules: Iterable[Rule] | None = None, *options: Option):
        self._rules: Mapping[str, Rule] = MappingProxyType(_merge_rules(rules or ()))
        self._parallel = False

        for option in options:
            result = option(self)
            if result.is_err():
                raise_error(result.unwrap_err())

    @classmethod
    def _from_parts(cls, rules: dict[str, Rule], parallel: bool) -> Validator:
        validator = cls.__new__(cls)
        validator._rules = MappingProxyType(rules)
        validator._parallel = parallel
        return validator

    @property
    def rules(self) -> Mapping[str, Rule]:
        return self._rules

    @property
    def parallel(self) -> bool:
        return self._parallel

    def add_rule(self, key: str, *predicates: Predicate) -> Validator:
        """Return a new Validator with ``predicates`` appended to ``key``'s rule.

        A key with no rule yet gets a new, optional, sequential one.
        """
        rules = dict(self._rules)
        if key in rules:
            rules[key] = rules[key].extend(predicates)
        else:
            rules[key] = Rule(key=key, predicates=predicates)
        return Validator._from_parts(rules, self._parallel)

    def _create_jobs(self, values: Mapping[str, Any]) -> Result[list[RuleJob], AppError]:
        jobs: list[RuleJob] = []
        for key, value in values.items():
            rule = self._rules.get(key)
            if rule is None:
                continue
            try:
                jobs.append(RuleJob(value, rule))
            except AppErrorException as exc:
                return Err(exc.error)
        return Ok(jobs)

    def validate(self, values: Mapping[str, Any]) -> Result[Response, AppError]:
        """Run every rule against its field's value.

        Returns ``Err`` with the first hard error encountered; otherwise a
        Response listing the messages of every invalid or missing field.
        """
        errors: dict[str, list[str]] = {}

        for key, rule in self._rules.items():
            if rule.required and key not in values:
                errors[key] = [REQUIRED_MESSAGE]

        match self._create_jobs(values):
            case Err(error):
                return self._abort(error)
            case Ok(jobs):
                pass

        if self._parallel:
            WorkerPool(len(values), jobs).run()
        else:
            for job in jobs:
                job.run()
                if job.error is not None:
                    return self._abort(job.error)

        for job in jobs:
            if job.error is not None:
                return self._abort(job.error)
            outcome = job.result
            if not outcome.valid:
                errors.setdefault(outcome.key, []).extend(outcome.messages)

        response = Response(errors=errors, valid=not errors)
        log.debug(
            "validation_completed",
            fields=len(values),
            rules_run=len(jobs),
            valid=response.valid,
            parallel=self._parallel,
        )
        return Ok(response)

    def validate_or_raise(self, values: Mapping[str, Any]) -> Response:
        """Like ``validate`` but raises ``AppErrorException`` on a hard error."""
        return raise_result(self.validate(values))

    def _abort(self, error: AppError) -> Err[AppError]:
        log.warning(
            "validation_aborted",
            code=error.code.name,
            message=error.message,
            field=error.metadata.get("field"),
        )
        return Err(error)

    def __repr__(self) -> str:
        return f"Validator(rules={sorted(self._rules)}, parallel={self._parallel})"
