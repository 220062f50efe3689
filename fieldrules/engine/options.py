"""Validator construction options."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from fieldrules.core.errors import AppError, Ok, Result, nil_validator

if TYPE_CHECKING:
    from .validator import Validator

Option = Callable[["Validator | None"], Result[None, AppError]]


def enable_parallel(flag: bool = True) -> Option:
    """Run each field's rule on a shared worker pool during ``validate``.

    Only affects field-level dispatch; each Rule's own ``parallel`` flag
    still decides how its predicates run.
    """
    def option(validator: Validator | None) -> Result[None, AppError]:
        if validator is None:
            return nil_validator(origin="options")
        validator._parallel = bool(flag)
        return Ok(None)

    return option
