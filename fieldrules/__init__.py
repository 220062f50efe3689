"""fieldrules: composable field validation with optional concurrent execution.

Usage:
    from fieldrules import Ok, Err, Rule, Validator, enable_parallel
    from fieldrules.predicates import is_string_int

    validator = Validator([Rule("page_size", (is_string_int,))], enable_parallel())
    match validator.validate({"page_size": "53"}):
        case Ok(response):
            assert response.valid
        case Err(error):
            raise RuntimeError(error.message)
"""
from fieldrules.core.errors import AppError, AppErrorException, Err, ErrorCode, Ok, Result
from fieldrules.core.logging import configure_logging
from fieldrules.engine import (
    MAX_WORKERS,
    MIN_WORKERS,
    FuncJob,
    Option,
    Predicate,
    Response,
    Rule,
    RuleJob,
    RuleOutcome,
    Validator,
    Verdict,
    WorkerPool,
    enable_parallel,
)

__version__ = "0.1.0"

__all__ = [
    "AppError",
    "AppErrorException",
    "Err",
    "ErrorCode",
    "Ok",
    "Result",
    "configure_logging",
    "MAX_WORKERS",
    "MIN_WORKERS",
    "FuncJob",
    "Option",
    "Predicate",
    "Response",
    "Rule",
    "RuleJob",
    "RuleOutcome",
    "Validator",
    "Verdict",
    "WorkerPool",
    "enable_parallel",
]
