"""Rule-execution engine: jobs, worker pool, rules and the validator."""
from .types import REQUIRED_MESSAGE, Predicate, Response, RuleOutcome, Verdict
from .jobs import FuncJob, Job, RuleJob
from .pool import MAX_WORKERS, MIN_WORKERS, CompletionBarrier, WorkerPool, clamp_workers
from .rule import Rule
from .options import Option, enable_parallel
from .validator import Validator

__all__ = [
    "REQUIRED_MESSAGE",
    "Predicate",
    "Response",
    "RuleOutcome",
    "Verdict",
    "FuncJob",
    "Job",
    "RuleJob",
    "MAX_WORKERS",
    "MIN_WORKERS",
    "CompletionBarrier",
    "WorkerPool",
    "clamp_workers",
    "Rule",
    "Option",
    "enable_parallel",
    "Validator",
]
