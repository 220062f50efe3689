"""Shared predicates and fixtures for the fieldrules test-suite."""
from __future__ import annotations

import threading
import time
from typing import Any

import pytest

from fieldrules.core.errors import Ok, internal_error
from fieldrules.engine.types import Verdict


def passing(value: Any):
    return Ok(Verdict.ok())


def failing(message: str):
    def predicate(value: Any):
        return Ok(Verdict.fail(message))

    return predicate


def hard_error(message: str = "predicate exploded"):
    def predicate(value: Any):
        return internal_error(message, origin="tests")

    return predicate


def sleeping(seconds: float, verdict: Verdict | None = None):
    def predicate(value: Any):
        time.sleep(seconds)
        return Ok(verdict or Verdict.ok())

    return predicate


class CallCounter:
    """Predicate that records how many times it ran, thread-safely."""

    def __init__(self, verdict: Verdict | None = None):
        self.calls = 0
        self._verdict = verdict or Verdict.ok()
        self._lock = threading.Lock()

    def __call__(self, value: Any):
        with self._lock:
            self.calls += 1
        return Ok(self._verdict)


@pytest.fixture
def counter() -> CallCounter:
    return CallCounter()
