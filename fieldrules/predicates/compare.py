"""Comparers

A comparer orders two values of the same concrete type and returns -1, 0
or 1 for less than, equal, greater than. Callers check operand types
before comparing; mixed types are not part of the contract.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


class Comparer(Protocol):
    def compare(self, left: Any, right: Any) -> int: ...


def _three_way(left: Any, right: Any) -> int:
    if left < right:
        return -1
    if left == right:
        return 0
    return 1


@dataclass(frozen=True, slots=True)
class DefaultComparer:
    """Orders any values supporting ``<`` and ``==``."""

    def compare(self, left: Any, right: Any) -> int:
        return _three_way(left, right)


@dataclass(frozen=True, slots=True)
class IntComparer:

    def compare(self, left: int, right: int) -> int:
        return _three_way(int(left), int(right))


@dataclass(frozen=True, slots=True)
class FloatComparer:

    def compare(self, left: float, right: float) -> int:
        return _three_way(float(left), float(right))


DEFAULT = DefaultComparer()
INT = IntComparer()
FLOAT = FloatComparer()
