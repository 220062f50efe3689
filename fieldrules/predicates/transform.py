"""String Transformers

Transformers convert a value into another type for composite predicates
such as ``is_between``. Every transformer returns a Result: a non-string
input or an unparsable string is a hard error, never a silent default.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Protocol

from fieldrules.core.errors import AppError, Ok, Result, invalid_format, invalid_type

_TRUE_STRINGS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_STRINGS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


class Transformer(Protocol):
    """Converts a value ``A`` into a value ``B``; types may differ."""

    def transform(self, value: Any) -> Result[Any, AppError]: ...


@dataclass(frozen=True, slots=True)
class StringTransformer(ABC):
    """Base for transformers that only accept ``str`` input."""

    @property
    @abstractmethod
    def target_type(self) -> type: ...

    @abstractmethod
    def _parse(self, value: str) -> Any: ...

    def transform(self, value: Any) -> Result[Any, AppError]:
        if not isinstance(value, str):
            return invalid_type(
                "Value is not a string",
                origin="transform",
                actual_type=type(value).__name__,
            )
        try:
            return Ok(self._parse(value))
        except ValueError as e:
            return invalid_format(value, self.target_type.__name__, cause=e, origin="transform")

    def __call__(self, value: Any) -> Result[Any, AppError]:
        return self.transform(value)


@dataclass(frozen=True, slots=True)
class StringToInt(StringTransformer):
    """Base-10 integer, optional sign."""

    @property
    def target_type(self) -> type:
        return int

    def _parse(self, value: str) -> int:
        # int() accepts surrounding whitespace and underscores; plain digits only here
        stripped = value[1:] if value[:1] in "+-" else value
        if not stripped.isascii() or not stripped.isdigit():
            raise ValueError(f"invalid literal for int: {value!r}")
        return int(value)


@dataclass(frozen=True, slots=True)
class StringToUint(StringTransformer):
    """Non-negative base-10 integer."""

    @property
    def target_type(self) -> type:
        return int

    def _parse(self, value: str) -> int:
        if not value.isascii() or not value.isdigit():
            raise ValueError(f"invalid literal for unsigned int: {value!r}")
        return int(value)


@dataclass(frozen=True, slots=True)
class StringToFloat(StringTransformer):

    @property
    def target_type(self) -> type:
        return float

    def _parse(self, value: str) -> float:
        if value != value.strip():
            raise ValueError(f"could not convert string to float: {value!r}")
        return float(value)


@dataclass(frozen=True, slots=True)
class StringToBool(StringTransformer):

    @property
    def target_type(self) -> type:
        return bool

    def _parse(self, value: str) -> bool:
        if value in _TRUE_STRINGS:
            return True
        if value in _FALSE_STRINGS:
            return False
        raise ValueError(f"invalid literal for bool: {value!r}")


STRING_TO_INT = StringToInt()
STRING_TO_UINT = StringToUint()
STRING_TO_FLOAT = StringToFloat()
STRING_TO_BOOL = StringToBool()
