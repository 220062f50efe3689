"""Predicate Library

Ready-made predicates plus the transformer and comparer strategies they are
built from. Any callable with the predicate contract works with ``Rule``;
these cover the common cases.

Usage:
    from fieldrules.predicates import is_string_int, is_length_between

    Rule("page_size", (is_string_int,))
    Rule("username", (is_length_between(3, 32),), required=True)
"""
from .compare import DEFAULT, FLOAT, INT, Comparer, DefaultComparer, FloatComparer, IntComparer
from .transform import (
    STRING_TO_BOOL,
    STRING_TO_FLOAT,
    STRING_TO_INT,
    STRING_TO_UINT,
    StringToBool,
    StringToFloat,
    StringToInt,
    StringToUint,
    Transformer,
)
from .generic import (
    is_between,
    is_bool,
    is_bytes,
    is_complex,
    is_equal,
    is_float,
    is_int,
    is_length,
    is_length_between,
    is_str,
    is_transformable_to,
    is_type,
)
from .strings import (
    EMAIL_PATTERN,
    is_email,
    is_string_between_ints,
    is_string_bool,
    is_string_equal_to_int,
    is_string_float,
    is_string_int,
    is_string_uint,
)

__all__ = [
    # Comparers
    "Comparer",
    "DefaultComparer",
    "IntComparer",
    "FloatComparer",
    "DEFAULT",
    "INT",
    "FLOAT",
    # Transformers
    "Transformer",
    "StringToInt",
    "StringToUint",
    "StringToFloat",
    "StringToBool",
    "STRING_TO_INT",
    "STRING_TO_UINT",
    "STRING_TO_FLOAT",
    "STRING_TO_BOOL",
    # Generic
    "is_type",
    "is_bool",
    "is_int",
    "is_float",
    "is_complex",
    "is_str",
    "is_bytes",
    "is_transformable_to",
    "is_equal",
    "is_between",
    "is_length",
    "is_length_between",
    # Strings
    "EMAIL_PATTERN",
    "is_email",
    "is_string_int",
    "is_string_uint",
    "is_string_float",
    "is_string_bool",
    "is_string_between_ints",
    "is_string_equal_to_int",
]
