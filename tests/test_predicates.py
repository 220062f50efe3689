"""Tests for the predicate library, transformers and comparers."""
import pytest

from fieldrules.core.errors import Err, ErrorCode, Ok
from fieldrules.engine.types import Verdict
from fieldrules.predicates import (
    DEFAULT,
    FLOAT,
    INT,
    STRING_TO_BOOL,
    STRING_TO_FLOAT,
    STRING_TO_INT,
    STRING_TO_UINT,
    is_between,
    is_bool,
    is_complex,
    is_email,
    is_equal,
    is_float,
    is_int,
    is_length,
    is_length_between,
    is_str,
    is_string_between_ints,
    is_string_bool,
    is_string_equal_to_int,
    is_string_float,
    is_string_int,
    is_string_uint,
    is_transformable_to,
)


class TestTransformers:

    @pytest.mark.parametrize(
        "transformer, raw, expected",
        [
            (STRING_TO_INT, "1", 1),
            (STRING_TO_INT, "-4", -4),
            (STRING_TO_FLOAT, "4.5", 4.5),
            (STRING_TO_FLOAT, "10000000000000000.5", 10000000000000000.5),
            (STRING_TO_BOOL, "true", True),
            (STRING_TO_BOOL, "F", False),
            (STRING_TO_UINT, "8", 8),
        ],
    )
    def test_valid_strings(self, transformer, raw, expected):
        assert transformer.transform(raw) == Ok(expected)

    @pytest.mark.parametrize(
        "transformer, raw",
        [
            (STRING_TO_INT, "a"),
            (STRING_TO_INT, "1.5"),
            (STRING_TO_INT, " 7"),
            (STRING_TO_UINT, "-8"),
            (STRING_TO_FLOAT, "abc"),
            (STRING_TO_BOOL, "yes"),
        ],
    )
    def test_unparsable_strings_are_errors(self, transformer, raw):
        result = transformer.transform(raw)
        assert result.unwrap_err().code == ErrorCode.E2002_INVALID_FORMAT

    def test_non_string_is_type_error(self):
        result = STRING_TO_INT.transform(5)
        assert result.unwrap_err().code == ErrorCode.E2004_INVALID_TYPE
        assert result.unwrap_err().message == "Value is not a string"


class TestComparers:

    @pytest.mark.parametrize("comparer, left, right, expected", [
        (INT, 1, 2, -1),
        (INT, 2, 2, 0),
        (INT, 3, 2, 1),
        (FLOAT, 1.5, 0.5, 1),
        (DEFAULT, "a", "b", -1),
    ])
    def test_three_way(self, comparer, left, right, expected):
        assert comparer.compare(left, right) == expected


class TestTypePredicates:

    def test_exact_types(self):
        assert is_int(100).unwrap().valid
        assert is_complex((-5 + 12j) ** 0.5).unwrap().valid
        assert is_float(1.0).unwrap().valid
        assert is_str("x").unwrap().valid
        assert is_bool(False).unwrap().valid

    def test_bool_is_not_an_int(self):
        assert is_int(True) == Ok(Verdict.fail("must be a int"))

    def test_transformable(self):
        assert is_transformable_to(STRING_TO_INT, int)("53").unwrap().valid

    def test_transformable_to_other_type_is_invalid(self):
        verdict = is_transformable_to(STRING_TO_INT, float)("53").unwrap()
        assert verdict == Verdict.fail("53 not transformable to float")

    def test_transform_failure_is_hard_error(self):
        assert isinstance(is_transformable_to(STRING_TO_INT, int)("abc"), Err)


class TestComparePredicates:

    def test_is_equal(self):
        assert is_equal(STRING_TO_INT, INT, 100)("53") == Ok(Verdict.fail("must be equal to 100"))
        assert is_equal(STRING_TO_INT, INT, 100)("100").unwrap().valid

    def test_is_between_is_inclusive(self):
        between = is_between(STRING_TO_INT, INT, 1, 100)
        assert between("53").unwrap().valid
        assert between("1").unwrap().valid
        assert between("100").unwrap().valid
        assert between("101") == Ok(Verdict.fail("must be between 1 and 100"))

    def test_operand_type_mismatch_is_hard_error(self):
        result = is_between(STRING_TO_FLOAT, FLOAT, 1, 100)("5.5")
        assert result.unwrap_err().message == "Values must all have the same type"


class TestLengthPredicates:

    def test_is_length(self):
        assert is_length(3)("abc").unwrap().valid
        assert is_length(3)("ab") == Ok(Verdict.fail("Must have length 3"))
        assert is_length(2)([1, 2]).unwrap().valid
        assert is_length(1)({"a": 1}).unwrap().valid

    def test_unsized_value_is_hard_error(self):
        result = is_length(3)(1)
        assert result.unwrap_err().message == "Can't call 'len' on this value"

    def test_is_length_between(self):
        check = is_length_between(2, 4)
        assert check("ab").unwrap().valid
        assert check("abcd").unwrap().valid
        assert check("a") == Ok(Verdict.fail("Must be between length 2 and 4"))
        assert check(None).is_err()


class TestStringPredicates:

    def test_string_int(self):
        assert is_string_int("53").unwrap().valid
        assert is_string_int("abc") == Ok(Verdict.fail("must be an integer"))

    def test_string_int_rejects_non_strings(self):
        result = is_string_int(53)
        assert result.unwrap_err().code == ErrorCode.E2004_INVALID_TYPE
        assert result.unwrap_err().message == "53 is of type int, not str"

    @pytest.mark.parametrize("predicate, good, bad, message", [
        (is_string_uint, "8", "-8", "must be an unsigned integer"),
        (is_string_float, "4.5", "four", "must be a float"),
        (is_string_bool, "true", "maybe", "must be a boolean"),
    ])
    def test_string_parsers(self, predicate, good, bad, message):
        assert predicate(good).unwrap().valid
        assert predicate(bad) == Ok(Verdict.fail(message))

    def test_email(self):
        assert is_email("nii.mante@example.com").unwrap().valid
        assert is_email("hello") == Ok(Verdict.fail("Must be an email address"))
        assert is_email(3).unwrap_err().message == "must be a string"

    def test_string_between_ints(self):
        check = is_string_between_ints(1, 100)
        assert check("53").unwrap().valid
        assert check("101") == Ok(Verdict.fail("must be between 1 and 100"))
        assert check("abc") == Ok(Verdict.fail("must be an integer"))

    def test_string_equal_to_int(self):
        check = is_string_equal_to_int(100)
        assert check("100").unwrap().valid
        assert check("99") == Ok(Verdict.fail("must be equal to 100"))
        assert check(100).is_err()
