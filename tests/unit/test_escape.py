from uuid import UUID

import pytest

from surqlid._constants import MAX_I64
from surqlid._escape import (
    escape_ident,
    escape_number,
    is_only_numbers,
    is_valid_id_part,
)


class TestIsOnlyNumbers:
    @pytest.mark.parametrize(
        "text",
        ["0", "123", "-123", "1_000", "_123", "123_", "-1_0"],
        ids=[
            "zero",
            "positive",
            "negative",
            "single_separator",
            "leading_separator",
            "trailing_separator",
            "negative_with_separator",
        ],
    )
    def test_numeric_text(self, text: str) -> None:
        assert is_only_numbers(text)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "_",
            "abc",
            "12a",
            "a12",
            "007",
            "-0",
            "+5",
            " 5",
            "1.5",
            "1_0_0",
            "١٢٣",
        ],
        ids=[
            "empty",
            "separator_only",
            "letters",
            "trailing_letter",
            "leading_letter",
            "leading_zeros",
            "negative_zero",
            "plus_sign",
            "leading_space",
            "decimal_point",
            "two_separators",
            "non_ascii_digits",
        ],
    )
    def test_non_numeric_text(self, text: str) -> None:
        assert not is_only_numbers(text)

    def test_large_integer_text(self) -> None:
        assert is_only_numbers("9" * 40)


class TestEscapeIdent:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("abc", "abc"),
            ("ABC_def_123", "ABC_def_123"),
            ("_", "_"),
            ("", ""),
            ("my table", "⟨my table⟩"),
            ("123", "⟨123⟩"),
            ("-123", "⟨-123⟩"),
            ("1_000", "⟨1_000⟩"),
            ("a⟩b", "⟨a\\⟩b⟩"),
            ("⟩⟩", "⟨\\⟩\\⟩⟩"),
            ("café", "⟨café⟩"),
            ("a-b", "⟨a-b⟩"),
            ("a\\b", "⟨a\\b⟩"),
            ("007", "007"),
            ("1_0_0", "1_0_0"),
        ],
        ids=[
            "bare",
            "mixed_case_digits_underscore",
            "underscore_only",
            "empty",
            "space",
            "numeric",
            "negative_numeric",
            "numeric_with_separator",
            "embedded_close_delimiter",
            "only_close_delimiters",
            "non_ascii",
            "hyphen",
            "backslash_not_escaped",
            "leading_zeros_stay_bare",
            "two_separators_stay_bare",
        ],
    )
    def test_escaping(self, text: str, expected: str) -> None:
        assert escape_ident(text) == expected


class TestEscapeNumber:
    @pytest.mark.parametrize(
        ("number", "expected"),
        [
            (0, "0"),
            (42, "42"),
            (-42, "-42"),
            (MAX_I64, "9223372036854775807"),
            (MAX_I64 + 1, "⟨9223372036854775808⟩"),
            (10**30, "⟨1000000000000000000000000000000⟩"),
            (-(10**30), "-1000000000000000000000000000000"),
        ],
        ids=[
            "zero",
            "positive",
            "negative",
            "at_bound",
            "one_past_bound",
            "huge",
            "huge_negative",
        ],
    )
    def test_escaping(self, number: int, expected: str) -> None:
        assert escape_number(number) == expected


class TestIsValidIdPart:
    @pytest.mark.parametrize(
        "value",
        [
            "tobie",
            "",
            0,
            -1,
            MAX_I64 + 1,
            UUID("018f4c1e-7b3a-7c4d-9e2f-0a1b2c3d4e5f"),
            [],
            ["a", 1],
            ("a", 1),
            {},
            {"a": 1},
        ],
        ids=[
            "string",
            "empty_string",
            "zero",
            "negative",
            "big_integer",
            "uuid",
            "empty_list",
            "list",
            "tuple",
            "empty_dict",
            "dict",
        ],
    )
    def test_valid(self, value: object) -> None:
        assert is_valid_id_part(value)

    @pytest.mark.parametrize(
        "value",
        [None, True, False, 1.5, {1, 2}, object(), len],
        ids=["none", "true", "false", "float", "set", "object", "callable"],
    )
    def test_invalid(self, value: object) -> None:
        assert not is_valid_id_part(value)
