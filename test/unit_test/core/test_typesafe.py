"""Unit tests for typed value access."""

from datetime import date, datetime
from enum import Enum

import pytest

from recordkit.core.errors import OutOfBoundsError
from recordkit.core.utils import coerce, parse_types, typesafe


class Color(str, Enum):
    red = "red"


class TestParseTypes:
    def test_splits_and_strips(self):
        assert parse_types(" str | int|null ") == ("str", "int", "null")

    @pytest.mark.parametrize("types", ["", "|", "  "])
    def test_empty_type_list_raises(self, types):
        with pytest.raises(OutOfBoundsError, match="No types specified"):
            parse_types(types)

    def test_unknown_type_raises(self):
        with pytest.raises(OutOfBoundsError, match="Unknown type"):
            parse_types("str|decimal")


class TestTypesafe:
    """Test the value, default and mismatch paths of typesafe()."""

    @pytest.mark.parametrize(
        "types,value,expected",
        [
            ("str", "foo", "foo"),
            ("int", 12, 12),
            ("int", "12", 12),
            ("int", " -3 ", -3),
            ("int", 4.0, 4),
            ("float", "1.5", 1.5),
            ("float", 2, 2.0),
            ("bool", "true", True),
            ("bool", 0, False),
            ("scalar", 3, 3),
            ("list", (1, 2), [1, 2]),
            ("dict", {"a": 1}, {"a": 1}),
            ("str", Color.red, "red"),
        ],
    )
    def test_matching_values(self, types, value, expected):
        assert typesafe(types, value) == expected

    @pytest.mark.parametrize(
        "types,value",
        [
            ("int", "12a"),
            ("int", True),
            ("int", 1.5),
            ("str", 12),
            ("bool", "yes"),
            ("dict", [1]),
            ("null", "x"),
        ],
    )
    def test_mismatch_returns_none(self, types, value):
        assert typesafe(types, value) is None

    def test_first_matching_type_wins(self):
        assert typesafe("int|str", "12") == 12
        assert typesafe("str|int", "12") == "12"

    def test_none_returns_default(self):
        assert typesafe("int|null", None, 50) == 50
        assert typesafe("int|null", None) is None

    def test_default_must_match_types(self):
        with pytest.raises(OutOfBoundsError, match="does not match"):
            typesafe("int", None, "fifty")

    def test_datetime_values(self):
        assert typesafe("datetime", "2024-01-02T03:04:05") == datetime(2024, 1, 2, 3, 4, 5)
        assert typesafe("datetime", date(2024, 1, 2)) == datetime(2024, 1, 2)
        assert typesafe("datetime", "yesterday") is None

    def test_coerce_does_not_apply_defaults(self):
        assert coerce("int", None) is None
