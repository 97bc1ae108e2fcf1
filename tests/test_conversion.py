"""
Tests for value type coercion.
"""

import uuid
from datetime import datetime
from enum import Enum
from typing import Optional

import pytest

from optionstore.core.conversion import change_type, zero_value
from optionstore.exceptions import TypeConversionFailure


class Color(Enum):
    RED = 1


class TestChangeType:
    """Test conversion of stored and default values."""

    @pytest.mark.parametrize("target, expected", [
        (str, ""),
        (int, 0),
        (float, 0.0),
        (bool, False),
        (uuid.UUID, uuid.UUID(int=0)),
        (datetime, datetime.min),
    ])
    def test_none_gives_zero_value(self, target, expected):
        assert change_type(None, target) == expected

    def test_none_for_unknown_type(self):
        assert change_type(None, Color) is None
        assert zero_value(Color) is None

    @pytest.mark.parametrize("target", [int, float, bool, datetime])
    def test_empty_string_is_treated_as_none(self, target):
        assert change_type("", target) == zero_value(target)

    def test_empty_string_stays_string(self):
        assert change_type("", str) == ""

    def test_optional_targets(self):
        assert change_type(None, Optional[int]) is None
        assert change_type("", Optional[int]) is None
        assert change_type("7", Optional[int]) == 7

    def test_strings_to_numbers(self):
        assert change_type("5", int) == 5
        assert change_type(" -12 ", int) == -12
        assert change_type("2.5", float) == 2.5
        assert change_type(3, float) == 3.0

    def test_float_to_int_rounds_half_to_even(self):
        assert change_type(2.5, int) == 2
        assert change_type(3.5, int) == 4

    @pytest.mark.parametrize("raw, expected", [
        ("True", True), ("false", False), ("YES", True), ("no", False),
        ("1", True), ("0", False), ("on", True), ("off", False),
        (1, True), (0, False),
    ])
    def test_booleans(self, raw, expected):
        assert change_type(raw, bool) is expected

    def test_bool_to_int(self):
        assert change_type(True, int) == 1

    def test_non_string_to_string(self):
        assert change_type(5, str) == "5"
        assert change_type(2.5, str) == "2.5"
        assert change_type(True, str) == "True"

    def test_uuid_parsing(self):
        value = uuid.uuid4()
        assert change_type(str(value), uuid.UUID) == value
        assert change_type(value, uuid.UUID) is value

    def test_empty_string_is_not_an_identifier(self):
        with pytest.raises(TypeConversionFailure):
            change_type("", uuid.UUID)

    def test_datetime_parsing(self):
        value = datetime(2024, 1, 20, 8, 30, 15)
        assert change_type(str(value), datetime) == value
        assert change_type(value.isoformat(), datetime) == value

    @pytest.mark.parametrize("raw, target", [
        ("abc", int),
        ("1.5", int),
        ("maybe", bool),
        ("not-a-guid", uuid.UUID),
        ("yesterday", datetime),
        (float("nan"), int),
    ])
    def test_invalid_values_raise(self, raw, target):
        with pytest.raises(TypeConversionFailure):
            change_type(raw, target)

    def test_other_types_pass_through_when_compatible(self):
        assert change_type(Color.RED, Color) is Color.RED
        assert change_type([1, 2], list) == [1, 2]

    def test_other_types_raise_when_incompatible(self):
        with pytest.raises(TypeConversionFailure):
            change_type("RED", Color)

    def test_default_target_is_string(self):
        assert change_type(42) == "42"
