"""
Tests for tablemind/data/coerce.py - cell value coercion.
"""
import math

from tablemind.data.coerce import (
    is_number,
    numeric_values,
    strict_numbers,
    to_label,
    to_number,
    to_number_or,
    to_plain,
)


class TestToNumber:
    """Numeric coercion of raw cells."""

    def test_numbers_pass_through(self):
        assert to_number(10) == 10.0
        assert to_number(2.5) == 2.5

    def test_numeric_strings_are_parsed(self):
        assert to_number("5") == 5.0
        assert to_number("  7.5 ") == 7.5
        assert to_number("-3e2") == -300.0

    def test_unusable_values_become_nan(self):
        for value in ["x", "", "   ", None, True, False, "inf", float("inf"), [1]]:
            assert math.isnan(to_number(value)), value

    def test_default_replaces_nan(self):
        assert to_number_or("abc", 0.0) == 0.0
        assert to_number_or("4", 0.0) == 4.0

    def test_bools_are_not_numbers(self):
        assert not is_number(True)
        assert is_number(3)
        assert not is_number(float("nan"))


class TestFiltering:
    """Whole-sequence filtering helpers."""

    def test_numeric_values_coerces_strings(self):
        assert numeric_values(["5", "x", 10, ""]) == [5.0, 10.0]

    def test_strict_numbers_ignores_strings(self):
        assert strict_numbers(["5", 10]) == [10.0]

    def test_huge_ints_are_not_numbers(self):
        assert not is_number(10**400)
        assert math.isnan(to_number(10**400))
        assert strict_numbers([10**400, 1]) == [1.0]

    def test_strict_numbers_drops_nan_and_bools(self):
        assert strict_numbers([float("nan"), True, 2]) == [2.0]


class TestLabels:
    """Category label rendering."""

    def test_missing_becomes_unknown(self):
        assert to_label(None) == "Unknown"
        assert to_label(float("nan")) == "Unknown"

    def test_integral_floats_drop_fraction(self):
        assert to_label(2024.0) == "2024"
        assert to_label(1.5) == "1.5"

    def test_other_values_are_stringified(self):
        assert to_label("Bob") == "Bob"
        assert to_label(3) == "3"


class TestToPlain:

    def test_integral_values_become_int(self):
        assert to_plain(20.0) == 20
        assert isinstance(to_plain(20.0), int)

    def test_fractions_and_nan_stay_float(self):
        assert to_plain(7.5) == 7.5
        assert math.isnan(to_plain(float("nan")))
