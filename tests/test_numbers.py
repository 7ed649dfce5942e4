"""Tests for number parsing, formatting and arithmetic."""

import math

import pytest

from calc import numbers


class TestParseNumber:
    @pytest.mark.parametrize("text, expected", [
        ("0", 0.0),
        ("42", 42.0),
        ("-2.5", -2.5),
        ("5.", 5.0),
        (".5", 0.5),
        ("1.0E-4", 1e-4),
        ("3.5e2", 350.0),
        ("+7", 7.0),
        ("Infinity", math.inf),
        ("-Infinity", -math.inf),
    ])
    def test_valid(self, text, expected):
        assert numbers.parse_number(text) == expected

    def test_nan(self):
        assert math.isnan(numbers.parse_number("NaN"))

    @pytest.mark.parametrize("text", [
        "", ".", "-", "Error", " 5", "5 ", "1_000", "nan", "inf", "1e", "1.2.3",
    ])
    def test_invalid(self, text):
        assert numbers.parse_number(text) is None


class TestFormatNumber:
    @pytest.mark.parametrize("value, expected", [
        (2.0, "2.0"),
        (0.5, "0.5"),
        (10.0, "10.0"),
        (-4.0, "-4.0"),
        (0.0, "0.0"),
        (-0.0, "-0.0"),
        (0.001, "0.001"),
        (1234567.0, "1234567.0"),
        (9999999.0, "9999999.0"),
        (1e7, "1.0E7"),
        (12345678.0, "1.2345678E7"),
        (1e-4, "1.0E-4"),
        (1.5e-5, "1.5E-5"),
        (-2.5e-7, "-2.5E-7"),
        (1e21, "1.0E21"),
        (math.pi, "3.141592653589793"),
        (1 / 3, "0.3333333333333333"),
    ])
    def test_values(self, value, expected):
        assert numbers.format_number(value) == expected

    def test_specials(self):
        assert numbers.format_number(math.nan) == "NaN"
        assert numbers.format_number(math.inf) == "Infinity"
        assert numbers.format_number(-math.inf) == "-Infinity"

    def test_formatted_text_parses_back(self):
        for value in (1e7, 1.5e-5, 123.456, -0.001, 6.02e23):
            assert numbers.parse_number(numbers.format_number(value)) == value


class TestArithmetic:
    def test_divide_by_zero(self):
        assert numbers.divide(1.0, 0.0) == math.inf
        assert numbers.divide(-1.0, 0.0) == -math.inf
        assert numbers.divide(1.0, -0.0) == -math.inf
        assert math.isnan(numbers.divide(0.0, 0.0))

    def test_remainder(self):
        assert numbers.remainder(7.0, 3.0) == 1.0
        assert numbers.remainder(-7.0, 3.0) == -1.0
        assert numbers.remainder(7.0, -3.0) == 1.0
        assert numbers.remainder(5.5, 2.0) == 1.5
        assert math.isnan(numbers.remainder(7.0, 0.0))
        assert math.isnan(numbers.remainder(math.inf, 2.0))
        assert numbers.remainder(7.0, math.inf) == 7.0

    def test_power(self):
        assert numbers.power(2.0, 3.0) == 8.0
        assert numbers.power(2.0, -1.0) == 0.5
        assert numbers.power(0.0, -1.0) == math.inf
        assert numbers.power(10.0, 400.0) == math.inf
        assert math.isnan(numbers.power(-8.0, 1 / 3))
        assert numbers.power(math.nan, 0.0) == 1.0

    def test_power_nan_exponent(self):
        assert math.isnan(numbers.power(1.0, math.nan))
        assert math.isnan(numbers.power(2.0, math.nan))

    def test_power_unit_base_infinite_exponent(self):
        assert math.isnan(numbers.power(1.0, math.inf))
        assert math.isnan(numbers.power(-1.0, -math.inf))

    def test_square_root(self):
        assert numbers.square_root(16.0) == 4.0
        assert numbers.square_root(math.inf) == math.inf
        assert math.isnan(numbers.square_root(-1.0))

    def test_reciprocal(self):
        assert numbers.reciprocal(4.0) == 0.25
        assert numbers.reciprocal(math.inf) == 0.0

    def test_overflow(self):
        assert numbers.multiply(1e308, 10.0) == math.inf
        assert numbers.add(1e308, 1e308) == math.inf
        assert math.isnan(numbers.subtract(math.inf, math.inf))


class TestApplyOperator:
    @pytest.mark.parametrize("operator, expected", [
        ("+", 8.0), ("-", 4.0), ("*", 12.0), ("/", 3.0), ("^", 36.0), ("%", 0.0),
    ])
    def test_known(self, operator, expected):
        assert numbers.apply_operator(operator, 6.0, 2.0) == expected

    @pytest.mark.parametrize("operator", ["", "?", "sqrt"])
    def test_unknown_returns_right_operand(self, operator):
        assert numbers.apply_operator(operator, 6.0, 2.0) == 2.0
