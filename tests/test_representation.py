from fractions import Fraction

import pytest

from lemkis.representation import Expansion, dexpand, expand


def test_expand_decimal_with_period():
    assert expand(Fraction(64, 30), 10) == Expansion("2", "1", "3")


def test_expand_hexadecimal_with_period():
    assert expand(Fraction(91, 80), 16) == Expansion("1", "2", "3")


def test_expand_terminating_binary_has_empty_period():
    result = expand(Fraction(3, 2), 2)
    assert (result.whole, result.fractional, result.period) == ("1", "1", "")


def test_expand_accepts_int():
    assert expand(7, 10) == Expansion("7", "", "")


def test_expand_letter_case_of_digits():
    assert expand(Fraction(251, 16), 16) == Expansion("f", "B", "")


def test_expand_whole_zero():
    assert expand(Fraction(1, 4), 2) == Expansion("0", "01", "")


def test_str_format():
    assert str(Expansion("2", "1", "3")) == "2.1(3)"
    assert str(expand(Fraction(64, 30), 10)) == "2.1(3)"


@pytest.mark.parametrize(
    "whole,fractional,period,base,numerator,denominator",
    [
        ("1", "0", "1", 10, 91, 90),
        ("1", "00", "01", 2, 13, 12),
        ("10", "01", "12", 8, 32329, 4032),
        ("10", "ca", "0", 16, 2149, 128),
    ],
)
def test_dexpand_cases(whole, fractional, period, base, numerator, denominator):
    result = dexpand(Expansion(whole, fractional, period), base)
    assert result == Fraction(numerator, denominator)


def test_dexpand_accepts_upper_case_digits():
    assert dexpand(Expansion("10", "CA", "0"), 16) == Fraction(2149, 128)


def test_dexpand_empty_period_adds_nothing():
    assert dexpand(Expansion("1", "1", ""), 2) == Fraction(3, 2)


@pytest.mark.parametrize(
    "value,base",
    [
        (Fraction(0), 10),
        (Fraction(5), 7),
        (Fraction(1, 12), 10),
        (Fraction(1, 7), 10),
        (Fraction(75, 56), 8),
        (Fraction(7, 3), 3),
        (Fraction(355, 113), 16),
        (Fraction(1000, 999), 36),
        (Fraction(22, 6), 2),
    ],
)
def test_round_trip(value, base):
    assert dexpand(expand(value, base), base) == value


@pytest.mark.parametrize("base", [2, 3, 10, 16])
def test_expansion_round_trip_reverses(base):
    expansion = expand(Fraction(64, 30), base)
    assert expand(dexpand(expansion, base), base) == expansion


@pytest.mark.parametrize("base", [0, 1, 37])
def test_invalid_base(base):
    with pytest.raises(ValueError):
        expand(Fraction(1, 2), base)
    with pytest.raises(ValueError):
        dexpand(Expansion("1", "", ""), base)


def test_negative_fraction_rejected():
    with pytest.raises(ValueError):
        expand(Fraction(-1, 2), 10)


def test_invalid_digit_rejected():
    with pytest.raises(ValueError):
        dexpand(Expansion("1", "9", ""), 8)