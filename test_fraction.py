# test_fraction.py

import math

import pytest

from fraction_calc.errors import DivisionByZeroError, FractionFormatError
from fraction_calc.fraction import ZERO, BigFraction, parse_integer

# ---------------------------
# Construction
# ---------------------------

def test_construction_reduces_to_lowest_terms():
    f = BigFraction(2, 4)
    assert (f.numerator, f.denominator) == (1, 2)


@pytest.mark.parametrize("num, denom", [
    (6, 8), (-6, 8), (6, -8), (-6, -8), (0, 5), (0, -5), (17, 1), (10**30, 4 * 10**20),
])
def test_construction_is_coprime_with_positive_denominator(num, denom):
    f = BigFraction(num, denom)
    assert f.denominator > 0
    assert math.gcd(f.numerator, f.denominator) == 1
    assert f.numerator * denom == num * f.denominator


def test_negative_denominator_moves_sign_to_numerator():
    f = BigFraction(3, -6)
    assert (f.numerator, f.denominator) == (-1, 2)
    g = BigFraction(-3, -6)
    assert (g.numerator, g.denominator) == (1, 2)


def test_zero_is_zero_over_one():
    f = BigFraction(0, -7)
    assert (f.numerator, f.denominator) == (0, 1)
    assert str(f) == "0"
    assert f == ZERO


def test_zero_denominator_fails():
    with pytest.raises(DivisionByZeroError):
        BigFraction(1, 0)


def test_whole_number_construction():
    f = BigFraction(42)
    assert (f.numerator, f.denominator) == (42, 1)


def test_arbitrary_precision():
    big = 2 ** 200
    f = BigFraction(big, big * 3)
    assert f == BigFraction(1, 3)
    assert str(BigFraction(big)) == str(big)

# ---------------------------
# Parsing
# ---------------------------

def test_parse_simple_fraction():
    f = BigFraction.parse("3/4")
    assert (f.numerator, f.denominator) == (3, 4)


def test_parse_reduces_and_keeps_sign():
    assert BigFraction.parse("-6/8") == BigFraction(-3, 4)
    assert BigFraction.parse("+2/4") == BigFraction(1, 2)


@pytest.mark.parametrize("text", ["3", "", "/", "3/", "/4", "a/b", "1.5/2", "1/2/3", " 1/2", "1_0/3"])
def test_parse_rejects_malformed_literals(text):
    with pytest.raises(FractionFormatError):
        BigFraction.parse(text)


@pytest.mark.parametrize("text", ["3/-2", "1/0", "0/0", "-1/-2"])
def test_parse_rejects_non_positive_denominator(text):
    with pytest.raises(FractionFormatError) as e:
        BigFraction.parse(text)
    assert text in str(e.value)


def test_format_error_is_value_error():
    with pytest.raises(ValueError):
        BigFraction.parse("nope")


def test_parse_integer_is_strict():
    assert parse_integer("-12") == -12
    assert parse_integer("+7") == 7
    for bad in ["", "1 ", "1_000", "x", "-"]:
        with pytest.raises(ValueError):
            parse_integer(bad)

# ---------------------------
# Arithmetic
# ---------------------------

def test_add():
    assert BigFraction(1, 2).add(BigFraction(1, 3)) == BigFraction(5, 6)


def test_subtract():
    assert BigFraction(1, 2).subtract(BigFraction(1, 3)) == BigFraction(1, 6)
    assert BigFraction(1, 3).subtract(BigFraction(1, 2)) == BigFraction(-1, 6)


def test_multiply():
    assert BigFraction(2, 3).multiply(BigFraction(9, 4)) == BigFraction(3, 2)


def test_divide():
    assert BigFraction(1, 2).divide(BigFraction(3, 4)) == BigFraction(2, 3)


def test_divide_by_negative_normalizes_sign():
    f = BigFraction(1, 2).divide(BigFraction(-1, 4))
    assert (f.numerator, f.denominator) == (-2, 1)


def test_divide_by_zero_fails():
    with pytest.raises(DivisionByZeroError):
        BigFraction(1, 2).divide(ZERO)


def test_division_by_zero_is_zero_division_error():
    with pytest.raises(ZeroDivisionError):
        BigFraction(1) / 0


def test_operations_do_not_mutate_operands():
    a = BigFraction(1, 2)
    b = BigFraction(1, 3)
    a.add(b)
    a.multiply(b)
    assert a == BigFraction(1, 2)
    assert b == BigFraction(1, 3)


def test_operator_protocol():
    half = BigFraction(1, 2)
    assert half + half == 1
    assert half - 1 == BigFraction(-1, 2)
    assert 1 - half == half
    assert 3 * half == BigFraction(3, 2)
    assert 1 / half == BigFraction(2)
    assert -half == BigFraction(-1, 2)
    assert half == BigFraction(2, 4)
    assert BigFraction(4, 2) == 2


def test_equal_values_hash_equal():
    assert hash(BigFraction(2, 4)) == hash(BigFraction(1, 2))
    assert len({BigFraction(1, 2), BigFraction(3, 6)}) == 1


def test_whole_numbers_hash_like_ints():
    assert BigFraction(2) == 2
    assert hash(BigFraction(2)) == hash(2)
    assert hash(BigFraction(-10 ** 30)) == hash(-10 ** 30)
    assert len({2, BigFraction(2)}) == 1
    assert {BigFraction(6, 3): "two"}[2] == "two"


def test_bools_are_not_fractions():
    assert BigFraction(1) != True  # noqa: E712
    assert BigFraction(0) != False  # noqa: E712
    with pytest.raises(TypeError):
        BigFraction(1, 2) + True

# ---------------------------
# Rendering
# ---------------------------

@pytest.mark.parametrize("f, text", [
    (BigFraction(0), "0"),
    (BigFraction(5), "5"),
    (BigFraction(-5), "-5"),
    (BigFraction(10, 5), "2"),
    (BigFraction(3, 4), "3/4"),
    (BigFraction(3, -4), "-3/4"),
])
def test_canonical_string(f, text):
    assert str(f) == text


def test_whole_number_string_is_decimal():
    for n in [0, 1, -1, 123456789, -(10 ** 40)]:
        assert str(BigFraction(n)) == str(n)


def test_approximate_double():
    assert BigFraction(1, 4).to_float() == 0.25
    assert math.isclose(float(BigFraction(1, 3)), 1 / 3)


def test_repr():
    assert repr(BigFraction(2, -4)) == "BigFraction(-1, 2)"
