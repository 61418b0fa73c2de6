# fraction.py

"""
Exact rational numbers over Python's arbitrary-precision integers.

Design decisions
----------------
- Denominators are always positive; the sign lives in the numerator.
- Values are reduced to lowest terms on construction, so two equal
  fractions always have identical numerator/denominator pairs.
- Instances are immutable. Every arithmetic operation returns a new one.
"""

import math
import re
from typing import Union

from .errors import DivisionByZeroError, FractionFormatError

# Integers as accepted in literals: optional sign, then digits.
_INTEGER_RE = re.compile(r'[+-]?[0-9]+')


def parse_integer(text: str) -> int:
    """Parse a signed decimal integer literal, raising ValueError otherwise.

    Stricter than int(): no surrounding whitespace and no digit separators.
    """
    if not _INTEGER_RE.fullmatch(text):
        raise ValueError(f"Invalid integer literal: {text!r}")
    return int(text)


class BigFraction:
    """
    An immutable fraction kept in canonical form.

    BigFraction(3) is the whole number 3; BigFraction(2, -4) is -1/2.
    """
    __slots__ = ('_num', '_denom')

    def __init__(self, numerator: int, denominator: int = 1):
        if denominator == 0:
            raise DivisionByZeroError(f"Zero denominator: {numerator}/{denominator}")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        gcd = math.gcd(numerator, denominator)
        self._num = numerator // gcd
        self._denom = denominator // gcd

    @classmethod
    def parse(cls, text: str) -> 'BigFraction':
        """
        Build a fraction from the exact form "<int>/<int>".

        Raises FractionFormatError when the slash is missing, either side is
        not an integer, or the denominator is not positive.
        """
        numerator_str, slash, denominator_str = text.partition('/')
        if not slash:
            raise FractionFormatError(f"Invalid fraction format: {text}")
        try:
            numerator = parse_integer(numerator_str)
            denominator = parse_integer(denominator_str)
        except ValueError:
            raise FractionFormatError(f"Invalid fraction format: {text}") from None
        if denominator <= 0:
            raise FractionFormatError(f"Denominator must be positive: {text}")
        return cls(numerator, denominator)

    @property
    def numerator(self) -> int:
        return self._num

    @property
    def denominator(self) -> int:
        return self._denom

    # --------------------------
    # Arithmetic
    # --------------------------

    def add(self, other: 'BigFraction') -> 'BigFraction':
        return BigFraction(self._num * other._denom + other._num * self._denom,
                           self._denom * other._denom)

    def subtract(self, other: 'BigFraction') -> 'BigFraction':
        return BigFraction(self._num * other._denom - other._num * self._denom,
                           self._denom * other._denom)

    def multiply(self, other: 'BigFraction') -> 'BigFraction':
        return BigFraction(self._num * other._num, self._denom * other._denom)

    def divide(self, other: 'BigFraction') -> 'BigFraction':
        """Divide by other; the cross product may carry a negative denominator
        until the constructor normalises it."""
        if other._num == 0:
            raise DivisionByZeroError()
        return BigFraction(self._num * other._denom, self._denom * other._num)

    def negate(self) -> 'BigFraction':
        return BigFraction(-self._num, self._denom)

    # --------------------------
    # Conversions
    # --------------------------

    def to_float(self) -> float:
        """Approximate value, for display only."""
        return self._num / self._denom

    def __float__(self) -> float:
        return self.to_float()

    def __str__(self) -> str:
        if self._num == 0:
            return "0"
        if self._denom == 1:
            return str(self._num)
        return f"{self._num}/{self._denom}"

    def __repr__(self) -> str:
        return f"BigFraction({self._num}, {self._denom})"

    # --------------------------
    # Python protocols
    # --------------------------

    def __eq__(self, other: object) -> bool:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self._num == other._num and self._denom == other._denom

    def __hash__(self) -> int:
        # Whole numbers hash like the int they equal
        if self._denom == 1:
            return hash(self._num)
        return hash((self._num, self._denom))

    def __neg__(self) -> 'BigFraction':
        return self.negate()

    def __add__(self, other: Union['BigFraction', int]) -> 'BigFraction':
        other = _coerce(other)
        return NotImplemented if other is None else self.add(other)

    def __radd__(self, other: int) -> 'BigFraction':
        return self.__add__(other)

    def __sub__(self, other: Union['BigFraction', int]) -> 'BigFraction':
        other = _coerce(other)
        return NotImplemented if other is None else self.subtract(other)

    def __rsub__(self, other: int) -> 'BigFraction':
        other = _coerce(other)
        return NotImplemented if other is None else other.subtract(self)

    def __mul__(self, other: Union['BigFraction', int]) -> 'BigFraction':
        other = _coerce(other)
        return NotImplemented if other is None else self.multiply(other)

    def __rmul__(self, other: int) -> 'BigFraction':
        return self.__mul__(other)

    def __truediv__(self, other: Union['BigFraction', int]) -> 'BigFraction':
        other = _coerce(other)
        return NotImplemented if other is None else self.divide(other)

    def __rtruediv__(self, other: int) -> 'BigFraction':
        other = _coerce(other)
        return NotImplemented if other is None else other.divide(self)


def _coerce(value):
    if isinstance(value, BigFraction):
        return value
    # bool is an int subclass but never a sensible operand here
    if isinstance(value, int) and not isinstance(value, bool):
        return BigFraction(value)
    return None


ZERO = BigFraction(0)
