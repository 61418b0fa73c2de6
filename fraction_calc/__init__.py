"""Exact fraction calculator with single-letter registers."""

from .calculator import Calculator, Outcome
from .errors import (
    CalculatorError,
    DivisionByZeroError,
    EmptyExpressionError,
    ErrorKind,
    FractionFormatError,
    InvalidExpressionError,
    InvalidOperandError,
    InvalidRegisterError,
    NoResultToStoreError,
    UnknownRegisterError,
)
from .fraction import BigFraction

__version__ = "0.1.0"

__all__ = [
    "BigFraction",
    "Calculator",
    "CalculatorError",
    "DivisionByZeroError",
    "EmptyExpressionError",
    "ErrorKind",
    "FractionFormatError",
    "InvalidExpressionError",
    "InvalidOperandError",
    "InvalidRegisterError",
    "NoResultToStoreError",
    "Outcome",
    "UnknownRegisterError",
]
