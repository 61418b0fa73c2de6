# errors.py

"""
Error taxonomy for the fraction calculator.

Every failure the core can report is a CalculatorError carrying an ErrorKind.
Parse-level errors (format, operand, register, empty input) are folded into
InvalidExpressionError at the session boundary; division by zero and
store-before-evaluate keep their own identity.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure categories."""
    FORMAT = "format"
    INVALID_OPERAND = "invalid_operand"
    UNKNOWN_REGISTER = "unknown_register"
    EMPTY_EXPRESSION = "empty_expression"
    DIVISION_BY_ZERO = "division_by_zero"
    NO_RESULT_TO_STORE = "no_result_to_store"
    INVALID_REGISTER = "invalid_register"
    INVALID_EXPRESSION = "invalid_expression"


class CalculatorError(Exception):
    """Base class for calculator errors."""
    kind: ErrorKind


class FractionFormatError(CalculatorError, ValueError):
    """Raised when a fraction literal is malformed."""
    kind = ErrorKind.FORMAT


class InvalidOperandError(CalculatorError):
    """Raised when a token cannot be used as an operand."""
    kind = ErrorKind.INVALID_OPERAND


class UnknownRegisterError(CalculatorError):
    """Raised when an expression names a register holding no value."""
    kind = ErrorKind.UNKNOWN_REGISTER

    def __init__(self, name: str):
        super().__init__(f"Variable not found: {name}")
        self.name = name


class EmptyExpressionError(CalculatorError):
    kind = ErrorKind.EMPTY_EXPRESSION

    def __init__(self):
        super().__init__("Empty expression")


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self, message: str = "Division by zero is not allowed."):
        super().__init__(message)


class NoResultToStoreError(CalculatorError):
    kind = ErrorKind.NO_RESULT_TO_STORE

    def __init__(self):
        super().__init__("No result to store.")


class InvalidRegisterError(CalculatorError):
    """Raised when a store selector does not name a register."""
    kind = ErrorKind.INVALID_REGISTER


class InvalidExpressionError(CalculatorError):
    """Uniform wrapper for any parse-level failure of a whole input line."""
    kind = ErrorKind.INVALID_EXPRESSION

    def __init__(self, expression: str):
        super().__init__(f"Invalid expression: {expression}")
        self.expression = expression


# Errors folded into InvalidExpressionError by Calculator.evaluate.
PARSE_ERRORS = (
    FractionFormatError,
    InvalidOperandError,
    UnknownRegisterError,
    EmptyExpressionError,
)
