# calculator.py

"""
Calculator session: the last computed result plus a set of registers.

Front ends talk to the core only through Calculator.evaluate and
Calculator.store (or their non-raising try_* forms). Each Calculator owns its
own registers; nothing is shared between sessions.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, Optional

from .errors import (
    PARSE_ERRORS,
    CalculatorError,
    InvalidExpressionError,
    InvalidRegisterError,
    NoResultToStoreError,
    UnknownRegisterError,
)
from .fraction import BigFraction
from .parser import evaluate_expression

logger = logging.getLogger(__name__)

# A line made only of letters is a register lookup, not an expression.
_BARE_REGISTER_RE = re.compile(r'[a-zA-Z]+')


@dataclass
class Outcome:
    """Result of a non-raising session call."""
    ok: bool
    value: Optional[BigFraction] = None
    error: Optional[CalculatorError] = None

    @property
    def message(self) -> str:
        if self.ok:
            return "" if self.value is None else str(self.value)
        return str(self.error)


class Calculator:
    """
    Performs fraction arithmetic and stores results in registers.

    Attributes:
        last_result: most recent successful evaluation, or None
        strict: reject trailing tokens left over after a complete expression
    """

    def __init__(self, strict: bool = False):
        self.last_result: Optional[BigFraction] = None
        self.strict = strict
        self._registers: Dict[str, BigFraction] = {}

    @property
    def registers(self) -> Dict[str, BigFraction]:
        """Snapshot of the register store."""
        return dict(self._registers)

    def evaluate(self, text: str) -> BigFraction:
        """
        Evaluate an expression or, for an all-letter input, recall a register.

        Args:
            text: expression with whitespace between tokens, e.g. "1/2 + 3"

        Returns:
            The value, which also becomes last_result.

        Raises:
            InvalidExpressionError: for any malformed input or unknown register
            DivisionByZeroError: when the expression divides by zero
        """
        try:
            result = self._evaluate(text)
        except PARSE_ERRORS as e:
            logger.debug("Rejected %r: %s", text, e)
            raise InvalidExpressionError(text) from None
        self.last_result = result
        logger.debug("Evaluated %r = %s", text, result)
        return result

    def _evaluate(self, text: str) -> BigFraction:
        stripped = text.strip()
        if _BARE_REGISTER_RE.fullmatch(stripped):
            # Only the first letter names the register ("ab" reads 'a').
            name = stripped[0]
            if name not in self._registers:
                raise UnknownRegisterError(name)
            return self._registers[name]
        return evaluate_expression(text, self._registers, strict=self.strict)

    def store(self, selector: str) -> None:
        """
        Copy last_result into the register named by the selector's final
        character, so "STOREa" and "a" both select register 'a'.
        """
        if self.last_result is None:
            raise NoResultToStoreError()
        if not selector:
            raise InvalidRegisterError("No register given to store into.")
        name = selector[-1]
        self._registers[name] = self.last_result
        logger.debug("Stored %s in register %r", self.last_result, name)

    def try_evaluate(self, text: str) -> Outcome:
        try:
            return Outcome(True, value=self.evaluate(text))
        except CalculatorError as e:
            return Outcome(False, error=e)

    def try_store(self, selector: str) -> Outcome:
        try:
            self.store(selector)
        except CalculatorError as e:
            return Outcome(False, error=e)
        return Outcome(True, value=self.last_result)
