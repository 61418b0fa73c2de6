# parser.py

"""
Tokenizer and recursive descent parser for fraction expressions.

Input is split on whitespace, so every operator and operand must be its own
token ("1/2 + 3", not "1/2+3"). Each token is classified once into a closed
set of token types and the parser dispatches on that type. Evaluation happens
during the parse: each grammar rule returns a BigFraction.

Grammar:
    expression : term ((PLUS|MINUS) term)*
    term       : operand ((MUL|DIV) operand)*
    operand    : INTEGER | FRACTION | REGISTER
"""

from dataclasses import dataclass
from typing import List, Mapping, Optional, Union

from .errors import (
    DivisionByZeroError,
    EmptyExpressionError,
    FractionFormatError,
    InvalidOperandError,
    UnknownRegisterError,
)
from .fraction import ZERO, BigFraction, parse_integer


# ---------------------------
# Tokens
# ---------------------------

class TokenType:
    """Enumeration of token types."""
    OPERATOR = 'OPERATOR'
    REGISTER = 'REGISTER'
    INTEGER = 'INTEGER'
    FRACTION = 'FRACTION'
    INVALID = 'INVALID'


OPERATORS = ('+', '-', '*', '/')
ADDITIVE = ('+', '-')
MULTIPLICATIVE = ('*', '/')


@dataclass(frozen=True)
class Token:
    """A classified token. value is the operator symbol, the register name,
    the literal's BigFraction, or None for INVALID."""
    type: str
    text: str
    value: Union[str, BigFraction, None] = None


def tokenize(text: str) -> List[str]:
    """Split on runs of whitespace; blank input gives no tokens."""
    return text.split()


def classify_token(text: str) -> Token:
    """Classify a raw token by its shape."""
    if text in OPERATORS:
        return Token(TokenType.OPERATOR, text, text)
    if len(text) == 1 and text.isalpha():
        return Token(TokenType.REGISTER, text, text)
    try:
        return Token(TokenType.FRACTION, text, BigFraction.parse(text))
    except FractionFormatError:
        pass
    try:
        return Token(TokenType.INTEGER, text, BigFraction(parse_integer(text)))
    except ValueError:
        return Token(TokenType.INVALID, text)


# ---------------------------
# Parser
# ---------------------------

class ExpressionParser:
    """
    Parses and evaluates one expression against a register mapping.

    With strict=False, parsing stops at the first token that is not an
    expected operator and whatever follows is ignored ("2 + 3 4" gives 5).
    With strict=True that leftover token is reported as an invalid operand.
    """

    def __init__(self, text: str, registers: Optional[Mapping[str, BigFraction]] = None,
                 strict: bool = False):
        self.tokens: List[Token] = [classify_token(t) for t in tokenize(text)]
        self.registers: Mapping[str, BigFraction] = registers if registers is not None else {}
        self.strict = strict
        self.pos = 0

    def _current(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def _advance(self) -> Token:
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def _at_operator(self, symbols) -> bool:
        tok = self._current()
        return tok is not None and tok.type == TokenType.OPERATOR and tok.value in symbols

    def parse(self) -> BigFraction:
        if not self.tokens:
            raise EmptyExpressionError()
        result = self.parse_expression()
        if self.strict and self._current() is not None:
            raise InvalidOperandError(f"Unexpected token: {self._current().text}")
        return result

    def parse_expression(self) -> BigFraction:
        """expression : term ((PLUS|MINUS) term)*"""
        left = self.parse_term()
        while self._at_operator(ADDITIVE):
            op = self._advance().value
            right = self.parse_term()
            left = left.add(right) if op == '+' else left.subtract(right)
        return left

    def parse_term(self) -> BigFraction:
        """term : operand ((MUL|DIV) operand)*"""
        left = self.parse_operand()
        while self._at_operator(MULTIPLICATIVE):
            op = self._advance().value
            right = self.parse_operand()
            if op == '*':
                left = left.multiply(right)
            else:
                if right == ZERO:
                    raise DivisionByZeroError()
                left = left.divide(right)
        return left

    def parse_operand(self) -> BigFraction:
        tok = self._current()
        if tok is None:
            previous = self.tokens[self.pos - 1].text
            raise InvalidOperandError(f"Missing operand after: {previous}")
        if tok.type == TokenType.OPERATOR:
            raise InvalidOperandError(f"Invalid operand: {tok.text}")
        self._advance()
        if tok.type == TokenType.REGISTER:
            try:
                return self.registers[tok.value]
            except KeyError:
                raise UnknownRegisterError(tok.value) from None
        if tok.type in (TokenType.FRACTION, TokenType.INTEGER):
            return tok.value
        raise InvalidOperandError(f"Invalid operand: {tok.text}")


def evaluate_expression(text: str, registers: Optional[Mapping[str, BigFraction]] = None,
                        strict: bool = False) -> BigFraction:
    """Parse and evaluate text in one call."""
    return ExpressionParser(text, registers, strict=strict).parse()
