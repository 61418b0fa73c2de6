# cli.py

"""
Command-line front ends for the fraction calculator.

Two modes share one entry point:

- Batch: every non-option argument is processed in order. Arguments starting
  with STORE save the last result (STOREa saves into register 'a'); anything
  else is evaluated and printed as "<arg> = <result>".
- Interactive: with no arguments, a prompt_toolkit REPL reads one expression
  or command per line until 'quit' or Ctrl-D.

Both modes report errors and keep going; a failed line leaves the session
untouched.
"""

import argparse
import logging
import re
import sys
from typing import List, Optional, Tuple

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory
from pydantic import ValidationError

from .calculator import Calculator
from .config import CalculatorSettings, load_settings
from .fraction import BigFraction

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r'-?[0-9]+(/[0-9]+)?')
_OPERATOR_RE = re.compile(r'[+\-*/]')


HELP_TEXT = """
Fraction Calculator Help
------------------------
Separate every number and operator with spaces.

Supported operations:
  - Addition:           1/2 + 1/3
  - Subtraction:        3 - 4/5
  - Multiplication:     2/3 * 6
  - Division:           7 / 8
  - Registers:          a * 2     (single letters, set with 'store')

Precedence: * and / bind tighter than + and -, all left-associative.
Parentheses are not supported.

Commands:
  store X   : Save the last result in register X
  help      : Show this help message
  quit/exit : Exit the calculator

Examples:
  > 1/2 + 1/3
  Result: 5/6
  > store a
  Value a stored.
  > a * 6
  Result: 5
"""


def format_result(value: BigFraction, approximate: bool = False) -> str:
    """Canonical text of value, optionally followed by a decimal approximation."""
    text = str(value)
    if approximate and value.denominator != 1:
        try:
            text += f" ≈ {value.to_float():.10g}"
        except OverflowError:
            logger.debug("No float approximation for %s", text)
    return text


def is_valid_expression(line: str) -> bool:
    """Reject two numeric literals or two operators in a row."""
    tokens = line.split()
    for current, following in zip(tokens, tokens[1:]):
        if _NUMBER_RE.fullmatch(current) and _NUMBER_RE.fullmatch(following):
            return False
        if _OPERATOR_RE.fullmatch(current) and _OPERATOR_RE.fullmatch(following):
            return False
    return True


# ---------------------------
# Batch runner
# ---------------------------

def run_batch(arguments: List[str], calculator: Calculator, approximate: bool = False) -> int:
    """Process arguments in order; returns 1 if any of them failed."""
    status = 0
    for arg in arguments:
        if arg.startswith("STORE"):
            outcome = calculator.try_store(arg)
            if outcome.ok:
                continue
        else:
            outcome = calculator.try_evaluate(arg)
            if outcome.ok:
                print(f"{arg} = {format_result(outcome.value, approximate)}")
                continue
        print(f"Error: {outcome.message}", file=sys.stderr)
        status = 1
    return status


# ---------------------------
# REPL
# ---------------------------

class REPL:
    """Read-Eval-Print Loop over a single Calculator session."""

    def __init__(self, settings: Optional[CalculatorSettings] = None,
                 calculator: Optional[Calculator] = None):
        self.settings = settings or CalculatorSettings()
        self.calculator = calculator or Calculator(strict=self.settings.strict)
        self.running = True
        self._session: Optional[PromptSession] = None

    def _prompt_session(self) -> PromptSession:
        if self._session is None:
            self._session = PromptSession(history=FileHistory(self.settings.history_file))
        return self._session

    def _store_command(self, line: str) -> Tuple[bool, str]:
        parts = line.split()
        if len(parts) != 2 or len(parts[1]) != 1:
            return False, "Error: Invalid store command format"
        register = parts[1]
        outcome = self.calculator.try_store(register)
        if not outcome.ok:
            return False, f"Error: {outcome.message}"
        return True, f"Value {register} stored."

    def evaluate_line(self, line: str) -> Tuple[bool, str]:
        """Evaluate a single line (either command or expression). Returns (ok, output)."""
        s = line.strip()
        lowered = s.lower()
        if lowered in ('quit', 'exit'):
            self.running = False
            return True, "Calculator terminated."
        if lowered == 'help':
            return True, HELP_TEXT.strip()
        if lowered == 'store' or lowered.startswith('store '):
            return self._store_command(s)
        if not is_valid_expression(s):
            return False, "Error: Invalid expression format"
        outcome = self.calculator.try_evaluate(s)
        if not outcome.ok:
            return False, f"Error: {outcome.message}"
        return True, "Result: " + format_result(outcome.value, self.settings.show_approximation)

    def run(self) -> None:
        """Main REPL loop."""
        print("Interactive Fraction Calculator")
        print("Enter expressions or commands (e.g., 'store A', 'help', 'quit'):")
        session = self._prompt_session()
        while self.running:
            try:
                line = session.prompt(self.settings.prompt)
            except KeyboardInterrupt:
                print("^C")
                continue
            except EOFError:
                print("Calculator terminated.")
                break
            if not line.strip():
                continue
            ok, out = self.evaluate_line(line)
            print(out, file=sys.stdout if ok else sys.stderr)


# ---------------------------
# Main Entry Point
# ---------------------------

def build_parser() -> argparse.ArgumentParser:
    # Expressions are collected from the unparsed arguments in parse_arguments(), so
    # that negative literals such as -1/2 are not mistaken for options.
    parser = argparse.ArgumentParser(
        prog="fraction-calc",
        usage="%(prog)s [options] [EXPRESSION | STORE<letter>] ...",
        description="Exact fraction calculator with single-letter registers. "
                    "Expressions and STORE<letter> commands run in order; "
                    "with none, an interactive session starts.",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Reject tokens left over after a complete expression.",
    )
    parser.add_argument(
        "--approx",
        action="store_true",
        default=None,
        help="Show a decimal approximation next to each result.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level (default: WARNING, or FRACTION_CALC_LOG_LEVEL).",
    )
    return parser


def parse_arguments(parser: argparse.ArgumentParser,
                    argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse options and keep every other argument, in order, as an expression."""
    args, rest = parser.parse_known_args(argv)
    if "--" in rest:
        rest.remove("--")
    unknown = [a for a in rest
               if len(a) > 1 and a.startswith("-") and " " not in a and not _NUMBER_RE.fullmatch(a)]
    if unknown:
        parser.error(f"unrecognized arguments: {' '.join(unknown)}")
    args.expressions = rest
    return args


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parse_arguments(parser, argv)

    settings = load_settings()
    overrides = {}
    if args.strict is not None:
        overrides["strict"] = args.strict
    if args.approx is not None:
        overrides["show_approximation"] = args.approx
    if args.log_level:
        overrides["log_level"] = args.log_level
    if overrides:
        # Re-validate so a bad --log-level is rejected like a bad env value
        try:
            settings = CalculatorSettings(**{**settings.model_dump(), **overrides})
        except ValidationError as e:
            parser.error(str(e))

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.debug("Settings: %s", settings)

    calculator = Calculator(strict=settings.strict)
    if args.expressions:
        return run_batch(args.expressions, calculator, settings.show_approximation)
    REPL(settings, calculator).run()
    return 0


if __name__ == '__main__':
    sys.exit(main())
