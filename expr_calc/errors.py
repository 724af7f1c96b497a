"""Error types for expr-calc.

Every failure is raised where it is detected:
- TokenizeError subclasses come from the tokenizer
- ParseError subclasses come from the parser/evaluator
- CalcError wraps either one with the phase that failed
"""

from enum import Enum
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .tokenizer import Token


class Phase(Enum):
    """Stage of a calculation that produced an error."""

    LEXING = "lexing"
    PARSING = "parsing"


class CalculatorError(Exception):
    """Base class for all calculator errors."""


class EmptyExpressionError(CalculatorError):
    """Input was empty or whitespace-only."""

    def __init__(self):
        super().__init__("Expression is empty")


class TokenizeError(CalculatorError):
    """Input could not be split into tokens."""


class InvalidCharacterError(TokenizeError):
    """A character outside the expression alphabet was found."""

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"Invalid character {char!r} at position {position}")


class InvalidNumberError(TokenizeError):
    """A number literal is malformed or cannot be converted to float."""

    def __init__(self, text: str, position: Optional[int] = None):
        self.text = text
        self.position = position
        if position is None:
            message = f"Invalid number {text!r}"
        else:
            message = f"Invalid number {text!r} at position {position}"
        super().__init__(message)


class ParseError(CalculatorError):
    """Token sequence does not form a valid expression."""


class DivisionByZeroError(ParseError):
    """Right operand of '/' evaluated to zero."""

    def __init__(self):
        super().__init__("Division by zero")


class UnmatchedParenthesisError(ParseError):
    """An opening parenthesis has no closing partner."""

    def __init__(self, position: int):
        self.position = position
        super().__init__(f"Unmatched '(' at position {position}")


class NestingTooDeepError(ParseError):
    """Parentheses are nested deeper than the evaluator can recurse."""

    def __init__(self):
        super().__init__("Expression is nested too deeply")


class TrailingTokensError(ParseError):
    """Tokens remain after a complete expression."""

    def __init__(self, token: "Token"):
        self.token = token
        super().__init__(
            f"Unexpected trailing {token.text!r} at position {token.position}"
        )


class UnexpectedTokenError(ParseError):
    """A number, '(' or sign was expected but something else was found."""

    def __init__(self, token: Optional["Token"]):
        self.token = token
        if token is None:
            message = "Unexpected end of expression"
        else:
            message = f"Unexpected {token.text!r} at position {token.position}"
        super().__init__(message)


class CalcError(CalculatorError):
    """A tokenizer or parser error tagged with the phase it came from."""

    def __init__(self, phase: Phase, cause: CalculatorError):
        self.phase = phase
        self.cause = cause
        super().__init__(f"{phase.value} error: {cause}")
