"""expr-calc - Arithmetic Expression Calculator.

Evaluates infix arithmetic expressions with:
- A tokenizer for numbers, operators and parentheses
- A recursive-descent parser with operator precedence and unary signs
- A bounded, thread-safe calculation history
- A click/rich command-line shell
"""

__version__ = "1.0.0"
__author__ = "Morten Elmstroem Hansen"

from .errors import (
    CalculatorError,
    CalcError,
    Phase,
    EmptyExpressionError,
    TokenizeError,
    InvalidCharacterError,
    InvalidNumberError,
    ParseError,
    DivisionByZeroError,
    UnmatchedParenthesisError,
    NestingTooDeepError,
    TrailingTokensError,
    UnexpectedTokenError,
)
from .tokenizer import TokenKind, Token, TokenStream, tokenize
from .parser import Parser, parse
from .history import HistoryEntry, CalculationHistory
from .calculator import Calculator
from .config import CalculatorConfig, load_config

__all__ = [
    # Errors
    "CalculatorError",
    "CalcError",
    "Phase",
    "EmptyExpressionError",
    "TokenizeError",
    "InvalidCharacterError",
    "InvalidNumberError",
    "ParseError",
    "DivisionByZeroError",
    "UnmatchedParenthesisError",
    "NestingTooDeepError",
    "TrailingTokensError",
    "UnexpectedTokenError",
    # Tokenizer
    "TokenKind",
    "Token",
    "TokenStream",
    "tokenize",
    # Parser
    "Parser",
    "parse",
    # History
    "HistoryEntry",
    "CalculationHistory",
    # Facade
    "Calculator",
    # Config
    "CalculatorConfig",
    "load_config",
]
