"""Tokenizer for arithmetic expressions.

Splits an expression string into NUMBER, operator and parenthesis tokens.
Spaces and tabs separate tokens and are otherwise ignored.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from .errors import InvalidCharacterError, InvalidNumberError


class TokenKind(Enum):
    """Kinds of lexical units."""

    NUMBER = "number"
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"


# Single-character tokens
SYMBOLS = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
}

WHITESPACE = frozenset(" \t")
DIGITS = frozenset("0123456789")


@dataclass(frozen=True)
class Token:
    """A classified lexical unit."""

    kind: TokenKind
    text: str
    position: int

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class TokenStream:
    """Ordered tokens produced from one source string."""

    tokens: Tuple[Token, ...]
    source: str = ""

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __getitem__(self, index: int) -> Token:
        return self.tokens[index]

    @property
    def kinds(self) -> List[TokenKind]:
        """Token kinds in source order."""
        return [t.kind for t in self.tokens]


def _number_token(text: str, start: int) -> Token:
    """Validate a pending literal and build its token."""
    whole, dot, fraction = text.partition(".")
    if not whole or (dot and not fraction) or "." in fraction:
        raise InvalidNumberError(text, start)
    return Token(TokenKind.NUMBER, text, start)


def tokenize(expression: str) -> TokenStream:
    """Convert an expression string into a token stream.

    Args:
        expression: Raw expression text.

    Returns:
        TokenStream in source order.

    Raises:
        InvalidCharacterError: A character is not a digit, '.', operator,
            parenthesis, space or tab.
        InvalidNumberError: A number literal is malformed (e.g. '1.2.3', '.').
    """
    tokens: List[Token] = []
    pending: List[str] = []
    start: Optional[int] = None

    def flush():
        nonlocal start
        if pending:
            tokens.append(_number_token("".join(pending), start))
            pending.clear()
            start = None

    for position, char in enumerate(expression):
        if char in DIGITS or char == ".":
            if start is None:
                start = position
            pending.append(char)
        elif char in SYMBOLS:
            flush()
            tokens.append(Token(SYMBOLS[char], char, position))
        elif char in WHITESPACE:
            flush()
        else:
            raise InvalidCharacterError(char, position)

    flush()
    return TokenStream(tuple(tokens), expression)
