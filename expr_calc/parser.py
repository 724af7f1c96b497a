"""Recursive-descent parser and evaluator.

Grammar (evaluated while parsing, no tree is built):

    expression := term (('+' | '-') term)*
    term       := factor (('*' | '/') factor)*
    factor     := NUMBER | '(' expression ')' | ('+' | '-') factor
"""

from typing import Optional

from .errors import (
    DivisionByZeroError,
    InvalidNumberError,
    NestingTooDeepError,
    TrailingTokensError,
    UnexpectedTokenError,
    UnmatchedParenthesisError,
)
from .tokenizer import Token, TokenKind, TokenStream


class Parser:
    """Evaluates one token stream.

    Each instance owns its cursor, so separate parsers can run
    independently on separate inputs.
    """

    def __init__(self, tokens: TokenStream):
        self.tokens = tokens
        self.position = 0

    def parse(self) -> float:
        """Evaluate the whole stream.

        Returns:
            The numeric result.

        Raises:
            ParseError: The stream is not a single well-formed expression.
            InvalidNumberError: A NUMBER token cannot be converted.
        """
        try:
            result = self._parse_expression()
        except RecursionError:
            raise NestingTooDeepError() from None
        leftover = self._peek()
        if leftover is not None:
            raise TrailingTokensError(leftover)
        return result

    def _peek(self) -> Optional[Token]:
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        return None

    def _advance(self) -> Token:
        token = self.tokens[self.position]
        self.position += 1
        return token

    def _match(self, *kinds: TokenKind) -> Optional[Token]:
        """Consume the next token if it is one of kinds."""
        token = self._peek()
        if token is not None and token.kind in kinds:
            return self._advance()
        return None

    def _parse_expression(self) -> float:
        left = self._parse_term()
        while True:
            op = self._match(TokenKind.PLUS, TokenKind.MINUS)
            if op is None:
                return left
            right = self._parse_term()
            if op.kind is TokenKind.PLUS:
                left = left + right
            else:
                left = left - right

    def _parse_term(self) -> float:
        left = self._parse_factor()
        while True:
            op = self._match(TokenKind.STAR, TokenKind.SLASH)
            if op is None:
                return left
            right = self._parse_factor()
            if op.kind is TokenKind.STAR:
                left = left * right
            else:
                if right == 0:
                    raise DivisionByZeroError()
                left = left / right

    def _parse_factor(self) -> float:
        # Fold a run of signs before the operand.
        negate = False
        while True:
            sign = self._match(TokenKind.PLUS, TokenKind.MINUS)
            if sign is None:
                break
            if sign.kind is TokenKind.MINUS:
                negate = not negate

        token = self._peek()
        if token is None:
            raise UnexpectedTokenError(None)

        if token.kind is TokenKind.NUMBER:
            self._advance()
            try:
                value = float(token.text)
            except ValueError:
                raise InvalidNumberError(token.text, token.position) from None
        elif token.kind is TokenKind.LEFT_PAREN:
            self._advance()
            value = self._parse_expression()
            if self._match(TokenKind.RIGHT_PAREN) is None:
                raise UnmatchedParenthesisError(token.position)
        else:
            raise UnexpectedTokenError(token)

        return -value if negate else value


def parse(tokens: TokenStream) -> float:
    """Evaluate a token stream with a fresh parser."""
    return Parser(tokens).parse()
