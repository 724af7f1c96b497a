"""Calculator facade: tokenize, evaluate, record."""

import logging
from typing import List, Optional

from .config import CalculatorConfig
from .errors import CalcError, EmptyExpressionError, Phase, TokenizeError, ParseError
from .history import CalculationHistory, HistoryEntry
from .parser import parse
from .tokenizer import tokenize


logger = logging.getLogger(__name__)


class Calculator:
    """Evaluates expressions and keeps a history of successful ones."""

    def __init__(
        self,
        config: Optional[CalculatorConfig] = None,
        history: Optional[CalculationHistory] = None,
    ):
        """Initialize the calculator.

        Args:
            config: Calculator configuration (defaults if omitted).
            history: History to record into. A new one sized from
                config.history_capacity is created if omitted.
        """
        self.config = config or CalculatorConfig()
        if history is None:
            history = CalculationHistory(self.config.history_capacity)
        self.history = history

    def calculate(self, expression: str) -> float:
        """Evaluate an expression and record it on success.

        Args:
            expression: Infix arithmetic expression, e.g. "(2 + 3) * 4".

        Returns:
            The result as a float.

        Raises:
            EmptyExpressionError: expression is empty or whitespace-only.
            CalcError: tokenizing or parsing failed; `phase` says which
                and `cause` holds the original error.
        """
        if not expression or expression.isspace():
            logger.info("Rejected empty expression")
            raise EmptyExpressionError()

        try:
            tokens = tokenize(expression)
        except TokenizeError as e:
            logger.info("Tokenizing %r failed: %s", expression, e)
            raise CalcError(Phase.LEXING, e) from e

        try:
            result = parse(tokens)
        except (ParseError, TokenizeError) as e:
            logger.info("Parsing %r failed: %s", expression, e)
            raise CalcError(Phase.PARSING, e) from e

        entry = self.history.add(expression, result)
        logger.debug("#%d %s = %r", entry.id, expression, result)
        return result

    def get_history(self) -> List[HistoryEntry]:
        """Snapshot of recorded calculations, oldest first."""
        return self.history.get_all()

    def clear_history(self) -> None:
        """Clear recorded calculations."""
        self.history.clear()
