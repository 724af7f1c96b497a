"""Tests for calculator.py - Calculator facade."""

import pytest

from expr_calc.calculator import Calculator
from expr_calc.config import CalculatorConfig
from expr_calc.errors import (
    CalcError,
    CalculatorError,
    DivisionByZeroError,
    EmptyExpressionError,
    InvalidCharacterError,
    NestingTooDeepError,
    Phase,
    TrailingTokensError,
    UnexpectedTokenError,
    UnmatchedParenthesisError,
)
from expr_calc.history import CalculationHistory


@pytest.fixture
def calc():
    """Create a calculator with default config."""
    return Calculator()


class TestCalculate:
    """Tests for successful calculations."""

    @pytest.mark.parametrize(
        "expression,expected",
        [
            ("2 + 3 * 4", 14.0),
            ("10 - 8 / 2", 6.0),
            ("(2 + 3) * 4", 20.0),
            ("((2 + 3) * 4) / 5", 4.0),
            ("-(5 + 3)", -8.0),
            ("--5", 5.0),
        ],
    )
    def test_results(self, calc, expression, expected):
        """Test documented example results."""
        assert calc.calculate(expression) == expected

    def test_whitespace_insensitive(self, calc):
        """Test spacing does not change the result."""
        assert calc.calculate("2+3") == calc.calculate(" 2 +   3 ")

    def test_decimal(self, calc):
        """Test decimal literals."""
        assert calc.calculate("3.14 * 2") == pytest.approx(6.28)

    def test_records_history(self, calc):
        """Test successful calculations are recorded as given."""
        calc.calculate(" 1 + 1 ")
        history = calc.get_history()
        assert len(history) == 1
        assert history[0].expression == " 1 + 1 "
        assert history[0].result == 2.0


class TestCalculateErrors:
    """Tests for failing calculations."""

    @pytest.mark.parametrize("expression", ["", "   ", "\t"])
    def test_empty_expression(self, calc, expression):
        """Test blank input is rejected before tokenizing."""
        with pytest.raises(EmptyExpressionError):
            calc.calculate(expression)

    def test_lexing_phase(self, calc):
        """Test tokenizer errors are tagged LEXING."""
        with pytest.raises(CalcError) as exc_info:
            calc.calculate("2 + a")
        assert exc_info.value.phase is Phase.LEXING
        assert isinstance(exc_info.value.cause, InvalidCharacterError)
        assert exc_info.value.__cause__ is exc_info.value.cause

    @pytest.mark.parametrize(
        "expression,cause",
        [
            ("10 / 0", DivisionByZeroError),
            ("2 +", UnexpectedTokenError),
            ("(2 + 3", UnmatchedParenthesisError),
            ("2 + 3)", TrailingTokensError),
        ],
    )
    def test_parsing_phase(self, calc, expression, cause):
        """Test parser errors are tagged PARSING with their cause."""
        with pytest.raises(CalcError) as exc_info:
            calc.calculate(expression)
        assert exc_info.value.phase is Phase.PARSING
        assert isinstance(exc_info.value.cause, cause)

    def test_message_keeps_cause(self, calc):
        """Test the wrapped message includes the phase and cause."""
        with pytest.raises(CalcError) as exc_info:
            calc.calculate("1 / 0")
        assert str(exc_info.value) == "parsing error: Division by zero"

    def test_all_errors_share_base(self, calc):
        """Test callers can catch every failure with one class."""
        for expression in ["", "1 +", "1 ? 2"]:
            with pytest.raises(CalculatorError):
                calc.calculate(expression)

    @pytest.mark.parametrize("expression", ["", "2 + a", "10 / 0", "(1", "1)", "+"])
    def test_failures_not_recorded(self, calc, expression):
        """Test failed calculations leave history unchanged."""
        calc.calculate("1 + 1")
        before = len(calc.get_history())
        with pytest.raises(CalculatorError):
            calc.calculate(expression)
        assert len(calc.get_history()) == before


class TestCalculatorHistory:
    """Tests for history handling through the facade."""

    def test_capacity_from_config(self):
        """Test the history is sized from config."""
        calc = Calculator(CalculatorConfig(history_capacity=5))
        for i in range(12):
            calc.calculate(f"{i} + 0")
        history = calc.get_history()
        assert len(history) == 5
        assert [e.result for e in history] == [7.0, 8.0, 9.0, 10.0, 11.0]

    def test_injected_history(self):
        """Test an injected history is used even when empty."""
        history = CalculationHistory(capacity=2)
        calc = Calculator(history=history)
        calc.calculate("1")
        assert calc.history is history
        assert history.size == 1

    def test_clear_history(self, calc):
        """Test clearing through the facade."""
        calc.calculate("1")
        calc.clear_history()
        assert calc.get_history() == []
        calc.calculate("2")
        assert calc.get_history()[0].id == 2

    def test_snapshot(self, calc):
        """Test get_history returns a copy."""
        calc.calculate("1")
        calc.get_history().clear()
        assert len(calc.get_history()) == 1

    def test_instances_independent(self):
        """Test two calculators keep separate histories."""
        first, second = Calculator(), Calculator()
        first.calculate("1")
        assert second.get_history() == []


class TestDeepExpressions:
    """Tests for expressions that stress recursion."""

    def test_sign_chain(self, calc):
        """Test long sign chains evaluate."""
        assert calc.calculate("-" * 1000 + "5") == 5.0

    def test_deep_nesting_wrapped(self, calc):
        """Test deep nesting surfaces as a PARSING CalcError and is not recorded."""
        with pytest.raises(CalcError) as exc_info:
            calc.calculate("(" * 400 + "1" + ")" * 400)
        assert exc_info.value.phase is Phase.PARSING
        assert isinstance(exc_info.value.cause, NestingTooDeepError)
        assert calc.get_history() == []
