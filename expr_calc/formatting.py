"""Display formatting for results and history entries."""

import math

from .history import HistoryEntry


# Above this magnitude a float no longer holds every integer digit
EXACT_INTEGER_LIMIT = 1e16


def format_result(value: float) -> str:
    """Format a result for display.

    Integral values render without a decimal point ("14"), everything
    else in shortest round-trip form ("6.28", "0.1", "inf", "1e+300").

    Args:
        value: Result to format.

    Returns:
        Formatted string.
    """
    if math.isfinite(value) and value == int(value) and abs(value) < EXACT_INTEGER_LIMIT:
        return str(int(value))
    return repr(float(value))


def format_entry(entry: HistoryEntry) -> str:
    """Format a history entry as "<expression> = <result>"."""
    return f"{entry.expression} = {format_result(entry.result)}"
