"""
Numeric helpers for rate and profit calculations.

All computation is done in plain floats. Rounding happens only when
values are presented (see ``round_percent`` / ``round_amount``).
"""

import math
from collections.abc import Iterable

from arbscan.config.constants import AMOUNT_PRECISION, PERCENTAGE_PRECISION


def is_finite_number(value: object) -> bool:
    """
    Check that a value is a real, finite number.

    Booleans are rejected even though they are ints.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def is_positive_finite(value: object) -> bool:
    """Check that a value is a finite number strictly greater than zero."""
    return is_finite_number(value) and value > 0  # type: ignore[operator]


def compound(amount: float, rates: Iterable[float]) -> float:
    """
    Carry an amount through a sequence of conversion rates.

    Example:
        >>> compound(1000.0, (0.5, 4.0, 0.5))
        1000.0
    """
    for rate in rates:
        amount *= rate
    return amount


def profit_percent(start_amount: float, end_amount: float) -> float:
    """
    Percentage gained (or lost) going from start_amount to end_amount.

    Example:
        >>> profit_percent(1000.0, 1010.0)
        1.0000000000000009
    """
    return (end_amount / start_amount - 1.0) * 100.0


def round_percent(value: float) -> float:
    """Round a percentage for display."""
    return round(value, PERCENTAGE_PRECISION)


def round_amount(value: float) -> float:
    """Round an asset amount or rate for display."""
    return round(value, AMOUNT_PRECISION)


def format_profit(profit_pct: float) -> str:
    """
    Format profit percentage for display.

    Args:
        profit_pct: Profit as percentage.

    Returns:
        Signed string, e.g. ``+0.9000%``.
    """
    sign = "+" if profit_pct >= 0 else ""
    return f"{sign}{profit_pct:.{PERCENTAGE_PRECISION}f}%"


def format_amount(value: float) -> str:
    """Format an asset amount with fixed precision."""
    return f"{value:.{AMOUNT_PRECISION}f}"
