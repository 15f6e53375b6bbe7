"""Utility functions for the opportunity engine."""

from arbscan.utils.math import (
    compound,
    format_amount,
    format_profit,
    is_finite_number,
    is_positive_finite,
    profit_percent,
    round_amount,
    round_percent,
)


__all__ = [
    "compound",
    "format_amount",
    "format_profit",
    "is_finite_number",
    "is_positive_finite",
    "profit_percent",
    "round_amount",
    "round_percent",
]
