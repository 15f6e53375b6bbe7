"""Configuration module for the opportunity engine."""

from arbscan.config.constants import (
    DEFAULT_BASE_ASSETS,
    DEFAULT_FEE_RATE,
    DEFAULT_MIN_PROFIT_PERCENT,
    DEFAULT_START_NOTIONAL,
    DEFAULT_TRANSFER_COST_PERCENT,
    TRANSFER_COST_DEFAULT_KEY,
)


__all__ = [
    "DEFAULT_BASE_ASSETS",
    "DEFAULT_FEE_RATE",
    "DEFAULT_MIN_PROFIT_PERCENT",
    "DEFAULT_START_NOTIONAL",
    "DEFAULT_TRANSFER_COST_PERCENT",
    "TRANSFER_COST_DEFAULT_KEY",
]
