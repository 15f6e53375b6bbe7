"""
Default values and presentation constants.

The engine itself takes every fee and threshold as an explicit argument;
these values only seed the settings layer and the demo simulator.
"""

from typing import Final


# =============================================================================
# Fees
# =============================================================================

# Fraction deducted at each conversion hop (0.1%)
DEFAULT_FEE_RATE: Final[float] = 0.001

# Key used for the fallback transfer cost in a fee model
TRANSFER_COST_DEFAULT_KEY: Final[str] = "default"

# Fallback cross-exchange transfer cost, as a percent literal (0.1%)
DEFAULT_TRANSFER_COST_PERCENT: Final[float] = 0.1


# =============================================================================
# Scan Configuration
# =============================================================================

# Notional used to size triangular results and fixed transfer costs
DEFAULT_START_NOTIONAL: Final[float] = 1000.0

# Minimum profit, as a percent literal, for a record to be reported
DEFAULT_MIN_PROFIT_PERCENT: Final[float] = 0.5

# Seed assets for triangular cycle enumeration
DEFAULT_BASE_ASSETS: Final[tuple[str, ...]] = ("USD", "USDT", "BTC")

# Reference unit of simulated snapshots
DEFAULT_REFERENCE_ASSET: Final[str] = "USD"


# =============================================================================
# Simulation
# =============================================================================

# Reference prices for the demo simulator (USD per unit)
DEFAULT_REFERENCE_PRICES: Final[dict[str, float]] = {
    "USD": 1.0,
    "BTC": 60502.35,
    "ETH": 3280.47,
    "USDT": 0.99,
    "XRP": 0.50,
    "SOL": 140.80,
    "BNB": 565.70,
    "ADA": 0.45,
    "MATIC": 0.77,
}

# Exchanges quoted by the demo simulator
DEFAULT_EXCHANGES: Final[tuple[str, ...]] = (
    "Binance",
    "Coinbase",
    "Kraken",
    "Kucoin",
    "OKX",
)

# Assets the demo simulator quotes on every exchange
DEFAULT_QUOTED_ASSETS: Final[tuple[str, ...]] = ("BTC", "ETH", "XRP", "SOL", "MATIC")

# Directly quoted cross pairs produced by the demo simulator
DEFAULT_CROSS_PAIRS: Final[tuple[tuple[str, str], ...]] = (
    ("BTC", "ETH"),
    ("BTC", "USDT"),
    ("ETH", "USDT"),
)

# Maximum relative deviation applied to simulated prices (0.5%)
DEFAULT_PRICE_VARIATION: Final[float] = 0.005


# =============================================================================
# Precision & Formatting
# =============================================================================

PERCENTAGE_PRECISION: Final[int] = 4
AMOUNT_PRECISION: Final[int] = 8


# =============================================================================
# Logging & Telemetry
# =============================================================================

LOG_FORMAT: Final[str] = "%(asctime)s.%(msecs)03d | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# Maximum log queue size
MAX_LOG_QUEUE_SIZE: Final[int] = 10_000
