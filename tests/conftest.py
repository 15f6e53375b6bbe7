"""
Pytest configuration and shared fixtures.

Provides reusable test fixtures for all test modules.
"""

import pytest

from arbscan.core.engine import OpportunityEngine
from arbscan.core.types import FeeModel, RateSnapshot, ScanConfig, TransferCost


# =============================================================================
# Snapshot Fixtures
# =============================================================================


@pytest.fixture
def consistent_snapshot() -> RateSnapshot:
    """Three assets priced from a single reference, no direct quotes."""
    return RateSnapshot(rates_to_reference={"BTC": 50000.0, "ETH": 3000.0, "USD": 1.0})


@pytest.fixture
def mispriced_snapshot() -> RateSnapshot:
    """Same universe with a direct BTC/ETH quote implying ETH at 2900."""
    return RateSnapshot(
        rates_to_reference={"BTC": 50000.0, "ETH": 3000.0, "USD": 1.0},
        pair_rates={("BTC", "ETH"): 50000.0 / 2900.0},
    )


@pytest.fixture
def quoted_snapshot() -> RateSnapshot:
    """Snapshot with per-exchange quotes for two assets."""
    return RateSnapshot(
        rates_to_reference={"BTC": 60000.0, "ETH": 3000.0, "USD": 1.0},
        exchange_quotes={
            "BTC": {"A": 60000.0, "B": 60600.0},
            "ETH": {"A": 3000.0, "B": 3001.0, "C": 2999.0},
        },
    )


# =============================================================================
# Fee & Config Fixtures
# =============================================================================


@pytest.fixture
def fee_model() -> FeeModel:
    """0.1% per hop, 0.1% default transfer cost."""
    return FeeModel(
        per_hop_fee=0.001,
        transfer_costs={"default": TransferCost(is_absolute=False, amount=0.1)},
    )


@pytest.fixture
def zero_fee_model() -> FeeModel:
    """Fee model without any fees."""
    return FeeModel.flat(per_hop_fee=0.0, transfer_cost_percent=0.0)


@pytest.fixture
def scan_config() -> ScanConfig:
    """USD-seeded config reporting anything at or above break-even."""
    return ScanConfig(min_profit_percent=0.0, start_notional=1000.0, base_assets=("USD",))


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def engine() -> OpportunityEngine:
    """Create an engine without a result limit."""
    return OpportunityEngine()
