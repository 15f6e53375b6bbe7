"""
Arbitrage Opportunity Engine.

Detects triangular conversion cycles and cross-exchange price spreads in
a snapshot of asset rates, net of conversion fees and transfer costs.
"""

from arbscan.core.engine import (
    OpportunityEngine,
    ScanResult,
    find_cross_exchange_opportunities,
    find_triangular_opportunities,
)
from arbscan.core.exceptions import ArbScanError, ConfigurationError
from arbscan.core.types import (
    CrossExchangeOpportunity,
    FeeModel,
    RateSnapshot,
    ScanConfig,
    TransferCost,
    TriangularOpportunity,
)


__version__ = "1.0.0"

__all__ = [
    "ArbScanError",
    "ConfigurationError",
    "CrossExchangeOpportunity",
    "FeeModel",
    "OpportunityEngine",
    "RateSnapshot",
    "ScanConfig",
    "ScanResult",
    "TransferCost",
    "TriangularOpportunity",
    "find_cross_exchange_opportunities",
    "find_triangular_opportunities",
]
