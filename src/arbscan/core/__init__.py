"""Core module containing engine inputs, outputs and errors."""

from arbscan.core.exceptions import ArbScanError, ConfigurationError
from arbscan.core.types import (
    Asset,
    CrossExchangeOpportunity,
    ExchangeId,
    FeeModel,
    Opportunity,
    OpportunityKind,
    RateSnapshot,
    ScanConfig,
    TransferCost,
    TriangularOpportunity,
)


__all__ = [
    "ArbScanError",
    "Asset",
    "ConfigurationError",
    "CrossExchangeOpportunity",
    "ExchangeId",
    "FeeModel",
    "Opportunity",
    "OpportunityKind",
    "RateSnapshot",
    "ScanConfig",
    "TransferCost",
    "TriangularOpportunity",
]
