"""Strategy module for opportunity enumeration, evaluation and ranking."""

from arbscan.strategy.calculator import RouteSimulation, TriangularEvaluator
from arbscan.strategy.cross_exchange import CrossExchangeScanner
from arbscan.strategy.graph import CycleEnumerator
from arbscan.strategy.ranking import OpportunityRanker


__all__ = [
    "CrossExchangeScanner",
    "CycleEnumerator",
    "OpportunityRanker",
    "RouteSimulation",
    "TriangularEvaluator",
]
