"""
Opportunity engine orchestrator.

Runs one evaluation pass over a rate snapshot:

    CycleEnumerator -> TriangularEvaluator -> OpportunityRanker
    CrossExchangeScanner -> OpportunityRanker

The engine performs no I/O and keeps no state between passes other than
the most recent configuration. It is synchronous; callers that re-run it
on a timer must not overlap passes over a snapshot they are mutating.
"""

import logging
from dataclasses import dataclass, field

from arbscan.core.exceptions import ConfigurationError
from arbscan.core.types import (
    CrossExchangeOpportunity,
    FeeModel,
    RateSnapshot,
    ScanConfig,
    TriangularOpportunity,
)
from arbscan.strategy.calculator import TriangularEvaluator
from arbscan.strategy.cross_exchange import CrossExchangeScanner
from arbscan.strategy.graph import CycleEnumerator
from arbscan.strategy.ranking import OpportunityRanker


logger = logging.getLogger(__name__)


@dataclass
class ScanStats:
    """Counters for a single pass."""

    cycles_enumerated: int = 0
    cycles_skipped: int = 0
    assets_quoted: int = 0
    triangular_kept: int = 0
    cross_exchange_kept: int = 0
    best_profit_percent: float | None = None

    def record_best(self, profit_pct: float) -> None:
        if self.best_profit_percent is None or profit_pct > self.best_profit_percent:
            self.best_profit_percent = profit_pct


@dataclass
class ScanResult:
    """Both ranked lists produced by one pass."""

    triangular: list[TriangularOpportunity] = field(default_factory=list)
    cross_exchange: list[CrossExchangeOpportunity] = field(default_factory=list)
    stats: ScanStats = field(default_factory=ScanStats)

    @property
    def total(self) -> int:
        return len(self.triangular) + len(self.cross_exchange)


class OpportunityEngine:
    """
    Detects arbitrage opportunities in a rate snapshot.

    Features:
    - Triangular cycles seeded from configurable base assets
    - Cross-exchange spreads net of transfer costs
    - Inclusive profit threshold with deterministic ranking
    - Fail-fast configuration validation
    """

    def __init__(self, limit: int | None = None) -> None:
        """
        Initialize engine.

        Args:
            limit: Maximum records returned per list (None for all).

        Raises:
            ConfigurationError: If limit is not a positive integer.
        """
        if limit is not None and limit < 1:
            raise ConfigurationError(f"limit must be >= 1, got {limit}", field="limit")

        self._evaluator = TriangularEvaluator()
        self._scanner = CrossExchangeScanner()
        self._limit = limit
        self._last_config: ScanConfig | None = None

    @property
    def last_config(self) -> ScanConfig | None:
        """Configuration of the most recent pass."""
        return self._last_config

    def _accept_config(self, config: ScanConfig) -> OpportunityRanker:
        config.validate()
        self._last_config = config
        return OpportunityRanker(config.min_profit_percent, limit=self._limit)

    def find_triangular_opportunities(
        self,
        snapshot: RateSnapshot,
        fee_model: FeeModel,
        config: ScanConfig,
        stats: ScanStats | None = None,
    ) -> list[TriangularOpportunity]:
        """
        Find ranked triangular opportunities.

        Args:
            snapshot: Rates for this pass (read only).
            fee_model: Fees for this pass.
            config: Threshold, notional and base assets.
            stats: Optional counters to update.

        Returns:
            Opportunities at or above the threshold, best first.

        Raises:
            ConfigurationError: If the configuration is invalid.
        """
        ranker = self._accept_config(config)
        stats = stats if stats is not None else ScanStats()

        enumerator = CycleEnumerator.from_snapshot(snapshot)
        candidates: list[TriangularOpportunity] = []

        for cycle in enumerator.iter_cycles(config.base_assets):
            stats.cycles_enumerated += 1

            opportunity = self._evaluator.evaluate(
                cycle, snapshot, fee_model, config.start_notional
            )
            if opportunity is None:
                stats.cycles_skipped += 1
                continue

            candidates.append(opportunity)
            stats.record_best(opportunity.profit_percent)

        ranked = ranker.rank_triangular(candidates)
        stats.triangular_kept = len(ranked)

        logger.debug(
            f"Triangular pass: {stats.cycles_enumerated} cycles, "
            f"{stats.cycles_skipped} skipped, {len(ranked)} kept"
        )

        return ranked

    def find_cross_exchange_opportunities(
        self,
        snapshot: RateSnapshot,
        fee_model: FeeModel,
        config: ScanConfig,
        stats: ScanStats | None = None,
    ) -> list[CrossExchangeOpportunity]:
        """
        Find ranked cross-exchange opportunities.

        Args:
            snapshot: Rates and exchange quotes for this pass (read only).
            fee_model: Transfer costs for this pass.
            config: Threshold and notional.
            stats: Optional counters to update.

        Returns:
            Opportunities at or above the threshold, best first.

        Raises:
            ConfigurationError: If the configuration is invalid.
        """
        ranker = self._accept_config(config)
        stats = stats if stats is not None else ScanStats()

        candidates = self._scanner.scan(snapshot, fee_model, config.start_notional)
        stats.assets_quoted = len(snapshot.exchange_quotes)
        for opportunity in candidates:
            stats.record_best(opportunity.profit_percent)

        ranked = ranker.rank_cross_exchange(candidates)
        stats.cross_exchange_kept = len(ranked)

        logger.debug(
            f"Cross-exchange pass: {stats.assets_quoted} assets, "
            f"{len(candidates)} spreads, {len(ranked)} kept"
        )

        return ranked

    def scan(
        self,
        snapshot: RateSnapshot,
        fee_model: FeeModel,
        config: ScanConfig,
    ) -> ScanResult:
        """
        Run both detection modes over one snapshot.

        Raises:
            ConfigurationError: If the configuration is invalid.
        """
        config.validate()
        result = ScanResult()

        result.triangular = self.find_triangular_opportunities(
            snapshot, fee_model, config, result.stats
        )
        result.cross_exchange = self.find_cross_exchange_opportunities(
            snapshot, fee_model, config, result.stats
        )

        logger.info(
            f"Scan complete: {len(result.triangular)} triangular, "
            f"{len(result.cross_exchange)} cross-exchange opportunities"
        )

        return result


def find_triangular_opportunities(
    snapshot: RateSnapshot,
    fee_model: FeeModel,
    config: ScanConfig,
) -> list[TriangularOpportunity]:
    """Find ranked triangular opportunities with a one-off engine."""
    return OpportunityEngine().find_triangular_opportunities(snapshot, fee_model, config)


def find_cross_exchange_opportunities(
    snapshot: RateSnapshot,
    fee_model: FeeModel,
    config: ScanConfig,
) -> list[CrossExchangeOpportunity]:
    """Find ranked cross-exchange opportunities with a one-off engine."""
    return OpportunityEngine().find_cross_exchange_opportunities(
        snapshot, fee_model, config
    )
