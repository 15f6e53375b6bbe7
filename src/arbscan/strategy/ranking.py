"""
Threshold filtering and ranking of opportunities.
"""

from collections.abc import Iterable
from typing import TypeVar

from arbscan.core.types import (
    CrossExchangeOpportunity,
    Opportunity,
    TriangularOpportunity,
)


OpportunityT = TypeVar("OpportunityT", bound=Opportunity)


class OpportunityRanker:
    """
    Filters opportunities by minimum profit and sorts them best-first.

    The threshold is inclusive: a record whose profit equals it is kept.
    Ties on profit are broken deterministically:
    - triangular: shorter path first, then lexicographically earlier path
    - cross-exchange: asset symbol, then buy and sell exchange
    """

    __slots__ = ("_min_profit_percent", "_limit")

    def __init__(self, min_profit_percent: float, limit: int | None = None) -> None:
        """
        Initialize ranker.

        Args:
            min_profit_percent: Inclusive lower bound, percent literal.
            limit: Maximum number of records to return (None for all).
        """
        self._min_profit_percent = min_profit_percent
        self._limit = limit

    @property
    def min_profit_percent(self) -> float:
        return self._min_profit_percent

    def _truncate(self, ranked: list[OpportunityT]) -> list[OpportunityT]:
        if self._limit is None:
            return ranked
        return ranked[: self._limit]

    def rank_triangular(
        self, opportunities: Iterable[TriangularOpportunity]
    ) -> list[TriangularOpportunity]:
        """Filter and sort triangular opportunities."""
        kept = [o for o in opportunities if o.profit_percent >= self._min_profit_percent]
        kept.sort(key=lambda o: (-o.profit_percent, len(o.path), o.path))
        return self._truncate(kept)

    def rank_cross_exchange(
        self, opportunities: Iterable[CrossExchangeOpportunity]
    ) -> list[CrossExchangeOpportunity]:
        """Filter and sort cross-exchange opportunities."""
        kept = [o for o in opportunities if o.profit_percent >= self._min_profit_percent]
        kept.sort(
            key=lambda o: (-o.profit_percent, o.asset, o.buy_exchange, o.sell_exchange)
        )
        return self._truncate(kept)
