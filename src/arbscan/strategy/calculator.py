"""
Triangular profit calculation.

Walks a cycle hop by hop, converting a starting notional through each
hop's fee-adjusted rate, and reports the realized return.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from arbscan.core.types import Asset, FeeModel, RateSnapshot, TriangularOpportunity
from arbscan.strategy.graph import Cycle
from arbscan.utils.math import compound, profit_percent


logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class RouteStep:
    """One hop of a simulated route."""

    from_asset: Asset
    to_asset: Asset
    rate: float
    start_amount: float
    end_amount: float


@dataclass(slots=True, frozen=True)
class RouteSimulation:
    """Outcome of walking an arbitrary conversion route."""

    route: tuple[Asset, ...]
    steps: tuple[RouteStep, ...]
    start_amount: float
    final_amount: float
    profit_percent: float

    @property
    def profit(self) -> float:
        return self.final_amount - self.start_amount

    @property
    def is_closed(self) -> bool:
        """Check if the route ends where it started."""
        return self.route[0] == self.route[-1]

    def is_viable(self, min_profit_percent: float) -> bool:
        """Check if the route clears a profit threshold."""
        return self.profit_percent >= min_profit_percent


class TriangularEvaluator:
    """
    Evaluates the compounded outcome of a triangular cycle.

    Per hop:
    - raw rate from the snapshot (direct quote or ratio of reference prices)
    - effective rate = raw rate * (1 - hop fee)
    - amount after hop = amount before hop * effective rate

    Stateless: every call depends only on its arguments, so cycles can be
    evaluated independently and in any order.
    """

    __slots__ = ()

    def effective_rate(
        self,
        from_asset: Asset,
        to_asset: Asset,
        snapshot: RateSnapshot,
        fee_model: FeeModel,
    ) -> float | None:
        """
        Get the fee-adjusted rate for one hop.

        Returns:
            Units of to_asset per unit of from_asset after fees,
            or None if no rate is available.
        """
        raw_rate = snapshot.raw_rate(from_asset, to_asset)
        if raw_rate is None:
            return None
        return raw_rate * (1.0 - fee_model.hop_fee(from_asset, to_asset))

    def evaluate(
        self,
        cycle: Cycle,
        snapshot: RateSnapshot,
        fee_model: FeeModel,
        start_notional: float,
    ) -> TriangularOpportunity | None:
        """
        Evaluate one cycle ``(A, B, C)`` as A -> B -> C -> A.

        Args:
            cycle: Three distinct assets.
            snapshot: Rates for this pass.
            fee_model: Fees for this pass.
            start_notional: Starting amount of A.

        Returns:
            The evaluated opportunity, or None if any asset of the cycle
            has no reference rate.
        """
        first, second, third = cycle

        if not (
            snapshot.has_rate(first)
            and snapshot.has_rate(second)
            and snapshot.has_rate(third)
        ):
            logger.debug(f"Skipping {first}-{second}-{third}: missing rate")
            return None

        rate1 = self.effective_rate(first, second, snapshot, fee_model)
        rate2 = self.effective_rate(second, third, snapshot, fee_model)
        rate3 = self.effective_rate(third, first, snapshot, fee_model)

        if rate1 is None or rate2 is None or rate3 is None:
            return None

        hop_rates = (rate1, rate2, rate3)
        end_notional = compound(start_notional, hop_rates)

        return TriangularOpportunity(
            path=(first, second, third, first),
            hop_rates=hop_rates,
            start_notional=start_notional,
            end_notional=end_notional,
            profit_percent=profit_percent(start_notional, end_notional),
        )

    def simulate_route(
        self,
        route: Sequence[Asset],
        snapshot: RateSnapshot,
        fee_model: FeeModel,
        start_amount: float,
    ) -> RouteSimulation | None:
        """
        Walk an arbitrary route such as ``[USD, BTC, ETH, USD]``.

        The route does not have to be closed; ``is_closed`` on the result
        tells whether it is.

        Args:
            route: Assets in visiting order (at least three).
            snapshot: Rates for this pass.
            fee_model: Fees for this pass.
            start_amount: Starting amount of the first asset.

        Returns:
            Simulation result, or None if any hop has no rate.

        Raises:
            ValueError: If the route has fewer than three assets.
        """
        if len(route) < 3:
            raise ValueError(f"Route needs at least 3 assets, got {len(route)}")

        steps: list[RouteStep] = []
        amount = start_amount

        for from_asset, to_asset in zip(route, route[1:]):
            rate = self.effective_rate(from_asset, to_asset, snapshot, fee_model)
            if rate is None:
                logger.debug(f"No rate for {from_asset}-{to_asset}")
                return None

            next_amount = amount * rate
            steps.append(
                RouteStep(
                    from_asset=from_asset,
                    to_asset=to_asset,
                    rate=rate,
                    start_amount=amount,
                    end_amount=next_amount,
                )
            )
            amount = next_amount

        return RouteSimulation(
            route=tuple(route),
            steps=tuple(steps),
            start_amount=start_amount,
            final_amount=amount,
            profit_percent=profit_percent(start_amount, amount),
        )
