"""
Type definitions for the opportunity engine.

Rate snapshots, fee models and scan configuration are the engine's
inputs; opportunity records are its outputs. Everything here is frozen:
inputs are copied into read-only mappings on construction so a pass can
never observe them changing, and records are never mutated once built.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, TypeAlias

from arbscan.config.constants import TRANSFER_COST_DEFAULT_KEY
from arbscan.core.exceptions import ConfigurationError
from arbscan.utils.math import (
    is_finite_number,
    is_positive_finite,
    round_amount,
    round_percent,
)


Asset: TypeAlias = str
ExchangeId: TypeAlias = str
Pair: TypeAlias = tuple[Asset, Asset]


# =============================================================================
# Enums
# =============================================================================


class OpportunityKind(str, Enum):
    """Discriminator for opportunity records."""

    TRIANGULAR = "triangular"
    CROSS_EXCHANGE = "cross_exchange"


# =============================================================================
# Market Data Types
# =============================================================================


@dataclass(slots=True, frozen=True)
class RateSnapshot:
    """
    Point-in-time rates supplied by an external provider.

    ``rates_to_reference`` maps each asset to the price of one unit in a
    common reference unit. ``exchange_quotes`` maps an asset to its price
    on each exchange, in the caller's order. ``pair_rates`` holds optional
    direct cross quotes that take precedence over derived rates.

    Lookups never raise: a missing, non-finite or non-positive value is
    reported as ``None`` ("not convertible").
    """

    rates_to_reference: Mapping[Asset, float]
    exchange_quotes: Mapping[Asset, Mapping[ExchangeId, float]] = field(
        default_factory=dict
    )
    pair_rates: Mapping[Pair, float] = field(default_factory=dict)
    reference_asset: Asset = "USD"

    def __post_init__(self) -> None:
        """Freeze input mappings."""
        object.__setattr__(
            self, "rates_to_reference", MappingProxyType(dict(self.rates_to_reference))
        )
        object.__setattr__(
            self,
            "exchange_quotes",
            MappingProxyType(
                {
                    asset: MappingProxyType(dict(quotes))
                    for asset, quotes in self.exchange_quotes.items()
                }
            ),
        )
        object.__setattr__(self, "pair_rates", MappingProxyType(dict(self.pair_rates)))

    @property
    def assets(self) -> tuple[Asset, ...]:
        """Convertible assets, in the order the provider listed them."""
        return tuple(
            asset
            for asset, rate in self.rates_to_reference.items()
            if is_positive_finite(rate)
        )

    def rate_of(self, asset: Asset) -> float | None:
        """Get the reference price of an asset, or None if not convertible."""
        rate = self.rates_to_reference.get(asset)
        if not is_positive_finite(rate):
            return None
        return float(rate)  # type: ignore[arg-type]

    def has_rate(self, asset: Asset) -> bool:
        """Check if an asset has a usable reference price."""
        return self.rate_of(asset) is not None

    def raw_rate(self, from_asset: Asset, to_asset: Asset) -> float | None:
        """
        Units of to_asset received for one unit of from_asset, before fees.

        A direct pair quote wins, then the inverse of the opposite quote,
        then the ratio of reference prices.

        Returns:
            The rate, or None if it cannot be resolved.
        """
        direct = self.pair_rates.get((from_asset, to_asset))
        if is_positive_finite(direct):
            return float(direct)  # type: ignore[arg-type]

        inverse = self.pair_rates.get((to_asset, from_asset))
        if is_positive_finite(inverse):
            return 1.0 / inverse  # type: ignore[operator]

        from_rate = self.rate_of(from_asset)
        to_rate = self.rate_of(to_asset)
        if from_rate is None or to_rate is None:
            return None

        return from_rate / to_rate

    def quotes_for(self, asset: Asset) -> Mapping[ExchangeId, float]:
        """Get per-exchange quotes for an asset (empty if none)."""
        return self.exchange_quotes.get(asset, MappingProxyType({}))


# =============================================================================
# Fee Types
# =============================================================================


@dataclass(slots=True, frozen=True)
class TransferCost:
    """
    Cost of moving an asset between exchanges.

    An absolute cost is a fixed amount of the asset itself; otherwise
    ``amount`` is a percent literal (0.1 means 0.1%).
    """

    is_absolute: bool
    amount: float

    def __post_init__(self) -> None:
        if not is_finite_number(self.amount) or self.amount < 0:
            raise ConfigurationError(
                f"Transfer cost must be a finite non-negative number, got {self.amount!r}",
                field="amount",
            )

    def __repr__(self) -> str:
        unit = "units" if self.is_absolute else "%"
        return f"TransferCost({self.amount} {unit})"


def _validate_hop_fee(fee: object, name: str) -> None:
    if not is_finite_number(fee) or not 0.0 <= fee < 1.0:  # type: ignore[operator]
        raise ConfigurationError(
            f"{name} must be a fraction in [0, 1), got {fee!r}",
            field=name,
        )


@dataclass(slots=True, frozen=True)
class FeeModel:
    """
    Fees applied while evaluating opportunities.

    ``per_hop_fee`` is a fraction (0.001 = 0.1%) deducted at every hop of
    a triangular cycle; ``pair_fees`` overrides it for specific directed
    pairs. ``transfer_costs`` must contain a ``"default"`` entry covering
    assets without an explicit cost.
    """

    per_hop_fee: float
    transfer_costs: Mapping[Asset, TransferCost]
    pair_fees: Mapping[Pair, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate fees and freeze input mappings."""
        _validate_hop_fee(self.per_hop_fee, "per_hop_fee")

        for pair, fee in self.pair_fees.items():
            _validate_hop_fee(fee, f"pair_fees[{pair[0]}-{pair[1]}]")

        if TRANSFER_COST_DEFAULT_KEY not in self.transfer_costs:
            raise ConfigurationError(
                f"transfer_costs must define a '{TRANSFER_COST_DEFAULT_KEY}' entry",
                field="transfer_costs",
            )

        object.__setattr__(
            self, "transfer_costs", MappingProxyType(dict(self.transfer_costs))
        )
        object.__setattr__(self, "pair_fees", MappingProxyType(dict(self.pair_fees)))

    @classmethod
    def flat(
        cls,
        per_hop_fee: float,
        transfer_cost_percent: float,
        overrides: Mapping[Asset, TransferCost] | None = None,
    ) -> "FeeModel":
        """
        Build a fee model with one percentage transfer cost for all assets.

        Args:
            per_hop_fee: Fraction deducted per hop.
            transfer_cost_percent: Default transfer cost, percent literal.
            overrides: Per-asset transfer costs.
        """
        costs: dict[Asset, TransferCost] = {
            TRANSFER_COST_DEFAULT_KEY: TransferCost(False, transfer_cost_percent)
        }
        if overrides:
            costs.update(overrides)
        return cls(per_hop_fee=per_hop_fee, transfer_costs=costs)

    def hop_fee(self, from_asset: Asset, to_asset: Asset) -> float:
        """Get the fee fraction for converting from_asset into to_asset."""
        return self.pair_fees.get((from_asset, to_asset), self.per_hop_fee)

    def transfer_cost_for(self, asset: Asset) -> TransferCost:
        """Get the transfer cost of an asset, falling back to the default."""
        cost = self.transfer_costs.get(asset)
        if cost is None:
            return self.transfer_costs[TRANSFER_COST_DEFAULT_KEY]
        return cost


# =============================================================================
# Scan Configuration
# =============================================================================


@dataclass(slots=True, frozen=True)
class ScanConfig:
    """Per-pass configuration supplied by the caller."""

    min_profit_percent: float
    start_notional: float
    base_assets: tuple[Asset, ...] = ()

    def __post_init__(self) -> None:
        assets = self.base_assets
        if isinstance(assets, str):
            assets = (assets,)
        object.__setattr__(self, "base_assets", tuple(assets))

    def validate(self) -> None:
        """
        Fail fast on values that would make a pass meaningless.

        Raises:
            ConfigurationError: If start_notional is not a positive finite
                number or min_profit_percent is not finite.
        """
        if not is_positive_finite(self.start_notional):
            raise ConfigurationError(
                f"start_notional must be > 0, got {self.start_notional!r}",
                field="start_notional",
            )
        if not is_finite_number(self.min_profit_percent):
            raise ConfigurationError(
                f"min_profit_percent must be a finite number, got {self.min_profit_percent!r}",
                field="min_profit_percent",
            )


# =============================================================================
# Opportunity Types
# =============================================================================


@dataclass(slots=True, frozen=True)
class TriangularOpportunity:
    """
    A three-hop cycle A -> B -> C -> A.

    ``hop_rates`` are the effective (fee-adjusted) rates of each hop, so
    ``start_notional * prod(hop_rates) == end_notional``.
    """

    path: tuple[Asset, Asset, Asset, Asset]
    hop_rates: tuple[float, float, float]
    start_notional: float
    end_notional: float
    profit_percent: float
    kind: OpportunityKind = field(default=OpportunityKind.TRIANGULAR, init=False)

    @property
    def base_asset(self) -> Asset:
        return self.path[0]

    @property
    def profit(self) -> float:
        """Absolute profit, in units of the base asset."""
        return self.end_notional - self.start_notional

    @property
    def route(self) -> str:
        return " → ".join(self.path)

    def to_dict(self) -> dict[str, Any]:
        """Serializable view, rounded for presentation."""
        return {
            "kind": self.kind.value,
            "route": self.route,
            "path": list(self.path),
            "steps": [
                {
                    "from": self.path[i],
                    "to": self.path[i + 1],
                    "rate": round_amount(rate),
                }
                for i, rate in enumerate(self.hop_rates)
            ],
            "start_notional": round_amount(self.start_notional),
            "end_notional": round_amount(self.end_notional),
            "profit": round_amount(self.profit),
            "profit_percent": round_percent(self.profit_percent),
        }


@dataclass(slots=True, frozen=True)
class CrossExchangeOpportunity:
    """
    Buy an asset on one exchange and sell it on another.

    ``profit_percent`` is the raw spread less the transfer cost.
    """

    asset: Asset
    buy_exchange: ExchangeId
    sell_exchange: ExchangeId
    buy_price: float
    sell_price: float
    profit_percent: float
    raw_profit_percent: float = 0.0
    transfer_cost_percent: float = 0.0
    estimated_profit: float = 0.0
    kind: OpportunityKind = field(default=OpportunityKind.CROSS_EXCHANGE, init=False)

    @property
    def spread(self) -> float:
        return self.sell_price - self.buy_price

    def to_dict(self) -> dict[str, Any]:
        """Serializable view, rounded for presentation."""
        return {
            "kind": self.kind.value,
            "asset": self.asset,
            "buy_exchange": self.buy_exchange,
            "sell_exchange": self.sell_exchange,
            "buy_price": round_amount(self.buy_price),
            "sell_price": round_amount(self.sell_price),
            "raw_profit_percent": round_percent(self.raw_profit_percent),
            "transfer_cost_percent": round_percent(self.transfer_cost_percent),
            "profit_percent": round_percent(self.profit_percent),
            "estimated_profit": round_amount(self.estimated_profit),
        }


Opportunity: TypeAlias = TriangularOpportunity | CrossExchangeOpportunity
