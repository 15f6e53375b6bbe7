"""
Rate snapshot simulator for demo mode.

Generates reference prices, direct cross quotes and per-exchange quotes
around configurable base prices. This is a data source standing in for a
live rate provider; the engine never imports it.
"""

import logging
import random
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from arbscan.config.constants import (
    DEFAULT_CROSS_PAIRS,
    DEFAULT_EXCHANGES,
    DEFAULT_PRICE_VARIATION,
    DEFAULT_QUOTED_ASSETS,
    DEFAULT_REFERENCE_ASSET,
    DEFAULT_REFERENCE_PRICES,
)
from arbscan.core.types import Asset, ExchangeId, RateSnapshot


logger = logging.getLogger(__name__)


@dataclass
class SimulatedAsset:
    """Configuration for a simulated asset."""

    symbol: Asset
    base_price: float
    current_price: float = field(init=False)

    def __post_init__(self) -> None:
        self.current_price = self.base_price


class MarketSimulator:
    """
    Produces rate snapshots with random price variation.

    Features:
    - Seeded random source, so a given seed replays the same snapshots
    - Uniform ±variation around each asset's base price per snapshot
    - Independent per-exchange deviations for cross-exchange spreads
    - Injected mispricings for demonstrating detections
    """

    def __init__(
        self,
        reference_prices: Mapping[Asset, float] | None = None,
        exchanges: Iterable[ExchangeId] | None = None,
        quoted_assets: Iterable[Asset] | None = None,
        cross_pairs: Iterable[tuple[Asset, Asset]] | None = None,
        variation: float = DEFAULT_PRICE_VARIATION,
        seed: int | None = None,
        reference_asset: Asset = DEFAULT_REFERENCE_ASSET,
    ) -> None:
        """
        Initialize market simulator.

        Args:
            reference_prices: Base price of each asset in the reference unit.
            exchanges: Exchanges to quote.
            quoted_assets: Assets quoted on every exchange.
            cross_pairs: Pairs given a direct quote in each snapshot.
            variation: Maximum relative deviation per price (0.005 = 0.5%).
            seed: Seed for the random source.
            reference_asset: Asset whose price is pinned to 1.0.
        """
        prices = reference_prices if reference_prices is not None else DEFAULT_REFERENCE_PRICES
        self._assets = {
            symbol: SimulatedAsset(symbol, price) for symbol, price in prices.items()
        }
        self._exchanges = list(exchanges if exchanges is not None else DEFAULT_EXCHANGES)
        self._quoted_assets = [
            a
            for a in (quoted_assets if quoted_assets is not None else DEFAULT_QUOTED_ASSETS)
            if a in self._assets
        ]
        self._cross_pairs = [
            (a, b)
            for a, b in (cross_pairs if cross_pairs is not None else DEFAULT_CROSS_PAIRS)
            if a in self._assets and b in self._assets
        ]
        self._variation = variation
        self._reference_asset = reference_asset
        self._rng = random.Random(seed)
        self._mispricings: dict[Asset, float] = {}
        self._tick_count = 0

    def _vary(self, price: float) -> float:
        """Apply a uniform random deviation to a price."""
        return price * (1.0 + self._rng.uniform(-self._variation, self._variation))

    def inject_mispricing(self, asset: Asset, deviation: float) -> None:
        """
        Skew an asset's reference price on the next snapshot.

        Args:
            asset: Asset to misprice.
            deviation: Relative skew, e.g. -0.03 for 3% below fair value.
        """
        if asset not in self._assets:
            raise KeyError(f"Unknown asset: {asset}")
        self._mispricings[asset] = deviation

    def _tick(self) -> None:
        """Move every price to a fresh deviation from its base."""
        self._tick_count += 1

        for asset in self._assets.values():
            if asset.symbol == self._reference_asset:
                asset.current_price = 1.0
                continue
            asset.current_price = self._vary(asset.base_price)

        for symbol, deviation in self._mispricings.items():
            self._assets[symbol].current_price *= 1.0 + deviation
            logger.debug(f"Injected {deviation:+.2%} mispricing on {symbol}")

        self._mispricings.clear()

    def get_current_prices(self) -> dict[Asset, float]:
        """Get current reference prices for all assets."""
        return {a.symbol: a.current_price for a in self._assets.values()}

    def _exchange_quotes(self) -> dict[Asset, dict[ExchangeId, float]]:
        return {
            asset: {
                exchange: self._vary(self._assets[asset].current_price)
                for exchange in self._exchanges
            }
            for asset in self._quoted_assets
        }

    def _pair_rates(self) -> dict[tuple[Asset, Asset], float]:
        return {
            (a, b): self._vary(self._assets[a].current_price / self._assets[b].current_price)
            for a, b in self._cross_pairs
        }

    def snapshot(self, include_pair_rates: bool = True) -> RateSnapshot:
        """
        Generate the next rate snapshot.

        Args:
            include_pair_rates: Attach direct cross quotes.

        Returns:
            A fresh, immutable snapshot.
        """
        self._tick()

        return RateSnapshot(
            rates_to_reference=self.get_current_prices(),
            exchange_quotes=self._exchange_quotes(),
            pair_rates=self._pair_rates() if include_pair_rates else {},
            reference_asset=self._reference_asset,
        )

    def get_assets(self) -> list[Asset]:
        """Get all simulated asset symbols."""
        return list(self._assets.keys())

    @property
    def exchanges(self) -> list[ExchangeId]:
        return list(self._exchanges)

    @property
    def tick_count(self) -> int:
        """Get number of snapshots generated."""
        return self._tick_count
