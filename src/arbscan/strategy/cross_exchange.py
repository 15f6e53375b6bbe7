"""
Cross-exchange spread detection.

Compares the quoted price of the same asset across exchanges and reports
the buy-low / sell-high spread net of the cost of moving the asset.
"""

import logging
from collections.abc import Mapping

from arbscan.core.types import (
    Asset,
    CrossExchangeOpportunity,
    ExchangeId,
    FeeModel,
    RateSnapshot,
    TransferCost,
)
from arbscan.utils.math import is_finite_number, profit_percent


logger = logging.getLogger(__name__)


class CrossExchangeScanner:
    """
    Finds buy/sell spreads for assets quoted on several exchanges.

    For each asset the cheapest exchange is the buy side and the dearest
    is the sell side. When several exchanges share the minimum or maximum
    price, the one listed first by the caller wins.
    """

    __slots__ = ()

    def transfer_cost_percent(
        self,
        cost: TransferCost,
        buy_price: float,
        start_notional: float,
    ) -> float:
        """
        Express a transfer cost as a percentage of the traded notional.

        A fixed cost is measured against the units that ``start_notional``
        buys at ``buy_price``.

        Args:
            cost: Resolved transfer cost of the asset.
            buy_price: Price paid per unit.
            start_notional: Amount spent on the purchase.

        Returns:
            Cost as a percent literal.
        """
        if not cost.is_absolute:
            return cost.amount

        acquired_units = start_notional / buy_price
        return cost.amount / acquired_units * 100.0

    def scan_asset(
        self,
        asset: Asset,
        quotes: Mapping[ExchangeId, float],
        fee_model: FeeModel,
        start_notional: float,
    ) -> CrossExchangeOpportunity | None:
        """
        Evaluate one asset's quotes.

        Does not look at reference rates; ``scan`` drops assets without
        one before calling this.

        Returns:
            Opportunity if a positive spread survives the transfer cost,
            None otherwise (including single-exchange and invalid quotes).
        """
        if len(quotes) < 2:
            return None

        buy_exchange: ExchangeId | None = None
        sell_exchange: ExchangeId | None = None
        buy_price = 0.0
        sell_price = 0.0

        for exchange, price in quotes.items():
            if not is_finite_number(price):
                logger.debug(f"Skipping {asset}: invalid quote {price!r} on {exchange}")
                return None

            # Strict comparisons keep the first exchange on ties
            if buy_exchange is None or price < buy_price:
                buy_exchange, buy_price = exchange, price
            if sell_exchange is None or price > sell_price:
                sell_exchange, sell_price = exchange, price

        if buy_price <= 0:
            logger.debug(f"Skipping {asset}: non-positive buy price {buy_price}")
            return None

        if buy_exchange == sell_exchange:
            return None

        raw_profit = profit_percent(buy_price, sell_price)
        cost_percent = self.transfer_cost_percent(
            fee_model.transfer_cost_for(asset), buy_price, start_notional
        )
        net_profit = raw_profit - cost_percent

        if net_profit <= 0:
            return None

        return CrossExchangeOpportunity(
            asset=asset,
            buy_exchange=buy_exchange,  # type: ignore[arg-type]
            sell_exchange=sell_exchange,  # type: ignore[arg-type]
            buy_price=float(buy_price),
            sell_price=float(sell_price),
            profit_percent=net_profit,
            raw_profit_percent=raw_profit,
            transfer_cost_percent=cost_percent,
            estimated_profit=start_notional * net_profit / 100.0,
        )

    def scan(
        self,
        snapshot: RateSnapshot,
        fee_model: FeeModel,
        start_notional: float,
    ) -> list[CrossExchangeOpportunity]:
        """
        Scan every quoted asset of a snapshot.

        Assets without a usable reference rate are skipped.

        Returns:
            Unranked opportunities, in quote order.
        """
        opportunities: list[CrossExchangeOpportunity] = []

        for asset, quotes in snapshot.exchange_quotes.items():
            if not snapshot.has_rate(asset):
                logger.debug(f"Skipping {asset}: missing rate")
                continue

            opportunity = self.scan_asset(asset, quotes, fee_model, start_notional)
            if opportunity is not None:
                opportunities.append(opportunity)

        return opportunities
