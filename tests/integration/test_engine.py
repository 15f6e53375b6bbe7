"""
Integration tests for the opportunity engine.

Tests full passes from snapshot to ranked records.
"""

import math

import pytest

from arbscan import (
    ConfigurationError,
    FeeModel,
    OpportunityEngine,
    RateSnapshot,
    ScanConfig,
    find_cross_exchange_opportunities,
    find_triangular_opportunities,
)
from arbscan.core.engine import ScanStats
from arbscan.simulation.market import MarketSimulator


class TestEngineScenarios:
    """End-to-end detection scenarios."""

    def test_consistent_rates_yield_nothing(
        self,
        consistent_snapshot: RateSnapshot,
        fee_model: FeeModel,
        scan_config: ScanConfig,
    ) -> None:
        """Test that fee drag alone filters every fair cycle."""
        stats = ScanStats()

        result = OpportunityEngine().find_triangular_opportunities(
            consistent_snapshot, fee_model, scan_config, stats
        )

        assert result == []
        assert stats.cycles_enumerated == 2
        assert stats.best_profit_percent == pytest.approx(-0.2997001)

    def test_mispricing_ranked_first(
        self,
        mispriced_snapshot: RateSnapshot,
        fee_model: FeeModel,
        scan_config: ScanConfig,
    ) -> None:
        """Test that the cycle through the mispriced pair is reported."""
        result = find_triangular_opportunities(mispriced_snapshot, fee_model, scan_config)

        assert len(result) == 1
        assert result[0].path == ("USD", "BTC", "ETH", "USD")
        assert result[0].profit_percent > 0.3

    def test_cross_exchange_spread(self, fee_model: FeeModel, scan_config: ScanConfig) -> None:
        """Test a single cross-exchange record net of transfer cost."""
        snapshot = RateSnapshot(
            rates_to_reference={"BTC": 60000.0, "USD": 1.0},
            exchange_quotes={"BTC": {"A": 60000.0, "B": 60600.0}},
        )

        result = find_cross_exchange_opportunities(snapshot, fee_model, scan_config)

        assert len(result) == 1
        assert result[0].buy_exchange == "A"
        assert result[0].sell_exchange == "B"
        assert result[0].profit_percent == pytest.approx(0.9)

    def test_unquoted_asset_skipped(
        self,
        consistent_snapshot: RateSnapshot,
        fee_model: FeeModel,
        scan_config: ScanConfig,
    ) -> None:
        """Test that assets without exchange quotes are ignored."""
        assert find_cross_exchange_opportunities(consistent_snapshot, fee_model, scan_config) == []

    def test_high_threshold_empty(
        self,
        mispriced_snapshot: RateSnapshot,
        quoted_snapshot: RateSnapshot,
        fee_model: FeeModel,
    ) -> None:
        """Test that no candidate clears a 5% bar."""
        config = ScanConfig(min_profit_percent=5.0, start_notional=1000.0, base_assets=("USD",))

        assert find_triangular_opportunities(mispriced_snapshot, fee_model, config) == []
        assert find_cross_exchange_opportunities(quoted_snapshot, fee_model, config) == []


class TestEngineProperties:
    """Invariants over simulated snapshots."""

    @pytest.fixture
    def snapshot(self) -> RateSnapshot:
        """Seeded simulated snapshot with a mispricing."""
        simulator = MarketSimulator(seed=1234, variation=0.01)
        simulator.inject_mispricing("ETH", -0.03)
        return simulator.snapshot()

    @pytest.fixture
    def config(self) -> ScanConfig:
        """Report everything, seeded from three bases."""
        return ScanConfig(
            min_profit_percent=-100.0,
            start_notional=1000.0,
            base_assets=("USD", "USDT", "BTC"),
        )

    def test_cycle_closure(
        self, engine: OpportunityEngine, snapshot: RateSnapshot, fee_model: FeeModel, config: ScanConfig
    ) -> None:
        """Test that every path returns to its start through distinct assets."""
        result = engine.find_triangular_opportunities(snapshot, fee_model, config)

        assert result
        for opp in result:
            assert len(opp.path) == 4
            assert opp.path[0] == opp.path[3]
            assert len(set(opp.path[:3])) == 3

    def test_profit_consistency(
        self, engine: OpportunityEngine, snapshot: RateSnapshot, fee_model: FeeModel, config: ScanConfig
    ) -> None:
        """Test that profit agrees with notionals for every record."""
        for opp in engine.find_triangular_opportunities(snapshot, fee_model, config):
            expected = (opp.end_notional / opp.start_notional - 1.0) * 100.0
            assert abs(opp.profit_percent - expected) < 1e-9

    def test_threshold_and_order(
        self, engine: OpportunityEngine, snapshot: RateSnapshot, fee_model: FeeModel
    ) -> None:
        """Test that results clear the threshold and are sorted."""
        config = ScanConfig(min_profit_percent=0.0, start_notional=1000.0, base_assets=("USD", "BTC"))

        result = engine.scan(snapshot, fee_model, config)

        for records in (result.triangular, result.cross_exchange):
            profits = [o.profit_percent for o in records]
            assert all(p >= 0.0 for p in profits)
            assert profits == sorted(profits, reverse=True)

    def test_no_self_trade(
        self, engine: OpportunityEngine, snapshot: RateSnapshot, fee_model: FeeModel, config: ScanConfig
    ) -> None:
        """Test that buy and sell exchanges always differ."""
        for opp in engine.find_cross_exchange_opportunities(snapshot, fee_model, config):
            assert opp.buy_exchange != opp.sell_exchange
            assert opp.sell_price > opp.buy_price

    def test_determinism(
        self, snapshot: RateSnapshot, fee_model: FeeModel, config: ScanConfig
    ) -> None:
        """Test that repeated passes give identical results."""
        first = OpportunityEngine().scan(snapshot, fee_model, config)
        second = OpportunityEngine().scan(snapshot, fee_model, config)

        assert first.triangular == second.triangular
        assert first.cross_exchange == second.cross_exchange

    def test_skip_on_missing_rate(self, engine: OpportunityEngine, fee_model: FeeModel) -> None:
        """Test that a non-convertible asset is left out of every cycle."""
        snapshot = RateSnapshot(
            {"USD": 1.0, "BTC": 50000.0, "ETH": 3000.0, "SOL": math.nan}
        )
        config = ScanConfig(min_profit_percent=-100.0, start_notional=1000.0, base_assets=("USD",))

        result = engine.find_triangular_opportunities(snapshot, fee_model, config)

        assert len(result) == 2
        assert all("SOL" not in opp.path for opp in result)

    def test_skip_asset_without_reference_rate(
        self, engine: OpportunityEngine, fee_model: FeeModel
    ) -> None:
        """Test that an asset absent from reference rates appears in neither list."""
        snapshot = RateSnapshot(
            rates_to_reference={"USD": 1.0, "BTC": 60000.0, "ETH": 3000.0},
            exchange_quotes={"Z": {"A": 1.0, "B": 1.1}},
            pair_rates={("Z", "BTC"): 0.00002},
        )
        config = ScanConfig(
            min_profit_percent=-100.0, start_notional=1000.0, base_assets=("USD", "Z")
        )

        triangular = find_triangular_opportunities(snapshot, fee_model, config)
        cross_exchange = find_cross_exchange_opportunities(snapshot, fee_model, config)

        assert len(triangular) == 2
        assert all("Z" not in opp.path for opp in triangular)
        assert cross_exchange == []
        assert engine.scan(snapshot, fee_model, config).cross_exchange == []

    def test_limit(self, snapshot: RateSnapshot, fee_model: FeeModel, config: ScanConfig) -> None:
        """Test that the engine limit caps each list."""
        result = OpportunityEngine(limit=3).scan(snapshot, fee_model, config)

        assert len(result.triangular) == 3
        assert result.total <= 6


class TestEngineConfiguration:
    """Fail-fast configuration checks."""

    @pytest.mark.parametrize("notional", [0.0, -10.0, math.inf])
    def test_invalid_notional(
        self,
        engine: OpportunityEngine,
        consistent_snapshot: RateSnapshot,
        fee_model: FeeModel,
        notional: float,
    ) -> None:
        """Test that both entry points reject a bad notional."""
        config = ScanConfig(min_profit_percent=0.0, start_notional=notional, base_assets=("USD",))

        with pytest.raises(ConfigurationError):
            engine.find_triangular_opportunities(consistent_snapshot, fee_model, config)
        with pytest.raises(ConfigurationError):
            engine.find_cross_exchange_opportunities(consistent_snapshot, fee_model, config)

    def test_invalid_limit(self) -> None:
        """Test that a zero limit is rejected."""
        with pytest.raises(ConfigurationError):
            OpportunityEngine(limit=0)

    def test_last_config(
        self,
        engine: OpportunityEngine,
        consistent_snapshot: RateSnapshot,
        fee_model: FeeModel,
        scan_config: ScanConfig,
    ) -> None:
        """Test that the engine remembers the last accepted config."""
        assert engine.last_config is None

        engine.scan(consistent_snapshot, fee_model, scan_config)

        assert engine.last_config is scan_config

    def test_empty_bases(
        self, engine: OpportunityEngine, consistent_snapshot: RateSnapshot, fee_model: FeeModel
    ) -> None:
        """Test that no seeds means no triangular records."""
        config = ScanConfig(min_profit_percent=-100.0, start_notional=1000.0)

        assert engine.find_triangular_opportunities(consistent_snapshot, fee_model, config) == []
