"""
Unit tests for MarketSimulator.

Tests seeded generation, snapshot shape and injected mispricings.
"""

import pytest

from arbscan.simulation.market import MarketSimulator


class TestMarketSimulator:
    """Tests for MarketSimulator."""

    @pytest.fixture
    def simulator(self) -> MarketSimulator:
        """Small seeded simulator."""
        return MarketSimulator(
            reference_prices={"USD": 1.0, "BTC": 50000.0, "ETH": 3000.0},
            exchanges=["A", "B", "C"],
            quoted_assets=["BTC", "ETH", "DOGE"],
            cross_pairs=[("BTC", "ETH"), ("BTC", "DOGE")],
            variation=0.01,
            seed=42,
        )

    def test_same_seed_same_snapshot(self) -> None:
        """Test that a seed replays identical data."""
        first = MarketSimulator(seed=7).snapshot()
        second = MarketSimulator(seed=7).snapshot()

        assert dict(first.rates_to_reference) == dict(second.rates_to_reference)
        assert dict(first.pair_rates) == dict(second.pair_rates)
        assert {a: dict(q) for a, q in first.exchange_quotes.items()} == {
            a: dict(q) for a, q in second.exchange_quotes.items()
        }

    def test_snapshot_shape(self, simulator: MarketSimulator) -> None:
        """Test that unknown assets are dropped from quotes and pairs."""
        snapshot = simulator.snapshot()

        assert snapshot.assets == ("USD", "BTC", "ETH")
        assert list(snapshot.exchange_quotes) == ["BTC", "ETH"]
        assert list(snapshot.quotes_for("BTC")) == ["A", "B", "C"]
        assert list(snapshot.pair_rates) == [("BTC", "ETH")]
        assert simulator.tick_count == 1

    def test_reference_asset_pinned(self, simulator: MarketSimulator) -> None:
        """Test that the reference asset always prices at 1."""
        for _ in range(5):
            assert simulator.snapshot().rate_of("USD") == 1.0

    def test_prices_within_variation(self, simulator: MarketSimulator) -> None:
        """Test that reference prices stay within the configured band."""
        prices = simulator.snapshot().rates_to_reference

        assert prices["BTC"] == pytest.approx(50000.0, rel=0.01)
        assert prices["ETH"] == pytest.approx(3000.0, rel=0.01)

    def test_without_pair_rates(self, simulator: MarketSimulator) -> None:
        """Test that direct quotes can be omitted."""
        assert dict(simulator.snapshot(include_pair_rates=False).pair_rates) == {}

    def test_inject_mispricing(self) -> None:
        """Test that a mispricing applies to the next snapshot only."""
        simulator = MarketSimulator(
            reference_prices={"USD": 1.0, "ETH": 3000.0},
            exchanges=["A", "B"],
            variation=0.0,
            seed=1,
        )
        simulator.inject_mispricing("ETH", -0.05)

        assert simulator.snapshot().rate_of("ETH") == pytest.approx(2850.0)
        assert simulator.snapshot().rate_of("ETH") == pytest.approx(3000.0)

    def test_inject_unknown_asset(self, simulator: MarketSimulator) -> None:
        """Test that mispricing an unknown asset fails."""
        with pytest.raises(KeyError):
            simulator.inject_mispricing("DOGE", 0.01)
