"""Simulated rate provider for demo mode without live data."""

from arbscan.simulation.market import MarketSimulator, SimulatedAsset


__all__ = [
    "MarketSimulator",
    "SimulatedAsset",
]
