"""
Triangular cycle enumeration using graph analysis.

Uses NetworkX to hold the conversion graph: nodes are assets, and every
ordered pair of convertible assets is an edge, since any two reference
prices yield a rate.
"""

import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, TypeAlias

import networkx as nx

from arbscan.core.types import Asset, RateSnapshot


logger = logging.getLogger(__name__)


Cycle: TypeAlias = tuple[Asset, Asset, Asset]


class CycleEnumerator:
    """
    Enumerates candidate triangular cycles.

    A cycle is ``base -> X -> Y -> base`` where ``base`` is one of the
    seed assets. Both orientations (``X -> Y`` and ``Y -> X``) are produced
    because they are different trade sequences.

    Order is fully determined by the seed order and the asset universe
    order, so repeated runs over the same inputs yield the same sequence.
    Cost is O(|bases| * n^2); fine for tens of assets, not for thousands.
    """

    def __init__(self, assets: Iterable[Asset]) -> None:
        """
        Initialize enumerator.

        Args:
            assets: Asset universe, in the order it should be walked.
        """
        self._graph: nx.DiGraph = nx.DiGraph()
        self._cycles: list[Cycle] = []
        self.build_graph(assets)

    @classmethod
    def from_snapshot(cls, snapshot: RateSnapshot) -> "CycleEnumerator":
        """Create an enumerator over every convertible asset of a snapshot."""
        return cls(snapshot.assets)

    def build_graph(self, assets: Iterable[Asset]) -> int:
        """
        Build the directed conversion graph.

        Returns:
            Number of edges (directed conversions) added.
        """
        self._graph.clear()

        universe = list(dict.fromkeys(assets))
        self._graph.add_nodes_from(universe)

        for from_asset in universe:
            for to_asset in universe:
                if from_asset != to_asset:
                    self._graph.add_edge(from_asset, to_asset)

        logger.debug(
            f"Built graph with {self._graph.number_of_nodes()} assets, "
            f"{self._graph.number_of_edges()} edges"
        )

        return int(self._graph.number_of_edges())

    def iter_cycles(self, base_assets: Sequence[Asset]) -> Iterator[Cycle]:
        """
        Yield every cycle seeded from the given base assets.

        Bases that are repeated are only walked once; bases outside the
        universe yield nothing. An empty seed list, or a universe with
        fewer than three assets, yields no cycles.

        Args:
            base_assets: Starting/ending assets for cycles.

        Yields:
            ``(base, first_hop, second_hop)`` tuples.
        """
        if self._graph.number_of_nodes() < 3:
            return

        for base in dict.fromkeys(base_assets):
            if base not in self._graph:
                logger.debug(f"Base asset {base} not in graph")
                continue

            for first_hop in self._graph.successors(base):
                for second_hop in self._graph.successors(first_hop):
                    # The graph is complete, so second_hop -> base always exists
                    if second_hop == base:
                        continue

                    yield (base, first_hop, second_hop)

    def find_cycles(self, base_assets: Sequence[Asset]) -> list[Cycle]:
        """
        Collect every cycle seeded from the given base assets.

        Returns:
            List of cycles, in enumeration order.
        """
        self._cycles = list(self.iter_cycles(base_assets))
        logger.debug(f"Enumerated {len(self._cycles)} cycles from {list(base_assets)}")
        return self._cycles

    def get_cycles(self) -> list[Cycle]:
        """Get cycles from the last ``find_cycles`` call."""
        return self._cycles

    @property
    def cycle_count(self) -> int:
        return len(self._cycles)

    def get_assets(self) -> list[Asset]:
        """Get all assets in the graph, in universe order."""
        return list(self._graph.nodes())

    @property
    def graph(self) -> nx.DiGraph:
        """Get the underlying NetworkX graph."""
        return self._graph

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        """
        Convert enumerated cycles to serializable format.

        Returns:
            Dict with cycle data.
        """
        return {
            "cycles": [
                {
                    "id": "-".join(cycle),
                    "base_asset": cycle[0],
                    "path": [*cycle, cycle[0]],
                }
                for cycle in self._cycles
            ]
        }
