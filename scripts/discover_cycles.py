#!/usr/bin/env python3
"""
Cycle Discovery Script.

Lists every triangular cycle the engine would evaluate for the configured
base assets over the simulator's asset universe, without evaluating them.
"""

import sys
from pathlib import Path

import orjson

# Add src to path for direct execution
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from arbscan.config.settings import get_settings
from arbscan.simulation.market import MarketSimulator
from arbscan.strategy.graph import CycleEnumerator


def main() -> int:
    """Discover and display cycles."""
    print("=" * 60)
    print("  CYCLE DISCOVERY")
    print("=" * 60)
    print()

    settings = get_settings()
    config = settings.to_scan_config()

    snapshot = MarketSimulator(seed=settings.simulation_seed).snapshot()
    enumerator = CycleEnumerator.from_snapshot(snapshot)
    cycles = enumerator.find_cycles(config.base_assets)

    print(f"Assets:      {', '.join(enumerator.get_assets())}")
    print(f"Base assets: {', '.join(config.base_assets)}")
    print()

    for i, cycle in enumerate(cycles, 1):
        print(f"{i:4}. {' -> '.join((*cycle, cycle[0]))}")

    print()
    print(f"Total cycles: {enumerator.cycle_count}")

    export_path = Path("cycles.json")
    export_path.write_bytes(orjson.dumps(enumerator.to_dict(), option=orjson.OPT_INDENT_2))
    print(f"Exported to: {export_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
