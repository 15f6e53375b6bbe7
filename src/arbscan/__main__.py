"""
Entry point for the demo runner.

Runs one evaluation pass over a simulated rate snapshot and prints the
ranked opportunities.

Usage:
    python -m arbscan
    arbscan  # if installed via pip
"""

import sys

from pydantic import ValidationError


def main() -> int:
    """
    Main entry point.

    Returns:
        Exit code (0 for success).
    """
    from arbscan import __version__
    from arbscan.config.settings import get_settings
    from arbscan.core.engine import OpportunityEngine
    from arbscan.core.exceptions import ConfigurationError
    from arbscan.simulation.market import MarketSimulator
    from arbscan.telemetry.logger import setup_logging
    from arbscan.telemetry.reporter import OpportunityReporter, to_json

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    async_logger = setup_logging(level=settings.log_level)
    logger = async_logger.logger

    try:
        config = settings.to_scan_config()
        fee_model = settings.to_fee_model()
        engine = OpportunityEngine(limit=settings.result_limit)

        simulator = MarketSimulator(
            exchanges=settings.exchanges,
            variation=settings.price_variation,
            seed=settings.simulation_seed,
        )
        snapshot = simulator.snapshot()

        logger.info(
            f"arbscan v{__version__}: {len(snapshot.assets)} assets, "
            f"{len(simulator.exchanges)} exchanges, "
            f"min profit {config.min_profit_percent}%"
        )

        result = engine.scan(snapshot, fee_model, config)

    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    finally:
        async_logger.stop()

    if settings.json_output:
        sys.stdout.write(to_json(result, indent=True).decode())
        sys.stdout.write("\n")
    else:
        OpportunityReporter(reference_asset=snapshot.reference_asset).display(result)

    return 0


if __name__ == "__main__":
    sys.exit(main())
