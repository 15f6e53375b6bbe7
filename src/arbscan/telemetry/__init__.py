"""Telemetry module for logging and result reporting."""

from arbscan.telemetry.logger import AsyncLogger, setup_logging
from arbscan.telemetry.reporter import OpportunityReporter, result_to_dict, to_json


__all__ = [
    "AsyncLogger",
    "OpportunityReporter",
    "result_to_dict",
    "setup_logging",
    "to_json",
]
