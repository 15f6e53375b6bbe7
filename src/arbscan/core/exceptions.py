"""
Exception hierarchy for the opportunity engine.

Only configuration problems are raised to the caller. Per-candidate
problems (missing rates, invalid quotes) are absorbed by the component
that meets them and the candidate is dropped.
"""


class ArbScanError(Exception):
    """Base exception for engine errors."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class ConfigurationError(ArbScanError, ValueError):
    """Raised when a fee model or scan configuration is unusable."""

    pass
