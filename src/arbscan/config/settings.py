"""
Application settings with environment variable support.

Uses Pydantic Settings for type-safe configuration with automatic
environment variable loading and validation. These settings feed the
demo runner; the engine itself only ever sees the FeeModel and
ScanConfig built from them.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from arbscan.config.constants import (
    DEFAULT_BASE_ASSETS,
    DEFAULT_EXCHANGES,
    DEFAULT_FEE_RATE,
    DEFAULT_MIN_PROFIT_PERCENT,
    DEFAULT_PRICE_VARIATION,
    DEFAULT_START_NOTIONAL,
    DEFAULT_TRANSFER_COST_PERCENT,
)
from arbscan.core.types import FeeModel, ScanConfig


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via ``ARBSCAN_``-prefixed environment
    variables or a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="ARBSCAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =========================================================================
    # Scan Configuration
    # =========================================================================

    min_profit_percent: float = Field(
        default=DEFAULT_MIN_PROFIT_PERCENT,
        ge=-100.0,
        le=100.0,
        description="Minimum profit to report, as a percent (0.5 = 0.5%)",
    )

    start_notional: float = Field(
        default=DEFAULT_START_NOTIONAL,
        gt=0.0,
        description="Starting amount used to size opportunities",
    )

    base_assets: list[str] = Field(
        default_factory=lambda: list(DEFAULT_BASE_ASSETS),
        description="Seed assets for triangular cycles",
    )

    result_limit: int | None = Field(
        default=None,
        ge=1,
        description="Maximum opportunities shown per mode",
    )

    # =========================================================================
    # Fees
    # =========================================================================

    per_hop_fee: float = Field(
        default=DEFAULT_FEE_RATE,
        ge=0.0,
        lt=1.0,
        description="Fee fraction per conversion hop (e.g., 0.001 = 0.1%)",
    )

    transfer_cost_percent: float = Field(
        default=DEFAULT_TRANSFER_COST_PERCENT,
        ge=0.0,
        description="Default cross-exchange transfer cost, as a percent",
    )

    # =========================================================================
    # Simulation
    # =========================================================================

    exchanges: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCHANGES),
        description="Exchanges quoted by the simulator",
    )

    simulation_seed: int | None = Field(
        default=None,
        description="Seed for simulated prices (None for a fresh run each time)",
    )

    price_variation: float = Field(
        default=DEFAULT_PRICE_VARIATION,
        ge=0.0,
        le=0.1,
        description="Maximum relative deviation of simulated prices",
    )

    # =========================================================================
    # Operation Mode
    # =========================================================================

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging verbosity level",
    )

    json_output: bool = Field(
        default=False,
        description="Print results as JSON instead of tables",
    )

    # =========================================================================
    # Validators
    # =========================================================================

    @field_validator("base_assets", "exchanges", mode="after")
    @classmethod
    def validate_symbols(cls, v: list[str]) -> list[str]:
        """Normalize symbols and drop blanks and duplicates."""
        cleaned = [s.strip() for s in v if s and s.strip()]
        return list(dict.fromkeys(cleaned))

    @field_validator("exchanges", mode="after")
    @classmethod
    def validate_exchanges(cls, v: list[str]) -> list[str]:
        """Spreads need at least two venues."""
        if len(v) < 2:
            raise ValueError("At least two exchanges are required")
        return v

    # =========================================================================
    # Engine Inputs
    # =========================================================================

    def to_scan_config(self) -> ScanConfig:
        """Build the per-pass scan configuration."""
        return ScanConfig(
            min_profit_percent=self.min_profit_percent,
            start_notional=self.start_notional,
            base_assets=tuple(s.upper() for s in self.base_assets),
        )

    def to_fee_model(self) -> FeeModel:
        """Build a fee model with a flat default transfer cost."""
        return FeeModel.flat(
            per_hop_fee=self.per_hop_fee,
            transfer_cost_percent=self.transfer_cost_percent,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses LRU cache to ensure settings are loaded only once.
    Clear cache with `get_settings.cache_clear()` if needed.
    """
    return Settings()
