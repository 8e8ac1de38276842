"""Application settings loaded from environment variables via pydantic-settings."""

from enum import StrEnum
from functools import lru_cache

from pydantic import PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(StrEnum):
    json = "json"
    console = "console"


class Settings(BaseSettings):
    """Central configuration — all values sourced from env vars or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ── Knowledge base ──────────────────────────────────────────────────────
    species_table_path: str | None = None

    # ── Weather ─────────────────────────────────────────────────────────────
    forecast_window_periods: PositiveInt = 8

    # ── Gestation ───────────────────────────────────────────────────────────
    # 280 after a confirmed-pregnant check, 283 when the due date is set from
    # the service date alone. Some herds book 305; pending domain review.
    gestation_days_confirmed: PositiveInt = 280
    gestation_days_service_registry: PositiveInt = 283

    # ── Artificial insemination protocol ────────────────────────────────────
    ai_check_after_bull_exit_days: PositiveInt = 45
    ai_device_days: PositiveInt = 7
    ai_insemination_after_removal_days: PositiveInt = 2
    ai_recheck_after_insemination_days: PositiveInt = 40

    # ── Observability ───────────────────────────────────────────────────────
    log_level: str = "info"
    log_format: LogFormat = LogFormat.json


@lru_cache
def get_settings() -> Settings:
    """Singleton settings instance (cached after first call)."""
    return Settings()
