"""Engine settings loaded from environment variables via pydantic-settings."""

from enum import StrEnum
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(StrEnum):
    json = "json"
    console = "console"


class ZoneFallback(StrEnum):
    """What to do when a crop has no reference row for the requested soil zone."""

    first_available = "first_available"
    strict = "strict"


class Settings(BaseSettings):
    """Engine options; each field maps to an environment variable of the same name."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ── Agronomic calendar ──────────────────────────────────────────────────
    farm_timezone: str = "America/Regina"

    # ── Reference defaults ──────────────────────────────────────────────────
    default_province: str = "SK"
    default_soil_zone: str = "Black"
    zone_fallback: ZoneFallback = ZoneFallback.first_available

    # ── Advisory ────────────────────────────────────────────────────────────
    advisor_name: str = "Lily"

    # ── Observability ───────────────────────────────────────────────────────
    log_level: str = "info"
    log_format: LogFormat = LogFormat.json


@lru_cache
def get_settings() -> Settings:
    """Singleton settings instance (cached after first call)."""
    return Settings()
