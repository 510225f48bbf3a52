"""
Configuration settings using Pydantic Settings.

Only the ambient concerns (logging, report locations, pass threshold) are
configurable. Scoring weights, tiers and grade tables are fixed constants
in ``krscore.core.scoring`` and have no setting.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field("INFO", alias="KRSCORE_LOG_LEVEL")
    log_json: bool = Field(False, alias="KRSCORE_LOG_JSON")
    debug: bool = Field(False, alias="KRSCORE_DEBUG")

    # Quality report aggregation
    results_dir: str = Field(".", alias="KRSCORE_RESULTS_DIR")
    report_path: str = Field("okr-agent-quality-report.json", alias="KRSCORE_REPORT_PATH")
    report_pass_threshold: float = Field(
        70.0, ge=0.0, le=100.0, alias="KRSCORE_REPORT_PASS_THRESHOLD"
    )

    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug mode is on, otherwise the configured level."""
        return "DEBUG" if self.debug else self.log_level.upper()


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached singleton (tests change the environment between cases)."""
    global _settings
    _settings = None
