"""Configuration management for the Stock Insight dashboard.

Settings come from environment variables (prefix ``STOCK_INSIGHT_``) and an
optional ``.env`` file.
"""

import sys
from pathlib import Path

from loguru import logger
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings and configuration."""

    model_config = SettingsConfigDict(
        env_prefix="STOCK_INSIGHT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="stock-insight", description="Application name")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Input
    report_path: Path = Field(
        default=Path("data/report.json"), description="Analysis report shown by the dashboard"
    )

    # Display
    currency_symbol: str = Field(default="$", description="Prefix for prices")
    currency_code: str = Field(default="USD", description="Suffix for the chart net change")
    chart_padding: float = Field(
        default=5.0, ge=0, description="Value axis padding around min/max price"
    )
    chart_height: int = Field(default=320, gt=0, description="Price chart height in px")
    chart_window_days: int = Field(
        default=30, gt=0, description="Window length shown in the chart header"
    )


def configure_logging(level: str) -> None:
    """Replace the default loguru sink with one at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


# Singleton instance
settings = Settings()


def get_settings() -> Settings:
    return settings
