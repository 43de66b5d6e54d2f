"""12-factor configuration adapter using environment variables and optional TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from border_wait_times.adapters.cbp_feed.constants import (
    DEFAULT_HISTORICAL_CSV_URL,
    DEFAULT_LIVE_FEED_URL,
)
from border_wait_times.domain.models.wait_level import WaitThresholds

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

TOML_FEED_KEYS = ("live_feed_url", "historical_csv_url", "refresh_interval_seconds")
TOML_DISPLAY_KEYS = ("wait_threshold_green", "wait_threshold_yellow")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Feed configuration
    live_feed_url: str = Field(
        default=DEFAULT_LIVE_FEED_URL, description="URL of the live wait-time RSS feed"
    )
    historical_csv_url: str = Field(
        default=DEFAULT_HISTORICAL_CSV_URL,
        description="URL of the published historical wait-time CSV export",
    )
    refresh_interval_seconds: int = Field(
        default=300, description="Interval between live feed refreshes in seconds"
    )

    # Display configuration
    wait_threshold_green: int = Field(
        default=20, description="Highest wait in minutes still shown as green"
    )
    wait_threshold_yellow: int = Field(
        default=45, description="Highest wait in minutes still shown as yellow"
    )
    favorite_ports: str = Field(
        default="",
        description="Comma-separated port names listed before all other ports",
    )

    log_level: str = Field(default="INFO", description="Logging level name")

    # Optional TOML file with [feeds] and [display] sections
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file overriding feed and display settings",
    )

    @field_validator("refresh_interval_seconds")
    @classmethod
    def validate_refresh_interval(cls, v: int) -> int:
        """Validate the refresh interval is at least one second."""
        if v < 1:
            raise ValueError("refresh_interval_seconds must be at least 1")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v.upper()

    @model_validator(mode="after")
    def validate_thresholds(self) -> "AppConfig":
        """Validate green threshold is positive and below the yellow threshold."""
        if self.wait_threshold_green < 1:
            raise ValueError("wait_threshold_green must be positive")
        if self.wait_threshold_green >= self.wait_threshold_yellow:
            raise ValueError("wait_threshold_green must be lower than wait_threshold_yellow")
        return self

    def load_toml(self) -> dict[str, Any]:
        """Load the TOML file, updating feed and display settings found in it."""
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        overrides: dict[str, Any] = {}
        feeds = toml_data.get("feeds", {})
        for key in TOML_FEED_KEYS:
            if key in feeds:
                overrides[key] = feeds[key]

        display = toml_data.get("display", {})
        for key in TOML_DISPLAY_KEYS:
            if key in display:
                overrides[key] = display[key]
        if "favorite_ports" in display:
            favorites = display["favorite_ports"]
            if not isinstance(favorites, list):
                raise ValueError("TOML config 'display.favorite_ports' must be a list")
            overrides["favorite_ports"] = ",".join(str(name) for name in favorites)

        # Validate the merged settings before applying any override.
        validated = self.model_validate({**self.model_dump(), **overrides})
        for key in overrides:
            setattr(self, key, getattr(validated, key))
        return toml_data

    def thresholds(self) -> WaitThresholds:
        return WaitThresholds(green=self.wait_threshold_green, yellow=self.wait_threshold_yellow)

    def favorites(self) -> list[str]:
        return [name.strip() for name in self.favorite_ports.split(",") if name.strip()]

    def configure_logging(self) -> None:
        logging.getLogger().setLevel(self.log_level)
