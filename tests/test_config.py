"""Tests for configuration adapter."""

from pathlib import Path
from tempfile import NamedTemporaryFile

import pytest

from border_wait_times.adapters.cbp_feed.constants import (
    DEFAULT_HISTORICAL_CSV_URL,
    DEFAULT_LIVE_FEED_URL,
)
from border_wait_times.adapters.config import AppConfig
from border_wait_times.domain.models import WaitThresholds


def _write_toml(content: str) -> str:
    with NamedTemporaryFile(mode="w", suffix=".toml", delete=False) as f:
        f.write(content)
        return f.name


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    config = AppConfig()

    assert config.live_feed_url == DEFAULT_LIVE_FEED_URL
    assert config.historical_csv_url == DEFAULT_HISTORICAL_CSV_URL
    assert config.refresh_interval_seconds == 300
    assert config.thresholds() == WaitThresholds(green=20, yellow=45)
    assert config.favorites() == []
    assert config.log_level == "INFO"


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("LIVE_FEED_URL", "https://feed.test/rss")
    monkeypatch.setenv("REFRESH_INTERVAL_SECONDS", "60")
    monkeypatch.setenv("FAVORITE_PORTS", "San Ysidro, Otay Mesa,,")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = AppConfig()

    assert config.live_feed_url == "https://feed.test/rss"
    assert config.refresh_interval_seconds == 60
    assert config.favorites() == ["San Ysidro", "Otay Mesa"]
    assert config.log_level == "DEBUG"


def test_config_validates_refresh_interval(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given a zero refresh interval, when loading config, then validation error is raised."""
    monkeypatch.setenv("REFRESH_INTERVAL_SECONDS", "0")

    with pytest.raises(ValueError, match="refresh_interval_seconds must be at least 1"):
        AppConfig()


def test_config_validates_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an unknown log level, when loading config, then validation error is raised."""
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValueError, match="log_level must be one of"):
        AppConfig()


def test_config_validates_threshold_order(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given a green threshold above yellow, when loading config, then validation error is raised."""
    monkeypatch.setenv("WAIT_THRESHOLD_GREEN", "50")

    with pytest.raises(ValueError, match="must be lower than wait_threshold_yellow"):
        AppConfig()


def test_load_toml_without_file_returns_empty() -> None:
    """Given no config file, when loading TOML, then nothing is overridden."""
    config = AppConfig(config_file=None)

    assert config.load_toml() == {}
    assert config.live_feed_url == DEFAULT_LIVE_FEED_URL


def test_load_toml_overrides_feed_and_display_settings() -> None:
    """Given a TOML file with feed and display sections, when loading, then settings are overridden."""
    temp_path = _write_toml(
        """
[feeds]
live_feed_url = "https://feed.test/rss"
refresh_interval_seconds = 120

[display]
wait_threshold_green = 10
wait_threshold_yellow = 30
favorite_ports = ["Tecate", "Calexico East"]
"""
    )

    try:
        config = AppConfig(config_file=temp_path)
        data = config.load_toml()

        assert "feeds" in data
        assert config.live_feed_url == "https://feed.test/rss"
        assert config.historical_csv_url == DEFAULT_HISTORICAL_CSV_URL
        assert config.refresh_interval_seconds == 120
        assert config.thresholds() == WaitThresholds(green=10, yellow=30)
        assert config.favorites() == ["Tecate", "Calexico East"]
    finally:
        Path(temp_path).unlink()


def test_load_toml_rejects_non_list_favorites() -> None:
    """Given favorite ports as a string, when loading TOML, then ValueError is raised."""
    temp_path = _write_toml('[display]\nfavorite_ports = "Tecate"\n')

    try:
        config = AppConfig(config_file=temp_path)
        with pytest.raises(ValueError, match="must be a list"):
            config.load_toml()
    finally:
        Path(temp_path).unlink()


def test_load_toml_rechecks_thresholds() -> None:
    """Given TOML thresholds out of order, when loading, then ValueError is raised."""
    temp_path = _write_toml("[display]\nwait_threshold_green = 60\n")

    try:
        config = AppConfig(config_file=temp_path)
        with pytest.raises(ValueError, match="must be lower than wait_threshold_yellow"):
            config.load_toml()
    finally:
        Path(temp_path).unlink()


@pytest.mark.parametrize("value", ["0", '"abc"'])
def test_when_toml_refresh_interval_invalid_then_rejected_and_kept(value: str) -> None:
    """Given an invalid TOML refresh interval, when loading, then ValueError is raised and the setting is kept."""
    temp_path = _write_toml(f"[feeds]\nrefresh_interval_seconds = {value}\n")

    try:
        config = AppConfig(config_file=temp_path)
        with pytest.raises(ValueError, match="refresh_interval_seconds"):
            config.load_toml()
        assert config.refresh_interval_seconds == 300
    finally:
        Path(temp_path).unlink()


def test_when_toml_sets_both_thresholds_then_validated_as_pair() -> None:
    """Given both thresholds raised above the defaults, when loading TOML, then they are validated as a pair."""
    temp_path = _write_toml(
        '[feeds]\nrefresh_interval_seconds = "90"\n\n'
        "[display]\nwait_threshold_green = 50\nwait_threshold_yellow = 80\n"
    )

    try:
        config = AppConfig(config_file=temp_path)
        config.load_toml()

        assert config.refresh_interval_seconds == 90
        assert config.thresholds() == WaitThresholds(green=50, yellow=80)
    finally:
        Path(temp_path).unlink()


def test_config_raises_error_when_file_not_found() -> None:
    """Given non-existent config file, when loading TOML, then FileNotFoundError is raised."""
    config = AppConfig(config_file="nonexistent.toml")

    with pytest.raises(FileNotFoundError, match="Configuration file not found"):
        config.load_toml()
