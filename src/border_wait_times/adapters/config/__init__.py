"""Configuration adapters."""

from border_wait_times.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
