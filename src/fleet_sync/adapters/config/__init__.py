"""Configuration adapters."""

from fleet_sync.adapters.config.app_config import AppConfig, FreshnessWindows, PollIntervals

__all__ = ["AppConfig", "FreshnessWindows", "PollIntervals"]
