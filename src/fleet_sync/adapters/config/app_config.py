"""12-factor configuration adapter using environment variables and a .env file."""

import logging
from dataclasses import dataclass

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VISION_PROXY_PATH = "/api/python"


@dataclass(frozen=True)
class PollIntervals:
    """Seconds between background refreshes, per kind of data."""

    boards: float
    schedules: float
    unmatched: float


@dataclass(frozen=True)
class FreshnessWindows:
    """Seconds since the last heartbeat within which a device counts as online."""

    heartbeat_board: float
    power_dashboard: float


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Backends
    api_url: str = Field(
        default="http://localhost:5000", description="Base URL of the domain API"
    )
    python_api_url: str = Field(
        default="http://localhost:8888",
        description="Base URL of the telemetry/vision API outside production",
    )
    production: bool = Field(
        default=False, description="Use the production proxy for the vision API"
    )
    public_origin: str = Field(
        default="", description="Public origin the vision API is proxied under in production"
    )
    request_timeout_seconds: float = Field(
        default=30, description="Timeout for every API request in seconds"
    )

    # Lists and pagination
    page_size: int = Field(default=50, description="Records per page for paginated lists")

    # Polling
    board_poll_seconds: float = Field(
        default=5, description="Interval between board telemetry refreshes"
    )
    schedule_poll_seconds: float = Field(
        default=30, description="Interval between schedule, trip and power config refreshes"
    )
    unmatched_poll_seconds: float = Field(
        default=60, description="Interval between unmatched passenger count refreshes"
    )

    # Board liveness
    heartbeat_board_window_seconds: float = Field(
        default=75, description="Freshness window for the heartbeat board page"
    )
    power_dashboard_window_seconds: float = Field(
        default=90, description="Freshness window for the power management dashboard"
    )

    # Local state
    preferences_file: str = Field(
        default=".fleet-sync-preferences.json",
        description="JSON file remembering selections and the login token",
    )

    # Logging
    log_requests: bool = Field(
        default=False, description="Log every outbound request with redacted headers"
    )
    log_level: str = Field(default="INFO", description="Root log level")

    @field_validator(
        "request_timeout_seconds",
        "page_size",
        "board_poll_seconds",
        "schedule_poll_seconds",
        "unmatched_poll_seconds",
        "heartbeat_board_window_seconds",
        "power_dashboard_window_seconds",
    )
    @classmethod
    def validate_positive(cls, v: float) -> float:
        """Validate intervals, windows and sizes are positive."""
        if v <= 0:
            raise ValueError("value must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one the logging module knows."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("api_url", "python_api_url", "public_origin")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def primary_base_url(self) -> str:
        return self.api_url

    @property
    def vision_base_url(self) -> str:
        """Vision API base URL; proxied under the public origin in production."""
        if self.production:
            if not self.public_origin:
                raise ValueError("public_origin must be set in production")
            return f"{self.public_origin}{VISION_PROXY_PATH}"
        return self.python_api_url

    @property
    def poll_intervals(self) -> PollIntervals:
        return PollIntervals(
            boards=self.board_poll_seconds,
            schedules=self.schedule_poll_seconds,
            unmatched=self.unmatched_poll_seconds,
        )

    @property
    def freshness_windows(self) -> FreshnessWindows:
        return FreshnessWindows(
            heartbeat_board=self.heartbeat_board_window_seconds,
            power_dashboard=self.power_dashboard_window_seconds,
        )
