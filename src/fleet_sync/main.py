"""Logging setup and wiring of a fleet client."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from datetime import date

import aiohttp

from fleet_sync.adapters.api.fleet_api import FleetApi
from fleet_sync.adapters.camera.webcam import WebcamCapture
from fleet_sync.adapters.config import AppConfig
from fleet_sync.adapters.http import ApiRequestLogger, BackendEndpoint, HttpTransport
from fleet_sync.adapters.storage import (
    SELECTED_BUS_PASSENGERS,
    CredentialStore,
    JsonPreferenceStore,
)
from fleet_sync.application.liveness import LivenessClassifier
from fleet_sync.application.paginated_view import PaginatedView
from fleet_sync.application.query_state import QueryState
from fleet_sync.application.resource_store import ResourceStore
from fleet_sync.application.schedule_editor import ScheduleEditor
from fleet_sync.domain.models.backend import Backend
from fleet_sync.domain.models.power_config import BusPowerConfig
from fleet_sync.domain.models.season_ticket_member import SeasonTicketMember

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging on stderr."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


class FleetClient:
    """Owns the HTTP sessions and builds stores, views and pollers on top of them.

    Use as an async context manager so the sessions are closed.
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        on_session_expired: Callable[[], None] | None = None,
        view_provider: Callable[[], str | None] | None = None,
    ) -> None:
        self.config = config or AppConfig()
        self.preferences = JsonPreferenceStore(self.config.preferences_file)
        self.credentials = CredentialStore(self.preferences)
        self._on_session_expired = on_session_expired or self._forget_session
        self._view_provider = view_provider
        self._sessions: list[aiohttp.ClientSession] = []
        self.transport: HttpTransport | None = None
        self.api: FleetApi | None = None

    async def __aenter__(self) -> FleetClient:
        primary = aiohttp.ClientSession()
        # The vision backend never receives cookies.
        vision = aiohttp.ClientSession(cookie_jar=aiohttp.DummyCookieJar())
        self._sessions = [primary, vision]
        self.transport = HttpTransport(
            {
                Backend.PRIMARY: BackendEndpoint(self.config.primary_base_url, primary, True),
                Backend.VISION: BackendEndpoint(self.config.vision_base_url, vision, False),
            },
            credentials=self.credentials,
            timeout_seconds=self.config.request_timeout_seconds,
            on_session_expired=self._on_session_expired,
            view_provider=self._view_provider,
            request_logger=ApiRequestLogger(self.config.log_requests),
        )
        self.api = FleetApi(self.transport, self.credentials)
        logger.debug(
            f"Fleet client ready (api: {self.config.primary_base_url}, "
            f"vision: {self.config.vision_base_url})"
        )
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        for session in self._sessions:
            await session.close()
        self._sessions = []

    def _forget_session(self) -> None:
        logger.warning("Session expired, please log in again")
        self.credentials.clear()

    @property
    def fleet_api(self) -> FleetApi:
        if self.api is None:
            raise RuntimeError("FleetClient must be entered before use")
        return self.api

    def passenger_view(self, on_date: date) -> PaginatedView:
        return PaginatedView(
            self.fleet_api.passengers,
            QueryState(date=on_date, page_size=self.config.page_size),
            label="passenger",
            preferences=self.preferences,
            bus_preference_key=SELECTED_BUS_PASSENGERS,
        )

    def unmatched_view(self, on_date: date) -> PaginatedView:
        return PaginatedView(
            self.fleet_api.unmatched,
            QueryState(date=on_date, page_size=self.config.page_size),
            label="unmatched passenger",
        )

    def member_store(self) -> ResourceStore[SeasonTicketMember]:
        return ResourceStore(self.fleet_api.members)

    def power_config_store(self) -> ResourceStore[BusPowerConfig]:
        return ResourceStore(self.fleet_api.power_configs)

    def schedule_editor(self) -> ScheduleEditor:
        return ScheduleEditor(self.fleet_api.schedules)

    def board_classifier(self) -> LivenessClassifier:
        return LivenessClassifier(self.config.freshness_windows.power_dashboard)

    def heartbeat_classifier(self) -> LivenessClassifier:
        return LivenessClassifier(self.config.freshness_windows.heartbeat_board)

    def webcam(self, device_index: int = 0) -> WebcamCapture:
        return WebcamCapture(device_index)
