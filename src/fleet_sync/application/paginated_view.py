"""A server-paginated, filterable view such as the passenger log."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

from fleet_sync.application.pagination import PageInfo
from fleet_sync.application.query_state import ALL, QueryState
from fleet_sync.domain.contracts.paginated_source import PaginatedSourceProtocol
from fleet_sync.domain.contracts.preference_store import PreferenceStoreProtocol
from fleet_sync.domain.models.api_result import ApiFailure
from fleet_sync.domain.models.mutation_outcome import MutationOutcome

logger = logging.getLogger(__name__)


class PaginatedView:
    """Holds the query, the current page of records and the server total."""

    def __init__(
        self,
        source: PaginatedSourceProtocol,
        query: QueryState,
        label: str = "record",
        preferences: PreferenceStoreProtocol | None = None,
        bus_preference_key: str | None = None,
    ) -> None:
        """Initialize the view.

        Args:
            source: Paginated collection to read from.
            query: Initial filters and page.
            label: Resource name used in messages.
            preferences: Optional store remembering the last selected bus.
            bus_preference_key: Preference key for the selected bus of this view.
        """
        self.source = source
        self.label = label
        self.preferences = preferences
        self.bus_preference_key = bus_preference_key
        self.query = query.with_bus(self._remembered_bus(query.bus_id))
        self.items: list[Any] = []
        self.total = 0
        self._active_loads = 0
        self.error: str | None = None

    def _remembered_bus(self, default: str) -> str:
        if self.preferences is None or self.bus_preference_key is None:
            return default
        stored = self.preferences.get(self.bus_preference_key)
        return stored if isinstance(stored, str) and stored else default

    @property
    def loading(self) -> bool:
        return self._active_loads > 0

    @property
    def page_info(self) -> PageInfo:
        return PageInfo.for_page(self.query.page, self.query.page_size, self.total)

    def set_date(self, value: date) -> None:
        self.query = self.query.with_date(value)

    def set_bus(self, bus_id: str | None) -> None:
        self.query = self.query.with_bus(bus_id)
        if self.preferences is not None and self.bus_preference_key is not None:
            self.preferences.set(self.bus_preference_key, bus_id or ALL)

    def set_trip(self, trip_id: str | None) -> None:
        self.query = self.query.with_trip(trip_id)

    def set_type(self, type_filter: str | None) -> None:
        self.query = self.query.with_type(type_filter)

    def reset_filters(self) -> None:
        self.set_bus(ALL)
        self.query = self.query.with_filters(trip_id=ALL, type_filter=ALL)

    def go_to_page(self, page: int) -> bool:
        """Move to ``page`` unless a load is running or it is already current."""
        if self.loading or page == self.query.page:
            return False
        target = self.query.with_page(page, self.total)
        if target.page == self.query.page:
            return False
        self.query = target
        return True

    def next_page(self) -> bool:
        if not self.page_info.has_next:
            return False
        return self.go_to_page(self.query.page + 1)

    def previous_page(self) -> bool:
        if not self.page_info.has_previous:
            return False
        return self.go_to_page(self.query.page - 1)

    async def load(self) -> MutationOutcome:
        """Fetch the page for the current query.

        A failure keeps the records on display. A result for a query that has
        since changed is discarded. When the total shrank below the current
        page, the last page is fetched instead.
        """
        requested = self.query
        self._active_loads += 1
        try:
            result = await self.source.fetch_page(requested.to_params())
        finally:
            self._active_loads -= 1

        if requested != self.query:
            logger.debug(f"Discarding {self.label} page for superseded query {requested}")
            return MutationOutcome(False, "Superseded by a newer query")
        if isinstance(result, ApiFailure):
            self.error = result.user_message(f"Failed to fetch {self.label}s")
            logger.error(f"Error fetching {self.label}s: {result.kind} {result.status}")
            return MutationOutcome(False, self.error)

        page = result.data
        self.items = list(page.items)
        self.total = page.total
        self.error = None
        clamped = self.query.with_page(self.query.page, self.total)
        if clamped != self.query:
            logger.debug(f"Page {self.query.page} is past the end, moving to {clamped.page}")
            self.query = clamped
            return await self.load()
        return MutationOutcome(True, self.page_info.summary)
