"""Filter and page cursor state for paginated resource views."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from datetime import date
from typing import Any

# Sentinel for "no filter" on the bus, trip and type dimensions.
ALL = "ALL"

DEFAULT_PAGE_SIZE = 50


@dataclass(frozen=True)
class QueryState:
    """Selected filters and page of a paginated view.

    Changing any filter dimension returns a state whose page is 0, so a
    stale page can never point past the new result set.
    """

    date: date
    bus_id: str = ALL
    trip_id: str = ALL
    type_filter: str = ALL
    page: int = 0
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page_size <= 0:
            raise ValueError("page_size must be positive")
        if self.page < 0:
            raise ValueError("page must not be negative")

    def with_date(self, value: date) -> QueryState:
        return replace(self, date=value, page=0)

    def with_bus(self, bus_id: str | None) -> QueryState:
        return replace(self, bus_id=bus_id or ALL, page=0)

    def with_trip(self, trip_id: str | None) -> QueryState:
        return replace(self, trip_id=trip_id or ALL, page=0)

    def with_type(self, type_filter: str | None) -> QueryState:
        return replace(self, type_filter=type_filter or ALL, page=0)

    def with_filters(
        self,
        *,
        date: date | None = None,
        bus_id: str | None = None,
        trip_id: str | None = None,
        type_filter: str | None = None,
    ) -> QueryState:
        """Apply several filter changes at once, as a filter dialog does."""
        return replace(
            self,
            date=date if date is not None else self.date,
            bus_id=bus_id if bus_id is not None else self.bus_id,
            trip_id=trip_id if trip_id is not None else self.trip_id,
            type_filter=type_filter if type_filter is not None else self.type_filter,
            page=0,
        )

    def with_page(self, page: int, total: int | None = None) -> QueryState:
        """Move to ``page``, clamped to the valid range when ``total`` is known."""
        page = max(page, 0)
        if total is not None:
            last_page = max(math.ceil(total / self.page_size) - 1, 0)
            page = min(page, last_page)
        return replace(self, page=page)

    @property
    def skip(self) -> int:
        return self.page * self.page_size

    @property
    def date_param(self) -> str:
        return self.date.isoformat()

    def to_params(self) -> dict[str, Any]:
        """Query parameters for the paginated list request.

        Dimensions set to ``ALL`` are omitted entirely.
        """
        params: dict[str, Any] = {
            "limit": self.page_size,
            "skip": self.skip,
            "date": self.date_param,
        }
        if self.type_filter != ALL:
            params["type"] = self.type_filter
        if self.bus_id != ALL:
            params["bus_id"] = self.bus_id
        if self.trip_id != ALL:
            params["trip_id"] = self.trip_id
        return params

    def trip_option_params(self) -> dict[str, Any]:
        """Parameters for listing the trips selectable for this date and bus."""
        params: dict[str, Any] = {"date": self.date_param}
        if self.bus_id != ALL:
            params["bus_id"] = self.bus_id
        return params

    def route_distance_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {"date": self.date_param}
        if self.trip_id != ALL:
            params["trip_id"] = self.trip_id
        if self.bus_id != ALL:
            params["bus_id"] = self.bus_id
        return params
