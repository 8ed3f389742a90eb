"""Trip domain models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TripOption(BaseModel):
    """A trip that can be selected as a filter for a date and bus."""

    model_config = ConfigDict(extra="allow")

    trip_id: str
    bus_id: str | None = None
    route_name: str | None = None


class RecentTrip(BaseModel):
    """A completed trip derived from the server's passenger trip analysis."""

    trip_id: str
    bus_id: str
    route_name: str
    start_time: datetime
    end_time: datetime | None = None
    status: str = "completed"
    total_passengers: int = 0
    total_unmatched: int = 0


class ScheduleEntry(BaseModel):
    """One trip in a bus's daily schedule."""

    model_config = ConfigDict(extra="allow")

    trip_name: str | None = None
    start_time: str | None = None
    end_time: str | None = None


class BusSchedule(BaseModel):
    """Daily schedule of a bus."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str | None = Field(default=None, alias="_id")
    bus_id: str
    bus_name: str = ""
    route_name: str = "Bus Route"
    active: bool = True
    trips: list[ScheduleEntry] = Field(default_factory=list)

    @classmethod
    def empty(cls, bus_id: str) -> "BusSchedule":
        """Placeholder schedule for a bus the server has no schedule for."""
        return cls(bus_id=bus_id, bus_name=bus_id)

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def without_trip(self, index: int) -> "BusSchedule":
        if not 0 <= index < len(self.trips):
            raise IndexError(f"No trip at index {index}")
        trips = [trip for i, trip in enumerate(self.trips) if i != index]
        return self.model_copy(update={"trips": trips})


class PowerSyncWindow(BaseModel):
    """Wake and sleep times pushed to a bus's boards after a schedule change."""

    model_config = ConfigDict(extra="allow")

    trip_start: str | None = None
    trip_end: str | None = None
