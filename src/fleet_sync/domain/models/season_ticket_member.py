"""Season-ticket member domain model."""

from datetime import UTC, datetime
from typing import ClassVar

from pydantic import BaseModel, Field

from fleet_sync.domain.models.fleet_record import FleetRecord


class ValidRoute(BaseModel):
    """Origin/destination pair a season ticket is valid for."""

    from_location: str = ""
    to_location: str = ""


class SeasonTicketMember(FleetRecord):
    """A registered season-ticket holder."""

    id_field: ClassVar[str] = "member_id"

    member_id: str
    name: str
    ticket_type: str = "monthly"
    phone: str | None = None
    email: str | None = None
    valid_from: datetime | None = None
    valid_until: datetime | None = None
    valid_routes: list[ValidRoute] = Field(default_factory=list)
    is_active: bool = True

    def is_expired(self, now: datetime | None = None) -> bool:
        """Whether the ticket's validity ended before ``now``."""
        if self.valid_until is None:
            return False
        now = now or datetime.now(UTC)
        valid_until = self.valid_until
        if valid_until.tzinfo is None:
            valid_until = valid_until.astimezone()
        return valid_until < now
