"""Contractor domain model."""

from typing import ClassVar

from pydantic import Field

from fleet_sync.domain.models.fleet_record import FleetRecord


class Contractor(FleetRecord):
    """The contractor registered to operate a bus, identified by face."""

    id_field: ClassVar[str] = "bus_id"

    bus_id: str
    name: str
    face_embedding: list[float] = Field(default_factory=list)
    embedding_size: int | None = None
