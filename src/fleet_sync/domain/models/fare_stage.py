"""Fare stage domain model."""

from typing import ClassVar

from fleet_sync.domain.models.fleet_record import FleetRecord


class FareStage(FleetRecord):
    """Fare charged for one distance stage."""

    id_field: ClassVar[str] = "stage_number"

    stage_number: int
    fare: float
    updated_by: str | None = None
