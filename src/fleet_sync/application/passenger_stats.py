"""Summary figures for a page of passengers."""

from dataclasses import dataclass

from fleet_sync.domain.models.passenger import Passenger


@dataclass(frozen=True)
class PassengerStats:
    """Totals shown above the passenger table."""

    total_passengers: int
    total_revenue: float
    route_distance_km: float


def summarize_passengers(
    passengers: list[Passenger], route_distance_km: float = 0.0
) -> PassengerStats:
    """Count and revenue of the passengers on display, plus the trip distance."""
    revenue = sum(passenger.price or 0.0 for passenger in passengers)
    return PassengerStats(
        total_passengers=len(passengers),
        total_revenue=round(revenue, 2),
        route_distance_km=round(route_distance_km, 2),
    )
