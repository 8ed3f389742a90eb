"""Board liveness domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class BoardLiveness:
    """Online/offline classification of a board at one instant."""

    device_id: str
    last_seen: datetime | None
    online: bool
    label: str
    clock_skew: bool = False
