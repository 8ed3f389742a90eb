"""One page of a server-paginated collection."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RecordPage:
    """Records of the requested page and the server's total count."""

    items: list[Any] = field(default_factory=list)
    total: int = 0
