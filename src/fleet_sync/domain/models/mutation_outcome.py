"""Outcome of a user-initiated action against the backend."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class MutationOutcome:
    """Whether an action succeeded, and the message to show for it."""

    ok: bool
    message: str
    record: Any = None
