"""Backend selection for outbound requests."""

from enum import StrEnum


class Backend(StrEnum):
    """The two services the client talks to."""

    PRIMARY = "primary"  # Node domain API, session credentials
    VISION = "vision"  # Python telemetry/vision API, no credentials
