"""Camera failure causes shown to the user."""

from enum import StrEnum


class CameraFailure(StrEnum):
    """Fixed set of reasons a face capture could not start."""

    PERMISSION_DENIED = "permission_denied"
    NO_DEVICE = "no_device"
    DEVICE_BUSY = "device_busy"
    UNSUPPORTED_CONSTRAINTS = "unsupported_constraints"
    UNKNOWN = "unknown"

    @property
    def user_message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    CameraFailure.PERMISSION_DENIED: "Camera permission denied",
    CameraFailure.NO_DEVICE: "No camera found",
    CameraFailure.DEVICE_BUSY: "Camera is already in use by another app",
    CameraFailure.UNSUPPORTED_CONSTRAINTS: "Camera does not support the requested resolution",
    CameraFailure.UNKNOWN: "Could not access camera",
}


class CameraError(Exception):
    """Raised when a frame cannot be captured from the camera."""

    def __init__(self, failure: CameraFailure, detail: str | None = None) -> None:
        self.failure = failure
        self.detail = detail
        super().__init__(detail or failure.user_message)
