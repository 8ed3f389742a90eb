"""Mapping of low-level camera errors to user-facing failure causes."""

import errno

from fleet_sync.domain.models.camera_failure import CameraFailure

_ERRNO_FAILURES = {
    errno.EACCES: CameraFailure.PERMISSION_DENIED,
    errno.EPERM: CameraFailure.PERMISSION_DENIED,
    errno.ENOENT: CameraFailure.NO_DEVICE,
    errno.ENODEV: CameraFailure.NO_DEVICE,
    errno.ENXIO: CameraFailure.NO_DEVICE,
    errno.EBUSY: CameraFailure.DEVICE_BUSY,
    errno.EINVAL: CameraFailure.UNSUPPORTED_CONSTRAINTS,
}


def classify_camera_error(error: BaseException) -> CameraFailure:
    """Return the failure cause for an error raised while opening or reading a camera."""
    if isinstance(error, PermissionError):
        return CameraFailure.PERMISSION_DENIED
    if isinstance(error, FileNotFoundError):
        return CameraFailure.NO_DEVICE
    if isinstance(error, OSError) and error.errno in _ERRNO_FAILURES:
        return _ERRNO_FAILURES[error.errno]
    return CameraFailure.UNKNOWN
