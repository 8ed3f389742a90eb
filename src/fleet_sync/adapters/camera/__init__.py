"""Camera adapters."""

from fleet_sync.adapters.camera.camera_errors import classify_camera_error
from fleet_sync.adapters.camera.webcam import WebcamCapture

__all__ = ["WebcamCapture", "classify_camera_error"]
