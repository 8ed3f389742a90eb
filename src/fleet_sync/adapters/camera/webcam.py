"""Single-frame webcam capture with OpenCV."""

from __future__ import annotations

import base64
import logging
from collections.abc import Callable
from typing import Any

import cv2

from fleet_sync.adapters.camera.camera_errors import classify_camera_error
from fleet_sync.domain.models.camera_failure import CameraError, CameraFailure

logger = logging.getLogger(__name__)

FRAME_WIDTH = 640
FRAME_HEIGHT = 480
JPEG_QUALITY = 70
DATA_URL_PREFIX = "data:image/jpeg;base64,"


class WebcamCapture:
    """Grabs one frame from a camera and returns it as a JPEG data URL.

    The camera is opened for each capture and released right after.
    """

    def __init__(
        self,
        device_index: int = 0,
        capture_factory: Callable[[int], Any] | None = None,
    ) -> None:
        """Initialize the capture.

        Args:
            device_index: OpenCV camera index.
            capture_factory: Opens a camera by index; defaults to cv2.VideoCapture.
        """
        self.device_index = device_index
        self._capture_factory = capture_factory or cv2.VideoCapture

    def capture_data_url(self) -> str:
        try:
            cap = self._capture_factory(self.device_index)
        except OSError as e:
            raise CameraError(classify_camera_error(e), str(e)) from e

        try:
            if cap is None or not cap.isOpened():
                raise CameraError(CameraFailure.NO_DEVICE, f"Camera {self.device_index} not found")
            cap.set(cv2.CAP_PROP_FRAME_WIDTH, FRAME_WIDTH)
            cap.set(cv2.CAP_PROP_FRAME_HEIGHT, FRAME_HEIGHT)
            ok, frame = cap.read()
            if not ok or frame is None:
                raise CameraError(CameraFailure.DEVICE_BUSY, "Could not read a frame")
        except OSError as e:
            raise CameraError(classify_camera_error(e), str(e)) from e
        finally:
            if cap is not None:
                cap.release()

        return encode_frame(frame)


def encode_frame(frame: Any) -> str:
    """Resize a BGR frame to the capture resolution and encode it as a data URL."""
    height, width = frame.shape[:2]
    if (width, height) != (FRAME_WIDTH, FRAME_HEIGHT):
        frame = cv2.resize(frame, (FRAME_WIDTH, FRAME_HEIGHT))
    ok, encoded = cv2.imencode(".jpg", frame, [int(cv2.IMWRITE_JPEG_QUALITY), JPEG_QUALITY])
    if not ok:
        raise CameraError(CameraFailure.UNKNOWN, "Could not encode frame")
    logger.debug(f"Captured {FRAME_WIDTH}x{FRAME_HEIGHT} frame")
    return DATA_URL_PREFIX + base64.b64encode(encoded.tobytes()).decode("utf-8")
