"""Protocols for face capture collaborators."""

from typing import Protocol

from fleet_sync.domain.models.api_result import ApiResult


class FrameSourceProtocol(Protocol):
    """A camera that can grab one frame as a JPEG data URL."""

    def capture_data_url(self) -> str:
        """Capture a frame. Raises CameraError when the camera is unavailable."""
        ...


class FaceEmbeddingClientProtocol(Protocol):
    """The vision API's face embedding extraction."""

    async def extract_face_embedding(self, image_data: str) -> ApiResult:
        """Send a data URL image; success carries a FaceEmbeddingResult."""
        ...
