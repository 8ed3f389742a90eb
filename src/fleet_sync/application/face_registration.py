"""Face capture for contractor and season-ticket registration."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

from fleet_sync.application.resource_store import ResourceStore
from fleet_sync.domain.contracts.frame_source import (
    FaceEmbeddingClientProtocol,
    FrameSourceProtocol,
)
from fleet_sync.domain.models.api_result import ApiFailure
from fleet_sync.domain.models.camera_failure import CameraError
from fleet_sync.domain.models.contractor import Contractor
from fleet_sync.domain.models.face_embedding import FaceEmbeddingResult
from fleet_sync.domain.models.mutation_outcome import MutationOutcome

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FaceCapture:
    """Result of capturing a face and extracting its embedding."""

    ok: bool
    message: str
    embedding: list[float] = field(default_factory=list)
    image: str | None = None


async def capture_face(
    frame_source: FrameSourceProtocol,
    vision: FaceEmbeddingClientProtocol,
) -> FaceCapture:
    """Grab a frame from the camera and extract a face embedding from it."""
    try:
        image = await asyncio.to_thread(frame_source.capture_data_url)
    except CameraError as e:
        logger.error(f"Camera error: {e.failure} ({e.detail})")
        return FaceCapture(False, e.failure.user_message)

    result = await vision.extract_face_embedding(image)
    if isinstance(result, ApiFailure):
        logger.error(f"Face processing error: {result.kind} {result.status}")
        return FaceCapture(False, "Failed to process face")

    extracted: FaceEmbeddingResult = result.data
    if not extracted.has_face:
        return FaceCapture(False, "No face detected. Please try again.")
    if extracted.is_mock:
        logger.warning("Vision API returned a mock embedding")
    return FaceCapture(
        True,
        "Face captured successfully!",
        embedding=extracted.face_embedding,
        image=extracted.image_with_boxes or image,
    )


async def register_contractor(
    store: ResourceStore[Contractor],
    bus_id: str,
    name: str,
    embedding: list[float] | None,
    editing: bool = False,
) -> MutationOutcome:
    """Add a contractor for a bus, or update the one already registered.

    A face embedding is required for new contractors only.
    """
    if not embedding and not editing:
        return MutationOutcome(False, "Please capture face photo first")
    if not bus_id or not name:
        return MutationOutcome(False, "Please fill all required fields")

    payload: dict[str, object] = {"bus_id": bus_id, "name": name}
    if embedding:
        payload["face_embedding"] = embedding
        payload["embedding_size"] = len(embedding)

    outcome = await store.create(payload)
    if not outcome.ok:
        return outcome
    message = "Contractor updated!" if editing else "Contractor added!"
    return MutationOutcome(True, message, outcome.record)
