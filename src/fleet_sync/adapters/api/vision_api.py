"""Face embedding extraction on the vision API."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from fleet_sync.domain.contracts.transport import TransportProtocol
from fleet_sync.domain.models.api_result import ApiFailure, ApiResult, ApiSuccess, FailureKind
from fleet_sync.domain.models.backend import Backend
from fleet_sync.domain.models.face_embedding import FaceEmbeddingResult

logger = logging.getLogger(__name__)

EXTRACT_FACE_EMBEDDING_PATH = "/api/extract-face-embedding"


class VisionClient:
    """Calls the vision backend; no credentials are sent there."""

    def __init__(self, transport: TransportProtocol) -> None:
        self.transport = transport

    async def extract_face_embedding(self, image_data: str) -> ApiResult:
        result = await self.transport.request(
            "POST",
            EXTRACT_FACE_EMBEDDING_PATH,
            backend=Backend.VISION,
            json={"image_data": image_data},
        )
        if isinstance(result, ApiFailure):
            return result
        try:
            extracted = FaceEmbeddingResult.model_validate(result.data)
        except ValidationError as e:
            logger.error(f"Malformed face embedding response: {e.error_count()} error(s)")
            return ApiFailure(
                kind=FailureKind.VALIDATION,
                status=result.status,
                message="Malformed face embedding response",
            )
        if extracted.embedding_size and extracted.embedding_size != len(extracted.face_embedding):
            logger.warning(
                f"Embedding size {extracted.embedding_size} does not match "
                f"{len(extracted.face_embedding)} values"
            )
        return ApiSuccess(status=result.status, data=extracted)
