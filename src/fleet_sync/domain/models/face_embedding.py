"""Face embedding extraction result."""

from pydantic import BaseModel, ConfigDict, Field


class FaceEmbeddingResult(BaseModel):
    """Response of the vision API's face embedding extraction."""

    model_config = ConfigDict(extra="allow")

    success: bool
    face_embedding: list[float] = Field(default_factory=list)
    embedding_size: int = 0
    num_faces: int = 0
    is_mock: bool = False
    image_with_boxes: str | None = None

    @property
    def has_face(self) -> bool:
        return self.success and bool(self.face_embedding)
