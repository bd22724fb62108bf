"""Pydantic models for batch image upload request/response."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.models.image import GalleryImage, IndexRecord
from core.utils.constants import MAX_UPLOAD_ITEMS


class ImageUploadRequest(BaseModel):
    """Validation model for a batch upload request.

    Individual payloads are only checked for being strings here; decoding,
    size and format problems are per-item and must not fail the request.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    files: list[str] = Field(
        ...,
        min_length=1,
        max_length=MAX_UPLOAD_ITEMS,
        description="Base64 encoded image payloads, in display order",
    )

    @field_validator("files", mode="before")
    @classmethod
    def accept_single_file(cls, value: object) -> object:
        """Allow a single base64 string in place of a one-element list."""
        if isinstance(value, str):
            return [value]
        return value


class RejectedImage(BaseModel):
    """An input payload that was skipped, and why."""

    position: int = Field(..., description="Zero-based position in the request")
    reason: str = Field(..., description="Error code")
    message: str = Field(..., description="Human-readable reason")


class UploadResult(BaseModel):
    """Outcome of one ingest request.

    ``accepted`` lists exactly the records committed to the index, in input
    order.
    """

    owner_id: int
    accepted: list[IndexRecord]
    rejected: list[RejectedImage]

    @property
    def blob_ids(self) -> list[str]:
        return [record.blob_id for record in self.accepted]


class ImageUploadResponse(BaseModel):
    """Response model for a batch upload."""

    owner_id: int = Field(..., description="Owner the images were uploaded for")
    images: list[GalleryImage] = Field(..., description="Accepted images in input order")
    rejected: list[RejectedImage] = Field(..., description="Skipped payloads")
    accepted_count: int = Field(..., description="Number of accepted images")
    rejected_count: int = Field(..., description="Number of skipped payloads")
    message: str = Field(..., description="Summary message")
