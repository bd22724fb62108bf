"""Pydantic models for delete image request/response."""

from pydantic import BaseModel, Field


class DeleteImageRequest(BaseModel):
    """Validation model for delete image request."""

    owner_id: int = Field(..., ge=1, description="Owner of the index record")
    sequence_id: int = Field(..., ge=1, description="Sequence id of the index record")


class DeleteImageResponse(BaseModel):
    """Response model for successful image deletion."""

    owner_id: int = Field(..., description="Owner of the removed record")
    sequence_id: int = Field(..., description="Sequence id of the removed record")
    blob_id: str = Field(..., description="Blob the record pointed at")
    blob_deleted: bool = Field(..., description="Whether the last reference was removed")
    message: str = Field(..., description="Success message")
    deleted_at: str = Field(..., description="Deletion timestamp")
