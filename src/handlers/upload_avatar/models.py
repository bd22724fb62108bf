"""Pydantic models for avatar upload request/response."""

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class AvatarUploadRequest(BaseModel):
    """Validation model for avatar upload request."""

    model_config = ConfigDict(str_strip_whitespace=True)

    file: StrictStr = Field(..., min_length=1, description="Base64 encoded image")


class AvatarUploadResponse(BaseModel):
    owner_id: int
    avatar_path: str
    message: str
    uploaded_at: str
