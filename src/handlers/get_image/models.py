from pydantic import BaseModel, ConfigDict, Field, StrictStr

from core.utils.constants import BLOB_ID_PATTERN


class GetImageRequest(BaseModel):
    """Validation model for get image request."""

    model_config = ConfigDict(str_strip_whitespace=True)

    blob_id: StrictStr = Field(
        ...,
        pattern=BLOB_ID_PATTERN,
        description="Content-derived blob identifier, e.g. ``<sha1>.png``",
    )
