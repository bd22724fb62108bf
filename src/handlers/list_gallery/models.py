"""
Pydantic models for the gallery listing request.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from core.utils.constants import DEFAULT_ANCHOR, DIRECTION_REVERSE


class GalleryRequest(BaseModel):
    """
    Validation model for the gallery API.

    ``owner_id`` comes from the path, ``anchor`` and ``direction`` from the
    query string. The page size is fixed.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    owner_id: int = Field(..., ge=1, description="Gallery owner")
    anchor: int = Field(
        default=DEFAULT_ANCHOR,
        ge=0,
        description="Number of records to skip in the requested direction",
    )
    direction: Literal["forward", "reverse"] = Field(
        default=DIRECTION_REVERSE,
        description="forward = oldest first, reverse = newest first",
    )
