"""Gallery pagination model."""

from typing import Literal

from pydantic import BaseModel, Field, StrictBool, StrictInt


class GalleryPagination(BaseModel):
    """Anchor-based pagination metadata for gallery responses."""

    anchor: StrictInt = Field(..., description="Number of records skipped")
    page_size: StrictInt = Field(..., description="Maximum number of entries per page")
    direction: Literal["forward", "reverse"] = Field(..., description="Iteration direction")
    has_more: StrictBool = Field(..., description="Whether more records follow this page")
    next_anchor: StrictInt | None = Field(
        None,
        description="Anchor to use for the next page, if available",
    )
    previous_anchor: StrictInt | None = Field(
        None,
        description="Anchor to use for the previous page, if any",
    )
