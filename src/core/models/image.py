"""Shared upload index models."""

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from core.models.pagination import GalleryPagination


class IndexRecord(BaseModel):
    """Immutable pointer from an owner's sequence position to a stored blob."""

    model_config = ConfigDict(frozen=True)

    owner_id: StrictInt = Field(..., ge=1, description="Owner user identifier")
    sequence_id: StrictInt = Field(..., ge=1, description="Globally unique sequence id")
    blob_id: StrictStr = Field(..., description="Content-derived blob identifier")


class GalleryImage(BaseModel):
    """One gallery entry as returned to API consumers."""

    sequence_id: StrictInt = Field(..., description="Sequence id of the index record")
    blob_id: StrictStr = Field(..., description="Blob identifier (digest.extension)")


class GalleryPage(BaseModel):
    """Paginated response for an owner's gallery."""

    owner_id: StrictInt = Field(..., description="Gallery owner")
    images: list[GalleryImage] = Field(..., description="Entries on this page")
    returned_count: StrictInt = Field(..., description="Number of entries on this page")
    pagination: GalleryPagination = Field(..., description="Pagination metadata")
