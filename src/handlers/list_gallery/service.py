"""
Business logic for gallery retrieval.
"""

from aws_lambda_powertools import Logger

from core.filters.anchor_pagination import AnchorPagination
from core.infrastructure.aws.dynamodb_index import DynamoDBOrderedIndex
from core.models.identity import Identity
from core.models.image import GalleryImage, GalleryPage
from core.repositories.index_repository import Direction, OrderedIndex
from core.utils.auth import authorize_owner_action
from core.utils.constants import GALLERY_PAGE_SIZE

logger = Logger(UTC=True)


class GalleryService:
    """Application service responsible for listing an owner's uploads.

    Reads go straight to the ordered index; pages are not isolated from
    concurrent uploads or deletions.
    """

    def __init__(self, index: OrderedIndex | None = None) -> None:
        self.index = index or DynamoDBOrderedIndex()

    def list_gallery(
        self,
        *,
        requester: Identity,
        owner_id: int,
        anchor: int,
        direction: Direction,
    ) -> GalleryPage:
        """Return one page of ``owner_id``'s gallery.

        Raises:
            UnauthorizedError: If the requester is neither owner nor elevated
            IndexStoreError: If the index query fails
        """
        authorize_owner_action(requester, owner_id)

        records, has_more = self.index.list_records(
            owner_id=owner_id,
            anchor=anchor,
            direction=direction,
            page_size=GALLERY_PAGE_SIZE,
        )

        logger.info(
            "Gallery page listed",
            extra={"owner_id": owner_id, "anchor": anchor, "count": len(records)},
        )

        return GalleryPage(
            owner_id=owner_id,
            images=[
                GalleryImage(sequence_id=record.sequence_id, blob_id=record.blob_id)
                for record in records
            ],
            returned_count=len(records),
            pagination=AnchorPagination.page_info(
                anchor=anchor,
                direction=direction,
                has_more=has_more,
            ),
        )
