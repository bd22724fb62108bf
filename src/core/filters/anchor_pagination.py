"""
Anchor-based pagination utilities.
"""

from core.models.pagination import GalleryPagination
from core.utils.constants import GALLERY_PAGE_SIZE


class AnchorPagination:
    """
    Anchor-based pagination helper.

    An anchor is the number of records skipped in the requested direction.
    Moving one page forward adds the page size; moving back subtracts it,
    floored at zero.
    """

    @staticmethod
    def page_info(
        *,
        anchor: int,
        direction: str,
        has_more: bool,
        page_size: int = GALLERY_PAGE_SIZE,
    ) -> GalleryPagination:
        """
        Build pagination metadata for a gallery page.

        Example:
            page_info(anchor=12, direction="reverse", has_more=True)

            → anchor=12, next_anchor=24, previous_anchor=0
        """
        next_anchor = anchor + page_size if has_more else None
        previous_anchor = max(anchor - page_size, 0) if anchor > 0 else None

        return GalleryPagination(
            anchor=anchor,
            page_size=page_size,
            direction=direction,
            has_more=has_more,
            next_anchor=next_anchor,
            previous_anchor=previous_anchor,
        )
