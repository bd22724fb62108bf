"""Abstract contract for the per-owner ordered upload index."""

from abc import ABC, abstractmethod
from typing import Literal

from core.models.image import IndexRecord

Direction = Literal["forward", "reverse"]


class OrderedIndex(ABC):
    """Per-owner ordered mapping from sequence id to blob identifier."""

    @abstractmethod
    def commit(self, *, records: list[IndexRecord]) -> None:
        """Insert all records atomically: every record or none.

        Raises:
            IndexStoreError: If the batch cannot be committed
        """

    @abstractmethod
    def list_records(
        self,
        *,
        owner_id: int,
        anchor: int,
        direction: Direction,
        page_size: int,
    ) -> tuple[list[IndexRecord], bool]:
        """Return up to ``page_size`` records after skipping ``anchor``.

        Returns:
            Tuple of (records, has_more)

        Raises:
            IndexStoreError: If the query fails
        """

    @abstractmethod
    def take(self, *, owner_id: int, sequence_id: int) -> IndexRecord | None:
        """Remove a record and return it, or None if it did not exist.

        Raises:
            IndexStoreError: If the delete fails
        """

    @abstractmethod
    def has_reference(self, *, blob_id: str) -> bool:
        """Whether any record, for any owner, still points at ``blob_id``.

        Raises:
            IndexStoreError: If the scan fails
        """
