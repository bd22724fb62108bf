"""Business logic for image deletion.

Deleting an index record is authoritative. Identical uploads share one
blob, so the blob itself is only removed once a full scan of the index
finds no other record pointing at it. Concurrent deletions may both see
zero references and both delete the blob; the second delete is a no-op.
"""

from typing import Any

from aws_lambda_powertools import Logger

from core.infrastructure.aws.dynamodb_index import DynamoDBOrderedIndex
from core.infrastructure.aws.dynamodb_notifications import DynamoDBNotificationSink
from core.infrastructure.aws.s3_blob_store import S3BlobStore
from core.models.errors import NotFoundError
from core.models.identity import Identity
from core.repositories.index_repository import OrderedIndex
from core.repositories.notification_repository import NotificationSink
from core.repositories.storage_repository import BlobStore
from core.utils.auth import authorize_owner_action
from core.utils.constants import (
    ERROR_CODE_INDEX_RECORD_NOT_FOUND,
    NOTIFICATION_KIND_IMAGE_DELETE,
)
from core.utils.storage_paths import blob_path
from core.utils.time import utc_now_iso

logger = Logger(UTC=True)


class DeleteService:
    """Application service responsible for deleting images.

    This service orchestrates:
    - The ownership check
    - Removal of the index record
    - The reference scan and conditional blob deletion
    - Notifying the owner when someone else deleted their image
    """

    def __init__(
        self,
        index: OrderedIndex | None = None,
        storage: BlobStore | None = None,
        notifications: NotificationSink | None = None,
    ) -> None:
        """Initialize the delete service with its infrastructure dependencies."""
        self.index = index or DynamoDBOrderedIndex()
        self.storage = storage or S3BlobStore()
        self.notifications = notifications or DynamoDBNotificationSink()

    def delete_image(
        self,
        *,
        owner_id: int,
        sequence_id: int,
        requester: Identity,
    ) -> dict[str, Any]:
        """Delete one index record and, if it was the last reference, its blob.

        The deletion flow is:
        1. Authorize the requester against the owner
        2. Remove the index record
        3. Scan the index for other records with the same blob
        4. Delete the blob when none remain
        5. Notify the owner if the requester is someone else

        A failure in steps 3-5 is surfaced with the record already removed;
        the record is not restored.

        Raises:
            UnauthorizedError: If the requester may not act for the owner
            NotFoundError: If the record does not exist
            IndexStoreError: If removing the record or scanning fails
            BlobStorageError: If the blob delete fails
            NotificationDeliveryError: If the owner cannot be notified
        """
        logger.debug(
            "Starting image deletion",
            extra={
                "owner_id": owner_id,
                "sequence_id": sequence_id,
                "requester_id": requester.owner_id,
            },
        )

        authorize_owner_action(requester, owner_id)

        record = self.index.take(owner_id=owner_id, sequence_id=sequence_id)
        if record is None:
            logger.warning(
                "Index record not found",
                extra={"owner_id": owner_id, "sequence_id": sequence_id},
            )
            raise NotFoundError(
                message="Image not found",
                error_code=ERROR_CODE_INDEX_RECORD_NOT_FOUND,
                details={"owner_id": owner_id, "sequence_id": sequence_id},
            )

        blob_deleted = False
        if not self.index.has_reference(blob_id=record.blob_id):
            self.storage.delete(path=blob_path(record.blob_id))
            blob_deleted = True
        else:
            logger.info(
                "Blob still referenced, keeping it",
                extra={"blob_id": record.blob_id},
            )

        if requester.owner_id != owner_id:
            self.notifications.notify(
                target_owner=owner_id,
                event_kind=NOTIFICATION_KIND_IMAGE_DELETE,
                actor=requester.owner_id,
                subject_id=sequence_id,
            )

        logger.info(
            "Image deleted successfully",
            extra={
                "owner_id": owner_id,
                "sequence_id": sequence_id,
                "blob_id": record.blob_id,
                "blob_deleted": blob_deleted,
            },
        )

        return {
            "owner_id": owner_id,
            "sequence_id": sequence_id,
            "blob_id": record.blob_id,
            "blob_deleted": blob_deleted,
            "deleted_at": utc_now_iso(),
        }
