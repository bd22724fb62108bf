"""Business logic for batch image ingestion.

Each payload is validated, hashed and written to blob storage on its own;
the index records for every accepted payload are then committed together
as one atomic batch. Per-item problems skip the item; store failures of the
counter or the index commit abort the request.
"""

from aws_lambda_powertools import Logger

from core.infrastructure.aws.dynamodb_counter import DynamoDBSequenceCounter
from core.infrastructure.aws.dynamodb_index import DynamoDBOrderedIndex
from core.infrastructure.aws.s3_blob_store import S3BlobStore
from core.models.errors import (
    BlobStorageError,
    FileSizeError,
    UnsupportedFormatError,
    ValidationError,
)
from core.models.image import IndexRecord
from core.repositories.counter_repository import SequenceCounter
from core.repositories.index_repository import OrderedIndex
from core.repositories.storage_repository import BlobStore
from core.utils.constants import IMAGE_SEQUENCE_COUNTER
from core.utils.hashing import blob_identifier
from core.utils.image_format import ImageFormat, detect_supported_format
from core.utils.payloads import decode_payload
from core.utils.storage_paths import blob_path, content_type_for

from .models import RejectedImage, UploadResult

logger = Logger(UTC=True)


class UploadService:
    """Application service responsible for image ingestion.

    This service orchestrates:
    - Payload decoding and format validation
    - Content hashing into blob identifiers
    - Blob writes to object storage
    - Sequence id allocation and the atomic index commit
    """

    def __init__(
        self,
        storage: BlobStore | None = None,
        index: OrderedIndex | None = None,
        counter: SequenceCounter | None = None,
    ) -> None:
        """Initialize the upload service with its infrastructure dependencies."""
        self.storage = storage or S3BlobStore()
        self.index = index or DynamoDBOrderedIndex()
        self.counter = counter or DynamoDBSequenceCounter()

    @staticmethod
    def prepare_payload(encoded: str) -> tuple[bytes, ImageFormat]:
        """Decode a payload and confirm it is an accepted image format.

        Raises:
            ValidationError: If the payload is not valid, non-empty base64
            FileSizeError: If the payload is too large
            UnsupportedFormatError: If the format is unknown or not accepted
        """
        file_data = decode_payload(encoded)
        return file_data, detect_supported_format(file_data)

    def upload_images(self, *, owner_id: int, files: list[str]) -> UploadResult:
        """Ingest payloads for one owner and commit their index records.

        Args:
            owner_id: Authenticated owner of the upload
            files: Base64 encoded payloads in display order

        Returns:
            Accepted records (input order) and rejected payloads

        Raises:
            SequenceCounterError: If an id cannot be allocated
            IndexStoreError: If the batch commit fails
        """
        logger.debug(
            "Starting batch upload",
            extra={"owner_id": owner_id, "count": len(files)},
        )

        staged: list[IndexRecord] = []
        rejected: list[RejectedImage] = []

        for position, encoded in enumerate(files):
            try:
                file_data, image_format = self.prepare_payload(encoded)
            except (ValidationError, FileSizeError, UnsupportedFormatError) as exc:
                logger.warning(
                    "Skipping rejected upload item",
                    extra={"owner_id": owner_id, "position": position, "reason": exc.error_code},
                )
                rejected.append(
                    RejectedImage(position=position, reason=exc.error_code, message=exc.message)
                )
                continue

            blob_id = blob_identifier(file_data, image_format)

            # Identical content lands on the same key; rewriting it is harmless
            try:
                self.storage.write(
                    path=blob_path(blob_id),
                    data=file_data,
                    content_type=content_type_for(blob_id),
                )
            except BlobStorageError as exc:
                logger.warning(
                    "Skipping upload item after blob write failure",
                    extra={"owner_id": owner_id, "position": position, "blob_id": blob_id},
                )
                rejected.append(
                    RejectedImage(position=position, reason=exc.error_code, message=exc.message)
                )
                continue

            sequence_id = self.counter.next_id(name=IMAGE_SEQUENCE_COUNTER)
            staged.append(
                IndexRecord(owner_id=owner_id, sequence_id=sequence_id, blob_id=blob_id)
            )

        # A commit failure after blob writes leaves orphan blobs, never dangling records
        self.index.commit(records=staged)

        logger.info(
            "Batch upload committed",
            extra={
                "owner_id": owner_id,
                "accepted": len(staged),
                "rejected": len(rejected),
            },
        )

        return UploadResult(owner_id=owner_id, accepted=staged, rejected=rejected)
