"""
Business logic for image retrieval.

Blobs are immutable and addressed by their content hash, so reading one
needs no lookup in the index.
"""

from aws_lambda_powertools import Logger

from core.infrastructure.aws.s3_blob_store import S3BlobStore
from core.repositories.storage_repository import BlobStore
from core.utils.storage_paths import blob_path, content_type_for

logger = Logger(UTC=True)


class GetService:
    """Application service responsible for serving stored blobs."""

    def __init__(self, storage: BlobStore | None = None) -> None:
        self.storage = storage or S3BlobStore()

    def get_image(self, blob_id: str) -> tuple[bytes, str]:
        """
        Read a blob and resolve its content type from the extension.

        Returns:
            Tuple of (image_bytes, content_type)

        Raises:
            NotFoundError: If no blob exists under this identifier
            BlobStorageError: If the storage read fails
        """
        logger.debug("Fetching blob", extra={"blob_id": blob_id})

        content = self.storage.read(path=blob_path(blob_id))

        logger.info(
            "Blob fetched successfully",
            extra={"blob_id": blob_id, "size": len(content)},
        )

        return content, content_type_for(blob_id)
