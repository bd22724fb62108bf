"""Business logic for avatar replacement.

Avatars live at a fixed per-owner key and are overwritten in place. They
are not content-addressed and never enter the ordered index.
"""

from aws_lambda_powertools import Logger

from core.infrastructure.aws.s3_blob_store import S3BlobStore
from core.repositories.storage_repository import BlobStore
from core.utils.image_format import detect_supported_format
from core.utils.payloads import decode_payload
from core.utils.storage_paths import avatar_path

logger = Logger(UTC=True)


class AvatarService:
    """Application service responsible for storing owner avatars."""

    def __init__(self, storage: BlobStore | None = None) -> None:
        self.storage = storage or S3BlobStore()

    def upload_avatar(self, *, owner_id: int, encoded: str) -> str:
        """Validate and store an avatar, replacing any previous one.

        Returns:
            Storage path of the avatar

        Raises:
            ValidationError: If the payload is not valid, non-empty base64
            FileSizeError: If the payload is too large
            UnsupportedFormatError: If the format is unknown or not accepted
            BlobStorageError: If the write fails
        """
        file_data = decode_payload(encoded)
        image_format = detect_supported_format(file_data)

        path = avatar_path(owner_id)
        self.storage.write(path=path, data=file_data, content_type=f"image/{image_format.value}")

        logger.info(
            "Avatar stored",
            extra={"owner_id": owner_id, "format": image_format.value, "size": len(file_data)},
        )

        return path
