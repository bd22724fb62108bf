"""S3-backed implementation of BlobStore."""

from aws_lambda_powertools import Logger
from botocore.exceptions import ClientError

from core.infrastructure.adapters.s3_adapter import S3Adapter, S3AdapterProtocol
from core.models.errors import BlobStorageError, NotFoundError
from core.repositories.storage_repository import BlobStore
from core.utils.constants import (
    ERROR_CODE_BLOB_DELETE_FAILED,
    ERROR_CODE_BLOB_READ_FAILED,
    ERROR_CODE_BLOB_WRITE_FAILED,
    ERROR_CODE_IMAGE_NOT_FOUND,
)

logger = Logger(UTC=True)

_MISSING_KEY_CODES = frozenset({"NoSuchKey", "404", "NotFound"})


def _error_code(exc: ClientError) -> str:
    return str(exc.response.get("Error", {}).get("Code", ""))


class S3BlobStore(BlobStore):
    """Blob storage backed by Amazon S3.

    All boto3 errors are caught and translated into domain errors.
    """

    def __init__(self, adapter: S3AdapterProtocol | None = None) -> None:
        """Create storage using the provided S3 adapter."""
        self._s3: S3AdapterProtocol = adapter or S3Adapter()

    def write(self, *, path: str, data: bytes, content_type: str) -> None:
        logger.debug("Writing blob", extra={"key": path, "size": len(data)})

        try:
            self._s3.put_object(key=path, body=data, content_type=content_type)
        except ClientError as exc:
            logger.error("S3 put_object failed", extra={"key": path})
            raise BlobStorageError(
                message="Unable to store image at this time",
                error_code=ERROR_CODE_BLOB_WRITE_FAILED,
                details={"key": path},
            ) from exc
        except Exception as exc:
            logger.exception("Unexpected error writing blob")
            raise BlobStorageError(
                message="Unable to store image at this time",
                error_code=ERROR_CODE_BLOB_WRITE_FAILED,
                details={"key": path},
            ) from exc

        logger.info("Blob written", extra={"key": path})

    def read(self, *, path: str) -> bytes:
        logger.debug("Reading blob", extra={"key": path})

        try:
            response = self._s3.get_object(key=path)
            body: bytes = response["Body"].read()
        except ClientError as exc:
            if _error_code(exc) in _MISSING_KEY_CODES:
                raise NotFoundError(
                    message="Image not found",
                    error_code=ERROR_CODE_IMAGE_NOT_FOUND,
                    details={"key": path},
                ) from exc

            logger.error("S3 get_object failed", extra={"key": path})
            raise BlobStorageError(
                message="Unable to read image at this time",
                error_code=ERROR_CODE_BLOB_READ_FAILED,
                details={"key": path},
            ) from exc
        except Exception as exc:
            logger.exception("Unexpected error reading blob")
            raise BlobStorageError(
                message="Unable to read image at this time",
                error_code=ERROR_CODE_BLOB_READ_FAILED,
                details={"key": path},
            ) from exc

        return body

    def delete(self, *, path: str) -> None:
        logger.debug("Deleting blob", extra={"key": path})

        try:
            self._s3.delete_object(key=path)
        except ClientError as exc:
            if _error_code(exc) in _MISSING_KEY_CODES:
                logger.info("Blob already absent", extra={"key": path})
                return

            logger.error("S3 delete_object failed", extra={"key": path})
            raise BlobStorageError(
                message="Unable to delete image at this time",
                error_code=ERROR_CODE_BLOB_DELETE_FAILED,
                details={"key": path},
            ) from exc
        except Exception as exc:
            logger.exception("Unexpected error deleting blob")
            raise BlobStorageError(
                message="Unable to delete image at this time",
                error_code=ERROR_CODE_BLOB_DELETE_FAILED,
                details={"key": path},
            ) from exc

        logger.info("Blob deleted", extra={"key": path})
