"""Custom exception classes for the image gallery service."""

from typing import Any

from core.utils.constants import (
    ERROR_CODE_BLOB_WRITE_FAILED,
    ERROR_CODE_COUNTER_FAILED,
    ERROR_CODE_FILE_SIZE_EXCEEDED,
    ERROR_CODE_INDEX_COMMIT_FAILED,
    ERROR_CODE_NOTIFICATION_FAILED,
    ERROR_CODE_RESOURCE_NOT_FOUND,
    ERROR_CODE_STORE_FAILURE,
    ERROR_CODE_UNAUTHENTICATED,
    ERROR_CODE_UNAUTHORIZED,
    ERROR_CODE_UNSUPPORTED_FORMAT,
    ERROR_CODE_VALIDATION_FAILED,
)


class ImageServiceError(Exception):
    """
    Base exception for all gallery service errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class UnauthenticatedError(ImageServiceError):
    """Raised when no identity can be resolved for the caller."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_UNAUTHENTICATED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, error_code=error_code, details=details)


class UnauthorizedError(ImageServiceError):
    """Raised when an identity lacks ownership or role for an action."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_UNAUTHORIZED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, error_code=error_code, details=details)


class ValidationError(ImageServiceError):
    """Raised when request validation fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_VALIDATION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, error_code=error_code, details=details)


class NotFoundError(ImageServiceError):
    """Raised when a requested index record or blob does not exist."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_RESOURCE_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, error_code=error_code, details=details)


class UnsupportedFormatError(ImageServiceError):
    """Raised when payload bytes are not one of the accepted image formats."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_UNSUPPORTED_FORMAT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, error_code=error_code, details=details)


class FileSizeError(ImageServiceError):
    """Raised when file size exceeds the allowed limit."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_FILE_SIZE_EXCEEDED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, error_code=error_code, details=details)


class StoreFailureError(ImageServiceError):
    """Raised when the blob store or the key-value backend fails.

    Fatal for the current operation; surfaced as a server-side failure.
    """

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_STORE_FAILURE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, error_code=error_code, details=details)


class BlobStorageError(StoreFailureError):
    """Raised when an object storage operation fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_BLOB_WRITE_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, error_code=error_code, details=details)


class IndexStoreError(StoreFailureError):
    """Raised when an upload index table operation fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INDEX_COMMIT_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, error_code=error_code, details=details)


class SequenceCounterError(StoreFailureError):
    """Raised when drawing the next sequence id fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_COUNTER_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, error_code=error_code, details=details)


class NotificationDeliveryError(StoreFailureError):
    """Raised when a notification cannot be recorded."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_NOTIFICATION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, error_code=error_code, details=details)
