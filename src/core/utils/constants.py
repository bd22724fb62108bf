"""Global constants used throughout the application.

This module centralizes error codes, upload constraints, table and counter
names and environment variable names so that handlers, services and
infrastructure share one vocabulary.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================


# Authentication / Authorization Errors
ERROR_CODE_UNAUTHENTICATED = "UNAUTHENTICATED"
ERROR_CODE_UNAUTHORIZED = "UNAUTHORIZED"

# Validation Errors
ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"
ERROR_CODE_UNSUPPORTED_FORMAT = "UNSUPPORTED_FORMAT"
ERROR_CODE_FILE_SIZE_EXCEEDED = "FILE_SIZE_EXCEEDED"
ERROR_CODE_INVALID_ENCODING = "INVALID_ENCODING"
ERROR_CODE_EMPTY_FILE = "EMPTY_FILE"

# Not Found Errors
ERROR_CODE_RESOURCE_NOT_FOUND = "NOT_FOUND"
ERROR_CODE_IMAGE_NOT_FOUND = "IMAGE_NOT_FOUND"
ERROR_CODE_INDEX_RECORD_NOT_FOUND = "INDEX_RECORD_NOT_FOUND"

# Store Failures
ERROR_CODE_STORE_FAILURE = "STORE_FAILURE"
ERROR_CODE_BLOB_WRITE_FAILED = "BLOB_WRITE_FAILED"
ERROR_CODE_BLOB_READ_FAILED = "BLOB_READ_FAILED"
ERROR_CODE_BLOB_DELETE_FAILED = "BLOB_DELETE_FAILED"
ERROR_CODE_INDEX_COMMIT_FAILED = "INDEX_COMMIT_FAILED"
ERROR_CODE_INDEX_LIST_FAILED = "INDEX_LIST_FAILED"
ERROR_CODE_INDEX_DELETE_FAILED = "INDEX_DELETE_FAILED"
ERROR_CODE_INDEX_SCAN_FAILED = "INDEX_SCAN_FAILED"
ERROR_CODE_COUNTER_FAILED = "SEQUENCE_COUNTER_FAILED"
ERROR_CODE_NOTIFICATION_FAILED = "NOTIFICATION_FAILED"

# ============================================================================
# Upload Constraints
# ============================================================================

MAX_FILE_SIZE = 4 * 1024 * 1024  # 4MB in bytes

# DynamoDB TransactWriteItems accepts at most 100 actions
MAX_UPLOAD_ITEMS = 100

# Formats the gallery accepts, mapped to their canonical file extension.
SUPPORTED_FORMAT_EXTENSIONS: Final[dict[str, str]] = {
    "png": "png",
    "jpeg": "jpg",
    "webp": "webp",
    "gif": "gif",
}

EXTENSION_CONTENT_TYPES: Final[dict[str, str]] = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "webp": "image/webp",
    "gif": "image/gif",
}

BLOB_ID_PATTERN = r"^[0-9a-f]{40}\.(png|jpg|webp|gif)$"


# ============================================================================
# Gallery / Pagination
# ============================================================================

GALLERY_PAGE_SIZE = 12
DEFAULT_ANCHOR = 0
DIRECTION_FORWARD = "forward"
DIRECTION_REVERSE = "reverse"


# ============================================================================
# Persistence Layout
# ============================================================================

IMAGE_SEQUENCE_COUNTER = "imgs_count"
NOTIFICATION_SEQUENCE_COUNTER = "notifications_count"

DEFAULT_UPLOAD_BASE_DIR = "uploads"
DEFAULT_AVATAR_BASE_DIR = "avatars"

NOTIFICATION_KIND_IMAGE_DELETE = "image_delete"


# ============================================================================
# Observability
# ============================================================================

METRICS_NAMESPACE = "ImageGallery"


# ============================================================================
# API Gateway Configuration
# ============================================================================

CORS_ORIGIN = "*"
CORS_METHODS = "GET,POST,DELETE,OPTIONS"
CORS_HEADERS = "Content-Type,Authorization,X-Api-Key"
EXPOSE_HEADERS = "Content-Type,Content-Length"
DEFAULT_CONTENT_TYPE = "application/json"

# Blobs never change once written under their content hash
IMMUTABLE_CACHE_CONTROL = "public, max-age=31536000, immutable"

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_AWS_ENDPOINT_URL = "AWS_ENDPOINT_URL"
ENV_AWS_REGION = "AWS_REGION"
ENV_IMAGE_S3_BUCKET_NAME = "IMAGE_S3_BUCKET_NAME"
ENV_UPLOAD_INDEX_TABLE_NAME = "UPLOAD_INDEX_TABLE_NAME"
ENV_COUNTERS_TABLE_NAME = "COUNTERS_TABLE_NAME"
ENV_NOTIFICATIONS_TABLE_NAME = "NOTIFICATIONS_TABLE_NAME"
ENV_UPLOAD_BASE_DIR = "UPLOAD_BASE_DIR"
ENV_AVATAR_BASE_DIR = "AVATAR_BASE_DIR"


def format_file_size(size_bytes: int) -> str:
    """Format file size in human-readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted file size string
    """
    size: float = float(size_bytes)

    for unit in ("B", "KB", "MB", "GB"):
        if size < 1024.0:
            return f"{size:.1f} {unit}"
        size /= 1024.0

    return f"{size:.1f} TB"
