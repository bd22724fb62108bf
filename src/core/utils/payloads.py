"""Decoding and size checks for base64 image payloads."""

import base64
import binascii

from core.models.errors import FileSizeError, ValidationError
from core.utils.constants import (
    ERROR_CODE_EMPTY_FILE,
    ERROR_CODE_INVALID_ENCODING,
    MAX_FILE_SIZE,
    format_file_size,
)


def decode_payload(encoded: str) -> bytes:
    """Decode one base64 payload and enforce the per-file size limit.

    Raises:
        ValidationError: If the payload is not valid base64 or is empty
        FileSizeError: If the decoded payload exceeds MAX_FILE_SIZE
    """
    try:
        file_data = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValidationError(
            message="Invalid base64 encoded file",
            error_code=ERROR_CODE_INVALID_ENCODING,
        ) from exc

    if not file_data:
        raise ValidationError(message="Decoded file is empty", error_code=ERROR_CODE_EMPTY_FILE)

    if len(file_data) > MAX_FILE_SIZE:
        raise FileSizeError(
            message=f"File size exceeds {format_file_size(MAX_FILE_SIZE)} limit",
            details={"size": len(file_data)},
        )

    return file_data
