"""Object keys for uploaded blobs and avatars."""

import os

from core.utils.constants import (
    DEFAULT_AVATAR_BASE_DIR,
    DEFAULT_UPLOAD_BASE_DIR,
    ENV_AVATAR_BASE_DIR,
    ENV_UPLOAD_BASE_DIR,
    EXTENSION_CONTENT_TYPES,
)


def blob_path(blob_id: str) -> str:
    """``{upload_base_dir}/{blob_id}``"""
    base_dir = os.getenv(ENV_UPLOAD_BASE_DIR) or DEFAULT_UPLOAD_BASE_DIR
    return f"{base_dir.rstrip('/')}/{blob_id}"


def avatar_path(owner_id: int) -> str:
    """Stable per-owner avatar key; always ``.png`` so clients can hardcode it."""
    base_dir = os.getenv(ENV_AVATAR_BASE_DIR) or DEFAULT_AVATAR_BASE_DIR
    return f"{base_dir.rstrip('/')}/{owner_id}.png"


def content_type_for(blob_id: str) -> str:
    extension = blob_id.rsplit(".", 1)[-1]
    return EXTENSION_CONTENT_TYPES.get(extension, "application/octet-stream")
