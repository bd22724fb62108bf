"""Content-derived blob identifiers."""

import hashlib

from core.utils.image_format import ImageFormat


def blob_identifier(file_data: bytes, image_format: ImageFormat) -> str:
    """Return ``<lowercase hex sha1>.<extension>`` for the given content.

    Identical bytes and format always produce the same identifier, which
    makes it the deduplication key and the storage file name.
    """
    digest = hashlib.sha1(file_data).hexdigest()
    return f"{digest}.{image_format.extension}"
