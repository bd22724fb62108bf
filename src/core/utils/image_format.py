"""Magic-byte image format detection."""

from collections.abc import Mapping
from enum import Enum

from core.models.errors import UnsupportedFormatError
from core.utils.constants import SUPPORTED_FORMAT_EXTENSIONS


class ImageFormat(str, Enum):
    PNG = "png"
    JPEG = "jpeg"
    GIF = "gif"
    WEBP = "webp"
    BMP = "bmp"
    TIFF = "tiff"
    ICO = "ico"

    @property
    def is_supported(self) -> bool:
        return self.value in SUPPORTED_FORMAT_EXTENSIONS

    @property
    def extension(self) -> str:
        """Canonical file extension, e.g. ``jpg`` for JPEG."""
        return SUPPORTED_FORMAT_EXTENSIONS.get(self.value, self.value)


MAGIC_BYTES: Mapping[bytes, ImageFormat] = {
    b"\xff\xd8\xff": ImageFormat.JPEG,
    b"\x89PNG\r\n\x1a\n": ImageFormat.PNG,
    b"GIF87a": ImageFormat.GIF,
    b"GIF89a": ImageFormat.GIF,
    b"BM": ImageFormat.BMP,
    b"II*\x00": ImageFormat.TIFF,
    b"MM\x00*": ImageFormat.TIFF,
    b"\x00\x00\x01\x00": ImageFormat.ICO,
}


def detect_format(file_data: bytes) -> ImageFormat:
    """Detect the image format from leading bytes.

    Raises:
        UnsupportedFormatError: If the bytes match no known signature
    """
    # RIFF is a container; only RIFF....WEBP is an image
    if file_data[:4] == b"RIFF" and file_data[8:12] == b"WEBP":
        return ImageFormat.WEBP

    for signature, image_format in MAGIC_BYTES.items():
        if file_data.startswith(signature):
            return image_format

    raise UnsupportedFormatError(message="Unsupported or unknown file type")


def detect_supported_format(file_data: bytes) -> ImageFormat:
    """Detect the format and require it to be one the gallery accepts.

    Raises:
        UnsupportedFormatError: If undetectable or outside PNG/JPEG/WEBP/GIF
    """
    image_format = detect_format(file_data)

    if not image_format.is_supported:
        raise UnsupportedFormatError(
            message=f"Unsupported image format: {image_format.value}",
            details={"format": image_format.value},
        )

    return image_format
