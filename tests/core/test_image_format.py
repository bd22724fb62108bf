import hashlib

import pytest

from core.models.errors import UnsupportedFormatError
from core.utils.hashing import blob_identifier
from core.utils.image_format import ImageFormat, detect_format, detect_supported_format


class TestDetectFormat:
    @pytest.mark.parametrize(
        "data,expected",
        [
            (b"\x89PNG\r\n\x1a\n" + b"\x00" * 8, ImageFormat.PNG),
            (b"\xff\xd8\xff\xe0" + b"\x00" * 8, ImageFormat.JPEG),
            (b"GIF87a" + b"\x00" * 8, ImageFormat.GIF),
            (b"GIF89a" + b"\x00" * 8, ImageFormat.GIF),
            (b"RIFF\x24\x00\x00\x00WEBPVP8 ", ImageFormat.WEBP),
            (b"BM" + b"\x00" * 8, ImageFormat.BMP),
            (b"II*\x00" + b"\x00" * 8, ImageFormat.TIFF),
            (b"MM\x00*" + b"\x00" * 8, ImageFormat.TIFF),
            (b"\x00\x00\x01\x00" + b"\x00" * 8, ImageFormat.ICO),
        ],
    )
    def test_detects_known_signatures(self, data: bytes, expected: ImageFormat) -> None:
        assert detect_format(data) is expected

    def test_riff_without_webp_is_unknown(self) -> None:
        with pytest.raises(UnsupportedFormatError):
            detect_format(b"RIFF\x24\x00\x00\x00WAVEfmt ")

    def test_unknown_bytes(self) -> None:
        with pytest.raises(UnsupportedFormatError, match="Unsupported or unknown"):
            detect_format(b"just some text")


class TestDetectSupportedFormat:
    def test_png_is_supported(self, sample_image_binary: bytes) -> None:
        assert detect_supported_format(sample_image_binary) is ImageFormat.PNG

    @pytest.mark.parametrize("data", [b"BM" + b"\x00" * 8, b"II*\x00" + b"\x00" * 8])
    def test_detected_but_rejected_formats(self, data: bytes) -> None:
        with pytest.raises(UnsupportedFormatError) as exc_info:
            detect_supported_format(data)

        assert exc_info.value.error_code == "UNSUPPORTED_FORMAT"

    def test_jpeg_extension_is_jpg(self) -> None:
        assert ImageFormat.JPEG.extension == "jpg"
        assert ImageFormat.PNG.extension == "png"


class TestBlobIdentifier:
    def test_sha1_hex_plus_extension(self, sample_image_binary: bytes) -> None:
        expected = hashlib.sha1(sample_image_binary).hexdigest() + ".png"

        assert blob_identifier(sample_image_binary, ImageFormat.PNG) == expected

    def test_identical_content_same_identifier(self, sample_jpeg_binary: bytes) -> None:
        first = blob_identifier(sample_jpeg_binary, ImageFormat.JPEG)
        second = blob_identifier(bytes(sample_jpeg_binary), ImageFormat.JPEG)

        assert first == second
        assert first.endswith(".jpg")

    def test_different_content_different_identifier(
        self, sample_image_binary: bytes, sample_jpeg_binary: bytes
    ) -> None:
        assert blob_identifier(sample_image_binary, ImageFormat.PNG) != blob_identifier(
            sample_jpeg_binary, ImageFormat.JPEG
        )
