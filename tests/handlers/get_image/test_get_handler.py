import base64
import json

import pytest

from handlers.get_image.handler import handler
from handlers.upload_images.service import UploadService


class TestGetImageHandler:
    def test_get_image_binary(
        self,
        api_event,
        lambda_context,
        gallery_tables,
        s3_bucket,
        encode,
        sample_image_binary,
    ) -> None:
        blob_id = UploadService().upload_images(
            owner_id=7, files=[encode(sample_image_binary)]
        ).blob_ids[0]

        # Any authenticated caller may read any blob
        response = handler(api_event(owner_id=99, path_params={"blob_id": blob_id}), lambda_context)

        assert response["statusCode"] == 200
        assert response["isBase64Encoded"] is True
        assert base64.b64decode(response["body"]) == sample_image_binary
        assert response["headers"]["Content-Type"] == "image/png"
        assert "immutable" in response["headers"]["Cache-Control"]

    def test_get_missing_blob(self, api_event, lambda_context, s3_bucket) -> None:
        blob_id = "a" * 40 + ".webp"

        response = handler(api_event(path_params={"blob_id": blob_id}), lambda_context)

        assert response["statusCode"] == 404
        assert json.loads(response["body"])["message"] == f"Image not found: {blob_id}"

    @pytest.mark.parametrize(
        "blob_id",
        ["../etc/passwd", "A" * 40 + ".png", "a" * 40 + ".bmp", "a" * 39 + ".png", None],
    )
    def test_invalid_blob_id(self, api_event, lambda_context, blob_id) -> None:
        response = handler(api_event(path_params={"blob_id": blob_id}), lambda_context)

        assert response["statusCode"] == 422

    def test_unauthenticated(self, api_event, lambda_context) -> None:
        event = api_event(owner_id=None, path_params={"blob_id": "a" * 40 + ".png"})

        assert handler(event, lambda_context)["statusCode"] == 401
