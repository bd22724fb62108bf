import json

from handlers.upload_images.handler import handler


class TestUploadImagesHandler:
    def test_upload_success(
        self,
        api_event,
        lambda_context,
        gallery_tables,
        s3_bucket,
        encode,
        sample_image_binary,
        sample_bmp_binary,
    ) -> None:
        event = api_event(
            owner_id=7,
            method="POST",
            body={"files": [encode(sample_image_binary), encode(sample_bmp_binary)]},
        )

        response = handler(event, lambda_context)

        assert response["statusCode"] == 201

        body = json.loads(response["body"])
        assert body["owner_id"] == 7
        assert body["accepted_count"] == 1
        assert body["rejected_count"] == 1
        assert body["images"][0]["blob_id"].endswith(".png")
        assert body["rejected"][0]["position"] == 1
        assert body["message"] == "Images uploaded successfully"

    def test_nothing_accepted_returns_200(
        self, api_event, lambda_context, gallery_tables, s3_bucket, encode, sample_bmp_binary
    ) -> None:
        event = api_event(method="POST", body={"files": [encode(sample_bmp_binary)]})

        response = handler(event, lambda_context)

        assert response["statusCode"] == 200
        body = json.loads(response["body"])
        assert body["accepted_count"] == 0
        assert body["message"] == "No images were accepted"

    def test_unauthenticated(self, api_event, lambda_context) -> None:
        event = api_event(owner_id=None, method="POST", body={"files": ["abc"]})

        response = handler(event, lambda_context)

        assert response["statusCode"] == 401
        assert json.loads(response["body"])["error"] == "UNAUTHENTICATED"

    def test_invalid_json(self, api_event, lambda_context) -> None:
        response = handler(api_event(method="POST", body="{not json"), lambda_context)

        assert response["statusCode"] == 400
        assert json.loads(response["body"])["message"] == "Invalid JSON body"

    def test_missing_files(self, api_event, lambda_context) -> None:
        response = handler(api_event(method="POST", body={}), lambda_context)

        assert response["statusCode"] == 422
        body = json.loads(response["body"])
        assert body["details"][0]["field"] == "files"

    def test_store_failure_is_500(
        self, api_event, lambda_context, s3_bucket, encode, sample_image_binary
    ) -> None:
        # No DynamoDB tables exist, so the counter increment fails
        event = api_event(method="POST", body={"files": [encode(sample_image_binary)]})

        response = handler(event, lambda_context)

        assert response["statusCode"] == 500
        assert json.loads(response["body"])["error"] == "SEQUENCE_COUNTER_FAILED"

    def test_options_preflight(self, api_event, lambda_context) -> None:
        response = handler(api_event(method="OPTIONS"), lambda_context)

        assert response["statusCode"] == 204
