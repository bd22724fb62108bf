"""
Pytest configuration and fixtures for image gallery tests.
Provides AWS mocking, DynamoDB and S3 fixtures with proper cleanup.
"""

import base64
import os
from collections.abc import Callable
from typing import Any

import boto3
import pytest
from botocore.exceptions import ClientError
from moto import mock_aws

os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("IMAGE_S3_BUCKET_NAME", "test-gallery-bucket")
os.environ.setdefault("UPLOAD_INDEX_TABLE_NAME", "test-upload-index")
os.environ.setdefault("COUNTERS_TABLE_NAME", "test-counters")
os.environ.setdefault("NOTIFICATIONS_TABLE_NAME", "test-notifications")
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "true")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "image-gallery-test")
os.environ.setdefault("POWERTOOLS_METRICS_NAMESPACE", "ImageGallery")

PNG_1X1_BASE64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="
)


@pytest.fixture(scope="function")
def aws_mock():
    with mock_aws():
        yield


@pytest.fixture(scope="function")
def dynamodb_resource(aws_mock):
    return boto3.resource("dynamodb", region_name=os.getenv("AWS_REGION"))


def _create_table(
    dynamodb_resource,
    table_name: str,
    key_schema: list[tuple[str, str, str]],
):
    """Helper to create a pay-per-request table from (name, type, key_type) triples."""
    try:
        table = dynamodb_resource.Table(table_name)
        table.load()
        return table
    except ClientError:
        pass

    table = dynamodb_resource.create_table(
        TableName=table_name,
        BillingMode="PAY_PER_REQUEST",
        KeySchema=[
            {"AttributeName": name, "KeyType": key_type}
            for name, _, key_type in key_schema
        ],
        AttributeDefinitions=[
            {"AttributeName": name, "AttributeType": attr_type}
            for name, attr_type, _ in key_schema
        ],
    )
    table.wait_until_exists()
    return table


@pytest.fixture(scope="function")
def index_table(dynamodb_resource):
    """Upload index: owner_id (N) partition, sequence_id (N) sort."""
    return _create_table(
        dynamodb_resource,
        os.environ["UPLOAD_INDEX_TABLE_NAME"],
        [("owner_id", "N", "HASH"), ("sequence_id", "N", "RANGE")],
    )


@pytest.fixture(scope="function")
def counters_table(dynamodb_resource):
    return _create_table(
        dynamodb_resource,
        os.environ["COUNTERS_TABLE_NAME"],
        [("counter_name", "S", "HASH")],
    )


@pytest.fixture(scope="function")
def notifications_table(dynamodb_resource):
    return _create_table(
        dynamodb_resource,
        os.environ["NOTIFICATIONS_TABLE_NAME"],
        [("owner_id", "N", "HASH"), ("notification_id", "N", "RANGE")],
    )


@pytest.fixture(scope="function")
def gallery_tables(index_table, counters_table, notifications_table):
    """All three tables the gallery services touch."""
    return {
        "index": index_table,
        "counters": counters_table,
        "notifications": notifications_table,
    }


@pytest.fixture
def index_put_records(index_table) -> Callable[[list[tuple[int, int, str]]], None]:
    """
    Helper to insert index records directly.

    Usage:
        index_put_records([(owner_id, sequence_id, blob_id), ...])
    """

    def _put(records: list[tuple[int, int, str]]) -> None:
        with index_table.batch_writer() as batch:
            for owner_id, sequence_id, blob_id in records:
                batch.put_item(
                    Item={
                        "owner_id": owner_id,
                        "sequence_id": sequence_id,
                        "blob_id": blob_id,
                    }
                )

    return _put


@pytest.fixture
def index_items(index_table) -> Callable[[], list[dict[str, Any]]]:
    """Helper returning every index item, across all owners."""

    def _scan() -> list[dict[str, Any]]:
        response = index_table.scan(ConsistentRead=True)
        items: list[dict[str, Any]] = response.get("Items", [])
        while "LastEvaluatedKey" in response:
            response = index_table.scan(
                ConsistentRead=True,
                ExclusiveStartKey=response["LastEvaluatedKey"],
            )
            items.extend(response.get("Items", []))
        return items

    return _scan


@pytest.fixture(scope="function")
def s3_client(aws_mock):
    """S3 client for bucket operations."""
    return boto3.client("s3", region_name=os.getenv("AWS_REGION"))


@pytest.fixture(scope="function")
def s3_bucket(s3_client):
    """Create the gallery bucket inside the mock."""
    bucket_name = os.environ["IMAGE_S3_BUCKET_NAME"]

    try:
        s3_client.head_bucket(Bucket=bucket_name)
    except ClientError:
        s3_client.create_bucket(Bucket=bucket_name)

    yield s3_client


@pytest.fixture
def s3_put_object(s3_bucket) -> Callable[..., dict[str, Any]]:
    """
    Helper to upload an object to S3.

    Usage:
        s3_put_object("uploads/<sha1>.png", image_bytes, "image/png")
    """

    def _put(key: str, body: bytes, content_type: str = "application/octet-stream"):
        return s3_bucket.put_object(
            Bucket=os.environ["IMAGE_S3_BUCKET_NAME"],
            Key=key,
            Body=body,
            ContentType=content_type,
        )

    return _put


@pytest.fixture
def s3_keys(s3_bucket) -> Callable[[], list[str]]:
    """Helper listing every key in the bucket."""

    def _list() -> list[str]:
        keys: list[str] = []
        paginator = s3_bucket.get_paginator("list_objects_v2")
        for page in paginator.paginate(Bucket=os.environ["IMAGE_S3_BUCKET_NAME"]):
            keys.extend(obj["Key"] for obj in page.get("Contents", []))
        return keys

    return _list


@pytest.fixture
def s3_get_object(s3_bucket) -> Callable[[str], bytes]:
    def _get(key: str) -> bytes:
        response = s3_bucket.get_object(Bucket=os.environ["IMAGE_S3_BUCKET_NAME"], Key=key)
        data: bytes = response["Body"].read()
        return data

    return _get


@pytest.fixture
def sample_image_binary() -> bytes:
    """Sample binary image data (1x1 PNG)."""
    return base64.b64decode(PNG_1X1_BASE64)


@pytest.fixture
def sample_jpeg_binary() -> bytes:
    """Sample binary JPEG data (minimal valid JPEG)."""
    return (
        b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00"
        b"\xff\xdb\x00C\x00\x08\x06\x06\x07\x06\x05\x08\x07\x07\x07\t\t\x08\n\x0c"
        b"\x14\r\x0c\x0b\x0b\x0c\x19\x12\x13\x0f\x14\x1d\x1a\x1f\x1e\x1d\x1a\x1c"
        b"\x1c $.' \",#\x1c\x1c(7),01444\x1f'9=82<.342\xff\xc0\x00\x0b\x08"
        b"\x00\x01\x00\x01\x01\x01\x11\x00\xff\xc4\x00\x14\x00\x01\x00\x00\x00"
        b"\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\t\xff\xc4\x00\x14\x10"
        b"\x01\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00\x00"
        b"\xff\xda\x00\x08\x01\x01\x00\x00?\x00\x7f\x00\xff\xd9"
    )


@pytest.fixture
def sample_gif_binary() -> bytes:
    return b"GIF89a\x01\x00\x01\x00\x80\x00\x00\x00\x00\x00\xff\xff\xff!\xf9\x04\x01\x00\x00\x00\x00,\x00\x00\x00\x00\x01\x00\x01\x00\x00\x02\x02D\x01\x00;"


@pytest.fixture
def sample_bmp_binary() -> bytes:
    """BMP header: detectable, but not an accepted gallery format."""
    return b"BM" + b"\x00" * 60


@pytest.fixture
def encode() -> Callable[[bytes], str]:
    def _encode(data: bytes) -> str:
        return base64.b64encode(data).decode("utf-8")

    return _encode
