"""Thin DynamoDB adapter wrapping boto3 table operations."""

import os
from typing import Any, Protocol, cast

import boto3
from boto3.dynamodb.types import TypeSerializer

from core.utils.constants import ENV_AWS_ENDPOINT_URL, ENV_AWS_REGION


class DynamoDBTable(Protocol):
    """Minimal DynamoDB Table protocol."""

    def put_item(self, *, Item: dict[str, Any], **kwargs: Any) -> dict[str, Any]: ...
    def delete_item(self, *, Key: dict[str, Any], **kwargs: Any) -> dict[str, Any]: ...
    def update_item(self, *, Key: dict[str, Any], **kwargs: Any) -> dict[str, Any]: ...
    def query(self, **kwargs: Any) -> dict[str, Any]: ...
    def scan(self, **kwargs: Any) -> dict[str, Any]: ...


class DynamoDBAdapterProtocol(Protocol):
    """Repository-facing adapter protocol."""

    table_name: str

    def put_item(self, *, item: dict[str, Any]) -> dict[str, Any]: ...
    def delete_item(self, *, key: dict[str, Any], return_old: bool = False) -> dict[str, Any]: ...
    def update_item(self, **kwargs: Any) -> dict[str, Any]: ...
    def query(self, **kwargs: Any) -> dict[str, Any]: ...
    def scan(self, **kwargs: Any) -> dict[str, Any]: ...
    def transact_put_items(self, *, items: list[dict[str, Any]]) -> dict[str, Any]: ...


class DynamoDBAdapter:
    """Low-level DynamoDB operations (mechanical, no error handling).

    This adapter:
    - Wraps one boto3 DynamoDB table, named by an environment variable
    - Does NOT handle errors (lets them bubble up)
    - Domain implementations catch and translate errors
    """

    def __init__(self, *, table_name_env: str) -> None:
        """Initialize the DynamoDB table named by ``table_name_env``."""
        table_name = os.getenv(table_name_env)
        if not table_name:
            raise RuntimeError(f"{table_name_env} environment variable is not set")

        endpoint_url = os.getenv(ENV_AWS_ENDPOINT_URL)
        region_name = os.getenv(ENV_AWS_REGION)

        dynamodb = boto3.resource(
            "dynamodb",
            endpoint_url=endpoint_url,
            region_name=region_name,
        )

        self.table_name = table_name
        self.table: DynamoDBTable = cast(DynamoDBTable, dynamodb.Table(table_name))

        # Transactions go through the low-level client with explicit serialization
        self._client = boto3.client(
            "dynamodb",
            endpoint_url=endpoint_url,
            region_name=region_name,
        )
        self._serializer = TypeSerializer()

    def put_item(self, *, item: dict[str, Any]) -> dict[str, Any]:
        """Insert item into DynamoDB.

        Raises boto3 exceptions - caught by domain implementation.
        """
        return self.table.put_item(Item=item)

    def delete_item(self, *, key: dict[str, Any], return_old: bool = False) -> dict[str, Any]:
        """Delete item by key, optionally returning the removed attributes.

        Raises boto3 exceptions - caught by domain implementation.
        """
        kwargs: dict[str, Any] = {"Key": key}

        if return_old:
            kwargs["ReturnValues"] = "ALL_OLD"

        return self.table.delete_item(**kwargs)

    def update_item(self, **kwargs: Any) -> dict[str, Any]:
        """Execute DynamoDB update.

        Raises boto3 exceptions - caught by domain implementation.
        """
        return self.table.update_item(**kwargs)

    def query(self, **kwargs: Any) -> dict[str, Any]:
        """Execute DynamoDB query.

        Raises boto3 exceptions - caught by domain implementation.
        """
        return self.table.query(**kwargs)

    def scan(self, **kwargs: Any) -> dict[str, Any]:
        """Execute DynamoDB scan.

        Raises boto3 exceptions - caught by domain implementation.
        """
        return self.table.scan(**kwargs)

    def transact_put_items(self, *, items: list[dict[str, Any]]) -> dict[str, Any]:
        """Put all items in one TransactWriteItems call (all or nothing).

        Raises boto3 exceptions - caught by domain implementation.
        """
        transact_items = [
            {
                "Put": {
                    "TableName": self.table_name,
                    "Item": {
                        name: self._serializer.serialize(value)
                        for name, value in item.items()
                    },
                }
            }
            for item in items
        ]
        return self._client.transact_write_items(TransactItems=transact_items)
