"""DynamoDB-backed implementation of OrderedIndex.

Table layout: partition key ``owner_id`` (N), sort key ``sequence_id`` (N),
attribute ``blob_id`` (S). Numeric key order gives ascending sequence order
within an owner, so gallery pages are plain key-ordered queries.
"""

from typing import Any

from aws_lambda_powertools import Logger
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from core.infrastructure.adapters.dynamodb_adapter import (
    DynamoDBAdapter,
    DynamoDBAdapterProtocol,
)
from core.models.errors import IndexStoreError
from core.models.image import IndexRecord
from core.repositories.index_repository import Direction, OrderedIndex
from core.utils.constants import (
    DIRECTION_FORWARD,
    ENV_UPLOAD_INDEX_TABLE_NAME,
    ERROR_CODE_INDEX_COMMIT_FAILED,
    ERROR_CODE_INDEX_DELETE_FAILED,
    ERROR_CODE_INDEX_LIST_FAILED,
    ERROR_CODE_INDEX_SCAN_FAILED,
)

Item = dict[str, Any]

logger = Logger(UTC=True)


def _to_record(item: Item) -> IndexRecord:
    return IndexRecord(
        owner_id=int(item["owner_id"]),
        sequence_id=int(item["sequence_id"]),
        blob_id=str(item["blob_id"]),
    )


class DynamoDBOrderedIndex(OrderedIndex):
    """Upload index stored in DynamoDB.

    All boto3 errors are caught and translated into IndexStoreError.
    """

    def __init__(self, adapter: DynamoDBAdapterProtocol | None = None) -> None:
        """Initialize with DynamoDB adapter."""
        self._db: DynamoDBAdapterProtocol = adapter or DynamoDBAdapter(
            table_name_env=ENV_UPLOAD_INDEX_TABLE_NAME
        )

    def commit(self, *, records: list[IndexRecord]) -> None:
        if not records:
            logger.debug("Nothing to commit")
            return

        items: list[Item] = [record.model_dump() for record in records]

        try:
            self._db.transact_put_items(items=items)
        except ClientError as exc:
            logger.error(
                "DynamoDB transact_write_items failed",
                extra={"count": len(items)},
            )
            raise IndexStoreError(
                message="Unable to save uploaded images at this time",
                error_code=ERROR_CODE_INDEX_COMMIT_FAILED,
                details={"count": len(items)},
            ) from exc
        except Exception as exc:
            logger.exception("Unexpected error committing index records")
            raise IndexStoreError(
                message="Unable to save uploaded images at this time",
                error_code=ERROR_CODE_INDEX_COMMIT_FAILED,
                details={"count": len(items)},
            ) from exc

        logger.info("Index records committed", extra={"count": len(items)})

    def list_records(
        self,
        *,
        owner_id: int,
        anchor: int,
        direction: Direction,
        page_size: int,
    ) -> tuple[list[IndexRecord], bool]:
        """Query one owner's partition in key order.

        DynamoDB has no offset, so the first ``anchor`` items are read and
        discarded. One extra item past the page is fetched to tell whether
        another page exists.
        """
        logger.debug(
            "Listing index records",
            extra={
                "owner_id": owner_id,
                "anchor": anchor,
                "direction": direction,
                "page_size": page_size,
            },
        )

        wanted = anchor + page_size + 1
        query_kwargs: dict[str, Any] = {
            "KeyConditionExpression": Key("owner_id").eq(owner_id),
            "ScanIndexForward": direction == DIRECTION_FORWARD,
        }

        items: list[Item] = []
        last_evaluated_key: Item | None = None

        try:
            while len(items) < wanted:
                query_kwargs["Limit"] = wanted - len(items)
                if last_evaluated_key:
                    query_kwargs["ExclusiveStartKey"] = last_evaluated_key

                response = self._db.query(**query_kwargs)
                items.extend(response.get("Items", []))

                last_evaluated_key = response.get("LastEvaluatedKey")
                if not last_evaluated_key:
                    break

            records = [_to_record(item) for item in items[anchor : anchor + page_size]]

        except ClientError as exc:
            logger.error("DynamoDB query failed", extra={"owner_id": owner_id})
            raise IndexStoreError(
                message="Unable to list images for this user",
                error_code=ERROR_CODE_INDEX_LIST_FAILED,
                details={"owner_id": owner_id},
            ) from exc
        except Exception as exc:
            logger.exception("Unexpected error listing index records")
            raise IndexStoreError(
                message="Unable to list images for this user",
                error_code=ERROR_CODE_INDEX_LIST_FAILED,
                details={"owner_id": owner_id},
            ) from exc

        has_more = len(items) > anchor + page_size
        return records, has_more

    def take(self, *, owner_id: int, sequence_id: int) -> IndexRecord | None:
        key = {"owner_id": owner_id, "sequence_id": sequence_id}
        logger.debug("Removing index record", extra=key)

        try:
            response = self._db.delete_item(key=key, return_old=True)
        except ClientError as exc:
            logger.error("DynamoDB delete_item failed", extra=key)
            raise IndexStoreError(
                message="Unable to delete image record",
                error_code=ERROR_CODE_INDEX_DELETE_FAILED,
                details=key,
            ) from exc
        except Exception as exc:
            logger.exception("Unexpected error removing index record")
            raise IndexStoreError(
                message="Unable to delete image record",
                error_code=ERROR_CODE_INDEX_DELETE_FAILED,
                details=key,
            ) from exc

        attributes = response.get("Attributes")
        if not attributes:
            return None

        logger.info("Index record removed", extra=key)
        return _to_record(attributes)

    def has_reference(self, *, blob_id: str) -> bool:
        """Scan the whole index for ``blob_id``, stopping at the first hit."""
        logger.debug("Scanning for blob references", extra={"blob_id": blob_id})

        scan_kwargs: dict[str, Any] = {
            "FilterExpression": Attr("blob_id").eq(blob_id),
            "ProjectionExpression": "owner_id, sequence_id",
            "ConsistentRead": True,
        }

        try:
            while True:
                response = self._db.scan(**scan_kwargs)
                if response.get("Items"):
                    return True

                last_evaluated_key = response.get("LastEvaluatedKey")
                if not last_evaluated_key:
                    return False
                scan_kwargs["ExclusiveStartKey"] = last_evaluated_key

        except ClientError as exc:
            logger.error("DynamoDB scan failed", extra={"blob_id": blob_id})
            raise IndexStoreError(
                message="Unable to verify remaining image references",
                error_code=ERROR_CODE_INDEX_SCAN_FAILED,
                details={"blob_id": blob_id},
            ) from exc
        except Exception as exc:
            logger.exception("Unexpected error scanning index")
            raise IndexStoreError(
                message="Unable to verify remaining image references",
                error_code=ERROR_CODE_INDEX_SCAN_FAILED,
                details={"blob_id": blob_id},
            ) from exc
