"""DynamoDB-backed implementation of SequenceCounter."""

from aws_lambda_powertools import Logger
from botocore.exceptions import ClientError

from core.infrastructure.adapters.dynamodb_adapter import (
    DynamoDBAdapter,
    DynamoDBAdapterProtocol,
)
from core.models.errors import SequenceCounterError
from core.repositories.counter_repository import SequenceCounter
from core.utils.constants import ENV_COUNTERS_TABLE_NAME

logger = Logger(UTC=True)


class DynamoDBSequenceCounter(SequenceCounter):
    """Counters stored as ``{counter_name, value}`` items.

    ``ADD`` is applied server-side, so concurrent callers never observe the
    same value and a missing counter starts at 1.
    """

    def __init__(self, adapter: DynamoDBAdapterProtocol | None = None) -> None:
        self._db: DynamoDBAdapterProtocol = adapter or DynamoDBAdapter(
            table_name_env=ENV_COUNTERS_TABLE_NAME
        )

    def next_id(self, *, name: str) -> int:
        try:
            response = self._db.update_item(
                Key={"counter_name": name},
                UpdateExpression="ADD #value :one",
                ExpressionAttributeNames={"#value": "value"},
                ExpressionAttributeValues={":one": 1},
                ReturnValues="UPDATED_NEW",
            )
            value = int(response["Attributes"]["value"])
        except ClientError as exc:
            logger.error("DynamoDB counter increment failed", extra={"counter": name})
            raise SequenceCounterError(
                message="Unable to allocate an image id",
                details={"counter": name},
            ) from exc
        except Exception as exc:
            logger.exception("Unexpected error incrementing counter")
            raise SequenceCounterError(
                message="Unable to allocate an image id",
                details={"counter": name},
            ) from exc

        logger.debug("Counter incremented", extra={"counter": name, "value": value})
        return value
