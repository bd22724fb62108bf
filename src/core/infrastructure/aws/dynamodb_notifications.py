"""DynamoDB-backed implementation of NotificationSink."""

from aws_lambda_powertools import Logger
from botocore.exceptions import ClientError

from core.infrastructure.adapters.dynamodb_adapter import (
    DynamoDBAdapter,
    DynamoDBAdapterProtocol,
)
from core.infrastructure.aws.dynamodb_counter import DynamoDBSequenceCounter
from core.models.errors import NotificationDeliveryError
from core.repositories.counter_repository import SequenceCounter
from core.repositories.notification_repository import NotificationSink
from core.utils.constants import (
    ENV_NOTIFICATIONS_TABLE_NAME,
    NOTIFICATION_SEQUENCE_COUNTER,
)
from core.utils.time import utc_now_iso

logger = Logger(UTC=True)


class DynamoDBNotificationSink(NotificationSink):
    """Writes one item per notification into the owner's inbox partition.

    Table layout: partition key ``owner_id`` (N), sort key
    ``notification_id`` (N).
    """

    def __init__(
        self,
        adapter: DynamoDBAdapterProtocol | None = None,
        counter: SequenceCounter | None = None,
    ) -> None:
        self._db: DynamoDBAdapterProtocol = adapter or DynamoDBAdapter(
            table_name_env=ENV_NOTIFICATIONS_TABLE_NAME
        )
        self._counter: SequenceCounter = counter or DynamoDBSequenceCounter()

    def notify(
        self,
        *,
        target_owner: int,
        event_kind: str,
        actor: int,
        subject_id: int,
    ) -> None:
        notification_id = self._counter.next_id(name=NOTIFICATION_SEQUENCE_COUNTER)
        item = {
            "owner_id": target_owner,
            "notification_id": notification_id,
            "event_kind": event_kind,
            "actor_id": actor,
            "subject_id": subject_id,
            "is_read": False,
            "created_at": utc_now_iso(),
        }

        try:
            self._db.put_item(item=item)
        except ClientError as exc:
            logger.error(
                "DynamoDB put_item failed for notification",
                extra={"owner_id": target_owner, "event_kind": event_kind},
            )
            raise NotificationDeliveryError(
                message="Unable to notify the image owner",
                details={"owner_id": target_owner},
            ) from exc
        except Exception as exc:
            logger.exception("Unexpected error storing notification")
            raise NotificationDeliveryError(
                message="Unable to notify the image owner",
                details={"owner_id": target_owner},
            ) from exc

        logger.info(
            "Notification stored",
            extra={
                "owner_id": target_owner,
                "notification_id": notification_id,
                "event_kind": event_kind,
            },
        )
