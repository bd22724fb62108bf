from typing import Any

import pytest
from botocore.exceptions import ClientError

from core.infrastructure.aws.dynamodb_notifications import DynamoDBNotificationSink
from core.models.errors import NotificationDeliveryError


class StaticCounter:
    def __init__(self) -> None:
        self.value = 0

    def next_id(self, *, name: str) -> int:
        self.value += 1
        return self.value


class TestDynamoDBNotificationSink:
    def test_notify_stores_item(self, notifications_table, counters_table) -> None:
        sink = DynamoDBNotificationSink()

        sink.notify(target_owner=3, event_kind="image_delete", actor=9, subject_id=44)

        items = notifications_table.scan()["Items"]
        assert len(items) == 1

        item = items[0]
        assert item["owner_id"] == 3
        assert item["notification_id"] == 1
        assert item["event_kind"] == "image_delete"
        assert item["actor_id"] == 9
        assert item["subject_id"] == 44
        assert item["is_read"] is False
        assert "created_at" in item

    def test_notification_ids_come_from_counter(self, notifications_table) -> None:
        sink = DynamoDBNotificationSink(counter=StaticCounter())

        sink.notify(target_owner=3, event_kind="image_delete", actor=9, subject_id=1)
        sink.notify(target_owner=3, event_kind="image_delete", actor=9, subject_id=2)

        ids = sorted(int(item["notification_id"]) for item in notifications_table.scan()["Items"])
        assert ids == [1, 2]

    def test_failure_is_translated(self) -> None:
        class FailingAdapter:
            table_name = "notifications"

            def put_item(self, **kwargs: Any) -> Any:
                raise ClientError({"Error": {"Code": "InternalServerError"}}, "PutItem")

        sink = DynamoDBNotificationSink(adapter=FailingAdapter(), counter=StaticCounter())

        with pytest.raises(NotificationDeliveryError) as exc_info:
            sink.notify(target_owner=3, event_kind="image_delete", actor=9, subject_id=1)

        assert exc_info.value.details == {"owner_id": 3}
