import pytest
from botocore.exceptions import ClientError

from core.infrastructure.adapters.dynamodb_adapter import DynamoDBAdapter
from core.utils.constants import ENV_COUNTERS_TABLE_NAME, ENV_UPLOAD_INDEX_TABLE_NAME


class TestDynamoDBAdapter:
    def test_init_missing_table_env(self, monkeypatch) -> None:
        monkeypatch.delenv(ENV_UPLOAD_INDEX_TABLE_NAME, raising=False)

        with pytest.raises(RuntimeError):
            DynamoDBAdapter(table_name_env=ENV_UPLOAD_INDEX_TABLE_NAME)

    def test_put_and_delete_returning_old(self, index_table) -> None:
        adapter = DynamoDBAdapter(table_name_env=ENV_UPLOAD_INDEX_TABLE_NAME)

        adapter.put_item(item={"owner_id": 1, "sequence_id": 10, "blob_id": "b.png"})
        response = adapter.delete_item(key={"owner_id": 1, "sequence_id": 10}, return_old=True)

        assert response["Attributes"]["blob_id"] == "b.png"
        assert "Item" not in index_table.get_item(Key={"owner_id": 1, "sequence_id": 10})

    def test_delete_missing_item_returns_no_attributes(self, index_table) -> None:
        adapter = DynamoDBAdapter(table_name_env=ENV_UPLOAD_INDEX_TABLE_NAME)

        response = adapter.delete_item(key={"owner_id": 1, "sequence_id": 99}, return_old=True)

        assert "Attributes" not in response

    def test_transact_put_items(self, index_table) -> None:
        adapter = DynamoDBAdapter(table_name_env=ENV_UPLOAD_INDEX_TABLE_NAME)

        adapter.transact_put_items(
            items=[
                {"owner_id": 2, "sequence_id": 1, "blob_id": "a.png"},
                {"owner_id": 2, "sequence_id": 2, "blob_id": "b.gif"},
            ]
        )

        items = index_table.scan()["Items"]
        assert sorted(item["blob_id"] for item in items) == ["a.png", "b.gif"]

    def test_update_item_add(self, counters_table) -> None:
        adapter = DynamoDBAdapter(table_name_env=ENV_COUNTERS_TABLE_NAME)

        response = adapter.update_item(
            Key={"counter_name": "c"},
            UpdateExpression="ADD #value :one",
            ExpressionAttributeNames={"#value": "value"},
            ExpressionAttributeValues={":one": 1},
            ReturnValues="UPDATED_NEW",
        )

        assert response["Attributes"]["value"] == 1

    def test_query_missing_table_raises(self, aws_mock) -> None:
        adapter = DynamoDBAdapter(table_name_env=ENV_UPLOAD_INDEX_TABLE_NAME)

        with pytest.raises(ClientError):
            adapter.scan()
