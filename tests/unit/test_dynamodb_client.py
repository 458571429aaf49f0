"""
Test suite for DynamoDBClient.

The boto3 client is a MagicMock; tests assert on the request shapes
and on how ClientError codes are translated.
"""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from quest_api.boundary.dynamodb.client import DynamoDBClient
from quest_api.boundary.dynamodb.items import ChallengeItem, QuestItem, UserItem
from quest_api.boundary.dynamodb.table_definitions import (
    TABLE_DEFINITIONS,
    create_table_kwargs,
)
from quest_api.configs.dynamodb import DynamoDBSettings
from quest_api.core.exceptions import DuplicateEntryError, StorageError
from quest_api.models.common import Difficulty


def _client_error(code: str, operation: str = "PutItem") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


def _paginator(*pages):
    paginator = MagicMock()
    paginator.paginate.return_value = list(pages)
    return paginator


@pytest.fixture
def boto_client() -> MagicMock:
    return MagicMock()


@pytest.fixture
def dynamodb(boto_client) -> DynamoDBClient:
    return DynamoDBClient(DynamoDBSettings(table_prefix="quest-dev-"), client=boto_client)


class TestItems:
    def test_quest_item_attributes(self):
        item = QuestItem("q1", "Walk", "desc", 500, Difficulty.NORMAL).to_item()

        assert item["QuestPrice"] == {"N": "500"}
        assert item["QuestDifficulty"] == {"S": "Normal"}
        assert QuestItem.from_item(item).difficulty is Difficulty.NORMAL

    def test_challenge_item_keys(self):
        item = ChallengeItem("gate", "q1", "Gate", "", 35.5, 139.25).to_item()

        assert item["QuestId"] == {"S": "q1"}
        assert item["ChallengeId"] == {"S": "gate"}
        assert ChallengeItem.from_item(item).lat == 35.5


class TestUsers:
    def test_put_user_uses_prefixed_table(self, dynamodb, boto_client):
        dynamodb.put_user(UserItem("u1", "a@example.com", "alice", "hash"))

        kwargs = boto_client.put_item.call_args.kwargs
        assert kwargs["TableName"] == "quest-dev-users"
        assert kwargs["Item"]["UserEmail"] == {"S": "a@example.com"}

    def test_get_user_by_id_missing(self, dynamodb, boto_client):
        boto_client.get_item.return_value = {}

        assert dynamodb.get_user_by_id("u1") is None

    def test_get_user_by_email_uses_index(self, dynamodb, boto_client):
        item = UserItem("u1", "a@example.com", "alice", "hash").to_item()
        boto_client.get_paginator.return_value = _paginator({"Items": [item]})

        user = dynamodb.get_user_by_email("a@example.com")

        assert user.id == "u1"
        kwargs = boto_client.get_paginator.return_value.paginate.call_args.kwargs
        assert kwargs["IndexName"] == "UserEmailIndex"

    def test_get_user_by_email_ambiguous(self, dynamodb, boto_client):
        item = UserItem("u1", "a@example.com", "alice", "hash").to_item()
        other = UserItem("u2", "a@example.com", "bob", "hash").to_item()
        boto_client.get_paginator.return_value = _paginator({"Items": [item]}, {"Items": [other]})

        with pytest.raises(DuplicateEntryError):
            dynamodb.get_user_by_email("a@example.com")


class TestQuestsAndChallenges:
    def test_get_quests_follows_pages(self, dynamodb, boto_client):
        first = QuestItem("q1", "A", "", 0, Difficulty.EASY).to_item()
        second = QuestItem("q2", "B", "", 0, Difficulty.HARD).to_item()
        boto_client.get_paginator.return_value = _paginator({"Items": [first]}, {"Items": [second]})

        quests = dynamodb.get_quests()

        assert [q.id for q in quests] == ["q1", "q2"]
        boto_client.get_paginator.assert_called_once_with("scan")

    def test_get_challenge_by_composite_key(self, dynamodb, boto_client):
        boto_client.get_item.return_value = {
            "Item": ChallengeItem("gate", "q1", "Gate", "", 1.0, 2.0).to_item()
        }

        challenge = dynamodb.get_challenge("q1", "gate")

        assert challenge.quest_id == "q1"
        assert boto_client.get_item.call_args.kwargs["Key"] == {
            "QuestId": {"S": "q1"},
            "ChallengeId": {"S": "gate"},
        }

    def test_read_failure_is_storage_error(self, dynamodb, boto_client):
        boto_client.get_item.side_effect = _client_error("ResourceNotFoundException", "GetItem")

        with pytest.raises(StorageError) as exc_info:
            dynamodb.get_quest_by_id("q1")
        assert exc_info.value.details["operation"] == "get_item"


class TestProgress:
    def test_participation_is_conditional(self, dynamodb, boto_client):
        dynamodb.put_user_participate_quest("u1", "q1")

        kwargs = boto_client.put_item.call_args.kwargs
        assert kwargs["TableName"] == "quest-dev-user_participating_quests"
        assert "attribute_not_exists" in kwargs["ConditionExpression"]

    def test_repeated_participation_is_duplicate(self, dynamodb, boto_client):
        boto_client.put_item.side_effect = _client_error("ConditionalCheckFailedException")

        with pytest.raises(DuplicateEntryError) as exc_info:
            dynamodb.put_user_participate_quest("u1", "q1")
        assert exc_info.value.details["key"] == {"UserId": "u1", "QuestId": "q1"}

    def test_repeated_completion_is_duplicate(self, dynamodb, boto_client):
        boto_client.put_item.side_effect = _client_error("ConditionalCheckFailedException")

        with pytest.raises(DuplicateEntryError):
            dynamodb.put_user_complete_challenge("u1", "gate")

    def test_other_put_failure_is_storage_error(self, dynamodb, boto_client):
        boto_client.put_item.side_effect = _client_error("ProvisionedThroughputExceededException")

        with pytest.raises(StorageError):
            dynamodb.put_user_complete_challenge("u1", "gate")

    def test_quest_participants_use_reverse_index(self, dynamodb, boto_client):
        boto_client.get_paginator.return_value = _paginator(
            {"Items": [{"UserId": {"S": "u1"}, "QuestId": {"S": "q1"}}]}
        )

        assert dynamodb.query_quest_participant_ids("q1") == ["u1"]
        kwargs = boto_client.get_paginator.return_value.paginate.call_args.kwargs
        assert kwargs["IndexName"] == "QuestIdIndex"

    def test_completed_challenge_ids(self, dynamodb, boto_client):
        boto_client.get_paginator.return_value = _paginator(
            {"Items": [{"UserId": {"S": "u1"}, "ChallengeId": {"S": "gate"}}]}
        )

        assert dynamodb.query_user_completed_challenge_ids("u1") == ["gate"]


class TestTableBootstrap:
    def test_create_table_kwargs(self):
        kwargs = create_table_kwargs("challenges", "quest-dev-challenges")

        assert kwargs["TableName"] == "quest-dev-challenges"
        assert kwargs["BillingMode"] == "PAY_PER_REQUEST"
        assert [k["KeyType"] for k in kwargs["KeySchema"]] == ["HASH", "RANGE"]

    def test_gsi_attributes_are_defined(self):
        for definition in TABLE_DEFINITIONS.values():
            defined = {a["AttributeName"] for a in definition["AttributeDefinitions"]}
            for index in definition.get("GlobalSecondaryIndexes", []):
                assert {k["AttributeName"] for k in index["KeySchema"]} <= defined

    def test_create_tables_skips_existing(self, dynamodb, boto_client):
        boto_client.list_tables.return_value = {"TableNames": ["quest-dev-users"]}

        created = dynamodb.create_tables()

        assert "quest-dev-users" not in created
        assert len(created) == len(TABLE_DEFINITIONS) - 1
        assert boto_client.create_table.call_count == len(TABLE_DEFINITIONS) - 1

    def test_create_tables_tolerates_race(self, dynamodb, boto_client):
        boto_client.list_tables.return_value = {"TableNames": []}
        boto_client.create_table.side_effect = _client_error("ResourceInUseException", "CreateTable")

        assert dynamodb.create_tables() == []
