"""
DynamoDB client for the key-value tables.

Wraps the low-level boto3 DynamoDB client with typed operations per
table. Join items are written with a conditional put, so recording the
same (user, quest) or (user, challenge) pair twice fails.

Dependencies: boto3, botocore, quest_api.configs
System role: Key-value storage boundary
"""

import logging
from typing import Any

import boto3
from botocore.exceptions import ClientError

from quest_api.boundary.dynamodb.items import ChallengeItem, QuestItem, UserItem
from quest_api.boundary.dynamodb.table_definitions import (
    CHALLENGE_ID_INDEX,
    CHALLENGES_TABLE,
    QUEST_ID_INDEX,
    QUESTS_TABLE,
    TABLE_DEFINITIONS,
    USER_COMPLETED_CHALLENGES_TABLE,
    USER_EMAIL_INDEX,
    USER_PARTICIPATING_QUESTS_TABLE,
    USERS_TABLE,
    create_table_kwargs,
)
from quest_api.configs.dynamodb import DynamoDBSettings
from quest_api.core.exceptions import DuplicateEntryError, StorageError

logger = logging.getLogger(__name__)


def _error_code(error: ClientError) -> str:
    return error.response.get("Error", {}).get("Code", "")


class DynamoDBClient:
    """Typed access to the quest service's DynamoDB tables."""

    def __init__(self, settings: DynamoDBSettings, client: Any | None = None) -> None:
        """
        Initialize DynamoDB client.

        Args:
            settings: Region, endpoint override and table prefix
            client: Preconfigured boto3 client (built from settings if None)
        """
        self._settings = settings
        self._client = client or boto3.client(
            "dynamodb",
            region_name=settings.region,
            endpoint_url=settings.endpoint_url,
        )

    def _table(self, base_name: str) -> str:
        return self._settings.table_name(base_name)

    def _put(self, base_name: str, item: dict[str, Any], **kwargs: Any) -> None:
        try:
            self._client.put_item(TableName=self._table(base_name), Item=item, **kwargs)
        except ClientError as e:
            if _error_code(e) == "ConditionalCheckFailedException":
                raise DuplicateEntryError(base_name, {"key": _key_repr(item)}) from e
            raise StorageError(str(e), operation="put_item", details={"table": base_name}) from e

    def _get(self, base_name: str, key: dict[str, Any]) -> dict[str, Any] | None:
        try:
            result = self._client.get_item(TableName=self._table(base_name), Key=key)
        except ClientError as e:
            raise StorageError(str(e), operation="get_item", details={"table": base_name}) from e
        return result.get("Item")

    def _query(
        self,
        base_name: str,
        key_condition: str,
        values: dict[str, Any],
        index_name: str | None = None,
    ) -> list[dict[str, Any]]:
        kwargs: dict[str, Any] = {
            "TableName": self._table(base_name),
            "KeyConditionExpression": key_condition,
            "ExpressionAttributeValues": values,
        }
        if index_name:
            kwargs["IndexName"] = index_name

        items: list[dict[str, Any]] = []
        try:
            paginator = self._client.get_paginator("query")
            for page in paginator.paginate(**kwargs):
                items.extend(page.get("Items", []))
        except ClientError as e:
            raise StorageError(str(e), operation="query", details={"table": base_name}) from e
        return items

    def _update(
        self,
        base_name: str,
        key: dict[str, Any],
        update_expression: str,
        values: dict[str, Any],
    ) -> None:
        try:
            self._client.update_item(
                TableName=self._table(base_name),
                Key=key,
                UpdateExpression=update_expression,
                ExpressionAttributeValues=values,
            )
        except ClientError as e:
            raise StorageError(str(e), operation="update_item", details={"table": base_name}) from e

    def _delete(self, base_name: str, key: dict[str, Any]) -> None:
        try:
            self._client.delete_item(TableName=self._table(base_name), Key=key)
        except ClientError as e:
            raise StorageError(str(e), operation="delete_item", details={"table": base_name}) from e

    # users

    def put_user(self, user: UserItem) -> None:
        """Write a user item, replacing any item with the same id."""
        self._put(USERS_TABLE, user.to_item())

    def get_user_by_id(self, user_id: str) -> UserItem | None:
        """Look up a user by primary key."""
        item = self._get(USERS_TABLE, {"UserId": {"S": user_id}})
        return UserItem.from_item(item) if item else None

    def get_user_by_email(self, email: str) -> UserItem | None:
        """
        Look up a user through the email index.

        Args:
            email: Email address

        Returns:
            UserItem if exactly one user has the address, None if none does

        Raises:
            DuplicateEntryError: If more than one user has the address
        """
        items = self._query(
            USERS_TABLE,
            "UserEmail = :email",
            {":email": {"S": email}},
            index_name=USER_EMAIL_INDEX,
        )
        if not items:
            return None
        if len(items) > 1:
            raise DuplicateEntryError("user email", {"email": email, "count": len(items)})
        return UserItem.from_item(items[0])

    def update_user(self, user: UserItem) -> None:
        """Overwrite the mutable attributes of a user."""
        self._update(
            USERS_TABLE,
            {"UserId": {"S": user.id}},
            "SET UserEmail = :email, UserName = :name, UserPassword = :password",
            {
                ":email": {"S": user.email},
                ":name": {"S": user.name},
                ":password": {"S": user.hashed_password},
            },
        )

    def delete_user(self, user_id: str) -> None:
        """Delete a user item."""
        self._delete(USERS_TABLE, {"UserId": {"S": user_id}})

    # quests

    def put_quest(self, quest: QuestItem) -> None:
        """Write a quest item, replacing any item with the same id."""
        self._put(QUESTS_TABLE, quest.to_item())

    def get_quest_by_id(self, quest_id: str) -> QuestItem | None:
        """Look up a quest by primary key."""
        item = self._get(QUESTS_TABLE, {"QuestId": {"S": quest_id}})
        return QuestItem.from_item(item) if item else None

    def get_quests(self) -> list[QuestItem]:
        """Scan every quest, following pagination."""
        quests: list[QuestItem] = []
        try:
            paginator = self._client.get_paginator("scan")
            for page in paginator.paginate(TableName=self._table(QUESTS_TABLE)):
                quests.extend(QuestItem.from_item(item) for item in page.get("Items", []))
        except ClientError as e:
            raise StorageError(str(e), operation="scan", details={"table": QUESTS_TABLE}) from e
        return quests

    def update_quest(self, quest: QuestItem) -> None:
        """Overwrite the mutable attributes of a quest."""
        item = quest.to_item()
        self._update(
            QUESTS_TABLE,
            {"QuestId": item["QuestId"]},
            "SET QuestTitle = :title, QuestDescription = :description, "
            "QuestPrice = :price, QuestDifficulty = :difficulty",
            {
                ":title": item["QuestTitle"],
                ":description": item["QuestDescription"],
                ":price": item["QuestPrice"],
                ":difficulty": item["QuestDifficulty"],
            },
        )

    def delete_quest(self, quest_id: str) -> None:
        """Delete a quest item."""
        self._delete(QUESTS_TABLE, {"QuestId": {"S": quest_id}})

    # challenges

    def put_challenge(self, challenge: ChallengeItem) -> None:
        """Write a challenge item under its quest."""
        self._put(CHALLENGES_TABLE, challenge.to_item())

    def get_challenge(self, quest_id: str, challenge_id: str) -> ChallengeItem | None:
        """Look up a challenge by its quest-scoped key."""
        item = self._get(
            CHALLENGES_TABLE,
            {"QuestId": {"S": quest_id}, "ChallengeId": {"S": challenge_id}},
        )
        return ChallengeItem.from_item(item) if item else None

    def get_challenges_by_quest_id(self, quest_id: str) -> list[ChallengeItem]:
        """Query every challenge of a quest."""
        items = self._query(
            CHALLENGES_TABLE,
            "QuestId = :quest_id",
            {":quest_id": {"S": quest_id}},
        )
        return [ChallengeItem.from_item(item) for item in items]

    def update_challenge(self, challenge: ChallengeItem) -> None:
        """Overwrite the mutable attributes of a challenge."""
        item = challenge.to_item()
        self._update(
            CHALLENGES_TABLE,
            {"QuestId": item["QuestId"], "ChallengeId": item["ChallengeId"]},
            "SET ChallengeTitle = :title, ChallengeDescription = :description, "
            "ChallengeLat = :lat, ChallengeLon = :lon",
            {
                ":title": item["ChallengeTitle"],
                ":description": item["ChallengeDescription"],
                ":lat": item["ChallengeLat"],
                ":lon": item["ChallengeLon"],
            },
        )

    def delete_challenge(self, quest_id: str, challenge_id: str) -> None:
        """Delete a challenge item."""
        self._delete(
            CHALLENGES_TABLE,
            {"QuestId": {"S": quest_id}, "ChallengeId": {"S": challenge_id}},
        )

    # user_participating_quests

    def put_user_participate_quest(self, user_id: str, quest_id: str) -> None:
        """
        Record that a user participates in a quest.

        Raises:
            DuplicateEntryError: If the pair is already recorded
        """
        self._put(
            USER_PARTICIPATING_QUESTS_TABLE,
            {"UserId": {"S": user_id}, "QuestId": {"S": quest_id}},
            ConditionExpression="attribute_not_exists(UserId) AND attribute_not_exists(QuestId)",
        )

    def query_user_participate_quest_ids(self, user_id: str) -> list[str]:
        """Return the ids of quests a user participates in."""
        items = self._query(
            USER_PARTICIPATING_QUESTS_TABLE,
            "UserId = :user_id",
            {":user_id": {"S": user_id}},
        )
        return [item["QuestId"]["S"] for item in items]

    def query_quest_participant_ids(self, quest_id: str) -> list[str]:
        """Return the ids of users participating in a quest."""
        items = self._query(
            USER_PARTICIPATING_QUESTS_TABLE,
            "QuestId = :quest_id",
            {":quest_id": {"S": quest_id}},
            index_name=QUEST_ID_INDEX,
        )
        return [item["UserId"]["S"] for item in items]

    # user_completed_challenges

    def put_user_complete_challenge(self, user_id: str, challenge_id: str) -> None:
        """
        Record that a user completed a challenge.

        Raises:
            DuplicateEntryError: If the pair is already recorded
        """
        self._put(
            USER_COMPLETED_CHALLENGES_TABLE,
            {"UserId": {"S": user_id}, "ChallengeId": {"S": challenge_id}},
            ConditionExpression="attribute_not_exists(UserId) AND attribute_not_exists(ChallengeId)",
        )

    def query_user_completed_challenge_ids(self, user_id: str) -> list[str]:
        """Return the ids of challenges a user completed."""
        items = self._query(
            USER_COMPLETED_CHALLENGES_TABLE,
            "UserId = :user_id",
            {":user_id": {"S": user_id}},
        )
        return [item["ChallengeId"]["S"] for item in items]

    def query_challenge_completer_ids(self, challenge_id: str) -> list[str]:
        """Return the ids of users who completed a challenge."""
        items = self._query(
            USER_COMPLETED_CHALLENGES_TABLE,
            "ChallengeId = :challenge_id",
            {":challenge_id": {"S": challenge_id}},
            index_name=CHALLENGE_ID_INDEX,
        )
        return [item["UserId"]["S"] for item in items]

    # bootstrap

    def create_tables(self) -> list[str]:
        """
        Create every table that does not exist yet.

        Used to bootstrap LocalStack; deployed tables come from the
        infrastructure program.

        Returns:
            list[str]: Physical names of the tables created by this call
        """
        try:
            existing = set(self._client.list_tables().get("TableNames", []))
        except ClientError as e:
            raise StorageError(str(e), operation="list_tables") from e

        created: list[str] = []
        for base_name in TABLE_DEFINITIONS:
            table_name = self._table(base_name)
            if table_name in existing:
                continue
            try:
                self._client.create_table(**create_table_kwargs(base_name, table_name))
            except ClientError as e:
                if _error_code(e) == "ResourceInUseException":
                    continue
                raise StorageError(str(e), operation="create_table", details={"table": table_name}) from e
            logger.info("Created DynamoDB table", extra={"table": table_name})
            created.append(table_name)
        return created


def _key_repr(item: dict[str, Any]) -> dict[str, str]:
    return {
        name: next(iter(value.values()))
        for name, value in item.items()
        if name.endswith("Id")
    }
