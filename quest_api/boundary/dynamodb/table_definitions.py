"""
DynamoDB table layouts.

Key schemas and secondary indexes for every key-value table, expressed
as ``create_table`` keyword arguments. The infrastructure program
declares the same layouts for deployed environments.

Dependencies: None
System role: Single source of truth for key-value table structure
"""

from typing import Any

USERS_TABLE = "users"
QUESTS_TABLE = "quests"
USER_PARTICIPATING_QUESTS_TABLE = "user_participating_quests"
CHALLENGES_TABLE = "challenges"
USER_COMPLETED_CHALLENGES_TABLE = "user_completed_challenges"

USER_EMAIL_INDEX = "UserEmailIndex"
QUEST_ID_INDEX = "QuestIdIndex"
CHALLENGE_ID_INDEX = "ChallengeIdIndex"


def _attr(name: str, attr_type: str = "S") -> dict[str, str]:
    return {"AttributeName": name, "AttributeType": attr_type}


def _key(name: str, key_type: str) -> dict[str, str]:
    return {"AttributeName": name, "KeyType": key_type}


def _gsi(index_name: str, hash_key: str, range_key: str | None = None) -> dict[str, Any]:
    key_schema = [_key(hash_key, "HASH")]
    if range_key:
        key_schema.append(_key(range_key, "RANGE"))
    return {
        "IndexName": index_name,
        "KeySchema": key_schema,
        "Projection": {"ProjectionType": "ALL"},
    }


TABLE_DEFINITIONS: dict[str, dict[str, Any]] = {
    USERS_TABLE: {
        "KeySchema": [_key("UserId", "HASH")],
        "AttributeDefinitions": [_attr("UserId"), _attr("UserEmail")],
        "GlobalSecondaryIndexes": [_gsi(USER_EMAIL_INDEX, "UserEmail")],
    },
    QUESTS_TABLE: {
        "KeySchema": [_key("QuestId", "HASH")],
        "AttributeDefinitions": [_attr("QuestId")],
    },
    USER_PARTICIPATING_QUESTS_TABLE: {
        "KeySchema": [_key("UserId", "HASH"), _key("QuestId", "RANGE")],
        "AttributeDefinitions": [_attr("UserId"), _attr("QuestId")],
        "GlobalSecondaryIndexes": [_gsi(QUEST_ID_INDEX, "QuestId", "UserId")],
    },
    CHALLENGES_TABLE: {
        "KeySchema": [_key("QuestId", "HASH"), _key("ChallengeId", "RANGE")],
        "AttributeDefinitions": [_attr("QuestId"), _attr("ChallengeId")],
    },
    USER_COMPLETED_CHALLENGES_TABLE: {
        "KeySchema": [_key("UserId", "HASH"), _key("ChallengeId", "RANGE")],
        "AttributeDefinitions": [_attr("UserId"), _attr("ChallengeId")],
        "GlobalSecondaryIndexes": [_gsi(CHALLENGE_ID_INDEX, "ChallengeId", "UserId")],
    },
}


def create_table_kwargs(base_name: str, table_name: str | None = None) -> dict[str, Any]:
    """
    Build the ``create_table`` arguments for a table.

    Args:
        base_name: Logical table name (key of TABLE_DEFINITIONS)
        table_name: Physical name override (e.g. with an environment prefix)

    Returns:
        dict: Keyword arguments for ``DynamoDB.Client.create_table``

    Raises:
        KeyError: If the table is unknown
    """
    definition = TABLE_DEFINITIONS[base_name]
    return {
        "TableName": table_name or base_name,
        "BillingMode": "PAY_PER_REQUEST",
        **definition,
    }
