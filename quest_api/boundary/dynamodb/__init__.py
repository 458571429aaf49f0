"""
DynamoDB boundary: table layouts, item types and the typed client.
"""

from quest_api.boundary.dynamodb.client import DynamoDBClient
from quest_api.boundary.dynamodb.items import ChallengeItem, QuestItem, UserItem
from quest_api.boundary.dynamodb.table_definitions import TABLE_DEFINITIONS

__all__ = ["DynamoDBClient", "UserItem", "QuestItem", "ChallengeItem", "TABLE_DEFINITIONS"]
