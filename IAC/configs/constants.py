"""
Infrastructure constants for the Quest service.

Contains instance classes, bucket suffixes and DynamoDB table layouts.
"""

from typing import Final

# RDS Instance classes by environment
RDS_INSTANCE_CLASSES: Final[dict[str, str]] = {
    "dev": "db.t3.micro",
    "staging": "db.t3.small",
    "prod": "db.t3.medium",
}

# Default tags applied to all resources
DEFAULT_TAGS: Final[dict[str, str]] = {
    "Project": "quest",
    "ManagedBy": "pulumi",
}

# Port configurations
PORTS: Final[dict[str, int]] = {
    "api": 3000,
    "postgres": 5432,
}

# S3 bucket name suffixes
S3_BUCKET_SUFFIXES: Final[dict[str, str]] = {
    "public_images": "public-images",
    "private_images": "private-images",
}

# DynamoDB tables: key attributes are strings, secondary indexes project ALL.
DYNAMODB_TABLES: Final[dict[str, dict]] = {
    "users": {
        "hash_key": "UserId",
        "range_key": None,
        "indexes": [{"name": "UserEmailIndex", "hash_key": "UserEmail", "range_key": None}],
    },
    "quests": {
        "hash_key": "QuestId",
        "range_key": None,
        "indexes": [],
    },
    "user_participating_quests": {
        "hash_key": "UserId",
        "range_key": "QuestId",
        "indexes": [{"name": "QuestIdIndex", "hash_key": "QuestId", "range_key": "UserId"}],
    },
    "challenges": {
        "hash_key": "QuestId",
        "range_key": "ChallengeId",
        "indexes": [],
    },
    "user_completed_challenges": {
        "hash_key": "UserId",
        "range_key": "ChallengeId",
        "indexes": [{"name": "ChallengeIdIndex", "hash_key": "ChallengeId", "range_key": "UserId"}],
    },
}
