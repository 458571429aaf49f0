"""
Create missing DynamoDB tables (LocalStack bootstrap).

Usage:
    DYNAMODB_ENDPOINT_URL=http://localhost:4566 python -m quest_api.boundary.dynamodb
"""

import logging

from quest_api.boundary.dynamodb.client import DynamoDBClient
from quest_api.configs import get_settings

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    created = DynamoDBClient(get_settings().dynamodb).create_tables()
    logging.getLogger(__name__).info("Tables created: %s", ", ".join(created) or "none")
