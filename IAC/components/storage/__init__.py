"""
Storage components for DynamoDB, S3 and RDS.

Components:
- DynamoDBTablesComponent: users, quests, challenges and progress tables
- S3ImageBucketsComponent: public and private image buckets
- RdsPostgresComponent: RDS PostgreSQL database
"""

from IAC.components.storage.dynamodb_tables import DynamoDBTablesComponent, DynamoDBTablesOutputs
from IAC.components.storage.s3_image_buckets import S3ImageBucketsComponent, S3ImageBucketOutputs
from IAC.components.storage.rds_postgres import RdsPostgresComponent, RdsOutputs

__all__ = [
    "DynamoDBTablesComponent",
    "DynamoDBTablesOutputs",
    "S3ImageBucketsComponent",
    "S3ImageBucketOutputs",
    "RdsPostgresComponent",
    "RdsOutputs",
]
