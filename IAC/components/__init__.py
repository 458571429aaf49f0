"""
Pulumi component resources for Quest infrastructure.

Each submodule provides reusable ComponentResource classes:
- storage: DynamoDB tables, S3 image buckets, RDS PostgreSQL
"""
