"""
Pulumi infrastructure-as-code for the Quest service.

This package defines AWS storage for the application:
- DynamoDB tables for users, quests, challenges and user progress
- S3 buckets for public and private image assets
- RDS PostgreSQL for the relational store (when subnets are configured)
"""
