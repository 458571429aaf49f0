"""
Configuration module for Pulumi infrastructure.

Provides type-safe configuration loading from Pulumi stack config files.
"""

from IAC.configs.base import EnvironmentConfig
from IAC.configs.environment import get_config
from IAC.configs.constants import (
    DEFAULT_TAGS,
    DYNAMODB_TABLES,
    S3_BUCKET_SUFFIXES,
)

__all__ = [
    "EnvironmentConfig",
    "get_config",
    "DEFAULT_TAGS",
    "DYNAMODB_TABLES",
    "S3_BUCKET_SUFFIXES",
]
