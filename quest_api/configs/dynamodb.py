"""
DynamoDB configuration settings.

Region, endpoint override (LocalStack) and table naming for the
key-value store.

Dependencies: pydantic_settings
System role: DynamoDB client configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DynamoDBSettings(BaseSettings):
    """Settings for DynamoDB table access."""

    model_config = SettingsConfigDict(
        env_prefix="DYNAMODB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    region: str = Field(
        default="ap-northeast-1",
        description="AWS region for DynamoDB tables",
    )
    endpoint_url: str | None = Field(
        default=None,
        description="Endpoint override, e.g. http://localhost:4566 for LocalStack",
    )
    table_prefix: str = Field(
        default="",
        description="Prefix prepended to every table name",
    )

    def table_name(self, base_name: str) -> str:
        """
        Resolve the physical name of a table.

        Args:
            base_name: Logical table name (e.g. "users")

        Returns:
            str: Prefixed table name
        """
        return f"{self.table_prefix}{base_name}"
