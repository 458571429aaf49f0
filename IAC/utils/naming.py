"""
Resource naming conventions for consistent AWS resource names.

Follows pattern: {project}-{environment}-{resource}
"""

from dataclasses import dataclass


@dataclass
class ResourceNamer:
    """
    Generates consistent resource names for AWS resources.

    Attributes:
        project: Project identifier
        environment: Deployment environment (dev, staging, prod)
    """
    project: str
    environment: str

    @property
    def prefix(self) -> str:
        """Prefix shared by every resource name (matches DYNAMODB_TABLE_PREFIX)."""
        return f"{self.project}-{self.environment}-"

    def name(self, resource: str) -> str:
        """
        Generate a resource name.

        Args:
            resource: Resource identifier (e.g., 'postgres', 'users')

        Returns:
            Formatted resource name
        """
        return f"{self.prefix}{resource}"

    def bucket_name(self, suffix: str) -> str:
        """
        Generate an S3 bucket name (must be globally unique).

        Args:
            suffix: Bucket suffix (e.g., 'public-images')

        Returns:
            Globally unique bucket name
        """
        return f"{self.prefix}{suffix}"

    def table_name(self, table: str) -> str:
        """
        Generate a DynamoDB table name.

        Args:
            table: Logical table name (e.g., 'user_participating_quests')

        Returns:
            Table name with project/environment prefix
        """
        return f"{self.prefix}{table}"
