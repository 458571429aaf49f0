"""
Base configuration dataclass for environment settings.

Provides type-safe configuration structure loaded from Pulumi stack configs.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class EnvironmentConfig:
    """
    Environment-specific configuration for infrastructure deployment.

    Attributes:
        environment: Deployment environment (dev, staging, prod)
        project: Project identifier used in resource names
        rds_instance_class: RDS instance class for PostgreSQL
        rds_allocated_storage: RDS storage in GB
        enable_deletion_protection: Enable deletion protection for databases and tables
        multi_az: Enable multi-AZ deployment for RDS
        database_subnet_ids: Existing subnets for the RDS subnet group
        database_security_group_id: Existing security group for RDS
    """
    environment: str
    project: str = "quest"
    rds_instance_class: str = "db.t3.micro"
    rds_allocated_storage: int = 20
    enable_deletion_protection: bool = False
    multi_az: bool = False
    database_subnet_ids: tuple[str, ...] = field(default_factory=tuple)
    database_security_group_id: str | None = None

    @property
    def is_production(self) -> bool:
        """Check if this is a production environment."""
        return self.environment == "prod"

    @property
    def deploy_database(self) -> bool:
        """RDS is only created when the network it lives in is configured."""
        return len(self.database_subnet_ids) >= 2 and bool(self.database_security_group_id)

    def get_tags(self) -> dict[str, str]:
        """Get environment-specific tags."""
        return {
            "Environment": self.environment,
        }
