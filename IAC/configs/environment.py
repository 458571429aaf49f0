"""
Environment configuration loader.

Loads and validates configuration from Pulumi stack config files.
"""

import pulumi

from IAC.configs.base import EnvironmentConfig
from IAC.configs.constants import RDS_INSTANCE_CLASSES


def get_config() -> EnvironmentConfig:
    """
    Load environment configuration from Pulumi stack config.

    Returns:
        EnvironmentConfig: Validated configuration object

    Raises:
        pulumi.ConfigMissingError: If required config values are missing
    """
    config = pulumi.Config()
    environment = config.require("environment")

    return EnvironmentConfig(
        environment=environment,
        project=config.get("project") or "quest",
        rds_instance_class=config.get("rds_instance_class")
        or RDS_INSTANCE_CLASSES.get(environment, "db.t3.micro"),
        rds_allocated_storage=int(config.get("rds_allocated_storage") or "20"),
        enable_deletion_protection=config.get_bool("enable_deletion_protection") or False,
        multi_az=config.get_bool("multi_az") or False,
        database_subnet_ids=tuple(config.get_object("database_subnet_ids") or ()),
        database_security_group_id=config.get("database_security_group_id"),
    )
