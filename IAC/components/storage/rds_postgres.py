"""
RDS PostgreSQL Component for the relational store.

Holds quests, challenges, users and the participation/completion join
tables. The instance is placed in subnets and a security group that
already exist; this stack does not manage the network.

Credentials: manage_master_user_password=True means AWS generates the
password and keeps it in Secrets Manager. The API reads it at deploy time
into DATABASE_URL.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from IAC.configs.base import EnvironmentConfig
from IAC.utils.tags import create_tags

DATABASE_NAME = "quests"


@dataclass
class RdsOutputs:
    """Output values from RDS component."""
    endpoint: pulumi.Output[str]
    port: pulumi.Output[int]
    database_name: pulumi.Output[str]


class RdsPostgresComponent(pulumi.ComponentResource):
    """
    RDS PostgreSQL database for the quest relational store.

    Backups and final snapshots are kept in production only.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        config: EnvironmentConfig,
        subnet_ids: list[pulumi.Input[str]],
        security_group_id: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:storage:RdsPostgres", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.subnet_group = aws.rds.SubnetGroup(
            f"{name}-subnet-group",
            subnet_ids=subnet_ids,
            tags=create_tags(environment, f"{name}-subnet-group"),
            opts=child_opts,
        )

        self.parameter_group = aws.rds.ParameterGroup(
            f"{name}-params",
            family="postgres16",
            parameters=[
                aws.rds.ParameterGroupParameterArgs(
                    name="log_min_duration_statement",
                    value="1000",  # ms
                ),
            ],
            tags=create_tags(environment, f"{name}-params"),
            opts=child_opts,
        )

        self.instance = aws.rds.Instance(
            f"{name}-postgres",
            identifier=f"{name}-postgres",
            engine="postgres",
            engine_version="16",
            instance_class=config.rds_instance_class,
            allocated_storage=config.rds_allocated_storage,
            storage_type="gp3",
            storage_encrypted=True,
            db_name=DATABASE_NAME,
            username="postgres",
            manage_master_user_password=True,
            db_subnet_group_name=self.subnet_group.name,
            vpc_security_group_ids=[security_group_id],
            parameter_group_name=self.parameter_group.name,
            multi_az=config.multi_az,
            deletion_protection=config.enable_deletion_protection,
            skip_final_snapshot=not config.is_production,
            final_snapshot_identifier=f"{name}-final-snapshot" if config.is_production else None,
            backup_retention_period=7 if config.is_production else 1,
            tags=create_tags(environment, f"{name}-postgres"),
            opts=child_opts,
        )

        self.register_outputs({
            "endpoint": self.instance.address,
            "port": self.instance.port,
            "database_name": DATABASE_NAME,
        })

    def get_outputs(self) -> RdsOutputs:
        """Get RDS output values."""
        return RdsOutputs(
            endpoint=self.instance.address,
            port=self.instance.port,
            database_name=pulumi.Output.from_input(DATABASE_NAME),
        )
