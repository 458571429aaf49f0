"""
DynamoDB Tables Component for the document store.

Five tables, keyed the way the API reads them:
1. users: UserId, with UserEmailIndex for login lookups.
2. quests: QuestId.
3. challenges: QuestId + ChallengeId (challenge ids repeat across quests).
4. user_participating_quests: UserId + QuestId, QuestIdIndex for the reverse lookup.
5. user_completed_challenges: UserId + ChallengeId, ChallengeIdIndex for the reverse lookup.

All key attributes are strings. Billing is on-demand; point-in-time recovery
is only enabled in production.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from IAC.configs.base import EnvironmentConfig
from IAC.configs.constants import DYNAMODB_TABLES
from IAC.utils.naming import ResourceNamer
from IAC.utils.tags import create_tags


@dataclass
class DynamoDBTablesOutputs:
    """Output values from DynamoDB tables component."""
    table_prefix: str
    table_names: dict[str, pulumi.Output[str]]
    table_arns: dict[str, pulumi.Output[str]]


def _key_attributes(layout: dict) -> list[str]:
    """Collect every attribute used by the table key or an index key."""
    names = [layout["hash_key"], layout["range_key"]]
    for index in layout["indexes"]:
        names.extend([index["hash_key"], index["range_key"]])

    seen: list[str] = []
    for attr in names:
        if attr and attr not in seen:
            seen.append(attr)
    return seen


class DynamoDBTablesComponent(pulumi.ComponentResource):
    """
    DynamoDB tables for users, quests, challenges and user progress.

    Table names follow {project}-{environment}-{table} so the API only
    needs DYNAMODB_TABLE_PREFIX to find them.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        config: EnvironmentConfig,
        namer: ResourceNamer,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:storage:DynamoDBTables", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)
        self.namer = namer
        self.tables: dict[str, aws.dynamodb.Table] = {}

        for table, layout in DYNAMODB_TABLES.items():
            table_name = namer.table_name(table)
            self.tables[table] = aws.dynamodb.Table(
                f"{name}-{table}",
                name=table_name,
                billing_mode="PAY_PER_REQUEST",
                hash_key=layout["hash_key"],
                range_key=layout["range_key"],
                attributes=[
                    aws.dynamodb.TableAttributeArgs(name=attr, type="S")
                    for attr in _key_attributes(layout)
                ],
                global_secondary_indexes=[
                    aws.dynamodb.TableGlobalSecondaryIndexArgs(
                        name=index["name"],
                        hash_key=index["hash_key"],
                        range_key=index["range_key"],
                        projection_type="ALL",
                    )
                    for index in layout["indexes"]
                ],
                point_in_time_recovery=aws.dynamodb.TablePointInTimeRecoveryArgs(
                    enabled=config.is_production,
                ),
                deletion_protection_enabled=config.enable_deletion_protection,
                tags=create_tags(environment, table_name),
                opts=child_opts,
            )

        self.register_outputs({
            f"{table}_table_name": resource.name for table, resource in self.tables.items()
        })

    def get_outputs(self) -> DynamoDBTablesOutputs:
        """Get DynamoDB table output values."""
        return DynamoDBTablesOutputs(
            table_prefix=self.namer.prefix,
            table_names={table: resource.name for table, resource in self.tables.items()},
            table_arns={table: resource.arn for table, resource in self.tables.items()},
        )
