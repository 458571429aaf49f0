"""
Pulumi program entry point for Quest infrastructure.

Instantiates component resources in dependency order:
1. Configuration
2. DynamoDB tables, S3 image buckets
3. RDS (only when database subnets and security group are configured)
4. Exports and infrastructure.env
"""

import pulumi
import pulumi_aws as aws

from IAC.configs.environment import get_config
from IAC.utils.naming import ResourceNamer
from IAC.utils.outputs import write_outputs_to_env
from IAC.components.storage.dynamodb_tables import DynamoDBTablesComponent
from IAC.components.storage.s3_image_buckets import S3ImageBucketsComponent
from IAC.components.storage.rds_postgres import RdsPostgresComponent


def main() -> None:
    """Deploy Quest infrastructure."""
    config = get_config()
    namer = ResourceNamer(project=config.project, environment=config.environment)
    base_name = f"{config.project}-{config.environment}"

    aws_region = aws.get_region().name

    # --- Document store ---
    dynamodb = DynamoDBTablesComponent(
        name=base_name,
        environment=config.environment,
        config=config,
        namer=namer,
    )
    dynamodb_outputs = dynamodb.get_outputs()

    # --- Images ---
    images = S3ImageBucketsComponent(
        name=base_name,
        environment=config.environment,
        namer=namer,
    )
    image_outputs = images.get_outputs()

    outputs = {
        "aws_region": aws_region,
        "dynamodb_table_prefix": dynamodb_outputs.table_prefix,
        "public_images_bucket": image_outputs.public_bucket_name,
        "private_images_bucket": image_outputs.private_bucket_name,
    }
    for table, table_name in dynamodb_outputs.table_names.items():
        outputs[f"{table}_table"] = table_name

    # --- Relational store ---
    if config.deploy_database:
        rds = RdsPostgresComponent(
            name=base_name,
            environment=config.environment,
            config=config,
            subnet_ids=list(config.database_subnet_ids),
            security_group_id=config.database_security_group_id,
        )
        outputs["rds_endpoint"] = rds.get_outputs().endpoint
    else:
        pulumi.log.info("No database subnets configured, skipping RDS")

    # Write outputs to .env file for local development
    write_outputs_to_env(outputs, "infrastructure.env")

    for key, value in outputs.items():
        pulumi.export(key, value)


# Execute
main()
