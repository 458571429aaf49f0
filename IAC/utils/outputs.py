"""
Stack output helpers.

Writes resolved stack outputs to a dotenv file so a local API process
can point at the deployed tables and buckets.
"""

from pathlib import Path
from typing import Any

import pulumi

# Stack output key -> environment variable read by quest_api.configs
ENV_VAR_NAMES: dict[str, str] = {
    "dynamodb_table_prefix": "DYNAMODB_TABLE_PREFIX",
    "public_images_bucket": "S3_IMAGES_PUBLIC_BUCKET",
    "private_images_bucket": "S3_IMAGES_PRIVATE_BUCKET",
    "aws_region": "S3_IMAGES_REGION",
    "rds_endpoint": "POSTGRES_HOST",
}


def render_env(values: dict[str, Any]) -> str:
    """
    Render resolved outputs as dotenv lines.

    Args:
        values: Resolved output values keyed by stack output name

    Returns:
        str: KEY=value lines, unknown keys upper-cased
    """
    lines = []
    for key in sorted(values):
        env_name = ENV_VAR_NAMES.get(key, key.upper())
        lines.append(f"{env_name}={values[key]}")
    return "\n".join(lines) + "\n"


def write_outputs_to_env(outputs: dict[str, Any], path: str) -> pulumi.Output[str]:
    """
    Write stack outputs to a dotenv file once they resolve.

    Args:
        outputs: Mapping of output name to value or pulumi.Output
        path: Destination file

    Returns:
        pulumi.Output[str]: The rendered file content
    """
    def _write(values: dict[str, Any]) -> str:
        content = render_env(values)
        if not pulumi.runtime.is_dry_run():
            Path(path).write_text(content, encoding="utf-8")
        return content

    return pulumi.Output.all(**outputs).apply(_write)
