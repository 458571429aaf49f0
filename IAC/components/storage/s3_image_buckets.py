"""
S3 Buckets Component for quest and stamp images.

Two Buckets, Two Audiences:
1. Public Images Bucket: stamp artwork and quest images shown to everyone.
   - Access: anonymous GetObject through a bucket policy. ACLs stay blocked.
   - Uploads only through the API's IAM credentials.

2. Private Images Bucket: images only handed out through presigned URLs.
   - Access: IAM only. PublicAccessBlock on everything.
   - Features: Versioning (protect overwrites), Encryption (AES256).
"""

import json
from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from IAC.configs.constants import S3_BUCKET_SUFFIXES
from IAC.utils.naming import ResourceNamer
from IAC.utils.tags import create_tags


@dataclass
class S3ImageBucketOutputs:
    """Output values from S3 image buckets component."""
    public_bucket_name: pulumi.Output[str]
    public_bucket_arn: pulumi.Output[str]
    public_bucket_domain: pulumi.Output[str]
    private_bucket_name: pulumi.Output[str]
    private_bucket_arn: pulumi.Output[str]


def public_read_policy(bucket_arn: str) -> str:
    """
    Build the bucket policy that allows anonymous reads of objects.

    Args:
        bucket_arn: ARN of the public bucket

    Returns:
        str: JSON policy document
    """
    return json.dumps({
        "Version": "2012-10-17",
        "Statement": [{
            "Sid": "PublicReadGetObject",
            "Effect": "Allow",
            "Principal": "*",
            "Action": "s3:GetObject",
            "Resource": f"{bucket_arn}/*",
        }],
    })


class S3ImageBucketsComponent(pulumi.ComponentResource):
    """
    S3 buckets for public and private images.

    The public bucket serves objects directly over HTTPS.
    The private bucket is versioned and encrypted.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        namer: ResourceNamer,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:storage:S3ImageBuckets", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)
        public_suffix = S3_BUCKET_SUFFIXES["public_images"]
        private_suffix = S3_BUCKET_SUFFIXES["private_images"]

        # Public images bucket
        self.public_bucket = aws.s3.Bucket(
            f"{name}-{public_suffix}",
            bucket=namer.bucket_name(public_suffix),
            tags=create_tags(environment, f"{name}-{public_suffix}"),
            opts=child_opts,
        )

        # Bucket policies allowed, ACLs still blocked
        self.public_access_block = aws.s3.BucketPublicAccessBlock(
            f"{name}-{public_suffix}-public-block",
            bucket=self.public_bucket.id,
            block_public_acls=True,
            block_public_policy=False,
            ignore_public_acls=True,
            restrict_public_buckets=False,
            opts=child_opts,
        )

        aws.s3.BucketPolicy(
            f"{name}-{public_suffix}-policy",
            bucket=self.public_bucket.id,
            policy=self.public_bucket.arn.apply(public_read_policy),
            opts=pulumi.ResourceOptions(
                parent=self, depends_on=[self.public_access_block]
            ),
        )

        # Private images bucket
        self.private_bucket = aws.s3.Bucket(
            f"{name}-{private_suffix}",
            bucket=namer.bucket_name(private_suffix),
            tags=create_tags(environment, f"{name}-{private_suffix}"),
            opts=child_opts,
        )

        aws.s3.BucketVersioning(
            f"{name}-{private_suffix}-versioning",
            bucket=self.private_bucket.id,
            versioning_configuration=aws.s3.BucketVersioningVersioningConfigurationArgs(
                status="Enabled",
            ),
            opts=child_opts,
        )

        aws.s3.BucketServerSideEncryptionConfiguration(
            f"{name}-{private_suffix}-encryption",
            bucket=self.private_bucket.id,
            rules=[aws.s3.BucketServerSideEncryptionConfigurationRuleArgs(
                apply_server_side_encryption_by_default=aws.s3.BucketServerSideEncryptionConfigurationRuleApplyServerSideEncryptionByDefaultArgs(
                    sse_algorithm="AES256",
                ),
            )],
            opts=child_opts,
        )

        aws.s3.BucketPublicAccessBlock(
            f"{name}-{private_suffix}-public-block",
            bucket=self.private_bucket.id,
            block_public_acls=True,
            block_public_policy=True,
            ignore_public_acls=True,
            restrict_public_buckets=True,
            opts=child_opts,
        )

        self.register_outputs({
            "public_bucket_name": self.public_bucket.bucket,
            "public_bucket_arn": self.public_bucket.arn,
            "private_bucket_name": self.private_bucket.bucket,
            "private_bucket_arn": self.private_bucket.arn,
        })

    def get_outputs(self) -> S3ImageBucketOutputs:
        """Get S3 bucket output values."""
        return S3ImageBucketOutputs(
            public_bucket_name=self.public_bucket.bucket,
            public_bucket_arn=self.public_bucket.arn,
            public_bucket_domain=self.public_bucket.bucket_regional_domain_name,
            private_bucket_name=self.private_bucket.bucket,
            private_bucket_arn=self.private_bucket.arn,
        )
