"""
core/data/inventory/services/s3.py - S3 provider

ListBuckets plus the five per-bucket sub-calls (location, versioning,
encryption, public access block, tagging).

Note:
    S3 is a global service; ListBuckets and GetBucketLocation work from any
    region, so every call goes through the single configured region.
"""

from __future__ import annotations

from ..types import (
    BucketEncryption,
    BucketLocation,
    BucketTagging,
    BucketVersioning,
    ListedBucket,
    PublicAccessBlock,
)
from .base import ServiceProvider

# Legacy LocationConstraint values
_LEGACY_LOCATIONS = {
    "EU": "eu-west-1",
}


class S3Provider(ServiceProvider):
    """S3 bucket list/enrich facade

    A sub-call that succeeds but returns no configuration block returns
    None; the engine treats that the same as an absent fragment.
    """

    service = "s3"

    def list_buckets(self) -> list[ListedBucket]:
        """Return every bucket owned by the caller, in ListBuckets order"""
        response = self._call("list_buckets")
        return [
            ListedBucket(name=bucket["Name"], creation_date=bucket.get("CreationDate"))
            for bucket in response.get("Buckets", [])
        ]

    def get_bucket_location(self, bucket_name: str) -> BucketLocation:
        response = self._call("get_bucket_location", resource_id=bucket_name, Bucket=bucket_name)
        # LocationConstraint가 None이면 us-east-1
        location = response.get("LocationConstraint") or "us-east-1"
        return BucketLocation(region=_LEGACY_LOCATIONS.get(location, location))

    def get_bucket_versioning(self, bucket_name: str) -> BucketVersioning:
        response = self._call("get_bucket_versioning", resource_id=bucket_name, Bucket=bucket_name)
        return BucketVersioning(status=response.get("Status", ""))

    def get_bucket_encryption(self, bucket_name: str) -> BucketEncryption | None:
        response = self._call("get_bucket_encryption", resource_id=bucket_name, Bucket=bucket_name)
        configuration = response.get("ServerSideEncryptionConfiguration")
        if configuration is None:
            return None
        return BucketEncryption(rules=tuple(configuration.get("Rules", [])))

    def get_public_access_block(self, bucket_name: str) -> PublicAccessBlock | None:
        response = self._call("get_public_access_block", resource_id=bucket_name, Bucket=bucket_name)
        configuration = response.get("PublicAccessBlockConfiguration")
        if configuration is None:
            return None
        return PublicAccessBlock(
            block_public_acls=configuration.get("BlockPublicAcls", False),
            block_public_policy=configuration.get("BlockPublicPolicy", False),
            ignore_public_acls=configuration.get("IgnorePublicAcls", False),
            restrict_public_buckets=configuration.get("RestrictPublicBuckets", False),
        )

    def get_bucket_tagging(self, bucket_name: str) -> BucketTagging:
        response = self._call("get_bucket_tagging", resource_id=bucket_name, Bucket=bucket_name)
        return BucketTagging(tags={t["Key"]: t["Value"] for t in response.get("TagSet", [])})
