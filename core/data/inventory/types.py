"""
core/data/inventory/types.py - Resource dataclasses for inventory

Each resource kind has one record type. A record holds the identifier
(and whatever the list call already returns) plus one optional attribute
per metadata fragment. ``None`` means the sub-call for that fragment
failed; a fragment value that is present but empty (no tags, versioning
never enabled) is still a fragment object.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from core.parallel import CollectedError


class ResourceKind(Enum):
    """Resource kinds the server can aggregate"""

    TABLE = "table"
    KEY = "key"
    BUCKET = "bucket"

    @property
    def service(self) -> str:
        """AWS service name backing this kind"""
        return _SERVICES[self]


_SERVICES = {
    ResourceKind.TABLE: "dynamodb",
    ResourceKind.KEY: "kms",
    ResourceKind.BUCKET: "s3",
}


# =============================================================================
# Fragments
# =============================================================================


@dataclass(frozen=True)
class TableDescription:
    """DynamoDB DescribeTable fragment"""

    created_date: datetime | None = None
    size_bytes: int | None = None
    pricing_model: dict[str, Any] | None = None  # BillingModeSummary


@dataclass(frozen=True)
class KeyDescription:
    """KMS DescribeKey fragment"""

    arn: str = ""
    creation_date: datetime | None = None
    description: str = ""
    enabled: bool = False
    key_state: str = ""
    key_manager: str = ""  # AWS or CUSTOMER
    key_usage: str = ""


@dataclass(frozen=True)
class BucketLocation:
    region: str


@dataclass(frozen=True)
class BucketVersioning:
    # Empty string when versioning was never enabled on the bucket
    status: str = ""


@dataclass(frozen=True)
class BucketEncryption:
    rules: tuple[dict[str, Any], ...] = ()


@dataclass(frozen=True)
class PublicAccessBlock:
    block_public_acls: bool = False
    block_public_policy: bool = False
    ignore_public_acls: bool = False
    restrict_public_buckets: bool = False

    def to_dict(self) -> dict[str, bool]:
        return {
            "BlockPublicAcls": self.block_public_acls,
            "BlockPublicPolicy": self.block_public_policy,
            "IgnorePublicAcls": self.ignore_public_acls,
            "RestrictPublicBuckets": self.restrict_public_buckets,
        }


@dataclass(frozen=True)
class BucketTagging:
    tags: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ListedBucket:
    """One entry of ListBuckets (name + creation date, no sub-call needed)"""

    name: str
    creation_date: datetime | None = None


# =============================================================================
# Records
# =============================================================================


@dataclass(frozen=True)
class TableRecord:
    """DynamoDB table record"""

    name: str
    metadata: TableDescription | None = None

    @property
    def identifier(self) -> str:
        return self.name

    def to_dict(self) -> dict[str, Any]:
        if self.metadata is None:
            return {}
        return {
            "CreatedDate": self.metadata.created_date,
            "SizeBytes": self.metadata.size_bytes,
            "PricingModel": self.metadata.pricing_model,
        }


@dataclass(frozen=True)
class KeyRecord:
    """KMS key record"""

    key_id: str
    metadata: KeyDescription | None = None

    @property
    def identifier(self) -> str:
        return self.key_id

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"KeyId": self.key_id}
        if self.metadata is not None:
            data.update(
                {
                    "Arn": self.metadata.arn,
                    "CreationDate": self.metadata.creation_date,
                    "Description": self.metadata.description,
                    "Enabled": self.metadata.enabled,
                    "KeyState": self.metadata.key_state,
                    "KeyManager": self.metadata.key_manager,
                    "KeyUsage": self.metadata.key_usage,
                }
            )
        return data


@dataclass(frozen=True)
class BucketRecord:
    """S3 bucket record

    Name and CreationDate come from ListBuckets; every other field group
    comes from its own sub-call and is omitted from ``to_dict`` when that
    sub-call failed.
    """

    name: str
    creation_date: datetime | None = None
    location: BucketLocation | None = None
    versioning: BucketVersioning | None = None
    encryption: BucketEncryption | None = None
    public_access_block: PublicAccessBlock | None = None
    tagging: BucketTagging | None = None

    @property
    def identifier(self) -> str:
        return self.name

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"Name": self.name, "CreationDate": self.creation_date}
        if self.location is not None:
            data["Region"] = self.location.region
        if self.versioning is not None:
            data["Versioning"] = self.versioning.status
        if self.encryption is not None:
            data["Encryption"] = list(self.encryption.rules)
        if self.public_access_block is not None:
            data["PublicAccessBlock"] = self.public_access_block.to_dict()
        if self.tagging is not None:
            data["Tags"] = dict(self.tagging.tags)
        return data


ResourceRecord = TableRecord | KeyRecord | BucketRecord


@dataclass(frozen=True)
class AggregationResult:
    """Outcome of one aggregate call

    Attributes:
        kind: Resource kind that was aggregated
        records: One record per listed resource, in list order
        errors: Sub-call failures isolated during enrichment (diagnostics only,
            never serialized into the tool payload)
    """

    kind: ResourceKind
    records: tuple[ResourceRecord, ...] = ()
    errors: tuple[CollectedError, ...] = ()

    @property
    def identifiers(self) -> list[str]:
        return [r.identifier for r in self.records]

    def to_payload(self) -> list[dict[str, Any]] | dict[str, dict[str, Any]]:
        """Wire shape: mapping by name for tables, array otherwise"""
        if self.kind == ResourceKind.TABLE:
            return {r.identifier: r.to_dict() for r in self.records}
        return [r.to_dict() for r in self.records]
