"""
core/data/inventory - Resource metadata aggregation

Lists DynamoDB tables, KMS keys and S3 buckets and enriches each one with
per-resource describe calls, tolerating individual sub-call failures.

Classes:
    - AggregationEngine: list + fan-out enrich + merge
    - AggregationResult: ordered records plus isolated sub-call errors

Usage:
    from core.config import AwsConfig
    from core.data.inventory import AggregationEngine, ResourceKind, to_json

    engine = AggregationEngine(AwsConfig.from_env())
    result = engine.aggregate(ResourceKind.BUCKET)
    print(to_json(result.to_payload()))
"""

from .engine import RECIPES, AggregationEngine, FragmentSpec, Recipe
from .serialize import to_json
from .types import (
    AggregationResult,
    BucketEncryption,
    BucketLocation,
    BucketRecord,
    BucketTagging,
    BucketVersioning,
    KeyDescription,
    KeyRecord,
    ListedBucket,
    PublicAccessBlock,
    ResourceKind,
    TableDescription,
    TableRecord,
)

__all__ = [
    # Engine
    "AggregationEngine",
    "FragmentSpec",
    "Recipe",
    "RECIPES",
    # Serialization
    "to_json",
    # Types
    "ResourceKind",
    "AggregationResult",
    "TableRecord",
    "TableDescription",
    "KeyRecord",
    "KeyDescription",
    "BucketRecord",
    "ListedBucket",
    "BucketLocation",
    "BucketVersioning",
    "BucketEncryption",
    "PublicAccessBlock",
    "BucketTagging",
]
