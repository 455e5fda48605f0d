"""
core/data/inventory/services - AWS service-specific provider facades

Each provider wraps one boto3 client and exposes the list call plus one
describe call per metadata fragment of its resource kind.
"""

from .base import ServiceProvider
from .dynamodb import DynamoDBProvider
from .kms import KMSProvider
from .s3 import S3Provider

__all__ = [
    "ServiceProvider",
    "DynamoDBProvider",
    "KMSProvider",
    "S3Provider",
]
