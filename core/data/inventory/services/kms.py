"""
core/data/inventory/services/kms.py - KMS provider

ListKeys + DescribeKey.
"""

from __future__ import annotations

from ..types import KeyDescription
from .base import ServiceProvider


class KMSProvider(ServiceProvider):
    """KMS key list/describe facade"""

    service = "kms"

    def list_keys(self) -> list[str]:
        """Return every key ID in the region (AWS managed + customer managed)"""
        return [key["KeyId"] for key in self._paginate("list_keys", "Keys")]

    def describe_key(self, key_id: str) -> KeyDescription:
        """Fetch KeyMetadata of one key

        Args:
            key_id: KMS key ID

        Returns:
            KeyDescription fragment
        """
        meta = self._call("describe_key", resource_id=key_id, KeyId=key_id).get("KeyMetadata", {})
        return KeyDescription(
            arn=meta.get("Arn", ""),
            creation_date=meta.get("CreationDate"),
            description=meta.get("Description", ""),
            enabled=meta.get("Enabled", False),
            key_state=meta.get("KeyState", ""),
            key_manager=meta.get("KeyManager", ""),
            key_usage=meta.get("KeyUsage", ""),
        )
