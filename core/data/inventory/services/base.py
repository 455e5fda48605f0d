"""
core/data/inventory/services/base.py - Shared provider plumbing

Wraps one boto3 client per service and turns botocore failures into
ProviderError with service, operation and resource context.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from botocore.exceptions import BotoCoreError, ClientError

from core.exceptions import ProviderError
from core.parallel import get_client

if TYPE_CHECKING:
    from boto3 import Session


class ServiceProvider:
    """Base class for per-service provider facades

    boto3 clients are thread-safe, so one client is shared by all
    enrichment workers of an invocation.
    """

    service: str = ""

    def __init__(self, session: "Session", region: str):
        self.region = region
        self._client = get_client(session, self.service, region_name=region)

    def _call(self, operation: str, resource_id: str | None = None, **kwargs: Any) -> dict[str, Any]:
        """Invoke one client operation

        Raises:
            ProviderError: On any botocore client or transport error
        """
        try:
            return getattr(self._client, operation)(**kwargs)
        except (ClientError, BotoCoreError) as e:
            raise ProviderError.from_client_error(self.service, operation, e, resource_id=resource_id) from e

    def _paginate(self, operation: str, result_key: str) -> Iterator[Any]:
        """Iterate every item of a paginated list operation

        Raises:
            ProviderError: On any botocore client or transport error
        """
        try:
            paginator = self._client.get_paginator(operation)
            for page in paginator.paginate():
                yield from page.get(result_key, [])
        except (ClientError, BotoCoreError) as e:
            raise ProviderError.from_client_error(self.service, operation, e) from e
