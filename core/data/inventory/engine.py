"""
core/data/inventory/engine.py - Resource metadata aggregation engine

One list call, then a fixed set of per-resource sub-calls fanned out over a
thread pool, merged into one record per listed resource.

Failure policy:
    - session or list failure is fatal (AggregationError)
    - a failed sub-call drops only its own fragment; it is recorded in the
      ErrorCollector and never fails the resource or the call
    - every listed identifier yields exactly one record, in list order
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from botocore.exceptions import BotoCoreError

from core.auth import get_session
from core.config import AwsConfig
from core.exceptions import AggregationError, ProviderError
from core.parallel import ErrorCollector, FanOutExecutor, ParallelConfig, SubTask

from .services import DynamoDBProvider, KMSProvider, S3Provider
from .types import (
    AggregationResult,
    BucketRecord,
    KeyRecord,
    ListedBucket,
    ResourceKind,
    ResourceRecord,
    TableRecord,
)

if TYPE_CHECKING:
    from boto3 import Session

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FragmentSpec:
    """One enrichment sub-call

    Attributes:
        field: Record attribute the fragment is stored under
        operation: Provider method name (also the AWS operation name)
    """

    field: str
    operation: str


@dataclass(frozen=True)
class Recipe:
    """How to aggregate one resource kind

    Attributes:
        kind: Resource kind
        provider_factory: (session, region) -> provider facade
        list_operation: Provider method returning the listed resources
        identify: listed item -> identifier
        fragments: Sub-calls issued for every listed item
        build: (listed item, {field: fragment}) -> record
    """

    kind: ResourceKind
    provider_factory: Callable[["Session", str], Any]
    list_operation: str
    identify: Callable[[Any], str]
    fragments: tuple[FragmentSpec, ...]
    build: Callable[[Any, dict[str, Any]], ResourceRecord]


RECIPES: dict[ResourceKind, Recipe] = {
    ResourceKind.TABLE: Recipe(
        kind=ResourceKind.TABLE,
        provider_factory=DynamoDBProvider,
        list_operation="list_tables",
        identify=str,
        fragments=(FragmentSpec("metadata", "describe_table"),),
        build=lambda name, fragments: TableRecord(name=name, **fragments),
    ),
    ResourceKind.KEY: Recipe(
        kind=ResourceKind.KEY,
        provider_factory=KMSProvider,
        list_operation="list_keys",
        identify=str,
        fragments=(FragmentSpec("metadata", "describe_key"),),
        build=lambda key_id, fragments: KeyRecord(key_id=key_id, **fragments),
    ),
    ResourceKind.BUCKET: Recipe(
        kind=ResourceKind.BUCKET,
        provider_factory=S3Provider,
        list_operation="list_buckets",
        identify=lambda bucket: bucket.name,
        fragments=(
            FragmentSpec("location", "get_bucket_location"),
            FragmentSpec("versioning", "get_bucket_versioning"),
            FragmentSpec("encryption", "get_bucket_encryption"),
            FragmentSpec("public_access_block", "get_public_access_block"),
            FragmentSpec("tagging", "get_bucket_tagging"),
        ),
        build=lambda bucket, fragments: _build_bucket(bucket, fragments),
    ),
}


def _build_bucket(bucket: ListedBucket, fragments: dict[str, Any]) -> BucketRecord:
    return BucketRecord(name=bucket.name, creation_date=bucket.creation_date, **fragments)


class AggregationEngine:
    """Best-effort resource metadata aggregator

    The engine holds only immutable configuration; every call creates its
    own session, provider, executor and error collector.

    Example:
        engine = AggregationEngine(AwsConfig.from_env())
        result = engine.aggregate(ResourceKind.BUCKET)
        payload = result.to_payload()
    """

    def __init__(
        self,
        config: AwsConfig,
        session_factory: Callable[[AwsConfig], "Session"] = get_session,
        recipes: dict[ResourceKind, Recipe] | None = None,
    ):
        """Initialize engine

        Args:
            config: AWS region/profile/max_workers
            session_factory: config -> boto3 Session
            recipes: Override per-kind recipes (defaults to RECIPES)
        """
        self.config = config
        self._session_factory = session_factory
        self._recipes = recipes or RECIPES

    def list_identifiers(self, kind: ResourceKind) -> list[str]:
        """Run the list step only

        Raises:
            AggregationError: session or list failure
        """
        recipe = self._recipes[kind]
        provider = self._open_provider(recipe)
        return [recipe.identify(item) for item in self._list(recipe, provider)]

    def aggregate(self, kind: ResourceKind) -> AggregationResult:
        """List resources of ``kind`` and enrich each one

        Args:
            kind: Resource kind to aggregate

        Returns:
            AggregationResult with one record per listed resource

        Raises:
            AggregationError: session or list failure (no partial result)
        """
        recipe = self._recipes[kind]
        provider = self._open_provider(recipe)
        items = self._list(recipe, provider)

        collector = ErrorCollector(kind.service)
        records = self._enrich(recipe, provider, items, collector)

        if collector.has_errors:
            logger.info(f"{kind.service} 집계 완료: {len(records)}개, 하위 호출 {collector.get_summary()}")
        else:
            logger.info(f"{kind.service} 집계 완료: {len(records)}개")

        return AggregationResult(kind=kind, records=tuple(records), errors=tuple(collector.errors))

    def _open_provider(self, recipe: Recipe) -> Any:
        try:
            session = self._session_factory(self.config)
            return recipe.provider_factory(session, self.config.region)
        except (ProviderError, BotoCoreError) as e:
            raise AggregationError(recipe.kind.service, "session", cause=e) from e

    def _list(self, recipe: Recipe, provider: Any) -> list[Any]:
        try:
            items = list(getattr(provider, recipe.list_operation)())
        except ProviderError as e:
            raise AggregationError(recipe.kind.service, "list", cause=e) from e

        logger.info(f"{recipe.kind.service} 목록 조회: {len(items)}개")
        return items

    def _enrich(
        self,
        recipe: Recipe,
        provider: Any,
        items: Sequence[Any],
        collector: ErrorCollector,
    ) -> list[ResourceRecord]:
        """Fan out every (item, fragment) sub-call, join, then merge per item"""
        tasks = [
            SubTask(
                identifier=recipe.identify(item),
                operation=spec.operation,
                func=_bind(getattr(provider, spec.operation), recipe.identify(item)),
            )
            for item in items
            for spec in recipe.fragments
        ]

        executor = FanOutExecutor(ParallelConfig(max_workers=self.config.max_workers))
        results = executor.run(tasks)

        width = len(recipe.fragments)
        records: list[ResourceRecord] = []
        for index, item in enumerate(items):
            fragments: dict[str, Any] = {}
            for spec, result in zip(recipe.fragments, results[index * width : (index + 1) * width]):
                if not result.success:
                    collector.collect(result.error, spec.operation, resource_id=result.identifier)
                    continue
                # 성공했지만 설정 블록이 없으면 필드 생략
                if result.data is not None:
                    fragments[spec.field] = result.data
            records.append(recipe.build(item, fragments))

        return records


def _bind(method: Callable[[str], Any], identifier: str) -> Callable[[], Any]:
    return lambda: method(identifier)
