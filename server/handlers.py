"""
server/handlers.py - MCP 도구 핸들러

도구 하나를 ResourceKind 하나에 묶는 얇은 어댑터입니다.
집계 엔진을 호출하고 결과를 JSON 텍스트로 직렬화하며,
치명적 실패는 ToolExecutionError로 래핑합니다. 비즈니스 로직은 두지 않습니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from core.data.inventory import AggregationEngine, ResourceKind, to_json
from core.exceptions import AggregationError, SerializationError, ToolExecutionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolSpec:
    """MCP 도구 명세

    Attributes:
        name: 도구 이름 (MCP에 등록되는 이름)
        description: 에이전트가 읽는 도구 설명
        kind: 대상 리소스 종류
        list_only: True이면 목록 조회 단계만 수행 (식별자 배열 반환)
    """

    name: str
    description: str
    kind: ResourceKind
    list_only: bool = False


TOOL_SPECS: tuple[ToolSpec, ...] = (
    ToolSpec(
        name="list-dynamodb-tables",
        description="List all DynamoDB tables",
        kind=ResourceKind.TABLE,
        list_only=True,
    ),
    ToolSpec(
        name="get-dynamodb-table-metadata",
        description="Get metadata of DynamoDB tables like created date, size, and pricing model",
        kind=ResourceKind.TABLE,
    ),
    ToolSpec(
        name="list-kms-keys",
        description="List all KMS keys along with metadata like created date, key description, and ID",
        kind=ResourceKind.KEY,
    ),
    ToolSpec(
        name="list-s3-buckets",
        description=(
            "List all S3 buckets along with commonly used metadata like creation date, "
            "region, versioning status, etc."
        ),
        kind=ResourceKind.BUCKET,
    ),
)


class ToolHandler:
    """도구 호출 → 집계 → 직렬화

    Example:
        handler = ToolHandler(TOOL_SPECS[3], engine)
        text = handler()  # '[{"Name":"a",...}]'
    """

    def __init__(self, spec: ToolSpec, engine: AggregationEngine):
        self.spec = spec
        self.engine = engine

    @property
    def name(self) -> str:
        return self.spec.name

    def __call__(self) -> str:
        """도구 실행

        Returns:
            JSON 텍스트

        Raises:
            ToolExecutionError: 목록 조회/세션/직렬화 실패
        """
        logger.info(f"도구 호출: {self.spec.name}")
        kind = self.spec.kind

        try:
            if self.spec.list_only:
                payload = self.engine.list_identifiers(kind)
            else:
                payload = self.engine.aggregate(kind).to_payload()
            return to_json(payload, kind.service)
        except AggregationError as e:
            logger.error(f"{self.spec.name} 실패: {e}")
            raise ToolExecutionError(self.spec.name, f"{e.stage} 단계 실패", cause=e) from e
        except SerializationError as e:
            logger.error(f"{self.spec.name} 직렬화 실패: {e}")
            raise ToolExecutionError(self.spec.name, "결과 직렬화 실패", cause=e) from e


def build_handlers(engine: AggregationEngine) -> list[ToolHandler]:
    """등록할 전체 도구 핸들러 생성"""
    return [ToolHandler(spec, engine) for spec in TOOL_SPECS]
