"""
core/parallel - 병렬 처리 모듈

목록 조회 이후의 리소스별 상세 조회를 병렬로 안전하게 처리합니다.

주요 구성 요소:
- FanOutExecutor: fan-out/fan-in 하위 작업 실행기
- ErrorCollector: 하위 작업 에러 수집기
- get_client: 타임아웃이 설정된 boto3 client 생성

Example:
    from core.parallel import ErrorCollector, FanOutExecutor, ParallelConfig, SubTask

    collector = ErrorCollector("kms")
    results = FanOutExecutor(ParallelConfig(max_workers=10)).run(
        [SubTask(key_id, "describe_key", lambda k=key_id: kms.describe_key(KeyId=k)) for key_id in key_ids],
    )
    for r in results:
        if not r.success:
            collector.collect(r.error, r.operation, r.identifier)
"""

from .client import build_client_config, get_client
from .errors import (
    CollectedError,
    ErrorCollector,
    ErrorSeverity,
    categorize_error,
    categorize_error_code,
)
from .executor import FanOutExecutor, ParallelConfig, SubTask
from .types import ErrorCategory, TaskResult

__all__: list[str] = [
    # Client
    "build_client_config",
    "get_client",
    # Executor
    "FanOutExecutor",
    "ParallelConfig",
    "SubTask",
    # Errors
    "CollectedError",
    "ErrorCollector",
    "ErrorSeverity",
    "categorize_error",
    "categorize_error_code",
    # Types
    "ErrorCategory",
    "TaskResult",
]
