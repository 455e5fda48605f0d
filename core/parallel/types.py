"""
core/parallel/types.py - 병렬 실행 결과 타입

주요 구성 요소:
- ErrorCategory: 에러 분류
- TaskResult: 개별 하위 작업 실행 결과
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorCategory(Enum):
    """에러 카테고리"""

    ACCESS_DENIED = "access_denied"
    NOT_FOUND = "not_found"
    THROTTLING = "throttling"
    TIMEOUT = "timeout"
    INVALID_REQUEST = "invalid_request"
    SERVICE_ERROR = "service_error"
    NETWORK = "network"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class TaskResult(Generic[T]):
    """개별 하위 작업 결과

    성공 시 data, 실패 시 error 중 하나만 채워집니다.

    Attributes:
        identifier: 리소스 식별자 (테이블 이름, 키 ID, 버킷 이름)
        operation: 작업 이름 (예: "get_bucket_tagging")
        success: 성공 여부
        data: 작업 반환값
        error: 실패 원인 예외
        duration_ms: 실행 시간 (밀리초)
    """

    identifier: str
    operation: str
    success: bool
    data: T | None = None
    error: Exception | None = None
    duration_ms: float = 0.0
