"""
core/parallel/errors.py - 에러 수집 및 관리

상세 조회(enrich) 하위 작업에서 발생한 에러를 수집합니다.
수집된 에러는 로그로 남고 집계 결과의 진단 정보로 노출되지만,
도구 응답(JSON)에는 포함되지 않습니다.

주요 구성 요소:
- ErrorSeverity: 에러 심각도 분류
- CollectedError: 수집된 에러 상세 정보
- ErrorCollector: 스레드 세이프 에러 수집기
- categorize_error: 예외 → ErrorCategory 분류

Example:
    collector = ErrorCollector("s3")

    try:
        tags = s3.get_bucket_tagging(Bucket=name)
    except ClientError as e:
        collector.collect(e, "get_bucket_tagging", resource_id=name)

    if collector.has_errors:
        print(collector.get_summary())
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from botocore.exceptions import (
    ConnectTimeoutError,
    EndpointConnectionError,
    NoCredentialsError,
    ReadTimeoutError,
)

from core.exceptions import get_error_code

from .types import ErrorCategory

logger = logging.getLogger(__name__)


class ErrorSeverity(Enum):
    """에러 심각도 분류

    로깅 레벨을 결정합니다.
    """

    CRITICAL = "critical"  # 핵심 기능 실패
    WARNING = "warning"  # 부분 실패 - 필드 누락
    INFO = "info"  # 권한 없음 등
    DEBUG = "debug"  # 설정 없음 (태그/암호화 미설정 등)


@dataclass
class CollectedError:
    """수집된 에러 상세 정보

    Attributes:
        timestamp: 에러 발생 시각
        service: AWS 서비스 이름 (예: "s3", "kms")
        operation: API 작업 이름 (예: "get_bucket_tagging")
        resource_id: 관련 리소스 ID
        error_code: AWS 에러 코드 (예: "AccessDenied")
        error_message: 에러 메시지
        severity: 에러 심각도
        category: 에러 카테고리
    """

    timestamp: datetime
    service: str
    operation: str
    resource_id: str
    error_code: str
    error_message: str
    severity: ErrorSeverity
    category: ErrorCategory

    def __str__(self) -> str:
        return (
            f"[{self.severity.value.upper()}] {self.service}.{self.operation} "
            f"({self.resource_id}): {self.error_code}"
        )


def categorize_error_code(error_code: str) -> ErrorCategory:
    """에러 코드 문자열을 기반으로 ErrorCategory 분류

    Args:
        error_code: AWS 에러 코드 문자열 (예: "AccessDenied", "NoSuchTagSet")

    Returns:
        분류된 에러 카테고리. 매칭되는 키워드가 없으면 UNKNOWN 반환.
    """
    code = error_code.lower()

    if any(x in code for x in ["accessdenied", "unauthorized", "forbidden"]):
        return ErrorCategory.ACCESS_DENIED
    if any(x in code for x in ["notfound", "nosuch", "doesnotexist"]):
        return ErrorCategory.NOT_FOUND
    if any(x in code for x in ["throttl", "ratelimit", "toomanyrequests"]):
        return ErrorCategory.THROTTLING
    if any(x in code for x in ["timeout", "timedout"]):
        return ErrorCategory.TIMEOUT
    if any(x in code for x in ["invalid", "validation", "malformed"]):
        return ErrorCategory.INVALID_REQUEST
    if any(x in code for x in ["internal", "serviceunavailable", "serviceerror"]):
        return ErrorCategory.SERVICE_ERROR

    return ErrorCategory.UNKNOWN


def categorize_error(error: Exception) -> ErrorCategory:
    """예외 객체를 ErrorCategory로 분류

    botocore 연결/타임아웃 예외는 타입으로, 그 외는 에러 코드로 판별합니다.
    """
    if isinstance(error, (ConnectTimeoutError, ReadTimeoutError)):
        return ErrorCategory.TIMEOUT
    if isinstance(error, EndpointConnectionError):
        return ErrorCategory.NETWORK
    if isinstance(error, NoCredentialsError):
        return ErrorCategory.ACCESS_DENIED
    return categorize_error_code(get_error_code(error))


def default_severity(category: ErrorCategory) -> ErrorSeverity:
    """카테고리별 기본 심각도

    NOT_FOUND는 대부분 "설정 없음" 응답(NoSuchTagSet 등)이므로 DEBUG,
    ACCESS_DENIED는 INFO, 나머지는 WARNING.
    """
    if category == ErrorCategory.NOT_FOUND:
        return ErrorSeverity.DEBUG
    if category == ErrorCategory.ACCESS_DENIED:
        return ErrorSeverity.INFO
    return ErrorSeverity.WARNING


class ErrorCollector:
    """스레드 세이프 에러 수집기

    한 번의 집계 호출 동안 여러 워커 스레드에서 발생하는 하위 작업 에러를
    수집하고 심각도별 요약을 제공합니다. 호출 간에 공유되지 않습니다.
    """

    def __init__(self, service: str):
        """초기화

        Args:
            service: AWS 서비스 이름 (수집된 에러에 공통 적용)
        """
        self.service = service
        self._errors: list[CollectedError] = []
        self._lock = threading.Lock()

    def collect(
        self,
        error: Exception,
        operation: str,
        resource_id: str = "",
        severity: ErrorSeverity | None = None,
    ) -> CollectedError:
        """예외를 수집하고 로깅

        Args:
            error: 발생한 예외 (ClientError, ProviderError 등)
            operation: API 작업 이름
            resource_id: 관련 리소스 ID
            severity: 에러 심각도 (None이면 카테고리로 결정)

        Returns:
            수집된 CollectedError
        """
        category = categorize_error(error)
        if severity is None:
            severity = default_severity(category)

        error_message = str(error)
        if hasattr(error, "response"):
            error_message = error.response.get("Error", {}).get("Message", error_message)

        collected = CollectedError(
            timestamp=datetime.now(),
            service=self.service,
            operation=operation,
            resource_id=resource_id,
            error_code=get_error_code(error),
            error_message=error_message,
            severity=severity,
            category=category,
        )

        with self._lock:
            self._errors.append(collected)

        log_msg = f"{collected}"
        if severity == ErrorSeverity.CRITICAL:
            logger.error(log_msg)
        elif severity == ErrorSeverity.WARNING:
            logger.warning(log_msg)
        elif severity == ErrorSeverity.INFO:
            logger.info(log_msg)
        else:
            logger.debug(log_msg)

        return collected

    @property
    def errors(self) -> list[CollectedError]:
        """수집된 모든 에러의 복사본 반환"""
        with self._lock:
            return list(self._errors)

    @property
    def has_errors(self) -> bool:
        """에러 존재 여부"""
        with self._lock:
            return len(self._errors) > 0

    def get_summary(self) -> str:
        """심각도별 에러 건수를 포함한 요약 문자열 반환

        Returns:
            포맷팅된 요약 문자열 (예: "에러 3건 (debug: 1건, warning: 2건)")
        """
        with self._lock:
            if not self._errors:
                return "에러 없음"

            by_severity: dict[str, int] = {}
            for e in self._errors:
                by_severity[e.severity.value] = by_severity.get(e.severity.value, 0) + 1

            parts = [f"{k}: {v}건" for k, v in sorted(by_severity.items())]
            return f"에러 {len(self._errors)}건 ({', '.join(parts)})"
