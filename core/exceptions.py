"""
core/exceptions.py - 통합 예외 계층 구조

인벤토리 서버 전체에서 사용되는 예외 클래스들을 정의합니다.
일관된 예외 처리와 에러 메시지를 제공합니다.

예외 계층 구조:
    InventoryError (베이스)
    ├── ProviderError (AWS API 호출 실패)
    ├── AggregationError (집계 단계 치명적 실패)
    ├── ToolExecutionError (MCP 도구 실행 실패)
    ├── SerializationError (JSON 직렬화 실패)
    └── ConfigError (설정 관련)

Usage:
    from core.exceptions import ProviderError

    try:
        output = s3.list_buckets()
    except ClientError as e:
        raise ProviderError.from_client_error("s3", "list_buckets", e) from e
"""

from typing import Any, Dict, Optional

# =============================================================================
# 베이스 예외
# =============================================================================


class InventoryError(Exception):
    """인벤토리 서버 기본 예외 클래스

    모든 커스텀 예외의 베이스 클래스입니다.

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


# =============================================================================
# AWS API 호출 관련 예외
# =============================================================================


class ProviderError(InventoryError):
    """AWS API 호출 관련 예외

    boto3/botocore 예외를 래핑하여 어떤 리소스의 어떤 작업이
    실패했는지 추적할 수 있도록 합니다.
    """

    def __init__(
        self,
        service: str,
        operation: str,
        resource_id: Optional[str] = None,
        error_code: Optional[str] = None,
        error_message: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        message = f"{service}.{operation}"
        if resource_id:
            message = f"{message} [{resource_id}]"
        if error_code:
            message = f"{message} 실패 ({error_code})"
        else:
            message = f"{message} 실패"
        if error_message:
            message = f"{message}: {error_message}"

        super().__init__(message, cause)
        self.service = service
        self.operation = operation
        self.resource_id = resource_id
        self.error_code = error_code
        self.error_message = error_message
        self.details.update(
            {
                "service": service,
                "operation": operation,
                "resource_id": resource_id,
                "error_code": error_code,
            }
        )

    def __str__(self) -> str:
        # error_message가 이미 원인 메시지를 담고 있으면 중복 출력하지 않음
        if self.error_message or not self.cause:
            return self.message
        return f"{self.message}: {self.cause}"

    @classmethod
    def from_client_error(
        cls,
        service: str,
        operation: str,
        client_error: Exception,
        resource_id: Optional[str] = None,
    ) -> "ProviderError":
        """botocore.exceptions.ClientError로부터 생성

        Args:
            service: AWS 서비스 이름
            operation: API 작업 이름
            client_error: ClientError 또는 기타 botocore 예외
            resource_id: 대상 리소스 ID (선택사항)

        Returns:
            ProviderError 인스턴스
        """
        error_code = None
        error_message = None

        # ClientError 형식 파싱
        if hasattr(client_error, "response"):
            error_info = client_error.response.get("Error", {})
            error_code = error_info.get("Code")
            error_message = error_info.get("Message")

        return cls(
            service=service,
            operation=operation,
            resource_id=resource_id,
            error_code=error_code,
            error_message=error_message,
            cause=client_error,
        )


# =============================================================================
# 집계 관련 예외
# =============================================================================


class AggregationError(InventoryError):
    """집계 엔진의 치명적 실패

    목록 조회(list) 단계 또는 세션 생성(session) 단계가 실패하면
    집계할 식별자 집합 자체가 없으므로 호출 전체가 실패합니다.
    상세 조회(enrich) 실패는 이 예외로 올라오지 않습니다.
    """

    def __init__(
        self,
        kind: str,
        stage: str,
        cause: Optional[Exception] = None,
    ):
        message = f"{kind} 집계 실패 (stage={stage})"
        super().__init__(message, cause)
        self.kind = kind
        self.stage = stage
        self.details.update({"kind": kind, "stage": stage})


# =============================================================================
# 도구 실행 관련 예외
# =============================================================================


class ToolExecutionError(InventoryError):
    """MCP 도구 실행 관련 예외"""

    def __init__(
        self,
        tool_name: str,
        message: str,
        cause: Optional[Exception] = None,
    ):
        full_message = f"도구 실행 오류 [{tool_name}]: {message}"
        super().__init__(full_message, cause)
        self.tool_name = tool_name
        self.details["tool_name"] = tool_name
        if isinstance(cause, AggregationError):
            self.details["stage"] = cause.stage


class SerializationError(InventoryError):
    """집계 결과 JSON 직렬화 실패"""

    def __init__(self, kind: str, cause: Optional[Exception] = None):
        super().__init__(f"{kind} 결과 직렬화 실패", cause)
        self.kind = kind
        self.details["kind"] = kind


# =============================================================================
# 설정 관련 예외
# =============================================================================


class ConfigError(InventoryError):
    """설정 관련 예외"""

    def __init__(
        self,
        key: str,
        message: str,
        cause: Optional[Exception] = None,
    ):
        full_message = f"설정 오류 [{key}]: {message}"
        super().__init__(full_message, cause)
        self.config_key = key
        self.details["config_key"] = key


# =============================================================================
# 예외 유틸리티 함수
# =============================================================================


def get_error_code(error: Exception) -> str:
    """예외에서 AWS 에러 코드 추출

    Args:
        error: 확인할 예외

    Returns:
        AWS 에러 코드. 코드가 없으면 예외 클래스 이름.
    """
    if isinstance(error, ProviderError) and error.error_code:
        return error.error_code

    if hasattr(error, "response"):
        code = error.response.get("Error", {}).get("Code")
        if code:
            return code

    return type(error).__name__


def format_error_for_user(error: Exception) -> str:
    """사용자(에이전트)에게 표시할 에러 메시지 포맷팅

    Args:
        error: 예외

    Returns:
        사람이 읽을 수 있는 에러 메시지
    """
    if isinstance(error, InventoryError):
        # 커스텀 예외는 이미 포맷팅됨
        return str(error)

    # boto3 ClientError
    if hasattr(error, "response"):
        error_info = error.response.get("Error", {})
        code = error_info.get("Code", "UnknownError")
        message = error_info.get("Message", str(error))

        friendly_messages = {
            "AccessDenied": "권한이 없습니다. IAM 정책을 확인하세요.",
            "ExpiredToken": "인증 토큰이 만료되었습니다. 다시 로그인하세요.",
            "InvalidClientTokenId": "잘못된 자격 증명입니다.",
        }

        return friendly_messages.get(code, f"{code}: {message}")

    return str(error)
