"""
core/parallel/client.py - boto3 client 생성 헬퍼

타임아웃 + 연결 풀이 설정된 boto3 client를 생성합니다.
재시도는 하지 않습니다 (max_attempts=1, 최초 시도만 수행).
실패한 하위 호출은 재시도 대신 해당 필드 누락으로 처리됩니다.

Example:
    from core.parallel.client import get_client

    s3 = get_client(session, "s3", region_name="us-east-1")
    buckets = s3.list_buckets()["Buckets"]
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from botocore.config import Config

from core.config import settings

if TYPE_CHECKING:
    import boto3


def build_client_config(max_pool_connections: int = settings.MAX_WORKERS_LIMIT) -> Config:
    """재시도 없는 botocore Config

    Args:
        max_pool_connections: HTTP 연결 풀 크기 (동시 워커 수 이상이어야 대기 없음)
    """
    return Config(
        retries={"total_max_attempts": settings.API_MAX_ATTEMPTS, "mode": "standard"},
        connect_timeout=settings.API_CONNECT_TIMEOUT,
        read_timeout=settings.API_READ_TIMEOUT,
        max_pool_connections=max_pool_connections,
    )


def get_client(
    session: boto3.Session,
    service_name: str,
    region_name: str | None = None,
    max_pool_connections: int = settings.MAX_WORKERS_LIMIT,
) -> Any:
    """boto3 client 생성

    client 하나를 한 번의 호출 동안 모든 워커 스레드가 공유합니다.

    Args:
        session: boto3 Session
        service_name: AWS 서비스 이름 (dynamodb, kms, s3)
        region_name: 리전 (None이면 세션 기본값)
        max_pool_connections: HTTP 연결 풀 크기

    Returns:
        boto3 client
    """
    return session.client(
        service_name,
        region_name=region_name,
        config=build_client_config(max_pool_connections),
    )
