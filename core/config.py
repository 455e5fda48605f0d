"""
core/config.py - 중앙 설정 관리

서버 전역 설정값과 환경변수 헬퍼, AWS 접속 설정을 정의합니다.
모든 설정 객체는 불변(frozen)이며 기동 시 한 번 생성된 뒤 호출 간에 공유됩니다.

Usage:
    from core.config import AwsConfig, settings

    config = AwsConfig.from_env(region="us-east-1")
    print(config.region, settings.MAX_WORKERS)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _dist_version

from core.exceptions import ConfigError

PACKAGE_NAME = "aws-inventory-mcp"
_FALLBACK_VERSION = "0.0.5"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class Settings:
    """서버 전역 기본 설정 (불변)"""

    # AWS
    DEFAULT_REGION: str = "us-east-1"
    API_CONNECT_TIMEOUT: int = 10  # 초
    API_READ_TIMEOUT: int = 30  # 초
    # 재시도 없음: botocore 기본 재시도도 끔 (최초 시도 1회)
    API_MAX_ATTEMPTS: int = 1

    # 병렬 처리
    MAX_WORKERS: int = 10
    MAX_WORKERS_LIMIT: int = 100

    # MCP 서버
    SERVER_NAME: str = "AWS MCP server 🚀"
    LOG_LEVEL: str = "INFO"

    # 환경변수 이름
    ENV_REGION: str = "AWS_INVENTORY_REGION"
    ENV_MAX_WORKERS: str = "AWS_INVENTORY_MAX_WORKERS"
    ENV_LOG_LEVEL: str = "AWS_INVENTORY_LOG_LEVEL"


settings = Settings()


# =============================================================================
# 환경변수 헬퍼
# =============================================================================


def get_version() -> str:
    """설치된 패키지 버전 반환 (미설치 시 내장 버전)"""
    try:
        return _dist_version(PACKAGE_NAME)
    except PackageNotFoundError:
        return _FALLBACK_VERSION


def get_env_int(name: str, default: int = 0) -> int:
    """환경변수를 int로 변환 (변환 실패 시 default)"""
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def get_default_profile() -> str | None:
    """AWS_PROFILE → AWS_DEFAULT_PROFILE 순으로 프로파일 조회"""
    return os.environ.get("AWS_PROFILE") or os.environ.get("AWS_DEFAULT_PROFILE")


def get_default_region() -> str:
    """대상 리전 결정

    우선순위: AWS_INVENTORY_REGION → AWS_REGION → AWS_DEFAULT_REGION → settings.DEFAULT_REGION
    """
    return (
        os.environ.get(settings.ENV_REGION)
        or os.environ.get("AWS_REGION")
        or os.environ.get("AWS_DEFAULT_REGION")
        or settings.DEFAULT_REGION
    )


def get_log_level() -> str:
    """로그 레벨 (AWS_INVENTORY_LOG_LEVEL, 기본 INFO)

    LOG_LEVELS에 없는 값이면 기본값을 반환합니다.
    """
    level = os.environ.get(settings.ENV_LOG_LEVEL, "").strip().upper()
    return level if level in LOG_LEVELS else settings.LOG_LEVEL


# =============================================================================
# AWS 접속 설정
# =============================================================================


@dataclass(frozen=True)
class AwsConfig:
    """AWS 접속 설정 (불변)

    Provider 팩토리에 생성 시점에 주입되며, 호출마다 환경을 다시 읽지 않습니다.

    Attributes:
        region: 모든 API 호출의 대상 리전
        profile: AWS 프로파일 이름 (None이면 기본 자격 증명 체인)
        max_workers: 상세 조회 fan-out 동시 스레드 수
    """

    region: str = settings.DEFAULT_REGION
    profile: str | None = None
    max_workers: int = settings.MAX_WORKERS

    def __post_init__(self) -> None:
        if not self.region or not self.region.strip():
            raise ConfigError("region", "리전이 비어 있습니다")
        if self.max_workers < 1:
            raise ConfigError("max_workers", f"1 이상이어야 합니다 (입력값: {self.max_workers})")
        if self.max_workers > settings.MAX_WORKERS_LIMIT:
            # frozen dataclass이므로 object.__setattr__ 사용
            object.__setattr__(self, "max_workers", settings.MAX_WORKERS_LIMIT)

    @classmethod
    def from_env(
        cls,
        region: str | None = None,
        profile: str | None = None,
        max_workers: int | None = None,
    ) -> AwsConfig:
        """명시 인자 → 환경변수 → 기본값 순으로 설정 생성

        Args:
            region: 대상 리전 (None이면 환경변수/기본값)
            profile: AWS 프로파일 (None이면 AWS_PROFILE 등)
            max_workers: 동시 스레드 수 (None이면 환경변수/기본값)

        Returns:
            AwsConfig 인스턴스

        Raises:
            ConfigError: 설정값이 유효하지 않은 경우
        """
        if max_workers is None:
            max_workers = get_env_int(settings.ENV_MAX_WORKERS, settings.MAX_WORKERS)

        return cls(
            region=region or get_default_region(),
            profile=profile or get_default_profile(),
            max_workers=max_workers,
        )
