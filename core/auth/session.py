"""
core/auth/session.py - boto3 Session 생성

호출(invocation)마다 새 Session을 만들어 호출 간 공유 상태를 두지 않습니다.
Session 생성/자격 증명 해석 실패는 ProviderError로 래핑됩니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from core.exceptions import ProviderError

if TYPE_CHECKING:
    from core.config import AwsConfig

logger = logging.getLogger(__name__)


def get_session(config: AwsConfig) -> boto3.Session:
    """설정에 맞는 boto3 Session 생성

    Args:
        config: AWS 접속 설정

    Returns:
        boto3.Session

    Raises:
        ProviderError: 프로파일이 없거나 자격 증명을 찾을 수 없는 경우
    """
    try:
        session = boto3.Session(profile_name=config.profile, region_name=config.region)
        credentials = session.get_credentials()
    except (BotoCoreError, ClientError) as e:
        raise ProviderError.from_client_error("sts", "create_session", e, resource_id=config.profile) from e

    if credentials is None:
        raise ProviderError(
            service="sts",
            operation="resolve_credentials",
            resource_id=config.profile,
            error_code="NoCredentials",
            error_message="AWS 자격 증명을 찾을 수 없습니다",
        )

    logger.debug(f"세션 생성: profile={config.profile or 'default'}, region={config.region}")
    return session
