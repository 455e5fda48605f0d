# core/auth/__init__.py
"""
AWS 인증 모듈 (core/auth)

AwsConfig로부터 boto3 Session을 생성합니다.
자격 증명은 boto3 기본 자격 증명 체인(환경변수, 프로파일, 인스턴스 역할 등)으로 해석됩니다.

사용 예시:
    from core.auth import get_session
    from core.config import AwsConfig

    session = get_session(AwsConfig(region="us-east-1"))
"""

from .session import get_session

__all__ = [
    "get_session",
]
