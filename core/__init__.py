# core/__init__.py
"""
core - AWS 인벤토리 서버 인프라

아키텍처:
    core/
    ├── auth/           # boto3 Session 생성
    ├── parallel/       # fan-out 실행기, 에러 수집, client 헬퍼
    ├── data/
    │   └── inventory/  # 리소스 메타데이터 집계 엔진
    ├── config.py       # 중앙 설정 관리
    └── exceptions.py   # 통합 예외 계층

Usage:
    from core.config import AwsConfig
    from core.data.inventory import AggregationEngine, ResourceKind

    engine = AggregationEngine(AwsConfig.from_env())
    result = engine.aggregate(ResourceKind.TABLE)
"""

from core import auth, config, data, exceptions, parallel

__all__: list[str] = [
    # 서브패키지
    "auth",
    "data",
    "parallel",
    # 모듈
    "config",
    "exceptions",
]
