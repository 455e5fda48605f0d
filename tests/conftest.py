"""
tests/conftest.py - pytest 공통 픽스처

AWS API 모킹과 테스트 헬퍼를 제공합니다.

Usage:
    def test_something(mock_session, mock_s3_client, make_engine):
        engine = make_engine()
        result = engine.aggregate(ResourceKind.BUCKET)
"""

import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


CREATED = datetime(2024, 1, 1, tzinfo=timezone.utc)


# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """테스트 환경 설정 (가짜 자격 증명, 고정 리전)"""
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    for name in ("AWS_PROFILE", "AWS_DEFAULT_PROFILE", "AWS_REGION", "AWS_INVENTORY_REGION", "AWS_INVENTORY_MAX_WORKERS"):
        monkeypatch.delenv(name, raising=False)
    yield


# =============================================================================
# 헬퍼
# =============================================================================


def make_client_error(code: str, operation: str, message: str = "") -> ClientError:
    """botocore ClientError 생성"""
    return ClientError({"Error": {"Code": code, "Message": message or code}}, operation)


def paginated(mock_client: MagicMock, *pages: dict) -> None:
    """get_paginator().paginate()가 주어진 페이지를 반환하도록 설정"""
    paginator = MagicMock()
    paginator.paginate.return_value = list(pages)
    mock_client.get_paginator.return_value = paginator


@pytest.fixture
def client_error():
    return make_client_error


# =============================================================================
# AWS 모킹 픽스처
# =============================================================================


@pytest.fixture
def mock_dynamodb_client():
    """DynamoDB 클라이언트 모킹 (orders, users)"""
    mock_client = MagicMock()
    paginated(mock_client, {"TableNames": ["orders", "users"]})

    def describe_table(TableName):
        return {
            "Table": {
                "TableName": TableName,
                "CreationDateTime": CREATED,
                "TableSizeBytes": 1024 if TableName == "orders" else 0,
                "BillingModeSummary": {"BillingMode": "PAY_PER_REQUEST"},
            }
        }

    mock_client.describe_table.side_effect = describe_table
    yield mock_client


@pytest.fixture
def mock_kms_client():
    """KMS 클라이언트 모킹 (key-1, key-2)"""
    mock_client = MagicMock()
    paginated(
        mock_client,
        {"Keys": [{"KeyId": "key-1", "KeyArn": "arn:aws:kms:us-east-1:123456789012:key/key-1"}]},
        {"Keys": [{"KeyId": "key-2", "KeyArn": "arn:aws:kms:us-east-1:123456789012:key/key-2"}]},
    )

    def describe_key(KeyId):
        return {
            "KeyMetadata": {
                "KeyId": KeyId,
                "Arn": f"arn:aws:kms:us-east-1:123456789012:key/{KeyId}",
                "CreationDate": CREATED,
                "Description": f"{KeyId} description",
                "Enabled": True,
                "KeyState": "Enabled",
                "KeyManager": "CUSTOMER",
                "KeyUsage": "ENCRYPT_DECRYPT",
            }
        }

    mock_client.describe_key.side_effect = describe_key
    yield mock_client


@pytest.fixture
def mock_s3_client():
    """S3 클라이언트 모킹 (버킷 a, b - 모든 하위 호출 성공)"""
    mock_client = MagicMock()

    mock_client.list_buckets.return_value = {
        "Buckets": [
            {"Name": "a", "CreationDate": CREATED},
            {"Name": "b", "CreationDate": CREATED},
        ],
        "Owner": {"DisplayName": "test-owner", "ID": "12345"},
    }
    mock_client.get_bucket_location.return_value = {"LocationConstraint": "ap-northeast-2"}
    mock_client.get_bucket_versioning.return_value = {"Status": "Enabled"}
    mock_client.get_bucket_encryption.return_value = {
        "ServerSideEncryptionConfiguration": {
            "Rules": [{"ApplyServerSideEncryptionByDefault": {"SSEAlgorithm": "AES256"}}]
        }
    }
    mock_client.get_public_access_block.return_value = {
        "PublicAccessBlockConfiguration": {
            "BlockPublicAcls": True,
            "IgnorePublicAcls": True,
            "BlockPublicPolicy": True,
            "RestrictPublicBuckets": True,
        }
    }
    mock_client.get_bucket_tagging.return_value = {"TagSet": [{"Key": "env", "Value": "prod"}]}

    yield mock_client


@pytest.fixture
def mock_session(mock_dynamodb_client, mock_kms_client, mock_s3_client):
    """서비스 이름별 모킹 클라이언트를 돌려주는 boto3.Session 모킹"""
    clients = {
        "dynamodb": mock_dynamodb_client,
        "kms": mock_kms_client,
        "s3": mock_s3_client,
    }
    session = MagicMock()
    session.client.side_effect = lambda service_name, **kwargs: clients[service_name]
    session.region_name = "us-east-1"
    return session


@pytest.fixture
def aws_config():
    from core.config import AwsConfig

    return AwsConfig(region="us-east-1", max_workers=4)


@pytest.fixture
def make_engine(mock_session, aws_config):
    """모킹 세션을 쓰는 AggregationEngine 팩토리"""
    from core.data.inventory import AggregationEngine

    def factory(max_workers=None):
        config = aws_config
        if max_workers is not None:
            from core.config import AwsConfig

            config = AwsConfig(region=aws_config.region, max_workers=max_workers)
        return AggregationEngine(config, session_factory=lambda _config: mock_session)

    return factory
