"""
tests/test_parallel_errors.py - core/parallel/errors.py 테스트
"""

import threading

from botocore.exceptions import ClientError, EndpointConnectionError, NoCredentialsError, ReadTimeoutError

from core.exceptions import ProviderError
from core.parallel.errors import (
    CollectedError,
    ErrorCollector,
    ErrorSeverity,
    categorize_error,
    categorize_error_code,
)
from core.parallel.types import ErrorCategory


def _client_error(code, message="msg"):
    return ClientError({"Error": {"Code": code, "Message": message}}, "Op")


class TestCategorizeErrorCode:
    """에러 코드 분류 테스트"""

    def test_access_denied(self):
        assert categorize_error_code("AccessDenied") == ErrorCategory.ACCESS_DENIED
        assert categorize_error_code("AccessDeniedException") == ErrorCategory.ACCESS_DENIED
        assert categorize_error_code("UnauthorizedOperation") == ErrorCategory.ACCESS_DENIED

    def test_not_found(self):
        assert categorize_error_code("NoSuchTagSet") == ErrorCategory.NOT_FOUND
        assert categorize_error_code("ResourceNotFoundException") == ErrorCategory.NOT_FOUND
        assert categorize_error_code("NoSuchPublicAccessBlockConfiguration") == ErrorCategory.NOT_FOUND

    def test_throttling(self):
        assert categorize_error_code("ThrottlingException") == ErrorCategory.THROTTLING
        assert categorize_error_code("TooManyRequestsException") == ErrorCategory.THROTTLING

    def test_service_error(self):
        assert categorize_error_code("InternalError") == ErrorCategory.SERVICE_ERROR
        assert categorize_error_code("ServiceUnavailable") == ErrorCategory.SERVICE_ERROR

    def test_unknown(self):
        assert categorize_error_code("SomethingElse") == ErrorCategory.UNKNOWN


class TestCategorizeError:
    """예외 분류 테스트"""

    def test_botocore_types(self):
        assert categorize_error(ReadTimeoutError(endpoint_url="https://s3")) == ErrorCategory.TIMEOUT
        assert categorize_error(EndpointConnectionError(endpoint_url="https://s3")) == ErrorCategory.NETWORK
        assert categorize_error(NoCredentialsError()) == ErrorCategory.ACCESS_DENIED

    def test_client_error(self):
        assert categorize_error(_client_error("NoSuchTagSet")) == ErrorCategory.NOT_FOUND

    def test_provider_error(self):
        error = ProviderError("kms", "describe_key", error_code="AccessDeniedException")
        assert categorize_error(error) == ErrorCategory.ACCESS_DENIED


class TestCollectedError:
    def test_str_and_fields(self):
        collector = ErrorCollector("s3")
        collected = collector.collect(_client_error("AccessDenied", "no"), "get_bucket_tagging", "a")

        assert isinstance(collected, CollectedError)
        assert str(collected) == "[INFO] s3.get_bucket_tagging (a): AccessDenied"
        assert collected.error_message == "no"
        assert collected.category == ErrorCategory.ACCESS_DENIED
        assert collected.resource_id == "a"


class TestErrorCollector:
    """ErrorCollector 테스트"""

    def test_default_severity_by_category(self):
        collector = ErrorCollector("s3")

        assert collector.collect(_client_error("NoSuchTagSet"), "op", "a").severity == ErrorSeverity.DEBUG
        assert collector.collect(_client_error("AccessDenied"), "op", "a").severity == ErrorSeverity.INFO
        assert collector.collect(_client_error("InternalError"), "op", "a").severity == ErrorSeverity.WARNING

    def test_explicit_severity(self):
        collector = ErrorCollector("s3")

        collected = collector.collect(RuntimeError("x"), "op", severity=ErrorSeverity.CRITICAL)

        assert collected.severity == ErrorSeverity.CRITICAL
        assert collected.error_code == "RuntimeError"

    def test_empty(self):
        collector = ErrorCollector("kms")

        assert not collector.has_errors
        assert collector.errors == []
        assert collector.get_summary() == "에러 없음"

    def test_summary(self):
        collector = ErrorCollector("s3")
        collector.collect(_client_error("NoSuchTagSet"), "get_bucket_tagging", "a")
        collector.collect(_client_error("InternalError"), "get_bucket_location", "a")
        collector.collect(_client_error("InternalError"), "get_bucket_location", "b")

        assert collector.has_errors
        assert collector.get_summary() == "에러 3건 (debug: 1건, warning: 2건)"

    def test_errors_returns_copy(self):
        collector = ErrorCollector("s3")
        collector.collect(RuntimeError("x"), "op")

        collector.errors.clear()

        assert len(collector.errors) == 1

    def test_thread_safe(self):
        collector = ErrorCollector("s3")

        def worker(n):
            for i in range(50):
                collector.collect(_client_error("InternalError"), "op", f"{n}-{i}")

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(collector.errors) == 400
