"""
core/parallel/executor.py - 하위 작업 fan-out 실행기

목록 조회 이후의 상세 조회(enrich) 호출들을 스레드 풀로 병렬 실행하고,
모든 작업이 끝날 때까지 기다린 뒤(join) 제출 순서대로 결과를 돌려줍니다.
개별 작업의 예외는 TaskResult로 격리되며 다른 작업에 영향을 주지 않습니다.

주요 구성 요소:
- ParallelConfig: 병렬 실행 설정 (워커 수)
- SubTask: 실행할 하위 작업 명세
- FanOutExecutor: fan-out/fan-in 실행기

Example:
    from core.parallel import FanOutExecutor, ParallelConfig, SubTask

    tasks = [
        SubTask(name, "get_bucket_tagging", lambda n=name: s3.get_bucket_tagging(Bucket=n))
        for name in bucket_names
    ]
    results = FanOutExecutor(ParallelConfig(max_workers=10)).run(tasks)
    tagged = [r.identifier for r in results if r.success]
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Generic, TypeVar

from core.config import settings

from .types import TaskResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _clear_exception_chain(e: BaseException) -> None:
    """traceback + chained exception 메모리 누수 방지"""
    e.__traceback__ = None
    if e.__context__ is not None:
        e.__context__.__traceback__ = None
    if e.__cause__ is not None:
        e.__cause__.__traceback__ = None


@dataclass
class ParallelConfig:
    """병렬 실행 설정

    Attributes:
        max_workers: 최대 동시 스레드 수 (1이면 순차 실행)
    """

    max_workers: int = settings.MAX_WORKERS

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
        if self.max_workers > settings.MAX_WORKERS_LIMIT:
            self.max_workers = settings.MAX_WORKERS_LIMIT


@dataclass(frozen=True)
class SubTask(Generic[T]):
    """하위 작업 명세

    Attributes:
        identifier: 대상 리소스 식별자
        operation: 작업 이름 (로깅/진단용)
        func: 인자 없는 실행 함수
    """

    identifier: str
    operation: str
    func: Callable[[], T]


class FanOutExecutor:
    """fan-out/fan-in 실행기

    특징:
    - ThreadPoolExecutor 기반 병렬 처리
    - 모든 작업 완료 후 반환 (명시적 join)
    - 결과 순서 = 제출 순서 (완료 순서와 무관)
    - 작업별 예외 격리

    Example:
        executor = FanOutExecutor(ParallelConfig(max_workers=10))
        results = executor.run(tasks)
    """

    def __init__(self, config: ParallelConfig | None = None):
        self.config = config or ParallelConfig()

    def run(self, tasks: Sequence[SubTask[T]]) -> list[TaskResult[T]]:
        """하위 작업 전체 실행

        Args:
            tasks: 실행할 작업 목록

        Returns:
            작업별 TaskResult 목록 (tasks와 같은 순서, 같은 길이)
        """
        if not tasks:
            return []

        start_time = time.monotonic()

        if self.config.max_workers == 1 or len(tasks) == 1:
            results = [self._execute_single(task) for task in tasks]
        else:
            workers = min(self.config.max_workers, len(tasks))
            with ThreadPoolExecutor(max_workers=workers) as executor:
                futures = [executor.submit(self._execute_single, task) for task in tasks]
                # with 블록 종료 시 모든 작업 완료 대기 (join)
            results = [future.result() for future in futures]

        failed = sum(1 for r in results if not r.success)
        logger.debug(
            f"하위 작업 완료: {len(results)}개 (실패 {failed}), "
            f"max_workers={self.config.max_workers}, {(time.monotonic() - start_time) * 1000:.0f}ms"
        )
        return results

    def _execute_single(self, task: SubTask[T]) -> TaskResult[T]:
        """단일 작업 실행 (워커 스레드 내에서 호출)

        예외를 밖으로 던지지 않고 실패 TaskResult로 변환합니다.
        """
        start_time = time.monotonic()
        try:
            data = task.func()
        except Exception as e:
            _clear_exception_chain(e)
            return TaskResult(
                identifier=task.identifier,
                operation=task.operation,
                success=False,
                error=e,
                duration_ms=(time.monotonic() - start_time) * 1000,
            )

        return TaskResult(
            identifier=task.identifier,
            operation=task.operation,
            success=True,
            data=data,
            duration_ms=(time.monotonic() - start_time) * 1000,
        )
