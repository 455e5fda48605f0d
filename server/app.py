"""
server/app.py - FastMCP 도구 서버

네 개의 인벤토리 도구를 등록한 FastMCP 인스턴스를 생성합니다.
stdio 전송을 사용하므로 stdout에는 MCP 메시지만 나가야 합니다 (로그는 stderr).

Usage:
    from core.config import AwsConfig
    from server.app import create_server

    mcp = create_server(AwsConfig.from_env())
    mcp.run()
"""

from __future__ import annotations

import logging

from anyio import to_thread
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from core.config import AwsConfig, get_version, settings
from core.data.inventory import AggregationEngine
from core.exceptions import ToolExecutionError, format_error_for_user

from .handlers import ToolHandler, build_handlers

logger = logging.getLogger(__name__)


def _register(mcp: FastMCP, handler: ToolHandler) -> None:
    """핸들러를 인자 없는 MCP 도구로 등록

    도메인 예외(ToolExecutionError)는 FastMCP ToolError로 변환되어
    실패 응답(isError)으로 에이전트에 전달됩니다.
    """

    async def tool() -> str:
        # 집계는 블로킹 호출이므로 워커 스레드에서 실행 (이벤트 루프 점유 방지)
        try:
            return await to_thread.run_sync(handler)
        except ToolExecutionError as e:
            raise ToolError(format_error_for_user(e)) from e

    tool.__name__ = handler.name.replace("-", "_")
    mcp.tool(tool, name=handler.spec.name, description=handler.spec.description)


def create_server(config: AwsConfig, engine: AggregationEngine | None = None) -> FastMCP:
    """도구 서버 생성

    Args:
        config: AWS 접속 설정 (기동 시 한 번 생성)
        engine: 집계 엔진 (테스트에서 주입, None이면 config로 생성)

    Returns:
        도구가 등록된 FastMCP 인스턴스
    """
    engine = engine or AggregationEngine(config)
    mcp = FastMCP(settings.SERVER_NAME, version=get_version())

    handlers = build_handlers(engine)
    for handler in handlers:
        _register(mcp, handler)

    logger.info(
        f"{settings.SERVER_NAME} 준비: 도구 {len(handlers)}개, "
        f"region={config.region}, max_workers={config.max_workers}"
    )
    return mcp
