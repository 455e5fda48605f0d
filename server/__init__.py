"""
server - MCP 도구 디스패치 계층

- handlers: 도구 명세(ToolSpec)와 도구 핸들러(ToolHandler)
- app: FastMCP 서버 생성 (create_server)
"""

from .app import create_server
from .handlers import TOOL_SPECS, ToolHandler, ToolSpec, build_handlers

__all__ = [
    "create_server",
    "TOOL_SPECS",
    "ToolHandler",
    "ToolSpec",
    "build_handlers",
]
