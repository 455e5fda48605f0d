# cli/ui - 콘솔 출력 (rich)
"""
콘솔/로깅 유틸리티

MCP 서버는 stdout을 프로토콜 전송에 사용하므로 출력은 모두 stderr로 보냅니다.
"""

from .console import configure_logging, console, get_console

__all__ = [
    "configure_logging",
    "console",
    "get_console",
]
