"""
cli/ui/console.py - Rich 콘솔 및 로깅 설정

MCP stdio 전송은 stdout을 사용하므로 모든 콘솔 출력과 로그는 stderr로 보냅니다.
"""

import logging
import platform

from rich.console import Console
from rich.logging import RichHandler

# botocore 노이즈 로그 제한
_NOISY_LOGGERS = (
    "botocore.httpchecksum",
    "botocore.credentials",
    "botocore.loaders",
    "botocore.session",
    "botocore.hooks",
    "botocore.endpoint",
    "botocore.parsers",
    "botocore.retryhandler",
    "urllib3.connectionpool",
)


def get_console() -> Console:
    """stderr로 출력하는 Rich Console 인스턴스를 생성하고 반환합니다."""
    is_windows = platform.system().lower() == "windows"

    return Console(
        stderr=True,
        color_system="auto",
        highlight=True,
        soft_wrap=True,
        markup=True,
        emoji=not is_windows,
    )


# 전역 콘솔 인스턴스
console = get_console()


def configure_logging(level: str = "INFO") -> logging.Logger:
    """루트 logger에 Rich 핸들러를 설정합니다.

    여러 번 호출해도 핸들러는 하나만 유지되고 레벨만 갱신됩니다.

    Args:
        level: 로그 레벨 이름 (DEBUG, INFO, WARNING, ERROR)

    Returns:
        logging.Logger: 설정된 루트 logger
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    if not any(getattr(h, "_inventory_handler", False) for h in root.handlers):
        handler = RichHandler(console=console, rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        handler._inventory_handler = True  # type: ignore[attr-defined]
        root.addHandler(handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return root
