"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 서버 기동 명령입니다. 설정을 한 번 만들어 FastMCP 서버에 주입하고
stdio 전송으로 실행합니다.

명령어 구조:
    aws-inventory-mcp                       # 기본 리전(us-east-1)으로 서버 실행
    aws-inventory-mcp -r eu-west-1          # 대상 리전 지정
    aws-inventory-mcp -p my-profile         # AWS 프로파일 지정
    aws-inventory-mcp -w 20                 # 상세 조회 동시 스레드 수
    aws-inventory-mcp --log-level DEBUG     # 로그 레벨 (stderr)
    aws-inventory-mcp --version             # 버전 표시

Usage:
    # 모듈로 실행
    $ python -m cli.app
"""

import logging

import click

from cli.ui import configure_logging
from core.config import LOG_LEVELS, AwsConfig, get_log_level, get_version, settings
from core.exceptions import ConfigError

logger = logging.getLogger(__name__)


@click.command(name="aws-inventory-mcp")
@click.option("-r", "--region", default=None, help=f"대상 AWS 리전 (기본: {settings.DEFAULT_REGION})")
@click.option("-p", "--profile", default=None, help="AWS 프로파일 (기본: 자격 증명 체인)")
@click.option("-w", "--max-workers", type=int, default=None, help=f"상세 조회 동시 스레드 수 (기본: {settings.MAX_WORKERS})")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="로그 레벨 (stderr 출력)",
)
@click.version_option(version=get_version(), prog_name="aws-inventory-mcp")
def cli(region: str | None, profile: str | None, max_workers: int | None, log_level: str | None) -> None:
    """AWS 인벤토리 MCP 서버 (stdio)"""
    configure_logging(log_level or get_log_level())

    try:
        config = AwsConfig.from_env(region=region, profile=profile, max_workers=max_workers)
    except ConfigError as e:
        raise click.BadParameter(str(e)) from e

    # 순환 import 방지 및 --help/--version 시 FastMCP 로드 생략
    from server.app import create_server

    mcp = create_server(config)
    logger.info(f"stdio 서버 시작 (v{get_version()})")
    mcp.run()


if __name__ == "__main__":
    cli()
