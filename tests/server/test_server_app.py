"""
tests/server/test_server_app.py - FastMCP 서버 등록/호출 테스트

fastmcp 인메모리 Client로 실제 MCP 요청 경로를 통과시킵니다.
"""

import asyncio
import json
import time
from unittest.mock import MagicMock

import pytest
from fastmcp import Client
from fastmcp.exceptions import ToolError

from core.config import settings
from core.data.inventory import AggregationResult
from server.app import create_server


def _call(mcp, tool_name):
    async def run():
        async with Client(mcp) as client:
            return await client.call_tool(tool_name, {})

    return asyncio.run(run())


def _list_tools(mcp):
    async def run():
        async with Client(mcp) as client:
            return await client.list_tools()

    return asyncio.run(run())


@pytest.fixture
def server(make_engine, aws_config):
    return create_server(aws_config, engine=make_engine())


class TestCreateServer:
    def test_server_name(self, server):
        assert server.name == settings.SERVER_NAME

    def test_registers_four_tools_without_arguments(self, server):
        tools = {t.name: t for t in _list_tools(server)}

        assert set(tools) == {
            "list-dynamodb-tables",
            "get-dynamodb-table-metadata",
            "list-kms-keys",
            "list-s3-buckets",
        }
        for tool in tools.values():
            assert not tool.inputSchema.get("properties")
        assert tools["list-dynamodb-tables"].description == "List all DynamoDB tables"


class TestToolCalls:
    def test_list_dynamodb_tables(self, server):
        result = _call(server, "list-dynamodb-tables")

        assert json.loads(result.content[0].text) == ["orders", "users"]

    def test_list_s3_buckets(self, server):
        result = _call(server, "list-s3-buckets")

        payload = json.loads(result.content[0].text)
        assert [b["Name"] for b in payload] == ["a", "b"]
        assert payload[0]["Region"] == "ap-northeast-2"

    def test_fatal_failure_is_tool_error(self, server, mock_kms_client, client_error):
        mock_kms_client.get_paginator.return_value.paginate.side_effect = client_error(
            "AccessDeniedException", "ListKeys"
        )

        with pytest.raises(ToolError) as exc_info:
            _call(server, "list-kms-keys")

        assert "list-kms-keys" in str(exc_info.value)


class TestConcurrentCalls:
    """도구 호출이 이벤트 루프를 점유하지 않는지 확인"""

    def test_two_slow_calls_overlap(self, aws_config):
        def slow_aggregate(kind):
            time.sleep(1)
            return AggregationResult(kind=kind)

        engine = MagicMock()
        engine.aggregate.side_effect = slow_aggregate
        mcp = create_server(aws_config, engine=engine)

        async def run():
            async with Client(mcp) as client:
                return await asyncio.gather(
                    client.call_tool("list-s3-buckets", {}),
                    client.call_tool("list-kms-keys", {}),
                )

        start = time.monotonic()
        results = asyncio.run(run())
        elapsed = time.monotonic() - start

        assert [r.content[0].text for r in results] == ["[]", "[]"]
        assert elapsed < 1.5
