"""Tests for tool invocation.

Tests cover:
- Unknown tool names
- Argument validation before any network access
- Successful extraction formatting
- Upstream failures reported as error results
"""

import json
from unittest.mock import AsyncMock

import pytest
from mcp import types

from agentql_mcp.client import AgentQLClient
from agentql_mcp.exceptions import (
    InvalidArgumentsError,
    MalformedResponseError,
    UnknownToolError,
    UpstreamError,
)
from agentql_mcp.tools.extract import ExtractRequest, ExtractWebDataTool, format_data
from agentql_mcp.tools.invoker import ToolInvoker, create_registry

from conftest import RecordingUpstream

VALID_ARGS = {"url": "https://example.com", "prompt": "the page title"}


def make_invoker(config, upstream: RecordingUpstream) -> ToolInvoker:
    client = AgentQLClient(config, transport=upstream.transport())
    return ToolInvoker(create_registry(client))


@pytest.mark.unit
class TestExtractWebDataTool:
    """Test the extract-web-data handler."""

    def test_validate_returns_request(self, config):
        tool = ExtractWebDataTool(AgentQLClient(config))
        request = tool.validate({"url": " https://example.com ", "prompt": "title"})
        assert request == ExtractRequest(url="https://example.com", prompt="title")

    def test_validate_coerces_to_string(self, config):
        tool = ExtractWebDataTool(AgentQLClient(config))
        request = tool.validate({"url": "https://example.com", "prompt": 42})
        assert request.prompt == "42"

    @pytest.mark.parametrize("arguments", [
        {},
        {"url": "https://example.com"},
        {"prompt": "title"},
        {"url": "", "prompt": "title"},
        {"url": "https://example.com", "prompt": ""},
        {"url": None, "prompt": "title"},
    ])
    def test_validate_rejects_missing_or_empty(self, config, arguments):
        tool = ExtractWebDataTool(AgentQLClient(config))
        with pytest.raises(InvalidArgumentsError, match="Both 'url' and 'prompt' are required"):
            tool.validate(arguments)

    @pytest.mark.asyncio
    async def test_execute_formats_data(self, config):
        client = AgentQLClient(config)
        client.query_data = AsyncMock(return_value={"products": [{"name": "Café"}]})
        tool = ExtractWebDataTool(client)

        content = await tool.execute(ExtractRequest(url="https://example.com", prompt="products"))

        client.query_data.assert_awaited_once_with("https://example.com", "products")
        assert len(content) == 1
        assert json.loads(content[0].text) == {"products": [{"name": "Café"}]}

    def test_format_data_is_pretty_printed(self):
        content = format_data({"title": "Example"})
        assert content[0].type == "text"
        assert content[0].text == '{\n  "title": "Example"\n}'


@pytest.mark.unit
class TestToolInvokerCall:
    """Test ToolInvoker.call, which raises typed errors."""

    @pytest.mark.asyncio
    async def test_unknown_tool(self, config, upstream):
        invoker = make_invoker(config, upstream)

        with pytest.raises(UnknownToolError) as exc_info:
            await invoker.call("query-data", VALID_ARGS)

        assert exc_info.value.tool_name == "query-data"
        assert "query-data" in str(exc_info.value)
        assert upstream.call_count == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("arguments", [
        None,
        {"url": "https://example.com"},
        {"prompt": "title"},
        {"url": "", "prompt": "title"},
        {"url": "https://example.com", "prompt": "   "},
    ])
    async def test_invalid_arguments_make_no_request(self, config, upstream, arguments):
        invoker = make_invoker(config, upstream)

        with pytest.raises(InvalidArgumentsError):
            await invoker.call("extract-web-data", arguments)

        assert upstream.call_count == 0

    @pytest.mark.asyncio
    async def test_success(self, config, upstream):
        invoker = make_invoker(config, upstream)

        content = await invoker.call("extract-web-data", VALID_ARGS)

        assert len(content) == 1
        assert content[0].type == "text"
        assert json.loads(content[0].text) == {"title": "Example"}
        assert upstream.call_count == 1
        assert upstream.last_json()["url"] == "https://example.com"
        assert upstream.last_json()["prompt"] == "the page title"

    @pytest.mark.asyncio
    async def test_upstream_error_is_not_retried(self, config):
        upstream = RecordingUpstream(status_code=503, text="maintenance")
        invoker = make_invoker(config, upstream)

        with pytest.raises(UpstreamError):
            await invoker.call("extract-web-data", VALID_ARGS)

        assert upstream.call_count == 1

    @pytest.mark.asyncio
    async def test_non_json_body_fails(self, config):
        upstream = RecordingUpstream(status_code=200, text="OK")
        invoker = make_invoker(config, upstream)

        with pytest.raises(MalformedResponseError):
            await invoker.call("extract-web-data", VALID_ARGS)


@pytest.mark.unit
class TestToolInvokerInvoke:
    """Test ToolInvoker.invoke, which reports failures as error results."""

    @pytest.mark.asyncio
    async def test_success_result(self, config, upstream):
        result = await make_invoker(config, upstream).invoke("extract-web-data", VALID_ARGS)

        assert isinstance(result, types.CallToolResult)
        assert result.isError is False
        assert len(result.content) == 1
        assert json.loads(result.content[0].text) == {"title": "Example"}

    @pytest.mark.asyncio
    async def test_unknown_tool_result(self, config, upstream):
        result = await make_invoker(config, upstream).invoke("query-data", VALID_ARGS)

        assert result.isError is True
        assert result.content[0].text == "Unknown tool: 'query-data'"
        assert upstream.call_count == 0

    @pytest.mark.asyncio
    async def test_invalid_arguments_result(self, config, upstream):
        result = await make_invoker(config, upstream).invoke("extract-web-data", {"url": "x"})

        assert result.isError is True
        assert "Both 'url' and 'prompt' are required" in result.content[0].text
        assert upstream.call_count == 0

    @pytest.mark.asyncio
    async def test_upstream_error_result(self, config):
        upstream = RecordingUpstream(status_code=500, text="server error")
        result = await make_invoker(config, upstream).invoke("extract-web-data", VALID_ARGS)

        assert result.isError is True
        text = result.content[0].text
        assert "Internal Server Error" in text
        assert "server error" in text

    @pytest.mark.asyncio
    async def test_non_json_body_result(self, config):
        upstream = RecordingUpstream(status_code=200, text="not json")
        result = await make_invoker(config, upstream).invoke("extract-web-data", VALID_ARGS)

        assert result.isError is True
        assert "not valid JSON" in result.content[0].text

    @pytest.mark.asyncio
    async def test_unexpected_exception_result(self, config, upstream):
        invoker = make_invoker(config, upstream)
        handler = invoker.registry.get_handler("extract-web-data")
        handler.client.query_data = AsyncMock(side_effect=KeyError("boom"))

        result = await invoker.invoke("extract-web-data", VALID_ARGS)

        assert result.isError is True
        assert result.content[0].text.startswith("Unexpected error occurred")
