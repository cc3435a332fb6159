"""Tests for the MCP tool surface."""

from datetime import datetime, timezone

import pytest
from mcp import Tool
from mcp.types import CallToolResult

from time_mcp.registry import OperationRegistry
from time_mcp.registry.operations import register_all_operations
from time_mcp.tools.time_tools import TimeTools, to_call_tool_result
from time_mcp.utils.response import error_response, success_response


FIXED = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)


@pytest.fixture
def time_tools():
    """TimeTools over a fixed-clock registry."""
    registry = register_all_operations(OperationRegistry(), clock=lambda: FIXED)
    return TimeTools(registry)


def test_get_tools_returns_mcp_tools(time_tools):
    """Test that the catalog converts to mcp Tool objects."""
    tools = time_tools.get_tools()

    assert all(isinstance(t, Tool) for t in tools)
    assert [t.name for t in tools] == ["get_current_time", "get_time_info"]
    assert tools[0].inputSchema["properties"]["format"]["enum"] == ["12hour", "24hour", "iso"]
    assert tools[1].inputSchema["additionalProperties"] is False


@pytest.mark.asyncio
async def test_handle_tool_success(time_tools):
    """Test a successful call returns one text item without isError."""
    result = await time_tools.handle_tool("get_current_time", {"format": "iso"})

    assert isinstance(result, CallToolResult)
    assert result.isError is False
    assert len(result.content) == 1
    assert result.content[0].type == "text"
    assert result.content[0].text == "Current time: 2024-01-15T10:30:00.000Z"


@pytest.mark.asyncio
async def test_handle_tool_unknown(time_tools):
    """Test that an unknown tool returns an error result."""
    result = await time_tools.handle_tool("nonexistent_op", {})

    assert result.isError is True
    assert result.content[0].text == "Error: Unknown tool: nonexistent_op"


@pytest.mark.asyncio
async def test_handle_tool_without_arguments(time_tools):
    """Test that a call with no arguments uses defaults."""
    result = await time_tools.handle_tool("get_time_info", None)

    assert result.isError is False
    assert '"timestamp": 1705314600000' in result.content[0].text


@pytest.mark.asyncio
async def test_handle_tool_invalid_timezone(time_tools):
    """Test that an invalid zone returns an error result."""
    result = await time_tools.handle_tool("get_current_time", {"timezone": "Not/ARealZone"})

    assert result.isError is True
    assert result.content[0].text.startswith("Error: ")


def test_envelope_conversion():
    """Test envelope to CallToolResult conversion."""
    ok = to_call_tool_result(success_response("fine"))
    failed = to_call_tool_result(error_response("broken"))

    assert (ok.isError, ok.content[0].text) == (False, "fine")
    assert (failed.isError, failed.content[0].text) == (True, "Error: broken")
