"""Tests for MCP server wiring and process lifecycle."""

import asyncio
import logging
import signal
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import mcp.server.stdio
import pytest
from mcp import types

from time_mcp import server as server_module
from time_mcp.registry import OperationRegistry
from time_mcp.server import TimeMCPServer


FIXED = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)


@pytest.fixture
def server():
    """Server over a fixed-clock registry."""
    return TimeMCPServer(clock=lambda: FIXED)


def test_handlers_registered(server):
    """Test that tools/list and tools/call handlers are registered."""
    assert types.ListToolsRequest in server.server.request_handlers
    assert types.CallToolRequest in server.server.request_handlers


def test_sdk_provides_decorator_handlers():
    """Test that the installed mcp release still has the handler decorators."""
    from importlib.metadata import version
    from mcp.server import Server

    assert int(version("mcp").split(".")[0]) == 1
    assert callable(getattr(Server, "list_tools", None))
    assert callable(getattr(Server, "call_tool", None))


def test_uses_own_registry_per_instance():
    """Test that each server builds its own populated registry."""
    first, second = TimeMCPServer(), TimeMCPServer()

    assert first.registry is not second.registry
    assert len(first.registry) == 2


def test_accepts_prebuilt_registry():
    """Test that a supplied registry is used as-is."""
    registry = OperationRegistry()
    assert TimeMCPServer(registry=registry).registry is registry


def test_initialization_options(server):
    """Test server identity and tool capability in initialization options."""
    options = server.initialization_options()

    assert options.server_name == "time-server"
    assert options.server_version == "0.1.0"
    assert options.capabilities.tools is not None


@pytest.mark.asyncio
async def test_list_tools_request(server):
    """Test the tools/list request handler returns the catalog."""
    handler = server.server.request_handlers[types.ListToolsRequest]
    result = await handler(types.ListToolsRequest(method="tools/list"))

    assert [t.name for t in result.root.tools] == ["get_current_time", "get_time_info"]


@pytest.mark.asyncio
async def test_signal_cancels_serving_task():
    """Test that the signal callback cancels the serving task."""
    task = asyncio.get_running_loop().create_task(asyncio.sleep(10))

    TimeMCPServer._on_signal(signal.SIGTERM, task)

    with pytest.raises(asyncio.CancelledError):
        await task


@pytest.mark.asyncio
@pytest.mark.parametrize("sig", [signal.SIGINT, signal.SIGTERM])
async def test_signal_closes_transport_and_returns(server, monkeypatch, sig):
    """Test that a termination signal closes stdio and run() returns cleanly."""
    closed = []
    started = asyncio.Event()
    installed = {}

    @asynccontextmanager
    async def fake_stdio_server():
        try:
            yield ("read-stream", "write-stream")
        finally:
            closed.append(True)

    async def serve_forever(read_stream, write_stream, options):
        started.set()
        await asyncio.Event().wait()

    loop = asyncio.get_running_loop()
    monkeypatch.setattr(
        loop, "add_signal_handler",
        lambda s, callback, *args: installed.__setitem__(s, (callback, args)),
    )
    monkeypatch.setattr(mcp.server.stdio, "stdio_server", fake_stdio_server)
    monkeypatch.setattr(server.server, "run", serve_forever)

    task = asyncio.create_task(server.run())
    await started.wait()

    callback, args = installed[sig]
    callback(*args)

    assert await task is None
    assert closed == [True]


def test_startup_failure_logs_and_exits_nonzero(monkeypatch, caplog):
    """Test that a failure while starting is logged and exits with status 1."""
    async def broken_run(self):
        raise RuntimeError("transport cannot attach")

    monkeypatch.setattr(server_module, "configure_logging", lambda: None)
    monkeypatch.setattr(TimeMCPServer, "run", broken_run)

    with caplog.at_level(logging.ERROR, logger="time_mcp.server"):
        with pytest.raises(SystemExit) as exc_info:
            server_module.main()

    assert exc_info.value.code == 1
    assert "Fatal error in time MCP server" in caplog.text
    assert "transport cannot attach" in caplog.text


def test_clean_shutdown_does_not_exit_nonzero(monkeypatch):
    """Test that main() returns normally when the server stops cleanly."""
    async def quiet_run(self):
        return None

    monkeypatch.setattr(server_module, "configure_logging", lambda: None)
    monkeypatch.setattr(TimeMCPServer, "run", quiet_run)

    assert server_module.main() is None
