"""Main MCP server implementation for date/time tools."""

import asyncio
import logging
import signal
import sys
from typing import Any, Dict, Optional

from mcp import Tool
from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions
from mcp.types import CallToolResult

from .config.settings import get_setting
from .core.clock import Clock
from .registry.operation_registry import OperationRegistry
from .registry.operations import register_all_operations
from .tools.time_tools import TimeTools
from .utils.logging_config import configure_logging

logger = logging.getLogger(__name__)


class TimeMCPServer:
    """MCP Server exposing the time operation catalog."""

    def __init__(
        self,
        registry: Optional[OperationRegistry] = None,
        clock: Optional[Clock] = None
    ):
        """Initialize the MCP server and its operation catalog."""
        if registry is None:
            registry = register_all_operations(OperationRegistry(), clock)
        self.registry = registry
        self.time_tools = TimeTools(self.registry)

        self.server = Server(get_setting('server_name'))
        self._register_handlers()

    def _register_handlers(self):
        """Register all MCP handlers."""

        @self.server.list_tools()
        async def handle_list_tools() -> list[Tool]:
            """List all available tools."""
            return self.time_tools.get_tools()

        # Dispatch policy (defaults, error envelopes) lives in the registry
        @self.server.call_tool(validate_input=False)
        async def handle_call_tool(name: str, arguments: Dict[str, Any]) -> CallToolResult:
            """Route tool calls to the registry."""
            return await self.time_tools.handle_tool(name, arguments)

    def initialization_options(self) -> InitializationOptions:
        return InitializationOptions(
            server_name=get_setting('server_name'),
            server_version=get_setting('server_version'),
            capabilities=self.server.get_capabilities(
                notification_options=NotificationOptions(),
                experimental_capabilities={}
            )
        )

    async def run(self):
        """Run the MCP server on stdio until EOF or a termination signal."""
        from mcp.server.stdio import stdio_server

        self._install_signal_handlers(asyncio.current_task())

        try:
            async with stdio_server() as (read_stream, write_stream):
                logger.info("Time MCP server running on stdio")
                await self.server.run(
                    read_stream,
                    write_stream,
                    self.initialization_options()
                )
        except asyncio.CancelledError:
            # stdio_server has closed the transport by the time we get here
            logger.info("Shutting down: transport closed")

    def _install_signal_handlers(self, task: Optional[asyncio.Task]) -> None:
        """Cancel the serving task on SIGINT/SIGTERM so the transport is closed."""
        if task is None:
            return
        loop = asyncio.get_running_loop()
        for sig in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(sig, self._on_signal, sig, task)
            except (NotImplementedError, RuntimeError):
                # Not supported on this platform/loop; KeyboardInterrupt still applies
                logger.debug(f"Signal handler for {sig.name} not installed")

    @staticmethod
    def _on_signal(sig: signal.Signals, task: asyncio.Task) -> None:
        logger.info(f"Received {sig.name}, closing transport")
        task.cancel()


def main():
    """Main entry point for the MCP server."""
    configure_logging()
    try:
        server = TimeMCPServer()
        asyncio.run(server.run())
    except KeyboardInterrupt:
        logger.info("Interrupted")
    except Exception:
        logger.exception("Fatal error in time MCP server")
        sys.exit(1)


if __name__ == "__main__":
    main()
