"""MCP tool surface for the time operations."""

import logging
from typing import Any, Dict, List, Optional

from mcp import Tool
from mcp.types import CallToolResult, TextContent

from ..registry.operation_registry import OperationRegistry
from ..utils.response import ResponseEnvelope, is_success

logger = logging.getLogger(__name__)


class TimeTools:
    """Exposes registry operations as MCP tools."""

    def __init__(self, registry: OperationRegistry):
        self.registry = registry

    def get_tools(self) -> List[Tool]:
        """Return tool definitions in catalog order."""
        return [
            Tool(
                name=op.name,
                description=op.description,
                inputSchema=op.input_schema,
            )
            for op in self.registry.list()
        ]

    async def handle_tool(self, name: str, arguments: Optional[Dict[str, Any]]) -> CallToolResult:
        """Route a tool call through the dispatcher."""
        logger.debug(f"Tool call: {name} {arguments}")
        envelope = self.registry.invoke(name, arguments)
        if not is_success(envelope):
            logger.info(f"Tool {name} failed: {envelope.text}")
        return to_call_tool_result(envelope)


def to_call_tool_result(envelope: ResponseEnvelope) -> CallToolResult:
    """Convert an envelope into the SDK's tools/call result."""
    return CallToolResult(
        content=[TextContent(type="text", text=item.text) for item in envelope.content],
        isError=envelope.is_error,
    )
