"""MCP server that reports the current date and time."""

__version__ = "0.1.0"
