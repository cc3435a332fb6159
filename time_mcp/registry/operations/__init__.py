"""
Operation registrations for the time MCP server.
"""

from typing import Optional

from ...core.clock import Clock
from ..operation_registry import OperationRegistry
from .time_operations import (
    TimeOperations,
    build_time_operations,
    register_time_operations,
)


def register_all_operations(
    registry: Optional[OperationRegistry] = None,
    clock: Optional[Clock] = None
) -> OperationRegistry:
    """Register all operations."""
    return register_time_operations(registry, clock)


__all__ = [
    'register_all_operations',
    'register_time_operations',
    'build_time_operations',
    'TimeOperations',
]
