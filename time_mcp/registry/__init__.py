"""
Operation Registry for the time MCP server.

Provides the ordered operation catalog and the dispatcher around it.
"""

from .operation_registry import (
    OperationRegistry,
    OperationDescriptor,
    ParameterSpec,
    # Exceptions
    OperationNotFound,
    OperationRegistryError,
    OperationAlreadyRegistered,
    InvalidOperationDescriptor,
    # Singleton
    get_operation_registry,
    reset_operation_registry,
)

__all__ = [
    'OperationRegistry',
    'OperationDescriptor',
    'ParameterSpec',
    # Exceptions
    'OperationNotFound',
    'OperationRegistryError',
    'OperationAlreadyRegistered',
    'InvalidOperationDescriptor',
    # Singleton
    'get_operation_registry',
    'reset_operation_registry',
]
