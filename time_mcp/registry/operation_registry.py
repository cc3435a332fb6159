"""
Operation Registry - catalog and dispatcher for time operations.

Provides:
- Immutable operation descriptors with per-parameter schemas
- Stable-order listing for tools/list
- Dispatch with default resolution and uniform error envelopes
- JSON Schema generation for MCP tool definitions
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from ..utils.response import ResponseEnvelope, error_response, success_response

logger = logging.getLogger(__name__)

# Type aliases
JSONSchema = Dict[str, Any]
Handler = Callable[..., str]


# ============================================================================
# Data Classes
# ============================================================================

@dataclass(frozen=True)
class ParameterSpec:
    """Describes one string parameter of an operation."""
    name: str
    description: str
    kind: str = "string"
    allowed_values: Optional[Tuple[str, ...]] = None
    default: Optional[str] = None

    def resolve(self, arguments: Mapping[str, Any]) -> Any:
        """Value from the argument bag; missing or falsy falls back to the default."""
        return arguments.get(self.name) or self.default

    def to_schema(self) -> JSONSchema:
        schema: JSONSchema = {
            "type": self.kind,
            "description": self.description,
        }
        if self.allowed_values is not None:
            schema["enum"] = list(self.allowed_values)
        if self.default is not None:
            schema["default"] = self.default
        return schema


@dataclass(frozen=True)
class OperationDescriptor:
    """
    Describes an invocable operation.

    The handler is called with one keyword argument per declared parameter
    and returns the result text.
    """
    name: str                                   # Operation identifier (e.g., "get_time_info")
    description: str                            # Human-readable description
    handler: Handler
    parameters: Tuple[ParameterSpec, ...] = field(default_factory=tuple)

    @property
    def input_schema(self) -> JSONSchema:
        """JSON Schema for the operation's arguments."""
        return {
            "type": "object",
            "properties": {p.name: p.to_schema() for p in self.parameters},
            "additionalProperties": False,
        }

    def resolve_arguments(self, arguments: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """Map the loosely-typed argument bag onto declared parameters."""
        arguments = arguments or {}
        return {p.name: p.resolve(arguments) for p in self.parameters}

    def to_dict(self) -> Dict[str, Any]:
        """Serialize as a tools/list entry."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


# ============================================================================
# Exceptions
# ============================================================================

class OperationRegistryError(Exception):
    """Base exception for registry errors."""
    pass


class OperationNotFound(OperationRegistryError):
    """Operation not found in registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class OperationAlreadyRegistered(OperationRegistryError):
    """Operation already registered."""
    pass


class InvalidOperationDescriptor(OperationRegistryError):
    """Invalid operation descriptor."""
    pass


# ============================================================================
# Operation Registry
# ============================================================================

class OperationRegistry:
    """
    Ordered catalog of operations plus the dispatch policy around them.

    ``invoke`` never raises: every outcome is a ResponseEnvelope.
    """

    def __init__(self, log: Optional[logging.Logger] = None):
        """Initialize registry.

        Args:
            log: Logger for dispatch diagnostics (default: module logger)
        """
        self._operations: Dict[str, OperationDescriptor] = {}
        self._log = log or logger

    # ========================================================================
    # Registration
    # ========================================================================

    def register(self, operation: OperationDescriptor) -> None:
        """
        Register a new operation.

        Raises:
            OperationAlreadyRegistered: If operation name already exists
            InvalidOperationDescriptor: If descriptor validation fails
        """
        self._validate_descriptor(operation)

        if self.exists(operation.name):
            raise OperationAlreadyRegistered(
                f"Operation '{operation.name}' already registered"
            )

        self._operations[operation.name] = operation
        self._log.debug(f"Registered operation: {operation.name}")

    def register_all(self, operations: List[OperationDescriptor]) -> None:
        """Register multiple operations at once."""
        for operation in operations:
            self.register(operation)

    # ========================================================================
    # Retrieval
    # ========================================================================

    def get(self, name: str) -> OperationDescriptor:
        """
        Retrieve an operation by name.

        Raises:
            OperationNotFound: If operation doesn't exist
        """
        if name not in self._operations:
            raise OperationNotFound(name)

        return self._operations[name]

    def list(self) -> List[OperationDescriptor]:
        """All operations in registration order."""
        return list(self._operations.values())

    def exists(self, name: str) -> bool:
        """Check if operation exists."""
        return name in self._operations

    def __len__(self) -> int:
        return len(self._operations)

    # ========================================================================
    # Execution
    # ========================================================================

    def invoke(
        self,
        operation_name: str,
        arguments: Optional[Mapping[str, Any]] = None
    ) -> ResponseEnvelope:
        """
        Execute an operation and wrap the outcome.

        Args:
            operation_name: Name of operation to execute
            arguments: Caller-supplied argument bag (may be None)

        Returns:
            Success envelope with the handler's text, or an error envelope
            with text ``Error: {message}``
        """
        try:
            operation = self.get(operation_name)
        except OperationNotFound as e:
            self._log.warning(str(e))
            return error_response(str(e))

        params = operation.resolve_arguments(arguments)

        try:
            text = operation.handler(**params)
        except Exception as e:
            self._log.error(f"Error executing tool {operation_name}: {e}")
            return error_response(str(e))

        return success_response(text)

    # ========================================================================
    # Schema Generation
    # ========================================================================

    def to_tool_list(self) -> List[Dict[str, Any]]:
        """Catalog as the ``tools`` array of a tools/list response."""
        return [op.to_dict() for op in self._operations.values()]

    # ========================================================================
    # Internal Helpers
    # ========================================================================

    def _validate_descriptor(self, operation: OperationDescriptor) -> None:
        """
        Validate operation descriptor.

        Raises:
            InvalidOperationDescriptor: If validation fails
        """
        if not operation.name:
            raise InvalidOperationDescriptor("Operation name is required")

        if not operation.description:
            raise InvalidOperationDescriptor("Operation description is required")

        if not callable(operation.handler):
            raise InvalidOperationDescriptor("Operation handler is required")

        names = [p.name for p in operation.parameters]
        if len(names) != len(set(names)):
            raise InvalidOperationDescriptor(
                f"Duplicate parameter names in operation '{operation.name}'"
            )

        for param in operation.parameters:
            if (
                param.allowed_values is not None
                and param.default is not None
                and param.default not in param.allowed_values
            ):
                raise InvalidOperationDescriptor(
                    f"Default '{param.default}' of parameter '{param.name}' "
                    f"is not one of {list(param.allowed_values)}"
                )


# ============================================================================
# Singleton
# ============================================================================

_registry_instance: Optional[OperationRegistry] = None


def get_operation_registry() -> OperationRegistry:
    """
    Get singleton instance of operation registry.

    Returns:
        OperationRegistry singleton
    """
    global _registry_instance

    if _registry_instance is None:
        _registry_instance = OperationRegistry()

    return _registry_instance


def reset_operation_registry() -> None:
    """Reset singleton (for testing)."""
    global _registry_instance
    _registry_instance = None
