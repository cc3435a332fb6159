"""
Runtime settings for the time MCP server.

Settings cover process-level concerns only (logging, server identity). They
never change how an operation formats its output.

Usage:
    from time_mcp.config.settings import get_setting

    level = get_setting('log_level')

Environment Variables:
    TIME_MCP_LOG_LEVEL=DEBUG|INFO|WARNING|ERROR - Diagnostic log level (default INFO)
    TIME_MCP_LOG_FORMAT=<logging format>        - Override the log line format
"""

import os
from typing import Any, Dict


SERVER_NAME = "time-server"
SERVER_VERSION = "0.1.0"

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


# Settings with environment variable overrides
SETTINGS: Dict[str, Any] = {
    'log_level': os.getenv('TIME_MCP_LOG_LEVEL', 'INFO').upper(),
    'log_format': os.getenv('TIME_MCP_LOG_FORMAT', DEFAULT_LOG_FORMAT),
    'server_name': SERVER_NAME,
    'server_version': SERVER_VERSION,
}


def get_setting(name: str) -> Any:
    """
    Look up a setting by name.

    Args:
        name: Setting name (e.g., 'log_level')

    Returns:
        Current value of the setting

    Raises:
        KeyError: If setting name is not recognized

    Example:
        >>> get_setting('server_name')
        'time-server'
    """
    if name not in SETTINGS:
        available = ', '.join(SETTINGS.keys())
        raise KeyError(
            f"Unknown setting: '{name}'. "
            f"Available settings: {available}"
        )

    return SETTINGS[name]


def get_all_settings() -> Dict[str, Any]:
    """Get a copy of all settings and their current values."""
    return SETTINGS.copy()


def set_setting(name: str, value: Any) -> None:
    """
    Programmatically override a setting (for testing only).

    Warning:
        In production, use environment variables.
    """
    if name not in SETTINGS:
        available = ', '.join(SETTINGS.keys())
        raise KeyError(
            f"Unknown setting: '{name}'. "
            f"Available settings: {available}"
        )

    SETTINGS[name] = value
