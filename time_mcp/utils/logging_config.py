"""Diagnostic logging setup.

Log lines go to stderr. Stdout carries the MCP stream and must stay clean.
"""

import logging
import sys
from typing import Optional, TextIO

from ..config.settings import get_setting


def configure_logging(
    level: Optional[str] = None,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """Install a single timestamped handler on the root logger.

    Args:
        level: Log level name (default: ``log_level`` setting)
        stream: Output stream (default: ``sys.stderr``)

    Returns:
        The package logger
    """
    logging.basicConfig(
        level=(level or get_setting('log_level')).upper(),
        format=get_setting('log_format'),
        stream=stream or sys.stderr,
        force=True,
    )
    return logging.getLogger("time_mcp")
