"""Process-level settings."""

from .settings import (
    SERVER_NAME,
    SERVER_VERSION,
    get_all_settings,
    get_setting,
    set_setting,
)

__all__ = [
    'SERVER_NAME',
    'SERVER_VERSION',
    'get_all_settings',
    'get_setting',
    'set_setting',
]
