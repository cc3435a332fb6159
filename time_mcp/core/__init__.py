"""
Time core: instant sampling, timezone resolution and en-US formatting.
"""

from .clock import (
    SYSTEM_TIMEZONE,
    Clock,
    InvalidTimezoneError,
    TimeSnapshot,
    resolve_timezone,
    utc_now,
)
from .formatting import (
    format_iso_utc,
    format_locale_date,
    format_locale_datetime,
    format_zoned_datetime,
    weekday_name,
)

__all__ = [
    'SYSTEM_TIMEZONE',
    'Clock',
    'InvalidTimezoneError',
    'TimeSnapshot',
    'resolve_timezone',
    'utc_now',
    'format_iso_utc',
    'format_locale_date',
    'format_locale_datetime',
    'format_zoned_datetime',
    'weekday_name',
]
