"""
en-US date/time rendering.

Names and patterns are fixed rather than taken from the process locale, so
output does not depend on ``LC_TIME`` of the host:

    locale datetime (12h):  1/15/2024, 2:30:05 PM
    locale datetime (24h):  1/15/2024, 14:30:05
    zoned datetime (12h):   01/15/2024, 02:30:05 PM
    zoned datetime (24h):   01/15/2024, 14:30:05
    locale date:            1/15/2024
"""

from datetime import datetime, timezone

WEEKDAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday",
    "Friday", "Saturday", "Sunday",
)


def _clock_12h(dt: datetime, pad_hour: bool) -> str:
    hour = dt.hour % 12 or 12
    hour_text = f"{hour:02d}" if pad_hour else str(hour)
    marker = "AM" if dt.hour < 12 else "PM"
    return f"{hour_text}:{dt.minute:02d}:{dt.second:02d} {marker}"


def _clock_24h(dt: datetime) -> str:
    return f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"


def format_iso_utc(dt: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a ``Z`` suffix."""
    utc = dt.astimezone(timezone.utc)
    millis = utc.microsecond // 1000
    return utc.strftime("%Y-%m-%dT%H:%M:%S") + f".{millis:03d}Z"


def format_locale_date(dt: datetime) -> str:
    return f"{dt.month}/{dt.day}/{dt.year}"


def format_locale_datetime(dt: datetime, hour12: bool = True) -> str:
    """Default en-US rendering: numeric date, unpadded 12-hour clock."""
    clock = _clock_12h(dt, pad_hour=False) if hour12 else _clock_24h(dt)
    return f"{format_locale_date(dt)}, {clock}"


def format_zoned_datetime(
    dt: datetime,
    hour12: bool = True,
    include_zone_name: bool = False
) -> str:
    """
    Two-digit en-US rendering used for named timezones.

    Args:
        dt: Aware datetime already converted to the target zone
        hour12: 12-hour clock with AM/PM, otherwise 24-hour
        include_zone_name: Append the zone's short name (e.g., "JST")

    Returns:
        String like ``01/15/2024, 07:30:00 PM JST``
    """
    clock = _clock_12h(dt, pad_hour=True) if hour12 else _clock_24h(dt)
    text = f"{dt.month:02d}/{dt.day:02d}/{dt.year}, {clock}"
    if include_zone_name:
        # tz database abbreviation (JST, EST, or +05), not a GMT+9 style offset
        text = f"{text} {dt.tzname()}"
    return text


def weekday_name(dt: datetime) -> str:
    return WEEKDAY_NAMES[dt.weekday()]
