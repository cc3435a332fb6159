"""
Clock sampling and timezone resolution.

A ``TimeSnapshot`` pins one instant. Every field an operation reports is
derived from that instant, so the weekday always agrees with the date and
the hour always agrees with the ISO string.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Callable, Dict, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones


# Returns the current instant as an aware datetime
Clock = Callable[[], datetime]

SYSTEM_TIMEZONE = "system"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class InvalidTimezoneError(ValueError):
    """Timezone identifier is not known to the platform."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid time zone specified: {name}")


def utc_now() -> datetime:
    """Default clock."""
    return datetime.now(timezone.utc)


def resolve_timezone(name: str) -> tzinfo:
    """
    Resolve an IANA identifier via the platform timezone database.

    Args:
        name: IANA timezone identifier, matched case-insensitively (e.g., "Asia/Tokyo")

    Returns:
        tzinfo for the zone

    Raises:
        InvalidTimezoneError: If the identifier is unknown or malformed
    """
    if not isinstance(name, str) or not name:
        raise InvalidTimezoneError(str(name))
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        # ValueError covers malformed keys such as absolute paths
        canonical = _zone_names_by_lowercase().get(name.lower())
        if canonical is None:
            raise InvalidTimezoneError(name) from e
        return ZoneInfo(canonical)


@lru_cache(maxsize=1)
def _zone_names_by_lowercase() -> Dict[str, str]:
    """IANA identifiers keyed case-insensitively (e.g., "asia/tokyo" -> "Asia/Tokyo")."""
    return {zone.lower(): zone for zone in available_timezones()}


@dataclass(frozen=True)
class TimeSnapshot:
    """One sampled instant plus its system-local view."""
    instant: datetime   # aware, UTC
    local: datetime     # same instant in the host timezone

    @classmethod
    def take(cls, clock: Optional[Clock] = None) -> "TimeSnapshot":
        """Sample the clock exactly once."""
        now = (clock or utc_now)()
        if now.tzinfo is None:
            # Naive clocks are taken to report UTC
            now = now.replace(tzinfo=timezone.utc)
        instant = now.astimezone(timezone.utc)
        return cls(instant=instant, local=instant.astimezone())

    def in_timezone(self, name: str) -> datetime:
        """The snapshot's instant anchored to a named timezone."""
        return self.instant.astimezone(resolve_timezone(name))

    @property
    def epoch_millis(self) -> int:
        return (self.instant - _EPOCH) // timedelta(milliseconds=1)

    @property
    def utc_offset_minutes(self) -> int:
        """Minutes the host zone is behind UTC (east of UTC is negative)."""
        offset = self.local.utcoffset() or timedelta(0)
        return -int(offset.total_seconds() // 60)
