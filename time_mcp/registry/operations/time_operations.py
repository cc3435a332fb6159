"""
Time operation registrations.

Defines the handlers behind get_current_time and get_time_info and the
descriptors that expose them.
"""

import logging
from typing import List, Optional

from ...core.clock import (
    SYSTEM_TIMEZONE,
    Clock,
    InvalidTimezoneError,
    TimeSnapshot,
)
from ...core.formatting import (
    format_iso_utc,
    format_locale_date,
    format_locale_datetime,
    format_zoned_datetime,
    weekday_name,
)
from ...models.time_info import TimeInfo
from ..operation_registry import (
    OperationDescriptor,
    OperationRegistry,
    ParameterSpec,
    get_operation_registry,
)

logger = logging.getLogger(__name__)

TIME_FORMATS = ("12hour", "24hour", "iso")


# ============================================================================
# Operation Handlers
# ============================================================================

class TimeOperations:
    """Handlers for the time operations.

    Each call samples the clock once and derives everything from that
    snapshot.
    """

    def __init__(self, clock: Optional[Clock] = None):
        self._clock = clock

    def get_current_time(self, timezone: str = SYSTEM_TIMEZONE, format: str = "12hour") -> str:
        snapshot = TimeSnapshot.take(self._clock)

        if timezone != SYSTEM_TIMEZONE:
            # Raises InvalidTimezoneError; the dispatcher turns it into an error envelope
            zoned = snapshot.in_timezone(timezone)
            time_string = format_zoned_datetime(zoned, hour12=format == "12hour")
        elif format == "iso":
            time_string = format_iso_utc(snapshot.instant)
        elif format == "24hour":
            time_string = format_locale_datetime(snapshot.local, hour12=False)
        else:
            time_string = format_locale_datetime(snapshot.local, hour12=True)

        return f"Current time: {time_string}"

    def get_time_info(self, timezone: str = SYSTEM_TIMEZONE) -> str:
        snapshot = TimeSnapshot.take(self._clock)
        local = snapshot.local

        fields = dict(
            timestamp=snapshot.epoch_millis,
            iso_string=format_iso_utc(snapshot.instant),
            local_time=format_locale_datetime(local),
            day_of_week=weekday_name(local),
            date=format_locale_date(local),
            year=local.year,
            month=local.month,
            day=local.day,
            hour=local.hour,
            minute=local.minute,
            second=local.second,
            timezone_offset=snapshot.utc_offset_minutes,
        )

        if timezone != SYSTEM_TIMEZONE:
            try:
                zoned = snapshot.in_timezone(timezone)
            except InvalidTimezoneError:
                logger.info(f"get_time_info: invalid timezone {timezone!r}")
                fields["timezone_error"] = f"Invalid timezone: {timezone}"
            else:
                fields["timezone_time"] = format_zoned_datetime(zoned, include_zone_name=True)
                fields["requested_timezone"] = timezone

        return TimeInfo(**fields).to_json()


# ============================================================================
# Operation Descriptors
# ============================================================================

TIMEZONE_PARAMETER = ParameterSpec(
    name="timezone",
    description="Timezone (optional, defaults to system timezone)",
    default=SYSTEM_TIMEZONE,
)

FORMAT_PARAMETER = ParameterSpec(
    name="format",
    description='Time format: "12hour", "24hour", or "iso" (default: 12hour)',
    allowed_values=TIME_FORMATS,
    default="12hour",
)


def build_time_operations(clock: Optional[Clock] = None) -> List[OperationDescriptor]:
    """Descriptors for the time operations, in catalog order."""
    handlers = TimeOperations(clock)
    return [
        OperationDescriptor(
            name="get_current_time",
            description="Get the current date and time",
            handler=handlers.get_current_time,
            parameters=(TIMEZONE_PARAMETER, FORMAT_PARAMETER),
        ),
        OperationDescriptor(
            name="get_time_info",
            description="Get detailed time information including timezone, day of week, etc.",
            handler=handlers.get_time_info,
            parameters=(TIMEZONE_PARAMETER,),
        ),
    ]


# ============================================================================
# Registration Function
# ============================================================================

def register_time_operations(
    registry: Optional[OperationRegistry] = None,
    clock: Optional[Clock] = None
) -> OperationRegistry:
    """Register the time operations with a registry (default: the singleton)."""
    if registry is None:
        registry = get_operation_registry()

    operations = build_time_operations(clock)
    registry.register_all(operations)

    logger.info(f"Registered {len(operations)} time operations")
    return registry
