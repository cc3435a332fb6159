"""Structured record returned by get_time_info."""

import json
from typing import Optional

from pydantic import BaseModel, ConfigDict


class TimeInfo(BaseModel):
    """Breakdown of one sampled instant.

    Field order is the serialization order. Timezone fields are appended
    only when a named timezone was requested.
    """
    model_config = ConfigDict(frozen=True)

    timestamp: int                  # epoch milliseconds
    iso_string: str
    local_time: str
    day_of_week: str
    date: str
    year: int
    month: int                      # 1-based
    day: int
    hour: int                       # 0-23
    minute: int
    second: int
    timezone_offset: int            # minutes behind UTC

    timezone_time: Optional[str] = None
    requested_timezone: Optional[str] = None
    timezone_error: Optional[str] = None

    def to_json(self) -> str:
        """Render with 2-space indentation, omitting unset timezone fields."""
        return json.dumps(self.model_dump(exclude_none=True), indent=2)
