"""Library for encoding TIME values.

```
time         = time-hour time-minute time-second [time-utc]
time-hour    = 2DIGIT        ;00-23
time-minute  = 2DIGIT        ;00-59
time-second  = 2DIGIT        ;00-60
```

The UTC designator is not part of the encoded time of day; it is added by
the DATE-TIME encoder.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import datetime
import logging
import re
from typing import Any

from icsencode.exceptions import CalendarValidationError
from icsencode.util import num

from .data_types import DATA_TYPE

_LOGGER = logging.getLogger(__name__)

TWO_DIGITS = re.compile(r"[0-9]{2}")


@dataclass(frozen=True)
class Time:
    """A time of day given as two digit strings."""

    hour: str
    minute: str = "00"
    second: str = "00"

    @classmethod
    def from_time(cls, value: datetime.time) -> Time:
        """Create a Time from a datetime.time, dropping any fraction of a second."""
        return cls(
            hour=num()(value.hour),
            minute=num()(value.minute),
            second=num()(value.second),
        )

    @classmethod
    def from_dict(cls, value: Mapping[str, Any]) -> Time:
        """Create a Time from a mapping with `hour`, `min` and `sec` keys."""
        if "hour" not in value:
            raise CalendarValidationError(f"Time value has no hour: {dict(value)}")
        return cls(
            hour=value["hour"],
            minute=value.get("min", "00"),
            second=value.get("sec", "00"),
        )


@DATA_TYPE.register("TIME", property_types=(datetime.time,))
class TimeEncoder:
    """Encode an rfc5545 TIME in the form HHMMSS."""

    @classmethod
    def __property_type__(cls) -> type:
        return Time

    @classmethod
    def __encode_property_value__(
        cls, value: Time | datetime.time | Mapping[str, Any]
    ) -> str:
        """Serialize the time of day as an ICS value."""
        if isinstance(value, datetime.time):
            value = Time.from_time(value)
        elif isinstance(value, Mapping):
            value = Time.from_dict(value)
        elif not isinstance(value, Time):
            raise CalendarValidationError(f"Expected a time value, got '{value}'")
        parts = [value.hour, value.minute, value.second]
        if not all(
            isinstance(part, str) and TWO_DIGITS.fullmatch(part) for part in parts
        ):
            raise CalendarValidationError(
                f"Bad time {parts}, time components must be two digit strings"
            )
        return "".join(parts)
