"""Library for encoding DATE-TIME values."""

from __future__ import annotations

import datetime
import logging

from icsencode.const import CHARS
from icsencode.exceptions import CalendarValidationError

from .data_types import DATA_TYPE
from .date import encode_date
from .time import Time, TimeEncoder

_LOGGER = logging.getLogger(__name__)


@DATA_TYPE.register("DATE-TIME")
class DateTimeEncoder:
    """Class to handle encoding for a datetime.datetime.

    ```
    date-time = date "T" time
    ```

    Only the UTC form is produced, e.g. 19980119T070000Z. A value with a
    timezone is converted to UTC first, and a floating value is assumed to
    already be in UTC.
    """

    @classmethod
    def __property_type__(cls) -> type:
        return datetime.datetime

    @classmethod
    def __encode_property_value__(cls, value: datetime.datetime) -> str:
        """Serialize as an ICS value."""
        if not isinstance(value, datetime.datetime):
            raise CalendarValidationError(f"Expected a datetime value, got '{value}'")
        if value.tzinfo is not None:
            value = value.astimezone(datetime.timezone.utc)
        time_value = TimeEncoder.__encode_property_value__(Time.from_time(value.time()))
        result = "".join(
            [encode_date(value), CHARS["L_CAP_T"], time_value, CHARS["L_CAP_Z"]]
        )
        _LOGGER.debug("DateTimeEncoder returned %s", result)
        return result
