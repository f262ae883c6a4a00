"""Library for encoding DATE values."""

from __future__ import annotations

import datetime
import logging

from icsencode.exceptions import CalendarValidationError
from icsencode.util import num

from .data_types import DATA_TYPE

_LOGGER = logging.getLogger(__name__)


def encode_date(value: datetime.date) -> str:
    """Encode the date portion of a value as YYYYMMDD."""
    if not isinstance(value, datetime.date):
        raise CalendarValidationError(f"Expected a date value, got '{value}'")
    # No separator between the date components
    return num(4)(value.year) + num()(value.month) + num()(value.day)


@DATA_TYPE.register("DATE")
class DateEncoder:
    """Encode an rfc5545 DATE from a datetime.date.

    ```
    date-value         = date-fullyear date-month date-mday
    date-fullyear      = 4DIGIT
    date-month         = 2DIGIT        ;01-12
    date-mday          = 2DIGIT        ;01-28, 01-29, 01-30, 01-31
    ```
    """

    @classmethod
    def __property_type__(cls) -> type:
        return datetime.date

    @classmethod
    def __encode_property_value__(cls, value: datetime.date) -> str:
        """Serialize as an ICS value."""
        result = encode_date(value)
        _LOGGER.debug("DateEncoder returned %s", result)
        return result
