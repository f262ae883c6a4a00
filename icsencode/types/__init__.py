"""Library for encoding rfc5545 Property Value Data Types."""

# Import all types for the registry
from . import boolean, date, date_time, integer  # noqa: F401
from .cal_address import CalAddress, CalendarUserType, ParticipationStatus, Role
from .composite import CompositeEncoder, CompositeValue
from .data_types import DATA_TYPE, encode_value
from .text import TextEncoder
from .time import Time, TimeEncoder
from .uri import Uri

__all__ = [
    "CalAddress",
    "CalendarUserType",
    "CompositeEncoder",
    "CompositeValue",
    "DATA_TYPE",
    "ParticipationStatus",
    "Role",
    "TextEncoder",
    "Time",
    "TimeEncoder",
    "Uri",
    "encode_value",
]
