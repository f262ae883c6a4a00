"""Library for encoding generic structured values.

A structured value is a mapping of keys to values, where each entry is
rendered as `;KEY=VALUE`. Values may be booleans, numbers, strings or
nested mappings, which are encoded recursively:

  {"freq": "weekly", "interval": 2} => ";FREQ=WEEKLY;INTERVAL=2"
"""

from __future__ import annotations

from collections.abc import Mapping
import logging
import re
from typing import Union

from icsencode.exceptions import CalendarValidationError

from .boolean import BooleanEncoder
from .data_types import DATA_TYPE

_LOGGER = logging.getLogger(__name__)

CompositeValue = Union[bool, int, float, str, Mapping[str, "CompositeValue"]]

# Delimiters of the structured value and the content line
_RE_UNSAFE = re.compile("[\x00-\x1f\x7f;=:]")


def _encode_item(value: CompositeValue) -> str:
    """Encode a single member of a structured value."""
    # bool is checked before int since it is also an int
    if isinstance(value, bool):
        return BooleanEncoder.__encode_property_value__(value)
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        if _RE_UNSAFE.search(value):
            raise CalendarValidationError(
                "Structured value may not contain control characters or delimiters",
                detailed_error=repr(value),
            )
        return value.upper()
    if isinstance(value, Mapping):
        return CompositeEncoder.__encode_property_value__(value)
    raise CalendarValidationError(
        f"Unsupported structured value of type '{type(value).__name__}'",
        detailed_error=repr(value),
    )


@DATA_TYPE.register()
class CompositeEncoder:
    """Encode a mapping as a sequence of KEY=VALUE pairs."""

    @classmethod
    def __property_type__(cls) -> type:
        return dict

    @classmethod
    def __encode_property_value__(cls, value: Mapping[str, CompositeValue]) -> str:
        """Serialize the structured value."""
        if not isinstance(value, Mapping):
            raise CalendarValidationError(
                f"Expected a mapping for a structured value, got '{value}'"
            )
        return "".join(
            f";{_encode_item(key)}={_encode_item(item)}" for key, item in value.items()
        )
