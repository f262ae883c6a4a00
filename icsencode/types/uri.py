"""Library for encoding URI values."""

from __future__ import annotations

import re
from typing import Any
from urllib.parse import ParseResult, SplitResult, urlparse

from icsencode.exceptions import CalendarValidationError

from .data_types import DATA_TYPE

_RE_CONTROL_CHARS = re.compile("[\x00-\x1f\x7f]")


def encode_uri(value: Any) -> str:
    """Return the canonical string form of a URI string or parsed URI."""
    if isinstance(value, (ParseResult, SplitResult)):
        value = value.geturl()
    if not isinstance(value, str):
        raise CalendarValidationError(
            "Bad URI data, expected a string or parsed URI, "
            f"got a {type(value).__name__}"
        )
    # urlparse silently drops some control characters, so check first
    if _RE_CONTROL_CHARS.search(value):
        raise CalendarValidationError(
            "URI may not contain control characters", detailed_error=repr(value)
        )
    try:
        result = urlparse(value)
    except ValueError as err:
        raise CalendarValidationError(f"Invalid URI '{value}'") from err
    if not result.scheme:
        raise CalendarValidationError(f"Invalid URI '{value}', expected a scheme")
    return result.geturl()


@DATA_TYPE.register("URI", property_types=(ParseResult, SplitResult))
class Uri(str):
    """A value type for a property that contains a uniform resource identifier."""

    @classmethod
    def __encode_property_value__(cls, value: Any) -> str:
        """Serialize the uniform resource identifier."""
        return encode_uri(value)
