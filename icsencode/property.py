"""Library for encoding rfc5545 properties.

A property is encoded as a single content line:

```
contentline = name *(";" param ) ":" value CRLF
```

The CRLF terminator is not part of the encoded property, it is added when
content lines are joined with `icsencode.util.lines`.
"""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any

from .const import ATTR_VALUE
from .exceptions import PropertyError
from .names import validate_name
from .parameters import encode_params
from .types import DATA_TYPE, encode_value

_LOGGER = logging.getLogger(__name__)


def _is_missing(value: Any) -> bool:
    """Return True for a value that cannot be encoded as a property value."""
    return value is None or (
        isinstance(value, (str, list, tuple, Mapping)) and not value
    )


def _merge_params(value: Any, params: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge the parameters carried by the value with the explicit parameters."""
    result: dict[str, Any] = {}
    for source in (DATA_TYPE.params(value), params or {}):
        for key, param_value in source.items():
            result[key.upper() if isinstance(key, str) else key] = param_value
    return result


def encode_property(
    name: str, value: Any, params: Mapping[str, Any] | None = None
) -> str:
    """Encode a property as an rfc5545 content line without a line terminator."""
    if not name or _is_missing(value):
        raise PropertyError(
            "Content name or value was not provided",
            detailed_error=f"name={name!r}, value={value!r}",
        )
    name = validate_name(name)
    all_params = _merge_params(value, params)
    value_type = all_params.get(ATTR_VALUE)
    encoded_value = encode_value(value, value_type)
    _LOGGER.debug("Encoded property %s value %s", name, encoded_value)
    return f"{name}{encode_params(all_params)}:{encoded_value}"
