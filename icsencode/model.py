"""Descriptors of the calendar data to encode.

These are pydantic models so that plain dictionaries, as produced by json or
by a caller building calendar data by hand, are validated into the same
structure. For example, a single event component:

```python
{
    "UID": {"value": "19970901T130000Z-123401@example.com"},
    "DTSTAMP": {"value": datetime.datetime(1997, 9, 1, 13, tzinfo=datetime.UTC)},
    "SUMMARY": {"value": "Annual Employee Review", "params": {"LANGUAGE": "en"}},
}
```
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, TypeAdapter


class PropertyDescriptor(BaseModel):
    """A property value and its parameters."""

    value: Any = None
    """The python value, encoded according to its type or a VALUE parameter."""

    params: Optional[dict[str, Any]] = None
    """Property parameter names mapped to parameter values."""

    model_config = ConfigDict(
        frozen=True, arbitrary_types_allowed=True, extra="forbid"
    )


ComponentContent = dict[str, Union[PropertyDescriptor, list[PropertyDescriptor]]]
"""Property names mapped to the property, or a list for repeated properties."""

CONTENT_ADAPTER: TypeAdapter[ComponentContent] = TypeAdapter(ComponentContent)


class NonStandardComponent(BaseModel):
    """A component that is not defined by rfc5545.

    The name is either an IANA registered token or a vendor specific x-name.
    """

    name: str
    content: ComponentContent

    model_config = ConfigDict(frozen=True, extra="forbid")
