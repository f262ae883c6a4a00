"""The iCalendar object.

This is an example of encoding a calendar with a single event:
```python
import datetime
from icsencode.calendar import Document

document = Document(
    prod_id="-//Example Corp.//Calendar 1.0//EN",
    events=[
        {
            "UID": {"value": "19970610T172345Z-AF23B2@example.com"},
            "DTSTAMP": {"value": datetime.datetime(1997, 6, 10, 17, 23, 45)},
            "SUMMARY": {"value": "Bastille Day Party"},
        }
    ],
)
with open("/tmp/output.ics", mode="w", newline="") as ics_file:
    ics_file.write(document.ics())
```

See https://tools.ietf.org/html/rfc5545#section-3.4
"""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .component import events, iana_components, x_components
from .const import (
    ATTR_BEGIN,
    ATTR_END,
    CALSCALE,
    DEFAULT_VERSION,
    METHOD,
    PRODID,
    VCALENDAR,
    VERSION,
)
from .exceptions import DocumentError
from .model import ComponentContent, NonStandardComponent
from .property import encode_property
from .util import lines

__all__ = [
    "Document",
    "encode_calendar",
]

_LOGGER = logging.getLogger(__name__)


class Document(BaseModel):
    """A sequence of calendar properties and calendar components."""

    prod_id: Optional[str] = Field(alias="prodId", default=None)
    """Identifier of the product that created the calendar, required."""

    ics_version: str = Field(alias="icsVersion", default=DEFAULT_VERSION)

    calscale: Optional[str] = None
    method: Optional[str] = None

    #
    # Calendar components
    #

    events: Optional[list[ComponentContent]] = None
    """Events associated with this calendar."""

    iana_comps: Optional[list[NonStandardComponent]] = Field(
        alias="ianaComps", default=None
    )
    """Components with a name registered with IANA."""

    x_comps: Optional[list[NonStandardComponent]] = Field(alias="xComps", default=None)
    """Vendor specific experimental components."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as err:
            _LOGGER.debug("Failed to validate calendar document: %s", err)
            raise DocumentError(
                "Invalid calendar document", detailed_error=str(err)
            ) from err

    def ics(self) -> str:
        """Encode the calendar as rfc5545 iCalendar content."""
        if not self.prod_id:
            raise DocumentError("No prodId provided")
        if not (self.events or self.iana_comps or self.x_comps):
            raise DocumentError("You must include at least one component")
        _LOGGER.debug(
            "Encoding calendar with %d events, %d iana and %d x components",
            len(self.events or []),
            len(self.iana_comps or []),
            len(self.x_comps or []),
        )
        properties = lines(
            encode_property(PRODID, self.prod_id),
            encode_property(VERSION, self.ics_version),
            self.calscale and encode_property(CALSCALE, self.calscale),
            self.method and encode_property(METHOD, self.method),
        )
        return "".join(
            [
                lines(encode_property(ATTR_BEGIN, VCALENDAR)),
                properties,
                events(self.events) if self.events else "",
                iana_components(self.iana_comps) if self.iana_comps else "",
                x_components(self.x_comps) if self.x_comps else "",
                lines(encode_property(ATTR_END, VCALENDAR)),
            ]
        )


def encode_calendar(document: Document | Mapping[str, Any]) -> str:
    """Encode a calendar document as rfc5545 iCalendar content.

    The document may be a Document or a dictionary with the same fields.
    """
    if not isinstance(document, Document):
        try:
            document = Document.model_validate(document)
        except ValidationError as err:
            _LOGGER.debug("Failed to validate calendar document: %s", err)
            raise DocumentError(
                "Invalid calendar document", detailed_error=str(err)
            ) from err
    return document.ics()
