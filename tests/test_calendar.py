"""Tests for encoding the iCalendar object."""

from typing import Any

from pydantic import ValidationError
import pytest

from icsencode.calendar import Document, encode_calendar
from icsencode.exceptions import (
    CalendarError,
    CalendarValidationError,
    DocumentError,
    PropertyError,
)

PRODID = "-//example//1.2.3"
EVENT_ICS = (
    "BEGIN:VEVENT\r\n"
    "UID:uid-1@example.com\r\n"
    "DTSTAMP:20240101T120000Z\r\n"
    "END:VEVENT\r\n"
)


def test_document(event_content: dict[str, Any]) -> None:
    """Test encoding a calendar with a single event."""
    document = Document(prod_id="-//Test//EN", events=[event_content])
    assert document.ics() == (
        "BEGIN:VCALENDAR\r\n"
        "PRODID:-//Test//EN\r\n"
        "VERSION:2.0\r\n"
        "BEGIN:VEVENT\r\n"
        "UID:uid-1@example.com\r\n"
        "DTSTAMP:20240101T120000Z\r\n"
        "END:VEVENT\r\n"
        "END:VCALENDAR\r\n"
    )


def test_encode_calendar_dict(event_content: dict[str, Any]) -> None:
    """Test encoding a calendar from a dictionary using the field aliases."""
    ics = encode_calendar(
        {"prodId": PRODID, "icsVersion": "2.1", "events": [event_content]}
    )
    assert ics == (
        f"BEGIN:VCALENDAR\r\nPRODID:{PRODID}\r\nVERSION:2.1\r\n"
        f"{EVENT_ICS}END:VCALENDAR\r\n"
    )


def test_calendar_properties(event_content: dict[str, Any]) -> None:
    """Test the optional calendar scale and method properties."""
    document = Document(
        prod_id=PRODID,
        calscale="GREGORIAN",
        method="PUBLISH",
        events=[event_content],
    )
    assert encode_calendar(document) == (
        "BEGIN:VCALENDAR\r\n"
        f"PRODID:{PRODID}\r\n"
        "VERSION:2.0\r\n"
        "CALSCALE:GREGORIAN\r\n"
        "METHOD:PUBLISH\r\n"
        f"{EVENT_ICS}"
        "END:VCALENDAR\r\n"
    )


def test_component_order(event_content: dict[str, Any]) -> None:
    """Test events are followed by IANA and then experimental components."""
    document = Document.model_validate(
        {
            "prodId": PRODID,
            "xComps": [
                {"name": "X-ABC-THING", "content": {"X-PROP": {"value": "a"}}}
            ],
            "ianaComps": [{"name": "VTODO", "content": {"UID": {"value": "t"}}}],
            "events": [event_content],
        }
    )
    assert document.ics() == (
        "BEGIN:VCALENDAR\r\n"
        f"PRODID:{PRODID}\r\n"
        "VERSION:2.0\r\n"
        f"{EVENT_ICS}"
        "BEGIN:VTODO\r\nUID:t\r\nEND:VTODO\r\n"
        "BEGIN:X-ABC-THING\r\nX-PROP:a\r\nEND:X-ABC-THING\r\n"
        "END:VCALENDAR\r\n"
    )


def test_only_experimental_components() -> None:
    """Test a calendar without events."""
    document = Document(
        prod_id=PRODID,
        x_comps=[{"name": "X-THING", "content": {"X-PROP": {"value": "a"}}}],
    )
    assert "BEGIN:X-THING\r\n" in document.ics()
    assert "VEVENT" not in document.ics()


@pytest.mark.parametrize("prod_id", [None, ""])
def test_missing_prod_id(prod_id: str | None, event_content: dict[str, Any]) -> None:
    """Test a calendar requires a product identifier."""
    with pytest.raises(DocumentError, match="No prodId"):
        encode_calendar({"prodId": prod_id, "events": [event_content]})


@pytest.mark.parametrize(
    "components",
    [
        {},
        {"events": []},
        {"events": [], "ianaComps": [], "xComps": []},
    ],
)
def test_missing_components(components: dict[str, Any]) -> None:
    """Test a calendar requires at least one component."""
    with pytest.raises(DocumentError, match="at least one component"):
        Document(prod_id=PRODID, **components).ics()


def test_invalid_document() -> None:
    """Test a malformed document is reported as a document error."""
    with pytest.raises(DocumentError) as exc_info:
        encode_calendar({"prodId": PRODID, "events": "not a list"})
    assert isinstance(exc_info.value.__cause__, ValidationError)
    assert exc_info.value.detailed_error

    with pytest.raises(DocumentError):
        Document(prod_id=PRODID, events=[{"UID": 1}])


def test_invalid_event_property() -> None:
    """Test property errors propagate when encoding the calendar."""
    document = Document(prod_id=PRODID, events=[{"UID": {"value": ""}}])
    with pytest.raises(PropertyError) as exc_info:
        document.ics()
    assert isinstance(exc_info.value, CalendarError)


def test_document_is_immutable(event_content: dict[str, Any]) -> None:
    """Test the document can't be changed once created."""
    document = Document(prod_id=PRODID, events=[event_content])
    with pytest.raises(ValidationError):
        document.prod_id = "other"


def test_structured_value_line_break(event_content: dict[str, Any]) -> None:
    """Test a structured value can't add lines to the calendar."""
    document = Document(
        prod_id=PRODID,
        events=[
            {**event_content, "RRULE": {"value": {"freq": "daily\r\nEND:VEVENT"}}}
        ],
    )
    with pytest.raises(CalendarValidationError):
        document.ics()


def test_text_value_line_break(event_content: dict[str, Any]) -> None:
    """Test a carriage return in text is escaped as a newline."""
    document = Document(
        prod_id=PRODID,
        events=[{**event_content, "SUMMARY": {"value": "a\rEND:VEVENT"}}],
    )
    ics = document.ics()
    assert ics.split("\r\n").count("END:VEVENT") == 1
    assert 'SUMMARY:"a\\nEND:VEVENT"\r\n' in ics
