"""Test fixtures."""

import datetime
from typing import Any

import pytest


@pytest.fixture
def dtstamp() -> datetime.datetime:
    """Fixture for a fixed event timestamp."""
    return datetime.datetime(2024, 1, 1, 12, 0, 0, tzinfo=datetime.UTC)


@pytest.fixture
def event_content(dtstamp: datetime.datetime) -> dict[str, Any]:
    """Fixture for the content of a minimal event."""
    return {
        "UID": {"value": "uid-1@example.com"},
        "DTSTAMP": {"value": dtstamp},
    }
