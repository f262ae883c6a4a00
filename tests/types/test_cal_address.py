"""Tests for CAL-ADDRESS values."""

from urllib.parse import urlparse

from pydantic import ValidationError
import pytest

from icsencode.exceptions import CalendarValidationError
from icsencode.types import (
    DATA_TYPE,
    CalAddress,
    CalendarUserType,
    ParticipationStatus,
    Role,
    encode_value,
)


def test_cal_address_string() -> None:
    """Test a string calendar user address."""
    assert (
        encode_value("mailto:jane_doe@example.com", "CAL-ADDRESS")
        == "mailto:jane_doe@example.com"
    )
    assert (
        encode_value(urlparse("mailto:jane_doe@example.com"), "CAL-ADDRESS")
        == "mailto:jane_doe@example.com"
    )


def test_invalid_cal_address() -> None:
    """Test a calendar user address must be a string or uri."""
    with pytest.raises(CalendarValidationError):
        encode_value(1234, "CAL-ADDRESS")


def test_cal_address_model() -> None:
    """Test a calendar user address with additional parameters."""
    address = CalAddress(
        uri="mailto:jane_doe@example.com",
        common_name="Jane Doe",
        user_type=CalendarUserType.INDIVIDUAL,
        role=Role.REQUIRED,
        status=ParticipationStatus.NEEDS_ACTION,
        rsvp=True,
    )
    assert encode_value(address) == "mailto:jane_doe@example.com"
    assert DATA_TYPE.params(address) == {
        "CN": "Jane Doe",
        "CUTYPE": "INDIVIDUAL",
        "PARTSTAT": "NEEDS-ACTION",
        "ROLE": "REQ-PARTICIPANT",
        "RSVP": True,
    }


def test_cal_address_aliases() -> None:
    """Test creating a calendar user address from parameter names."""
    address = CalAddress.model_validate(
        {
            "value": "mailto:a@example.com",
            "DELEGATED-FROM": "mailto:b@example.com",
            "SENT-BY": "mailto:c@example.com",
        }
    )
    assert address.delegator == ["mailto:b@example.com"]
    assert DATA_TYPE.params(address) == {
        "DELEGATED-FROM": ["mailto:b@example.com"],
        "SENT-BY": "mailto:c@example.com",
    }


def test_cal_address_invalid_uri() -> None:
    """Test the calendar user address must be a uri."""
    with pytest.raises(ValidationError):
        CalAddress(uri="jane_doe")
