"""Library for encoding CAL-ADDRESS values."""

from __future__ import annotations

import enum
import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .data_types import DATA_TYPE
from .uri import encode_uri

_LOGGER = logging.getLogger(__name__)


class CalendarUserType(str, enum.Enum):
    """The type of calendar user."""

    INDIVIDUAL = "INDIVIDUAL"
    GROUP = "GROUP"
    RESOURCE = "RESOURCE"
    ROOM = "ROOM"
    UNKNOWN = "UNKNOWN"


class ParticipationStatus(str, enum.Enum):
    """Participation status for a calendar user."""

    NEEDS_ACTION = "NEEDS-ACTION"
    ACCEPTED = "ACCEPTED"
    DECLINED = "DECLINED"
    # Additional statuses for Events and Todos
    TENTATIVE = "TENTATIVE"
    DELEGATED = "DELEGATED"
    # Additional status for TODOs
    COMPLETED = "COMPLETED"


class Role(str, enum.Enum):
    """Role for the calendar user."""

    CHAIR = "CHAIR"
    REQUIRED = "REQ-PARTICIPANT"
    OPTIONAL = "OPT-PARTICIPANT"
    NON_PARTICIPANT = "NON-PARTICIPANT"


@DATA_TYPE.register("CAL-ADDRESS")
class CalAddress(BaseModel):
    """A value type for a property that contains a calendar user address.

    The fields other than the address are encoded as property parameters of
    the property that holds the address, e.g. an ATTENDEE or ORGANIZER.
    """

    uri: str = Field(alias="value")
    """The calendar user address as a uri."""

    common_name: Optional[str] = Field(alias="CN", default=None)
    """The common name associated with the calendar user."""

    user_type: Optional[str] = Field(alias="CUTYPE", default=None)
    """The type of calendar user specified by the property.

    Common values are defined in CalendarUserType, though also supports other
    values not known by this library so it uses a string.
    """

    delegator: Optional[list[str]] = Field(alias="DELEGATED-FROM", default=None)
    """The users that have delegated their participation to this user."""

    delegate: Optional[list[str]] = Field(alias="DELEGATED-TO", default=None)
    """The users to whom the user has delegated participation."""

    directory_entry: Optional[str] = Field(alias="DIR", default=None)
    """Reference to a directory entry associated with the calendar user."""

    member: Optional[list[str]] = Field(alias="MEMBER", default=None)
    """The group or list membership of the calendar user."""

    status: Optional[str] = Field(alias="PARTSTAT", default=None)
    """The participation status for the calendar user."""

    role: Optional[str] = Field(alias="ROLE", default=None)
    """The participation role for the calendar user."""

    rsvp: Optional[bool] = Field(alias="RSVP", default=None)
    """Whether there is an expectation of a favor of a reply from the calendar user."""

    sent_by: Optional[str] = Field(alias="SENT-BY", default=None)
    """Specifies the calendar user is acting on behalf of another user."""

    language: Optional[str] = Field(alias="LANGUAGE", default=None)

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("uri", "directory_entry", "sent_by", mode="before")
    @classmethod
    def validate_uri(cls, value: Any) -> str | None:
        if value is None:
            return None
        return encode_uri(value)

    @field_validator("delegator", "delegate", "member", mode="before")
    @classmethod
    def validate_uri_list(cls, value: Any) -> list[str] | None:
        if value is None:
            return None
        if not isinstance(value, (list, tuple)):
            value = [value]
        return [encode_uri(item) for item in value]

    @field_validator("user_type", "status", "role", mode="before")
    @classmethod
    def validate_enum(cls, value: Any) -> Any:
        if isinstance(value, enum.Enum):
            return value.value
        return value

    @classmethod
    def __encode_property_value__(cls, value: Any) -> str:
        """Serialize the calendar user address."""
        if isinstance(value, CalAddress):
            return value.uri
        return encode_uri(value)

    @classmethod
    def __encode_property_params__(cls, value: CalAddress) -> dict[str, Any]:
        """Encode the calendar user fields as property parameters."""
        params = value.model_dump(by_alias=True, exclude_none=True)
        params.pop("value", None)
        _LOGGER.debug("CalAddress parameters %s", params)
        return params
