"""Parameters or meta information associated with a property.

Property parameters are additional modifiers on a property to specify extra
information about the value for the property (e.g. language, value type, a
display attribute, etc).

From https://tools.ietf.org/html/rfc5545#section-3.2:

  Property parameter values that contain the COLON, SEMICOLON, or COMMA
  character separators MUST be specified as quoted-string text values.
  Property parameter values MUST NOT contain the DQUOTE character.

Each registered parameter has its own value encoder. Parameters not in the
table are accepted when their name is an x-name or an IANA token.
"""

from __future__ import annotations

import enum
import logging
import re
from abc import ABC
from collections.abc import Mapping
from typing import Any, Callable

from .const import DQUOTE
from .exceptions import CalendarEncodeError, ParameterError
from .names import is_iana_token, is_x_name
from .types.boolean import BooleanEncoder
from .types.uri import encode_uri

_LOGGER = logging.getLogger(__name__)

_UNSAFE_CHAR_RE = re.compile(r"[,:;]")
_RE_CONTROL_CHARS = re.compile("[\x00-\x08\x0a-\x1f\x7f]")
_RE_TOKEN = re.compile(r"[A-Za-z0-9-]+")


def _as_str(value: Any) -> str:
    if isinstance(value, enum.Enum):
        value = value.value
    if isinstance(value, bool):
        return BooleanEncoder.__encode_property_value__(value)
    return str(value)


def param_text_encode(value: Any) -> str:
    """Encode a parameter value, quoting it when it has separator characters."""
    value = _as_str(value)
    if DQUOTE in value:
        raise ParameterError(f"Parameter value may not contain DQUOTE: {value}")
    if _RE_CONTROL_CHARS.search(value):
        raise ParameterError(f"Parameter value contains control characters: {value}")
    if _UNSAFE_CHAR_RE.search(value):
        return f"{DQUOTE}{value}{DQUOTE}"
    return value


def quoted_encode(value: Any) -> str:
    """Encode the specific quoted value."""
    value = _as_str(value)
    if DQUOTE in value:
        raise ParameterError(f"Parameter value may not contain DQUOTE: {value}")
    return f"{DQUOTE}{value}{DQUOTE}"


def quoted_uri_encode(value: Any) -> str:
    """Encode a uri as a quoted string."""
    return quoted_encode(encode_uri(value))


def token_encode(value: Any) -> str:
    """Encode an enumerated value, an IANA token or x-name, in upper case."""
    value = _as_str(value)
    if not _RE_TOKEN.fullmatch(value):
        raise ParameterError(f"Invalid parameter token value '{value}'")
    return value.upper()


def boolean_encode(value: Any) -> str:
    """Encode a BOOLEAN parameter value."""
    if isinstance(value, str) and value.upper() in ("TRUE", "FALSE"):
        return value.upper()
    if not isinstance(value, bool):
        raise ParameterError(f"Expected a boolean parameter value, got '{value}'")
    return BooleanEncoder.__encode_property_value__(value)


class ParameterType(ABC):
    """Property parameter type protocol."""

    ics_name: str
    encode: Callable[[Any], str]


class AlternateText(ParameterType):
    """An alternate text representation for the property value."""

    ics_name = "ALTREP"
    encode = quoted_uri_encode


class CommonName(ParameterType):
    """The common name associated with the user specified by the property."""

    ics_name = "CN"
    encode = param_text_encode


class CalendarUserType(ParameterType):
    """Identifies the type of calendar user specified by the property."""

    ics_name = "CUTYPE"
    encode = token_encode


class Delegators(ParameterType):
    """The calendar users that have delegated their participation."""

    ics_name = "DELEGATED-FROM"
    encode = quoted_uri_encode


class Delegatees(ParameterType):
    """The calendar users to whom participation has been delegated."""

    ics_name = "DELEGATED-TO"
    encode = quoted_uri_encode


class DirectoryEntry(ParameterType):
    """Reference to a directory entry associated with the calendar user."""

    ics_name = "DIR"
    encode = quoted_uri_encode


class InlineEncoding(ParameterType):
    """The inline encoding used for the property value."""

    ics_name = "ENCODING"
    encode = token_encode


class FormatType(ParameterType):
    """The content type of a referenced object."""

    ics_name = "FMTTYPE"
    encode = param_text_encode


class FreeBusyTimeType(ParameterType):
    """The free or busy time type."""

    ics_name = "FBTYPE"
    encode = token_encode


class Language(ParameterType):
    """The language for text values in the property."""

    ics_name = "LANGUAGE"
    encode = param_text_encode


class Member(ParameterType):
    """The group or list membership of the calendar user."""

    ics_name = "MEMBER"
    encode = quoted_uri_encode


class ParticipationStatus(ParameterType):
    """The participation status for the calendar user."""

    ics_name = "PARTSTAT"
    encode = token_encode


class RecurrenceIdentifierRange(ParameterType):
    """The effective range of a recurrence instance."""

    ics_name = "RANGE"
    encode = token_encode


class AlarmTriggerRelationship(ParameterType):
    """The relationship of an alarm trigger to the start or end."""

    ics_name = "RELATED"
    encode = token_encode


class RelationshipType(ParameterType):
    """The type of hierarchical relationship with another component."""

    ics_name = "RELTYPE"
    encode = token_encode


class ParticipationRole(ParameterType):
    """The participation role for the calendar user."""

    ics_name = "ROLE"
    encode = token_encode


class RsvpExpectation(ParameterType):
    """Whether there is an expectation of a reply from the calendar user."""

    ics_name = "RSVP"
    encode = boolean_encode


class SentBy(ParameterType):
    """The calendar user acting on behalf of the user in the property."""

    ics_name = "SENT-BY"
    encode = quoted_uri_encode


class TimeZoneIdentifier(ParameterType):
    """The identifier of the time zone definition for a time."""

    ics_name = "TZID"
    encode = param_text_encode


class ValueDataType(ParameterType):
    """An explicit value data type for the property value."""

    ics_name = "VALUE"
    encode = token_encode


class ExperimentalParameter(ParameterType):
    """A vendor specific parameter with an x-name."""

    ics_name = "X-"
    encode = param_text_encode


class IanaParameter(ParameterType):
    """A parameter registered with IANA but not known by this library."""

    ics_name = ""
    encode = param_text_encode


PARAMETER_TYPES: list[type[ParameterType]] = [
    AlternateText,
    CommonName,
    CalendarUserType,
    Delegators,
    Delegatees,
    DirectoryEntry,
    InlineEncoding,
    FormatType,
    FreeBusyTimeType,
    Language,
    Member,
    ParticipationStatus,
    RecurrenceIdentifierRange,
    AlarmTriggerRelationship,
    RelationshipType,
    ParticipationRole,
    RsvpExpectation,
    SentBy,
    TimeZoneIdentifier,
    ValueDataType,
]
PARAMETERS_BY_ICS_MAP = {param.ics_name: param for param in PARAMETER_TYPES}


def _registered(name: str) -> type[ParameterType] | None:
    return PARAMETERS_BY_ICS_MAP.get(name)


def _experimental(name: str) -> type[ParameterType] | None:
    return ExperimentalParameter if is_x_name(name) else None


def _iana(name: str) -> type[ParameterType] | None:
    return IanaParameter if is_iana_token(name) else None


# Resolution order for a parameter name, the first match wins
_RESOLVERS: list[Callable[[str], type[ParameterType] | None]] = [
    _registered,
    _experimental,
    _iana,
]


def resolve_parameter(name: Any) -> type[ParameterType]:
    """Return the parameter type used to encode values of the named parameter."""
    if isinstance(name, str):
        key = name.upper()
        for resolver in _RESOLVERS:
            if param_type := resolver(key):
                return param_type
    raise ParameterError(f"Invalid property parameter name '{name}'")


def encode_param(name: str, value: Any) -> str:
    """Encode a single parameter as NAME=VALUE.

    A list value is encoded as a comma separated list of parameter values.
    """
    param_type = resolve_parameter(name)
    values = value if isinstance(value, (list, tuple)) else [value]
    if not values:
        raise ParameterError(f"Parameter '{name}' has no value")
    try:
        encoded = ",".join(param_type.encode(item) for item in values)
    except ParameterError:
        raise
    except CalendarEncodeError as err:
        raise ParameterError(
            f"Invalid value for parameter '{name}'", detailed_error=str(err)
        ) from err
    return f"{name.upper()}={encoded}"


def encode_params(params: Mapping[str, Any] | None) -> str:
    """Encode zero or more property parameters as ;NAME=VALUE pairs."""
    if not params:
        return ""
    _LOGGER.debug("Encoding parameters %s", params)
    return "".join(f";{encode_param(name, value)}" for name, value in params.items())
