"""Library for encoding rfc5545 components.

An iCalendar object consists of one or more components, that may have
properties. An example of a component might be an event, a to-do or a
vendor specific component.

```
component = "BEGIN" ":" name CRLF
            1*contentline
            "END" ":" name CRLF
```
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
import logging
from typing import Any

from pydantic import ValidationError

from .const import ATTR_BEGIN, ATTR_END, VEVENT
from .exceptions import ComponentError
from .model import (
    CONTENT_ADAPTER,
    ComponentContent,
    NonStandardComponent,
    PropertyDescriptor,
)
from .names import iana_token, validate_name, x_name
from .property import encode_property
from .util import lines, list_rule

__all__ = [
    "component_rule",
    "required_properties",
    "event",
    "events",
    "iana_component",
    "iana_components",
    "x_component",
    "x_components",
]

_LOGGER = logging.getLogger(__name__)

ContentValidator = Callable[[ComponentContent], bool]


def parse_content(name: str, content: Mapping[str, Any]) -> ComponentContent:
    """Validate raw component content into property descriptors."""
    try:
        return CONTENT_ADAPTER.validate_python(content)
    except ValidationError as err:
        _LOGGER.debug("Failed to validate component %s: %s", name, err)
        raise ComponentError(
            f"Invalid content provided for component '{name}'",
            detailed_error=str(err),
        ) from err


def _property_lines(
    name: str, descriptor: PropertyDescriptor | list[PropertyDescriptor]
) -> list[str]:
    """Encode a property, or each instance of a repeated property."""
    descriptors = descriptor if isinstance(descriptor, list) else [descriptor]
    return [encode_property(name, item.value, item.params) for item in descriptors]


def component_rule(
    name: str, validate: ContentValidator | None = None
) -> Callable[[Mapping[str, Any]], str]:
    """Return an encoder for components with the specified name.

    The optional validate predicate receives the component content and
    the component is rejected when it returns False.
    """
    name = validate_name(name)

    def encode(content: Mapping[str, Any]) -> str:
        parsed = parse_content(name, content)
        if validate is not None and not validate(parsed):
            raise ComponentError(f"Invalid content provided for component '{name}'")
        _LOGGER.debug("Encoding component %s", name)
        contentlines = [encode_property(ATTR_BEGIN, name)]
        for key, descriptor in parsed.items():
            contentlines.extend(_property_lines(key, descriptor))
        contentlines.append(encode_property(ATTR_END, name))
        return lines(*contentlines)

    return encode


def required_properties(*names: str) -> ContentValidator:
    """Return a validator that requires each of the named properties."""
    required = {name.upper() for name in names}

    def validate(content: ComponentContent) -> bool:
        return required <= {key.upper() for key in content}

    return validate


def _as_component(
    component: NonStandardComponent | Mapping[str, Any],
) -> NonStandardComponent:
    if isinstance(component, NonStandardComponent):
        return component
    try:
        return NonStandardComponent.model_validate(component)
    except ValidationError as err:
        raise ComponentError(
            "Invalid non-standard component", detailed_error=str(err)
        ) from err


def iana_component(component: NonStandardComponent | Mapping[str, Any]) -> str:
    """Encode a component with a name registered with IANA."""
    component = _as_component(component)
    return component_rule(iana_token(component.name))(component.content)


def x_component(component: NonStandardComponent | Mapping[str, Any]) -> str:
    """Encode a vendor specific experimental component."""
    component = _as_component(component)
    return component_rule(x_name(component.name))(component.content)


event = component_rule(VEVENT)
"""Encode an event component.

See https://tools.ietf.org/html/rfc5545#section-3.6.1
"""

# Components are complete blocks of lines so are joined without a separator
events = list_rule("")(event)
iana_components = list_rule("")(iana_component)
x_components = list_rule("")(x_component)
