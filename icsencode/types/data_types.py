"""Library for encoding rfc5545 types."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, Protocol, TypeVar

from icsencode.exceptions import CalendarValidationError
from icsencode.util import list_rule

_LOGGER = logging.getLogger(__name__)

T_TYPE = TypeVar("T_TYPE", bound=type)


class DataType(Protocol):
    """Defines the protocol implemented by data types in this library.

    The methods defined in this protocol are all optional.
    """

    @classmethod
    def __property_type__(cls) -> type:
        """Defines the python type to match, if different from the type itself."""

    @classmethod
    def __encode_property_value__(cls, value: Any) -> str:
        """Encode the python value as the ics string value."""

    @classmethod
    def __encode_property_params__(cls, value: Any) -> dict[str, Any]:
        """Encode property parameters carried by the python value."""


class Registry:
    """Registry of data types."""

    def __init__(
        self,
    ) -> None:
        """Initialize Registry."""
        self._items: dict[str, type] = {}
        self._encode_by_name: dict[str, Callable[[Any], str]] = {}
        self._encode_property_value: dict[type, Callable[[Any], str]] = {}
        self._encode_property_params: dict[
            type, Callable[[Any], dict[str, Any]]
        ] = {}

    def register(
        self,
        name: str | None = None,
        property_types: tuple[type, ...] = (),
    ) -> Callable[[T_TYPE], T_TYPE]:
        """Return decorator to register a type.

        The name when specified is the Property Data Type value name. Any
        additional python types in `property_types` are encoded the same way.
        """

        def decorator(func: T_TYPE) -> T_TYPE:
            """Register decorated function."""
            if name:
                self._items[name] = func
            data_type = func
            if data_type_func := getattr(func, "__property_type__", None):
                data_type = data_type_func()
            data_types = (data_type, *property_types)
            if encode_property_value := getattr(
                func, "__encode_property_value__", None
            ):
                for value_type in data_types:
                    self._encode_property_value[value_type] = encode_property_value
                if name:
                    self._encode_by_name[name] = encode_property_value
            if encode_property_params := getattr(
                func, "__encode_property_params__", None
            ):
                for value_type in data_types:
                    self._encode_property_params[value_type] = encode_property_params
            return func

        return decorator

    @property
    def items(self) -> dict[str, type]:
        """Registry of Property Data Type value names to data types."""
        return self._items

    @property
    def encode_by_name(self) -> dict[str, Callable[[Any], str]]:
        """Registry based on data value type string name."""
        return self._encode_by_name

    @property
    def encode_property_value(self) -> dict[type, Callable[[Any], str]]:
        """Registry of python types to functions encoding the ics value."""
        return self._encode_property_value

    @property
    def encode_property_params(self) -> dict[type, Callable[[Any], dict[str, Any]]]:
        """Registry of python types to functions encoding property parameters."""
        return self._encode_property_params

    def _lookup(self, registry: dict[type, Any], value: Any) -> Any | None:
        """Find the entry for the most specific registered type of the value."""
        for value_type in type(value).__mro__:
            if (entry := registry.get(value_type)) is not None:
                return entry
        if isinstance(value, Mapping):
            return registry.get(dict)
        return None

    def encoder(
        self, value: Any, value_type: str | None = None
    ) -> Callable[[Any], str]:
        """Return the encoder for a value or explicit value data type name.

        When the value is a list, every element must have the same encoder.
        """
        if value_type:
            if not isinstance(value_type, str) or not (
                func := self._encode_by_name.get(value_type.upper())
            ):
                raise CalendarValidationError(
                    f"Unsupported value data type '{value_type}'"
                )
            return func
        samples = value if type(value) in (list, tuple) and value else [value]
        funcs = []
        for sample in samples:
            if not (func := self._lookup(self._encode_property_value, sample)):
                raise CalendarValidationError(
                    f"No encoder for value of type '{type(sample).__name__}'",
                    detailed_error=repr(sample),
                )
            if func not in funcs:
                funcs.append(func)
        if len(funcs) > 1:
            raise CalendarValidationError(
                "List values must all have the same value data type",
                detailed_error=repr(value),
            )
        return funcs[0]

    def params(self, value: Any) -> dict[str, Any]:
        """Return the property parameters contributed by a value, if any."""
        if type(value) in (list, tuple):
            return {}
        if not (func := self._lookup(self._encode_property_params, value)):
            return {}
        return func(value)


DATA_TYPE: Registry = Registry()


def encode_value(value: Any, value_type: str | None = None, sep: str = ",") -> str:
    """Encode a value, or a list of values, as the ics property value text."""
    func = DATA_TYPE.encoder(value, value_type)
    _LOGGER.debug("Encoding %r with %s", value, func)
    return list_rule(sep)(func)(value)
