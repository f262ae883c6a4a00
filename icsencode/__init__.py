"""Library for encoding calendar data as rfc5545 iCalendar text.

The encoder is built from small grammar rules that mirror rfc5545: value
encoders for each property value data type, property parameters, content
lines, components and finally the iCalendar object itself. See
`icsencode.calendar` for an example.
"""

__all__ = [
    "calendar",
    "component",
    "const",
    "exceptions",
    "model",
    "names",
    "parameters",
    "property",
    "types",
    "util",
]
