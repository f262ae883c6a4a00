"""Exceptions for icsencode library."""


class CalendarError(Exception):
    """Base exception for all icsencode errors."""


class CalendarEncodeError(CalendarError):
    """Exception raised when encoding calendar data as rfc5545 text.

    The 'message' attribute contains a human-readable message about the
    error that occurred. The 'detailed_error' attribute can provide additional
    information about the error, such as the offending value or the error
    reported by a lower level encoder, useful for debugging purposes.
    """

    def __init__(self, message: str, *, detailed_error: str | None = None) -> None:
        """Initialize the CalendarEncodeError with a message."""
        super().__init__(message)
        self.message = message
        self.detailed_error = detailed_error


class CalendarNameError(CalendarEncodeError):
    """A property, parameter or component name does not match its grammar."""


class CalendarValidationError(CalendarEncodeError, ValueError):
    """A value does not satisfy the grammar of its value data type.

    This is also a ValueError so that encoders may be invoked from pydantic
    validators, which only convert ValueError into validation failures.
    """


class ParameterError(CalendarEncodeError):
    """Exception raised for an unknown or invalid property parameter."""


class PropertyError(CalendarEncodeError):
    """Exception raised when a content line is missing its name or value."""


class ComponentError(CalendarEncodeError):
    """Exception raised when a component validator rejects its content."""


class DocumentError(CalendarEncodeError):
    """Exception raised for an invalid iCalendar object.

    A calendar must have a product identifier and at least one component.
    """
