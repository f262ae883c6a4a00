"""Library for encoding INTEGER values."""

from icsencode.exceptions import CalendarValidationError

from .data_types import DATA_TYPE


@DATA_TYPE.register("INTEGER")
class IntEncoder:
    """Encode an int ICS value."""

    @classmethod
    def __property_type__(cls) -> type:
        return int

    @classmethod
    def __encode_property_value__(cls, value: int) -> str:
        """Serialize an int as a decimal ICS value."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise CalendarValidationError(f"Expected an integer value, got '{value}'")
        return str(value)
