r"""Library for encoding TEXT values.

```
text = *(TSAFE-CHAR / ":" / DQUOTE / ESCAPED-CHAR)
ESCAPED-CHAR = ("\\" / "\;" / "\," / "\N" / "\n")
```
"""

import re

from icsencode.const import DQUOTE
from icsencode.exceptions import CalendarValidationError

from .data_types import DATA_TYPE

# The backslash is escaped first so the escapes added for the other
# characters are not escaped again.
ESCAPE_CHAR = {"\\": "\\\\", ";": "\\;", ",": "\\,", "\n": "\\n"}
NEWLINE_RE = re.compile(r"\r\n|\n\r|\n|\r")
# TSAFE-CHAR excludes CONTROL, other than HTAB
_RE_CONTROL_CHARS = re.compile("[\x00-\x08\x0a-\x1f\x7f]")
_QUOTE_RE = re.compile(r"[:;,]")


def escape(value: str) -> str:
    """Escape the characters that may not appear literally in TEXT."""
    value = NEWLINE_RE.sub("\n", value)
    for key, vin in ESCAPE_CHAR.items():
        if key not in value:
            continue
        value = value.replace(key, vin)
    return value


@DATA_TYPE.register("TEXT")
class TextEncoder:
    """Encode an rfc5545 TEXT value."""

    @classmethod
    def __property_type__(cls) -> type:
        return str

    @classmethod
    def __encode_property_value__(cls, value: str) -> str:
        """Serialize text as an ICS value."""
        value = str(value)
        # The double quote is the delimiter for values with restricted characters
        if DQUOTE in value:
            raise CalendarValidationError(
                f"Text values may not contain double quotes: {value}"
            )
        value = escape(value)
        if _RE_CONTROL_CHARS.search(value):
            raise CalendarValidationError(
                "Text values may not contain control characters",
                detailed_error=repr(value),
            )
        if _QUOTE_RE.search(value):
            return f"{DQUOTE}{value}{DQUOTE}"
        return value
