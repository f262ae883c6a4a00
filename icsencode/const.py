"""Constants for the rfc5545 encoding library.

See https://tools.ietf.org/html/rfc5545#section-2.1 for the formatting
conventions the character names come from.
"""

# Decimal code points of the characters used as delimiters by the grammar
_CODEPOINTS = {
    "HTAB": 9,
    "LF": 10,
    "CR": 13,
    "DQUOTE": 34,
    "SPACE": 32,
    "PLUS_SIGN": 43,
    "COMMA": 44,
    "HYPHEN_MINUS": 45,
    "PERIOD": 46,
    "SOLIDUS": 47,
    "COLON": 58,
    "SEMICOLON": 59,
    "L_CAP_N": 78,
    "L_CAP_T": 84,
    "L_CAP_X": 88,
    "L_CAP_Z": 90,
    "BACKSLASH": 92,
    "L_SMALL_N": 110,
}

CHARS: dict[str, str] = {name: chr(code) for name, code in _CODEPOINTS.items()}
"""Semantic character names mapped to their literal characters."""

CRLF = CHARS["CR"] + CHARS["LF"]
DQUOTE = CHARS["DQUOTE"]

ATTR_BEGIN = "BEGIN"
ATTR_END = "END"
ATTR_VALUE = "VALUE"

VCALENDAR = "VCALENDAR"
VEVENT = "VEVENT"
PRODID = "PRODID"
VERSION = "VERSION"
CALSCALE = "CALSCALE"
METHOD = "METHOD"

DEFAULT_VERSION = "2.0"
