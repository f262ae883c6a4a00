"""Tests for utility methods."""

import pytest

from icsencode.const import CHARS, CRLF
from icsencode.exceptions import CalendarValidationError
from icsencode.util import lines, list_rule, num


def test_chars() -> None:
    """Test the character table maps names to literal characters."""
    assert CHARS["DQUOTE"] == '"'
    assert CHARS["COLON"] == ":"
    assert CHARS["SEMICOLON"] == ";"
    assert CHARS["BACKSLASH"] == "\\"
    assert CHARS["L_CAP_Z"] == "Z"
    assert CRLF == "\r\n"


def test_lines() -> None:
    """Test building a block of text from one or more lines."""
    assert lines("foo") == "foo\r\n"
    assert lines("foo", "bar") == "foo\r\nbar\r\n"


def test_lines_skips_empty() -> None:
    """Test that missing or empty lines are ignored."""
    assert lines("foo", None, "", "bar", None) == "foo\r\nbar\r\n"
    assert lines("") == ""
    assert lines() == ""
    assert lines("", None) == ""


@pytest.mark.parametrize(
    ("digits", "value", "expected"),
    [
        (2, 12, "12"),
        (2, 1, "01"),
        (2, 0, "00"),
        (4, 9, "0009"),
        (4, 1997, "1997"),
    ],
)
def test_num(digits: int, value: int, expected: str) -> None:
    """Test zero padding numbers to a fixed number of digits."""
    assert num(digits)(value) == expected
    assert int(num(digits)(value)) == value


def test_num_default() -> None:
    """Test the default is two digits."""
    assert num()(7) == "07"


@pytest.mark.parametrize(("digits", "value"), [(2, 100), (1, 10), (4, 12345)])
def test_num_too_long(digits: int, value: int) -> None:
    """Test numbers with too many digits are rejected."""
    with pytest.raises(CalendarValidationError, match="digits"):
        num(digits)(value)


def test_num_negative() -> None:
    """Test negative numbers are rejected."""
    with pytest.raises(CalendarValidationError):
        num()(-1)


def test_list_rule() -> None:
    """Test lifting an encoder to accept a list of values."""
    encode = list_rule()(str.upper)
    assert encode("a") == "A"
    assert encode(["a", "b", "c"]) == "A,B,C"
    assert encode(("a", "b")) == "A,B"
    assert encode([]) == ""


def test_list_rule_separator() -> None:
    """Test lifting an encoder with a custom separator."""
    encode = list_rule("")(str.upper)
    assert encode(["a", "b"]) == "AB"
    assert encode.__name__ == "upper"
