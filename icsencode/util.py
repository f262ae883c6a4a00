"""Utility methods used by multiple encoders."""

from __future__ import annotations

from collections.abc import Callable
import functools
from typing import Any, TypeVar

from .const import CRLF
from .exceptions import CalendarValidationError

__all__ = [
    "lines",
    "num",
    "list_rule",
]

T = TypeVar("T")


def lines(*contentlines: str | None) -> str:
    """Join content lines into a block of rfc5545 text.

    Every line is terminated with CRLF. Empty or missing lines are skipped,
    which lets callers pass optional lines inline:

      lines("BEGIN:X", None, "", "END:X") == "BEGIN:X\\r\\nEND:X\\r\\n"
    """
    return "".join(f"{line}{CRLF}" for line in contentlines if line)


def num(digits: int = 2) -> Callable[[int], str]:
    """Return an encoder for a non-negative integer as exactly `digits` digits.

    Shorter numbers are zero padded, e.g. num(4)(9) == "0009", and numbers
    that need more digits are rejected.
    """

    def encode(value: int) -> str:
        if value < 0:
            raise CalendarValidationError(
                f"Bad input number '{value}', expected a non-negative number"
            )
        encoded = str(value).zfill(digits)
        if len(encoded) != digits:
            raise CalendarValidationError(
                f"Bad input number '{value}', expected a number with {digits} digits"
            )
        return encoded

    return encode


def list_rule(
    sep: str = ",",
) -> Callable[[Callable[[T], str]], Callable[[T | list[T] | tuple[T, ...]], str]]:
    """Return decorator that lets an encoder also accept a list of values.

    A list or plain tuple is encoded element by element and joined with `sep`,
    anything else is passed straight through to the wrapped encoder.
    """

    def decorator(
        func: Callable[[T], str],
    ) -> Callable[[T | list[T] | tuple[T, ...]], str]:
        @functools.wraps(func)
        def wrapper(value: Any) -> str:
            if type(value) in (list, tuple):
                return sep.join(func(item) for item in value)
            return func(value)

        return wrapper

    return decorator
