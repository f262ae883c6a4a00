"""Grammars for property, parameter and component names.

```
name        = iana-token / x-name
iana-token  = 1*(ALPHA / DIGIT / "-")
x-name      = "X-" [vendorid "-"] 1*(ALPHA / DIGIT / "-")
vendorid    = 3*(ALPHA / DIGIT)
```
"""

from __future__ import annotations

import re
from typing import Any

from .exceptions import CalendarNameError

__all__ = [
    "validate_name",
    "x_name",
    "iana_token",
    "is_x_name",
    "is_iana_token",
]

NAME_RE = re.compile(r"[A-Za-z]+")
X_NAME_RE = re.compile(r"X-(?:[A-Za-z0-9]{3,}-)?[A-Za-z0-9-]+", flags=re.IGNORECASE)
IANA_TOKEN_RE = re.compile(r"[A-Za-z0-9-]+")


def is_x_name(name: Any) -> bool:
    """Return True if the name is a vendor specific experimental name."""
    return isinstance(name, str) and X_NAME_RE.fullmatch(name) is not None


def is_iana_token(name: Any) -> bool:
    """Return True if the name is shaped like an IANA registered token."""
    return isinstance(name, str) and IANA_TOKEN_RE.fullmatch(name) is not None


def x_name(name: Any) -> str:
    """Validate an x-name and return it in upper case."""
    if not is_x_name(name):
        raise CalendarNameError(f"Invalid x-name '{name}'")
    return name.upper()


def iana_token(name: Any) -> str:
    """Validate an iana-token and return it in upper case."""
    if not is_iana_token(name):
        raise CalendarNameError(f"Invalid IANA token '{name}'")
    return name.upper()


def validate_name(name: Any) -> str:
    """Validate a property name and return it in upper case.

    Standard names contain only letters, while extension and IANA names may
    also contain digits and hyphens.
    """
    if isinstance(name, str) and (
        NAME_RE.fullmatch(name) or is_x_name(name) or is_iana_token(name)
    ):
        return name.upper()
    raise CalendarNameError(
        f"Bad property name '{name}', property names must be nonempty "
        "strings of letters, digits and hyphens"
    )
