"""Node names typed by a user — sanitizing and checking before an add.

The lifecycle operations accept any string. Front ends that take names
from a person run them through :func:`validate_node_name` first.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterable

from onionctl.domain.errors import InvalidNodeNameError

MIN_NAME_LENGTH = 1
MAX_NAME_LENGTH = 50

IDENTIFIER_PATTERN = re.compile(r"^[a-zA-Z_]\w*$", re.ASCII)

_MARKUP = (
    re.compile(r"<[^>]*>"),
    re.compile(r"[<>&'\"]"),
    re.compile(r"javascript:", re.IGNORECASE),
    re.compile(r"on\w+\s*=", re.IGNORECASE),
)


def sanitize_name(value: str) -> str:
    """Strip tags, markup characters and control characters from *value*."""
    if not isinstance(value, str):
        return ""
    for pattern in _MARKUP:
        value = pattern.sub("", value)
    value = "".join(ch for ch in value if not unicodedata.category(ch).startswith("C"))
    return value.strip()


def is_valid_identifier(value: str) -> bool:
    """Check that *value* starts with a letter or underscore, then word characters."""
    return bool(value) and IDENTIFIER_PATTERN.match(value) is not None


def validate_node_name(name: str, existing: Iterable[str] = ()) -> str:
    """Return the name to store for *name*, or raise if it is unusable.

    The sanitized name gets an upper-case first letter and must not be
    one of *existing* (every entity, service and repository name).

    Raises:
        InvalidNodeNameError: With a message fit for the user.
    """
    if not name or not isinstance(name, str):
        raise InvalidNodeNameError("Please provide a valid input")

    sanitized = sanitize_name(name)
    if not sanitized:
        raise InvalidNodeNameError(
            "Please enter a valid name (letters, numbers, underscore only)"
        )
    if len(sanitized) < MIN_NAME_LENGTH:
        msg = f"Name must be at least {MIN_NAME_LENGTH} character(s) long"
        raise InvalidNodeNameError(msg)
    if len(sanitized) > MAX_NAME_LENGTH:
        msg = f"Name must be no more than {MAX_NAME_LENGTH} characters long"
        raise InvalidNodeNameError(msg)
    if not is_valid_identifier(sanitized):
        raise InvalidNodeNameError(
            "Name must be a valid identifier (letters, numbers, underscore only)"
        )

    capitalized = sanitized[0].upper() + sanitized[1:]
    if capitalized in set(existing):
        raise InvalidNodeNameError("A node with this name already exists")
    return capitalized
