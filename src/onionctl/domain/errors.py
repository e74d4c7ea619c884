"""Fail-fast error types.

Logical failures (disallowed connections, unknown nodes) are reported as
result values. These exceptions are reserved for the accept/reject gate
and for malformed external input.
"""

from __future__ import annotations


class ConfigParseError(ValueError):
    """The external representation could not be decoded into a configuration."""


class ConfigValidationError(ValueError):
    """A configuration violates a structural rule.

    Attributes:
        errors: Every violation known when the error was raised. The
            fail-fast gate stops at the first, so this usually holds one.
    """

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors if errors is not None else [message]


class InvalidNodeNameError(ValueError):
    """A user-supplied node name is empty, malformed or already taken."""
