"""Result models — negative outcomes as values, not exceptions.

INVARIANT: Expected failures of interactive editing (disallowed edge,
missing edge, rule violations) are returned, never raised.
The CLI consumes :class:`ServiceResult`; the core returns the narrower
:class:`ConnectionResult` and :class:`ValidationReport`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from onionctl.domain.onion_config import OnionConfig


class ConnectionResult(BaseModel):
    """Outcome of adding or removing an edge.

    Attributes:
        success: Whether the edge was changed.
        message: Human-readable description of what happened.
        data: The new snapshot on success, None on failure.
    """

    model_config = {"frozen": True}

    success: bool
    message: str
    data: OnionConfig | None = None


class ValidationReport(BaseModel):
    """Every structural violation found in a configuration."""

    model_config = {"frozen": True}

    valid: bool
    errors: list[str] = Field(default_factory=list)


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type of command-level operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"add_connection"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
