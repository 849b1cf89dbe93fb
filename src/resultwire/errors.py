"""Exception hierarchy for resultwire."""

from __future__ import annotations

from typing import Any

UNWRAP_FAILURE_MESSAGE = "Attempted to unwrap a Failure value"


class ResultWireError(Exception):
    """Base exception for all resultwire errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(ResultWireError):
    """Configuration validation or resolution failed."""


class ShapeError(ResultWireError):
    """Data handed to ``from_dict`` is not a serialized result."""


class UnwrapError(ResultWireError):
    """``unsafe_unwrap`` was called on a failure.

    Always a programmer error. ``error`` holds the failure payload only when
    the caller opted in (``keep_error=True`` or ``Config.unwrap_keeps_error``);
    otherwise it is ``None`` and the payload is gone.
    """

    def __init__(self, *, error: Any = None, hint: str | None = None) -> None:
        super().__init__(UNWRAP_FAILURE_MESSAGE, hint=hint)
        self.error = error
