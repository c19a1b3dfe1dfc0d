"""Exception classes raised by maze construction, generation and solving."""

from __future__ import annotations

from typing import Any, Mapping, Optional


class MazeError(Exception):
    """Base exception for maze errors, optionally carrying diagnostic context."""

    def __init__(self, message: str, context: Optional[Mapping[str, Any]] = None) -> None:
        self.context = dict(context or {})
        full_message = message
        if self.context:
            details = ", ".join(f"{key}={value!r}" for key, value in self.context.items())
            full_message = f"{message} ({details})"
        super().__init__(full_message)


class MazeConfigurationError(MazeError, ValueError):
    """Raised for invalid parameters detected before any work begins."""


class MazeInvariantError(MazeError, RuntimeError):
    """Raised when a maze breaks a structural invariant, e.g. a missing START."""


__all__ = [
    "MazeError",
    "MazeConfigurationError",
    "MazeInvariantError",
]
