"""Common error types used across the package."""

from __future__ import annotations

from typing import Optional


class NullReferenceError(ValueError):
    """Raised when a required argument is ``None``."""

    def __init__(self, message: str = "Required value is None", *, argument: Optional[str] = None) -> None:
        super().__init__(message)
        self.argument = argument

    @classmethod
    def for_argument(cls, argument: str) -> "NullReferenceError":
        """Create error for a named argument that was ``None``."""
        return cls(f"{argument} must not be None", argument=argument)

    @classmethod
    def both_null(cls) -> "NullReferenceError":
        """Create error for a coalesce call where neither value was present."""
        return cls("Both first and second are None")


__all__ = ["NullReferenceError"]
