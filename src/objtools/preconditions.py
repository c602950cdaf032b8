"""
Precondition guards shared by the coalesce and to-string helpers.

Each guard raises immediately at the call site so contract violations never
surface later as a confusing render-time failure.
"""

from __future__ import annotations

from typing import Optional, TypeVar

from .errors import NullReferenceError

T = TypeVar("T")


def require(condition: bool, error: Exception) -> None:
    """Raise the provided exception when the condition fails."""
    if not condition:
        raise error


def check_not_null(value: Optional[T], name: str) -> T:
    """Return ``value`` unchanged, raising ``NullReferenceError`` naming ``name`` when it is ``None``."""
    require(value is not None, NullReferenceError.for_argument(name))
    return value  # type: ignore[return-value]


__all__ = ["check_not_null", "require"]
