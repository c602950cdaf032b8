"""Helpers for selecting the first present value without truthiness fallbacks."""

from __future__ import annotations

from typing import Optional, TypeVar

from .errors import NullReferenceError
from .preconditions import require

T = TypeVar("T")


def first_non_null(first: Optional[T], second: Optional[T]) -> T:
    """
    Return ``first`` if it is not ``None``, otherwise ``second``.

    Falsy values such as ``0`` or ``""`` count as present.

    Raises:
        NullReferenceError: If both ``first`` and ``second`` are ``None``
    """
    if first is not None:
        return first
    require(second is not None, NullReferenceError.both_null())
    return second  # type: ignore[return-value]


coalesce = first_non_null


__all__ = ["coalesce", "first_non_null"]
