"""
Small object utilities for defensive code and debug strings.

- ``coalesce``/``first_non_null``: first of two values that is not None
- ``describe``/``to_string_helper``: build ``Label{x=1, y=foo}`` strings
"""

from .coalesce import coalesce, first_non_null
from .errors import NullReferenceError
from .preconditions import check_not_null
from .to_string_helper import ToStringHelper, describe, to_string_helper

__all__ = [
    "NullReferenceError",
    "ToStringHelper",
    "check_not_null",
    "coalesce",
    "describe",
    "first_non_null",
    "to_string_helper",
]
