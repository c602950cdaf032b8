"""
Textual conversion for values recorded by ``ToStringHelper``.

Primitive scalars (booleans, integers, floats, and their numpy counterparts)
are converted once when added. Everything else is kept by reference and
converted with ``str()`` at render time.
"""

from __future__ import annotations

from typing import Any

import numpy as np

NULL_TEXT = "null"
_TRUE_TEXT = "true"
_FALSE_TEXT = "false"

_BUILTIN_PRIMITIVE_TYPES = (bool, int, float)
_NUMPY_PRIMITIVE_TYPES = (np.bool_, np.number)


def is_primitive(value: Any) -> bool:
    """
    Return True for scalar values that are rendered eagerly.

    Builtin scalars must match exactly, so subclasses such as ``IntEnum``
    members stay by reference and render through their own ``__str__``.
    """
    return type(value) in _BUILTIN_PRIMITIVE_TYPES or isinstance(value, _NUMPY_PRIMITIVE_TYPES)


def primitive_text(value: Any) -> str:
    """
    Render a primitive scalar in its canonical textual form.

    Args:
        value: bool, int, float, or numpy scalar

    Returns:
        ``"true"``/``"false"`` for booleans, decimal digits for integers, and
        the shortest round-trip text for floats at their own width

    Example:
        >>> primitive_text(True)
        'true'
        >>> primitive_text(np.float32(0.1))
        '0.1'
        >>> primitive_text(np.int64(7))
        '7'
    """
    if isinstance(value, (bool, np.bool_)):
        return _TRUE_TEXT if value else _FALSE_TEXT
    if isinstance(value, np.integer):
        return str(int(value))
    if isinstance(value, np.floating):
        # str() keeps float32 at its own precision; .item() would widen it
        return str(value)
    if isinstance(value, float):
        return repr(value)
    return str(value)


def value_text(value: Any) -> str:
    """Render any recorded value, using ``null`` for ``None``."""
    if value is None:
        return NULL_TEXT
    if is_primitive(value):
        return primitive_text(value)
    return str(value)


__all__ = ["NULL_TEXT", "is_primitive", "primitive_text", "value_text"]
