"""
Simple type-name derivation for to-string labels.

Fully qualified names use ``.`` between namespace segments and ``$`` between
nested types. Anonymous types carry a ``$<digits>`` suffix and local types a
``$<digits>Name`` suffix; both collapse so the label names the innermost
declared type.
"""

from __future__ import annotations

import logging
import re
from typing import Type

logger = logging.getLogger(__name__)

_ANONYMOUS_INDEX = re.compile(r"\$[0-9]+")
_NESTED_SEPARATOR = "$"
_NAMESPACE_SEPARATOR = "."
_LOCALS_SEGMENT = "<locals>"


def qualified_type_name(cls: Type[object]) -> str:
    """
    Build the fully qualified name of ``cls``.

    Nesting dots in ``__qualname__`` become ``$`` and ``<locals>`` segments are
    dropped, so ``pkg.mod`` / ``Outer.Inner`` yields ``pkg.mod.Outer$Inner``.
    """
    segments = [segment for segment in cls.__qualname__.split(_NAMESPACE_SEPARATOR) if segment != _LOCALS_SEGMENT]
    nested_name = _NESTED_SEPARATOR.join(segments)
    module = getattr(cls, "__module__", None)
    if not module:
        return nested_name
    return f"{module}{_NAMESPACE_SEPARATOR}{nested_name}"


def simple_name_from_qualified(name: str) -> str:
    """
    Reduce a fully qualified type name to its simple name.

    Example:
        >>> simple_name_from_qualified("com.example.Outer$Inner")
        'Inner'
        >>> simple_name_from_qualified("com.example.Outer$1")
        'Outer'
        >>> simple_name_from_qualified("com.example.Outer$1Local")
        'Local'
        >>> simple_name_from_qualified("Plain")
        'Plain'
    """
    collapsed = _ANONYMOUS_INDEX.sub(_NESTED_SEPARATOR, name)
    if collapsed != name:
        logger.debug("Collapsed anonymous type index in %s", name)
    collapsed = collapsed.rstrip(_NESTED_SEPARATOR)

    start = collapsed.rfind(_NESTED_SEPARATOR)
    if start == -1:
        start = collapsed.rfind(_NAMESPACE_SEPARATOR)
    return collapsed[start + 1 :]


def simple_name(cls: Type[object]) -> str:
    """Return the simple name used to label instances of ``cls``."""
    return simple_name_from_qualified(qualified_type_name(cls))


__all__ = ["qualified_type_name", "simple_name", "simple_name_from_qualified"]
