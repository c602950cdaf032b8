"""
Builder for ``Label{name=value, ...}`` debug strings.

Typical use inside ``__str__``::

    def __str__(self) -> str:
        return to_string_helper(self).add("x", self.x).add("y", self.y).render()

Examples:
- ``to_string_helper(self).render()`` returns ``"ClassName{}"``
- ``to_string_helper("MyObject").add("x", 1).render()`` returns ``"MyObject{x=1}"``
- ``to_string_helper(self).add("x", 1).add("y", "foo").render()`` returns ``"ClassName{x=1, y=foo}"``
- ``to_string_helper(self).omit_null_values().add("x", 1).add("y", None).render()``
  returns ``"ClassName{x=1}"``
"""

from __future__ import annotations

from typing import Any, List

from .preconditions import check_not_null
from .to_string_helper_helpers import Entry, is_primitive, primitive_text, simple_name

_SEPARATOR = ", "


class ToStringHelper:
    """
    Accumulates entries for a fixed label and renders them on demand.

    Entries are append-only. Rendering never mutates the helper, so it can be
    called repeatedly, interleaved with further ``add`` calls. Instances are
    not safe for concurrent mutation.
    """

    def __init__(self, label: str) -> None:
        self._label = check_not_null(label, "label")
        self._entries: List[Entry] = []
        self._omit_null_values = False

    @property
    def label(self) -> str:
        return self._label

    @property
    def entries(self) -> tuple[Entry, ...]:
        return tuple(self._entries)

    def omit_null_values(self) -> "ToStringHelper":
        """
        Skip entries whose value is None when rendering.

        The order of this call relative to ``add``/``add_value`` does not matter.
        """
        self._omit_null_values = True
        return self

    def add(self, name: str, value: Any) -> "ToStringHelper":
        """
        Append a ``name=value`` entry.

        None values render as ``null`` unless ``omit_null_values`` was called.

        Raises:
            NullReferenceError: If ``name`` is None
        """
        return self._append(check_not_null(name, "name"), value)

    def add_value(self, value: Any) -> "ToStringHelper":
        """Append an unnamed entry that renders as the bare value."""
        return self._append(None, value)

    def _append(self, name: str | None, value: Any) -> "ToStringHelper":
        if is_primitive(value):
            value = primitive_text(value)
        self._entries.append(Entry(name, value))
        return self

    def render(self) -> str:
        """Return ``label{entry, entry, ...}`` for every entry added so far."""
        omit_null_values = self._omit_null_values
        rendered = [entry.render() for entry in self._entries if not (omit_null_values and entry.is_null)]
        return f"{self._label}{{{_SEPARATOR.join(rendered)}}}"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"ToStringHelper(label={self._label!r}, entries={len(self._entries)}, omit_null_values={self._omit_null_values})"


def to_string_helper(subject: Any) -> ToStringHelper:
    """
    Create a ``ToStringHelper`` for ``subject``.

    Args:
        subject: A label string used verbatim, or any other object whose
            runtime type's simple name becomes the label

    Raises:
        NullReferenceError: If ``subject`` is None
    """
    check_not_null(subject, "subject")
    if isinstance(subject, str):
        return ToStringHelper(subject)
    return ToStringHelper(simple_name(type(subject)))


describe = to_string_helper


__all__ = ["ToStringHelper", "describe", "to_string_helper"]
