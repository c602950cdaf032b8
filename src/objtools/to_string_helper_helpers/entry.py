"""Value holder for a single to-string entry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .value_text import value_text


@dataclass(frozen=True)
class Entry:
    """One ``name=value`` pair, or a bare value when ``name`` is None."""

    name: Optional[str]
    value: Any

    @property
    def is_null(self) -> bool:
        return self.value is None

    def render(self) -> str:
        if self.name is None:
            return value_text(self.value)
        return f"{self.name}={value_text(self.value)}"


__all__ = ["Entry"]
