"""To-string helper building blocks."""

from .entry import Entry
from .simple_name import qualified_type_name, simple_name, simple_name_from_qualified
from .value_text import NULL_TEXT, is_primitive, primitive_text, value_text

__all__ = [
    "Entry",
    "NULL_TEXT",
    "is_primitive",
    "primitive_text",
    "qualified_type_name",
    "simple_name",
    "simple_name_from_qualified",
    "value_text",
]
