"""Domain models — public API.

Provides convenient imports for the text node variants and entries.
"""

from bibrender.domain.models.entry import Entry
from bibrender.domain.models.text import (
    Protected,
    String,
    Symbol,
    Text,
    TextNode,
    as_node,
    tagged,
)

__all__ = [
    # Text nodes
    "Protected",
    "String",
    "Symbol",
    "Text",
    "TextNode",
    "as_node",
    "tagged",
    # Entries
    "Entry",
]
