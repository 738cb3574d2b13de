"""Text node model — the renderable tree behind every bibliography entry.

A tree is built from four variants:

- ``String``: a literal leaf, rendered through the backend's ``format_str``.
- ``Symbol``: a named reference (``ndash``, ``nbsp``, ``newblock``)
  resolved against the backend's symbol table at render time.
- ``Text``: an ordered composite, optionally tagged with a role such
  as ``em`` or ``strong``.
- ``Protected``: a composite whose content must not be reinterpreted
  (a ``{braced group}`` in LaTeX).

Nodes are frozen Pydantic models carrying a ``kind`` discriminator, so a
tree survives a JSON round-trip. They hold data only: rendering lives in
``bibrender.domain.rendering``.

Example::

    text = Text.of("Longcat is ", tagged("em", "looooooong"), "!")
"""

from __future__ import annotations

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Leaves
# ---------------------------------------------------------------------------


class String(_Node):
    """A literal piece of text."""

    kind: Literal["str"] = "str"
    value: str


class Symbol(_Node):
    """A symbol looked up in the backend's symbol table."""

    kind: Literal["symbol"] = "symbol"
    name: str


# ---------------------------------------------------------------------------
# Composites
# ---------------------------------------------------------------------------


class _Composite(_Node):
    parts: tuple[TextNode, ...] = ()

    @field_validator("parts", mode="before")
    @classmethod
    def _coerce_parts(cls, parts: Any) -> Any:
        """Reject missing children and wrap bare strings in ``String``."""
        if parts is None:
            raise ValueError("parts must not be None")
        if isinstance(parts, (str, _Node)):
            parts = (parts,)
        coerced = []
        for part in parts:
            if part is None:
                raise ValueError("text parts must not be None")
            coerced.append(String(value=part) if isinstance(part, str) else part)
        return tuple(coerced)


class Text(_Composite):
    """An ordered sequence of nodes, optionally tagged (``em``, ``b``, ...)."""

    kind: Literal["text"] = "text"
    tag: Optional[str] = None

    @classmethod
    def of(cls, *parts: Union[str, TextNode], tag: Optional[str] = None) -> Text:
        return cls(parts=parts, tag=tag)


class Protected(_Composite):
    """A span whose content backends must not reflow or reinterpret."""

    kind: Literal["protected"] = "protected"

    @classmethod
    def of(cls, *parts: Union[str, TextNode]) -> Protected:
        return cls(parts=parts)


TextNode = Union[String, Symbol, Text, Protected]

_Composite.model_rebuild()
Text.model_rebuild()
Protected.model_rebuild()


def tagged(name: str, *parts: Union[str, TextNode]) -> Text:
    """Build a ``Text`` carrying the tag *name*."""
    return Text(parts=parts, tag=name)


def as_node(value: Union[str, TextNode]) -> TextNode:
    """Return *value* as a text node, wrapping a bare string in ``String``."""
    if isinstance(value, str):
        return String(value=value)
    return value
