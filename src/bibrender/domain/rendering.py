"""Rendering engine — walk a text tree against a backend.

``render`` is a single dispatch over the four node variants. Children are
always rendered left to right, depth first, so the output follows document
order. The walk is pure: the only state it touches is the backend's
read-only tables.
"""

from __future__ import annotations

from typing import Union

from bibrender.domain.models.text import Protected, String, Symbol, Text, TextNode
from bibrender.domain.ports.backend import BaseBackend


def render(node: TextNode, backend: BaseBackend) -> str:
    """Render *node* into backend-native markup.

    Args:
        node: Any text node (``String``, ``Symbol``, ``Text``, ``Protected``).
        backend: The backend whose primitives produce the output.

    Returns:
        The rendered output, usually a string.

    Raises:
        UndefinedSymbol: If a ``Symbol`` is missing from the backend.
        UndefinedTag: If the backend enforces its tag table and a tag is missing.
        TypeError: If *node* is not a text node.
    """
    if isinstance(node, String):
        return backend.format_str(node.value)
    if isinstance(node, Symbol):
        return backend.symbol(node.name)
    if isinstance(node, Text):
        text = _render_parts(node, backend)
        if node.tag is not None:
            return backend.format_tag(node.tag, text)
        return text
    if isinstance(node, Protected):
        return backend.format_protected(node, _render_parts(node, backend))
    raise TypeError(f"Cannot render object of type {type(node).__name__}")


def _render_parts(node: Union[Text, Protected], backend: BaseBackend) -> str:
    rendered_list = [render(part, backend) for part in node.parts]
    return backend.render_sequence(rendered_list)
