"""bibrender — render formatted bibliographies through pluggable backends.

Usage::

    from bibrender import Text, Symbol, tagged, render_as, find_backend, write_to_string

    text = Text.of("Hello, ", Symbol(name="ndash"), " ", tagged("em", "world"))
    render_as(text, "html")

    backend = find_backend("markdown")()
    write_to_string(backend, [("k1", text, "1")])
"""

from bibrender.application.registry import (
    BackendRegistry,
    available_backends,
    create_backend,
    find_backend,
    register,
    register_backend,
    render_as,
)
from bibrender.application.writer import write_to_file, write_to_stream, write_to_string
from bibrender.domain.errors import (
    BibRenderError,
    ConfigurationError,
    EntryLoadError,
    ResourceError,
    UndefinedSymbol,
    UndefinedTag,
    UnimplementedHook,
    UnknownBackend,
)
from bibrender.domain.models import Entry, Protected, String, Symbol, Text, TextNode, tagged
from bibrender.domain.ports.backend import BaseBackend
from bibrender.domain.rendering import render

__version__ = "0.1.0"

__all__ = [
    # Text model
    "Entry",
    "Protected",
    "String",
    "Symbol",
    "Text",
    "TextNode",
    "tagged",
    # Rendering
    "BaseBackend",
    "render",
    "render_as",
    # Registry
    "BackendRegistry",
    "available_backends",
    "create_backend",
    "find_backend",
    "register",
    "register_backend",
    # Writer
    "write_to_file",
    "write_to_stream",
    "write_to_string",
    # Errors
    "BibRenderError",
    "ConfigurationError",
    "EntryLoadError",
    "ResourceError",
    "UndefinedSymbol",
    "UndefinedTag",
    "UnimplementedHook",
    "UnknownBackend",
]
