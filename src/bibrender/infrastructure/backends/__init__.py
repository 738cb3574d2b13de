"""Built-in output backends: HTML, LaTeX, Markdown and plain text."""

from bibrender.infrastructure.backends.html import HTMLBackend
from bibrender.infrastructure.backends.latex import LaTeXBackend
from bibrender.infrastructure.backends.markdown import MarkdownBackend
from bibrender.infrastructure.backends.plaintext import TextBackend

BUILTIN_BACKENDS = (HTMLBackend, LaTeXBackend, MarkdownBackend, TextBackend)

__all__ = [
    "BUILTIN_BACKENDS",
    "HTMLBackend",
    "LaTeXBackend",
    "MarkdownBackend",
    "TextBackend",
]
