"""LaTeX backend — renders a ``thebibliography`` environment (.bbl)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, TextIO

from bibrender.domain.ports.backend import BaseBackend

if TYPE_CHECKING:
    from bibrender.domain.models.entry import Entry
    from bibrender.domain.models.text import Protected


class LaTeXBackend(BaseBackend):
    """Render text as LaTeX.

    Literals are passed through untouched: bibliography data is usually
    LaTeX already.
    """

    name = "latex"
    default_suffix = ".bbl"
    default_symbols = {
        "ndash": "--",
        "newblock": "\n\\newblock ",
        "nbsp": "~",
    }
    default_tags = {
        "em": "emph",
        "strong": "textbf",
        "i": "textit",
        "b": "textbf",
        "tt": "texttt",
    }

    def format_tag(self, tag_name: str, text: str) -> str:
        command = self.tag(tag_name)
        return f"\\{command}{{{text}}}" if text else ""

    def format_protected(self, node: Protected, text: str) -> str:
        return f"{{{text}}}"

    def write_prologue(self, stream: TextIO, entries: Iterable[Entry] = ()) -> None:
        longest_label = max((entry.label for entry in entries), key=len, default="")
        stream.write(f"\\begin{{thebibliography}}{{{longest_label}}}")

    def write_epilogue(self, stream: TextIO, entries: Iterable[Entry] = ()) -> None:
        stream.write("\n\n\\end{thebibliography}\n")

    def write_entry(self, stream: TextIO, key: str, label: str, text: str) -> None:
        stream.write(f"\n\n\\bibitem[{label}]{{{key}}}\n")
        stream.write(text)
