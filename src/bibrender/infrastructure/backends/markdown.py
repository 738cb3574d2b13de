"""Markdown backend."""

from __future__ import annotations

from typing import TextIO

from bibrender.domain.ports.backend import BaseBackend

# Backslash goes first so escapes added later are not escaped again.
SPECIAL_CHARS = ("\\", "`", "*", "_", "{", "}", "[", "]", "#")


class MarkdownBackend(BaseBackend):
    """Render text as Markdown."""

    name = "markdown"
    default_suffix = ".md"
    default_symbols = {
        "ndash": "&ndash;",
        "newblock": "\n",
        "nbsp": "&nbsp;",
    }
    default_tags = {
        "em": "*",
        "strong": "**",
        "i": "*",
        "b": "**",
        "tt": "`",
    }

    def format_str(self, value: str) -> str:
        """Escape the characters Markdown would interpret."""
        for char in SPECIAL_CHARS:
            value = value.replace(char, "\\" + char)
        return value

    def format_tag(self, tag_name: str, text: str) -> str:
        delimiter = self.tag(tag_name)
        return f"{delimiter}{text}{delimiter}" if text else ""

    def write_entry(self, stream: TextIO, key: str, label: str, text: str) -> None:
        stream.write(f"[{label}] {text}\n")
