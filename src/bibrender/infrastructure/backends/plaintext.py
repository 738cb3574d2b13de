"""Plain text backend."""

from __future__ import annotations

from typing import TextIO

from bibrender.domain.ports.backend import BaseBackend


class TextBackend(BaseBackend):
    """Render text without any markup."""

    name = "text"
    default_suffix = ".txt"
    default_symbols = {
        "ndash": "-",
        "newblock": " ",
        "nbsp": " ",
    }
    # Tags are accepted but add no markup.
    default_tags = {
        "em": "",
        "strong": "",
        "i": "",
        "b": "",
        "tt": "",
    }

    def format_tag(self, tag_name: str, text: str) -> str:
        self.tag(tag_name)
        return text

    def write_entry(self, stream: TextIO, key: str, label: str, text: str) -> None:
        stream.write(f"[{label}] {text}\n")
