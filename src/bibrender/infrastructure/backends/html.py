"""HTML backend — renders entries as an HTML definition list."""

from __future__ import annotations

import html
from typing import TYPE_CHECKING, Iterable, Mapping, Optional, TextIO

from bibrender.domain.ports.backend import BaseBackend

if TYPE_CHECKING:
    from bibrender.config.models import RenderConfig
    from bibrender.domain.models.entry import Entry
    from bibrender.domain.models.text import Protected

_PROLOGUE = """<!DOCTYPE html>
<html>
<head>
<meta charset="{encoding}">
<meta name="generator" content="bibrender">
<title>{title}</title>
</head>
<body>
<dl>
"""

_EPILOGUE = """</dl>
</body>
</html>
"""


class HTMLBackend(BaseBackend):
    """Render text as HTML5 markup."""

    name = "html"
    default_suffix = ".html"
    default_symbols = {
        "ndash": "&ndash;",
        "newblock": "\n",
        "nbsp": "&nbsp;",
    }
    default_tags = {
        "em": "em",
        "strong": "strong",
        "i": "i",
        "b": "b",
        "tt": "code",
    }

    def __init__(
        self,
        symbols: Optional[Mapping[str, str]] = None,
        tags: Optional[Mapping[str, str]] = None,
        title: str = "Bibliography",
        encoding: str = "utf-8",
    ) -> None:
        super().__init__(symbols=symbols, tags=tags)
        self.title = title
        self.encoding = encoding

    @classmethod
    def from_config(cls, config: RenderConfig) -> HTMLBackend:
        settings = config.backend_settings(cls.name)
        return cls(
            symbols=settings.symbols,
            tags=settings.tags,
            title=config.html_title,
            encoding=config.encoding,
        )

    def format_str(self, value: str) -> str:
        return html.escape(value, quote=False)

    def format_tag(self, tag_name: str, text: str) -> str:
        element = self.tag(tag_name)
        return f"<{element}>{text}</{element}>" if text else ""

    def format_protected(self, node: Protected, text: str) -> str:
        return f'<span class="bibtex-protected">{text}</span>' if text else ""

    def write_prologue(self, stream: TextIO, entries: Iterable[Entry] = ()) -> None:
        stream.write(
            _PROLOGUE.format(encoding=self.encoding, title=html.escape(self.title))
        )

    def write_epilogue(self, stream: TextIO, entries: Iterable[Entry] = ()) -> None:
        stream.write(_EPILOGUE)

    def write_entry(self, stream: TextIO, key: str, label: str, text: str) -> None:
        stream.write(f"<dt>{html.escape(label)}</dt>\n<dd>{text}</dd>\n")
