"""Port: Backend — the capability contract every output format implements.

A backend owns a symbol table and a tag table, a default file suffix,
and a handful of formatting primitives the rendering engine calls while
walking a text tree. We encourage implementing as many of the common
symbols and tags as possible when writing a new backend:

==================  ==============================================
``ndash``           used to separate pages
``newblock``        used to separate blocks inside an entry
``nbsp``            a non-breakable space
``em``              emphasize text
``strong``          emphasize text even more
``i``               italicize text, not semantic
``b``               embolden text, not semantic
``tt``              typewrite text, not semantic
==================  ==============================================

A plain-text backend only needs to override ``write_entry``; every other
hook has a usable default.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, ClassVar, Iterable, Mapping, Optional, Sequence, TextIO

from bibrender.domain.errors import UndefinedSymbol, UndefinedTag, UnimplementedHook

if TYPE_CHECKING:
    from bibrender.config.models import RenderConfig
    from bibrender.domain.models.entry import Entry
    from bibrender.domain.models.text import Protected


class BaseBackend:
    """Base class for the output backends."""

    name: ClassVar[str] = "base"
    default_suffix: ClassVar[str] = ""
    default_symbols: ClassVar[Mapping[str, str]] = {}
    default_tags: ClassVar[Mapping[str, str]] = {}

    def __init__(
        self,
        symbols: Optional[Mapping[str, str]] = None,
        tags: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._symbols = MappingProxyType({**self.default_symbols, **(symbols or {})})
        self._tags = MappingProxyType({**self.default_tags, **(tags or {})})

    # -- Lookup tables -------------------------------------------------------

    @property
    def symbols(self) -> Mapping[str, str]:
        return self._symbols

    @property
    def tags(self) -> Mapping[str, str]:
        return self._tags

    def symbol(self, name: str) -> str:
        """Return the backend-native text for symbol *name*.

        Raises:
            UndefinedSymbol: If the symbol table has no such entry.
        """
        try:
            return self._symbols[name]
        except KeyError:
            raise UndefinedSymbol(name, self.name) from None

    def tag(self, name: str) -> str:
        """Return the backend-native formatting instruction for tag *name*.

        Raises:
            UndefinedTag: If the tag table has no such entry.
        """
        try:
            return self._tags[name]
        except KeyError:
            raise UndefinedTag(name, self.name) from None

    # -- Formatting primitives -----------------------------------------------

    def format_str(self, value: str) -> str:
        """Format the literal *value*.

        The default implementation returns the string verbatim.
        """
        return value

    def format_tag(self, tag_name: str, text: str) -> str:
        """Format already rendered *text* tagged with *tag_name*.

        The default implementation returns the text unchanged; markup
        backends wrap it in whatever their tag table says.
        """
        return text

    def format_protected(self, node: Protected, text: str) -> str:
        """Format a protected span whose children were rendered into *text*.

        In the LaTeX backend it becomes a ``{braced group}``. Most other
        backends output the rendered text as-is.
        """
        return text

    def render_sequence(self, rendered_list: Sequence[str]) -> str:
        """Combine the rendered children of a composite node.

        The default implementation concatenates them in order.
        """
        return "".join(rendered_list)

    # -- Writers -------------------------------------------------------------

    def write_prologue(self, stream: TextIO, entries: Iterable[Entry] = ()) -> None:
        """Write the document header. No-op by default."""

    def write_epilogue(self, stream: TextIO, entries: Iterable[Entry] = ()) -> None:
        """Write the document footer. No-op by default."""

    def write_entry(self, stream: TextIO, key: str, label: str, text: str) -> None:
        """Write one fully rendered entry. Every backend must override this."""
        raise UnimplementedHook("write_entry", self.name)

    # -- Construction --------------------------------------------------------

    @classmethod
    def from_config(cls, config: RenderConfig) -> BaseBackend:
        """Build a backend with the table overrides configured for it."""
        settings = config.backend_settings(cls.name)
        return cls(symbols=settings.symbols, tags=settings.tags)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
