"""Tests for the built-in HTML, LaTeX, Markdown and plain text backends."""

from __future__ import annotations

import pytest

from bibrender.application.writer import write_to_string
from bibrender.domain.errors import UndefinedTag
from bibrender.domain.models import Protected, Symbol, Text, tagged
from bibrender.domain.rendering import render
from bibrender.infrastructure.backends import (
    HTMLBackend,
    LaTeXBackend,
    MarkdownBackend,
    TextBackend,
)

LONGCAT = Text.of("Longcat is ", tagged("em", "looooooong"), "!")


# ---------------------------------------------------------------------------
# Common contract
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("backend_cls", [HTMLBackend, LaTeXBackend, MarkdownBackend, TextBackend])
class TestCommonTables:
    def test_standard_symbols_present(self, backend_cls):
        backend = backend_cls()
        for name in ("ndash", "newblock", "nbsp"):
            assert name in backend.symbols

    def test_standard_tags_present(self, backend_cls):
        backend = backend_cls()
        for name in ("em", "strong", "i", "b", "tt"):
            assert name in backend.tags

    def test_unknown_tag_fails(self, backend_cls):
        with pytest.raises(UndefinedTag):
            render(tagged("blink", "x"), backend_cls())

    def test_suffix_starts_with_dot(self, backend_cls):
        assert backend_cls.default_suffix.startswith(".")


# ---------------------------------------------------------------------------
# HTML
# ---------------------------------------------------------------------------


class TestHTMLBackend:
    def test_longcat(self):
        assert render(LONGCAT, HTMLBackend()) == "Longcat is <em>looooooong</em>!"

    def test_escapes_literals(self):
        assert render(Text.of("a < b & c"), HTMLBackend()) == "a &lt; b &amp; c"

    def test_tt_uses_code(self):
        assert render(tagged("tt", "x"), HTMLBackend()) == "<code>x</code>"

    def test_empty_tag_dropped(self):
        assert render(tagged("em"), HTMLBackend()) == ""

    def test_protected_span(self):
        assert render(Protected.of("DNA"), HTMLBackend()) == (
            '<span class="bibtex-protected">DNA</span>'
        )

    def test_symbols(self):
        text = Text.of("1", Symbol(name="ndash"), "2", Symbol(name="nbsp"))
        assert render(text, HTMLBackend()) == "1&ndash;2&nbsp;"

    def test_document(self):
        out = write_to_string(HTMLBackend(title="Refs & more"), [("k1", "Title", "1")])
        assert out.startswith("<!DOCTYPE html>")
        assert "<title>Refs &amp; more</title>" in out
        assert '<meta charset="utf-8">' in out
        assert "<dt>1</dt>\n<dd>Title</dd>\n" in out
        assert out.endswith("</dl>\n</body>\n</html>\n")


# ---------------------------------------------------------------------------
# LaTeX
# ---------------------------------------------------------------------------


class TestLaTeXBackend:
    def test_longcat(self):
        assert render(LONGCAT, LaTeXBackend()) == "Longcat is \\emph{looooooong}!"

    def test_literals_verbatim(self):
        assert render(Text.of("\\'e & co"), LaTeXBackend()) == "\\'e & co"

    def test_protected_braced(self):
        assert render(Protected.of("DNA"), LaTeXBackend()) == "{DNA}"

    def test_strong(self):
        assert render(tagged("strong", "x"), LaTeXBackend()) == "\\textbf{x}"

    def test_newblock(self):
        text = Text.of("A.", Symbol(name="newblock"), "B.")
        assert render(text, LaTeXBackend()) == "A.\n\\newblock B."

    def test_thebibliography(self):
        entries = [("knuth", "Literate", "1"), ("lamport", "LaTeX", "10")]
        assert write_to_string(LaTeXBackend(), entries) == (
            "\\begin{thebibliography}{10}"
            "\n\n\\bibitem[1]{knuth}\nLiterate"
            "\n\n\\bibitem[10]{lamport}\nLaTeX"
            "\n\n\\end{thebibliography}\n"
        )

    def test_single_entry_layout(self):
        assert write_to_string(LaTeXBackend(), [("k", "T", "1")]) == (
            "\\begin{thebibliography}{1}\n\n\\bibitem[1]{k}\nT\n\n\\end{thebibliography}\n"
        )

    def test_empty_bibliography(self):
        assert write_to_string(LaTeXBackend(), []) == (
            "\\begin{thebibliography}{}\n\n\\end{thebibliography}\n"
        )


# ---------------------------------------------------------------------------
# Markdown
# ---------------------------------------------------------------------------


class TestMarkdownBackend:
    def test_longcat(self):
        assert render(LONGCAT, MarkdownBackend()) == "Longcat is *looooooong*!"

    def test_escapes_special_characters(self):
        assert render(Text.of("a_b*c"), MarkdownBackend()) == "a\\_b\\*c"

    def test_backslash_escaped_once(self):
        assert render(Text.of("\\*"), MarkdownBackend()) == "\\\\\\*"

    def test_strong_and_tt(self):
        text = Text.of(tagged("strong", "x"), tagged("tt", "y"))
        assert render(text, MarkdownBackend()) == "**x**`y`"

    def test_entry(self):
        assert write_to_string(MarkdownBackend(), [("k", "Title", "1")]) == "[1] Title\n"


# ---------------------------------------------------------------------------
# Plain text
# ---------------------------------------------------------------------------


class TestTextBackend:
    def test_longcat(self):
        assert render(LONGCAT, TextBackend()) == "Longcat is looooooong!"

    def test_symbols(self):
        text = Text.of("1", Symbol(name="ndash"), "2", Symbol(name="newblock"), "x")
        assert render(text, TextBackend()) == "1-2 x"

    def test_protected_plain(self):
        assert render(Protected.of("DNA"), TextBackend()) == "DNA"

    def test_entries(self):
        entries = [("a", "First", "1"), ("b", "Second", "2")]
        assert write_to_string(TextBackend(), entries) == "[1] First\n[2] Second\n"
