"""Tests for the text node model and bibliography entries."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from bibrender.domain.models import Entry, Protected, String, Symbol, Text, as_node, tagged


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_bare_strings_become_string_nodes(self):
        text = Text.of("Hello", " world")
        assert text.parts == (String(value="Hello"), String(value=" world"))

    def test_untagged_by_default(self):
        assert Text.of("x").tag is None

    def test_tagged_helper(self):
        text = tagged("em", "x")
        assert text.tag == "em"
        assert text.parts == (String(value="x"),)

    def test_protected_of(self):
        node = Protected.of("DNA", Symbol(name="nbsp"))
        assert node.parts == (String(value="DNA"), Symbol(name="nbsp"))

    def test_single_child_accepted(self):
        assert Text(parts="abc").parts == (String(value="abc"),)

    def test_empty_composite(self):
        assert Text().parts == ()

    def test_none_parts_rejected(self):
        with pytest.raises(ValidationError):
            Text(parts=None)

    def test_none_child_rejected(self):
        with pytest.raises(ValidationError):
            Text.of("a", None)

    def test_as_node(self):
        assert as_node("x") == String(value="x")
        sym = Symbol(name="ndash")
        assert as_node(sym) is sym


# ---------------------------------------------------------------------------
# Immutability & serialization
# ---------------------------------------------------------------------------


class TestImmutability:
    def test_nodes_are_frozen(self):
        node = String(value="abc")
        with pytest.raises(ValidationError):
            node.value = "xyz"

    def test_parts_is_a_tuple(self):
        assert isinstance(Text.of("a", "b").parts, tuple)

    def test_equal_trees_compare_equal(self):
        assert Text.of("a", tagged("em", "b")) == Text.of("a", tagged("em", "b"))


class TestSerialization:
    def test_validate_nested_dict(self):
        raw = {
            "kind": "text",
            "parts": [
                "Hello, ",
                {"kind": "symbol", "name": "ndash"},
                {"kind": "text", "tag": "em", "parts": ["world"]},
                {"kind": "protected", "parts": ["DNA"]},
            ],
        }
        node = Text.model_validate(raw)
        assert node == Text.of(
            "Hello, ",
            Symbol(name="ndash"),
            tagged("em", "world"),
            Protected.of("DNA"),
        )

    def test_dump_keeps_kind(self):
        dumped = Text.of(Protected.of("x")).model_dump(mode="json")
        assert dumped["kind"] == "text"
        assert dumped["parts"][0]["kind"] == "protected"
        assert dumped["parts"][0]["parts"][0] == {"kind": "str", "value": "x"}


# ---------------------------------------------------------------------------
# Entry
# ---------------------------------------------------------------------------


class TestEntry:
    def test_plain_text_wrapped(self):
        entry = Entry(key="k1", text="Title", label="1")
        assert entry.text == String(value="Title")

    def test_coerce_tuple(self):
        entry = Entry.coerce(("k1", Text.of("x"), "1"))
        assert entry.key == "k1"
        assert entry.label == "1"
        assert entry.text == Text.of("x")

    def test_coerce_entry_is_identity(self):
        entry = Entry(key="k1", text="x", label="1")
        assert Entry.coerce(entry) is entry

    def test_text_required(self):
        with pytest.raises(ValidationError):
            Entry(key="k1", text=None, label="1")
