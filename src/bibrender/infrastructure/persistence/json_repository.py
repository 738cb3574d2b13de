"""JSON repository — implements EntryRepositoryPort using JSON files.

The file holds either a list of entries or an object with an ``entries``
key. Each entry's ``text`` is a serialized text node::

    [
      {
        "key": "knuth1984",
        "label": "1",
        "text": {"kind": "text", "parts": [
          "Donald Knuth. ",
          {"kind": "text", "tag": "em", "parts": ["Literate Programming"]},
          {"kind": "symbol", "name": "newblock"},
          "1984."
        ]}
      }
    ]

Bare strings are accepted wherever a node is expected. ``kind`` may be
omitted: an object with ``value`` is a string, one with ``name`` a symbol,
and one with ``parts`` defaults to ``"text"``. Protected spans must be
written with ``"kind": "protected"``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from bibrender.domain.errors import EntryLoadError
from bibrender.domain.models.entry import Entry
from bibrender.domain.ports.entry_repository import EntryRepositoryPort

logger = logging.getLogger(__name__)


class JsonEntryRepository(EntryRepositoryPort):
    """Persist bibliography entries as JSON files."""

    def save(self, entries: list[Entry], path: Path) -> None:
        """Serialize entries to JSON and write to *path*."""
        path.parent.mkdir(parents=True, exist_ok=True)
        data = [entry.model_dump(mode="json") for entry in entries]
        path.write_text(
            json.dumps(data, indent=2, ensure_ascii=False),
            encoding="utf-8",
        )

    def load(self, path: Path) -> list[Entry]:
        """Load entries from a JSON file at *path*.

        Raises:
            EntryLoadError: If the file is missing, not JSON, or not a list
                of valid entries.
        """
        if not path.exists():
            raise EntryLoadError(f"Entries file not found: {path}")
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise EntryLoadError(f"Invalid JSON in {path}: {exc}") from exc

        if isinstance(data, dict) and "entries" in data:
            data = data["entries"]
        if not isinstance(data, list):
            raise EntryLoadError(f"Unexpected JSON format in {path}")

        try:
            entries = [Entry.model_validate(item) for item in data]
        except ValidationError as exc:
            raise EntryLoadError(f"Invalid entry in {path}: {exc}") from exc
        logger.debug("Loaded %d entries from %s", len(entries), path)
        return entries
