"""Bibliography writer — stream a list of entries through a backend.

Output is always ``prologue, entry 1, entry 2, ..., epilogue``. Rendering
may run in a thread pool (``max_workers``), but ``write_entry`` is still
called once per entry, in input order, from the calling thread.
"""

from __future__ import annotations

import io
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional, TextIO, Union

from bibrender.domain.errors import ResourceError
from bibrender.domain.models.entry import Entry
from bibrender.domain.ports.backend import BaseBackend
from bibrender.domain.rendering import render

logger = logging.getLogger(__name__)

EntryLike = Union[Entry, tuple[str, Any, str]]


def write_to_stream(
    backend: BaseBackend,
    entries: Iterable[EntryLike],
    stream: Optional[TextIO] = None,
    *,
    max_workers: Optional[int] = None,
) -> TextIO:
    """Write prologue, every rendered entry and epilogue to *stream*.

    Args:
        backend: Backend instance producing the markup.
        entries: ``Entry`` objects or ``(key, text, label)`` triples.
        stream: Any writable text stream; a fresh ``StringIO`` if omitted.
        max_workers: Render entries in a thread pool of this size.

    Returns:
        The stream that was written to.

    Raises:
        UndefinedSymbol, UndefinedTag: If an entry cannot be rendered.
        UnimplementedHook: If the backend does not implement ``write_entry``.
    """
    if stream is None:
        stream = io.StringIO()
    entry_list = [Entry.coerce(item) for item in entries]

    backend.write_prologue(stream, entry_list)
    for entry, text in zip(entry_list, _render_entries(backend, entry_list, max_workers)):
        backend.write_entry(stream, entry.key, entry.label, text)
    backend.write_epilogue(stream, entry_list)

    logger.info("Wrote %d entries with backend %r", len(entry_list), backend.name)
    return stream


def _render_entries(
    backend: BaseBackend,
    entries: list[Entry],
    max_workers: Optional[int],
) -> Iterator[str]:
    if not max_workers or max_workers < 2 or len(entries) < 2:
        for entry in entries:
            yield render(entry.text, backend)
        return

    # executor.map yields results in submission order
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        yield from executor.map(lambda entry: render(entry.text, backend), entries)


def write_to_string(
    backend: BaseBackend,
    entries: Iterable[EntryLike],
    *,
    max_workers: Optional[int] = None,
) -> str:
    """Render *entries* into an in-memory buffer and return its contents."""
    with io.StringIO() as buffer:
        write_to_stream(backend, entries, buffer, max_workers=max_workers)
        return buffer.getvalue()


def write_to_file(
    backend: BaseBackend,
    entries: Iterable[EntryLike],
    path: Union[str, Path],
    *,
    encoding: str = "utf-8",
    max_workers: Optional[int] = None,
) -> Path:
    """Render *entries* into the file at *path*.

    The file is closed on every exit path, including a rendering failure
    halfway through the bibliography.

    Raises:
        ResourceError: If the file cannot be opened, written or closed.
    """
    path = Path(path)
    try:
        with open(path, "w", encoding=encoding) as stream:
            write_to_stream(backend, entries, stream, max_workers=max_workers)
    except OSError as exc:
        raise ResourceError(path, exc.strerror or str(exc)) from exc
    return path
