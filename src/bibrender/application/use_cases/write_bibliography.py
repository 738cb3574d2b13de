"""Use Case: Write Bibliography.

Renders a list of entries through an injected backend, either into a
string or into a file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Union

from bibrender.application.writer import EntryLike, write_to_file, write_to_string
from bibrender.domain.ports.backend import BaseBackend


class WriteBibliographyUseCase:
    """Orchestrate bibliography output through an injected backend."""

    def __init__(
        self,
        backend: BaseBackend,
        *,
        encoding: str = "utf-8",
        max_workers: Optional[int] = None,
    ) -> None:
        self._backend = backend
        self._encoding = encoding
        self._max_workers = max_workers

    @property
    def backend(self) -> BaseBackend:
        return self._backend

    def execute(
        self,
        entries: Iterable[EntryLike],
        output_path: Optional[Path] = None,
    ) -> Union[str, Path]:
        """Render the entries.

        Args:
            entries: The bibliography, in output order.
            output_path: Target file. When ``None`` the output is returned
                as a string.

        Returns:
            The rendered bibliography, or the path it was written to.
        """
        if output_path is None:
            return write_to_string(self._backend, entries, max_workers=self._max_workers)
        return write_to_file(
            self._backend,
            entries,
            output_path,
            encoding=self._encoding,
            max_workers=self._max_workers,
        )
