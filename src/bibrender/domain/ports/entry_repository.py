"""Port: Entry repository — load and save bibliography entries."""

from abc import ABC, abstractmethod
from pathlib import Path

from bibrender.domain.models.entry import Entry


class EntryRepositoryPort(ABC):
    """Contract for persisting formatted bibliography entries."""

    @abstractmethod
    def save(self, entries: list[Entry], path: Path) -> None:
        """Persist entries to storage."""
        ...

    @abstractmethod
    def load(self, path: Path) -> list[Entry]:
        """Load entries from storage."""
        ...
