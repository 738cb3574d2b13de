"""Infrastructure layer: concrete backends and persistence.

Implements the domain ports with concrete technology:

- ``backends``: HTML, LaTeX, Markdown and plain text output formats.
- ``persistence``: JSON storage for bibliography entries.
"""

from bibrender.infrastructure.persistence.json_repository import JsonEntryRepository

__all__ = ["JsonEntryRepository"]
