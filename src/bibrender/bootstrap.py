"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together. All other layers refer to ports.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from bibrender.application.registry import BackendRegistry, default_registry
from bibrender.application.use_cases.write_bibliography import WriteBibliographyUseCase
from bibrender.config.loader import get_config, load_config
from bibrender.config.models import RenderConfig
from bibrender.domain.ports.backend import BaseBackend
from bibrender.domain.ports.entry_repository import EntryRepositoryPort
from bibrender.infrastructure.persistence.json_repository import JsonEntryRepository


class Container:
    """Simple dependency injection container.

    Usage::

        container = Container()
        uc = container.write_bibliography("html")
        path = uc.execute(entries, Path("refs.html"))
    """

    def __init__(
        self,
        config_path: Optional[Union[str, Path]] = None,
        registry: Optional[BackendRegistry] = None,
    ) -> None:
        self._config = load_config(config_path) if config_path else get_config()
        self._registry = registry or default_registry()
        self._repository = JsonEntryRepository()

    # -- Accessors -----------------------------------------------------------

    @property
    def config(self) -> RenderConfig:
        return self._config

    @property
    def registry(self) -> BackendRegistry:
        return self._registry

    @property
    def repository(self) -> EntryRepositoryPort:
        return self._repository

    def backend(self, name: Optional[str] = None) -> BaseBackend:
        """Return a configured backend (the configured default if *name* is None)."""
        return self._registry.create_backend(name or self._config.default_backend, self._config)

    # -- Use Case factories --------------------------------------------------

    def write_bibliography(self, name: Optional[str] = None) -> WriteBibliographyUseCase:
        """Create a use case writing through backend *name*."""
        return WriteBibliographyUseCase(
            self.backend(name),
            encoding=self._config.encoding,
            max_workers=self._config.max_workers,
        )
