"""Backend registry — maps a format name to a backend class.

The registry is open: third-party code adds a format without touching
this module::

    from bibrender.application.registry import register

    @register("rst")
    class RSTBackend(BaseBackend):
        def write_entry(self, stream, key, label, text):
            stream.write(f".. [{label}] {text}\\n")

Names are case-insensitive. The built-in backends (``html``, ``latex``,
``markdown``, ``text``) are registered the first time a registry is
queried; a name registered earlier keeps its own factory.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, TypeVar

from bibrender.config.models import RenderConfig
from bibrender.domain.errors import UnknownBackend
from bibrender.domain.models.text import TextNode
from bibrender.domain.ports.backend import BaseBackend
from bibrender.domain.rendering import render

logger = logging.getLogger(__name__)

B = TypeVar("B", bound=type[BaseBackend])


class BackendRegistry:
    """Name → backend class table."""

    def __init__(self, builtins: bool = True) -> None:
        self._factories: dict[str, type[BaseBackend]] = {}
        self._builtins_pending = builtins

    def _load_builtins(self) -> None:
        if not self._builtins_pending:
            return
        self._builtins_pending = False
        from bibrender.infrastructure.backends import BUILTIN_BACKENDS

        for backend_cls in BUILTIN_BACKENDS:
            self._factories.setdefault(backend_cls.name, backend_cls)

    # -- Registration --------------------------------------------------------

    def register_backend(self, name: str, factory: type[BaseBackend]) -> None:
        """Register *factory* under *name* (case-insensitive)."""
        key = name.lower()
        if key in self._factories:
            logger.warning("Replacing backend %r (%s)", key, self._factories[key].__name__)
        self._factories[key] = factory
        logger.debug("Registered backend %r -> %s", key, factory.__name__)

    def register(self, name: str) -> Callable[[B], B]:
        """Class decorator form of :meth:`register_backend`."""

        def decorator(factory: B) -> B:
            self.register_backend(name, factory)
            return factory

        return decorator

    def unregister(self, name: str) -> None:
        """Remove *name* from the registry.

        Raises:
            UnknownBackend: If nothing is registered under *name*.
        """
        self._load_builtins()
        key = name.lower()
        if key not in self._factories:
            raise UnknownBackend(name, self._factories)
        del self._factories[key]

    # -- Lookup --------------------------------------------------------------

    def find_backend(self, name: str) -> type[BaseBackend]:
        """Return the backend class registered under *name*.

        Raises:
            UnknownBackend: If the name is not registered.
        """
        self._load_builtins()
        try:
            return self._factories[name.lower()]
        except KeyError:
            raise UnknownBackend(name, self._factories) from None

    def create_backend(self, name: str, config: Optional[RenderConfig] = None) -> BaseBackend:
        """Instantiate the backend *name*, applying *config* overrides if given."""
        factory = self.find_backend(name)
        if config is None:
            return factory()
        return factory.from_config(config)

    def available_backends(self) -> list[str]:
        self._load_builtins()
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        self._load_builtins()
        return isinstance(name, str) and name.lower() in self._factories


# ---------------------------------------------------------------------------
# Process-wide registry
# ---------------------------------------------------------------------------

_registry = BackendRegistry()


def default_registry() -> BackendRegistry:
    return _registry


def register(name: str) -> Callable[[B], B]:
    return _registry.register(name)


def register_backend(name: str, factory: type[BaseBackend]) -> None:
    _registry.register_backend(name, factory)


def find_backend(name: str) -> type[BaseBackend]:
    return _registry.find_backend(name)


def create_backend(name: str, config: Optional[RenderConfig] = None) -> BaseBackend:
    return _registry.create_backend(name, config)


def available_backends() -> list[str]:
    return _registry.available_backends()


def render_as(node: TextNode, backend_name: str, config: Optional[RenderConfig] = None) -> str:
    """Render *node* with the backend registered as *backend_name*.

    Usage::

        text = Text.of("Longcat is ", tagged("em", "looooooong"), "!")
        render_as(text, "html")   # Longcat is <em>looooooong</em>!
        render_as(text, "text")   # Longcat is looooooong!
    """
    return render(node, create_backend(backend_name, config))
