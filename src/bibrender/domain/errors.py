"""Domain errors — custom exceptions for bibrender.

Every failure the library can signal derives from ``BibRenderError`` so
callers can catch the whole family, while each subclass stays distinct
enough to tell a bad backend name from a malformed text tree or an I/O
failure.
"""

from __future__ import annotations

from typing import Iterable


class BibRenderError(Exception):
    """Base exception for all bibrender errors."""


class UndefinedSymbol(BibRenderError, KeyError):
    """Raised when a symbol name is missing from a backend's symbol table."""

    def __init__(self, name: str, backend: str = "") -> None:
        self.name = name
        self.backend = backend
        super().__init__(name)

    def __str__(self) -> str:
        where = f" in backend '{self.backend}'" if self.backend else ""
        return f"Undefined symbol '{self.name}'{where}"


class UndefinedTag(BibRenderError, KeyError):
    """Raised when a tag name is missing from a backend's tag table."""

    def __init__(self, name: str, backend: str = "") -> None:
        self.name = name
        self.backend = backend
        super().__init__(name)

    def __str__(self) -> str:
        where = f" in backend '{self.backend}'" if self.backend else ""
        return f"Undefined tag '{self.name}'{where}"


class UnknownBackend(BibRenderError, LookupError):
    """Raised when the registry has no backend under the requested name."""

    def __init__(self, name: str, available: Iterable[str] = ()) -> None:
        self.name = name
        self.available = sorted(available)
        super().__init__(name)

    def __str__(self) -> str:
        known = ", ".join(self.available) or "none"
        return f"No such backend: '{self.name}' (available: {known})"


class UnimplementedHook(BibRenderError, NotImplementedError):
    """Raised when a backend does not override a mandatory hook."""

    def __init__(self, hook: str, backend: str = "") -> None:
        self.hook = hook
        self.backend = backend
        super().__init__(hook)

    def __str__(self) -> str:
        return f"Backend '{self.backend or '?'}' must override {self.hook}()"


class ResourceError(BibRenderError):
    """Raised when the output destination cannot be opened, written or closed."""

    def __init__(self, path: object, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write to {path}: {reason}")


class ConfigurationError(BibRenderError):
    """Raised when configuration is invalid or missing."""


class EntryLoadError(BibRenderError):
    """Raised when a bibliography entries file is missing or malformed."""
