"""Pydantic models for bibrender configuration.

These models validate and type the JSON configuration file that controls
backend selection, output encoding and per-backend table overrides.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator


# ---------------------------------------------------------------------------
# Backends
# ---------------------------------------------------------------------------


class BackendSettings(BaseModel):
    """Overrides applied to one backend's symbol and tag tables."""

    symbols: dict[str, str] = Field(default_factory=dict)
    tags: dict[str, str] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


class RenderConfig(BaseModel):
    """Root configuration model."""

    default_backend: str = "text"
    encoding: str = "utf-8"
    html_title: str = "Bibliography"
    max_workers: Optional[int] = Field(
        None,
        ge=1,
        description="Render entries in a thread pool of this size (None = serial)",
    )
    backends: dict[str, BackendSettings] = Field(default_factory=dict)

    @field_validator("default_backend")
    @classmethod
    def _lower_backend(cls, v: str) -> str:
        return v.lower()

    @field_validator("backends")
    @classmethod
    def _lower_backend_keys(cls, v: dict[str, BackendSettings]) -> dict[str, BackendSettings]:
        return {name.lower(): settings for name, settings in v.items()}

    # ----- Convenience lookups -----

    def backend_settings(self, name: str) -> BackendSettings:
        """Return the overrides for backend *name* (empty when unset)."""
        return self.backends.get(name.lower(), BackendSettings())
