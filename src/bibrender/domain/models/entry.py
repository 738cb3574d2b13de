"""Bibliography entry: one (key, text, label) unit of output."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bibrender.domain.models.text import TextNode, as_node


class Entry(BaseModel):
    """A single entry of a formatted bibliography."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Unique citation key, e.g. 'knuth1984'")
    text: TextNode
    label: str = Field(..., description="Display label, typically the citation marker")

    @field_validator("text", mode="before")
    @classmethod
    def _wrap_plain_text(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("entry text must not be None")
        if isinstance(value, str):
            return as_node(value)
        return value

    @classmethod
    def coerce(cls, item: Any) -> Entry:
        """Accept an ``Entry`` or a ``(key, text, label)`` triple."""
        if isinstance(item, cls):
            return item
        key, text, label = item
        return cls(key=key, text=text, label=label)
