"""Common base for Revolt wire models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class RevoltModel(BaseModel):
    """Immutable model mirroring a JSON shape from the Revolt API.

    Optional fields default to ``None``. Whether a key was actually present in
    the source JSON is tracked separately, so an absent key ("missing") is
    distinguishable from an explicit ``null``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def is_missing(self, name: str) -> bool:
        """True if ``name`` was absent from the JSON (or constructor call)."""
        if name not in type(self).model_fields:
            raise AttributeError(f"{type(self).__name__} has no field {name!r}")
        return name not in self.model_fields_set

    def to_payload(self) -> dict[str, Any]:
        """Serialize for a request body, omitting every missing field."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
