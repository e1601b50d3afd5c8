"""Common base for entities hydrated from API responses."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, model_validator


class Entity(BaseModel):
    """Immutable view over one response fragment.

    Explicit ``null`` values in the payload are treated like absent keys, so
    fields fall back to their declared defaults (``None`` unless documented
    otherwise). Unknown keys are ignored.
    """

    model_config = {"frozen": True, "extra": "ignore", "populate_by_name": True}

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data
