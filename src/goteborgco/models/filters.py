"""Filter and sort inputs accepted by the resource APIs.

Filters serialize in field declaration order; ``None`` fields are omitted
from the rendered query.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class Lang(StrEnum):
    """Content language. Rendered as a bare GraphQL enum value."""

    EN = "en"
    SV = "sv"


class SortOrder(StrEnum):
    """Sort direction. Rendered as a bare GraphQL enum value."""

    ASC = "asc"
    DESC = "desc"


class _Filter(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}


class GuideFilter(_Filter):
    lang: Lang
    categories: list[int] | None = None
    areas: list[int] | None = None
    tags: list[int] | None = None
    invisible_tags: list[int] | None = None
    per_page: int | None = None
    page: int | None = None


class EventFilter(_Filter):
    lang: Lang
    places: list[int] | None = None
    categories: list[int] | None = None
    areas: list[int] | None = None
    tags: list[int] | None = None
    invisible_tags: list[int] | None = None
    free: int | None = None
    start: str | None = None
    end: str | None = None
    distance: int | None = None
    coords: str | None = None
    per_page: int | None = None
    page: int | None = None


class PlaceFilter(_Filter):
    lang: Lang
    places: list[int] | None = None
    categories: list[int] | None = None
    areas: list[int] | None = None
    tags: list[int] | None = None
    distance: int | None = None
    coords: str | None = None
    per_page: int | None = None
    page: int | None = None


class LangFilter(_Filter):
    lang: Lang | None = None


class SearchFilter(LangFilter):
    """Search input. ``query`` emptiness is checked by the search API itself."""

    query: str


class SortOptions(_Filter):
    fields: str | list[str] | None = None
    orders: SortOrder | list[SortOrder] | None = None
