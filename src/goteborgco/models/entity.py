"""The central content entity shared by guides, events, places and search results."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import AliasChoices, Field, field_validator

from goteborgco.models.base import Entity
from goteborgco.models.contact import Contact
from goteborgco.models.filters import Lang
from goteborgco.models.location import Coordinates, Location
from goteborgco.models.media import ImageSize, Media
from goteborgco.models.schedule import CurrentInTime, EventDate
from goteborgco.models.translations import Translations


def _now_iso() -> str:
    return datetime.now(UTC).isoformat()


def _as_list(value: Any) -> Any:
    if isinstance(value, dict):
        return [value]
    return value


class WpEntity(Entity):
    """A guide, event, place or search hit.

    ``featuredmedia`` and ``gallery`` accept either a single object or a list
    in the payload. Only the first featured media item is exposed through
    :meth:`get_featured_media`.
    """

    id: int
    title: str = ""
    excerpt: str = ""
    content: str | None = None
    date: str = Field(default_factory=_now_iso)
    modified: str | None = None
    link: str | None = None
    type: str | None = None
    categories: tuple[int, ...] = ()
    areas: tuple[int, ...] = ()
    tags: tuple[int, ...] = ()
    invisible_tags: tuple[int, ...] = ()
    category_heading: str | None = None
    featuredmedia: tuple[Media, ...] | None = None
    gallery: tuple[Media, ...] | None = None
    location: Location | None = None
    dates: tuple[EventDate, ...] | None = None
    contact: Contact | None = None
    current_in_time: CurrentInTime | None = Field(
        default=None, validation_alias=AliasChoices("current_in_time", "currentInTime")
    )
    translations: Translations | None = None
    place_id: int | None = None
    classification: int | None = None
    is_free: bool | None = Field(default=None, validation_alias=AliasChoices("is_free", "free"))
    lang: Lang = Lang.SV

    @field_validator("featuredmedia", "gallery", mode="before")
    @classmethod
    def normalize_media(cls, value: Any) -> Any:
        return _as_list(value)

    def get_featured_media(self) -> Media | None:
        return self.featuredmedia[0] if self.featuredmedia else None

    def get_image_url(self, size: ImageSize | str = ImageSize.FULL) -> str | None:
        media = self.get_featured_media()
        return media.get_url(size) if media is not None else None

    def get_gallery_urls(self, size: ImageSize | str = ImageSize.FULL) -> list[str]:
        """Return the URLs of gallery items that have *size*, skipping the rest."""
        urls = (media.get_url(size) for media in self.gallery or ())
        return [url for url in urls if url is not None]

    def is_active(self, now: datetime | None = None) -> bool:
        """Return True if the entity has no dates or any of its dates is active."""
        if not self.dates:
            return True
        return any(date.is_active(now) for date in self.dates)

    def get_coordinates(self) -> Coordinates | None:
        return self.location.get_coordinates() if self.location is not None else None

    def get_formatted_address(self) -> str | None:
        return self.location.get_formatted_address() if self.location is not None else None

    def get_contact(self) -> Contact | None:
        return self.contact

    def get_translation(self, lang: Lang | str) -> int | None:
        return self.translations.get_translation(lang) if self.translations is not None else None

    def get_current_in_time(self) -> CurrentInTime | None:
        return self.current_in_time


class Related(Entity):
    """Content related to a single guide, event or place."""

    places: tuple[WpEntity, ...] | None = None
    guides: tuple[WpEntity, ...] | None = None
    events: tuple[WpEntity, ...] | None = None

    def get_all_related(self) -> dict[str, tuple[WpEntity, ...] | None]:
        return {"places": self.places, "guides": self.guides, "events": self.events}

    def has_related_content(self) -> bool:
        return any(bool(group) for group in (self.places, self.guides, self.events))
