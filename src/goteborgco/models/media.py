"""Media attachments and their rendered image sizes."""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field

from goteborgco.models.base import Entity


class ImageSize(StrEnum):
    """Named renditions the API may return for a media item."""

    FULL = "full"
    LARGE = "large"
    MEDIUM = "medium"
    THUMBNAIL = "thumbnail"


class Image(Entity):
    """A single rendition with dimensions and source URL."""

    width: int | None = None
    height: int | None = None
    source_url: str | None = None


class MediaSizes(Entity):
    """Available renditions of a media item. No size is guaranteed present."""

    full: Image | None = None
    large: Image | None = None
    medium: Image | None = None
    thumbnail: Image | None = None

    def get_size(self, size: ImageSize | str) -> Image | None:
        return getattr(self, ImageSize(size).value)

    def get_url(self, size: ImageSize | str) -> str | None:
        image = self.get_size(size)
        return image.source_url if image is not None else None

    def get_dimensions(self, size: ImageSize | str) -> tuple[int | None, int | None] | None:
        """Return ``(width, height)`` for *size*, or None if the size is missing."""
        image = self.get_size(size)
        if image is None:
            return None
        return image.width, image.height


class Media(Entity):
    """An image attachment (featured media or gallery item)."""

    id: int | None = None
    credit: str | None = None
    caption: str | None = None
    alt_text: str | None = None
    media_type: str | None = None
    mime_type: str | None = None
    sizes: MediaSizes = Field(default_factory=MediaSizes)

    def get_url(self, size: ImageSize | str = ImageSize.FULL) -> str | None:
        return self.sizes.get_url(size)
