"""Contact details attached to places and events."""

from __future__ import annotations

from goteborgco.models.base import Entity


class Contact(Entity):
    email: str | None = None
    phone: str | None = None
    website: str | None = None
    facebook: str | None = None
    instagram: str | None = None

    def get_social_links(self) -> dict[str, str | None]:
        return {"facebook": self.facebook, "instagram": self.instagram}

    def get_contact_methods(self) -> dict[str, str | None]:
        return {"email": self.email, "phone": self.phone, "website": self.website}

    def has_contact_info(self) -> bool:
        return any((self.email, self.phone, self.website, self.facebook, self.instagram))
