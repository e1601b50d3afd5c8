"""Postal address and map position of an entity."""

from __future__ import annotations

from goteborgco.models.base import Entity


class Coordinates(Entity):
    lat: float
    lng: float


class Location(Entity):
    address: str | None = None
    lat: float | None = None
    lng: float | None = None
    zoom: int | float | None = None
    place_id: str | None = None
    name: str | None = None
    street_number: str | None = None
    street_name: str | None = None
    state: str | None = None
    post_code: str | None = None
    country: str | None = None
    country_short: str | None = None

    model_config = {"coerce_numbers_to_str": True}

    def get_coordinates(self) -> Coordinates | None:
        """Return the position, or None unless both lat and lng are set."""
        if self.lat is None or self.lng is None:
            return None
        return Coordinates(lat=self.lat, lng=self.lng)

    def get_formatted_address(self) -> str | None:
        parts = [self.street_name, self.street_number, self.post_code, self.state, self.country]
        present = [part for part in parts if part]
        return ", ".join(present) if present else None

    def get_short_address(self) -> str | None:
        present = [part for part in (self.street_name, self.street_number) if part]
        return " ".join(present) if present else None
