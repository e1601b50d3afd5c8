"""GeoJSON-style map markers returned alongside place and event listings."""

from __future__ import annotations

from pydantic import Field

from goteborgco.models.base import Entity
from goteborgco.models.location import Coordinates


class Geometry(Entity):
    type: str | None = None
    coordinates: tuple[float, ...] = Field(default_factory=tuple)
    latitude: float | None = None
    longitude: float | None = None

    def get_coordinates(self) -> Coordinates | None:
        """Return the point position; GeoJSON orders coordinates as ``[lng, lat]``."""
        if self.latitude is not None and self.longitude is not None:
            return Coordinates(lat=self.latitude, lng=self.longitude)
        if len(self.coordinates) >= 2:
            return Coordinates(lat=self.coordinates[1], lng=self.coordinates[0])
        return None


class MarkerProperties(Entity):
    id: int
    name: str | None = None
    icon: str | None = None
    thumbnail: str | None = None
    type: str | None = None
    slug: str | None = None


class Feature(Entity):
    type: str | None = None
    geometry: Geometry = Field(default_factory=Geometry)
    properties: MarkerProperties


class Markers(Entity):
    type: str | None = None
    features: tuple[Feature, ...] = Field(default_factory=tuple)

    def get_points(self) -> list[tuple[int, Coordinates]]:
        """Return ``(feature id, position)`` for every feature with a usable position."""
        points: list[tuple[int, Coordinates]] = []
        for feature in self.features:
            coordinates = feature.geometry.get_coordinates()
            if coordinates is not None:
                points.append((feature.properties.id, coordinates))
        return points
