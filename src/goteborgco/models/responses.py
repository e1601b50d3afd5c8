"""Result containers returned by the resource APIs."""

from __future__ import annotations

from pydantic import BaseModel

from goteborgco.models.entity import Related, WpEntity
from goteborgco.models.markers import Markers


class _Result(BaseModel):
    model_config = {"frozen": True}


class GuideDetail(_Result):
    guide: WpEntity
    related: Related | None = None


class EventList(_Result):
    events: tuple[WpEntity, ...]
    markers: Markers | None = None


class EventDetail(_Result):
    event: WpEntity
    related: Related | None = None
    markers: Markers | None = None


class PlaceList(_Result):
    places: tuple[WpEntity, ...]
    markers: Markers | None = None


class PlaceDetail(_Result):
    """A single place together with the events held there."""

    place: WpEntity
    events: tuple[WpEntity, ...] = ()
    related: Related | None = None
    markers: Markers | None = None
