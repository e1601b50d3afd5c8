"""Places API."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from goteborgco.graphql.arguments import filter_value
from goteborgco.graphql.builder import Field, Operation
from goteborgco.graphql.queries import MARKER_FIELDS, PLACE_FIELDS
from goteborgco.mapper import hydrate, hydrate_many, hydrate_optional, require_dict, require_list
from goteborgco.models.entity import Related, WpEntity
from goteborgco.models.filters import Lang, PlaceFilter
from goteborgco.models.markers import Markers
from goteborgco.models.responses import PlaceDetail, PlaceList
from goteborgco.resources.base import Resource, by_id_filter, coerce_filter

logger = logging.getLogger(__name__)


class PlacesAPI(Resource):
    """Query and retrieve places."""

    async def get_by_id(self, id: int, lang: Lang | str, fields: str | None = None) -> PlaceDetail:
        """Fetch one place with the events held there, related content and markers."""
        related = Field(
            "related",
            selections=(
                self._wrap("events", PLACE_FIELDS),
                self._wrap("guides", PLACE_FIELDS),
                self._wrap("places", PLACE_FIELDS),
            ),
        )
        root = Field(
            "placeById",
            {"filter": by_id_filter(id, lang)},
            self._selections(
                fields,
                self._wrap("place", PLACE_FIELDS),
                self._wrap("events", PLACE_FIELDS),
                related,
                self._wrap("markers", MARKER_FIELDS),
            ),
        )
        data, query = await self._fetch(Operation(root, name="GetPlaceById"))

        envelope = require_dict(data, "placeById", query=query)
        events = envelope.get("events")
        return PlaceDetail(
            place=hydrate(WpEntity, require_dict(envelope, "place", query=query), query=query),
            events=tuple(hydrate_many(WpEntity, require_list(envelope, "events", query=query), query=query))
            if events is not None
            else (),
            related=hydrate_optional(Related, envelope.get("related"), query=query),
            markers=hydrate_optional(Markers, envelope.get("markers"), query=query),
        )

    async def list(self, filter: PlaceFilter | Mapping[str, Any], fields: str | None = None) -> PlaceList:
        arguments: dict[str, Any] = {}
        filter_arg = filter_value(coerce_filter(PlaceFilter, filter))
        if filter_arg:
            arguments["filter"] = filter_arg

        root = Field(
            "places",
            arguments,
            self._selections(fields, self._wrap("places", PLACE_FIELDS), self._wrap("markers", MARKER_FIELDS)),
        )
        data, query = await self._fetch(Operation(root, name="ListPlaces"))

        envelope = require_dict(data, "places", query=query)
        places = hydrate_many(WpEntity, require_list(envelope, "places", query=query), query=query)
        logger.debug("Hydrated %d places", len(places))
        return PlaceList(
            places=tuple(places),
            markers=hydrate_optional(Markers, envelope.get("markers"), query=query),
        )
