"""Events API."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from goteborgco.graphql.arguments import filter_value, sort_value
from goteborgco.graphql.builder import Field, Operation
from goteborgco.graphql.queries import EVENT_FIELDS, MARKER_FIELDS
from goteborgco.mapper import hydrate, hydrate_many, hydrate_optional, require_dict, require_list
from goteborgco.models.entity import Related, WpEntity
from goteborgco.models.filters import EventFilter, Lang, SortOptions
from goteborgco.models.markers import Markers
from goteborgco.models.responses import EventDetail, EventList
from goteborgco.resources.base import Resource, by_id_filter, coerce_filter

logger = logging.getLogger(__name__)


class EventsAPI(Resource):
    """Query and retrieve events, with their map markers."""

    async def get_by_id(self, id: int, lang: Lang | str, fields: str | None = None) -> EventDetail:
        related = Field(
            "related",
            selections=(
                self._wrap("events", EVENT_FIELDS),
                self._wrap("guides", EVENT_FIELDS),
                self._wrap("places", EVENT_FIELDS),
            ),
        )
        root = Field(
            "eventById",
            {"filter": by_id_filter(id, lang)},
            self._selections(
                fields,
                self._wrap("event", EVENT_FIELDS),
                related,
                self._wrap("markers", MARKER_FIELDS),
            ),
        )
        data, query = await self._fetch(Operation(root, name="GetEventById"))

        envelope = require_dict(data, "eventById", query=query)
        return EventDetail(
            event=hydrate(WpEntity, require_dict(envelope, "event", query=query), query=query),
            related=hydrate_optional(Related, envelope.get("related"), query=query),
            markers=hydrate_optional(Markers, envelope.get("markers"), query=query),
        )

    async def list(
        self,
        filter: EventFilter | Mapping[str, Any],
        sort_by: SortOptions | Mapping[str, Any] | None = None,
        fields: str | None = None,
    ) -> EventList:
        """List events matching *filter*, sorted by *sort_by* when given.

        Returns:
            The events and, when the API provides them, their map markers.
        """
        arguments: dict[str, Any] = {}
        filter_arg = filter_value(coerce_filter(EventFilter, filter))
        if filter_arg:
            arguments["filter"] = filter_arg
        if sort_by is not None:
            sort_arg = sort_value(coerce_filter(SortOptions, sort_by))
            if sort_arg:
                arguments["sortBy"] = sort_arg

        root = Field(
            "events",
            arguments,
            self._selections(fields, self._wrap("events", EVENT_FIELDS), self._wrap("markers", MARKER_FIELDS)),
        )
        data, query = await self._fetch(Operation(root, name="ListEvents"))

        envelope = require_dict(data, "events", query=query)
        events = hydrate_many(WpEntity, require_list(envelope, "events", query=query), query=query)
        logger.debug("Hydrated %d events", len(events))
        return EventList(
            events=tuple(events),
            markers=hydrate_optional(Markers, envelope.get("markers"), query=query),
        )
