"""Guides API."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from goteborgco.graphql.arguments import filter_value
from goteborgco.graphql.builder import Field, Operation
from goteborgco.graphql.queries import GUIDE_FIELDS
from goteborgco.mapper import hydrate, hydrate_many, hydrate_optional, require_dict, require_list
from goteborgco.models.entity import Related, WpEntity
from goteborgco.models.filters import GuideFilter, Lang
from goteborgco.models.responses import GuideDetail
from goteborgco.resources.base import Resource, by_id_filter, coerce_filter

logger = logging.getLogger(__name__)


class GuidesAPI(Resource):
    """Query and retrieve guide content."""

    async def get_by_id(self, id: int, lang: Lang | str, fields: str | None = None) -> GuideDetail:
        """Fetch one guide with its related content."""
        related = Field(
            "related",
            selections=(
                self._wrap("events", GUIDE_FIELDS),
                self._wrap("guides", GUIDE_FIELDS),
                self._wrap("places", GUIDE_FIELDS),
            ),
        )
        root = Field(
            "guideById",
            {"filter": by_id_filter(id, lang)},
            self._selections(fields, self._wrap("guide", GUIDE_FIELDS), related),
        )
        data, query = await self._fetch(Operation(root, name="GetGuideById"))

        envelope = require_dict(data, "guideById", query=query)
        return GuideDetail(
            guide=hydrate(WpEntity, require_dict(envelope, "guide", query=query), query=query),
            related=hydrate_optional(Related, envelope.get("related"), query=query),
        )

    async def list(
        self,
        filter: GuideFilter | Mapping[str, Any],
        match_date: str | None = None,
        fields: str | None = None,
    ) -> list[WpEntity]:
        """List guides matching *filter*, optionally only those valid on *match_date*."""
        arguments: dict[str, Any] = {}
        filter_arg = filter_value(coerce_filter(GuideFilter, filter))
        if filter_arg:
            arguments["filter"] = filter_arg
        if match_date:
            arguments["matchDate"] = match_date

        root = Field("guides", arguments, self._selections(fields, self._wrap("guides", GUIDE_FIELDS)))
        data, query = await self._fetch(Operation(root, name="ListGuides"))

        envelope = require_dict(data, "guides", query=query)
        guides = hydrate_many(WpEntity, require_list(envelope, "guides", query=query), query=query)
        logger.debug("Hydrated %d guides", len(guides))
        return guides
