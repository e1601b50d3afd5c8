"""Taxonomies API: the taxonomy types available on the endpoint."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from goteborgco.graphql.arguments import filter_value
from goteborgco.graphql.builder import Field, Operation
from goteborgco.graphql.queries import TAXONOMY_FIELDS
from goteborgco.mapper import hydrate_many, require_list
from goteborgco.models.filters import LangFilter
from goteborgco.models.taxonomy import Taxonomy
from goteborgco.resources.base import Resource, coerce_filter

logger = logging.getLogger(__name__)


class TaxonomiesAPI(Resource):
    """Lists the taxonomies available on the API."""

    async def list(
        self,
        filter: LangFilter | Mapping[str, Any] | None = None,
        fields: str | None = None,
    ) -> list[Taxonomy]:
        root = Field(
            "taxonomies",
            {"filter": filter_value(coerce_filter(LangFilter, filter))},
            self._selections(fields, TAXONOMY_FIELDS),
        )
        data, query = await self._fetch(Operation(root, name="ListTaxonomies"))
        taxonomies = hydrate_many(Taxonomy, require_list(data, "taxonomies", query=query), query=query)
        logger.debug("Hydrated %d taxonomies", len(taxonomies))
        return taxonomies
