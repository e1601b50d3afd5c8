"""Taxonomy API: the terms inside one taxonomy, flat or as a hierarchy."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from goteborgco.exceptions import QueryValidationError
from goteborgco.graphql.arguments import filter_value
from goteborgco.graphql.builder import Field, Operation
from goteborgco.graphql.queries import TAXONOMY_TERM_FIELDS
from goteborgco.mapper import build_hierarchy, hydrate_many, require_list
from goteborgco.models.filters import LangFilter
from goteborgco.models.taxonomy import TaxonomyTerm, TaxonomyTree
from goteborgco.resources.base import Resource, coerce_filter

logger = logging.getLogger(__name__)

LangFilterArg = LangFilter | Mapping[str, Any] | None


class TaxonomyAPI(Resource):
    """Lists the terms of a single taxonomy."""

    async def _terms(self, taxonomy_name: str, filter: LangFilterArg, fields: str | None) -> list[TaxonomyTerm]:
        if not taxonomy_name or not taxonomy_name.strip():
            raise QueryValidationError("Taxonomy name cannot be empty")
        root = Field(
            "taxonomy",
            {
                "taxonomyName": taxonomy_name,
                "filter": filter_value(coerce_filter(LangFilter, filter)),
            },
            self._selections(fields, TAXONOMY_TERM_FIELDS),
        )
        data, query = await self._fetch(Operation(root, name="GetTaxonomyTerms"))
        terms = hydrate_many(TaxonomyTerm, require_list(data, "taxonomy", query=query), query=query)
        logger.debug("Hydrated %d terms of taxonomy %s", len(terms), taxonomy_name)
        return terms

    async def tree(self, taxonomy_name: str, filter: LangFilterArg = None) -> TaxonomyTree:
        """Fetch the terms of *taxonomy_name* indexed by id and parent."""
        return TaxonomyTree(await self._terms(taxonomy_name, filter, None))

    async def list(
        self,
        taxonomy_name: str,
        filter: LangFilterArg = None,
        fields: str | None = None,
        hierarchical: bool = False,
    ) -> list[TaxonomyTerm]:
        """List terms of *taxonomy_name*.

        With ``hierarchical=True`` only root terms are returned, each with
        its descendants nested under ``children``. Terms whose parent is
        missing from the response are treated as roots.
        """
        terms = await self._terms(taxonomy_name, filter, fields)
        if not hierarchical:
            return terms
        return build_hierarchy(terms)
