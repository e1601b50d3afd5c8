"""Search API across places, events and guides."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from goteborgco.exceptions import QueryValidationError
from goteborgco.graphql.arguments import filter_value, sort_value
from goteborgco.graphql.builder import Field, Operation
from goteborgco.graphql.queries import SEARCH_FIELDS
from goteborgco.mapper import hydrate_many, require_dict, require_list
from goteborgco.models.entity import WpEntity
from goteborgco.models.filters import Lang, SearchFilter, SortOptions
from goteborgco.resources.base import Resource, coerce_filter

logger = logging.getLogger(__name__)

_LANGS = frozenset(lang.value for lang in Lang)


def _check_search_filter(filter: SearchFilter | Mapping[str, Any]) -> None:
    if isinstance(filter, SearchFilter):
        text, lang = filter.query, filter.lang
    else:
        text, lang = filter.get("query"), filter.get("lang")
    if not isinstance(text, str) or not text.strip():
        raise QueryValidationError("Search query cannot be empty")
    if lang is not None and not (isinstance(lang, str) and lang in _LANGS):
        raise QueryValidationError('Language must be either "en" or "sv"')


class SearchAPI(Resource):
    """Free-text search over all content types."""

    async def query(
        self,
        filter: SearchFilter | Mapping[str, Any],
        sort: SortOptions | Mapping[str, Any] | None = None,
        fields: str | None = None,
    ) -> list[WpEntity]:
        """Search content matching ``filter.query``.

        Args:
            filter: Search text plus optional ``lang``.
            sort: Optional sort fields and orders.
            fields: Selection text replacing the default ``results { ... }``.

        Raises:
            QueryValidationError: If the query is blank or ``lang`` is
                neither ``en`` nor ``sv``. Nothing is sent in that case.
        """
        _check_search_filter(filter)
        arguments: dict[str, Any] = {"filter": filter_value(coerce_filter(SearchFilter, filter))}
        if sort is not None:
            sort_arg = sort_value(coerce_filter(SortOptions, sort))
            if sort_arg:
                arguments["sortBy"] = sort_arg

        root = Field("search", arguments, self._selections(fields, self._wrap("results", SEARCH_FIELDS)))
        data, query = await self._fetch(Operation(root, name="Search"))

        envelope = require_dict(data, "search", query=query)
        results = hydrate_many(WpEntity, require_list(envelope, "results", query=query), query=query)
        logger.debug("Search returned %d results", len(results))
        return results
