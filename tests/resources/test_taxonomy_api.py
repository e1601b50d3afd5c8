from __future__ import annotations

from typing import Any

import pytest

from goteborgco.exceptions import QueryValidationError
from goteborgco.resources.taxonomies import TaxonomiesAPI
from goteborgco.resources.taxonomy import TaxonomyAPI
from tests.fakes.graphql import RecordingHandler, make_executor


@pytest.mark.asyncio
async def test_list_taxonomies_without_language_sends_empty_filter() -> None:
    handler = RecordingHandler(
        {"data": {"taxonomies": [{"name": "Categories", "value": "categories", "types": ["event"]}]}}
    )
    api = TaxonomiesAPI(make_executor(handler))

    taxonomies = await api.list()

    assert taxonomies[0].is_available_for("event")
    assert handler.last_query.startswith("query ListTaxonomies {")
    assert "taxonomies(filter: {}) {" in handler.last_query


@pytest.mark.asyncio
async def test_list_taxonomies_with_language() -> None:
    handler = RecordingHandler({"data": {"taxonomies": []}})
    api = TaxonomiesAPI(make_executor(handler))

    await api.list({"lang": "en"})

    assert "taxonomies(filter: { lang: en }) {" in handler.last_query


@pytest.mark.asyncio
async def test_list_terms_flat(taxonomy_terms: list[dict[str, Any]]) -> None:
    handler = RecordingHandler({"data": {"taxonomy": taxonomy_terms}})
    api = TaxonomyAPI(make_executor(handler))

    terms = await api.list("categories", {"lang": "sv"})

    assert [term.id for term in terms] == [1, 2, 3]
    assert all(term.children == () for term in terms)
    query = handler.last_query
    assert query.startswith("query GetTaxonomyTerms {")
    assert 'taxonomy(taxonomyName: "categories", filter: { lang: sv }) {' in query


@pytest.mark.asyncio
async def test_list_terms_hierarchical(taxonomy_terms: list[dict[str, Any]]) -> None:
    handler = RecordingHandler({"data": {"taxonomy": taxonomy_terms}})
    api = TaxonomyAPI(make_executor(handler))

    roots = await api.list("categories", hierarchical=True)

    assert [root.id for root in roots] == [1, 3]
    assert [child.id for child in roots[0].children] == [2]
    assert 'taxonomy(taxonomyName: "categories", filter: {}) {' in handler.last_query


@pytest.mark.asyncio
async def test_tree(taxonomy_terms: list[dict[str, Any]]) -> None:
    handler = RecordingHandler({"data": {"taxonomy": taxonomy_terms}})
    api = TaxonomyAPI(make_executor(handler))

    tree = await api.tree("areas")

    assert len(tree) == 3
    assert [term.id for term in tree.orphans()] == [3]


@pytest.mark.asyncio
async def test_blank_taxonomy_name_is_rejected() -> None:
    handler = RecordingHandler()
    api = TaxonomyAPI(make_executor(handler))

    with pytest.raises(QueryValidationError):
        await api.list(" ")

    assert handler.requests == []
