"""Tests for the GoteborgCo facade."""

from __future__ import annotations

import httpx
import pytest

from goteborgco.config import ClientConfig
from goteborgco.exceptions import AuthenticationError, ConfigError, QueryValidationError
from goteborgco.resources import EventsAPI, GuidesAPI, PlacesAPI, SearchAPI, TaxonomiesAPI, TaxonomyAPI
from goteborgco.sdk import GoteborgCo
from tests.fakes.graphql import API_URL, RecordingHandler, make_executor


def test_requires_url_and_key() -> None:
    with pytest.raises(ConfigError, match="API URL and subscription key are required"):
        GoteborgCo(API_URL, "")
    with pytest.raises(ConfigError):
        GoteborgCo(None, "key")


def test_resources_share_one_executor() -> None:
    executor = make_executor(RecordingHandler())
    api = GoteborgCo(executor=executor)

    resources = [api.guides, api.events, api.places, api.search, api.taxonomies, api.taxonomy]
    types = [GuidesAPI, EventsAPI, PlacesAPI, SearchAPI, TaxonomiesAPI, TaxonomyAPI]
    assert [type(resource) for resource in resources] == types
    assert all(resource._executor is executor for resource in resources)
    assert api.executor is executor


@pytest.mark.asyncio
async def test_raw_query_returns_data() -> None:
    handler = RecordingHandler({"data": {"taxonomies": []}})
    api = GoteborgCo(executor=make_executor(handler))

    assert await api.query("query { taxonomies { name } }") == {"taxonomies": []}
    assert handler.last_query == "query { taxonomies { name } }"


@pytest.mark.asyncio
async def test_raw_query_rejects_empty_text() -> None:
    handler = RecordingHandler()
    api = GoteborgCo(executor=make_executor(handler))

    with pytest.raises(QueryValidationError):
        await api.query(" ")

    assert handler.requests == []


@pytest.mark.asyncio
async def test_from_config_resolves_key_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GOTEBORGCO_SUBSCRIPTION_KEY", "env-key")
    handler = RecordingHandler({"data": {"taxonomies": []}})
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    config = ClientConfig(api_url=API_URL, auth="env", key_location="header")

    async with await GoteborgCo.from_config(config, http_client=http_client) as api:
        await api.taxonomies.list()

    assert handler.requests[0].headers["Ocp-Apim-Subscription-Key"] == "env-key"
    assert http_client.is_closed is False
    await http_client.aclose()


@pytest.mark.asyncio
async def test_from_config_fails_without_env_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GOTEBORGCO_SUBSCRIPTION_KEY", raising=False)

    with pytest.raises(AuthenticationError):
        await GoteborgCo.from_config(ClientConfig(api_url=API_URL, auth="env"))
