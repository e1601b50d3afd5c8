"""SDK composition root: the :class:`GoteborgCo` client."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from goteborgco.auth import create_key_resolver
from goteborgco.client.executor import GraphQLExecutor, KeyLocation
from goteborgco.config import ClientConfig
from goteborgco.exceptions import ConfigError, QueryValidationError
from goteborgco.resources import EventsAPI, GuidesAPI, PlacesAPI, SearchAPI, TaxonomiesAPI, TaxonomyAPI

logger = logging.getLogger(__name__)


class GoteborgCo:
    """Client for the Göteborg & Co GraphQL API.

    All resource APIs share one executor and are available as attributes::

        async with GoteborgCo(api_url, key) as api:
            guides = await api.guides.list({"lang": "sv"})

    Args:
        api_url: GraphQL endpoint URL.
        subscription_key: API subscription key.
        key_location: Where the key is sent, see :class:`GraphQLExecutor`.
        timeout: Request timeout in seconds.
        http_client: Optional pre-configured ``httpx.AsyncClient``.
        executor: Optional executor to use instead of building one; when
            given, ``api_url`` and ``subscription_key`` are not required.

    Raises:
        ConfigError: If the URL or key is missing and no executor is given.
    """

    def __init__(
        self,
        api_url: str | None = None,
        subscription_key: str | None = None,
        *,
        key_location: KeyLocation = "query",
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
        executor: GraphQLExecutor | None = None,
    ) -> None:
        if executor is None:
            if not api_url or not subscription_key:
                raise ConfigError("API URL and subscription key are required")
            executor = GraphQLExecutor(
                api_url,
                subscription_key,
                key_location=key_location,
                timeout=timeout,
                http_client=http_client,
            )
        self._executor = executor

        self.guides = GuidesAPI(executor)
        self.events = EventsAPI(executor)
        self.places = PlacesAPI(executor)
        self.search = SearchAPI(executor)
        self.taxonomies = TaxonomiesAPI(executor)
        self.taxonomy = TaxonomyAPI(executor)

    @classmethod
    async def from_config(cls, config: ClientConfig, *, http_client: httpx.AsyncClient | None = None) -> GoteborgCo:
        """Build a client from *config*, resolving the subscription key first."""
        key = await create_key_resolver(config).resolve()
        logger.debug("Creating client for %s (key sent as %s)", config.api_url, config.key_location)
        return cls(
            config.api_url,
            key,
            key_location=config.key_location,
            timeout=config.timeout,
            http_client=http_client,
        )

    @property
    def executor(self) -> GraphQLExecutor:
        return self._executor

    async def query(self, text: str) -> dict[str, Any]:
        """Execute raw GraphQL *text* and return the ``data`` payload."""
        if not text or not text.strip():
            raise QueryValidationError("Query cannot be empty")
        return await self._executor.execute(text)

    async def aclose(self) -> None:
        await self._executor.aclose()

    async def __aenter__(self) -> GoteborgCo:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()
