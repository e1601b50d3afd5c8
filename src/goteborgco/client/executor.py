"""Async GraphQL executor over ``httpx``."""

from __future__ import annotations

import json
import logging
from types import TracebackType
from typing import Any, Literal

import httpx

from goteborgco.exceptions import (
    GraphQLError,
    HttpStatusError,
    NoDataError,
    QueryValidationError,
    ResponseFormatError,
    TransportError,
)
from goteborgco.graphql.builder import Operation

logger = logging.getLogger(__name__)

KeyLocation = Literal["query", "header"]

KEY_QUERY_PARAM = "subscription-key"
KEY_HEADER = "Ocp-Apim-Subscription-Key"


class GraphQLExecutor:
    """Sends query text to the API endpoint and unwraps the response envelope.

    Every failure surfaces as a distinct :class:`~goteborgco.exceptions.ApiError`
    subclass carrying the attempted query. Nothing is retried.

    Args:
        api_url: GraphQL endpoint URL.
        subscription_key: API subscription key.
        key_location: Send the key as the ``subscription-key`` query
            parameter (``"query"``) or the ``Ocp-Apim-Subscription-Key``
            header (``"header"``).
        timeout: Request timeout in seconds.
        http_client: Pre-configured client. When given, the executor does
            not close it.
    """

    def __init__(
        self,
        api_url: str,
        subscription_key: str,
        *,
        key_location: KeyLocation = "query",
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._api_url = api_url
        self._subscription_key = subscription_key
        self._key_location = key_location
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    @property
    def api_url(self) -> str:
        return self._api_url

    async def __aenter__(self) -> GraphQLExecutor:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def execute(self, query: str | Operation) -> dict[str, Any]:
        """Execute *query* and return the ``data`` payload.

        Raises:
            QueryValidationError: If the query text is empty.
            TransportError: If the request could not complete.
            HttpStatusError: If the response status is not 2xx.
            GraphQLError: If the response carries ``errors``.
            NoDataError: If the response carries neither ``data`` nor ``errors``.
            ResponseFormatError: If the body cannot be decoded or is not a JSON object.
        """
        text = query.render() if isinstance(query, Operation) else query
        if not text or not text.strip():
            raise QueryValidationError("Query cannot be empty")

        logger.debug("Executing GraphQL query (%d chars)", len(text))
        try:
            response = await self._client.post(
                self._api_url,
                params=self._auth_params(),
                headers=self._headers(),
                json={"query": text},
            )
        except httpx.DecodingError as exc:
            raise ResponseFormatError(f"GraphQL response body could not be decoded: {exc}", query=text) from exc
        except httpx.RequestError as exc:
            raise TransportError(f"GraphQL request failed: {exc!r}", query=text) from exc

        if not response.is_success:
            raise HttpStatusError(response.status_code, _error_detail(response), query=text)

        try:
            payload = response.json()
        except ValueError as exc:
            raise ResponseFormatError("GraphQL response is not valid JSON", query=text) from exc
        if not isinstance(payload, dict):
            raise ResponseFormatError("GraphQL response is not a JSON object", query=text)

        errors = payload.get("errors")
        if errors:
            if not isinstance(errors, list):
                errors = [errors]
            raise GraphQLError(errors, query=text)

        data = payload.get("data")
        if data is None:
            raise NoDataError(query=text)
        if not isinstance(data, dict):
            raise ResponseFormatError("GraphQL data payload is not an object", query=text)
        return data

    def _auth_params(self) -> dict[str, str]:
        if self._key_location == "query":
            return {KEY_QUERY_PARAM: self._subscription_key}
        return {}

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._key_location == "header":
            headers[KEY_HEADER] = self._subscription_key
        return headers


def _error_detail(response: httpx.Response) -> str:
    """Extract error detail from a failed response, falling back to raw text."""
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict):
        if body.get("errors"):
            return json.dumps(body["errors"])
        if isinstance(body.get("message"), str):
            return body["message"]
    return response.text
