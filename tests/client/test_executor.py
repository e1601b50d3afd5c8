from __future__ import annotations

import json

import httpx
import pytest

from goteborgco.client.executor import GraphQLExecutor
from goteborgco.exceptions import (
    GraphQLError,
    HttpStatusError,
    NoDataError,
    QueryValidationError,
    ResponseFormatError,
    TransportError,
)
from goteborgco.graphql.builder import Field, Operation
from tests.fakes.graphql import API_URL, RecordingHandler, make_executor

QUERY = "query { guides { guides { id } } }"


@pytest.mark.asyncio
async def test_execute_posts_query_and_returns_data() -> None:
    handler = RecordingHandler({"data": {"guides": {"guides": []}}})
    executor = make_executor(handler)

    data = await executor.execute(QUERY)

    assert data == {"guides": {"guides": []}}
    (request,) = handler.requests
    assert request.method == "POST"
    assert request.url.params["subscription-key"] == "test-key"
    assert str(request.url).startswith(API_URL + "?")
    assert request.headers["Accept"] == "application/json"
    assert json.loads(request.content) == {"query": QUERY}


@pytest.mark.asyncio
async def test_subscription_key_can_be_sent_as_header() -> None:
    handler = RecordingHandler({"data": {}})
    executor = make_executor(handler, key_location="header")

    await executor.execute(QUERY)

    (request,) = handler.requests
    assert request.headers["Ocp-Apim-Subscription-Key"] == "test-key"
    assert "subscription-key" not in request.url.params


@pytest.mark.asyncio
async def test_execute_accepts_operation() -> None:
    handler = RecordingHandler({"data": {}})
    executor = make_executor(handler)

    await executor.execute(Operation(Field("taxonomies", selections=("name",)), name="ListTaxonomies"))

    assert handler.last_query.startswith("query ListTaxonomies {")


@pytest.mark.asyncio
@pytest.mark.parametrize("query", ["", "   "])
async def test_empty_query_is_rejected_without_request(query: str) -> None:
    handler = RecordingHandler()
    executor = make_executor(handler)

    with pytest.raises(QueryValidationError):
        await executor.execute(query)

    assert handler.requests == []


@pytest.mark.asyncio
async def test_graphql_errors_on_success_status() -> None:
    handler = RecordingHandler({"errors": [{"message": "Cannot query field 'x'"}], "data": None})
    executor = make_executor(handler)

    with pytest.raises(GraphQLError) as exc_info:
        await executor.execute(QUERY)

    assert exc_info.value.messages == ["Cannot query field 'x'"]
    assert exc_info.value.query == QUERY
    assert QUERY in str(exc_info.value)


@pytest.mark.asyncio
async def test_http_status_error_uses_errors_body() -> None:
    handler = RecordingHandler(httpx.Response(500, json={"errors": [{"message": "internal"}]}))
    executor = make_executor(handler)

    with pytest.raises(HttpStatusError) as exc_info:
        await executor.execute(QUERY)

    assert exc_info.value.status_code == 500
    assert exc_info.value.detail == '[{"message": "internal"}]'
    assert exc_info.value.retryable is True


@pytest.mark.asyncio
async def test_http_status_error_uses_message_body() -> None:
    handler = RecordingHandler(httpx.Response(401, json={"statusCode": 401, "message": "Access denied"}))
    executor = make_executor(handler)

    with pytest.raises(HttpStatusError) as exc_info:
        await executor.execute(QUERY)

    assert exc_info.value.detail == "Access denied"
    assert exc_info.value.retryable is False


@pytest.mark.asyncio
async def test_http_status_error_falls_back_to_text() -> None:
    handler = RecordingHandler(httpx.Response(502, text="Bad Gateway"))
    executor = make_executor(handler)

    with pytest.raises(HttpStatusError) as exc_info:
        await executor.execute(QUERY)

    assert exc_info.value.detail == "Bad Gateway"


@pytest.mark.asyncio
async def test_transport_failure() -> None:
    handler = RecordingHandler(httpx.ConnectError("connection refused"))
    executor = make_executor(handler)

    with pytest.raises(TransportError) as exc_info:
        await executor.execute(QUERY)

    assert "connection refused" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_too_many_redirects_is_a_transport_failure() -> None:
    executor = make_executor(RecordingHandler(httpx.TooManyRedirects("Exceeded maximum allowed redirects.")))

    with pytest.raises(TransportError) as exc_info:
        await executor.execute(QUERY)

    assert exc_info.value.query == QUERY
    assert isinstance(exc_info.value.__cause__, httpx.TooManyRedirects)


@pytest.mark.asyncio
async def test_undecodable_body_is_a_format_error() -> None:
    response = httpx.Response(200, stream=httpx.ByteStream(b"not-gzip"), headers={"Content-Encoding": "gzip"})
    executor = make_executor(RecordingHandler(response))

    with pytest.raises(ResponseFormatError) as exc_info:
        await executor.execute(QUERY)

    assert exc_info.value.query == QUERY
    assert isinstance(exc_info.value.__cause__, httpx.DecodingError)


@pytest.mark.asyncio
async def test_response_without_data_or_errors() -> None:
    handler = RecordingHandler({"extensions": {}})
    executor = make_executor(handler)

    with pytest.raises(NoDataError):
        await executor.execute(QUERY)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="<html>maintenance</html>"),
        httpx.Response(200, json=[1, 2]),
        httpx.Response(200, json={"data": [1]}),
    ],
)
async def test_malformed_success_body(response: httpx.Response) -> None:
    executor = make_executor(RecordingHandler(response))

    with pytest.raises(ResponseFormatError):
        await executor.execute(QUERY)


@pytest.mark.asyncio
async def test_closes_only_owned_client() -> None:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(RecordingHandler()))

    async with GraphQLExecutor(API_URL, "k", http_client=http_client) as executor:
        assert executor.api_url == API_URL

    assert http_client.is_closed is False
    await http_client.aclose()

    owned = GraphQLExecutor(API_URL, "k")
    await owned.aclose()
    assert owned._client.is_closed is True
