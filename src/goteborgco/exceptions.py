"""Custom exception hierarchy for goteborgco.

All goteborgco exceptions inherit from :class:`GoteborgCoError`, making it easy
to catch any library error with a single ``except`` clause while still allowing
callers to handle specific failure modes.

Request failures derive from :class:`ApiError` and carry the query text that
was sent, plus a ``retryable`` hint: transport failures and 429/5xx responses
are worth retrying, GraphQL and shape errors are not.
"""

from __future__ import annotations

import json
from typing import Any


class GoteborgCoError(Exception):
    """Base exception for all goteborgco errors."""


class ConfigError(GoteborgCoError):
    """Configuration loading or validation failure."""


class AuthenticationError(GoteborgCoError):
    """Raised when no usable subscription key can be resolved."""


class QueryValidationError(GoteborgCoError, ValueError):
    """Raised when query input is rejected before any network call."""


class ApiError(GoteborgCoError):
    """Base class for failures while executing a query.

    Attributes:
        query: The GraphQL text that was being executed.
    """

    retryable = False

    def __init__(self, message: str, *, query: str = "") -> None:
        self.query = query
        if query:
            message = f"{message}\nQuery: {query}"
        super().__init__(message)


class TransportError(ApiError):
    """Raised when the HTTP request could not complete (network, timeout)."""

    retryable = True


class HttpStatusError(ApiError):
    """Raised when the endpoint answers with a non-success status.

    Attributes:
        status_code: HTTP status code of the response.
        detail: Error detail extracted from the response body.
    """

    def __init__(self, status_code: int, detail: str, *, query: str = "") -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(
            f"HTTP request failed with status {status_code}\nResponse: {detail}",
            query=query,
        )

    @property
    def retryable(self) -> bool:  # type: ignore[override]
        return self.status_code == 429 or self.status_code >= 500


class GraphQLError(ApiError):
    """Raised when the response carries a non-empty ``errors`` array.

    Attributes:
        errors: The raw error objects returned by the server.
    """

    def __init__(self, errors: list[Any], *, query: str = "") -> None:
        self.errors = errors
        super().__init__(f"GraphQL errors: {_join_error_messages(errors)}", query=query)

    @property
    def messages(self) -> list[str]:
        return [_error_message(error) for error in self.errors]


class NoDataError(ApiError):
    """Raised when a successful response has neither ``data`` nor ``errors``."""

    def __init__(self, *, query: str = "") -> None:
        super().__init__("GraphQL response contained neither data nor errors", query=query)


class ResponseFormatError(ApiError):
    """Raised when a response payload does not have the expected shape."""


def _error_message(error: Any) -> str:
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        return error["message"]
    return json.dumps(error, default=str)


def _join_error_messages(errors: list[Any]) -> str:
    return "; ".join(_error_message(error) for error in errors)
