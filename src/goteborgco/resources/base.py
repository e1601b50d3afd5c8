"""Shared plumbing for the resource APIs."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from goteborgco.client.executor import GraphQLExecutor
from goteborgco.exceptions import QueryValidationError
from goteborgco.graphql.arguments import EnumValue, ObjectValue
from goteborgco.graphql.builder import Field, Operation, Selection
from goteborgco.models.filters import Lang

logger = logging.getLogger(__name__)

FilterT = TypeVar("FilterT", bound=BaseModel)


def coerce_filter(model: type[FilterT], value: FilterT | Mapping[str, Any] | None) -> FilterT:
    """Accept a filter model or a plain mapping and return the model.

    Raises:
        QueryValidationError: If the mapping does not validate.
    """
    if isinstance(value, model):
        return value
    try:
        return model.model_validate(dict(value or {}))
    except ValidationError as exc:
        raise QueryValidationError(f"Invalid {model.__name__}: {exc}") from exc


def coerce_lang(lang: Lang | str) -> Lang:
    try:
        return Lang(lang)
    except ValueError as exc:
        raise QueryValidationError('Language must be either "en" or "sv"') from exc


def by_id_filter(id: int, lang: Lang | str) -> ObjectValue:
    """Build ``{ id: <id>, lang: <lang> }`` for single-entity lookups."""
    if isinstance(id, bool) or not isinstance(id, int):
        raise QueryValidationError(f"Entity id must be an integer, got {id!r}")
    return ObjectValue((("id", id), ("lang", EnumValue(coerce_lang(lang).value))))


class Resource:
    """Base class for resource APIs sharing one executor."""

    def __init__(self, executor: GraphQLExecutor) -> None:
        self._executor = executor

    async def _fetch(self, operation: Operation) -> tuple[dict[str, Any], str]:
        """Execute *operation*; return the data payload and the query text sent."""
        query = operation.render()
        logger.debug("Running %s", operation.name or "anonymous query")
        data = await self._executor.execute(query)
        return data, query

    @staticmethod
    def _selections(fields: str | None, *defaults: Selection) -> tuple[Selection, ...]:
        """Use caller-supplied selection text when given, else the defaults."""
        if fields is not None and fields.strip():
            return (fields,)
        return defaults

    @staticmethod
    def _wrap(name: str, selection: str) -> Field:
        return Field(name, selections=(selection,))
