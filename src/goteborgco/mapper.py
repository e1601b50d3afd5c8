"""Mapping functions between API responses and domain models."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from goteborgco.exceptions import ResponseFormatError
from goteborgco.models.taxonomy import TaxonomyTerm, TaxonomyTree

ModelT = TypeVar("ModelT", bound=BaseModel)


def require_dict(data: dict[str, Any], key: str, *, query: str = "") -> dict[str, Any]:
    """Return ``data[key]`` as a dict.

    Raises:
        ResponseFormatError: If the key is missing or not an object.
    """
    value = data.get(key)
    if not isinstance(value, dict):
        raise ResponseFormatError(f"Missing/invalid object at key '{key}'", query=query)
    return value


def require_list(data: dict[str, Any], key: str, *, query: str = "") -> list[Any]:
    """Return ``data[key]`` as a list.

    Raises:
        ResponseFormatError: If the key is missing or not a list.
    """
    value = data.get(key)
    if not isinstance(value, list):
        raise ResponseFormatError(f"Missing/invalid list at key '{key}'", query=query)
    return value


def optional_dict(data: dict[str, Any], key: str, *, query: str = "") -> dict[str, Any] | None:
    """Return ``data[key]`` if present, None if absent or null."""
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ResponseFormatError(f"Invalid object at key '{key}'", query=query)
    return value


def hydrate(model: type[ModelT], record: Any, *, query: str = "") -> ModelT:
    """Validate one response record into *model*.

    Raises:
        ResponseFormatError: If the record does not match the model.
    """
    try:
        return model.model_validate(record)
    except ValidationError as exc:
        raise ResponseFormatError(f"Invalid {model.__name__} record: {exc}", query=query) from exc


def hydrate_many(model: type[ModelT], records: Iterable[Any], *, query: str = "") -> list[ModelT]:
    return [hydrate(model, record, query=query) for record in records]


def hydrate_optional(model: type[ModelT], record: Any, *, query: str = "") -> ModelT | None:
    """Hydrate *record*, or return None when it is absent."""
    if record is None:
        return None
    return hydrate(model, record, query=query)


def build_hierarchy(terms: Iterable[TaxonomyTerm]) -> list[TaxonomyTerm]:
    """Arrange flat terms into root terms with nested children.

    Terms whose parent is not in *terms* become roots.
    """
    return TaxonomyTree(terms).roots()
