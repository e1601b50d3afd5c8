"""Typed GraphQL argument values and their text serialization.

Filters and sort options are converted into :class:`ObjectValue` trees and
only turned into GraphQL syntax by :func:`render_value`. Rendering rules:

* filter sequences render as ``[1, 2]`` with elements left unquoted;
* strings render quoted, with ``"``, ``\\`` and control characters escaped;
* numbers, booleans (``true``/``false``) and enum members render bare;
* the ``lang`` filter key and the ``orders`` sort key are always enums;
* ``None`` entries are left out.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel

# Filter keys whose values are GraphQL enums, regardless of the Python type.
_ENUM_FILTER_KEYS = frozenset({"lang"})
_ENUM_SORT_KEYS = frozenset({"orders"})


@dataclass(frozen=True)
class EnumValue:
    """A bare GraphQL identifier such as ``sv`` or ``asc``."""

    name: str


@dataclass(frozen=True)
class ListValue:
    """A list literal. With ``quoted=False`` items are written verbatim."""

    items: tuple[Any, ...]
    quoted: bool = True


@dataclass(frozen=True)
class ObjectValue:
    """An input object literal; renders ``{}`` when empty."""

    fields: tuple[tuple[str, Any], ...] = ()

    def __bool__(self) -> bool:
        return bool(self.fields)


def quote(text: str) -> str:
    """Return *text* as a GraphQL string literal."""
    return json.dumps(text, ensure_ascii=False)


def _bare(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, EnumValue):
        return value.name
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def render_value(value: Any) -> str:
    """Serialize a single argument value to GraphQL syntax."""
    if isinstance(value, EnumValue):
        return value.name
    if isinstance(value, ObjectValue):
        return render_object(value)
    if isinstance(value, ListValue):
        render = render_value if value.quoted else _bare
        return "[" + ", ".join(render(item) for item in value.items) + "]"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return quote(value)
    if isinstance(value, (list, tuple)):
        return render_value(ListValue(tuple(value)))
    if isinstance(value, Mapping):
        return render_object(ObjectValue(tuple(value.items())))
    raise TypeError(f"Cannot render {type(value).__name__} as a GraphQL value")


def render_fields(fields: tuple[tuple[str, Any], ...] | Mapping[str, Any]) -> str:
    """Render ``key: value`` pairs joined by ``", "``, skipping ``None`` values."""
    items = fields.items() if isinstance(fields, Mapping) else fields
    return ", ".join(f"{key}: {render_value(value)}" for key, value in items if value is not None)


def render_object(value: ObjectValue) -> str:
    body = render_fields(value.fields)
    return f"{{ {body} }}" if body else "{}"


def _as_mapping(source: BaseModel | Mapping[str, Any] | None) -> Mapping[str, Any]:
    if source is None:
        return {}
    if isinstance(source, BaseModel):
        return source.model_dump(exclude_none=True)
    return source


def filter_value(source: BaseModel | Mapping[str, Any] | None) -> ObjectValue:
    """Convert a filter into an input object following the filter rules."""
    fields: list[tuple[str, Any]] = []
    for key, value in _as_mapping(source).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            fields.append((key, ListValue(tuple(value), quoted=False)))
        elif key in _ENUM_FILTER_KEYS or isinstance(value, Enum):
            fields.append((key, EnumValue(_bare(value))))
        else:
            fields.append((key, value))
    return ObjectValue(tuple(fields))


def sort_value(source: BaseModel | Mapping[str, Any] | None) -> ObjectValue:
    """Convert sort options into an input object; ``orders`` stays an enum."""
    fields: list[tuple[str, Any]] = []
    for key, value in _as_mapping(source).items():
        if value is None:
            continue
        if key in _ENUM_SORT_KEYS:
            if isinstance(value, (list, tuple)):
                fields.append((key, ListValue(tuple(EnumValue(_bare(item)) for item in value))))
            else:
                fields.append((key, EnumValue(_bare(value))))
        elif isinstance(value, (list, tuple)):
            fields.append((key, ListValue(tuple(_bare(item) for item in value))))
        else:
            fields.append((key, _bare(value)))
    return ObjectValue(tuple(fields))


def render_filter_arguments(source: BaseModel | Mapping[str, Any] | None) -> str:
    """Render a filter as an argument fragment, e.g. ``categories: [1, 2], query: "foo"``."""
    return render_fields(filter_value(source).fields)


def render_sort_arguments(source: BaseModel | Mapping[str, Any] | None) -> str:
    return render_fields(sort_value(source).fields)
