"""Query construction: typed argument values, selection tree, default selections."""

from goteborgco.graphql.arguments import (
    EnumValue,
    ListValue,
    ObjectValue,
    filter_value,
    render_filter_arguments,
    render_sort_arguments,
    render_value,
    sort_value,
)
from goteborgco.graphql.builder import Field, Operation

__all__ = [
    "EnumValue",
    "Field",
    "ListValue",
    "ObjectValue",
    "Operation",
    "filter_value",
    "render_filter_arguments",
    "render_sort_arguments",
    "render_value",
    "sort_value",
]
