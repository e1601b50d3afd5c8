"""Selection tree for read-only GraphQL operations.

Queries are assembled from :class:`Field` nodes carrying typed argument
values and are serialized to text only when handed to the executor::

    Operation(
        Field("guides", {"filter": filter_value(f)}, (Field("guides", selections=(GUIDE_FIELDS,)),)),
        name="ListGuides",
    ).render()
"""

from __future__ import annotations

import textwrap
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from goteborgco.graphql.arguments import render_fields

_INDENT = "  "

Selection = Union["Field", str]


@dataclass(frozen=True)
class Field:
    """A field with optional arguments and sub-selections.

    Selections are nested fields or raw selection text (a block of field
    names such as the defaults in :mod:`goteborgco.graphql.queries`).
    """

    name: str
    arguments: Mapping[str, Any] = field(default_factory=dict)
    selections: tuple[Selection, ...] = ()

    def render(self, depth: int = 0) -> str:
        pad = _INDENT * depth
        head = self.name
        rendered_args = render_fields(self.arguments)
        if rendered_args:
            head = f"{head}({rendered_args})"
        if not self.selections:
            return pad + head

        lines = [f"{pad}{head} {{"]
        for selection in self.selections:
            if isinstance(selection, Field):
                lines.append(selection.render(depth + 1))
            else:
                block = textwrap.dedent(selection).strip()
                lines.append(textwrap.indent(block, _INDENT * (depth + 1)))
        lines.append(f"{pad}}}")
        return "\n".join(lines)


@dataclass(frozen=True)
class Operation:
    """A named or anonymous ``query`` operation with a single root field."""

    root: Field
    name: str | None = None

    def render(self) -> str:
        header = f"query {self.name}" if self.name else "query"
        return f"{header} {{\n{self.root.render(1)}\n}}\n"

    def __str__(self) -> str:
        return self.render()
