from __future__ import annotations

from goteborgco.graphql.arguments import EnumValue, ObjectValue
from goteborgco.graphql.builder import Field, Operation


def test_field_without_arguments_has_no_parentheses() -> None:
    assert Field("guides", selections=("id",)).render() == "guides {\n  id\n}"


def test_operation_renders_nested_selections() -> None:
    root = Field(
        "guideById",
        {"filter": ObjectValue((("id", 5), ("lang", EnumValue("sv"))))},
        (Field("guide", selections=("\n        id\n        title\n    ",)),),
    )

    assert Operation(root, name="GetGuideById").render() == (
        "query GetGuideById {\n"
        "  guideById(filter: { id: 5, lang: sv }) {\n"
        "    guide {\n"
        "      id\n"
        "      title\n"
        "    }\n"
        "  }\n"
        "}\n"
    )


def test_multiple_arguments_are_comma_separated() -> None:
    root = Field("events", {"filter": ObjectValue((("lang", EnumValue("en")),)), "sortBy": ObjectValue()})

    assert root.render() == "events(filter: { lang: en }, sortBy: {})"


def test_none_arguments_are_skipped() -> None:
    assert Field("guides", {"filter": None}).render() == "guides"


def test_anonymous_operation() -> None:
    assert str(Operation(Field("taxonomies", selections=("name",)))) == "query {\n  taxonomies {\n    name\n  }\n}\n"
