"""Command-line interface for goteborgco."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from importlib.metadata import PackageNotFoundError, version
from typing import Any

from pydantic import BaseModel
from rich.console import Console

from goteborgco.config import ClientConfig, config_from_env, load_config
from goteborgco.exceptions import ApiError, AuthenticationError, ConfigError, QueryValidationError
from goteborgco.models.filters import Lang, SortOrder
from goteborgco.sdk import GoteborgCo

_LANGS = [lang.value for lang in Lang]
_ORDERS = [order.value for order in SortOrder]


def _package_version() -> str:
    try:
        return version("goteborgco")
    except PackageNotFoundError:
        return "0.0.0"


def _add_id_list(parser: argparse.ArgumentParser, *names: str) -> None:
    for name in names:
        parser.add_argument(f"--{name.replace('_', '-')}", dest=name, type=int, nargs="+", metavar="ID")


def _add_paging(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--per-page", dest="per_page", type=int)
    parser.add_argument("--page", type=int)


def _add_sort(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--sort-fields", dest="sort_fields", nargs="+", metavar="FIELD")
    parser.add_argument("--sort-orders", dest="sort_orders", nargs="+", choices=_ORDERS)


def _add_fields(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--fields", help="GraphQL selection text replacing the default fields")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="goteborgco", description="Query the Göteborg & Co GraphQL API")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    parser.add_argument("--config", help="Path to a JSON config file (default: GOTEBORGCO_* environment variables)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    query_parser = subparsers.add_parser("query", help="Execute a raw GraphQL query")
    query_parser.add_argument("text", help="Query text, or '-' to read it from stdin")

    guides_parser = subparsers.add_parser("guides", help="List guides")
    guides_parser.add_argument("--lang", choices=_LANGS, required=True)
    _add_id_list(guides_parser, "categories", "areas", "tags", "invisible_tags")
    _add_paging(guides_parser)
    guides_parser.add_argument("--match-date", dest="match_date", help="Only guides valid on this date")
    _add_fields(guides_parser)

    events_parser = subparsers.add_parser("events", help="List events")
    events_parser.add_argument("--lang", choices=_LANGS, required=True)
    _add_id_list(events_parser, "places", "categories", "areas", "tags", "invisible_tags")
    events_parser.add_argument("--free", type=int, choices=[0, 1])
    events_parser.add_argument("--start")
    events_parser.add_argument("--end")
    events_parser.add_argument("--distance", type=int)
    events_parser.add_argument("--coords", help="Latitude and longitude as 'lat,lng'")
    _add_paging(events_parser)
    _add_sort(events_parser)
    _add_fields(events_parser)

    places_parser = subparsers.add_parser("places", help="List places")
    places_parser.add_argument("--lang", choices=_LANGS, required=True)
    _add_id_list(places_parser, "places", "categories", "areas", "tags")
    places_parser.add_argument("--distance", type=int)
    places_parser.add_argument("--coords", help="Latitude and longitude as 'lat,lng'")
    _add_paging(places_parser)
    _add_fields(places_parser)

    for name in ("guide", "event", "place"):
        single_parser = subparsers.add_parser(name, help=f"Get one {name} by id")
        single_parser.add_argument("id", type=int)
        single_parser.add_argument("--lang", choices=_LANGS, required=True)
        _add_fields(single_parser)

    search_parser = subparsers.add_parser("search", help="Search all content")
    search_parser.add_argument("text")
    search_parser.add_argument("--lang", choices=_LANGS)
    _add_sort(search_parser)
    _add_fields(search_parser)

    taxonomies_parser = subparsers.add_parser("taxonomies", help="List available taxonomies")
    taxonomies_parser.add_argument("--lang", choices=_LANGS)
    _add_fields(taxonomies_parser)

    taxonomy_parser = subparsers.add_parser("taxonomy", help="List the terms of one taxonomy")
    taxonomy_parser.add_argument("name")
    taxonomy_parser.add_argument("--lang", choices=_LANGS)
    taxonomy_parser.add_argument("--tree", action="store_true", help="Nest terms under their parents")
    _add_fields(taxonomy_parser)

    return parser


def _collect(args: argparse.Namespace, *names: str) -> dict[str, Any]:
    values = {name: getattr(args, name, None) for name in names}
    return {name: value for name, value in values.items() if value is not None}


def _sort_options(args: argparse.Namespace) -> dict[str, Any] | None:
    sort: dict[str, Any] = {}
    if args.sort_fields:
        sort["fields"] = args.sort_fields
    if args.sort_orders:
        sort["orders"] = args.sort_orders
    return sort or None


def _load_client_config(args: argparse.Namespace) -> ClientConfig:
    if args.config:
        return load_config(args.config)
    return config_from_env()


async def _dispatch(api: GoteborgCo, args: argparse.Namespace) -> Any:
    command = args.command
    if command == "query":
        text = sys.stdin.read() if args.text == "-" else args.text
        return await api.query(text)
    if command == "guides":
        guide_filter = _collect(args, "lang", "categories", "areas", "tags", "invisible_tags", "per_page", "page")
        return await api.guides.list(guide_filter, match_date=args.match_date, fields=args.fields)
    if command == "events":
        event_filter = _collect(
            args,
            "lang",
            "places",
            "categories",
            "areas",
            "tags",
            "invisible_tags",
            "free",
            "start",
            "end",
            "distance",
            "coords",
            "per_page",
            "page",
        )
        return await api.events.list(event_filter, sort_by=_sort_options(args), fields=args.fields)
    if command == "places":
        place_filter = _collect(
            args, "lang", "places", "categories", "areas", "tags", "distance", "coords", "per_page", "page"
        )
        return await api.places.list(place_filter, fields=args.fields)
    if command == "guide":
        return await api.guides.get_by_id(args.id, args.lang, fields=args.fields)
    if command == "event":
        return await api.events.get_by_id(args.id, args.lang, fields=args.fields)
    if command == "place":
        return await api.places.get_by_id(args.id, args.lang, fields=args.fields)
    if command == "search":
        return await api.search.query(
            {"query": args.text, **_collect(args, "lang")}, sort=_sort_options(args), fields=args.fields
        )
    if command == "taxonomies":
        return await api.taxonomies.list(_collect(args, "lang"), fields=args.fields)
    if command == "taxonomy":
        return await api.taxonomy.list(args.name, _collect(args, "lang"), fields=args.fields, hierarchical=args.tree)
    raise QueryValidationError(f"unsupported command: {command}")


def _jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True)
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return value


async def _run(args: argparse.Namespace) -> Any:
    config = _load_client_config(args)
    async with await GoteborgCo.from_config(config) as api:
        return await _dispatch(api, args)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        result = asyncio.run(_run(args))
    except QueryValidationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except AuthenticationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except ApiError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1

    Console().print_json(data=_jsonable(result))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
