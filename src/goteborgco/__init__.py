"""Public API surface for goteborgco."""

__version__ = "1.0.0"

from goteborgco.auth import KeyResolver, create_key_resolver
from goteborgco.client import GraphQLExecutor
from goteborgco.config import ClientConfig, config_from_env, load_config
from goteborgco.exceptions import (
    ApiError,
    AuthenticationError,
    ConfigError,
    GoteborgCoError,
    GraphQLError,
    HttpStatusError,
    NoDataError,
    QueryValidationError,
    ResponseFormatError,
    TransportError,
)
from goteborgco.models import (
    Contact,
    Coordinates,
    CurrentInTime,
    EventDate,
    EventDetail,
    EventFilter,
    EventList,
    GuideDetail,
    GuideFilter,
    Lang,
    LangFilter,
    Location,
    Markers,
    Media,
    PlaceDetail,
    PlaceFilter,
    PlaceList,
    Related,
    SearchFilter,
    SortOptions,
    SortOrder,
    Taxonomy,
    TaxonomyTerm,
    TaxonomyTree,
    Translations,
    WpEntity,
)
from goteborgco.sdk import GoteborgCo

__all__ = [
    "ApiError",
    "AuthenticationError",
    "ClientConfig",
    "ConfigError",
    "Contact",
    "Coordinates",
    "CurrentInTime",
    "EventDate",
    "EventDetail",
    "EventFilter",
    "EventList",
    "GoteborgCo",
    "GoteborgCoError",
    "GraphQLError",
    "GraphQLExecutor",
    "GuideDetail",
    "GuideFilter",
    "HttpStatusError",
    "KeyResolver",
    "Lang",
    "LangFilter",
    "Location",
    "Markers",
    "Media",
    "NoDataError",
    "PlaceDetail",
    "PlaceFilter",
    "PlaceList",
    "QueryValidationError",
    "Related",
    "ResponseFormatError",
    "SearchFilter",
    "SortOptions",
    "SortOrder",
    "Taxonomy",
    "TaxonomyTerm",
    "TaxonomyTree",
    "TransportError",
    "Translations",
    "WpEntity",
    "__version__",
    "config_from_env",
    "create_key_resolver",
    "load_config",
]
