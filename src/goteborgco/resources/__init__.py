"""Resource APIs sharing a single executor."""

from goteborgco.resources.base import Resource
from goteborgco.resources.events import EventsAPI
from goteborgco.resources.guides import GuidesAPI
from goteborgco.resources.places import PlacesAPI
from goteborgco.resources.search import SearchAPI
from goteborgco.resources.taxonomies import TaxonomiesAPI
from goteborgco.resources.taxonomy import TaxonomyAPI

__all__ = [
    "EventsAPI",
    "GuidesAPI",
    "PlacesAPI",
    "Resource",
    "SearchAPI",
    "TaxonomiesAPI",
    "TaxonomyAPI",
]
