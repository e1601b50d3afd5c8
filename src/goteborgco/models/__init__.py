"""Domain models for goteborgco.

Re-exports all public model classes for convenient access::

    from goteborgco.models import WpEntity, Media, TaxonomyTerm
"""

from goteborgco.models.base import Entity
from goteborgco.models.contact import Contact
from goteborgco.models.entity import Related, WpEntity
from goteborgco.models.filters import (
    EventFilter,
    GuideFilter,
    Lang,
    LangFilter,
    PlaceFilter,
    SearchFilter,
    SortOptions,
    SortOrder,
)
from goteborgco.models.location import Coordinates, Location
from goteborgco.models.markers import Feature, Geometry, MarkerProperties, Markers
from goteborgco.models.media import Image, ImageSize, Media, MediaSizes
from goteborgco.models.responses import EventDetail, EventList, GuideDetail, PlaceDetail, PlaceList
from goteborgco.models.schedule import CurrentInTime, EventDate
from goteborgco.models.taxonomy import Taxonomy, TaxonomyTerm, TaxonomyTree
from goteborgco.models.translations import Translations

__all__ = [
    "Contact",
    "Coordinates",
    "CurrentInTime",
    "Entity",
    "EventDate",
    "EventDetail",
    "EventFilter",
    "EventList",
    "Feature",
    "Geometry",
    "GuideDetail",
    "GuideFilter",
    "Image",
    "ImageSize",
    "Lang",
    "LangFilter",
    "Location",
    "MarkerProperties",
    "Markers",
    "Media",
    "MediaSizes",
    "PlaceDetail",
    "PlaceFilter",
    "PlaceList",
    "Related",
    "SearchFilter",
    "SortOptions",
    "SortOrder",
    "Taxonomy",
    "TaxonomyTerm",
    "TaxonomyTree",
    "Translations",
    "WpEntity",
]
