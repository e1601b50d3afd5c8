from __future__ import annotations

import pytest

from goteborgco.models.filters import Lang, PlaceFilter
from goteborgco.resources.places import PlacesAPI
from tests.fakes.graphql import RecordingHandler, make_executor


@pytest.mark.asyncio
async def test_list_places() -> None:
    handler = RecordingHandler({"data": {"places": {"places": [{"id": 4, "location": {"lat": 57.7, "lng": 11.9}}]}}})
    api = PlacesAPI(make_executor(handler))

    result = await api.list(PlaceFilter(lang=Lang.SV, coords="57.7,11.9", distance=500))

    assert result.places[0].get_coordinates() is not None
    assert result.markers is None
    assert 'places(filter: { lang: sv, distance: 500, coords: "57.7,11.9" }) {' in handler.last_query
    assert handler.last_query.startswith("query ListPlaces {")


@pytest.mark.asyncio
async def test_get_by_id_includes_events() -> None:
    handler = RecordingHandler(
        {
            "data": {
                "placeById": {
                    "place": {"id": 4, "contact": {"phone": "031-00 00 00"}},
                    "events": [{"id": 10}, {"id": 11}],
                    "related": None,
                    "markers": None,
                }
            }
        }
    )
    api = PlacesAPI(make_executor(handler))

    detail = await api.get_by_id(4, "sv")

    assert detail.place.get_contact() is not None
    assert [event.id for event in detail.events] == [10, 11]
    assert detail.related is None
    assert detail.markers is None
    query = handler.last_query
    assert "placeById(filter: { id: 4, lang: sv }) {" in query
    assert "    events {\n      id" in query


@pytest.mark.asyncio
async def test_get_by_id_without_events() -> None:
    handler = RecordingHandler({"data": {"placeById": {"place": {"id": 4}}}})
    api = PlacesAPI(make_executor(handler))

    detail = await api.get_by_id(4, "en")

    assert detail.events == ()
