"""Shared test fixtures for goteborgco tests."""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def guide_record() -> dict[str, Any]:
    """A guide as returned by the API, with nested media, location and schedule."""
    return {
        "id": 101,
        "title": "Fika i Haga",
        "excerpt": "Cafés in the old town",
        "date": "2024-03-01T10:00:00",
        "categories": [4, 7],
        "areas": [2],
        "tags": None,
        "featuredmedia": {
            "id": 9,
            "credit": "Göteborg & Co",
            "sizes": {
                "full": {"width": 1600, "height": 900, "source_url": "https://img.example/full.jpg"},
                "medium": {"width": 300, "height": 169, "source_url": "https://img.example/medium.jpg"},
            },
        },
        "location": {
            "address": "Haga Nygata 1",
            "lat": 57.6986,
            "lng": 11.9555,
            "zoom": 14,
            "street_name": "Haga Nygata",
            "street_number": 1,
            "post_code": "413 01",
            "country": "Sweden",
        },
        "currentInTime": {"months": ["3", "4"], "weekdays": [0, 6]},
        "translations": {"sv": 101, "en": 202},
        "free": True,
    }


@pytest.fixture
def markers_record() -> dict[str, Any]:
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "geometry": {"type": "Point", "coordinates": [11.9555, 57.6986]},
                "properties": {"id": 101, "name": "Haga", "type": "place", "slug": "haga"},
            },
            {
                "type": "Feature",
                "geometry": {"type": "Point", "coordinates": []},
                "properties": {"id": 102, "name": "Nowhere"},
            },
        ],
    }


@pytest.fixture
def taxonomy_terms() -> list[dict[str, Any]]:
    return [
        {"id": 1, "name": "Food", "count": 12, "parent": 0},
        {"id": 2, "name": "Cafés", "count": 5, "parent": 1},
        {"id": 3, "name": "Lost", "count": 1, "parent": 99},
    ]
