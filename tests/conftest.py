"""Shared test fixtures and feed builders."""

from __future__ import annotations

from typing import Any

import pytest

from neighborhoods.core.config import CHICAGO_BOUNDS
from neighborhoods.geo.classifier import AreaClassifier
from neighborhoods.geo.source import StaticAreaSource
from neighborhoods.geo.store import GeometryStore


def square(west: float, south: float, east: float, north: float) -> list[list[float]]:
    """A closed GeoJSON ring for an axis-aligned rectangle, as [lng, lat] pairs."""
    return [[west, south], [west, north], [east, north], [east, south], [west, south]]


def area_row(identifier: Any, name: Any, geometry: Any, **extra: Any) -> dict[str, Any]:
    row = {"area_numbe": identifier, "community": name, "the_geom": geometry}
    row.update(extra)
    return row


def polygon_geom(*rings: list[list[float]]) -> dict[str, Any]:
    return {"type": "Polygon", "coordinates": list(rings)}


def multipolygon_geom(*polygons: list[list[list[float]]]) -> dict[str, Any]:
    return {"type": "MultiPolygon", "coordinates": list(polygons)}


# Two side-by-side areas inside the Chicago bounding box.
WEST_SIDE = square(-87.70, 41.80, -87.60, 41.90)
EAST_SIDE = square(-87.60, 41.80, -87.50, 41.90)


def chicago_rows() -> list[dict[str, Any]]:
    return [
        area_row("1", "ROGERS PARK", polygon_geom(WEST_SIDE), shape_area="123.4"),
        area_row(
            "2",
            "WEST RIDGE",
            multipolygon_geom([EAST_SIDE], [square(-87.90, 41.95, -87.85, 42.00)]),
        ),
    ]


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def source() -> StaticAreaSource:
    return StaticAreaSource(chicago_rows())


@pytest.fixture
def store(source, clock) -> GeometryStore:
    return GeometryStore(source, clock=clock)


@pytest.fixture
def classifier(store) -> AreaClassifier:
    return AreaClassifier(store, CHICAGO_BOUNDS)
