"""Public entry point: which community area contains a coordinate."""

from __future__ import annotations

from neighborhoods.core.config import CHICAGO_BOUNDS, BoundingBox
from neighborhoods.geo.containment import point_in_geometry
from neighborhoods.geo.models import AreaRecord, Coordinate
from neighborhoods.geo.store import GeometryStore
from neighborhoods.geo.validation import from_lat_lng, validate_coordinate


class AreaClassifier:
    """Classifies points against the areas held by a GeometryStore.

    When areas overlap, the first one in store order wins. A point outside
    every area yields None; a point that is not finite or falls outside
    ``bounds`` (Chicago by default) raises InvalidCoordinate.
    """

    def __init__(self, store: GeometryStore, bounds: BoundingBox = CHICAGO_BOUNDS) -> None:
        self._store = store
        self._bounds = bounds

    @property
    def store(self) -> GeometryStore:
        return self._store

    @property
    def bounds(self) -> BoundingBox:
        return self._bounds

    async def classify(self, latitude: float, longitude: float) -> str | None:
        """Return the identifier of the area containing (lat, lng), if any."""
        return await self.classify_point(from_lat_lng(latitude, longitude))

    async def classify_point(self, point: Coordinate) -> str | None:
        area = await self.find_area_for_point(point)
        return area.identifier if area is not None else None

    async def find_area(self, latitude: float, longitude: float) -> AreaRecord | None:
        return await self.find_area_for_point(from_lat_lng(latitude, longitude))

    async def find_area_for_point(self, point: Coordinate) -> AreaRecord | None:
        validate_coordinate(point, self._bounds)
        await self._store.ensure_fresh()
        for area in self._store.all_areas():
            if point_in_geometry(point, area.geometry):
                return area
        return None

    async def area_info(self, identifier: str | int) -> AreaRecord | None:
        """Look up an area by identifier after making sure the cache is fresh."""
        await self._store.ensure_fresh()
        return self._store.lookup_by_identifier(identifier)
