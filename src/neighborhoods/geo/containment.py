"""Point-in-polygon tests using the even-odd ray casting rule.

Points exactly on an edge get whatever the crossing count produces: with
the half-open straddle test and strict ``x < intersection`` comparison, a
point on a left-facing edge of a square counts as inside and a point on a
right-facing edge counts as outside. Callers must not rely on boundary
results beyond their determinism.
"""

from __future__ import annotations

from collections.abc import Sequence

from neighborhoods.geo.models import Coordinate, Geometry, MultiPolygon, Polygon


def point_in_ring(point: Coordinate, ring: Sequence[Coordinate]) -> bool:
    """Return True if ``point`` lies inside the closed ``ring``.

    The ring is treated as cyclic, so an explicit closing vertex is optional.
    Rings with fewer than three vertices contain nothing.
    """
    n = len(ring)
    if n < 3:
        return False

    x, y = point
    inside = False
    j = n - 1
    for i in range(n):
        xi, yi = ring[i]
        xj, yj = ring[j]
        if (yi > y) != (yj > y) and x < (xj - xi) * (y - yi) / (yj - yi) + xi:
            inside = not inside
        j = i
    return inside


def point_in_polygon(point: Coordinate, polygon: Polygon) -> bool:
    """Inside the exterior ring and inside none of the holes."""
    if not point_in_ring(point, polygon.exterior):
        return False
    for hole in polygon.holes:
        if point_in_ring(point, hole):
            return False
    return True


def point_in_multipolygon(point: Coordinate, multipolygon: MultiPolygon) -> bool:
    return any(point_in_polygon(point, polygon) for polygon in multipolygon.polygons)


def point_in_geometry(point: Coordinate, geometry: Geometry) -> bool:
    """Dispatch to the polygon or multipolygon test."""
    if isinstance(geometry, MultiPolygon):
        return point_in_multipolygon(point, geometry)
    if isinstance(geometry, Polygon):
        return point_in_polygon(point, geometry)
    raise TypeError(f"Unsupported geometry type: {type(geometry).__name__}")
