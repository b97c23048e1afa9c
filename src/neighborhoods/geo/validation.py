"""Coordinate validation and the lat/lng axis adapter.

Public call sites speak (latitude, longitude); geometry math runs in GeoJSON
(longitude, latitude) order. ``from_lat_lng`` and ``to_lat_lng`` are the only
places the axes are swapped.
"""

from __future__ import annotations

import math

from neighborhoods.core.config import BoundingBox
from neighborhoods.core.errors import InvalidCoordinate
from neighborhoods.geo.models import Coordinate


def from_lat_lng(latitude: float, longitude: float) -> Coordinate:
    """Build a Coordinate from a (latitude, longitude) pair.

    Raises InvalidCoordinate when either value is not numeric.
    """
    try:
        return Coordinate(longitude=float(longitude), latitude=float(latitude))
    except (TypeError, ValueError) as exc:
        raise InvalidCoordinate(longitude, latitude, "not numeric") from exc


def to_lat_lng(coord: Coordinate) -> tuple[float, float]:
    """Return a Coordinate as a (latitude, longitude) pair."""
    return coord.latitude, coord.longitude


def _rejection_reason(coord: Coordinate, bounds: BoundingBox | None) -> str | None:
    lng, lat = coord
    if not (math.isfinite(lng) and math.isfinite(lat)):
        return "not finite"
    if not (-180.0 <= lng <= 180.0 and -90.0 <= lat <= 90.0):
        return "outside the global envelope"
    if bounds is not None and not bounds.contains(lng, lat):
        return "outside the configured region"
    return None


def is_valid_coordinate(coord: Coordinate, bounds: BoundingBox | None = None) -> bool:
    """Return True if ``coord`` is finite, on the globe and inside ``bounds``.

    Bounding box edges are inclusive.
    """
    try:
        return _rejection_reason(coord, bounds) is None
    except TypeError:
        return False


def validate_coordinate(coord: Coordinate, bounds: BoundingBox | None = None) -> Coordinate:
    """Return ``coord`` unchanged or raise InvalidCoordinate."""
    try:
        reason = _rejection_reason(coord, bounds)
    except TypeError:
        reason = "not numeric"
    if reason is not None:
        raise InvalidCoordinate(coord.longitude, coord.latitude, reason)
    return coord
