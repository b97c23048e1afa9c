"""Convert Chicago Park District feed rows into Park fields."""

from __future__ import annotations

from typing import Any

from neighborhoods.geo.models import Coordinate
from neighborhoods.parks.models import ParkSize

AMENITY_FLAGS: dict[str, str] = {
    "basketball": "Basketball",
    "playground": "Playground",
    "tennis_cou": "Tennis",
    "baseball_f": "Baseball",
    "soccer_fie": "Soccer",
    "football_f": "Football",
    "swimming_p": "Swimming Pool",
    "beach": "Beach",
    "dog_friend": "Dog Friendly",
    "golf_cours": "Golf",
    "nature_bir": "Nature Area",
    "wheelchr_a": "Wheelchair Accessible",
}


def park_centroid(geometry: Any) -> Coordinate | None:
    """Vertex average of the park's first exterior ring.

    This is the mean of the ring's vertices, not an area-weighted centroid,
    so the closing vertex is counted twice.
    """
    if not isinstance(geometry, dict) or not geometry.get("coordinates"):
        return None
    kind = geometry.get("type")
    try:
        if kind == "MultiPolygon":
            ring = geometry["coordinates"][0][0]
        elif kind == "Polygon":
            ring = geometry["coordinates"][0]
        else:
            return None
        if not ring:
            return None
        lng = sum(float(p[0]) for p in ring) / len(ring)
        lat = sum(float(p[1]) for p in ring) / len(ring)
    except (IndexError, KeyError, TypeError, ValueError):
        return None
    return Coordinate(lng, lat)


def extract_amenities(row: dict[str, Any]) -> list[str]:
    return [label for key, label in AMENITY_FLAGS.items() if row.get(key) == "Yes"]


def park_size(acres: float) -> ParkSize:
    if acres <= 2:
        return ParkSize.SMALL
    if acres <= 10:
        return ParkSize.MEDIUM
    return ParkSize.LARGE


def parse_acres(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def describe_park(row: dict[str, Any]) -> str:
    park_class = (row.get("park_class") or "park").lower()
    return f"{row.get('acres')} acre {park_class} in Ward {row.get('ward')}"
