"""Community-area boundaries and point classification.

Provides the geometry store, ray-casting containment tests and the
classifier used to assign coordinates to community areas.
"""

from neighborhoods.geo.classifier import AreaClassifier
from neighborhoods.geo.containment import (
    point_in_geometry,
    point_in_multipolygon,
    point_in_polygon,
    point_in_ring,
)
from neighborhoods.geo.models import AreaRecord, Coordinate, MultiPolygon, Polygon
from neighborhoods.geo.source import (
    AreaSource,
    FileAreaSource,
    HttpAreaSource,
    StaticAreaSource,
    create_area_source,
)
from neighborhoods.geo.store import GeometryStore
from neighborhoods.geo.validation import (
    from_lat_lng,
    is_valid_coordinate,
    to_lat_lng,
    validate_coordinate,
)

__all__ = [
    "AreaClassifier",
    "AreaRecord",
    "AreaSource",
    "Coordinate",
    "FileAreaSource",
    "GeometryStore",
    "HttpAreaSource",
    "MultiPolygon",
    "Polygon",
    "StaticAreaSource",
    "create_area_source",
    "from_lat_lng",
    "is_valid_coordinate",
    "point_in_geometry",
    "point_in_multipolygon",
    "point_in_polygon",
    "point_in_ring",
    "to_lat_lng",
    "validate_coordinate",
]
