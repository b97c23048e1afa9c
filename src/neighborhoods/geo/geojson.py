"""Parse boundary feed payloads into AreaRecords."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any

from neighborhoods.core.errors import GeometryError
from neighborhoods.geo.models import AreaRecord, Coordinate, Geometry, MultiPolygon, Polygon, Ring

logger = logging.getLogger(__name__)


def _parse_position(position: Any) -> Coordinate:
    if not isinstance(position, (list, tuple)) or len(position) < 2:
        raise GeometryError(f"Position must be [lng, lat], got {position!r}")
    try:
        lng, lat = float(position[0]), float(position[1])
    except (TypeError, ValueError, OverflowError) as exc:
        raise GeometryError(f"Non-numeric position {position!r}") from exc
    if not (math.isfinite(lng) and math.isfinite(lat)):
        raise GeometryError(f"Non-finite position {position!r}")
    return Coordinate(lng, lat)


def _parse_ring(raw: Any) -> Ring:
    if not isinstance(raw, (list, tuple)):
        raise GeometryError("Ring must be a list of positions")
    ring = tuple(_parse_position(p) for p in raw)
    if len(set(ring)) < 3:
        raise GeometryError(f"Degenerate ring with {len(set(ring))} distinct points")
    return ring


def _parse_polygon(raw: Any) -> Polygon:
    if not isinstance(raw, (list, tuple)) or not raw:
        raise GeometryError("Polygon must have at least an exterior ring")
    rings = [_parse_ring(r) for r in raw]
    return Polygon(exterior=rings[0], holes=tuple(rings[1:]))


def parse_geometry(obj: Any) -> Geometry:
    """Convert a GeoJSON Polygon or MultiPolygon object into a Geometry."""
    if not isinstance(obj, dict):
        raise GeometryError("Geometry must be an object")
    kind = obj.get("type")
    coordinates = obj.get("coordinates")
    if coordinates is None:
        raise GeometryError("Geometry has no coordinates")
    if kind == "Polygon":
        return _parse_polygon(coordinates)
    if kind == "MultiPolygon":
        if not isinstance(coordinates, (list, tuple)):
            raise GeometryError("MultiPolygon coordinates must be a list")
        return MultiPolygon(polygons=tuple(_parse_polygon(p) for p in coordinates))
    raise GeometryError(f"Unsupported geometry type {kind!r}")


def flatten_features(payload: Any, geometry_field: str) -> list[dict[str, Any]]:
    """Accept a list of flat rows or a GeoJSON FeatureCollection.

    Features are flattened to ``{**properties, geometry_field: geometry}``
    so both payload shapes reach the record parser in the same form.
    """
    if isinstance(payload, list):
        return [row for row in payload if isinstance(row, dict)]
    if isinstance(payload, dict) and payload.get("type") == "FeatureCollection":
        rows = []
        for feature in payload.get("features") or []:
            if not isinstance(feature, dict):
                continue
            row = dict(feature.get("properties") or {})
            row[geometry_field] = feature.get("geometry")
            rows.append(row)
        return rows
    raise GeometryError("Payload must be a list of rows or a FeatureCollection")


@dataclass(slots=True)
class ParseResult:
    """Records admitted from a feed plus the number rejected."""

    records: list[AreaRecord] = field(default_factory=list)
    dropped: int = 0


def parse_area_records(
    rows: list[dict[str, Any]],
    *,
    identifier_field: str = "area_numbe",
    name_field: str = "community",
    geometry_field: str = "the_geom",
) -> ParseResult:
    """Build AreaRecords in feed order, dropping malformed rows.

    A row is dropped when its geometry is missing, when its identifier or
    name is missing or blank after stripping whitespace, when the geometry
    does not parse, or when its identifier was already admitted earlier in
    the feed.
    """
    result = ParseResult()
    seen: set[str] = set()
    for row in rows:
        raw_id = row.get(identifier_field)
        raw_name = row.get(name_field)
        raw_geometry = row.get(geometry_field)
        identifier = "" if raw_id is None else str(raw_id).strip()
        name = "" if raw_name is None else str(raw_name).strip()
        if not raw_geometry or not identifier or not name:
            result.dropped += 1
            continue

        if identifier in seen:
            logger.debug("Duplicate area identifier %s dropped", identifier)
            result.dropped += 1
            continue

        try:
            geometry = parse_geometry(raw_geometry)
        except GeometryError as exc:
            logger.debug("Area %s has invalid geometry: %s", identifier, exc)
            result.dropped += 1
            continue

        properties = {
            k: v for k, v in row.items()
            if k not in (identifier_field, name_field, geometry_field)
        }
        seen.add(identifier)
        result.records.append(
            AreaRecord(
                identifier=identifier,
                name=name,
                geometry=geometry,
                properties=properties,
            )
        )
    return result
