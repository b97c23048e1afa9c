"""Geometry and area data models.

Geometry types are immutable tuples so a snapshot of the store can be
shared across concurrent lookups without copying.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, NamedTuple, Union

from pydantic import BaseModel, ConfigDict, Field


class Coordinate(NamedTuple):
    """A position in GeoJSON axis order: x is longitude, y is latitude."""

    longitude: float
    latitude: float


Ring = tuple[Coordinate, ...]


@dataclass(frozen=True, slots=True)
class Polygon:
    """An exterior ring with zero or more holes."""

    exterior: Ring
    holes: tuple[Ring, ...] = ()


@dataclass(frozen=True, slots=True)
class MultiPolygon:
    """A union of polygons."""

    polygons: tuple[Polygon, ...] = ()


Geometry = Union[Polygon, MultiPolygon]


class AreaRecord(BaseModel):
    """A named community area and its boundary."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    identifier: str
    name: str
    geometry: Geometry
    properties: dict[str, Any] = Field(default_factory=dict)


class StoreStats(BaseModel):
    """Counters describing the last load and refresh history of a store."""

    loaded: int = 0
    dropped: int = 0
    refresh_failures: int = 0
    last_error: str | None = None
