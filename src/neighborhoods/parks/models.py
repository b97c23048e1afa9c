"""Park data models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class ParkSize(StrEnum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class Park(BaseModel):
    """A Chicago Park District park assigned to a community area."""

    id: str
    name: str
    address: str
    latitude: float
    longitude: float
    community_area: str | None = None
    amenities: list[str] = Field(default_factory=list)
    description: str = ""
    size: ParkSize = ParkSize.SMALL


class NormalizationReport(BaseModel):
    """Outcome of re-checking stored park assignments."""

    parks: list[Park] = Field(default_factory=list)
    checked: int = 0
    corrected: int = 0
    unresolved: int = 0
