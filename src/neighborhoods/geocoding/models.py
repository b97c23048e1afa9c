"""Geocoding data models."""

from __future__ import annotations

from pydantic import BaseModel


class GeocodeResult(BaseModel):
    """A resolved address."""

    latitude: float
    longitude: float
    address: str | None = None


class AddressLocation(BaseModel):
    """A geocoded address and the community area that contains it."""

    latitude: float
    longitude: float
    area_identifier: str | None = None
    address: str
