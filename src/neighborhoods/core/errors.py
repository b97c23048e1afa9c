"""Exception hierarchy shared across neighborhoods modules."""

from __future__ import annotations

from typing import Any


class NeighborhoodsError(Exception):
    """Base class for all errors raised by this package."""


class InvalidCoordinate(NeighborhoodsError, ValueError):
    """A coordinate is non-finite or outside the accepted bounds."""

    def __init__(self, longitude: Any, latitude: Any, reason: str = "out of bounds") -> None:
        self.longitude = longitude
        self.latitude = latitude
        self.reason = reason
        super().__init__(
            f"Invalid coordinate (lng={longitude!r}, lat={latitude!r}): {reason}"
        )


class SourceUnavailable(NeighborhoodsError):
    """The boundary feed could not be fetched or decoded."""


class GeometryError(NeighborhoodsError, ValueError):
    """A GeoJSON geometry object is malformed or unsupported."""


class GeocodingError(NeighborhoodsError):
    """The geocoding service failed or returned an unusable payload."""


class AddressNotFound(GeocodingError):
    """The geocoding service returned no match for an address."""

    def __init__(self, address: str) -> None:
        self.address = address
        super().__init__(f"No geocoding result for {address!r}")
