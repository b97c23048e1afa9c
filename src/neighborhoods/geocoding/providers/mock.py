"""Fixture-backed geocoder for development and testing."""

from __future__ import annotations

from neighborhoods.core.config import GeocoderConfig
from neighborhoods.core.errors import AddressNotFound
from neighborhoods.geocoding.client import Geocoder
from neighborhoods.geocoding.models import GeocodeResult

_FIXTURE_ADDRESSES: dict[str, tuple[float, float]] = {
    "121 n lasalle st": (41.8836, -87.6323),
    "1060 w addison st": (41.9484, -87.6553),
    "5700 s lake shore dr": (41.7906, -87.5831),
    "201 e randolph st": (41.8826, -87.6226),
}


class MockGeocoder(Geocoder):
    """Case-insensitive lookup against a fixed address table."""

    def __init__(
        self,
        config: GeocoderConfig | None = None,
        fixtures: dict[str, tuple[float, float]] | None = None,
    ) -> None:
        self.config = config or GeocoderConfig(provider="mock")
        source = _FIXTURE_ADDRESSES if fixtures is None else fixtures
        self._addresses = {k.lower().strip(): v for k, v in source.items()}

    async def _lookup(self, address: str) -> GeocodeResult:
        location = self._addresses.get(address.lower().strip())
        if location is None:
            raise AddressNotFound(address)
        lat, lng = location
        return GeocodeResult(latitude=lat, longitude=lng, address=address)
