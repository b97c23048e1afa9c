"""Provider registry for geocoding backends."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from neighborhoods.geocoding.client import Geocoder

from neighborhoods.geocoding.providers.mock import MockGeocoder
from neighborhoods.geocoding.providers.nominatim import NominatimGeocoder

PROVIDER_REGISTRY: dict[str, type[Geocoder]] = {
    "nominatim": NominatimGeocoder,
    "mock": MockGeocoder,
}

__all__ = ["PROVIDER_REGISTRY", "MockGeocoder", "NominatimGeocoder"]
