"""Address geocoding and community-area lookup for free-text input."""

from neighborhoods.geocoding.client import Geocoder, create_geocoder, parse_coordinate_literal
from neighborhoods.geocoding.locator import AddressLocator
from neighborhoods.geocoding.models import AddressLocation, GeocodeResult

__all__ = [
    "AddressLocation",
    "AddressLocator",
    "GeocodeResult",
    "Geocoder",
    "create_geocoder",
    "parse_coordinate_literal",
]
