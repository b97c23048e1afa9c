"""Abstract geocoder interface and factory function."""

from __future__ import annotations

import abc
import re

from neighborhoods.core.config import GeocoderConfig
from neighborhoods.geocoding.models import GeocodeResult

_COORDINATE_LITERAL = re.compile(r"\s*(-?\d+(?:\.\d*)?)\s*,\s*(-?\d+(?:\.\d*)?)\s*")


def parse_coordinate_literal(text: str) -> GeocodeResult | None:
    """Parse ``"lat, lng"`` input so it can skip the network round trip."""
    match = _COORDINATE_LITERAL.fullmatch(text)
    if match is None:
        return None
    return GeocodeResult(latitude=float(match.group(1)), longitude=float(match.group(2)))


class Geocoder(abc.ABC):
    """Base class for geocoding providers.

    ``geocode`` short-circuits coordinate literals and delegates everything
    else to the provider's ``_lookup``.
    """

    async def geocode(self, address: str) -> GeocodeResult:
        """Resolve ``address``.

        Raises AddressNotFound when nothing matches and GeocodingError when
        the provider fails.
        """
        literal = parse_coordinate_literal(address)
        if literal is not None:
            return literal
        return await self._lookup(address)

    @abc.abstractmethod
    async def _lookup(self, address: str) -> GeocodeResult:
        """Resolve free text through the provider."""

    async def close(self) -> None:
        """Clean up resources. Override if the provider holds connections."""


def create_geocoder(config: GeocoderConfig) -> Geocoder:
    """Factory: select and instantiate a geocoder based on config.provider."""

    from neighborhoods.geocoding.providers import PROVIDER_REGISTRY

    provider = config.provider.lower()
    if provider not in PROVIDER_REGISTRY:
        available = ", ".join(sorted(PROVIDER_REGISTRY))
        raise ValueError(
            f"Unknown geocoding provider {config.provider!r}. "
            f"Available: {available}"
        )

    cls = PROVIDER_REGISTRY[provider]
    return cls(config)
