"""Nominatim (OpenStreetMap) geocoding provider."""

from __future__ import annotations

import logging

import httpx

from neighborhoods.core.config import GeocoderConfig
from neighborhoods.core.errors import AddressNotFound, GeocodingError
from neighborhoods.geocoding.client import Geocoder
from neighborhoods.geocoding.models import GeocodeResult

logger = logging.getLogger(__name__)


class NominatimGeocoder(Geocoder):
    """Searches Nominatim, bounded to the configured viewbox."""

    def __init__(self, config: GeocoderConfig, client: httpx.AsyncClient | None = None) -> None:
        self.config = config
        self._http = client or httpx.AsyncClient(
            base_url=config.base_url,
            timeout=httpx.Timeout(config.timeout_seconds),
            headers={"User-Agent": config.user_agent},
        )

    async def _lookup(self, address: str) -> GeocodeResult:
        params = {
            "format": "json",
            "q": f"{address}{self.config.city_suffix}",
            "limit": 1,
            "bounded": 1,
            "viewbox": self.config.viewbox,
        }
        try:
            resp = await self._http.get("/search", params=params)
            resp.raise_for_status()
            results = resp.json()
        except httpx.HTTPError as exc:
            logger.warning("Geocoding request for %r failed: %s", address, exc)
            raise GeocodingError(f"Geocoding service unavailable: {exc}") from exc
        except ValueError as exc:
            raise GeocodingError(f"Geocoding service returned invalid JSON: {exc}") from exc

        if not isinstance(results, list):
            raise GeocodingError("Geocoding service returned an unexpected payload")
        if not results:
            raise AddressNotFound(address)

        first = results[0]
        try:
            return GeocodeResult(
                latitude=float(first["lat"]),
                longitude=float(first["lon"]),
                address=first.get("display_name"),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise GeocodingError(f"Malformed geocoding result: {exc}") from exc

    async def close(self) -> None:
        await self._http.aclose()
