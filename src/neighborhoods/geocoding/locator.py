"""Resolve free-text addresses to community areas."""

from __future__ import annotations

import logging

from neighborhoods.geo.classifier import AreaClassifier
from neighborhoods.geocoding.client import Geocoder
from neighborhoods.geocoding.models import AddressLocation

logger = logging.getLogger(__name__)


class AddressLocator:
    """Geocodes an address and classifies the resulting point."""

    def __init__(self, geocoder: Geocoder, classifier: AreaClassifier) -> None:
        self._geocoder = geocoder
        self._classifier = classifier

    async def locate(self, address: str) -> AddressLocation:
        """Raises GeocodingError, InvalidCoordinate or SourceUnavailable.

        An address that resolves outside every community area is not an
        error; it comes back with ``area_identifier=None``.
        """
        result = await self._geocoder.geocode(address)
        area_identifier = await self._classifier.classify(result.latitude, result.longitude)
        if area_identifier is None:
            logger.info("Address %r is outside all community areas", address)
        return AddressLocation(
            latitude=result.latitude,
            longitude=result.longitude,
            area_identifier=area_identifier,
            address=result.address or address,
        )
