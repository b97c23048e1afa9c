"""Validate and correct the community area stored on parks."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from neighborhoods.core.errors import InvalidCoordinate
from neighborhoods.geo.classifier import AreaClassifier
from neighborhoods.geo.validation import from_lat_lng, is_valid_coordinate
from neighborhoods.parks.conversion import (
    describe_park,
    extract_amenities,
    park_centroid,
    park_size,
    parse_acres,
)
from neighborhoods.parks.models import NormalizationReport, Park

logger = logging.getLogger(__name__)


class ParkNormalizer:
    """Assigns parks to community areas using an AreaClassifier."""

    def __init__(self, classifier: AreaClassifier) -> None:
        self._classifier = classifier

    async def convert(self, row: dict[str, Any]) -> Park | None:
        """Build a Park from a feed row, or None if it cannot be placed."""
        name = row.get("park") or "Unknown Park"
        centroid = park_centroid(row.get("the_geom"))
        if centroid is None or not is_valid_coordinate(centroid, self._classifier.bounds):
            logger.warning("Skipping park %s: invalid coordinates %s", name, centroid)
            return None

        area = await self._classifier.classify_point(centroid)
        if area is None:
            logger.warning(
                "Skipping park %s: no community area contains %s", name, centroid
            )
            return None

        acres = parse_acres(row.get("acres"))
        return Park(
            id=f"chicago-park-{row.get('park_no')}",
            name=name,
            address=row.get("location") or f"Chicago, IL {row.get('zip', '')}".strip(),
            latitude=centroid.latitude,
            longitude=centroid.longitude,
            community_area=area,
            amenities=extract_amenities(row),
            description=describe_park(row),
            size=park_size(acres),
        )

    async def _classify_park(self, park: Park) -> str | None:
        return await self._classifier.classify_point(
            from_lat_lng(park.latitude, park.longitude)
        )

    async def validate_location(self, park: Park) -> bool:
        """True if the stored community area matches the classified one."""
        actual = await self._classify_park(park)
        if actual != park.community_area:
            logger.warning(
                "Park %s community area mismatch: stored %s, actual %s",
                park.name, park.community_area, actual,
            )
            return False
        return True

    async def correct_area(self, park: Park) -> Park:
        """Return a copy with the classified area when it differs.

        Parks whose location falls outside every area keep their stored
        assignment.
        """
        return self._apply(park, await self._classify_park(park))

    async def correct_all(self, parks: Iterable[Park]) -> NormalizationReport:
        report = NormalizationReport()
        for park in parks:
            report.checked += 1
            try:
                actual = await self._classify_park(park)
            except InvalidCoordinate as exc:
                logger.warning("Park %s has invalid coordinates: %s", park.name, exc)
                actual = None
            if actual is None:
                report.unresolved += 1
            corrected = self._apply(park, actual)
            if corrected is not park:
                report.corrected += 1
            report.parks.append(corrected)
        return report

    @staticmethod
    def _apply(park: Park, actual: str | None) -> Park:
        if actual is not None and actual != park.community_area:
            logger.info(
                "Correcting park %s community area: %s -> %s",
                park.name, park.community_area, actual,
            )
            return park.model_copy(update={"community_area": actual})
        return park
