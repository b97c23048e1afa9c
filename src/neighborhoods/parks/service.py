"""Cached park list backed by the Chicago Park District feed."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from datetime import timedelta
from typing import Any, Protocol, runtime_checkable

import httpx

from neighborhoods.core.config import ParkConfig
from neighborhoods.core.errors import SourceUnavailable
from neighborhoods.parks.models import NormalizationReport, Park
from neighborhoods.parks.normalizer import ParkNormalizer

logger = logging.getLogger(__name__)


@runtime_checkable
class ParkSource(Protocol):
    """Protocol for park feeds returning raw rows."""

    async def fetch(self) -> list[dict[str, Any]]: ...


class HttpParkSource:
    """Fetches park rows from the Chicago Data Portal."""

    def __init__(self, config: ParkConfig, client: httpx.AsyncClient | None = None) -> None:
        self._config = config
        self._http = client or httpx.AsyncClient(
            timeout=httpx.Timeout(config.timeout_seconds),
        )

    async def fetch(self) -> list[dict[str, Any]]:
        try:
            resp = await self._http.get(
                self._config.feed_url, params={"$limit": self._config.limit}
            )
            resp.raise_for_status()
            rows = resp.json()
        except httpx.HTTPError as exc:
            raise SourceUnavailable(f"Park feed request failed: {exc}") from exc
        except ValueError as exc:
            raise SourceUnavailable(f"Park feed returned invalid JSON: {exc}") from exc
        if not isinstance(rows, list):
            raise SourceUnavailable("Park feed did not return a list")
        return [row for row in rows if isinstance(row, dict)]

    async def close(self) -> None:
        await self._http.aclose()


class ParkService:
    """Converts and caches parks; keeps the old list when the feed fails."""

    def __init__(
        self,
        source: ParkSource,
        normalizer: ParkNormalizer,
        *,
        refresh_interval: timedelta = timedelta(minutes=30),
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._source = source
        self._normalizer = normalizer
        self._refresh_seconds = refresh_interval.total_seconds()
        self._clock = clock
        self._parks: list[Park] = []
        self._loaded_at: float | None = None

    def _is_stale(self) -> bool:
        if not self._parks or self._loaded_at is None:
            return True
        return self._clock() - self._loaded_at > self._refresh_seconds

    async def get_all_parks(self) -> list[Park]:
        if self._is_stale():
            await self._load()
        return list(self._parks)

    async def parks_for_area(self, area_identifier: str | int) -> list[Park]:
        wanted = str(area_identifier).strip()
        return [p for p in await self.get_all_parks() if p.community_area == wanted]

    async def validate_and_correct(self) -> NormalizationReport:
        """Re-check every cached park and replace the cache with the result."""
        logger.info("Validating park community area assignments")
        report = await self._normalizer.correct_all(await self.get_all_parks())
        self._parks = list(report.parks)
        logger.info(
            "Park validation complete: %d checked, %d corrected, %d unresolved",
            report.checked, report.corrected, report.unresolved,
        )
        return report

    async def _load(self) -> None:
        logger.info("Loading parks from the park feed")
        try:
            rows = await self._source.fetch()
        except SourceUnavailable as exc:
            logger.error("Failed to load parks, keeping %d cached: %s", len(self._parks), exc)
            return

        parks = []
        for row in rows:
            park = await self._normalizer.convert(row)
            if park is not None:
                parks.append(park)
        self._parks = parks
        self._loaded_at = self._clock()

        areas_covered = len({p.community_area for p in parks})
        logger.info(
            "Processed %d of %d park records covering %d community areas",
            len(parks), len(rows), areas_covered,
        )
