"""In-memory cache of community-area boundaries with lazy refresh."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from datetime import timedelta

from neighborhoods.core.config import GeoConfig
from neighborhoods.core.errors import SourceUnavailable
from neighborhoods.geo.geojson import parse_area_records
from neighborhoods.geo.models import AreaRecord, StoreStats
from neighborhoods.geo.source import AreaSource

logger = logging.getLogger(__name__)

DEFAULT_REFRESH_INTERVAL = timedelta(minutes=60)


class GeometryStore:
    """Owns the authoritative list of AreaRecords and refreshes it.

    The store is considered stale when it is empty or when more than
    ``refresh_interval`` has elapsed since the last successful load.
    Refreshes run lazily on the calling path and are single-flight: callers
    that arrive while a refresh is running wait for it and reuse its result.
    Once any data has loaded, a failed refresh keeps serving the old data.
    """

    def __init__(
        self,
        source: AreaSource,
        *,
        refresh_interval: timedelta = DEFAULT_REFRESH_INTERVAL,
        identifier_field: str = "area_numbe",
        name_field: str = "community",
        geometry_field: str = "the_geom",
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._source = source
        self._refresh_seconds = refresh_interval.total_seconds()
        self._fields = {
            "identifier_field": identifier_field,
            "name_field": name_field,
            "geometry_field": geometry_field,
        }
        self._clock = clock
        self._lock = asyncio.Lock()
        self._areas: list[AreaRecord] = []
        self._index: dict[str, AreaRecord] = {}
        self._loaded_at: float | None = None
        self._stats = StoreStats()

    @classmethod
    def from_config(cls, config: GeoConfig, source: AreaSource, **kwargs) -> GeometryStore:
        return cls(
            source,
            refresh_interval=timedelta(minutes=config.refresh_minutes),
            identifier_field=config.identifier_field,
            name_field=config.name_field,
            geometry_field=config.geometry_field,
            **kwargs,
        )

    # -- state ---------------------------------------------------------------

    @property
    def is_stale(self) -> bool:
        if not self._areas or self._loaded_at is None:
            return True
        return self._clock() - self._loaded_at > self._refresh_seconds

    @property
    def count(self) -> int:
        return len(self._areas)

    @property
    def stats(self) -> StoreStats:
        return self._stats.model_copy()

    @property
    def source(self) -> AreaSource:
        return self._source

    # -- public API ----------------------------------------------------------

    async def ensure_fresh(self) -> None:
        """Reload from the source if the cache is empty or expired.

        Raises SourceUnavailable only when the fetch fails and nothing has
        ever been cached.
        """
        if not self.is_stale:
            return
        async with self._lock:
            # Another caller may have refreshed while we waited.
            if not self.is_stale:
                return
            try:
                await self._load()
            except SourceUnavailable as exc:
                if not self._areas:
                    raise
                logger.warning(
                    "Boundary refresh failed, serving %d cached areas: %s",
                    len(self._areas), exc,
                )

    async def refresh(self) -> None:
        """Reload unconditionally. Failures propagate; the cache is kept."""
        async with self._lock:
            await self._load()

    def all_areas(self) -> list[AreaRecord]:
        """Snapshot of the cached areas in feed order. Never refreshes."""
        return list(self._areas)

    def lookup_by_identifier(self, identifier: str | int) -> AreaRecord | None:
        return self._index.get(str(identifier).strip())

    # -- internal ------------------------------------------------------------

    async def _load(self) -> None:
        logger.info("Loading community areas for spatial lookup")
        try:
            rows = await self._source.fetch()
        except SourceUnavailable as exc:
            self._stats.refresh_failures += 1
            self._stats.last_error = str(exc)
            raise

        result = parse_area_records(rows, **self._fields)
        self._areas = result.records
        self._index = {area.identifier: area for area in result.records}
        self._loaded_at = self._clock()
        self._stats.loaded = len(result.records)
        self._stats.dropped = result.dropped
        self._stats.last_error = None

        if result.dropped:
            logger.warning(
                "Dropped %d malformed community area records", result.dropped
            )
        logger.info("Loaded %d community areas for spatial lookup", len(result.records))
