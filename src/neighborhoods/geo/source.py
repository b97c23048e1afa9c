"""Boundary feed sources.

Every source returns flat rows (``the_geom``, ``area_numbe``, ``community``
and friends) regardless of whether the upstream payload is a Socrata row
list or a GeoJSON FeatureCollection. Any failure surfaces as
SourceUnavailable.
"""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

import httpx

from neighborhoods.core.config import GeoConfig
from neighborhoods.core.errors import GeometryError, SourceUnavailable
from neighborhoods.geo.geojson import flatten_features

logger = logging.getLogger(__name__)


@runtime_checkable
class AreaSource(Protocol):
    """Protocol for community-area boundary feeds."""

    async def fetch(self) -> list[dict[str, Any]]: ...


def _rows_from_payload(payload: Any, geometry_field: str, origin: str) -> list[dict[str, Any]]:
    try:
        return flatten_features(payload, geometry_field)
    except GeometryError as exc:
        raise SourceUnavailable(f"Unrecognised payload from {origin}: {exc}") from exc


class HttpAreaSource:
    """Fetches boundaries from an HTTP endpoint."""

    def __init__(self, config: GeoConfig, client: httpx.AsyncClient | None = None) -> None:
        self._config = config
        self._http = client or httpx.AsyncClient(
            timeout=httpx.Timeout(config.timeout_seconds),
        )

    async def fetch(self) -> list[dict[str, Any]]:
        url = self._config.feed_url
        try:
            resp = await self._http.get(url)
            resp.raise_for_status()
            payload = resp.json()
        except httpx.HTTPStatusError as exc:
            raise SourceUnavailable(
                f"Boundary feed returned {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise SourceUnavailable(f"Boundary feed request failed: {exc}") from exc
        except ValueError as exc:
            raise SourceUnavailable(f"Boundary feed returned invalid JSON: {exc}") from exc
        return _rows_from_payload(payload, self._config.geometry_field, url)

    async def close(self) -> None:
        await self._http.aclose()


class FileAreaSource:
    """Reads boundaries from a local JSON file."""

    def __init__(self, path: str | Path, geometry_field: str = "the_geom") -> None:
        self._path = Path(path)
        self._geometry_field = geometry_field

    async def fetch(self) -> list[dict[str, Any]]:
        try:
            with self._path.open(encoding="utf-8") as f:
                payload = json.load(f)
        except (OSError, ValueError) as exc:
            raise SourceUnavailable(f"Cannot read {self._path}: {exc}") from exc
        return _rows_from_payload(payload, self._geometry_field, str(self._path))


class StaticAreaSource:
    """In-memory source for fixtures and tests.

    ``fail()`` makes subsequent fetches raise until ``recover()`` is called.
    """

    def __init__(self, payload: Any = None, geometry_field: str = "the_geom") -> None:
        self._payload = payload if payload is not None else []
        self._geometry_field = geometry_field
        self._failing = False
        self.fetch_count = 0

    def set_payload(self, payload: Any) -> None:
        self._payload = payload

    def fail(self) -> None:
        self._failing = True

    def recover(self) -> None:
        self._failing = False

    async def fetch(self) -> list[dict[str, Any]]:
        self.fetch_count += 1
        if self._failing:
            raise SourceUnavailable("Static source is set to fail")
        return _rows_from_payload(
            copy.deepcopy(self._payload), self._geometry_field, "static source"
        )


def create_area_source(config: GeoConfig) -> AreaSource:
    """Factory: a file source when ``feed_path`` is set, otherwise HTTP."""
    if config.feed_path:
        return FileAreaSource(config.feed_path, geometry_field=config.geometry_field)
    return HttpAreaSource(config)
