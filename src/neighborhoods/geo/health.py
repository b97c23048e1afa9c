"""Health check for a GeometryStore."""

from __future__ import annotations

from neighborhoods.core.types import HealthStatus
from neighborhoods.geo.store import GeometryStore


def check_store_health(store: GeometryStore) -> HealthStatus:
    """A store is healthy once it holds at least one area, even if stale."""
    stats = store.stats
    return HealthStatus(
        service="geometry_store",
        healthy=store.count > 0,
        details={
            "count": store.count,
            "dropped": stats.dropped,
            "refresh_failures": stats.refresh_failures,
            "stale": store.is_stale,
            "last_error": stats.last_error,
        },
    )
