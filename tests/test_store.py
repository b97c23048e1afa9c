"""Tests for the geometry store cache and refresh policy."""

from __future__ import annotations

import asyncio
from datetime import timedelta

import pytest

from neighborhoods.core.config import GeoConfig
from neighborhoods.core.errors import SourceUnavailable
from neighborhoods.geo.health import check_store_health
from neighborhoods.geo.source import StaticAreaSource
from neighborhoods.geo.store import GeometryStore
from tests.conftest import WEST_SIDE, area_row, chicago_rows, polygon_geom

HOUR = 60 * 60


class SlowSource:
    """Yields control mid-fetch so concurrent callers overlap."""

    def __init__(self) -> None:
        self.calls = 0

    async def fetch(self):
        self.calls += 1
        await asyncio.sleep(0.01)
        return chicago_rows()


class TestEnsureFresh:
    @pytest.mark.asyncio
    async def test_empty_store_loads_on_first_access(self, store, source):
        assert store.count == 0
        assert store.is_stale is True
        await store.ensure_fresh()
        assert store.count == 2
        assert source.fetch_count == 1

    @pytest.mark.asyncio
    async def test_fresh_store_does_not_refetch(self, store, source, clock):
        await store.ensure_fresh()
        clock.advance(59 * 60)
        await store.ensure_fresh()
        assert source.fetch_count == 1

    @pytest.mark.asyncio
    async def test_expired_store_refetches(self, store, source, clock):
        await store.ensure_fresh()
        clock.advance(HOUR + 1)
        assert store.is_stale is True
        await store.ensure_fresh()
        assert source.fetch_count == 2

    @pytest.mark.asyncio
    async def test_exactly_at_interval_is_still_fresh(self, store, source, clock):
        await store.ensure_fresh()
        clock.advance(HOUR)
        await store.ensure_fresh()
        assert source.fetch_count == 1

    @pytest.mark.asyncio
    async def test_failure_with_no_data_raises(self, store, source):
        source.fail()
        with pytest.raises(SourceUnavailable):
            await store.ensure_fresh()
        assert store.count == 0
        assert store.stats.refresh_failures == 1

    @pytest.mark.asyncio
    async def test_failure_after_load_serves_stale(self, store, source, clock):
        await store.ensure_fresh()
        source.fail()
        clock.advance(HOUR + 1)

        await store.ensure_fresh()

        assert store.count == 2
        assert store.lookup_by_identifier("1") is not None
        assert store.stats.refresh_failures == 1
        assert store.stats.last_error is not None

    @pytest.mark.asyncio
    async def test_recovers_after_failure(self, store, source, clock):
        await store.ensure_fresh()
        source.fail()
        clock.advance(HOUR + 1)
        await store.ensure_fresh()

        source.recover()
        source.set_payload(chicago_rows()[:1])
        await store.ensure_fresh()

        assert store.count == 1
        assert store.is_stale is False
        assert store.stats.last_error is None

    @pytest.mark.asyncio
    async def test_concurrent_callers_share_one_fetch(self):
        slow = SlowSource()
        store = GeometryStore(slow)
        await asyncio.gather(*(store.ensure_fresh() for _ in range(5)))
        assert slow.calls == 1
        assert store.count == 2

    @pytest.mark.asyncio
    async def test_empty_successful_load_stays_stale(self, clock):
        source = StaticAreaSource([])
        store = GeometryStore(source, clock=clock)
        await store.ensure_fresh()
        assert store.count == 0
        assert store.is_stale is True
        await store.ensure_fresh()
        assert source.fetch_count == 2


class TestRefresh:
    @pytest.mark.asyncio
    async def test_refresh_reloads_even_when_fresh(self, store, source):
        await store.ensure_fresh()
        await store.refresh()
        assert source.fetch_count == 2

    @pytest.mark.asyncio
    async def test_refresh_failure_raises_but_keeps_cache(self, store, source):
        await store.ensure_fresh()
        source.fail()
        with pytest.raises(SourceUnavailable):
            await store.refresh()
        assert store.count == 2


class TestLookups:
    @pytest.mark.asyncio
    async def test_all_areas_preserves_feed_order(self, store):
        await store.ensure_fresh()
        assert [a.identifier for a in store.all_areas()] == ["1", "2"]

    @pytest.mark.asyncio
    async def test_all_areas_returns_snapshot(self, store):
        await store.ensure_fresh()
        snapshot = store.all_areas()
        snapshot.clear()
        assert store.count == 2

    def test_all_areas_does_not_refresh(self, store, source):
        assert store.all_areas() == []
        assert source.fetch_count == 0

    @pytest.mark.asyncio
    async def test_lookup_by_identifier(self, store):
        await store.ensure_fresh()
        assert store.lookup_by_identifier("2").name == "WEST RIDGE"
        assert store.lookup_by_identifier(2).name == "WEST RIDGE"

    @pytest.mark.asyncio
    async def test_lookup_unknown_identifier(self, store):
        await store.ensure_fresh()
        assert store.lookup_by_identifier("99") is None


class TestDataQuality:
    @pytest.mark.asyncio
    async def test_missing_identifier_excluded_and_counted(self, clock):
        rows = chicago_rows() + [area_row(None, "GHOST", polygon_geom(WEST_SIDE))]
        store = GeometryStore(StaticAreaSource(rows), clock=clock)
        await store.ensure_fresh()
        assert store.count == 2
        assert store.stats.loaded == 2
        assert store.stats.dropped == 1

    @pytest.mark.asyncio
    async def test_oversized_coordinate_does_not_break_refresh(self, store, source, clock):
        await store.ensure_fresh()
        huge = polygon_geom([[10**400, 0], [0, 1], [1, 1], [10**400, 0]])
        source.set_payload(chicago_rows() + [area_row("3", "OVERFLOW", huge)])
        clock.advance(HOUR + 1)

        await store.ensure_fresh()

        assert store.count == 2
        assert store.stats.dropped == 1
        assert store.stats.refresh_failures == 0

    def test_stats_is_a_copy(self, store):
        stats = store.stats
        stats.dropped = 42
        assert store.stats.dropped == 0


class TestFromConfig:
    @pytest.mark.asyncio
    async def test_uses_config_interval_and_fields(self, clock):
        config = GeoConfig(refresh_minutes=5, identifier_field="id", name_field="label")
        rows = [{"id": "3", "label": "UPTOWN", "the_geom": polygon_geom(WEST_SIDE)}]
        source = StaticAreaSource(rows)
        store = GeometryStore.from_config(config, source, clock=clock)

        await store.ensure_fresh()
        assert store.lookup_by_identifier("3").name == "UPTOWN"

        clock.advance(5 * 60 + 1)
        await store.ensure_fresh()
        assert source.fetch_count == 2

    def test_default_interval_is_one_hour(self, source):
        store = GeometryStore(source)
        assert store._refresh_seconds == timedelta(hours=1).total_seconds()


class TestStoreHealth:
    def test_empty_store_is_unhealthy(self, store):
        status = check_store_health(store)
        assert status.healthy is False
        assert status.details["count"] == 0
        assert status.details["stale"] is True

    @pytest.mark.asyncio
    async def test_stale_store_with_data_is_healthy(self, store, source, clock):
        await store.ensure_fresh()
        source.fail()
        clock.advance(HOUR + 1)
        await store.ensure_fresh()

        status = check_store_health(store)
        assert status.service == "geometry_store"
        assert status.healthy is True
        assert status.details["refresh_failures"] == 1
        assert status.details["last_error"]
