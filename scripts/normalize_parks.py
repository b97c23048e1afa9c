#!/usr/bin/env python3
"""CLI script to re-check park community-area assignments."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from datetime import timedelta
from pathlib import Path

# Ensure the project source is importable when running the script directly.
_project_root = Path(__file__).resolve().parent.parent
_src = _project_root / "src"
if str(_src) not in sys.path:
    sys.path.insert(0, str(_src))

from neighborhoods.core.config import Settings  # noqa: E402
from neighborhoods.core.errors import SourceUnavailable  # noqa: E402
from neighborhoods.geo.classifier import AreaClassifier  # noqa: E402
from neighborhoods.geo.health import check_store_health  # noqa: E402
from neighborhoods.geo.source import FileAreaSource, create_area_source  # noqa: E402
from neighborhoods.geo.store import GeometryStore  # noqa: E402
from neighborhoods.parks.normalizer import ParkNormalizer  # noqa: E402
from neighborhoods.parks.service import HttpParkSource, ParkService  # noqa: E402


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Fetch Chicago parks and correct their community-area assignments."
    )
    parser.add_argument(
        "--areas-file",
        type=str,
        default=None,
        help="Local community-area JSON (rows or FeatureCollection) instead of the feed.",
    )
    parser.add_argument(
        "--area",
        type=str,
        default=None,
        help="Only list parks in this community area after correction.",
    )
    return parser.parse_args()


async def main() -> None:
    args = parse_args()
    settings = Settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    if args.areas_file:
        area_source = FileAreaSource(args.areas_file, geometry_field=settings.geo.geometry_field)
    else:
        area_source = create_area_source(settings.geo)
    store = GeometryStore.from_config(settings.geo, area_source)
    classifier = AreaClassifier(store, settings.geo.bounds)

    park_source = HttpParkSource(settings.parks)
    service = ParkService(
        park_source,
        ParkNormalizer(classifier),
        refresh_interval=timedelta(minutes=settings.parks.refresh_minutes),
    )
    try:
        try:
            await store.ensure_fresh()
        except SourceUnavailable as exc:
            print(f"ERROR: community areas unavailable: {exc}")
            sys.exit(1)
        health = check_store_health(store)
        print(f"Loaded {health.details['count']} community areas "
              f"({health.details['dropped']} malformed records dropped).")

        report = await service.validate_and_correct()
        in_area = await service.parks_for_area(args.area) if args.area else []
    finally:
        await park_source.close()
        if hasattr(area_source, "close"):
            await area_source.close()

    print(f"Checked {report.checked} parks: "
          f"{report.corrected} corrected, {report.unresolved} unresolved.")

    for park in in_area:
        print(f"  {park.name} ({park.size}) - {park.address}")


if __name__ == "__main__":
    asyncio.run(main())
