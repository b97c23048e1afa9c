"""Chicago Park District parks and their community-area assignment."""

from neighborhoods.parks.models import NormalizationReport, Park, ParkSize
from neighborhoods.parks.normalizer import ParkNormalizer
from neighborhoods.parks.service import HttpParkSource, ParkService, ParkSource

__all__ = [
    "HttpParkSource",
    "NormalizationReport",
    "Park",
    "ParkNormalizer",
    "ParkService",
    "ParkSize",
    "ParkSource",
]
