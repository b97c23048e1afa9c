"""Application configuration loaded from environment variables."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class BoundingBox(BaseModel):
    """Inclusive geographic bounds in degrees."""

    north: float
    south: float
    east: float
    west: float

    def contains(self, longitude: float, latitude: float) -> bool:
        return (
            self.south <= latitude <= self.north
            and self.west <= longitude <= self.east
        )


# Chicago city limits plus O'Hare.
CHICAGO_BOUNDS = BoundingBox(north=42.1, south=41.6, east=-87.5, west=-88.3)


class GeoConfig(BaseSettings):
    """Community-area boundary feed and lookup configuration."""

    model_config = {"env_prefix": "NEIGHBORHOODS_GEO_"}

    feed_url: str = "https://data.cityofchicago.org/resource/igwz-8jzy.json"
    feed_path: str | None = None
    timeout_seconds: int = 30
    refresh_minutes: int = 60
    identifier_field: str = "area_numbe"
    name_field: str = "community"
    geometry_field: str = "the_geom"
    bounds: BoundingBox = Field(default_factory=lambda: CHICAGO_BOUNDS.model_copy())


class GeocoderConfig(BaseSettings):
    """Address geocoding configuration."""

    model_config = {"env_prefix": "NEIGHBORHOODS_GEOCODER_"}

    provider: str = "nominatim"
    base_url: str = "https://nominatim.openstreetmap.org"
    city_suffix: str = ", Chicago, IL"
    viewbox: str = "-88.3,41.6,-87.5,42.1"
    user_agent: str = "neighborhoods/0.1"
    timeout_seconds: int = 10


class ParkConfig(BaseSettings):
    """Chicago Park District feed configuration."""

    model_config = {"env_prefix": "NEIGHBORHOODS_PARKS_"}

    feed_url: str = "https://data.cityofchicago.org/resource/ejsh-fztr.json"
    limit: int = 1000
    refresh_minutes: int = 30
    timeout_seconds: int = 30


class Settings(BaseSettings):
    """Root application settings."""

    model_config = {"env_prefix": "NEIGHBORHOODS_"}

    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    geo: GeoConfig = Field(default_factory=GeoConfig)
    geocoder: GeocoderConfig = Field(default_factory=GeocoderConfig)
    parks: ParkConfig = Field(default_factory=ParkConfig)
