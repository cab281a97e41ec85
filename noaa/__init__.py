"""Python client for the api.weather.gov forecast service."""

from noaa.client.noaa_client import NoaaClient
from noaa.client.points_cache import PointsCache
from noaa.config.schema import ClientConfig, Units
from noaa.config.store import ConfigStore
from noaa.errors import ConfigError, DecodeError, NoaaError, ResponseStatusError

__all__ = [
    "ClientConfig",
    "ConfigError",
    "ConfigStore",
    "DecodeError",
    "NoaaClient",
    "NoaaError",
    "PointsCache",
    "ResponseStatusError",
    "Units",
]
