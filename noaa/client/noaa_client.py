"""weather.gov API client: points lookup plus the forecast, station and office accessors."""

import logging

from noaa.client.http import ModelT, fetch_json
from noaa.client.points_cache import PointsCache
from noaa.client.units import normalize_periods
from noaa.config.schema import ClientConfig
from noaa.config.store import ConfigStore
from noaa.models.forecast import ForecastResult, HourlyForecastResult
from noaa.models.gridpoint import GridpointForecastResult
from noaa.models.office import OfficeRecord
from noaa.models.points import PointsRecord
from noaa.models.station import Observation, ObservationsResult, StationsResult

logger = logging.getLogger(__name__)


class NoaaClient:
    """Typed accessors for api.weather.gov.

    Every forecast-family call first resolves the point (at most one network
    round trip per coordinate string pair for the life of ``cache``), then
    fetches the endpoint the point record names. Latitude and longitude are
    decimal-degree strings and are sent exactly as given.
    """

    def __init__(
        self,
        settings: ConfigStore | None = None,
        cache: PointsCache | None = None,
    ):
        self.settings = settings if settings is not None else ConfigStore()
        self.cache = cache if cache is not None else PointsCache()

    # --- Points ---

    def points(self, lat: str, lon: str) -> PointsRecord:
        """Return the point metadata for ``lat``,``lon``, from cache when possible."""
        return self._points(lat, lon, self.settings.config)

    # --- Forecasts ---

    def forecast(self, lat: str, lon: str) -> ForecastResult:
        """12-hour periods for the next seven days (14 periods at most)."""
        config = self.settings.config
        point = self._points(lat, lon, config)
        result = self._get(_with_units(point.forecast, config), ForecastResult, config)
        result.point = point
        normalize_periods(result.periods, config.units)
        return result

    def hourly_forecast(self, lat: str, lon: str) -> HourlyForecastResult:
        config = self.settings.config
        point = self._points(lat, lon, config)
        result = self._get(
            _with_units(point.forecast_hourly, config), HourlyForecastResult, config
        )
        result.point = point
        normalize_periods(result.periods, config.units)
        return result

    def gridpoint_forecast(self, lat: str, lon: str) -> GridpointForecastResult:
        """Raw forecast time series for the grid cell containing the point."""
        config = self.settings.config
        point = self._points(lat, lon, config)
        result = self._get(
            _with_units(point.forecast_grid_data, config), GridpointForecastResult, config
        )
        result.point = point
        return result

    # --- Stations and offices ---

    def stations(self, lat: str, lon: str) -> StationsResult:
        """Observation station URLs for the point."""
        config = self.settings.config
        point = self._points(lat, lon, config)
        result = self._get(
            _with_units(point.observation_stations, config), StationsResult, config
        )
        result.point = point
        return result

    def office(self, office_id: str) -> OfficeRecord:
        """Forecast office details, e.g. office("LOT") for Chicago."""
        config = self.settings.config
        return self._get(f"{config.base_url}/offices/{office_id}", OfficeRecord, config)

    def observations(self, station_id: str) -> ObservationsResult:
        config = self.settings.config
        return self._get(
            f"{config.base_url}/stations/{station_id}/observations",
            ObservationsResult,
            config,
        )

    def latest_observation(self, station_id: str) -> Observation:
        config = self.settings.config
        return self._get(
            f"{config.base_url}/stations/{station_id}/observations/latest",
            Observation,
            config,
        )

    # --- Internals ---

    def _points(self, lat: str, lon: str, config: ClientConfig) -> PointsRecord:
        endpoint = f"{config.base_url}/points/{lat},{lon}"
        cached = self.cache.get(endpoint)
        if cached is not None:
            logger.debug("Points cache hit for %s", endpoint)
            return cached

        record = self._get(endpoint, PointsRecord, config)
        self.cache.put(endpoint, record)
        return record

    def _get(self, url: str, model: type[ModelT], config: ClientConfig) -> ModelT:
        return fetch_json(url, model, config, self.settings.transport)


def _with_units(endpoint: str, config: ClientConfig) -> str:
    if config.units:
        return f"{endpoint}?units={config.units}"
    return endpoint
