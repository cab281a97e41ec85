"""Point metadata returned by /points/{lat},{lon}."""

from pydantic import ConfigDict, Field

from noaa.models.common import ApiModel


class PointsRecord(ApiModel):
    """Endpoints and grid coordinates for one latitude/longitude pair.

    Records are shared by every accessor that resolves the same point, so
    they are frozen.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default="", alias="@id")
    cwa: str = ""
    forecast_office: str = ""
    grid_id: str = ""
    grid_x: int = 0
    grid_y: int = 0
    forecast: str
    forecast_hourly: str
    forecast_grid_data: str
    observation_stations: str
    time_zone: str = ""
    radar_station: str = ""
