"""Raw gridpoint forecast models for /gridpoints/{wfo}/{x},{y}.

See https://weather-gov.github.io/api/gridpoints for field meanings.
"""

from pydantic import Field

from noaa.models.common import ApiModel, QuantitativeValue
from noaa.models.points import PointsRecord


class TimeSeriesValue(ApiModel):
    valid_time: str  # ISO 8601 interval, e.g. 2019-07-04T18:00:00+00:00/PT3H
    value: float | None = None


class TimeSeries(ApiModel):
    uom: str = ""  # unit of measure
    values: list[TimeSeriesValue] = []


class WeatherValueItem(ApiModel):
    coverage: str | None = None
    weather: str | None = None
    intensity: str | None = None
    attributes: list[str] = []


class WeatherValue(ApiModel):
    valid_time: str
    value: list[WeatherValueItem] = []


class Weather(ApiModel):
    values: list[WeatherValue] = []


class HazardValueItem(ApiModel):
    phenomenon: str = ""
    significance: str = ""
    event_number: int | None = Field(default=None, alias="event_number")


class HazardValue(ApiModel):
    valid_time: str
    value: list[HazardValueItem] = []


class Hazards(ApiModel):
    values: list[HazardValue] = []


class GridpointForecastResult(ApiModel):
    update_time: str = ""
    elevation: QuantitativeValue = QuantitativeValue()
    weather: Weather = Weather()
    hazards: Hazards = Hazards()

    temperature: TimeSeries = TimeSeries()
    dewpoint: TimeSeries = TimeSeries()
    max_temperature: TimeSeries = TimeSeries()
    min_temperature: TimeSeries = TimeSeries()
    relative_humidity: TimeSeries = TimeSeries()
    apparent_temperature: TimeSeries = TimeSeries()
    heat_index: TimeSeries = TimeSeries()
    wind_chill: TimeSeries = TimeSeries()
    sky_cover: TimeSeries = TimeSeries()
    wind_direction: TimeSeries = TimeSeries()
    wind_speed: TimeSeries = TimeSeries()
    wind_gust: TimeSeries = TimeSeries()
    probability_of_precipitation: TimeSeries = TimeSeries()
    quantitative_precipitation: TimeSeries = TimeSeries()
    ice_accumulation: TimeSeries = TimeSeries()
    snowfall_amount: TimeSeries = TimeSeries()
    snow_level: TimeSeries = TimeSeries()
    ceiling_height: TimeSeries = TimeSeries()
    visibility: TimeSeries = TimeSeries()
    transport_wind_speed: TimeSeries = TimeSeries()
    transport_wind_direction: TimeSeries = TimeSeries()
    mixing_height: TimeSeries = TimeSeries()
    haines_index: TimeSeries = TimeSeries()
    lightning_activity_level: TimeSeries = TimeSeries()
    twenty_foot_wind_speed: TimeSeries = TimeSeries()
    twenty_foot_wind_direction: TimeSeries = TimeSeries()
    wave_height: TimeSeries = TimeSeries()
    wave_period: TimeSeries = TimeSeries()
    wave_direction: TimeSeries = TimeSeries()
    primary_swell_height: TimeSeries = TimeSeries()
    primary_swell_direction: TimeSeries = TimeSeries()
    secondary_swell_height: TimeSeries = TimeSeries()
    secondary_swell_direction: TimeSeries = TimeSeries()
    wave_period2: TimeSeries = TimeSeries()
    wind_wave_height: TimeSeries = TimeSeries()
    dispersion_index: TimeSeries = TimeSeries()
    pressure: TimeSeries = TimeSeries()
    probability_of_tropical_storm_winds: TimeSeries = TimeSeries()
    probability_of_hurricane_winds: TimeSeries = TimeSeries()
    potential_of_15mph_winds: TimeSeries = Field(default=TimeSeries(), alias="potentialOf15mphWinds")
    potential_of_25mph_winds: TimeSeries = Field(default=TimeSeries(), alias="potentialOf25mphWinds")
    potential_of_35mph_winds: TimeSeries = Field(default=TimeSeries(), alias="potentialOf35mphWinds")
    potential_of_45mph_winds: TimeSeries = Field(default=TimeSeries(), alias="potentialOf45mphWinds")
    potential_of_20mph_wind_gusts: TimeSeries = Field(default=TimeSeries(), alias="potentialOf20mphWindGusts")
    potential_of_30mph_wind_gusts: TimeSeries = Field(default=TimeSeries(), alias="potentialOf30mphWindGusts")
    potential_of_40mph_wind_gusts: TimeSeries = Field(default=TimeSeries(), alias="potentialOf40mphWindGusts")
    potential_of_50mph_wind_gusts: TimeSeries = Field(default=TimeSeries(), alias="potentialOf50mphWindGusts")
    potential_of_60mph_wind_gusts: TimeSeries = Field(default=TimeSeries(), alias="potentialOf60mphWindGusts")
    grassland_fire_danger_index: TimeSeries = TimeSeries()
    probability_of_thunder: TimeSeries = TimeSeries()
    davis_stability_index: TimeSeries = TimeSeries()
    atmospheric_dispersion_index: TimeSeries = TimeSeries()
    low_visibility_occurrence_risk_index: TimeSeries = TimeSeries()
    stability: TimeSeries = TimeSeries()
    red_flag_threat_index: TimeSeries = TimeSeries()

    point: PointsRecord | None = Field(default=None, exclude=True)
