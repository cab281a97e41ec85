"""Observation station models."""

from typing import Any

from pydantic import Field, model_validator

from noaa.models.common import ApiModel, QuantitativeValue
from noaa.models.points import PointsRecord


class StationsResult(ApiModel):
    """Observation station URLs near a point, nearest first."""

    observation_stations: list[str] = []
    point: PointsRecord | None = Field(default=None, exclude=True)


class CloudLayer(ApiModel):
    amount: str = ""
    base: QuantitativeValue = QuantitativeValue()


class Observation(ApiModel):
    id: str = Field(default="", alias="@id")
    type: str = Field(default="", alias="@type")
    station: str = ""
    timestamp: str = ""
    text_description: str = ""
    icon: str | None = None
    raw_message: str = ""
    geometry: Any = None  # WKT string in ld+json, GeoJSON object otherwise

    elevation: QuantitativeValue = QuantitativeValue()
    temperature: QuantitativeValue = QuantitativeValue()
    dewpoint: QuantitativeValue = QuantitativeValue()
    wind_direction: QuantitativeValue = QuantitativeValue()
    wind_speed: QuantitativeValue = QuantitativeValue()
    wind_gust: QuantitativeValue = QuantitativeValue()
    barometric_pressure: QuantitativeValue = QuantitativeValue()
    sea_level_pressure: QuantitativeValue = QuantitativeValue()
    visibility: QuantitativeValue = QuantitativeValue()
    max_temperature_last24_hours: QuantitativeValue = QuantitativeValue()
    min_temperature_last24_hours: QuantitativeValue = QuantitativeValue()
    precipitation_last_hour: QuantitativeValue = QuantitativeValue()
    precipitation_last3_hours: QuantitativeValue = QuantitativeValue()
    precipitation_last6_hours: QuantitativeValue = QuantitativeValue()
    relative_humidity: QuantitativeValue = QuantitativeValue()
    wind_chill: QuantitativeValue = QuantitativeValue()
    heat_index: QuantitativeValue = QuantitativeValue()

    cloud_layers: list[CloudLayer] = []
    present_weather: list[dict[str, Any]] = []


class ObservationsResult(ApiModel):
    observations: list[Observation] = Field(default=[], alias="@graph")

    @model_validator(mode="before")
    @classmethod
    def _collect_features(cls, data):
        """Map a geo+json FeatureCollection onto the ld+json ``@graph`` shape."""
        if isinstance(data, dict) and "@graph" not in data and isinstance(data.get("features"), list):
            return {"@graph": data["features"]}
        return data
