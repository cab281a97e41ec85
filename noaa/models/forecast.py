"""Forecast models for the 12-hour and hourly forecast endpoints."""

import re

from pydantic import Field, model_validator

from noaa.models.common import (
    CELSIUS,
    FAHRENHEIT,
    KM_PER_HOUR,
    MILES_PER_HOUR,
    ApiModel,
    QuantitativeValue,
)
from noaa.models.points import PointsRecord

_WIND_SPEED_RE = re.compile(r"(\d+(?:\.\d+)?)(?:\s+to\s+(\d+(?:\.\d+)?))?\s*(km/h|mph)?")


class ForecastPeriod(ApiModel):
    """One time-bounded forecast entry.

    ``temperature`` and ``wind_speed`` hold the structured wire values. The
    flat ``display_*`` fields and ``temperature_unit`` are filled in by
    ``noaa.client.units.normalize_period`` after decode.
    """

    number: int = 0
    name: str = ""
    start_time: str = ""
    end_time: str = ""
    is_daytime: bool = False
    temperature_trend: str | None = None
    wind_direction: str = ""
    icon: str = ""
    short_forecast: str = ""
    detailed_forecast: str = ""

    temperature: QuantitativeValue = QuantitativeValue()
    wind_speed: QuantitativeValue = QuantitativeValue()
    wind_gust: QuantitativeValue | None = None
    probability_of_precipitation: QuantitativeValue | None = None
    dewpoint: QuantitativeValue | None = None
    relative_humidity: QuantitativeValue | None = None

    display_temperature: float | None = None
    temperature_unit: str = ""
    display_wind_speed: str = ""

    @model_validator(mode="before")
    @classmethod
    def _lift_legacy_values(cls, data):
        """Accept periods that carry flat legacy values instead of quantitative ones."""
        if not isinstance(data, dict):
            return data
        data = dict(data)

        temperature = data.get("temperature")
        if isinstance(temperature, (int, float)) and not isinstance(temperature, bool):
            unit = data.get("temperatureUnit", "F")
            data["temperature"] = {
                "value": temperature,
                "unitCode": CELSIUS if unit == "C" else FAHRENHEIT,
            }

        wind_speed = data.get("windSpeed")
        if isinstance(wind_speed, str):
            data["windSpeed"] = _parse_wind_speed(wind_speed)

        wind_gust = data.get("windGust")
        if isinstance(wind_gust, str):
            data["windGust"] = _parse_wind_speed(wind_gust)
        return data


def _parse_wind_speed(text: str) -> dict:
    """Turn "10 mph" or "5 to 10 km/h" into a quantitative value payload."""
    match = _WIND_SPEED_RE.search(text)
    if match is None:
        return {}
    low, high, unit = match.groups()
    unit_code = KM_PER_HOUR if unit == "km/h" else MILES_PER_HOUR
    if high is None:
        return {"value": float(low), "unitCode": unit_code}
    return {"minValue": float(low), "maxValue": float(high), "unitCode": unit_code}


class ForecastResult(ApiModel):
    updated: str = ""
    units: str = ""
    generated_at: str = ""
    elevation: QuantitativeValue = QuantitativeValue()
    periods: list[ForecastPeriod] = []
    point: PointsRecord | None = Field(default=None, exclude=True)


class HourlyForecastResult(ForecastResult):
    forecast_generator: str = ""
    update_time: str = ""
    valid_times: str = ""
