"""Rebuild the legacy flat display fields of forecast periods.

The API reports temperature and wind speed as quantitative values. Older
consumers expect a plain temperature with a unit letter and a wind speed
string such as "5 to 10 mph"; this module derives those fields in the
configured units. Unit codes are only checked for Celsius and km/h; any
other code is assumed to be Fahrenheit or mph respectively.
"""

from noaa.config.schema import Units
from noaa.models.common import QuantitativeValue, is_celsius, is_km_per_hour
from noaa.models.forecast import ForecastPeriod

MPH_TO_KMH = 1.60934
KMH_TO_MPH = 0.62137


def fahrenheit_to_celsius(value: float) -> float:
    return (5 / 9) * (value - 32)


def celsius_to_fahrenheit(value: float) -> float:
    return (9 / 5) * value + 32


def normalize_periods(periods: list[ForecastPeriod], units: str) -> None:
    for period in periods:
        normalize_period(period, units)


def normalize_period(period: ForecastPeriod, units: str) -> None:
    """Fill ``display_temperature``, ``temperature_unit`` and ``display_wind_speed`` in place."""
    metric = units == Units.SI

    period.display_temperature = _display_temperature(period.temperature, metric)
    period.temperature_unit = "C" if metric else "F"
    period.display_wind_speed = format_wind_speed(period.wind_speed, metric)


def _display_temperature(temperature: QuantitativeValue, metric: bool) -> float | None:
    value = temperature.value
    if value is None:
        return None
    celsius = is_celsius(temperature.unit_code)
    if metric and not celsius:
        return fahrenheit_to_celsius(value)
    if not metric and celsius:
        return celsius_to_fahrenheit(value)
    return value


def format_wind_speed(wind_speed: QuantitativeValue, metric: bool) -> str:
    """Render "<value> <unit>" or "<min> to <max> <unit>", rounded to whole numbers.

    A missing min or max counts as zero. When only one end of the range is
    present it is rendered alone, as a single value.
    """
    factor = 1.0
    kmh = is_km_per_hour(wind_speed.unit_code)
    if metric and not kmh:
        factor = MPH_TO_KMH
    elif not metric and kmh:
        factor = KMH_TO_MPH
    unit = "km/h" if metric else "mph"

    value = (wind_speed.value or 0.0) * factor
    low = (wind_speed.min_value or 0.0) * factor
    high = (wind_speed.max_value or 0.0) * factor

    if low == 0 and high == 0:
        return f"{value:.0f} {unit}"
    # half-open range: show the end that is present
    if low == 0 or high == 0:
        return f"{low or high:.0f} {unit}"
    return f"{low:.0f} to {high:.0f} {unit}"
