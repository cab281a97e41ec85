"""Shared base model and quantitative value type for weather.gov payloads."""

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

# WMO unit codes as reported in quantitative values
CELSIUS = "wmoUnit:degC"
FAHRENHEIT = "wmoUnit:degF"
KM_PER_HOUR = "wmoUnit:km_h-1"
MILES_PER_HOUR = "wmoUnit:mi_h-1"


class ApiModel(BaseModel):
    """Base for response models.

    Field names are snake_case with camelCase wire aliases. Unknown wire
    fields are ignored. A geo+json feature is unwrapped to its
    ``properties`` so the same model decodes ld+json and geo+json bodies.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _unwrap_feature(cls, data):
        if isinstance(data, dict) and isinstance(data.get("properties"), dict):
            return data["properties"]
        return data


class QuantitativeValue(ApiModel):
    value: float | None = None
    max_value: float | None = None
    min_value: float | None = None
    unit_code: str = ""
    quality_control: str = ""


def unit_suffix(unit_code: str) -> str:
    """Strip the namespace prefix: "wmoUnit:degC" and "unit:degC" both give "degC"."""
    return unit_code.rsplit(":", 1)[-1]


def is_celsius(unit_code: str) -> bool:
    return unit_suffix(unit_code) == "degC"


def is_km_per_hour(unit_code: str) -> bool:
    return unit_suffix(unit_code) == "km_h-1"
