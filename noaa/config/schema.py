"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field


class Units(StrEnum):
    DEFAULT = ""  # service default, which is US
    US = "us"
    SI = "si"


class ClientConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    base_url: str = Field(min_length=1)  # no trailing slash
    user_agent: str = Field(min_length=1)  # e.g. (myweatherapp.com, contact@myweatherapp.com)
    accept: str = Field(min_length=1)
    units: Units = Units.DEFAULT
    debug: bool = False
