"""Tests for config schema validation."""

import pytest
from pydantic import ValidationError

from noaa.config.defaults import (
    DEFAULT_ACCEPT,
    DEFAULT_USER_AGENT,
    NOAA_BASE_URL,
    default_config,
)
from noaa.config.schema import ClientConfig, Units


class TestClientConfig:
    def test_defaults(self):
        config = default_config()
        assert config.base_url == NOAA_BASE_URL
        assert config.user_agent == DEFAULT_USER_AGENT
        assert config.accept == DEFAULT_ACCEPT
        assert config.units == Units.DEFAULT
        assert config.debug is False

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            ClientConfig(
                base_url="https://x", user_agent="ua", accept="a", api_key="bad"
            )

    @pytest.mark.parametrize("field", ["base_url", "user_agent", "accept"])
    def test_required_fields_not_empty(self, field: str):
        data = {"base_url": "https://x", "user_agent": "ua", "accept": "a"}
        data[field] = ""
        with pytest.raises(ValidationError):
            ClientConfig(**data)

    def test_units_values(self):
        base = {"base_url": "https://x", "user_agent": "ua", "accept": "a"}
        assert ClientConfig(**base, units="si").units == Units.SI
        assert ClientConfig(**base, units="us").units == Units.US
        assert ClientConfig(**base, units="").units == Units.DEFAULT
        with pytest.raises(ValidationError):
            ClientConfig(**base, units="metric")

    def test_frozen(self):
        config = default_config()
        with pytest.raises(ValidationError):
            config.units = Units.SI
