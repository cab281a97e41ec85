"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from noaa.client.noaa_client import NoaaClient
from noaa.config.schema import ClientConfig
from noaa.config.store import ConfigStore

BASE_URL = "https://test-noaa.example.com"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def load_fixture(fixtures_dir: Path):
    """Return a loader for JSON payloads in the fixtures directory."""

    def _load(name: str) -> dict:
        with open(fixtures_dir / name) as f:
            return json.load(f)

    return _load


@pytest.fixture
def test_config() -> ClientConfig:
    return ClientConfig(
        base_url=BASE_URL,
        user_agent="(noaa-client tests, tests@example.com)",
        accept="application/ld+json",
    )


@pytest.fixture
def settings(test_config: ClientConfig) -> ConfigStore:
    return ConfigStore(test_config)


@pytest.fixture
def client(settings: ConfigStore) -> NoaaClient:
    return NoaaClient(settings)
