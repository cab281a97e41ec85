"""Default connection settings for api.weather.gov."""

from noaa.config.schema import ClientConfig, Units

NOAA_BASE_URL = "https://api.weather.gov"
DEFAULT_USER_AGENT = "noaa-client/0.1.0"
DEFAULT_ACCEPT = "application/ld+json"
DEFAULT_TIMEOUT = 30.0


def default_config() -> ClientConfig:
    return ClientConfig(
        base_url=NOAA_BASE_URL,
        user_agent=DEFAULT_USER_AGENT,
        accept=DEFAULT_ACCEPT,
        units=Units.DEFAULT,
    )
