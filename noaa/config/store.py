"""Mutable holder for the active client configuration and HTTP transport.

Each setter builds a new frozen ``ClientConfig`` and swaps it in with a single
assignment, so a request that has already read ``config`` keeps a consistent
snapshot. Swapping config or transport while requests are in flight from
other threads is left to the caller to coordinate.
"""

import logging
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import ValidationError

from noaa.config.defaults import default_config
from noaa.config.schema import ClientConfig, Units
from noaa.errors import ConfigError

logger = logging.getLogger(__name__)


class ConfigStore:
    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.Client | None = None,
    ):
        self._config = config if config is not None else default_config()
        self._transport = transport

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def transport(self) -> httpx.Client | None:
        """The installed HTTP client, or None to use the default transport."""
        return self._transport

    def get_config(self) -> ClientConfig:
        return self._config.model_copy()

    def set_config(self, config: ClientConfig | Mapping[str, Any]) -> None:
        """Replace the whole configuration in one call.

        Every field is re-validated, so an instance built with
        ``model_construct`` or a plain mapping is checked the same way.
        """
        data = config.model_dump() if isinstance(config, ClientConfig) else dict(config)
        try:
            new_config = ClientConfig(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e
        self._config = new_config

    def reset(self) -> None:
        self._config = default_config()

    def set_user_agent(self, user_agent: str) -> None:
        """Change the User-Agent header. weather.gov uses it in place of an API key."""
        if not user_agent:
            raise ConfigError("the api requires a user-agent")
        self._update(user_agent=user_agent)

    def set_units(self, units: str) -> None:
        """Select "us" or "si" units. Any other value falls back to the service default."""
        normalized = (units or "").lower()
        if normalized not in (Units.US, Units.SI):
            logger.debug("Unrecognized units %r, using service default", units)
            normalized = Units.DEFAULT
        self._update(units=Units(normalized))

    def set_base_url(self, base_url: str) -> None:
        if not base_url:
            raise ConfigError("the api requires a base url")
        self._update(base_url=base_url)

    def set_accept_header(self, accept: str) -> None:
        """Change the Accept header. Models decode ld+json and geo+json bodies."""
        if not accept:
            raise ConfigError("the api requires an accept header")
        self._update(accept=accept)

    def set_transport(self, transport: httpx.Client | None) -> httpx.Client | None:
        """Install an HTTP client and return the previous one.

        Passing None restores the default transport. The store never closes
        clients; whoever created a client owns it.
        """
        previous = self._transport
        self._transport = transport
        return previous

    def _update(self, **changes: Any) -> None:
        self._config = self._config.model_copy(update=changes)
