"""Exceptions raised by the weather.gov client.

Transport failures (timeouts, refused connections, DNS) are not wrapped:
they surface as the ``httpx.RequestError`` subclass httpx raised.
"""


class NoaaError(Exception):
    """Base class for errors raised by this package."""


class ConfigError(NoaaError, ValueError):
    """Raised when a configuration change violates a constraint."""


class ResponseStatusError(NoaaError):
    """Raised when the API answers with a non-2xx status."""

    def __init__(self, status_code: int, reason: str, url: str = ""):
        super().__init__(f"{status_code} {reason}")
        self.status_code = status_code
        self.reason = reason
        self.url = url


class DecodeError(NoaaError):
    """Raised when a response body is not JSON or does not fit the expected model."""

    def __init__(self, message: str, url: str = ""):
        super().__init__(message)
        self.url = url
