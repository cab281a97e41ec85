"""Single GET + JSON decode path shared by every accessor."""

import json
import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from noaa.config.defaults import DEFAULT_TIMEOUT
from noaa.config.schema import ClientConfig
from noaa.errors import DecodeError, ResponseStatusError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def request_headers(config: ClientConfig) -> dict[str, str]:
    return {"Accept": config.accept, "User-Agent": config.user_agent}


def fetch_json(
    url: str,
    model: type[ModelT],
    config: ClientConfig,
    transport: httpx.Client | None = None,
) -> ModelT:
    """GET ``url`` once and decode the JSON body into ``model``.

    Raises ResponseStatusError on a non-2xx status and DecodeError when the
    body does not decode. httpx.RequestError subclasses propagate unchanged.
    There are no retries.
    """
    if transport is None:
        with httpx.Client(timeout=DEFAULT_TIMEOUT) as client:
            return _fetch(client, url, model, config)
    return _fetch(transport, url, model, config)


def _fetch(
    client: httpx.Client, url: str, model: type[ModelT], config: ClientConfig
) -> ModelT:
    request = client.build_request("GET", url, headers=request_headers(config))
    logger.debug("GET %s", url)
    resp = client.send(request, stream=True)
    try:
        if not resp.is_success:
            logger.error("NOAA %s returned %d %s", url, resp.status_code, resp.reason_phrase)
            raise ResponseStatusError(resp.status_code, resp.reason_phrase, url)
        resp.read()
        return _decode(resp, model, url)
    finally:
        resp.close()


def _decode(resp: httpx.Response, model: type[ModelT], url: str) -> ModelT:
    try:
        data = resp.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error("NOAA %s returned a body that is not JSON: %s", url, e)
        raise DecodeError(f"Invalid JSON from {url}: {e}", url) from e
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.error("NOAA %s returned an unexpected %s payload", url, model.__name__)
        raise DecodeError(f"Unexpected {model.__name__} payload from {url}: {e}", url) from e
