"""Tests for the GET + decode pipeline."""

import httpx
import pytest
import respx

from noaa.client.http import fetch_json
from noaa.config.schema import ClientConfig
from noaa.errors import DecodeError, ResponseStatusError
from noaa.models.office import OfficeRecord
from noaa.models.points import PointsRecord

OFFICE_URL = "https://test-noaa.example.com/offices/LOT"


class TrackingStream(httpx.SyncByteStream):
    def __init__(self, body: bytes):
        self.body = body
        self.closed = False

    def __iter__(self):
        yield self.body

    def close(self) -> None:
        self.closed = True


def _client_returning(status: int, body: bytes) -> tuple[httpx.Client, TrackingStream]:
    stream = TrackingStream(body)

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, stream=stream)

    return httpx.Client(transport=httpx.MockTransport(handler)), stream


class TestFetchJson:
    @respx.mock
    def test_success(self, test_config: ClientConfig, load_fixture):
        respx.get(OFFICE_URL).mock(
            return_value=httpx.Response(200, json=load_fixture("office_lot.json"))
        )
        office = fetch_json(OFFICE_URL, OfficeRecord, test_config)
        assert office.id == "LOT"
        assert office.name == "Chicago, IL"

    @respx.mock
    def test_sends_configured_headers(self, test_config: ClientConfig, load_fixture):
        route = respx.get(OFFICE_URL).mock(
            return_value=httpx.Response(200, json=load_fixture("office_lot.json"))
        )
        fetch_json(OFFICE_URL, OfficeRecord, test_config)
        request = route.calls[0].request
        assert request.headers["accept"] == "application/ld+json"
        assert request.headers["user-agent"] == test_config.user_agent

    @respx.mock
    def test_non_2xx_raises_status_error(self, test_config: ClientConfig):
        route = respx.get(OFFICE_URL).mock(return_value=httpx.Response(503))
        with pytest.raises(ResponseStatusError, match="503") as exc_info:
            fetch_json(OFFICE_URL, OfficeRecord, test_config)
        assert exc_info.value.status_code == 503
        assert exc_info.value.reason == "Service Unavailable"
        assert exc_info.value.url == OFFICE_URL
        # no retry
        assert route.call_count == 1

    @respx.mock
    def test_redirect_is_not_success(self, test_config: ClientConfig):
        respx.get(OFFICE_URL).mock(
            return_value=httpx.Response(301, headers={"Location": "https://elsewhere"})
        )
        with pytest.raises(ResponseStatusError) as exc_info:
            fetch_json(OFFICE_URL, OfficeRecord, test_config)
        assert exc_info.value.status_code == 301

    @respx.mock
    def test_invalid_json_raises_decode_error(self, test_config: ClientConfig):
        respx.get(OFFICE_URL).mock(
            return_value=httpx.Response(200, content=b"<html>not json</html>")
        )
        with pytest.raises(DecodeError, match="Invalid JSON"):
            fetch_json(OFFICE_URL, OfficeRecord, test_config)

    @respx.mock
    def test_shape_mismatch_raises_decode_error(self, test_config: ClientConfig):
        # a points record without its endpoint URLs is unusable
        respx.get(OFFICE_URL).mock(
            return_value=httpx.Response(200, json={"cwa": "LOT"})
        )
        with pytest.raises(DecodeError, match="PointsRecord"):
            fetch_json(OFFICE_URL, PointsRecord, test_config)

    @respx.mock
    def test_transport_error_propagates_unchanged(self, test_config: ClientConfig):
        respx.get(OFFICE_URL).mock(side_effect=httpx.ConnectError("connection refused"))
        with pytest.raises(httpx.ConnectError, match="connection refused"):
            fetch_json(OFFICE_URL, OfficeRecord, test_config)


class TestInjectedTransport:
    def test_uses_given_client(self, test_config: ClientConfig):
        client, _ = _client_returning(200, b'{"id": "LOT", "name": "Chicago, IL"}')
        with client:
            office = fetch_json(OFFICE_URL, OfficeRecord, test_config, client)
        assert office.name == "Chicago, IL"

    def test_body_released_on_success(self, test_config: ClientConfig):
        client, stream = _client_returning(200, b'{"id": "LOT"}')
        with client:
            fetch_json(OFFICE_URL, OfficeRecord, test_config, client)
        assert stream.closed

    def test_body_released_on_status_error(self, test_config: ClientConfig):
        client, stream = _client_returning(500, b"oops")
        with client, pytest.raises(ResponseStatusError):
            fetch_json(OFFICE_URL, OfficeRecord, test_config, client)
        assert stream.closed

    def test_body_released_on_decode_error(self, test_config: ClientConfig):
        client, stream = _client_returning(200, b"not json")
        with client, pytest.raises(DecodeError):
            fetch_json(OFFICE_URL, OfficeRecord, test_config, client)
        assert stream.closed
