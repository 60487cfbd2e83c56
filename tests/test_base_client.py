"""Tests for the single-call HTTP layer in api.base_client."""

import asyncio

import httpx
import pytest

from api.base_client import ApiRequest, ApiResponse
from api.exceptions import ConfigurationError, ForgeAPIError
from api.forge_client import ForgeClient
from config.settings import APIConfig


def _client(api_config, handler):
    return ForgeClient(api_config, transport=httpx.MockTransport(handler))


def test_missing_token_is_a_configuration_error():
    with pytest.raises(ConfigurationError, match="FORGE_API_TOKEN"):
        ForgeClient(APIConfig(token=None))


def test_request_carries_bearer_token_and_json_headers(forge, recorder):
    recorder.reply(200, {"ok": True})
    response = asyncio.run(forge.send(ApiRequest("GET", "/servers", query={"page": 2})))

    request = recorder.last
    assert str(request.url) == "https://forge.test/api/v1/servers?page=2"
    assert request.headers["Authorization"] == "Bearer test-token"
    assert request.headers["Accept"] == "application/json"
    assert request.headers["Content-Type"] == "application/json"
    assert response.json() == {"ok": True}


def test_body_is_sent_as_json(forge, recorder):
    asyncio.run(forge.send(ApiRequest("POST", "/servers/1/reboot", body={"force": True})))
    assert recorder.last.method == "POST"
    assert recorder.last_json() == {"force": True}


@pytest.mark.parametrize("body, message", [
    ({"message": "Server not found."}, "Server not found."),
    ({"errors": {"name": ["The name field is required."]}}, "The name field is required."),
    ({"errors": ["Quota exceeded"]}, "Quota exceeded"),
    (None, "HTTP 500: Internal Server Error"),
])
def test_error_message_extraction(forge, recorder, body, message):
    recorder.reply(500 if body is None else 422, body)
    with pytest.raises(ForgeAPIError) as excinfo:
        asyncio.run(forge.send(ApiRequest("GET", "/servers/1")))
    assert str(excinfo.value) == message
    assert excinfo.value.status_code == (500 if body is None else 422)


def test_not_found_status_is_kept(forge, recorder):
    recorder.reply(404, {"message": "Not Found"})
    with pytest.raises(ForgeAPIError) as excinfo:
        asyncio.run(forge.servers.get(99))
    assert excinfo.value.status_code == 404


def test_timeout(api_config):
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(ForgeAPIError, match=r"Request timed out after 30.0s") as excinfo:
        asyncio.run(_client(api_config, handler).send(ApiRequest("GET", "/user")))
    assert excinfo.value.status_code is None


def test_connection_error(api_config):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ForgeAPIError, match="connection refused"):
        asyncio.run(_client(api_config, handler).send(ApiRequest("GET", "/user")))


def test_invalid_json_body(forge, recorder):
    recorder.reply(200, text="<html>maintenance</html>")
    with pytest.raises(ForgeAPIError, match="Invalid JSON"):
        asyncio.run(forge.servers.list())


def test_empty_body_is_not_an_empty_list(forge, recorder):
    recorder.reply(200)
    with pytest.raises(ForgeAPIError, match="expects a 'servers' key"):
        asyncio.run(forge.servers.list())


class TestApiResponse:
    def test_dotted_lookup(self):
        response = ApiResponse(200, b'{"site": {"aliases": ["a.test", "b.test"]}}')
        assert response.json("site.aliases.1") == "b.test"
        assert response.json("site.missing", "fallback") == "fallback"
        assert response.json("site.aliases.7") is None

    def test_text(self):
        assert ApiResponse(200, b"server {\n}").text == "server {\n}"

    def test_blank_body(self):
        assert ApiResponse(204).json() == {}
