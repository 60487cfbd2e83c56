"""
Shared fixtures for the Forge MCP server tests.
No test talks to the real Forge API: façades are mocked or requests are
answered by an httpx.MockTransport.
"""

import json
from unittest.mock import AsyncMock

import httpx
import pytest

from api.forge_client import ForgeClient
from config.settings import APIConfig
from tools.registry import ToolRegistry

BASE_URL = "https://forge.test/api/v1"


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Keep a developer's real Forge settings out of the tests."""
    for name in ("FORGE_API_TOKEN", "FORGE_API_URL", "FORGE_VERIFY_SSL", "FORGE_API_TIMEOUT",
                 "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def api_config():
    return APIConfig(base_url=BASE_URL, token="test-token")


class Recorder:
    """MockTransport handler that records requests and replays canned responses."""

    def __init__(self):
        self.requests = []
        self.responses = []

    def reply(self, status=200, body=None, text=None):
        if text is not None:
            self.responses.append(httpx.Response(status, text=text))
        elif body is None:
            self.responses.append(httpx.Response(status))
        else:
            self.responses.append(httpx.Response(status, json=body))
        return self

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            return httpx.Response(200, json={})
        return self.responses.pop(0)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content) if self.last.content else None


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def forge(api_config, recorder):
    """A real ForgeClient whose HTTP traffic goes to ``recorder``."""
    return ForgeClient(api_config, transport=httpx.MockTransport(recorder))


@pytest.fixture
def fake_client():
    """Client double: every façade method is an AsyncMock."""
    return AsyncMock()


@pytest.fixture
def registry(fake_client):
    registry = ToolRegistry()
    registry.register_all(fake_client)
    return registry


