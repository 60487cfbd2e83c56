#!/usr/bin/env python3
"""Base API client: sends one prepared request to the Forge API."""

import json
import httpx
from dataclasses import dataclass
from typing import Dict, Any, Optional
from abc import ABC, abstractmethod
from config.settings import APIConfig
from config.logging_setup import get_logger
from api.exceptions import ConfigurationError, ForgeAPIError

logger = get_logger(__name__)

_MISSING = object()


@dataclass(frozen=True)
class ApiRequest:
    """A prepared upstream call."""
    method: str
    path: str
    body: Optional[Any] = None
    query: Optional[Dict[str, Any]] = None


class ApiResponse:
    """Raw upstream response with a JSON accessor."""

    def __init__(self, status_code: int, content: bytes = b"", headers: Optional[Dict[str, str]] = None):
        self.status_code = status_code
        self.content = content or b""
        self.headers = headers or {}
        self._decoded = _MISSING

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def json(self, key: Optional[str] = None, default: Any = None) -> Any:
        """Decoded body, or the value at a dotted ``key`` path (``default`` when absent)."""
        if self._decoded is _MISSING:
            if not self.content.strip():
                self._decoded = {}
            else:
                try:
                    self._decoded = json.loads(self.content)
                except ValueError as e:
                    raise ForgeAPIError(f"Invalid JSON in response: {e}", self.status_code) from e

        if key is None:
            return self._decoded

        value = self._decoded
        for part in key.split("."):
            if isinstance(value, dict) and part in value:
                value = value[part]
            elif isinstance(value, list) and part.isdigit() and int(part) < len(value):
                value = value[int(part)]
            else:
                return default
        return value


class BaseAPIClient(ABC):
    """Base class for API clients."""

    def __init__(self, config: APIConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        if not config.token:
            raise ConfigurationError("Forge API token not configured. Set FORGE_API_TOKEN.")
        self.config = config
        self.base_url = config.base_url.rstrip('/')
        self._transport = transport

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.config.token}",
        }

    async def send(self, request: ApiRequest) -> ApiResponse:
        """Perform exactly one HTTP call; any failure raises ForgeAPIError."""
        url = f"{self.base_url}{request.path}"
        logger.debug("%s %s", request.method, url)

        try:
            async with httpx.AsyncClient(
                verify=self.config.verify_ssl,
                timeout=self.config.timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(
                    method=request.method,
                    url=url,
                    headers=self.headers,
                    json=request.body,
                    params=request.query,
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            message = self._error_message(e.response)
            logger.warning("%s %s failed: %s", request.method, request.path, message)
            raise ForgeAPIError(message, e.response.status_code) from e
        except httpx.TimeoutException as e:
            logger.warning("%s %s timed out", request.method, request.path)
            raise ForgeAPIError(f"Request timed out after {self.config.timeout}s") from e
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", request.method, request.path, e)
            raise ForgeAPIError(str(e) or type(e).__name__) from e

        logger.debug("Response status: %s", response.status_code)
        return ApiResponse(response.status_code, response.content, dict(response.headers))

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Pull the upstream message out of an error response."""
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict):
            if body.get("message"):
                return str(body["message"])
            errors = body.get("errors")
            if isinstance(errors, dict) and errors:
                first = next(iter(errors.values()))
                return str(first[0] if isinstance(first, list) and first else first)
            if isinstance(errors, list) and errors:
                return str(errors[0])
        return f"HTTP {response.status_code}: {response.reason_phrase}"

    @abstractmethod
    async def test_connection(self) -> bool:
        """Test the API connection."""
        pass
