#!/usr/bin/env python3
"""Base class for the per-domain resource façades."""

from typing import Any, Dict, Optional
from api.base_client import BaseAPIClient
from api.endpoints import Endpoint


class BaseResource:
    """Pairs endpoints with the client that sends them.

    Façade methods never catch: a failed call raises ForgeAPIError to the caller.
    """

    def __init__(self, client: BaseAPIClient):
        self.client = client

    async def _send(self, endpoint: Endpoint, body: Any = None,
                    query: Optional[Dict[str, Any]] = None, **params) -> Any:
        response = await self.client.send(endpoint.request(body, query, **params))
        return endpoint.map(response, **params)

    async def _call(self, endpoint: Endpoint, body: Any = None, **params) -> None:
        """Send a side-effect-only request."""
        await self.client.send(endpoint.request(body, **params))
