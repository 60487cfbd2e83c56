#!/usr/bin/env python3
"""Laravel integrations (Horizon, Octane, Reverb, Pulse, Inertia, maintenance mode, scheduler)."""

from typing import Any, Dict, Optional, Union
from api.base_resource import BaseResource
from api.endpoints import get, post, delete

INTEGRATIONS = (
    "horizon", "octane", "reverb", "pulse", "inertia", "laravel-maintenance", "laravel-scheduler",
)

INTEGRATION = "/servers/{server_id}/sites/{site_id}/integrations/{integration}"

GET_INTEGRATION = get(INTEGRATION)
ENABLE_INTEGRATION = post(INTEGRATION)
DISABLE_INTEGRATION = delete(INTEGRATION)


class IntegrationsAPI(BaseResource):

    @staticmethod
    def _check(integration: str) -> str:
        if integration not in INTEGRATIONS:
            raise ValueError(f"Unknown integration '{integration}'. Expected one of: {', '.join(INTEGRATIONS)}")
        return integration

    async def get(self, server_id: int, site_id: int, integration: str) -> Dict[str, Any]:
        response = await self._send(GET_INTEGRATION, server_id=server_id, site_id=site_id,
                                    integration=self._check(integration))
        return response.json()

    async def enable(self, server_id: int, site_id: int, integration: str,
                     options: Optional[Dict[str, Any]] = None) -> None:
        await self._call(ENABLE_INTEGRATION, options or None, server_id=server_id, site_id=site_id,
                         integration=self._check(integration))

    async def disable(self, server_id: int, site_id: int, integration: str) -> None:
        await self._call(DISABLE_INTEGRATION, server_id=server_id, site_id=site_id,
                         integration=self._check(integration))

    async def enable_octane(self, server_id: int, site_id: int, server: str = "swoole",
                            workers: Union[str, int] = "auto") -> None:
        await self.enable(server_id, site_id, "octane", {"server": server, "workers": workers})

    async def enable_maintenance(self, server_id: int, site_id: int, secret: Optional[str] = None,
                                 refresh: Optional[str] = None) -> None:
        options = {key: value for key, value in (("secret", secret), ("refresh", refresh)) if value is not None}
        await self.enable(server_id, site_id, "laravel-maintenance", options)
