#!/usr/bin/env python3
"""PHP versions and system services API façades."""

from typing import Any, Dict
from api.base_resource import BaseResource
from api.endpoints import get, post, delete
from models.account import PhpVersionCollection

SERVER = "/servers/{server_id}"

LIST_PHP = get(SERVER + "/php", PhpVersionCollection, context=("server_id",))
INSTALL_PHP = post(SERVER + "/php")
UPDATE_PHP = post(SERVER + "/php/update")
ENABLE_OPCACHE = post(SERVER + "/php/opcache")
DISABLE_OPCACHE = delete(SERVER + "/php/opcache")

REBOOT_SERVICE = post(SERVER + "/{service}/reboot")
STOP_SERVICE = post(SERVER + "/{service}/stop")
TEST_NGINX = get(SERVER + "/nginx/test")
INSTALL_BLACKFIRE = post(SERVER + "/blackfire/install")
REMOVE_BLACKFIRE = delete(SERVER + "/blackfire/remove")
INSTALL_PAPERTRAIL = post(SERVER + "/papertrail/install")
REMOVE_PAPERTRAIL = delete(SERVER + "/papertrail/remove")
CONTROL_SERVICE = post(SERVER + "/services/{action}")


class PhpAPI(BaseResource):

    async def list(self, server_id: int) -> PhpVersionCollection:
        return await self._send(LIST_PHP, server_id=server_id)

    async def install(self, server_id: int, version: str) -> None:
        await self._call(INSTALL_PHP, {"version": version}, server_id=server_id)

    async def update(self, server_id: int, version: str) -> None:
        """Patch an installed PHP version to its latest release."""
        await self._call(UPDATE_PHP, {"version": version}, server_id=server_id)

    async def enable_opcache(self, server_id: int) -> None:
        await self._call(ENABLE_OPCACHE, server_id=server_id)

    async def disable_opcache(self, server_id: int) -> None:
        await self._call(DISABLE_OPCACHE, server_id=server_id)


class ServicesAPI(BaseResource):
    """Service control on a server (MySQL, Nginx, Postgres, PHP-FPM and monitoring agents)."""

    async def reboot_mysql(self, server_id: int) -> None:
        await self._call(REBOOT_SERVICE, server_id=server_id, service="mysql")

    async def stop_mysql(self, server_id: int) -> None:
        await self._call(STOP_SERVICE, server_id=server_id, service="mysql")

    async def reboot_nginx(self, server_id: int) -> None:
        await self._call(REBOOT_SERVICE, server_id=server_id, service="nginx")

    async def stop_nginx(self, server_id: int) -> None:
        await self._call(STOP_SERVICE, server_id=server_id, service="nginx")

    async def test_nginx(self, server_id: int) -> Dict[str, Any]:
        response = await self._send(TEST_NGINX, server_id=server_id)
        return response.json()

    async def reboot_postgres(self, server_id: int) -> None:
        await self._call(REBOOT_SERVICE, server_id=server_id, service="postgres")

    async def stop_postgres(self, server_id: int) -> None:
        await self._call(STOP_SERVICE, server_id=server_id, service="postgres")

    async def reboot_php(self, server_id: int) -> None:
        await self._call(REBOOT_SERVICE, server_id=server_id, service="php")

    async def install_blackfire(self, server_id: int, blackfire_server_id: str, server_token: str) -> None:
        await self._call(INSTALL_BLACKFIRE, {"server_id": blackfire_server_id, "server_token": server_token},
                         server_id=server_id)

    async def remove_blackfire(self, server_id: int) -> None:
        await self._call(REMOVE_BLACKFIRE, server_id=server_id)

    async def install_papertrail(self, server_id: int, host: str) -> None:
        await self._call(INSTALL_PAPERTRAIL, {"host": host}, server_id=server_id)

    async def remove_papertrail(self, server_id: int) -> None:
        await self._call(REMOVE_PAPERTRAIL, server_id=server_id)

    async def start_service(self, server_id: int, service: str) -> None:
        await self._call(CONTROL_SERVICE, {"service": service}, server_id=server_id, action="start")

    async def stop_service(self, server_id: int, service: str) -> None:
        await self._call(CONTROL_SERVICE, {"service": service}, server_id=server_id, action="stop")

    async def restart_service(self, server_id: int, service: str) -> None:
        await self._call(CONTROL_SERVICE, {"service": service}, server_id=server_id, action="restart")
