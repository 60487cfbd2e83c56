#!/usr/bin/env python3
"""Servers API façade."""

from api.base_resource import BaseResource
from api.endpoints import get, post, put, delete
from models.server import CreateServer, EventCollection, Server, ServerCollection, UpdateServer

SERVER = "/servers/{server_id}"

LIST_SERVERS = get("/servers", ServerCollection)
GET_SERVER = get(SERVER, Server, "server")
CREATE_SERVER = post("/servers", Server, "server")
UPDATE_SERVER = put(SERVER, Server, "server")
DELETE_SERVER = delete(SERVER)
REBOOT_SERVER = post(SERVER + "/reboot")
UPDATE_DATABASE_PASSWORD = put(SERVER + "/database-password")
REVOKE_ACCESS = post(SERVER + "/revoke")
RECONNECT = post(SERVER + "/reconnect")
REACTIVATE = post(SERVER + "/reactivate")
GET_LOG = get(SERVER + "/logs")
LIST_EVENTS = get(SERVER + "/events", EventCollection, context=("server_id",))
GET_EVENT = get(SERVER + "/events/{event_id}")


class ServersAPI(BaseResource):
    """Server provisioning and lifecycle."""

    async def list(self) -> ServerCollection:
        return await self._send(LIST_SERVERS)

    async def get(self, server_id: int) -> Server:
        return await self._send(GET_SERVER, server_id=server_id)

    async def create(self, data: CreateServer) -> Server:
        return await self._send(CREATE_SERVER, data)

    async def update(self, server_id: int, data: UpdateServer) -> Server:
        return await self._send(UPDATE_SERVER, data, server_id=server_id)

    async def delete(self, server_id: int) -> None:
        await self._call(DELETE_SERVER, server_id=server_id)

    async def reboot(self, server_id: int) -> None:
        await self._call(REBOOT_SERVER, server_id=server_id)

    async def update_database_password(self, server_id: int) -> None:
        await self._call(UPDATE_DATABASE_PASSWORD, server_id=server_id)

    async def revoke_access(self, server_id: int) -> None:
        """Revoke Forge's SSH access to the server."""
        await self._call(REVOKE_ACCESS, server_id=server_id)

    async def reconnect(self, server_id: int) -> str:
        """Rotate the Forge key; returns the public key to install on the server."""
        response = await self._send(RECONNECT, server_id=server_id)
        return response.json("public_key", "")

    async def reactivate(self, server_id: int) -> None:
        await self._call(REACTIVATE, server_id=server_id)

    async def get_log(self, server_id: int, file: str = "auth") -> str:
        response = await self._send(GET_LOG, query={"file": file}, server_id=server_id)
        return response.json("content", "")

    async def list_events(self, server_id: int) -> EventCollection:
        return await self._send(LIST_EVENTS, server_id=server_id)

    async def get_event_output(self, server_id: int, event_id: int) -> str:
        response = await self._send(GET_EVENT, server_id=server_id, event_id=event_id)
        return response.json("output", "")
