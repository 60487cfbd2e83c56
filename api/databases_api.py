#!/usr/bin/env python3
"""Databases and database users API façades."""

from api.base_resource import BaseResource
from api.endpoints import get, post, put, delete
from models.database import (
    CreateDatabase, CreateDatabaseUser, Database, DatabaseCollection,
    DatabaseUser, DatabaseUserCollection, UpdateDatabaseUser,
)

SERVER_CTX = ("server_id",)
DATABASES = "/servers/{server_id}/databases"
DATABASE = DATABASES + "/{database_id}"
USERS = "/servers/{server_id}/database-users"
USER = USERS + "/{user_id}"

LIST_DATABASES = get(DATABASES, DatabaseCollection, context=SERVER_CTX)
GET_DATABASE = get(DATABASE, Database, "database", SERVER_CTX)
CREATE_DATABASE = post(DATABASES, Database, "database", SERVER_CTX)
DELETE_DATABASE = delete(DATABASE)
SYNC_DATABASES = post(DATABASES + "/sync")

LIST_USERS = get(USERS, DatabaseUserCollection, context=SERVER_CTX)
GET_USER = get(USER, DatabaseUser, "user", SERVER_CTX)
CREATE_USER = post(USERS, DatabaseUser, "user", SERVER_CTX)
UPDATE_USER = put(USER, DatabaseUser, "user", SERVER_CTX)
DELETE_USER = delete(USER)


class DatabasesAPI(BaseResource):

    async def list(self, server_id: int) -> DatabaseCollection:
        return await self._send(LIST_DATABASES, server_id=server_id)

    async def get(self, server_id: int, database_id: int) -> Database:
        return await self._send(GET_DATABASE, server_id=server_id, database_id=database_id)

    async def create(self, server_id: int, data: CreateDatabase) -> Database:
        return await self._send(CREATE_DATABASE, data, server_id=server_id)

    async def delete(self, server_id: int, database_id: int) -> None:
        await self._call(DELETE_DATABASE, server_id=server_id, database_id=database_id)

    async def sync(self, server_id: int) -> None:
        """Pull databases created outside Forge into its listing."""
        await self._call(SYNC_DATABASES, server_id=server_id)


class DatabaseUsersAPI(BaseResource):

    async def list(self, server_id: int) -> DatabaseUserCollection:
        return await self._send(LIST_USERS, server_id=server_id)

    async def get(self, server_id: int, user_id: int) -> DatabaseUser:
        return await self._send(GET_USER, server_id=server_id, user_id=user_id)

    async def create(self, server_id: int, data: CreateDatabaseUser) -> DatabaseUser:
        return await self._send(CREATE_USER, data, server_id=server_id)

    async def update(self, server_id: int, user_id: int, data: UpdateDatabaseUser) -> DatabaseUser:
        return await self._send(UPDATE_USER, data, server_id=server_id, user_id=user_id)

    async def delete(self, server_id: int, user_id: int) -> None:
        await self._call(DELETE_USER, server_id=server_id, user_id=user_id)
