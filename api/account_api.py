#!/usr/bin/env python3
"""Account-level API façade: user, provider credentials and regions."""

from api.base_resource import BaseResource
from api.endpoints import get
from models.account import CredentialCollection, RegionCollection, User

GET_USER = get("/user", User, "user")
LIST_CREDENTIALS = get("/credentials", CredentialCollection)
LIST_REGIONS = get("/regions", RegionCollection)


class AccountAPI(BaseResource):

    async def user(self) -> User:
        return await self._send(GET_USER)

    async def credentials(self) -> CredentialCollection:
        return await self._send(LIST_CREDENTIALS)

    async def regions(self) -> RegionCollection:
        return await self._send(LIST_REGIONS)
