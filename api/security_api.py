#!/usr/bin/env python3
"""Firewall rules, monitors and SSH keys API façades."""

from api.base_resource import BaseResource
from api.endpoints import get, post, delete
from models.security import (
    CreateFirewallRule, CreateMonitor, CreateSSHKey, FirewallRule, FirewallRuleCollection,
    Monitor, MonitorCollection, SSHKey, SSHKeyCollection,
)

SERVER_CTX = ("server_id",)
RULES = "/servers/{server_id}/firewall-rules"
RULE = RULES + "/{rule_id}"
MONITORS = "/servers/{server_id}/monitors"
MONITOR = MONITORS + "/{monitor_id}"
KEYS = "/servers/{server_id}/keys"
KEY = KEYS + "/{key_id}"

LIST_RULES = get(RULES, FirewallRuleCollection, context=SERVER_CTX)
GET_RULE = get(RULE, FirewallRule, "rule", SERVER_CTX)
CREATE_RULE = post(RULES, FirewallRule, "rule", SERVER_CTX)
DELETE_RULE = delete(RULE)

LIST_MONITORS = get(MONITORS, MonitorCollection, context=SERVER_CTX)
GET_MONITOR = get(MONITOR, Monitor, "monitor", SERVER_CTX)
CREATE_MONITOR = post(MONITORS, Monitor, "monitor", SERVER_CTX)
DELETE_MONITOR = delete(MONITOR)

LIST_KEYS = get(KEYS, SSHKeyCollection, context=SERVER_CTX)
GET_KEY = get(KEY, SSHKey, "key", SERVER_CTX)
CREATE_KEY = post(KEYS, SSHKey, "key", SERVER_CTX)
DELETE_KEY = delete(KEY)


class FirewallAPI(BaseResource):

    async def list(self, server_id: int) -> FirewallRuleCollection:
        return await self._send(LIST_RULES, server_id=server_id)

    async def get(self, server_id: int, rule_id: int) -> FirewallRule:
        return await self._send(GET_RULE, server_id=server_id, rule_id=rule_id)

    async def create(self, server_id: int, data: CreateFirewallRule) -> FirewallRule:
        return await self._send(CREATE_RULE, data, server_id=server_id)

    async def delete(self, server_id: int, rule_id: int) -> None:
        await self._call(DELETE_RULE, server_id=server_id, rule_id=rule_id)


class MonitorsAPI(BaseResource):

    async def list(self, server_id: int) -> MonitorCollection:
        return await self._send(LIST_MONITORS, server_id=server_id)

    async def get(self, server_id: int, monitor_id: int) -> Monitor:
        return await self._send(GET_MONITOR, server_id=server_id, monitor_id=monitor_id)

    async def create(self, server_id: int, data: CreateMonitor) -> Monitor:
        return await self._send(CREATE_MONITOR, data, server_id=server_id)

    async def delete(self, server_id: int, monitor_id: int) -> None:
        await self._call(DELETE_MONITOR, server_id=server_id, monitor_id=monitor_id)


class SSHKeysAPI(BaseResource):

    async def list(self, server_id: int) -> SSHKeyCollection:
        return await self._send(LIST_KEYS, server_id=server_id)

    async def get(self, server_id: int, key_id: int) -> SSHKey:
        return await self._send(GET_KEY, server_id=server_id, key_id=key_id)

    async def create(self, server_id: int, data: CreateSSHKey) -> SSHKey:
        return await self._send(CREATE_KEY, data, server_id=server_id)

    async def delete(self, server_id: int, key_id: int) -> None:
        await self._call(DELETE_KEY, server_id=server_id, key_id=key_id)
