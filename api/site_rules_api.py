#!/usr/bin/env python3
"""Redirect rules, security rules and webhooks API façades."""

from api.base_resource import BaseResource
from api.endpoints import get, post, delete
from models.site_rules import (
    CreateRedirectRule, CreateSecurityRule, CreateWebhook, RedirectRule, RedirectRuleCollection,
    SecurityRule, SecurityRuleCollection, Webhook, WebhookCollection,
)

SITE = "/servers/{server_id}/sites/{site_id}"
SITE_CTX = ("server_id", "site_id")

LIST_REDIRECTS = get(SITE + "/redirect-rules", RedirectRuleCollection, context=SITE_CTX)
GET_REDIRECT = get(SITE + "/redirect-rules/{rule_id}", RedirectRule, "rule", SITE_CTX)
CREATE_REDIRECT = post(SITE + "/redirect-rules", RedirectRule, "rule", SITE_CTX)
DELETE_REDIRECT = delete(SITE + "/redirect-rules/{rule_id}")

LIST_SECURITY = get(SITE + "/security-rules", SecurityRuleCollection, context=SITE_CTX)
GET_SECURITY = get(SITE + "/security-rules/{rule_id}", SecurityRule, "rule", SITE_CTX)
CREATE_SECURITY = post(SITE + "/security-rules", SecurityRule, "rule", SITE_CTX)
DELETE_SECURITY = delete(SITE + "/security-rules/{rule_id}")

LIST_WEBHOOKS = get(SITE + "/webhooks", WebhookCollection, context=SITE_CTX)
GET_WEBHOOK = get(SITE + "/webhooks/{webhook_id}", Webhook, "webhook", SITE_CTX)
CREATE_WEBHOOK = post(SITE + "/webhooks", Webhook, "webhook", SITE_CTX)
DELETE_WEBHOOK = delete(SITE + "/webhooks/{webhook_id}")


class RedirectRulesAPI(BaseResource):

    async def list(self, server_id: int, site_id: int) -> RedirectRuleCollection:
        return await self._send(LIST_REDIRECTS, server_id=server_id, site_id=site_id)

    async def get(self, server_id: int, site_id: int, rule_id: int) -> RedirectRule:
        return await self._send(GET_REDIRECT, server_id=server_id, site_id=site_id, rule_id=rule_id)

    async def create(self, server_id: int, site_id: int, data: CreateRedirectRule) -> RedirectRule:
        return await self._send(CREATE_REDIRECT, data, server_id=server_id, site_id=site_id)

    async def delete(self, server_id: int, site_id: int, rule_id: int) -> None:
        await self._call(DELETE_REDIRECT, server_id=server_id, site_id=site_id, rule_id=rule_id)


class SecurityRulesAPI(BaseResource):
    """HTTP basic-auth protection for site paths."""

    async def list(self, server_id: int, site_id: int) -> SecurityRuleCollection:
        return await self._send(LIST_SECURITY, server_id=server_id, site_id=site_id)

    async def get(self, server_id: int, site_id: int, rule_id: int) -> SecurityRule:
        return await self._send(GET_SECURITY, server_id=server_id, site_id=site_id, rule_id=rule_id)

    async def create(self, server_id: int, site_id: int, data: CreateSecurityRule) -> SecurityRule:
        return await self._send(CREATE_SECURITY, data, server_id=server_id, site_id=site_id)

    async def delete(self, server_id: int, site_id: int, rule_id: int) -> None:
        await self._call(DELETE_SECURITY, server_id=server_id, site_id=site_id, rule_id=rule_id)


class WebhooksAPI(BaseResource):
    """Deployment webhooks."""

    async def list(self, server_id: int, site_id: int) -> WebhookCollection:
        return await self._send(LIST_WEBHOOKS, server_id=server_id, site_id=site_id)

    async def get(self, server_id: int, site_id: int, webhook_id: int) -> Webhook:
        return await self._send(GET_WEBHOOK, server_id=server_id, site_id=site_id, webhook_id=webhook_id)

    async def create(self, server_id: int, site_id: int, data: CreateWebhook) -> Webhook:
        return await self._send(CREATE_WEBHOOK, data, server_id=server_id, site_id=site_id)

    async def delete(self, server_id: int, site_id: int, webhook_id: int) -> None:
        await self._call(DELETE_WEBHOOK, server_id=server_id, site_id=site_id, webhook_id=webhook_id)
