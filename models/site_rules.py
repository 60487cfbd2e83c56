#!/usr/bin/env python3
"""Per-site HTTP rules and deployment webhooks."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from models.base import ForgeModel, ModelCollection, UNSET


@dataclass(frozen=True)
class RedirectRule(ForgeModel):
    id: int
    server_id: Optional[int] = None
    site_id: Optional[int] = None
    from_: Optional[str] = None
    to: Optional[str] = None
    type: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = None


@dataclass(frozen=True)
class CreateRedirectRule(ForgeModel):
    from_: str
    to: str
    type: Any = UNSET


@dataclass(frozen=True)
class RedirectRuleCollection(ModelCollection):
    item_model = RedirectRule
    key = "redirect_rules"


@dataclass(frozen=True)
class SecurityRule(ForgeModel):
    id: int
    server_id: Optional[int] = None
    site_id: Optional[int] = None
    name: Optional[str] = None
    path: Optional[str] = None
    credentials: List[Dict[str, Any]] = field(default_factory=list)
    created_at: Optional[str] = None


@dataclass(frozen=True)
class CreateSecurityRule(ForgeModel):
    name: str
    credentials: List[Dict[str, Any]]
    path: Any = UNSET


@dataclass(frozen=True)
class SecurityRuleCollection(ModelCollection):
    item_model = SecurityRule
    key = "security_rules"


@dataclass(frozen=True)
class Webhook(ForgeModel):
    id: int
    server_id: Optional[int] = None
    site_id: Optional[int] = None
    url: Optional[str] = None
    created_at: Optional[str] = None


@dataclass(frozen=True)
class CreateWebhook(ForgeModel):
    url: str


@dataclass(frozen=True)
class WebhookCollection(ModelCollection):
    item_model = Webhook
    key = "webhooks"
