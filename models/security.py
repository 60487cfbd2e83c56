#!/usr/bin/env python3
"""Server access and protection models: firewall rules, monitors and SSH keys."""

from dataclasses import dataclass
from typing import Any, Optional, Union
from models.base import ForgeModel, ModelCollection, UNSET


@dataclass(frozen=True)
class FirewallRule(ForgeModel):
    id: int
    server_id: Optional[int] = None
    name: Optional[str] = None
    port: Optional[Union[int, str]] = None
    type: Optional[str] = None
    ip_address: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = None


@dataclass(frozen=True)
class CreateFirewallRule(ForgeModel):
    name: str
    port: Union[int, str]
    ip_address: Any = UNSET
    type: Any = UNSET


@dataclass(frozen=True)
class FirewallRuleCollection(ModelCollection):
    item_model = FirewallRule
    key = "rules"


@dataclass(frozen=True)
class Monitor(ForgeModel):
    id: int
    server_id: Optional[int] = None
    status: Optional[str] = None
    type: Optional[str] = None
    operator: Optional[str] = None
    threshold: Optional[int] = None
    minutes: Optional[int] = None
    state: Optional[str] = None
    state_changed_at: Optional[str] = None


@dataclass(frozen=True)
class CreateMonitor(ForgeModel):
    type: str
    operator: Any = UNSET
    threshold: Any = UNSET
    minutes: Any = UNSET


@dataclass(frozen=True)
class MonitorCollection(ModelCollection):
    item_model = Monitor
    key = "monitors"


@dataclass(frozen=True)
class SSHKey(ForgeModel):
    id: int
    server_id: Optional[int] = None
    name: Optional[str] = None
    username: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = None


@dataclass(frozen=True)
class CreateSSHKey(ForgeModel):
    name: str
    key: str
    username: Any = UNSET


@dataclass(frozen=True)
class SSHKeyCollection(ModelCollection):
    item_model = SSHKey
    key = "keys"
