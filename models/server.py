#!/usr/bin/env python3
"""Server-related data models."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from models.base import ForgeModel, ModelCollection, UNSET


@dataclass(frozen=True)
class Server(ForgeModel):
    id: int
    credential_id: Optional[int] = None
    name: Optional[str] = None
    type: Optional[str] = None
    provider: Optional[str] = None
    identifier: Optional[str] = None
    size: Optional[str] = None
    region: Optional[str] = None
    ubuntu_version: Optional[str] = None
    db_status: Optional[str] = None
    redis_status: Optional[str] = None
    php_version: Optional[str] = None
    php_cli_version: Optional[str] = None
    opcache_status: Optional[str] = None
    database_type: Optional[str] = None
    ip_address: Optional[str] = None
    ssh_port: Optional[int] = None
    private_ip_address: Optional[str] = None
    local_public_key: Optional[str] = None
    blackfire_status: Optional[str] = None
    papertrail_status: Optional[str] = None
    revoked: Optional[bool] = None
    created_at: Optional[str] = None
    is_ready: Optional[bool] = None
    tags: List[Any] = field(default_factory=list)
    network: List[Any] = field(default_factory=list)
    sudo_password: Optional[str] = None
    database_password: Optional[str] = None


@dataclass(frozen=True)
class CreateServer(ForgeModel):
    credential_id: int
    name: str
    size: str
    region: str
    provider: Any = UNSET
    type: Any = UNSET
    ubuntu_version: Any = UNSET
    php_version: Any = UNSET
    database: Any = UNSET
    database_type: Any = UNSET
    database_name: Any = UNSET
    load_balancer: Any = UNSET
    network: Any = UNSET


@dataclass(frozen=True)
class UpdateServer(ForgeModel):
    name: Any = UNSET
    size: Any = UNSET
    ip_address: Any = UNSET
    private_ip_address: Any = UNSET
    max_upload_size: Any = UNSET
    network: Any = UNSET
    tags: Any = UNSET


@dataclass(frozen=True)
class ServerCollection(ModelCollection):
    item_model = Server
    key = "servers"


@dataclass(frozen=True)
class Event(ForgeModel):
    id: int
    server_id: Optional[int] = None
    server_name: Optional[str] = None
    run_as: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = None
    output: Optional[str] = None


@dataclass(frozen=True)
class EventCollection(ModelCollection):
    item_model = Event
    key = "events"
