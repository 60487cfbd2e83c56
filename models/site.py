#!/usr/bin/env python3
"""Site, deployment and site command models."""

from dataclasses import dataclass
from typing import Any, List, Optional, Union
from models.base import ForgeModel, ModelCollection, UNSET


@dataclass(frozen=True)
class Site(ForgeModel):
    id: int
    server_id: Optional[int] = None
    name: Optional[str] = None
    aliases: Optional[List[str]] = None
    directory: Optional[str] = None
    wildcards: Optional[bool] = None
    status: Optional[str] = None
    repository: Optional[str] = None
    repository_provider: Optional[str] = None
    repository_branch: Optional[str] = None
    repository_status: Optional[str] = None
    quick_deploy: Optional[bool] = None
    deployment_status: Optional[str] = None
    project_type: Optional[str] = None
    app: Optional[str] = None
    app_status: Optional[str] = None
    slack_channel: Optional[str] = None
    telegram_chat_id: Optional[Union[int, str]] = None
    telegram_chat_title: Optional[str] = None
    teams_webhook_url: Optional[str] = None
    discord_webhook_url: Optional[str] = None
    username: Optional[str] = None
    balancing_status: Optional[str] = None
    created_at: Optional[str] = None
    deployment_url: Optional[str] = None
    is_secured: Optional[bool] = None
    php_version: Optional[str] = None
    tags: Optional[List[Any]] = None
    failure_deployment_emails: Optional[List[str]] = None
    web_directory: Optional[str] = None


@dataclass(frozen=True)
class CreateSite(ForgeModel):
    domain: str
    project_type: str
    aliases: Any = UNSET
    directory: Any = UNSET
    isolated: Any = UNSET
    username: Any = UNSET
    database: Any = UNSET
    php_version: Any = UNSET
    nginx_template: Any = UNSET


@dataclass(frozen=True)
class UpdateSite(ForgeModel):
    name: Any = UNSET
    directory: Any = UNSET
    php_version: Any = UNSET
    aliases: Any = UNSET
    wildcards: Any = UNSET


@dataclass(frozen=True)
class SiteCollection(ModelCollection):
    item_model = Site
    key = "sites"


@dataclass(frozen=True)
class InstallGitRepository(ForgeModel):
    provider: str
    repository: str
    branch: Any = UNSET
    composer: Any = UNSET


@dataclass(frozen=True)
class UpdateGitRepository(ForgeModel):
    provider: str
    repository: str
    branch: str


@dataclass(frozen=True)
class ExecuteSiteCommand(ForgeModel):
    command: str


@dataclass(frozen=True)
class SiteCommand(ForgeModel):
    id: int
    server_id: Optional[int] = None
    site_id: Optional[int] = None
    user_id: Optional[int] = None
    command: Optional[str] = None
    status: Optional[str] = None
    output: Optional[str] = None
    created_at: Optional[str] = None


@dataclass(frozen=True)
class SiteCommandCollection(ModelCollection):
    item_model = SiteCommand
    key = "commands"


@dataclass(frozen=True)
class Deployment(ForgeModel):
    id: int
    server_id: Optional[int] = None
    site_id: Optional[int] = None
    type: Optional[int] = None
    commit_hash: Optional[str] = None
    commit_author: Optional[str] = None
    commit_message: Optional[str] = None
    status: Optional[str] = None
    started_at: Optional[str] = None
    ended_at: Optional[str] = None
    created_at: Optional[str] = None


@dataclass(frozen=True)
class DeploymentCollection(ModelCollection):
    item_model = Deployment
    key = "deployments"
