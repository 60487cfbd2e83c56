#!/usr/bin/env python3
"""Sites API façade: sites, deployments, git, configuration files and site commands."""

from typing import Any, Dict, List
from api.base_resource import BaseResource
from api.endpoints import get, post, put, delete
from models.site import (
    CreateSite, Deployment, DeploymentCollection, ExecuteSiteCommand, InstallGitRepository,
    Site, SiteCollection, SiteCommand, SiteCommandCollection, UpdateGitRepository, UpdateSite,
)

SITES = "/servers/{server_id}/sites"
SITE = SITES + "/{site_id}"
SERVER_CTX = ("server_id",)
SITE_CTX = ("server_id", "site_id")

LIST_SITES = get(SITES, SiteCollection, context=SERVER_CTX)
GET_SITE = get(SITE, Site, "site", SERVER_CTX)
CREATE_SITE = post(SITES, Site, "site", SERVER_CTX)
UPDATE_SITE = put(SITE, Site, "site", SERVER_CTX)
DELETE_SITE = delete(SITE)

DEPLOY = post(SITE + "/deployment/deploy")
GET_DEPLOYMENT_SCRIPT = get(SITE + "/deployment/script")
UPDATE_DEPLOYMENT_SCRIPT = put(SITE + "/deployment/script")
ENABLE_QUICK_DEPLOY = post(SITE + "/deployment")
DISABLE_QUICK_DEPLOY = delete(SITE + "/deployment")
GET_DEPLOYMENT_LOG = get(SITE + "/deployment/log")
RESET_DEPLOYMENT_STATE = post(SITE + "/deployment/reset")
DEPLOYMENT_HISTORY = get(SITE + "/deployment-history", DeploymentCollection, context=SITE_CTX)
DEPLOYMENT_HISTORY_DEPLOYMENT = get(SITE + "/deployment-history/{deployment_id}", Deployment, "deployment", SITE_CTX)
DEPLOYMENT_HISTORY_OUTPUT = get(SITE + "/deployment-history/{deployment_id}/output")
FAILURE_EMAILS = post(SITE + "/deployment-failure-emails")

GET_SITE_LOG = get(SITE + "/logs")
CLEAR_SITE_LOG = delete(SITE + "/logs")

LIST_COMMANDS = get(SITE + "/commands", SiteCommandCollection, context=SITE_CTX)
GET_COMMAND = get(SITE + "/commands/{command_id}", SiteCommand, "command", SITE_CTX)
EXECUTE_COMMAND = post(SITE + "/commands", SiteCommand, "command", SITE_CTX)

INSTALL_GIT = post(SITE + "/git", Site, "site", SERVER_CTX)
UPDATE_GIT = put(SITE + "/git")
DESTROY_GIT = delete(SITE + "/git")
CREATE_DEPLOY_KEY = post(SITE + "/deploy-key")
DELETE_DEPLOY_KEY = delete(SITE + "/deploy-key")

CHANGE_PHP_VERSION = put(SITE + "/php")
GET_NGINX = get(SITE + "/nginx")
UPDATE_NGINX = put(SITE + "/nginx")
GET_ENV = get(SITE + "/env")
UPDATE_ENV = put(SITE + "/env")
LIST_ALIASES = get(SITE + "/aliases")
UPDATE_ALIASES = put(SITE + "/aliases")
GET_BALANCING = get(SITE + "/balancing")
UPDATE_BALANCING = put(SITE + "/balancing")
INSTALL_WORDPRESS = post(SITE + "/wordpress")
UNINSTALL_WORDPRESS = delete(SITE + "/wordpress")
INSTALL_PHPMYADMIN = post(SITE + "/phpmyadmin")
UNINSTALL_PHPMYADMIN = delete(SITE + "/phpmyadmin")
GET_PACKAGES = get(SITE + "/packages")
UPDATE_PACKAGES = put(SITE + "/packages")


class SitesAPI(BaseResource):
    """Sites hosted on a server."""

    async def list(self, server_id: int) -> SiteCollection:
        return await self._send(LIST_SITES, server_id=server_id)

    async def get(self, server_id: int, site_id: int) -> Site:
        return await self._send(GET_SITE, server_id=server_id, site_id=site_id)

    async def create(self, server_id: int, data: CreateSite) -> Site:
        return await self._send(CREATE_SITE, data, server_id=server_id)

    async def update(self, server_id: int, site_id: int, data: UpdateSite) -> Site:
        return await self._send(UPDATE_SITE, data, server_id=server_id, site_id=site_id)

    async def delete(self, server_id: int, site_id: int) -> None:
        await self._call(DELETE_SITE, server_id=server_id, site_id=site_id)

    # Deployments

    async def deploy(self, server_id: int, site_id: int) -> None:
        await self._call(DEPLOY, server_id=server_id, site_id=site_id)

    async def deployment_script(self, server_id: int, site_id: int) -> str:
        response = await self._send(GET_DEPLOYMENT_SCRIPT, server_id=server_id, site_id=site_id)
        return response.text

    async def update_deployment_script(self, server_id: int, site_id: int, content: str) -> None:
        await self._call(UPDATE_DEPLOYMENT_SCRIPT, {"content": content}, server_id=server_id, site_id=site_id)

    async def enable_quick_deploy(self, server_id: int, site_id: int) -> None:
        await self._call(ENABLE_QUICK_DEPLOY, server_id=server_id, site_id=site_id)

    async def disable_quick_deploy(self, server_id: int, site_id: int) -> None:
        await self._call(DISABLE_QUICK_DEPLOY, server_id=server_id, site_id=site_id)

    async def deployment_log(self, server_id: int, site_id: int) -> str:
        """Log of the latest deployment; empty when the site was never deployed."""
        response = await self._send(GET_DEPLOYMENT_LOG, server_id=server_id, site_id=site_id)
        return response.text

    async def reset_deployment_state(self, server_id: int, site_id: int) -> None:
        await self._call(RESET_DEPLOYMENT_STATE, server_id=server_id, site_id=site_id)

    async def deployment_history(self, server_id: int, site_id: int) -> DeploymentCollection:
        return await self._send(DEPLOYMENT_HISTORY, server_id=server_id, site_id=site_id)

    async def deployment_history_deployment(self, server_id: int, site_id: int, deployment_id: int) -> Deployment:
        return await self._send(DEPLOYMENT_HISTORY_DEPLOYMENT, server_id=server_id, site_id=site_id,
                                deployment_id=deployment_id)

    async def deployment_history_output(self, server_id: int, site_id: int, deployment_id: int) -> Dict[str, Any]:
        response = await self._send(DEPLOYMENT_HISTORY_OUTPUT, server_id=server_id, site_id=site_id,
                                    deployment_id=deployment_id)
        return response.json()

    async def set_deployment_failure_emails(self, server_id: int, site_id: int, emails: List[str]) -> None:
        await self._call(FAILURE_EMAILS, {"emails": emails}, server_id=server_id, site_id=site_id)

    # Logs

    async def log(self, server_id: int, site_id: int) -> Dict[str, Any]:
        response = await self._send(GET_SITE_LOG, server_id=server_id, site_id=site_id)
        return response.json()

    async def clear_log(self, server_id: int, site_id: int) -> None:
        await self._call(CLEAR_SITE_LOG, server_id=server_id, site_id=site_id)

    # Site commands

    async def command_history(self, server_id: int, site_id: int) -> SiteCommandCollection:
        return await self._send(LIST_COMMANDS, server_id=server_id, site_id=site_id)

    async def get_command(self, server_id: int, site_id: int, command_id: int) -> SiteCommand:
        return await self._send(GET_COMMAND, server_id=server_id, site_id=site_id, command_id=command_id)

    async def execute_command(self, server_id: int, site_id: int, data: ExecuteSiteCommand) -> SiteCommand:
        return await self._send(EXECUTE_COMMAND, data, server_id=server_id, site_id=site_id)

    # Git

    async def install_git_repository(self, server_id: int, site_id: int, data: InstallGitRepository) -> Site:
        return await self._send(INSTALL_GIT, data, server_id=server_id, site_id=site_id)

    async def update_git_repository(self, server_id: int, site_id: int, data: UpdateGitRepository) -> None:
        await self._call(UPDATE_GIT, data, server_id=server_id, site_id=site_id)

    async def destroy_git_repository(self, server_id: int, site_id: int) -> None:
        await self._call(DESTROY_GIT, server_id=server_id, site_id=site_id)

    async def create_deploy_key(self, server_id: int, site_id: int) -> Dict[str, Any]:
        response = await self._send(CREATE_DEPLOY_KEY, server_id=server_id, site_id=site_id)
        return response.json()

    async def delete_deploy_key(self, server_id: int, site_id: int) -> None:
        await self._call(DELETE_DEPLOY_KEY, server_id=server_id, site_id=site_id)

    # Configuration

    async def change_php_version(self, server_id: int, site_id: int, version: str) -> None:
        await self._call(CHANGE_PHP_VERSION, {"version": version}, server_id=server_id, site_id=site_id)

    async def get_nginx_config(self, server_id: int, site_id: int) -> str:
        response = await self._send(GET_NGINX, server_id=server_id, site_id=site_id)
        return response.text

    async def update_nginx_config(self, server_id: int, site_id: int, content: str) -> None:
        await self._call(UPDATE_NGINX, {"content": content}, server_id=server_id, site_id=site_id)

    async def get_env_file(self, server_id: int, site_id: int) -> str:
        response = await self._send(GET_ENV, server_id=server_id, site_id=site_id)
        return response.text

    async def update_env_file(self, server_id: int, site_id: int, content: str) -> None:
        await self._call(UPDATE_ENV, {"content": content}, server_id=server_id, site_id=site_id)

    async def list_aliases(self, server_id: int, site_id: int) -> List[str]:
        response = await self._send(LIST_ALIASES, server_id=server_id, site_id=site_id)
        return response.json("aliases", [])

    async def update_aliases(self, server_id: int, site_id: int, aliases: List[str]) -> None:
        await self._call(UPDATE_ALIASES, {"aliases": aliases}, server_id=server_id, site_id=site_id)

    async def get_load_balancing(self, server_id: int, site_id: int) -> Dict[str, Any]:
        response = await self._send(GET_BALANCING, server_id=server_id, site_id=site_id)
        return response.json()

    async def update_load_balancing(self, server_id: int, site_id: int, servers: List[Dict[str, Any]],
                                    method: str = "round_robin") -> None:
        await self._call(UPDATE_BALANCING, {"servers": servers, "method": method},
                         server_id=server_id, site_id=site_id)

    async def get_packages_auth(self, server_id: int, site_id: int) -> Dict[str, Any]:
        response = await self._send(GET_PACKAGES, server_id=server_id, site_id=site_id)
        return response.json()

    async def update_packages_auth(self, server_id: int, site_id: int, packages: Dict[str, Any]) -> None:
        await self._call(UPDATE_PACKAGES, {"packages": packages}, server_id=server_id, site_id=site_id)

    # Applications

    async def install_wordpress(self, server_id: int, site_id: int, database: str, user: str) -> None:
        await self._call(INSTALL_WORDPRESS, {"database": database, "user": user},
                         server_id=server_id, site_id=site_id)

    async def uninstall_wordpress(self, server_id: int, site_id: int) -> None:
        await self._call(UNINSTALL_WORDPRESS, server_id=server_id, site_id=site_id)

    async def install_phpmyadmin(self, server_id: int, site_id: int, database: str, user: str) -> None:
        await self._call(INSTALL_PHPMYADMIN, {"database": database, "user": user},
                         server_id=server_id, site_id=site_id)

    async def uninstall_phpmyadmin(self, server_id: int, site_id: int) -> None:
        await self._call(UNINSTALL_PHPMYADMIN, server_id=server_id, site_id=site_id)
