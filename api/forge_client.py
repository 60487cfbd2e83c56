#!/usr/bin/env python3
"""Forge API client exposing every resource façade."""

from typing import Optional
import httpx
from api.base_client import BaseAPIClient
from api.exceptions import ForgeAPIError
from api.account_api import AccountAPI
from api.backups_api import BackupsAPI
from api.certificates_api import CertificatesAPI
from api.databases_api import DatabasesAPI, DatabaseUsersAPI
from api.integrations_api import IntegrationsAPI
from api.processes_api import DaemonsAPI, JobsAPI, WorkersAPI
from api.recipes_api import NginxTemplatesAPI, RecipesAPI
from api.security_api import FirewallAPI, MonitorsAPI, SSHKeysAPI
from api.server_software_api import PhpAPI, ServicesAPI
from api.servers_api import ServersAPI
from api.site_rules_api import RedirectRulesAPI, SecurityRulesAPI, WebhooksAPI
from api.sites_api import SitesAPI
from config.settings import APIConfig
from config.logging_setup import get_logger

logger = get_logger(__name__)


class ForgeClient(BaseAPIClient):
    """Client for the Laravel Forge API.

    Construction fails with ConfigurationError when no token is configured.
    """

    def __init__(self, config: APIConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        super().__init__(config, transport)
        self.servers = ServersAPI(self)
        self.sites = SitesAPI(self)
        self.certificates = CertificatesAPI(self)
        self.databases = DatabasesAPI(self)
        self.database_users = DatabaseUsersAPI(self)
        self.jobs = JobsAPI(self)
        self.daemons = DaemonsAPI(self)
        self.workers = WorkersAPI(self)
        self.firewall = FirewallAPI(self)
        self.monitors = MonitorsAPI(self)
        self.ssh_keys = SSHKeysAPI(self)
        self.backups = BackupsAPI(self)
        self.redirect_rules = RedirectRulesAPI(self)
        self.security_rules = SecurityRulesAPI(self)
        self.webhooks = WebhooksAPI(self)
        self.recipes = RecipesAPI(self)
        self.nginx_templates = NginxTemplatesAPI(self)
        self.php = PhpAPI(self)
        self.services = ServicesAPI(self)
        self.integrations = IntegrationsAPI(self)
        self.account = AccountAPI(self)

    async def test_connection(self) -> bool:
        """Test the API connection by fetching the authenticated user."""
        try:
            user = await self.account.user()
        except ForgeAPIError as e:
            logger.warning("Forge connection test failed: %s", e)
            return False
        logger.info("Connected to Forge as %s", user.email or user.name)
        return True
