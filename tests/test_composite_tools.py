"""Tests for the multi-call tools."""

import asyncio
from datetime import datetime, timezone

import pytest

from api.exceptions import ForgeAPIError
from models.certificate import Certificate, CertificateCollection, ObtainLetsEncryptCertificate
from models.process import Job, JobCollection, Worker, WorkerCollection, DaemonCollection
from models.security import Monitor, MonitorCollection
from models.server import Event, EventCollection, Server, ServerCollection
from models.site import Deployment, DeploymentCollection, Site, SiteCollection
from tools.base_tool import ToolValidationError
from tools.composite_tools import (
    BulkDeployTool, CloneSiteTool, ServerHealthCheckTool, SiteStatusDashboardTool, SSLExpirationCheckTool,
    _parse_timestamp,
)
from tests.helpers import payload

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def run(tool, arguments):
    return payload(asyncio.run(tool.run(arguments)))


class TestBulkDeploy:
    def test_one_missing_site_does_not_stop_the_rest(self, fake_client):
        async def get_site(server_id, site_id):
            if site_id == 99:
                raise ForgeAPIError("Site not found", 404)
            return Site(id=site_id, server_id=server_id, name="example.com")

        fake_client.sites.get.side_effect = get_site
        fake_client.sites.deploy.return_value = None

        result = run(BulkDeployTool(fake_client), {"deployments": [
            {"server_id": 1, "site_id": 99},
            {"server_id": 1, "site_id": 2},
        ]})

        assert result["success"] is False
        assert result["summary"] == {"total": 2, "successful": 1, "failed": 1}
        assert result["successful"] == [
            {"server_id": 1, "site_id": 2, "site_name": "example.com", "status": "triggered"},
        ]
        assert result["failed"] == [{"server_id": 1, "site_id": 99, "error": "Site not found"}]
        fake_client.sites.deploy.assert_awaited_once_with(1, 2)

    def test_all_succeed(self, fake_client):
        fake_client.sites.get.return_value = Site(id=2, name="a.test")
        fake_client.sites.deploy.return_value = None
        result = run(BulkDeployTool(fake_client), {"deployments": [{"server_id": 1, "site_id": 2}]})
        assert result["success"] is True
        assert result["summary"]["successful"] == 1

    def test_deploy_failure_is_recorded(self, fake_client):
        fake_client.sites.get.return_value = Site(id=2, name="a.test")
        fake_client.sites.deploy.side_effect = ForgeAPIError("Deployment already in progress", 409)
        result = run(BulkDeployTool(fake_client), {"deployments": [{"server_id": 1, "site_id": 2}]})
        assert result["failed"][0]["error"] == "Deployment already in progress"

    def test_float_ids_are_passed_as_ints(self, fake_client):
        fake_client.sites.get.return_value = Site(id=2, name="a.test")
        fake_client.sites.deploy.return_value = None
        result = run(BulkDeployTool(fake_client), {"deployments": [{"server_id": 1.0, "site_id": 2.0}]})
        fake_client.sites.deploy.assert_awaited_once_with(1, 2)
        args, _ = fake_client.sites.deploy.await_args
        assert all(type(arg) is int for arg in args)
        assert result["successful"][0]["server_id"] == 1

    def test_empty_target_list(self, fake_client):
        with pytest.raises(ToolValidationError):
            run(BulkDeployTool(fake_client), {"deployments": []})

    def test_target_needs_both_ids(self, fake_client):
        with pytest.raises(ToolValidationError):
            run(BulkDeployTool(fake_client), {"deployments": [{"server_id": 1}]})


class TestServerHealthCheck:
    def _healthy(self, client):
        client.servers.get.return_value = Server(id=1, name="web", ip_address="10.0.0.1", is_ready=True)
        client.monitors.list.return_value = MonitorCollection((Monitor(id=1, type="disk", state="OK"),))
        client.servers.list_events.return_value = EventCollection((Event(id=5, description="Provisioned"),))
        client.sites.list.return_value = SiteCollection((Site(id=2, status="installed"),))
        client.daemons.list.return_value = DaemonCollection()

    def test_healthy(self, fake_client):
        self._healthy(fake_client)
        result = run(ServerHealthCheckTool(fake_client), {"server_id": 1})

        assert result["success"] is True
        assert result["health_status"] == "healthy"
        assert result["server"]["ip_address"] == "10.0.0.1"
        assert result["summary"] == {"total_sites": 1, "active_sites": 1, "total_monitors": 1,
                                     "total_daemons": 0, "recent_events": 1}
        assert result["issues"] == [] and result["warnings"] == [] and result["errors"] == {}

    def test_failing_section_is_reported_alongside_the_rest(self, fake_client):
        self._healthy(fake_client)
        fake_client.servers.list_events.side_effect = ForgeAPIError("Too Many Attempts.", 429)

        result = run(ServerHealthCheckTool(fake_client), {"server_id": 1})

        assert result["success"] is True
        assert result["health_status"] == "warning"
        assert result["errors"] == {"events": "Too Many Attempts."}
        assert "Could not load events: Too Many Attempts." in result["warnings"]
        assert result["summary"]["total_sites"] == 1

    def test_critical(self, fake_client):
        self._healthy(fake_client)
        fake_client.servers.get.return_value = Server(id=1, is_ready=False)
        fake_client.monitors.list.return_value = MonitorCollection((Monitor(id=1, state="ALERT"),))

        result = run(ServerHealthCheckTool(fake_client), {"server_id": 1})
        assert result["health_status"] == "critical"
        assert result["issues"] == ["Server is not ready", "1 monitor(s) alerting"]

    def test_missing_monitors_and_pending_sites(self, fake_client):
        self._healthy(fake_client)
        fake_client.monitors.list.return_value = MonitorCollection()
        fake_client.sites.list.return_value = SiteCollection((Site(id=2, status="installing"),))

        result = run(ServerHealthCheckTool(fake_client), {"server_id": 1})
        assert result["warnings"] == ["No monitors configured", "1 site(s) not fully installed"]

    def test_unknown_server(self, fake_client):
        fake_client.servers.get.side_effect = ForgeAPIError("Not Found", 404)
        assert run(ServerHealthCheckTool(fake_client), {"server_id": 1}) == {"success": False, "error": "Not Found"}
        fake_client.monitors.list.assert_not_awaited()


class TestSiteStatusDashboard:
    def test_dashboard(self, fake_client):
        fake_client.sites.get.return_value = Site(id=2, server_id=1, name="example.com", repository="acme/app",
                                                  repository_provider="github", repository_branch="main")
        fake_client.certificates.list.return_value = CertificateCollection((
            Certificate(id=7, domain="example.com", active=True, expires_at="2026-06-01 00:00:00"),
        ))
        fake_client.sites.deployment_history.return_value = DeploymentCollection((
            Deployment(id=30, status="finished"), Deployment(id=29, status="failed"),
        ))
        fake_client.workers.list.return_value = WorkerCollection((Worker(id=3, connection="redis"),))
        fake_client.jobs.list.return_value = JobCollection((
            Job(id=1, command="php /home/forge/example.com/artisan schedule:run", frequency="minutely"),
            Job(id=2, command="php /home/forge/other.test/artisan schedule:run", frequency="minutely"),
        ))

        result = run(SiteStatusDashboardTool(fake_client), {"server_id": 1, "site_id": 2})

        assert result["repository"] == {"provider": "github", "repository": "acme/app", "branch": "main"}
        assert result["ssl"] == {"status": "active", "domain": "example.com",
                                 "expires_at": "2026-06-01 00:00:00", "total_certificates": 1}
        assert result["deployment"]["id"] == 30
        assert result["workers"]["total"] == 1
        assert [job["id"] for job in result["scheduled_jobs"]["list"]] == [1]
        assert len(result["recent_deployments"]) == 2
        assert result["errors"] == {}

    def test_partial_failure(self, fake_client):
        fake_client.sites.get.return_value = Site(id=2, name="example.com")
        fake_client.certificates.list.side_effect = ForgeAPIError("Server Error", 500)
        fake_client.sites.deployment_history.return_value = DeploymentCollection()
        fake_client.workers.list.return_value = WorkerCollection()
        fake_client.jobs.list.return_value = JobCollection()

        result = run(SiteStatusDashboardTool(fake_client), {"server_id": 1, "site_id": 2})
        assert result["success"] is True
        assert result["repository"] is None
        assert result["ssl"]["status"] == "none"
        assert result["deployment"] is None
        assert result["errors"] == {"certificates": "Server Error"}


class TestSSLExpirationCheck:
    def _tool(self, client):
        return SSLExpirationCheckTool(client, clock=lambda: NOW)

    def test_buckets(self, fake_client):
        fake_client.servers.list.return_value = ServerCollection((Server(id=1, name="web"),))
        fake_client.sites.list.return_value = SiteCollection((Site(id=2, name="example.com"),))
        fake_client.certificates.list.return_value = CertificateCollection((
            Certificate(id=1, active=True, expires_at="2026-02-01T00:00:00Z"),
            Certificate(id=2, active=True, expires_at="2026-03-20T00:00:00Z"),
            Certificate(id=3, active=True, expires_at="2026-03-05 00:00:00"),
            Certificate(id=4, active=True, expires_at="2027-01-01T00:00:00+00:00"),
            Certificate(id=5, active=False, expires_at="2020-01-01T00:00:00Z"),
            Certificate(id=6, active=True),
        ))

        result = run(self._tool(fake_client), {})

        assert result["threshold_days"] == 30
        assert result["summary"] == {"total_checked": 5, "expired": 1, "expiring_soon": 2, "healthy": 2,
                                     "errors": 0}
        assert result["action_required"] is True
        assert [c["certificate_id"] for c in result["expired"]] == [1]
        assert [c["certificate_id"] for c in result["expiring_soon"]] == [3, 2]
        assert result["expiring_soon"][0]["days_until_expiry"] == 3
        assert {c["certificate_id"] for c in result["healthy"]} == {4, 6}

    def test_days_until_expiry_truncates_toward_zero(self, fake_client):
        fake_client.servers.get.return_value = Server(id=1)
        fake_client.sites.list.return_value = SiteCollection((Site(id=2),))
        fake_client.certificates.list.return_value = CertificateCollection((
            Certificate(id=1, active=True, expires_at="2026-03-01T10:00:00Z"),
            Certificate(id=2, active=True, expires_at="2026-02-27T00:00:00Z"),
        ))

        result = run(self._tool(fake_client), {"server_id": 1})
        assert [(c["certificate_id"], c["days_until_expiry"]) for c in result["expired"]] == [(1, 0), (2, -2)]

    def test_threshold(self, fake_client):
        fake_client.servers.get.return_value = Server(id=1)
        fake_client.sites.list.return_value = SiteCollection((Site(id=2),))
        fake_client.certificates.list.return_value = CertificateCollection((
            Certificate(id=2, active=True, expires_at="2026-03-20T00:00:00Z"),
        ))

        result = run(self._tool(fake_client), {"server_id": 1, "days_threshold": 7})
        assert result["summary"]["healthy"] == 1
        assert result["action_required"] is False
        fake_client.servers.list.assert_not_awaited()

    def test_errors_are_collected(self, fake_client):
        fake_client.servers.list.return_value = ServerCollection((Server(id=1), Server(id=2)))

        async def sites(server_id):
            if server_id == 2:
                raise ForgeAPIError("Server is offline")
            return SiteCollection((Site(id=3),))

        fake_client.sites.list.side_effect = sites
        fake_client.certificates.list.return_value = CertificateCollection((
            Certificate(id=9, active=True, expires_at="next tuesday"),
        ))

        result = run(self._tool(fake_client), {})
        assert result["errors"] == [
            {"server_id": 1, "site_id": 3, "certificate_id": 9, "error": "Unrecognized expiry date 'next tuesday'"},
            {"server_id": 2, "error": "Server is offline"},
        ]
        assert result["summary"]["errors"] == 2

    def test_server_listing_failure(self, fake_client):
        fake_client.servers.list.side_effect = ForgeAPIError("Unauthenticated.", 401)
        assert run(self._tool(fake_client), {}) == {"success": False, "error": "Unauthenticated."}


@pytest.mark.parametrize("value, expected", [
    ("2026-03-01T12:00:00Z", NOW),
    ("2026-03-01 12:00:00", NOW),
    ("2026-03-01T13:00:00+01:00", NOW),
])
def test_parse_timestamp(value, expected):
    assert _parse_timestamp(value) == expected


class TestCloneSite:
    def _source(self, client, repository="acme/app"):
        client.sites.get.return_value = Site(id=2, name="example.com", project_type="php", directory="/public",
                                             php_version="php83", repository=repository,
                                             repository_provider="github", repository_branch="main")
        client.sites.create.return_value = Site(id=50, name="staging.example.com")
        client.sites.deployment_script.return_value = "cd /home/forge/example.com\ngit pull"
        client.workers.list.return_value = WorkerCollection((Worker(id=1, connection="redis", queue="emails"),))
        client.jobs.list.return_value = JobCollection((
            Job(id=1, command="php /home/forge/example.com/artisan schedule:run", frequency="minutely"),
            Job(id=2, command="php /home/forge/other.test/artisan schedule:run", frequency="minutely"),
        ))

    ARGS = {"source_server_id": 1, "source_site_id": 2, "target_server_id": 3,
            "new_domain": "staging.example.com"}

    def test_all_steps(self, fake_client):
        self._source(fake_client)
        result = run(CloneSiteTool(fake_client), self.ARGS)

        assert result["success"] is True
        assert [step["action"] for step in result["steps"]] == [
            "get_source_site", "create_site", "install_git", "copy_deployment_script",
            "clone_workers", "clone_jobs", "obtain_ssl",
        ]
        assert result["new_site"] == {"server_id": 3, "site_id": 50, "domain": "staging.example.com"}

        (server_id, data), _ = fake_client.sites.create.await_args
        assert server_id == 3
        assert data.to_wire() == {"domain": "staging.example.com", "project_type": "php",
                                  "directory": "/public", "php_version": "php83"}
        fake_client.sites.update_deployment_script.assert_awaited_once_with(
            3, 50, "cd /home/forge/staging.example.com\ngit pull")
        (_, job), _ = fake_client.jobs.create.await_args
        assert job.command == "php /home/forge/staging.example.com/artisan schedule:run"
        assert fake_client.jobs.create.await_count == 1
        (_, _, worker), _ = fake_client.workers.create.await_args
        assert (worker.connection, worker.queue) == ("redis", "emails")
        fake_client.certificates.obtain_lets_encrypt.assert_awaited_once_with(
            3, 50, ObtainLetsEncryptCertificate(domains=["staging.example.com"]))

    def test_without_repository_and_optional_steps(self, fake_client):
        self._source(fake_client, repository=None)
        result = run(CloneSiteTool(fake_client), {**self.ARGS, "clone_workers": False, "clone_jobs": False,
                                                  "clone_ssl": False})
        assert [step["action"] for step in result["steps"]] == [
            "get_source_site", "create_site", "copy_deployment_script",
        ]
        fake_client.sites.install_git_repository.assert_not_awaited()
        fake_client.workers.create.assert_not_awaited()

    def test_failed_step_does_not_stop_later_steps(self, fake_client):
        self._source(fake_client)
        fake_client.sites.install_git_repository.side_effect = ForgeAPIError("Repository not accessible")

        result = run(CloneSiteTool(fake_client), self.ARGS)

        assert result["success"] is False
        git = next(step for step in result["steps"] if step["action"] == "install_git")
        assert git == {"action": "install_git", "status": "failed", "message": "Repository not accessible"}
        assert result["steps"][-1]["action"] == "obtain_ssl"

    def test_site_creation_failure(self, fake_client):
        self._source(fake_client)
        fake_client.sites.create.side_effect = ForgeAPIError("The domain has already been taken.", 422)

        result = run(CloneSiteTool(fake_client), self.ARGS)
        assert result == {
            "success": False,
            "error": "The domain has already been taken.",
            "steps_completed": [{"action": "get_source_site", "status": "success",
                                 "message": "Found source site: example.com"}],
        }

    def test_missing_source(self, fake_client):
        fake_client.sites.get.side_effect = ForgeAPIError("Not Found", 404)
        assert run(CloneSiteTool(fake_client), self.ARGS) == {"success": False, "error": "Not Found"}
        fake_client.sites.create.assert_not_awaited()
