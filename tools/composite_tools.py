#!/usr/bin/env python3
"""Composite tools that combine several Forge API calls into one answer."""

from datetime import datetime, timedelta, timezone
from typing import Any, Awaitable, Callable, Dict, List, Optional
from mcp.types import TextContent
from config.logging_setup import get_logger
from models.certificate import ObtainLetsEncryptCertificate
from models.process import CreateJob, CreateWorker
from models.site import CreateSite, InstallGitRepository
from tools.base_tool import BaseTool
from utils.formatting import success_envelope

logger = get_logger(__name__)

HEALTHY_LISTED = 10
RECENT_LIMIT = 5


def _id_schema(description: str) -> Dict[str, Any]:
    return {"type": "integer", "description": description, "minimum": 1}


class CompositeTool(BaseTool):
    """Base for tools issuing more than one façade call.

    Sub-calls go through ``_section`` so one failing concern is reported next
    to the results of the others instead of failing the whole tool.
    """

    def __init__(self, api_client: Any, name: str, description: str, **hints):
        super().__init__(name=name, description=description, category="composite", **hints)
        self.api_client = api_client

    async def _section(self, errors: Dict[str, str], section: str, call: Awaitable[Any]) -> Optional[Any]:
        try:
            return await call
        except Exception as e:
            logger.warning("%s: %s failed: %s", self.name, section, e)
            errors[section] = str(e) or type(e).__name__
            return None


class ServerHealthCheckTool(CompositeTool):

    def __init__(self, api_client: Any):
        super().__init__(
            api_client,
            name="server-health-check-tool",
            description="Health report for one server: readiness, sites, monitors, daemons and recent events. "
                        "Reports healthy, warning or critical with the issues found.",
            read_only=True,
            idempotent=True,
        )

    def get_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {"server_id": _id_schema("The server ID")},
            "required": ["server_id"],
            "additionalProperties": False,
        }

    async def execute(self, arguments: Dict[str, Any]) -> List[TextContent]:
        server_id = arguments["server_id"]
        client = self.api_client
        try:
            server = await client.servers.get(server_id)
        except Exception as e:
            return self.handle_failure(e)

        errors: Dict[str, str] = {}
        monitors = await self._section(errors, "monitors", client.monitors.list(server_id))
        events = await self._section(errors, "events", client.servers.list_events(server_id))
        sites = await self._section(errors, "sites", client.sites.list(server_id))
        daemons = await self._section(errors, "daemons", client.daemons.list(server_id))

        monitors = list(monitors or [])
        events = list(events or [])
        sites = list(sites or [])
        daemons = list(daemons or [])

        issues = []
        warnings = [f"Could not load {section}: {error}" for section, error in errors.items()]
        if not server.is_ready:
            issues.append("Server is not ready")
        if "monitors" not in errors and not monitors:
            warnings.append("No monitors configured")
        alerting = [m for m in monitors if (m.state or "").upper() == "ALERT"]
        if alerting:
            issues.append(f"{len(alerting)} monitor(s) alerting")
        installed = [s for s in sites if s.status == "installed"]
        if len(installed) < len(sites):
            warnings.append(f"{len(sites) - len(installed)} site(s) not fully installed")

        status = "critical" if issues else "warning" if warnings else "healthy"
        return self.format_result(success_envelope(
            health_status=status,
            server={
                "id": server.id,
                "name": server.name,
                "ip_address": server.ip_address,
                "provider": server.provider,
                "region": server.region,
                "size": server.size,
                "php_version": server.php_version,
                "database_type": server.database_type,
                "is_ready": server.is_ready,
            },
            summary={
                "total_sites": len(sites),
                "active_sites": len(installed),
                "total_monitors": len(monitors),
                "total_daemons": len(daemons),
                "recent_events": len(events),
            },
            issues=issues,
            warnings=warnings,
            monitors=[{"id": m.id, "type": m.type, "status": m.status, "state": m.state}
                      for m in monitors[:RECENT_LIMIT]],
            recent_events=[{"id": e.id, "description": e.description, "status": e.status,
                            "created_at": e.created_at} for e in events[:RECENT_LIMIT]],
            errors=errors,
        ))


class SiteStatusDashboardTool(CompositeTool):

    def __init__(self, api_client: Any):
        super().__init__(
            api_client,
            name="site-status-dashboard-tool",
            description="Dashboard for one site: configuration, repository, SSL status, latest deployments, "
                        "queue workers and scheduled jobs mentioning the site.",
            read_only=True,
            idempotent=True,
        )

    def get_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "server_id": _id_schema("The server ID"),
                "site_id": _id_schema("The site ID"),
            },
            "required": ["server_id", "site_id"],
            "additionalProperties": False,
        }

    async def execute(self, arguments: Dict[str, Any]) -> List[TextContent]:
        server_id, site_id = arguments["server_id"], arguments["site_id"]
        client = self.api_client
        try:
            site = await client.sites.get(server_id, site_id)
        except Exception as e:
            return self.handle_failure(e)

        errors: Dict[str, str] = {}
        certificates = list(await self._section(
            errors, "certificates", client.certificates.list(server_id, site_id)) or [])
        deployments = list(await self._section(
            errors, "deployments", client.sites.deployment_history(server_id, site_id)) or [])
        workers = list(await self._section(
            errors, "workers", client.workers.list(server_id, site_id)) or [])
        jobs = list(await self._section(errors, "scheduled_jobs", client.jobs.list(server_id)) or [])

        site_jobs = [job for job in jobs if site.name and site.name in (job.command or "")]
        active = next((cert for cert in certificates if cert.active), None)
        latest = deployments[0] if deployments else None

        return self.format_result(success_envelope(
            site={
                "id": site.id,
                "name": site.name,
                "status": site.status,
                "directory": site.directory,
                "php_version": site.php_version,
                "quick_deploy": site.quick_deploy,
                "deployment_status": site.deployment_status,
                "created_at": site.created_at,
            },
            repository={
                "provider": site.repository_provider,
                "repository": site.repository,
                "branch": site.repository_branch,
            } if site.repository else None,
            ssl={
                "status": "active" if active else "none",
                "domain": active.domain if active else None,
                "expires_at": active.expires_at if active else None,
                "total_certificates": len(certificates),
            },
            deployment={"id": latest.id, "status": latest.status, "ended_at": latest.ended_at} if latest else None,
            workers={
                "total": len(workers),
                "list": [{"id": w.id, "connection": w.connection, "queue": w.queue, "status": w.status}
                         for w in workers],
            },
            scheduled_jobs={
                "total": len(site_jobs),
                "list": [{"id": j.id, "command": j.command, "frequency": j.frequency} for j in site_jobs],
            },
            recent_deployments=[{"id": d.id, "status": d.status, "commit_message": d.commit_message,
                                 "ended_at": d.ended_at} for d in deployments[:RECENT_LIMIT]],
            errors=errors,
        ))


class BulkDeployTool(CompositeTool):

    def __init__(self, api_client: Any):
        super().__init__(
            api_client,
            name="bulk-deploy-tool",
            description="Trigger deployments for several sites at once. Every target is attempted; "
                        "the result lists successful and failed deployments separately.",
            destructive=True,
        )

    def get_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "deployments": {
                    "type": "array",
                    "description": "Sites to deploy",
                    "minItems": 1,
                    "items": {
                        "type": "object",
                        "properties": {
                            "server_id": _id_schema("The server ID"),
                            "site_id": _id_schema("The site ID"),
                        },
                        "required": ["server_id", "site_id"],
                        "additionalProperties": False,
                    },
                },
            },
            "required": ["deployments"],
            "additionalProperties": False,
        }

    async def execute(self, arguments: Dict[str, Any]) -> List[TextContent]:
        successful, failed = [], []
        for target in arguments["deployments"]:
            server_id, site_id = target["server_id"], target["site_id"]
            try:
                site = await self.api_client.sites.get(server_id, site_id)
                await self.api_client.sites.deploy(server_id, site_id)
            except Exception as e:
                logger.warning("Deployment of site %s on server %s failed: %s", site_id, server_id, e)
                failed.append({"server_id": server_id, "site_id": site_id,
                               "error": str(e) or type(e).__name__})
                continue
            successful.append({"server_id": server_id, "site_id": site_id, "site_name": site.name,
                               "status": "triggered"})

        return self.format_result({
            "success": not failed,
            "summary": {
                "total": len(successful) + len(failed),
                "successful": len(successful),
                "failed": len(failed),
            },
            "successful": successful,
            "failed": failed,
        })


def _parse_timestamp(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00").replace(" ", "T", 1))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class SSLExpirationCheckTool(CompositeTool):
    """Sweep active certificates on every site of every (or one) server.

    Certificates expiring within ``days_threshold`` days land in
    ``expiring_soon`` (soonest first), past expiry in ``expired``. Active
    certificates without an expiry date count as healthy.
    """

    def __init__(self, api_client: Any, clock: Optional[Callable[[], datetime]] = None):
        super().__init__(
            api_client,
            name="ssl-expiration-check-tool",
            description="Find SSL certificates that are expired or expire within a number of days, "
                        "across all servers or one server.",
            read_only=True,
            idempotent=True,
        )
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    def get_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "days_threshold": {"type": "integer", "description": "Warn about certificates expiring "
                                   "within this many days", "minimum": 1, "default": 30},
                "server_id": _id_schema("Only check this server"),
            },
            "required": [],
            "additionalProperties": False,
        }

    async def execute(self, arguments: Dict[str, Any]) -> List[TextContent]:
        days_threshold = arguments.get("days_threshold", 30)
        client = self.api_client
        try:
            if arguments.get("server_id"):
                servers = [await client.servers.get(arguments["server_id"])]
            else:
                servers = list(await client.servers.list())
        except Exception as e:
            return self.handle_failure(e)

        now = self.clock()
        cutoff = now + timedelta(days=days_threshold)
        expired, expiring, healthy, errors = [], [], [], []

        for server in servers:
            try:
                sites = list(await client.sites.list(server.id))
            except Exception as e:
                errors.append({"server_id": server.id, "error": str(e) or type(e).__name__})
                continue
            for site in sites:
                try:
                    certificates = list(await client.certificates.list(server.id, site.id))
                except Exception as e:
                    errors.append({"server_id": server.id, "site_id": site.id, "error": str(e) or type(e).__name__})
                    continue
                for cert in certificates:
                    if not cert.active:
                        continue
                    info = {
                        "server_id": server.id,
                        "server_name": server.name,
                        "site_id": site.id,
                        "site_domain": site.name,
                        "certificate_id": cert.id,
                        "domain": cert.domain,
                        "type": cert.type,
                        "expires_at": cert.expires_at,
                    }
                    if not cert.expires_at:
                        healthy.append(info)
                        continue
                    try:
                        expires = _parse_timestamp(cert.expires_at)
                    except ValueError:
                        errors.append({"server_id": server.id, "site_id": site.id, "certificate_id": cert.id,
                                       "error": f"Unrecognized expiry date '{cert.expires_at}'"})
                        continue

                    info["days_until_expiry"] = int((expires - now) / timedelta(days=1))
                    if expires < now:
                        expired.append(info)
                    elif expires <= cutoff:
                        expiring.append(info)
                    else:
                        healthy.append(info)

        expiring.sort(key=lambda item: item["days_until_expiry"])
        return self.format_result(success_envelope(
            threshold_days=days_threshold,
            summary={
                "total_checked": len(expired) + len(expiring) + len(healthy),
                "expired": len(expired),
                "expiring_soon": len(expiring),
                "healthy": len(healthy),
                "errors": len(errors),
            },
            action_required=bool(expired or expiring),
            expired=expired,
            expiring_soon=expiring,
            healthy=healthy[:HEALTHY_LISTED],
            errors=errors,
        ))


class CloneSiteTool(CompositeTool):
    """Recreate a site on the same or another server.

    The new site is created first; git linkage, deployment script, workers,
    scheduled jobs and a Let's Encrypt certificate follow, each recorded as
    one step. A failed follow-up step does not stop the others.
    """

    def __init__(self, api_client: Any):
        super().__init__(
            api_client,
            name="clone-site-tool",
            description="Clone a site's configuration (repository, deployment script, queue workers, "
                        "scheduled jobs, SSL) to a new domain on the same or a different server.",
        )

    def get_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "source_server_id": _id_schema("Server of the site to clone"),
                "source_site_id": _id_schema("Site to clone"),
                "target_server_id": _id_schema("Server to create the new site on (may equal the source)"),
                "new_domain": {"type": "string", "description": "Domain of the new site", "minLength": 1},
                "clone_workers": {"type": "boolean", "description": "Copy queue workers", "default": True},
                "clone_jobs": {"type": "boolean", "description": "Copy scheduled jobs mentioning the site",
                               "default": True},
                "clone_ssl": {"type": "boolean", "description": "Request a Let's Encrypt certificate",
                              "default": True},
            },
            "required": ["source_server_id", "source_site_id", "target_server_id", "new_domain"],
            "additionalProperties": False,
        }

    async def _step(self, steps: List[Dict[str, Any]], action: str, work: Callable[[], Awaitable[str]]) -> None:
        try:
            message = await work()
        except Exception as e:
            logger.warning("%s: step %s failed: %s", self.name, action, e)
            steps.append({"action": action, "status": "failed", "message": str(e) or type(e).__name__})
            return
        steps.append({"action": action, "status": "success", "message": message})

    async def execute(self, arguments: Dict[str, Any]) -> List[TextContent]:
        source_server = arguments["source_server_id"]
        source_site_id = arguments["source_site_id"]
        target_server = arguments["target_server_id"]
        domain = arguments["new_domain"]
        sites = self.api_client.sites
        steps: List[Dict[str, Any]] = []

        try:
            source = await sites.get(source_server, source_site_id)
        except Exception as e:
            return self.handle_failure(e)
        steps.append({"action": "get_source_site", "status": "success",
                      "message": f"Found source site: {source.name}"})

        try:
            site = await sites.create(target_server, CreateSite.from_wire({
                "domain": domain,
                "project_type": source.project_type or "php",
                "directory": source.directory or "/public",
                "php_version": source.php_version or "php84",
            }))
        except Exception as e:
            logger.warning("%s: site creation failed: %s", self.name, e)
            return self.format_result({"success": False, "error": str(e) or type(e).__name__,
                                       "steps_completed": steps})
        steps.append({"action": "create_site", "status": "success", "message": f"Created new site: {domain}",
                      "site_id": site.id})

        def rename(text: str) -> str:
            return text.replace(source.name, domain) if source.name else text

        async def install_git():
            await sites.install_git_repository(target_server, site.id, InstallGitRepository.from_wire({
                "provider": source.repository_provider or "github",
                "repository": source.repository,
                "branch": source.repository_branch or "main",
            }))
            return f"Installed git repository: {source.repository}"

        async def copy_script():
            script = await sites.deployment_script(source_server, source_site_id)
            await sites.update_deployment_script(target_server, site.id, rename(script))
            return "Deployment script copied and updated"

        async def copy_workers():
            workers = list(await self.api_client.workers.list(source_server, source_site_id))
            for worker in workers:
                await self.api_client.workers.create(target_server, site.id, CreateWorker.from_wire({
                    "connection": worker.connection,
                    "queue": worker.queue or "default",
                    "timeout": worker.timeout if worker.timeout is not None else 60,
                    "sleep": worker.sleep if worker.sleep is not None else 3,
                    "processes": worker.processes or 1,
                }))
            return f"Cloned {len(workers)} workers"

        async def copy_jobs():
            jobs = [job for job in await self.api_client.jobs.list(source_server)
                    if source.name and source.name in (job.command or "")]
            for job in jobs:
                await self.api_client.jobs.create(target_server, CreateJob.from_wire({
                    "command": rename(job.command),
                    "frequency": job.frequency,
                    "user": job.user or "forge",
                }))
            return f"Cloned {len(jobs)} scheduled jobs"

        async def obtain_ssl():
            await self.api_client.certificates.obtain_lets_encrypt(
                target_server, site.id, ObtainLetsEncryptCertificate.from_wire({"domains": [domain]}))
            return f"SSL certificate requested for {domain}"

        if source.repository:
            await self._step(steps, "install_git", install_git)
        await self._step(steps, "copy_deployment_script", copy_script)
        if arguments.get("clone_workers", True):
            await self._step(steps, "clone_workers", copy_workers)
        if arguments.get("clone_jobs", True):
            await self._step(steps, "clone_jobs", copy_jobs)
        if arguments.get("clone_ssl", True):
            await self._step(steps, "obtain_ssl", obtain_ssl)

        return self.format_result({
            "success": all(step["status"] == "success" for step in steps),
            "new_site": {"server_id": target_server, "site_id": site.id, "domain": domain},
            "source_site": {"server_id": source_server, "site_id": source_site_id, "domain": source.name},
            "steps": steps,
            "next_steps": [
                "Update environment variables with update-env-file-tool",
                "Create a database if needed with create-database-tool",
                "Deploy the site with deploy-site-tool",
                "Point DNS for the new domain at the target server",
            ],
        })


COMPOSITE_TOOLS = (
    ServerHealthCheckTool,
    SiteStatusDashboardTool,
    BulkDeployTool,
    SSLExpirationCheckTool,
    CloneSiteTool,
)
