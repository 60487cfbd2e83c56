#!/usr/bin/env python3
"""Workflow prompt templates.

A prompt renders a markdown playbook telling the agent which tools to call
and in what order. Arguments are optional strings; missing ones fall back
to their defaults or add discovery steps to the playbook.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple


class UnknownPromptError(LookupError):
    pass


@dataclass(frozen=True)
class PromptArg:
    name: str
    description: str
    default: Optional[str] = None


@dataclass(frozen=True)
class PromptTemplate:
    name: str
    description: str
    arguments: Tuple[PromptArg, ...]
    render: Callable[[Dict[str, str]], str]

    def resolve(self, arguments: Optional[Dict[str, str]]) -> Dict[str, str]:
        values = {arg.name: arg.default or "" for arg in self.arguments}
        values.update({k: str(v).strip() for k, v in (arguments or {}).items() if v is not None})
        return values


def _flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _deploy_laravel_app(args: Dict[str, str]) -> str:
    lines = ["# Laravel Application Deployment", ""]
    if args["server_name"]:
        lines.append(f"Target server: {args['server_name']}. Find its ID with `list-servers-tool` if a name was given.")
    else:
        lines += ["1. Call `list-servers-tool` and ask the user which server to use."]
    if args["site_domain"]:
        lines.append(f"Target site: {args['site_domain']}. Find its ID with `list-sites-tool`.")
    else:
        lines += ["2. Call `list-sites-tool` for that server and ask which site to deploy."]
    lines += [
        "",
        "## Before deploying",
        "3. Show the script from `get-deployment-script-tool` and confirm it with the user.",
        "4. Warn about downtime if the script runs migrations.",
        "",
        "## Deploy",
        "5. Call `deploy-site-tool`.",
        "6. Wait a few seconds, then call `get-deployment-log-tool`.",
        "",
        "## Reading the log",
        "- `composer install` failures: memory or private package credentials.",
        "- `Migration failed`: database credentials in the environment file.",
        "- `npm` failures: Node version on the server.",
        "- `Permission denied`: file ownership of the site directory.",
    ]
    if _flag(args["show_logs"]):
        lines += ["", "Show the full deployment log to the user when finished."]
    return "\n".join(lines)


def _setup_new_server(args: Dict[str, str]) -> str:
    lines = ["# New Server Setup", ""]
    if not args["provider"]:
        lines += ["1. Call `list-credentials-tool` and ask which provider credential to use."]
    else:
        lines += [f"1. Provider: {args['provider']}. Pick its credential from `list-credentials-tool`."]
    if not args["region"]:
        lines += ["2. Call `list-regions-tool` and recommend the region closest to the users."]
    else:
        lines += [f"2. Region: {args['region']}. Confirm the size slugs available there with `list-regions-tool`."]
    lines += [
        f"3. Call `create-server-tool` with type `{args['server_type']}`, php_version "
        f"`{args['php_version']}` and database_type `{args['database']}`.",
        "   Save the sudo and database passwords from the result; they are shown only once.",
        "4. Poll `get-server-tool` until `is_ready` is true (usually 5 to 10 minutes).",
        "",
        "## Hardening",
        "5. Add team SSH keys with `create-ssh-key-tool`.",
        "6. Review the firewall with `list-firewall-rules-tool`; open extra ports only for known IPs.",
        "7. Add disk and CPU monitors with `create-monitor-tool`.",
        "",
        "## Verify",
        "8. Run `server-health-check-tool` and report the result.",
    ]
    return "\n".join(lines)


def _migrate_site(args: Dict[str, str]) -> str:
    source = args["source_server_id"] or "<source server>"
    target = args["target_server_id"] or "<target server>"
    domain = args["site_domain"] or "<domain>"
    lines = [
        f"# Migrate {domain} from server {source} to server {target}",
        "",
        "## Inventory",
        f"1. Find the site with `list-sites-tool` on server {source}.",
        "2. Record configuration with `site-status-dashboard-tool` and `get-env-file-tool`.",
        "",
        "## Recreate",
        f"3. Run `clone-site-tool` with target_server_id {target} (workers, jobs and SSL included).",
        "4. Copy the environment file with `update-env-file-tool`.",
    ]
    if _flag(args["include_database"]):
        lines += [
            "",
            "## Database",
            "5. Create the database on the target with `create-database-tool` using the same name.",
            "6. Dump and import the data over SSH:",
            "   `mysqldump -u forge -p <database> > backup.sql` on the source,",
            "   `mysql -u forge -p <database> < backup.sql` on the target.",
        ]
    lines += [
        "",
        "## Cut over",
        "7. Deploy with `deploy-site-tool` and check `get-deployment-log-tool`.",
        "8. Lower the DNS TTL, then point DNS at the target server IP.",
        "9. Request a certificate with `obtain-lets-encrypt-certificate-tool` once DNS resolves.",
        "10. Keep the source site until traffic has moved, then remove it with `delete-site-tool` "
        "after the user confirms.",
    ]
    return "\n".join(lines)


TROUBLESHOOTING_HINTS = {
    "composer": "Check memory, `composer.lock` PHP constraints and `get-packages-auth-tool` for private packages.",
    "npm": "Check the Node version on the server and whether `npm ci` runs in the script.",
    "permission": "Check that the site files belong to the site user; isolated sites use their own user.",
    "database": "Compare `DB_*` in `get-env-file-tool` with `list-database-users-tool`.",
    "git": "Check the repository and branch in `get-site-tool`; recreate the key with `create-deploy-key-tool`.",
    "php": "Check `list-php-versions-tool` and the site's PHP version; use `change-php-version-tool` if needed.",
}


def _troubleshoot_deployment(args: Dict[str, str]) -> str:
    lines = ["# Deployment Troubleshooting", ""]
    if not (args["server_id"] and args["site_id"]):
        lines += ["1. Identify the site with `list-servers-tool` and `list-sites-tool`."]
    else:
        lines += [f"1. Site {args['site_id']} on server {args['server_id']}."]
    lines += [
        "2. Read `get-deployment-log-tool` and find the first failing command.",
        "3. Compare with the last good run in `list-deployment-history-tool`.",
        "4. Check the script with `get-deployment-script-tool`.",
        "5. If the deployment is stuck, call `reset-deployment-state-tool`.",
        "",
    ]
    error_type = args["error_type"].lower()
    if error_type in TROUBLESHOOTING_HINTS:
        lines += [f"## {error_type} errors", TROUBLESHOOTING_HINTS[error_type]]
    else:
        lines.append("## Common causes")
        lines += [f"- **{kind}**: {hint}" for kind, hint in TROUBLESHOOTING_HINTS.items()]
    lines += ["", "After fixing, redeploy with `deploy-site-tool` and read the log again."]
    return "\n".join(lines)


def _ssl_renewal(args: Dict[str, str]) -> str:
    lines = ["# SSL Certificate Renewal", ""]
    if not (args["server_id"] and args["site_id"]):
        lines += ["1. Run `ssl-expiration-check-tool` to find expired or expiring certificates."]
    else:
        lines += [f"1. Call `list-certificates-tool` for site {args['site_id']} on server {args['server_id']}."]
    lines += ["2. Note the domains and `expires_at` of the active certificate.", ""]
    if args["certificate_type"] == "custom":
        lines += [
            "## Custom certificate",
            "3. Get the signing request with `get-certificate-signing-request-tool` and send it to the CA.",
            "4. Install the issued certificate in the Forge UI, then activate it with `activate-certificate-tool`.",
        ]
    else:
        lines += [
            "## Let's Encrypt",
            "3. Make sure every domain resolves to the server and port 80 is open.",
            "4. Call `obtain-lets-encrypt-certificate-tool` with all domains, including www if used.",
            "5. Poll `list-certificates-tool` until the new certificate is installed and active.",
        ]
    lines += ["", "Finally delete the old certificate with `delete-certificate-tool` after the user confirms."]
    return "\n".join(lines)


def _setup_laravel_site(args: Dict[str, str]) -> str:
    server = args["server_id"] or "<server id>"
    domain = args["domain"] or "<domain>"
    repository = args["repository"] or "<owner/repository>"
    lines = [
        f"# Laravel Site Setup: {domain}",
        "",
        f"1. Create the site with `create-site-tool` on server {server}: domain `{domain}`, "
        "project_type `php`, directory `/public`.",
        f"2. Attach `{repository}` with `install-git-repository-tool` (composer enabled).",
        "3. Create a database and user with `create-database-tool`; match `DB_DATABASE` in the environment file.",
        "4. Write the environment file with `update-env-file-tool` (APP_ENV=production, APP_DEBUG=false).",
        "5. Review the deployment script with `get-deployment-script-tool`; it must run migrations with --force.",
        "6. Deploy with `deploy-site-tool` and check `get-deployment-log-tool`.",
        "7. Add a queue worker with `create-worker-tool` if the app uses queues.",
    ]
    if _flag(args["with_horizon"]):
        lines.append("8. Enable Horizon with `enable-horizon-tool` instead of plain workers.")
    if _flag(args["with_scheduler"]):
        lines.append("9. Enable the scheduler with `enable-scheduler-tool`.")
    lines.append(f"10. Request SSL for `{domain}` with `obtain-lets-encrypt-certificate-tool` once DNS resolves.")
    return "\n".join(lines)


def _deploy_application(args: Dict[str, str]) -> str:
    lines = ["# Deploy Application", ""]
    if args["server_id"] and args["site_id"]:
        lines.append(f"Site {args['site_id']} on server {args['server_id']}.")
    else:
        lines.append("Find the server and site with `list-servers-tool` and `list-sites-tool`.")
    lines += [
        "",
        "1. Check the site with `get-site-tool`; `deployment_status` must not be `deploying`.",
        "2. Trigger the deployment with `deploy-site-tool`.",
        "3. Follow `get-deployment-log-tool` until it finishes.",
    ]
    if _flag(args["run_migrations"]):
        lines.append("4. Confirm the script runs `php artisan migrate --force` (see `get-deployment-script-tool`).")
    lines.append("5. Summarize the result with `site-status-dashboard-tool`.")
    return "\n".join(lines)


PROMPTS = (
    PromptTemplate("deploy-laravel-app", "Deploy a Laravel application with log monitoring and error hints.", (
        PromptArg("server_name", "Server name or ID; servers are listed when omitted"),
        PromptArg("site_domain", "Site domain; sites are listed when omitted"),
        PromptArg("show_logs", "Show deployment logs afterwards (true/false)", "true"),
    ), _deploy_laravel_app),
    PromptTemplate("setup-new-server", "Provision and harden a new server.", (
        PromptArg("provider", "Server provider, e.g. ocean2, linode, vultr2, aws, hetzner"),
        PromptArg("region", "Provider region, e.g. nyc1"),
        PromptArg("server_type", "app, web, database, worker, cache or loadbalancer", "app"),
        PromptArg("php_version", "PHP version slug", "php84"),
        PromptArg("database", "Database engine", "mysql8"),
    ), _setup_new_server),
    PromptTemplate("migrate-site", "Move a site between Forge servers.", (
        PromptArg("source_server_id", "Server currently hosting the site"),
        PromptArg("target_server_id", "Server to move the site to"),
        PromptArg("site_domain", "Domain of the site"),
        PromptArg("include_database", "Include database migration steps (true/false)", "true"),
    ), _migrate_site),
    PromptTemplate("troubleshoot-deployment", "Diagnose a failed deployment.", (
        PromptArg("server_id", "Server where the deployment failed"),
        PromptArg("site_id", "Site whose deployment failed"),
        PromptArg("error_type", "composer, npm, permission, database, git or php"),
    ), _troubleshoot_deployment),
    PromptTemplate("ssl-renewal", "Renew or replace an SSL certificate.", (
        PromptArg("server_id", "Server ID"),
        PromptArg("site_id", "Site ID"),
        PromptArg("certificate_type", "letsencrypt or custom", "letsencrypt"),
    ), _ssl_renewal),
    PromptTemplate("setup-laravel-site", "Set up a Laravel site with database, workers and SSL.", (
        PromptArg("server_id", "Server to create the site on"),
        PromptArg("domain", "Domain of the site"),
        PromptArg("repository", "Repository, e.g. acme/app"),
        PromptArg("with_horizon", "Set up Horizon (true/false)", "false"),
        PromptArg("with_scheduler", "Enable the scheduler (true/false)", "true"),
    ), _setup_laravel_site),
    PromptTemplate("deploy-application", "Deploy a site and verify the result.", (
        PromptArg("server_id", "Server ID"),
        PromptArg("site_id", "Site ID"),
        PromptArg("run_migrations", "Check migrations run during deployment (true/false)", "true"),
    ), _deploy_application),
)

_BY_NAME: Dict[str, PromptTemplate] = {prompt.name: prompt for prompt in PROMPTS}


def list_prompts() -> List[PromptTemplate]:
    return list(PROMPTS)


def get_prompt_template(name: str) -> PromptTemplate:
    try:
        return _BY_NAME[name]
    except KeyError:
        raise UnknownPromptError(f"Unknown prompt: {name}") from None


def render_prompt(name: str, arguments: Optional[Dict[str, str]] = None) -> str:
    template = get_prompt_template(name)
    return template.render(template.resolve(arguments))
