#!/usr/bin/env python3
"""Static reference documents served as MCP resources."""

from dataclasses import dataclass
from typing import Dict, List

MARKDOWN = "text/markdown"


class UnknownResourceError(LookupError):
    pass


@dataclass(frozen=True)
class Document:
    uri: str
    name: str
    description: str
    text: str
    mime_type: str = MARKDOWN


API_DOCS = """# Laravel Forge API

Base URL: `https://forge.laravel.com/api/v1` (override with `FORGE_API_URL`).

Every request carries `Authorization: Bearer <token>`, `Accept: application/json`
and `Content-Type: application/json`. Tokens are created under
Account > API Tokens and are configured here through `FORGE_API_TOKEN`.

## Resource hierarchy

| Path | Contents |
|---|---|
| `/servers` | servers, plus `/{id}/events`, `/{id}/logs` |
| `/servers/{id}/sites` | sites, deployments, git, env, nginx, aliases |
| `/servers/{id}/sites/{id}/certificates` | SSL certificates |
| `/servers/{id}/databases`, `/database-users` | MySQL/Postgres databases and users |
| `/servers/{id}/jobs`, `/daemons` | cron jobs and supervisor processes |
| `/servers/{id}/sites/{id}/workers` | queue workers |
| `/servers/{id}/firewall-rules`, `/monitors`, `/keys` | firewall, monitors, SSH keys |
| `/servers/{id}/backup-configurations` | database backups |
| `/recipes` | account wide bash recipes |

## Status codes

- `401` the token is missing, revoked or expired
- `403` the token lacks permission for the resource
- `404` the server, site or sub-resource id does not exist
- `422` validation failed; the body lists the offending fields under `errors`
- `429` rate limited (60 requests per minute); slow down and retry

## Tool results

Every tool returns JSON. Successful calls contain `"success": true`; failed
calls contain `"success": false` and an `error` message taken from the API.
List tools return a `count` and the items under a plural key.
"""

DEPLOYMENT_GUIDELINES = """# Deploying with Forge

1. Check the site with `get-site-tool`: repository, branch and `deployment_status`.
2. Review the script with `get-deployment-script-tool`.
3. Trigger the deployment with `deploy-site-tool`.
4. Read `get-deployment-log-tool` until the log ends with success or an error.
5. Inspect earlier runs with `list-deployment-history-tool`.

## Typical deployment script

```bash
cd $FORGE_SITE_PATH
git pull origin $FORGE_SITE_BRANCH
$FORGE_COMPOSER install --no-dev --no-interaction --prefer-dist --optimize-autoloader
( flock -w 10 9 || exit 1
    echo 'Restarting FPM...'; sudo -S service $FORGE_PHP_FPM reload ) 9>/tmp/fpmlock
if [ -f artisan ]; then
    $FORGE_PHP artisan migrate --force
    $FORGE_PHP artisan optimize
fi
```

## Quick deploy

`enable-quick-deploy-tool` deploys on every push to the configured branch.
Disable it for sites that need manual release approval.

## When a deployment hangs

`reset-deployment-state-tool` clears a deployment stuck in the `deploying` state.
"""

DEPLOYMENT_BEST_PRACTICES = """# Laravel Deployment Best Practices

## Before deploying

- Run the test suite in CI and deploy only green builds.
- Keep `.env` changes separate from code changes; apply them with `update-env-file-tool` first.
- Back up the database (`create-backup-configuration-tool`) before migrations that drop or rename columns.

## Migrations

- Always use `php artisan migrate --force` in the script.
- Prefer additive migrations: add the column, deploy code that writes both, remove the old column later.
- Long table rebuilds lock writes on MySQL; schedule them for low traffic hours.

## Caches

- Run `php artisan optimize` (config, routes, views, events) after composer install.
- Restart queue workers after every deployment: `php artisan queue:restart`, or
  `restart-worker-tool` per worker. Horizon needs `php artisan horizon:terminate`.

## Zero downtime

- Reload PHP-FPM rather than restarting it.
- Put the application in maintenance mode only around destructive migrations
  (`enable-maintenance-tool` with a bypass `secret`).

## After deploying

- Watch `get-deployment-log-tool` and the site log (`get-site-log-tool`).
- Run `site-status-dashboard-tool` to confirm workers, SSL and the latest deployment.
- Roll back by deploying the previous commit; there is no automatic rollback.
"""

SECURITY_BEST_PRACTICES = """# Forge Security Best Practices

## API token

- Use a dedicated token per integration and revoke unused ones.
- Never paste tokens into site environment files or recipes.

## Server access

- Install personal SSH keys with `create-ssh-key-tool`; remove them when people leave.
- Keep the firewall closed except 22, 80 and 443. Open extra ports for a single IP
  (`create-firewall-rule-tool` with `ip_address`).
- Use `revoke-server-access-tool` when a server should no longer be managed by Forge.

## Applications

- `APP_DEBUG=false` and `APP_ENV=production` in every production `.env`.
- Use isolated site users for unrelated applications on the same server.
- Protect admin paths with `create-security-rule-tool` (HTTP basic auth).

## Databases

- Create one database user per application with access only to its database.
- Rotate passwords with `update-database-password-tool` after staff changes.
- Keep backups off the server (S3 or Spaces) and test restores.

## TLS

- Every public site should have an active certificate; run `ssl-expiration-check-tool` weekly.
"""

SECURITY_HARDENING = """# Server Security Hardening

1. Confirm unattended security upgrades are enabled (Forge enables them at provisioning).
2. Review firewall rules with `list-firewall-rules-tool` and delete stale ones.
3. Audit SSH keys with `list-ssh-keys-tool`; each key should map to one person.
4. Add monitors (`create-monitor-tool`) for disk usage above 80% and CPU load.
5. Ship logs off the server with `install-papertrail-tool`.
6. Stop services you do not use, e.g. `stop-postgres-tool` on MySQL-only servers.
7. Check `list-events-tool` for unexpected provisioning activity.

## Nginx headers

```nginx
add_header X-Frame-Options "SAMEORIGIN" always;
add_header X-Content-Type-Options "nosniff" always;
add_header Referrer-Policy "strict-origin-when-cross-origin" always;
add_header Strict-Transport-Security "max-age=31536000; includeSubDomains" always;
server_tokens off;
```

Apply with `update-nginx-config-tool`, then validate with `test-nginx-tool`
before `reboot-nginx-tool`.
"""

TROUBLESHOOTING = """# Common Forge Issues

## "Unauthenticated." (401)
The token is missing or revoked. Set `FORGE_API_TOKEN` and restart the server.

## Deployment fails at `composer install`
- Memory: add swap or raise the server size.
- Private packages: set credentials with `update-packages-auth-tool`.
- Wrong PHP version for the lock file: `change-php-version-tool`.

## Deployment fails at `migrate`
- Check `DB_*` values via `get-env-file-tool`.
- The database user needs access to the database (`update-database-user-tool`).

## 502 Bad Gateway
PHP-FPM is down or the site uses a PHP version that is not installed.
Check `list-php-versions-tool`, then `reboot-php-tool`.

## Certificate request fails
DNS for every domain must resolve to the server IP before requesting
Let's Encrypt. Port 80 must be open.

## Queue jobs not processed
- `list-workers-tool` shows whether a worker exists for the connection.
- Workers keep old code until restarted: `restart-worker-tool`.
- Inspect output with `get-worker-output-tool`.

## Deployment stuck
Use `reset-deployment-state-tool`, then deploy again.
"""

PHP_UPGRADE = """# PHP Version Upgrade

1. List installed versions: `list-php-versions-tool`.
2. Install the new version next to the old one: `install-php-version-tool` (e.g. `php84`).
3. Check the application supports it: run the test suite on the new version and
   verify `composer.json` constraints.
4. Switch one site at a time: `change-php-version-tool`.
5. Deploy the site so composer runs under the new binary.
6. Restart queue workers so they pick up the new binary.
7. Keep the old version until every site has been switched, then remove it in the Forge UI.

Patch releases of an installed version are applied with `update-php-version-tool`.
OPcache can be toggled with `enable-opcache-tool` and `disable-opcache-tool`;
with OPcache on, the deployment script must reload PHP-FPM.
"""

QUEUE_WORKERS = """# Queue Workers

## Creating workers
`create-worker-tool` takes the queue `connection` (redis, database, sqs), the
`queue` names in priority order (`high,default`), `processes`, `timeout`,
`sleep` and `tries`.

- `timeout` must be shorter than the connection's `retry_after`.
- Run one worker per queue priority group instead of many identical workers.

## Horizon
When Horizon manages queues, do not create plain workers. Enable it with
`enable-horizon-tool` and terminate it in the deployment script with
`php artisan horizon:terminate`.

## After deployments
Workers are long-lived processes holding old code in memory. Restart them
after each deployment (`php artisan queue:restart` or `restart-worker-tool`).

## Debugging
- `get-worker-output-tool` shows recent output.
- Failed jobs are listed by `php artisan queue:failed`; run it with
  `execute-site-command-tool`.
"""

NGINX_OPTIMIZATION = """# Nginx Optimization

Read the current config with `get-nginx-config-tool`, edit it, write it back
with `update-nginx-config-tool` and validate it with `test-nginx-tool`.

## Compression

```nginx
gzip on;
gzip_comp_level 5;
gzip_min_length 256;
gzip_types text/css application/javascript application/json image/svg+xml;
```

## Static asset caching

```nginx
location ~* \\.(css|js|jpg|jpeg|png|gif|svg|woff2)$ {
    expires 30d;
    access_log off;
    add_header Cache-Control "public, immutable";
}
```

## FastCGI buffers

```nginx
fastcgi_buffers 16 16k;
fastcgi_buffer_size 32k;
```

## Upload size
`client_max_body_size` must match PHP's `upload_max_filesize`.

Reusable configurations belong in nginx templates (`create-nginx-template-tool`).
"""

DOCUMENTS = (
    Document("forge://docs/api", "forge-api-docs",
             "Laravel Forge API reference: authentication, resource paths and status codes.", API_DOCS),
    Document("forge://docs/deployment", "deployment-guidelines",
             "How to deploy a site with the deployment tools.", DEPLOYMENT_GUIDELINES),
    Document("forge://best-practices/deployment", "Laravel Deployment Best Practices",
             "Safe deployment habits for Laravel applications on Forge.", DEPLOYMENT_BEST_PRACTICES),
    Document("forge://best-practices/security", "Laravel Forge Security Best Practices",
             "Token, access, application and database security.", SECURITY_BEST_PRACTICES),
    Document("forge://guides/security-hardening", "Server Security Hardening Guide",
             "Hardening checklist for Forge managed servers.", SECURITY_HARDENING),
    Document("forge://troubleshooting/common-errors", "Common Forge Issues & Solutions",
             "Frequent failures and which tools help diagnose them.", TROUBLESHOOTING),
    Document("forge://guides/php-upgrade", "PHP Version Upgrade Guide",
             "Upgrading PHP versions site by site.", PHP_UPGRADE),
    Document("forge://guides/queue-workers", "Queue Worker Management Guide",
             "Configuring and operating queue workers and Horizon.", QUEUE_WORKERS),
    Document("forge://guides/nginx-optimization", "Nginx Optimization Guide",
             "Nginx performance settings for Laravel sites.", NGINX_OPTIMIZATION),
)

_BY_URI: Dict[str, Document] = {document.uri: document for document in DOCUMENTS}


def list_documents() -> List[Document]:
    return list(DOCUMENTS)


def get_document(uri: str) -> Document:
    try:
        return _BY_URI[str(uri)]
    except KeyError:
        raise UnknownResourceError(f"Unknown resource: {uri}") from None
