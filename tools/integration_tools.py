#!/usr/bin/env python3
"""Laravel integration tools.

Each integration gets a get, enable and disable tool. Octane and maintenance
mode take extra options and have their own enable tools.
"""

from api.integrations_api import INTEGRATIONS
from tools.operation_tool import Param, read, string, write, destroy

SITE = ("server_id", "site_id")
CUSTOM_ENABLE = ("octane", "laravel-maintenance")


def _label(integration: str) -> str:
    return integration.replace("laravel-", "").replace("-", " ")


def _integration_operations(integration: str):
    label = _label(integration)
    slug = label.replace(" ", "-")
    fixed = {"integration": integration}
    operations = [
        read(f"get-{slug}-integration-tool", "integrations.get",
             f"Get the {label} integration status of a site.", ids=SITE, fixed=fixed, key=integration),
        destroy(f"disable-{slug}-tool", "integrations.disable",
                f"Disable the {label} integration of a site.", ids=SITE, fixed=fixed,
                message=f"{label.capitalize()} disabled for site {{site_id}}."),
    ]
    if integration not in CUSTOM_ENABLE:
        operations.insert(1, write(f"enable-{slug}-tool", "integrations.enable",
                                   f"Enable the {label} integration of a site.", ids=SITE, fixed=fixed,
                                   idempotent=True,
                                   message=f"{label.capitalize()} enabled for site {{site_id}}."))
    return operations


OPERATIONS = [op for integration in INTEGRATIONS for op in _integration_operations(integration)] + [
    write("enable-octane-tool", "integrations.enable_octane",
          "Run the site under Laravel Octane.",
          ids=SITE, args=("server", "workers"), idempotent=True,
          params=(
              string("server", "Octane server", enum=("swoole", "roadrunner", "frankenphp"), default="swoole"),
              Param("workers", ["integer", "string"], "Worker count or 'auto'", default="auto"),
          ),
          message="Octane enabled for site {site_id}."),
    write("enable-maintenance-tool", "integrations.enable_maintenance",
          "Put the site into maintenance mode (php artisan down).",
          ids=SITE, args=("secret", "refresh"), idempotent=True,
          params=(
              string("secret", "Bypass secret appended to the URL"),
              string("refresh", "Seconds after which browsers refresh"),
          ),
          message="Maintenance mode enabled for site {site_id}."),
]
