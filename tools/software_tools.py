#!/usr/bin/env python3
"""PHP version and system service tools."""

from tools.operation_tool import destroy, read, string, write

PHP_VERSION = string("version", "PHP version slug, e.g. php83", required=True, min_length=1)
SERVICE = string("service", "Service name, e.g. redis or supervisor", required=True, min_length=1)
SERVER = ("server_id",)


def _service_control(name, call, description, message):
    return write(name, call, description, ids=SERVER, message=message, destructive=True)


OPERATIONS = [
    read("list-php-versions-tool", "php.list", "List PHP versions installed on a server.", ids=SERVER),
    write("install-php-version-tool", "php.install", "Install an additional PHP version.",
          ids=SERVER, params=(PHP_VERSION,), args=("version",),
          message="Installing {version} on server {server_id}."),
    write("update-php-version-tool", "php.update", "Upgrade an installed PHP version to its latest patch release.",
          ids=SERVER, params=(PHP_VERSION,), args=("version",),
          message="Updating {version} on server {server_id}."),
    write("enable-opcache-tool", "php.enable_opcache", "Enable OPcache on a server.",
          ids=SERVER, idempotent=True, message="OPcache enabled on server {server_id}."),
    write("disable-opcache-tool", "php.disable_opcache", "Disable OPcache on a server.",
          ids=SERVER, idempotent=True, message="OPcache disabled on server {server_id}."),

    _service_control("reboot-mysql-tool", "services.reboot_mysql", "Restart MySQL.",
                     "MySQL restarting on server {server_id}."),
    _service_control("stop-mysql-tool", "services.stop_mysql", "Stop MySQL.",
                     "MySQL stopping on server {server_id}."),
    _service_control("reboot-nginx-tool", "services.reboot_nginx", "Restart nginx.",
                     "Nginx restarting on server {server_id}."),
    _service_control("stop-nginx-tool", "services.stop_nginx", "Stop nginx. All sites go offline.",
                     "Nginx stopping on server {server_id}."),
    _service_control("reboot-postgres-tool", "services.reboot_postgres", "Restart PostgreSQL.",
                     "PostgreSQL restarting on server {server_id}."),
    _service_control("stop-postgres-tool", "services.stop_postgres", "Stop PostgreSQL.",
                     "PostgreSQL stopping on server {server_id}."),
    _service_control("reboot-php-tool", "services.reboot_php", "Restart PHP-FPM.",
                     "PHP-FPM restarting on server {server_id}."),
    read("test-nginx-tool", "services.test_nginx",
         "Check the nginx configuration for syntax errors (nginx -t).", ids=SERVER, key="result"),
    write("install-blackfire-tool", "services.install_blackfire", "Install the Blackfire profiler agent.",
          ids=SERVER, args=("blackfire_server_id", "server_token"),
          params=(
              string("blackfire_server_id", "Blackfire server ID", required=True, min_length=1),
              string("server_token", "Blackfire server token", required=True, min_length=1),
          ),
          message="Blackfire installing on server {server_id}."),
    destroy("remove-blackfire-tool", "services.remove_blackfire", "Remove the Blackfire agent.",
            ids=SERVER, message="Blackfire removed from server {server_id}."),
    write("install-papertrail-tool", "services.install_papertrail", "Ship system logs to Papertrail.",
          ids=SERVER, args=("host",),
          params=(string("host", "Papertrail log destination, e.g. logs.papertrailapp.com:12345",
                         required=True, min_length=1),),
          message="Papertrail installing on server {server_id}."),
    destroy("remove-papertrail-tool", "services.remove_papertrail", "Stop shipping logs to Papertrail.",
            ids=SERVER, message="Papertrail removed from server {server_id}."),
    write("start-service-tool", "services.start_service", "Start a system service.",
          ids=SERVER, params=(SERVICE,), args=("service",), idempotent=True,
          message="Service {service} starting on server {server_id}."),
    write("stop-service-tool", "services.stop_service", "Stop a system service.",
          ids=SERVER, params=(SERVICE,), args=("service",), destructive=True,
          message="Service {service} stopping on server {server_id}."),
    write("restart-service-tool", "services.restart_service", "Restart a system service.",
          ids=SERVER, params=(SERVICE,), args=("service",), destructive=True,
          message="Service {service} restarting on server {server_id}."),
]
