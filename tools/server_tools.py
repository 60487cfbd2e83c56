#!/usr/bin/env python3
"""Server management tools."""

from models.server import CreateServer, UpdateServer
from tools.operation_tool import array, boolean, destroy, integer, read, string, write

PROVIDERS = ("ocean2", "linode", "vultr2", "aws", "hetzner", "custom")
SERVER_TYPES = ("app", "web", "loadbalancer", "cache", "database", "worker", "meilisearch")
DATABASE_TYPES = ("mysql8", "mariadb106", "mariadb1011", "mariadb114", "postgres", "postgres13",
                  "postgres14", "postgres15", "postgres16", "postgres17")

OPERATIONS = [
    read("list-servers-tool", "servers.list",
         "List all servers in the Forge account with their provider, region, IP address, PHP version and readiness."),
    read("get-server-tool", "servers.get",
         "Get full details of one server: IP addresses, provider, size, PHP and database versions, status flags.",
         ids=("server_id",)),
    write("create-server-tool", "servers.create",
          "Provision a new server through a connected provider credential. Provisioning continues "
          "asynchronously after the call returns; sudo and database passwords are only shown once.",
          payload=CreateServer,
          params=(
              integer("credential_id", "Provider credential ID (see list-credentials-tool)", required=True, minimum=1),
              string("name", "Server name", required=True, min_length=1, max_length=255),
              string("size", "Provider size slug, e.g. s-1vcpu-1gb", required=True, min_length=1),
              string("region", "Provider region id (see list-regions-tool)", required=True, min_length=1),
              string("provider", "Server provider", enum=PROVIDERS),
              string("type", "Server type", enum=SERVER_TYPES),
              string("ubuntu_version", "Ubuntu release, e.g. 24.04"),
              string("php_version", "PHP version slug, e.g. php83"),
              string("database", "Name of the initial database"),
              string("database_type", "Database engine", enum=DATABASE_TYPES),
              boolean("load_balancer", "Provision as a load balancer"),
              array("network", "IDs of servers this server may connect to", items="integer"),
          )),
    write("update-server-tool", "servers.update",
          "Update server metadata. Omitted fields are left unchanged; null clears a field.",
          ids=("server_id",), payload=UpdateServer,
          params=(
              string("name", "New server name", nullable=True, max_length=255),
              string("size", "New size label", nullable=True),
              string("ip_address", "Public IP address", nullable=True),
              string("private_ip_address", "Private IP address", nullable=True),
              integer("max_upload_size", "Maximum upload size in MB", minimum=1, nullable=True),
              array("network", "IDs of servers this server may connect to", items="integer", nullable=True),
              array("tags", "Tags to set on the server", nullable=True),
          ),
          idempotent=True),
    destroy("delete-server-tool", "servers.delete",
            "Delete a server from Forge and, for provider-managed servers, destroy the machine. Irreversible.",
            ids=("server_id",), message="Server {server_id} deleted."),
    destroy("reboot-server-tool", "servers.reboot",
            "Reboot a server. Sites on it are unavailable until the reboot completes.",
            ids=("server_id",), message="Server {server_id} is rebooting.", idempotent=False),
    write("update-database-password-tool", "servers.update_database_password",
          "Sync the root database password stored in Forge with the server.",
          ids=("server_id",), message="Database password for server {server_id} updated."),
    destroy("revoke-server-access-tool", "servers.revoke_access",
            "Revoke Forge's SSH access to a server. Forge can no longer manage it until reconnected.",
            ids=("server_id",), message="Forge access to server {server_id} revoked."),
    write("reconnect-server-tool", "servers.reconnect",
          "Generate a new Forge public key for a revoked server. Add the returned key to the server's "
          "authorized_keys, then call reactivate-server-tool.",
          ids=("server_id",), key="public_key"),
    write("reactivate-server-tool", "servers.reactivate",
          "Reactivate a server after its Forge public key has been reinstalled.",
          ids=("server_id",), message="Server {server_id} reactivated."),
    read("get-server-log-tool", "servers.get_log",
         "Read a server log file.",
         ids=("server_id",), args=("file",), key="content",
         params=(string("file", "Log to read, e.g. auth, nginx_access, nginx_error, database", default="auth"),)),
    read("list-events-tool", "servers.list_events",
         "List recent provisioning and management events on a server.",
         ids=("server_id",)),
    read("get-event-output-tool", "servers.get_event_output",
         "Get the script output of one server event.",
         ids=("server_id", "event_id"), key="output"),
]
