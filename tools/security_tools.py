#!/usr/bin/env python3
"""Firewall rule, monitor and SSH key tools."""

from models.security import CreateFirewallRule, CreateMonitor, CreateSSHKey
from tools.operation_tool import Param, destroy, integer, read, string, write

MONITOR_TYPES = ("disk", "used_memory", "cpu_load", "free_memory")

OPERATIONS = [
    read("list-firewall-rules-tool", "firewall.list", "List firewall rules of a server.",
         ids=("server_id",)),
    read("get-firewall-rule-tool", "firewall.get", "Get one firewall rule.", ids=("server_id", "rule_id")),
    write("create-firewall-rule-tool", "firewall.create",
          "Open a port (or port range such as 8000:8100) in the server firewall, optionally for one IP only.",
          ids=("server_id",), payload=CreateFirewallRule,
          params=(
              string("name", "Rule name", required=True, min_length=1, max_length=255),
              Param("port", ["integer", "string"], "Port number or range", required=True),
              string("ip_address", "Restrict to this source IP address"),
              string("type", "Rule type", enum=("allow", "deny")),
          )),
    destroy("delete-firewall-rule-tool", "firewall.delete", "Delete a firewall rule.",
            ids=("server_id", "rule_id"), message="Firewall rule {rule_id} deleted."),
    read("list-monitors-tool", "monitors.list", "List resource monitors of a server.", ids=("server_id",)),
    read("get-monitor-tool", "monitors.get", "Get one monitor.", ids=("server_id", "monitor_id")),
    write("create-monitor-tool", "monitors.create",
          "Alert when disk, memory or CPU usage crosses a threshold.",
          ids=("server_id",), payload=CreateMonitor,
          params=(
              string("type", "Metric to watch", required=True, enum=MONITOR_TYPES),
              string("operator", "Comparison", enum=("gte", "lte")),
              integer("threshold", "Threshold in percent", minimum=0, maximum=100),
              integer("minutes", "Minutes the condition must hold", minimum=0),
          )),
    destroy("delete-monitor-tool", "monitors.delete", "Delete a monitor.",
            ids=("server_id", "monitor_id"), message="Monitor {monitor_id} deleted."),
    read("list-ssh-keys-tool", "ssh_keys.list", "List SSH keys installed on a server.", ids=("server_id",)),
    read("get-ssh-key-tool", "ssh_keys.get", "Get one SSH key.", ids=("server_id", "key_id")),
    write("create-ssh-key-tool", "ssh_keys.create",
          "Install a public SSH key on a server.",
          ids=("server_id",), payload=CreateSSHKey,
          params=(
              string("name", "Key name", required=True, min_length=1, max_length=255),
              string("key", "Public key", required=True, min_length=1),
              string("username", "System user the key is installed for", default="forge"),
          )),
    destroy("delete-ssh-key-tool", "ssh_keys.delete", "Remove an SSH key from a server.",
            ids=("server_id", "key_id"), message="SSH key {key_id} deleted."),
]
