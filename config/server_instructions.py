#!/usr/bin/env python3
"""Base instructions and behavioral rules for the MCP server."""

from fnmatch import fnmatch
from typing import List
from dataclasses import dataclass


@dataclass
class ServerInstruction:
    """Represents a server behavioral instruction."""
    rule_id: str
    description: str
    applies_to: List[str]  # Tool name glob patterns
    instruction: str
    priority: int = 1


OVERVIEW = """This server manages Laravel Forge infrastructure: servers, sites, deployments,
databases, SSL certificates, queue workers, scheduled jobs, daemons, firewall rules,
monitors, backups and integrations.

Setup: set FORGE_API_TOKEN (create one at https://forge.laravel.com/user-profile/api).
Without it no tools are offered; documentation resources and prompts remain available.

Tool names are kebab-case and end in "-tool". Every tool answers with a JSON envelope:
{"success": true, ...} on success or {"success": false, "error": "..."} on failure.

Common workflows:
- Deploy: get-site-tool -> deploy-site-tool -> get-deployment-log-tool
- New site: create-site-tool -> install-git-repository-tool -> obtain-lets-encrypt-certificate-tool
- Health: server-health-check-tool, site-status-dashboard-tool, ssl-expiration-check-tool"""


class ServerInstructions:
    """Manages base instructions for MCP server behavior."""

    def __init__(self):
        self.instructions = self._load_default_instructions()

    def _load_default_instructions(self) -> List[ServerInstruction]:
        return [
            ServerInstruction(
                rule_id="confirm_destructive",
                description="Confirm destructive operations before running them",
                applies_to=["delete-*", "destroy-*", "reboot-*", "stop-*", "revoke-*", "uninstall-*", "remove-*"],
                instruction="""Before running a destructive tool:
1. Restate the exact server/site/resource ids that will be affected
2. Ask the user for explicit confirmation
3. Prefer a read tool first to show the current state""",
                priority=3
            ),
            ServerInstruction(
                rule_id="verify_deployments",
                description="Verify the outcome of deployments",
                applies_to=["deploy-*", "bulk-deploy-tool", "reset-deployment-state-tool"],
                instruction="""After triggering a deployment:
1. Check get-deployment-log-tool or list-deployment-history-tool for the result
2. Report failures with the relevant log excerpt
3. Do not redeploy automatically on failure""",
                priority=2
            ),
            ServerInstruction(
                rule_id="protect_secrets",
                description="Never echo secrets back verbatim",
                applies_to=["get-env-file-tool", "update-env-file-tool", "*database-user*", "*packages-auth*"],
                instruction="""These tools handle credentials:
1. Summarise environment files instead of printing secret values
2. Never repeat passwords or tokens in responses""",
                priority=2
            ),
        ]

    def get_applicable_instructions(self, tool_name: str) -> List[ServerInstruction]:
        """Get instructions that apply to a specific tool."""
        applicable = [
            instruction for instruction in self.instructions
            if any(fnmatch(tool_name, pattern) for pattern in instruction.applies_to)
        ]
        return sorted(applicable, key=lambda x: x.priority, reverse=True)

    def render(self) -> str:
        """Render the instructions text sent during MCP initialization."""
        lines = [OVERVIEW, "", "Rules:"]
        for instruction in sorted(self.instructions, key=lambda x: x.priority, reverse=True):
            lines.append(f"- {instruction.description} ({', '.join(instruction.applies_to)})")
        return "\n".join(lines)


# Global instructions instance
server_instructions = ServerInstructions()
