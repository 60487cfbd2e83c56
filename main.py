#!/usr/bin/env python3
"""Entry point for the Forge MCP server, with diagnostics."""

import asyncio
import sys
from mcp.server.stdio import stdio_server
from api.exceptions import ForgeError
from server.mcp_server import MCPServer
from config.settings import config
from config.logging_setup import setup_logging, get_logger

logger = get_logger(__name__)


async def main():
    """Main entry point for the MCP server."""
    mcp_server = MCPServer()
    server = mcp_server.get_server()
    logger.info("Server initialized with %d tools", len(mcp_server.tool_registry.get_tool_names()))

    async with stdio_server() as streams:
        logger.info("MCP server connected via stdio")
        await server.run(
            streams[0],
            streams[1],
            server.create_initialization_options()
        )


async def diagnose_system():
    """Print configuration, tool registration and API connectivity."""
    print("SYSTEM DIAGNOSIS", file=sys.stderr)
    print("=" * 50, file=sys.stderr)

    print("Configuration:", file=sys.stderr)
    for key, value in config.get_config_summary().items():
        print(f"   {key}: {value}", file=sys.stderr)

    mcp_server = MCPServer("forge-diagnosis-server")
    stats = mcp_server.tool_registry.get_tool_stats()
    print(f"\nTools: {stats['total_tools']} ({stats['read_only']} read-only, "
          f"{stats['destructive']} destructive)", file=sys.stderr)

    print("\nAPI Connectivity:", file=sys.stderr)
    if mcp_server.client is None:
        print("   skipped: FORGE_API_TOKEN is not set", file=sys.stderr)
    else:
        try:
            user = await mcp_server.client.account.user()
            print(f"   connected as {user.name} <{user.email}>", file=sys.stderr)
        except ForgeError as e:
            print(f"   failed: {e}", file=sys.stderr)

    print("=" * 50, file=sys.stderr)


def list_tools():
    """Print registered tool names grouped by category."""
    mcp_server = MCPServer("forge-list-tools")
    stats = mcp_server.tool_registry.get_tool_stats()
    rules = config.server_instructions
    for category, info in stats['categories'].items():
        print(f"{category} ({info['count']})")
        for name in info['tools']:
            applicable = [rule.rule_id for rule in rules.get_applicable_instructions(name)]
            print(f"  {name}" + (f"  [{', '.join(applicable)}]" if applicable else ""))
    print(f"total: {stats['total_tools']}")


if __name__ == "__main__":
    setup_logging()

    command = sys.argv[1] if len(sys.argv) > 1 else None
    if command is None:
        try:
            asyncio.run(main())
        except KeyboardInterrupt:
            logger.info("Server stopped by user")
    elif command == "diagnose":
        asyncio.run(diagnose_system())
    elif command == "list-tools":
        list_tools()
    else:
        print(f"Unknown command: {command}", file=sys.stderr)
        print("Available commands:", file=sys.stderr)
        print("  diagnose    - Configuration, tools and API connectivity", file=sys.stderr)
        print("  list-tools  - Registered tools by category", file=sys.stderr)
        sys.exit(2)
