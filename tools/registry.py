#!/usr/bin/env python3
"""Tool registry for managing MCP tools."""

from typing import Any, Dict, Iterable, List
from mcp.types import Tool, TextContent
from config.logging_setup import get_logger
from tools import (
    account_tools, backup_tools, certificate_tools, database_tools, deployment_tools,
    integration_tools, process_tools, recipe_tools, security_tools, server_tools,
    site_rule_tools, site_tools, software_tools,
)
from tools.base_tool import BaseTool
from tools.composite_tools import COMPOSITE_TOOLS
from tools.operation_tool import Operation, OperationTool
from utils.formatting import error_envelope, to_json

logger = get_logger(__name__)

OPERATION_TABLES = (
    ("servers", server_tools),
    ("sites", site_tools),
    ("deployments", deployment_tools),
    ("certificates", certificate_tools),
    ("databases", database_tools),
    ("processes", process_tools),
    ("security", security_tools),
    ("backups", backup_tools),
    ("site_rules", site_rule_tools),
    ("recipes", recipe_tools),
    ("software", software_tools),
    ("integrations", integration_tools),
    ("account", account_tools),
)


class ToolRegistry:
    """Registry for managing MCP tools."""

    def __init__(self):
        self.tools: Dict[str, BaseTool] = {}

    def register_tool(self, tool: BaseTool):
        """Register a tool."""
        if tool.name in self.tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")
        self.tools[tool.name] = tool
        logger.debug("Registered tool: %s", tool.name)

    def register_operations(self, api_client: Any, operations: Iterable[Operation], category: str):
        for operation in operations:
            self.register_tool(OperationTool(operation, api_client, category))

    def register_forge_tools(self, api_client: Any):
        """Register one tool per Forge API operation."""
        for category, module in OPERATION_TABLES:
            self.register_operations(api_client, module.OPERATIONS, category)
            logger.debug("Registered %d %s tools", len(module.OPERATIONS), category)

    def register_composite_tools(self, api_client: Any):
        """Register the multi-call tools (health check, dashboard, bulk deploy, SSL sweep, clone)."""
        for tool_cls in COMPOSITE_TOOLS:
            self.register_tool(tool_cls(api_client))

    def register_all(self, api_client: Any):
        self.register_forge_tools(api_client)
        self.register_composite_tools(api_client)
        logger.info("Registered %d tools", len(self.tools))

    def get_tool_list(self) -> List[Tool]:
        """Get list of all registered tools for MCP."""
        return [tool.to_mcp_tool() for tool in self.tools.values()]

    def get_tool_names(self) -> List[str]:
        """Get list of all registered tool names."""
        return list(self.tools.keys())

    async def execute_tool(self, name: str, arguments: Dict[str, Any]) -> List[TextContent]:
        """Execute a tool by name.

        Argument validation errors propagate to the caller; upstream failures
        come back as failure envelopes from the tool itself.
        """
        tool = self.tools.get(name)
        if tool is None:
            logger.warning("Unknown tool requested: %s", name)
            return [TextContent(type="text", text=to_json(error_envelope(f"Unknown tool: {name}")))]
        return await tool.run(arguments)

    def get_tool_stats(self) -> Dict[str, Any]:
        """Get statistics about registered tools."""
        categories: Dict[str, List[str]] = {}
        for name, tool in self.tools.items():
            categories.setdefault(tool.category, []).append(name)

        return {
            'total_tools': len(self.tools),
            'read_only': sum(1 for tool in self.tools.values() if tool.read_only),
            'destructive': sum(1 for tool in self.tools.values() if tool.destructive),
            'categories': {
                category: {
                    'count': len(names),
                    'tools': names
                }
                for category, names in categories.items()
            }
        }
