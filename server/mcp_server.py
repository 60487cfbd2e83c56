#!/usr/bin/env python3
"""MCP Server wiring Forge tools, reference documents and workflow prompts."""

from typing import Any, Dict, List, Optional
from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.types import (
    GetPromptResult, Prompt, PromptArgument, PromptMessage, Resource, TextContent, Tool,
)
from api.forge_client import ForgeClient
from config.logging_setup import get_logger
from config.settings import ConfigManager, config
from content.prompts import get_prompt_template, list_prompts
from content.resources import get_document, list_documents
from tools.registry import ToolRegistry

logger = get_logger(__name__)


class MCPServer:
    """Main MCP Server class.

    The tool set is computed once here. Without a Forge API token no tools
    are registered; resources and prompts are always available.
    """

    def __init__(self, name: str = "forge-mcp-server", settings: ConfigManager = config,
                 client: Optional[Any] = None):
        self.settings = settings
        self.server = Server(name, instructions=settings.server_instructions.render())
        self.tool_registry = ToolRegistry()
        self.client = client
        self._setup_tools()
        self._register_handlers()
        self._log_tool_summary()

    def _setup_tools(self):
        if self.client is None:
            if not self.settings.has_credentials:
                logger.warning("FORGE_API_TOKEN is not set; no Forge tools will be registered")
                return
            self.client = ForgeClient(self.settings.api_config)
        self.tool_registry.register_all(self.client)

    def _register_handlers(self):
        """Register MCP server handlers."""

        @self.server.list_tools()
        async def list_tools() -> List[Tool]:
            return self.tool_registry.get_tool_list()

        @self.server.call_tool()
        async def call_tool(name: str, arguments: Dict[str, Any]) -> List[TextContent]:
            logger.debug("Calling tool %s", name)
            return await self.tool_registry.execute_tool(name, arguments)

        @self.server.list_resources()
        async def list_resources() -> List[Resource]:
            return [
                Resource(uri=doc.uri, name=doc.name, description=doc.description, mimeType=doc.mime_type)
                for doc in list_documents()
            ]

        @self.server.read_resource()
        async def read_resource(uri) -> List[ReadResourceContents]:
            document = get_document(str(uri))
            return [ReadResourceContents(content=document.text, mime_type=document.mime_type)]

        @self.server.list_prompts()
        async def list_prompts_handler() -> List[Prompt]:
            return [
                Prompt(
                    name=template.name,
                    description=template.description,
                    arguments=[PromptArgument(name=arg.name, description=arg.description, required=False)
                               for arg in template.arguments],
                )
                for template in list_prompts()
            ]

        @self.server.get_prompt()
        async def get_prompt(name: str, arguments: Optional[Dict[str, str]]) -> GetPromptResult:
            template = get_prompt_template(name)
            text = template.render(template.resolve(arguments))
            return GetPromptResult(
                description=template.description,
                messages=[PromptMessage(role="assistant", content=TextContent(type="text", text=text))],
            )

    def _log_tool_summary(self):
        stats = self.tool_registry.get_tool_stats()
        logger.info("Tools registered: %d", stats['total_tools'])
        for category, info in stats['categories'].items():
            logger.debug("  %s: %d tools", category, info['count'])

    def get_server(self) -> Server:
        """Get the underlying MCP server."""
        return self.server

    def get_tool_info(self) -> Dict[str, Any]:
        """Get detailed information about registered tools."""
        return {
            'server_name': self.server.name,
            'tool_count': len(self.tool_registry.tools),
            'tool_names': self.tool_registry.get_tool_names(),
            'statistics': self.tool_registry.get_tool_stats()
        }
