"""Tests for the MCP server wiring: credential gating and request handlers."""

import asyncio

import pytest
from mcp import types

from api.forge_client import ForgeClient
from config.settings import ConfigManager
from content.resources import UnknownResourceError
from models.server import Server
from server.mcp_server import MCPServer


def handle(mcp_server, request):
    handler = mcp_server.get_server().request_handlers[type(request)]
    return asyncio.run(handler(request)).root


def test_no_token_means_no_tools():
    mcp_server = MCPServer(settings=ConfigManager())
    assert mcp_server.client is None
    assert mcp_server.get_tool_info()["tool_count"] == 0
    assert handle(mcp_server, types.ListToolsRequest(method="tools/list")).tools == []


def test_token_builds_client_and_registers_tools(monkeypatch):
    monkeypatch.setenv("FORGE_API_TOKEN", "secret-token")
    mcp_server = MCPServer(settings=ConfigManager())

    assert isinstance(mcp_server.client, ForgeClient)
    info = mcp_server.get_tool_info()
    assert info["server_name"] == "forge-mcp-server"
    assert "list-servers-tool" in info["tool_names"]
    assert "bulk-deploy-tool" in info["tool_names"]
    assert info["tool_count"] == info["statistics"]["total_tools"]


def test_list_tools_carries_annotations(fake_client):
    mcp_server = MCPServer(settings=ConfigManager(), client=fake_client)
    tools = {tool.name: tool for tool in handle(mcp_server, types.ListToolsRequest(method="tools/list")).tools}

    assert tools["delete-site-tool"].annotations.destructiveHint is True
    assert tools["get-site-tool"].annotations.readOnlyHint is True
    assert tools["get-site-tool"].inputSchema["required"] == ["server_id", "site_id"]


def test_call_tool(fake_client):
    fake_client.servers.get.return_value = Server(id=1, name="test-server")
    mcp_server = MCPServer(settings=ConfigManager(), client=fake_client)

    result = handle(mcp_server, types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name="get-server-tool", arguments={"server_id": 1}),
    ))
    assert not result.isError
    assert "test-server" in result.content[0].text


def test_invalid_arguments_are_reported_as_tool_errors(fake_client):
    mcp_server = MCPServer(settings=ConfigManager(), client=fake_client)
    result = handle(mcp_server, types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name="get-server-tool", arguments={}),
    ))
    assert result.isError
    fake_client.servers.get.assert_not_awaited()


def test_resources():
    mcp_server = MCPServer(settings=ConfigManager())
    resources = handle(mcp_server, types.ListResourcesRequest(method="resources/list")).resources
    assert "forge://docs/api" in {str(resource.uri) for resource in resources}

    contents = handle(mcp_server, types.ReadResourceRequest(
        method="resources/read", params=types.ReadResourceRequestParams(uri="forge://guides/queue-workers"),
    )).contents
    assert contents[0].mimeType == "text/markdown"
    assert contents[0].text.startswith("# Queue Workers")


def test_unknown_resource():
    mcp_server = MCPServer(settings=ConfigManager())
    with pytest.raises(UnknownResourceError):
        handle(mcp_server, types.ReadResourceRequest(
            method="resources/read", params=types.ReadResourceRequestParams(uri="forge://docs/missing"),
        ))


def test_prompts():
    mcp_server = MCPServer(settings=ConfigManager())
    prompts = {p.name: p for p in handle(mcp_server, types.ListPromptsRequest(method="prompts/list")).prompts}
    assert "ssl-renewal" in prompts
    assert all(not arg.required for arg in prompts["ssl-renewal"].arguments)

    result = handle(mcp_server, types.GetPromptRequest(
        method="prompts/get",
        params=types.GetPromptRequestParams(name="ssl-renewal", arguments={"certificate_type": "custom"}),
    ))
    assert result.messages[0].role == "assistant"
    assert "get-certificate-signing-request-tool" in result.messages[0].content.text


def test_instructions_are_sent():
    mcp_server = MCPServer(settings=ConfigManager())
    assert "FORGE_API_TOKEN" in mcp_server.get_server().instructions
