"""
MCP tool definitions for Clockify clients.
"""

from typing import Any, Dict

from mcp.server.fastmcp import FastMCP

from clockify_mcp_server.api.service import ClockifyService
from clockify_mcp_server.helpers.defaults import resolve_workspace_id
from clockify_mcp_server.tools.registry import ToolParam, ToolSpec, register_tools
from clockify_mcp_server.utils.formatters import CLIENT_FIELDS


async def get_clients_on_workspace(service: ClockifyService, args: Dict[str, Any]):
    workspace_id = await resolve_workspace_id(service, args.get("workspaceId"))
    return await service.get_workspace_clients(workspace_id)


CLIENT_TOOLS = [
    ToolSpec(
        name="get_clients_on_workspace",
        title="Get Clients on Workspace",
        description="Get all clients on a workspace (defaults to active workspace if not specified)",
        action="fetch clients on workspace",
        call=get_clients_on_workspace,
        fields=CLIENT_FIELDS,
        params=(
            ToolParam(
                "workspaceId",
                "The ID of the workspace to get clients from (optional, defaults to active workspace)",
            ),
        ),
    ),
]


def register_client_tools(mcp: FastMCP, service: ClockifyService):
    """Register all client-related MCP tools."""
    register_tools(mcp, service, CLIENT_TOOLS)
