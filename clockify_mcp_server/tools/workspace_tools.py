"""
MCP tool definitions for Clockify workspaces.

The workspace tools fall back to the current user's active workspace when
no workspace ID is given.
"""

from typing import Any, Dict

from mcp.server.fastmcp import FastMCP

from clockify_mcp_server.api.service import ClockifyService
from clockify_mcp_server.helpers.defaults import resolve_workspace_id
from clockify_mcp_server.tools.registry import ToolParam, ToolSpec, register_tools
from clockify_mcp_server.utils.formatters import WORKSPACE_FIELDS, WORKSPACE_USER_FIELDS


async def get_workspace(service: ClockifyService, args: Dict[str, Any]):
    workspace_id = args.get("workspaceId")
    if workspace_id is not None:
        return await service.get_workspace(workspace_id)
    return await service.get_active_workspace()


async def get_workspaces(service: ClockifyService, args: Dict[str, Any]):
    return await service.get_workspaces()


async def get_workspace_users(service: ClockifyService, args: Dict[str, Any]):
    workspace_id = await resolve_workspace_id(service, args.get("workspaceId"))
    return await service.get_workspace_users(workspace_id)


WORKSPACE_TOOLS = [
    ToolSpec(
        name="get_workspace",
        title="Get Workspace",
        description="Get Workspace by Id",
        action="fetch workspace",
        call=get_workspace,
        fields=WORKSPACE_FIELDS,
        params=(
            ToolParam(
                "workspaceId",
                "The ID of the workspace to get (optional, defaults to active workspace)",
            ),
        ),
    ),
    ToolSpec(
        name="get_workspaces",
        title="Get Workspaces",
        description="Get all available workspaces for the authenticated user",
        action="fetch workspaces",
        call=get_workspaces,
        fields=WORKSPACE_FIELDS,
    ),
    ToolSpec(
        name="get_workspace_users",
        title="Get Workspace Users",
        description="Get all users in a workspace (defaults to active workspace if not specified)",
        action="fetch workspace users",
        call=get_workspace_users,
        fields=WORKSPACE_USER_FIELDS,
        params=(
            ToolParam(
                "workspaceId",
                "The ID of the workspace to get users from (optional, defaults to active workspace)",
            ),
        ),
    ),
]


def register_workspace_tools(mcp: FastMCP, service: ClockifyService):
    """
    Register all workspace-related MCP tools.

    Args:
        mcp: The FastMCP instance
        service: The Clockify service instance
    """
    register_tools(mcp, service, WORKSPACE_TOOLS)
