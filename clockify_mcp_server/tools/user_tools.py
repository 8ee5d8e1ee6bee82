"""
MCP tool definitions for Clockify users.
"""

from typing import Any, Dict

from mcp.server.fastmcp import FastMCP

from clockify_mcp_server.api.service import ClockifyService
from clockify_mcp_server.helpers.defaults import resolve_user_id, resolve_workspace_id
from clockify_mcp_server.tools.registry import ToolParam, ToolSpec, register_tools
from clockify_mcp_server.utils.formatters import USER_FIELDS


async def get_current_user(service: ClockifyService, args: Dict[str, Any]):
    return await service.get_current_user()


async def get_user_profile(service: ClockifyService, args: Dict[str, Any]):
    workspace_id = await resolve_workspace_id(service, args.get("workspaceId"))
    user_id = await resolve_user_id(service, args.get("userId"))
    return await service.get_user_profile(workspace_id, user_id)


USER_TOOLS = [
    ToolSpec(
        name="get_current_user",
        title="Get Current User",
        description="Get information about the currently authenticated Clockify user",
        action="fetch current user",
        call=get_current_user,
        fields=USER_FIELDS,
    ),
    ToolSpec(
        name="get_user_profile",
        title="Get User Profile",
        description="Get the member profile of a user in a workspace (defaults to yourself in the active workspace)",
        action="fetch user profile",
        call=get_user_profile,
        fields=USER_FIELDS,
        params=(
            ToolParam("workspaceId", "The ID of the workspace (optional, defaults to active workspace)"),
            ToolParam("userId", "The ID of the user (optional, defaults to self)"),
        ),
    ),
]


def register_user_tools(mcp: FastMCP, service: ClockifyService):
    """
    Register all user-related MCP tools.

    Args:
        mcp: The FastMCP instance
        service: The Clockify service instance
    """
    register_tools(mcp, service, USER_TOOLS)
