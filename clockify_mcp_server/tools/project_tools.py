"""
MCP tool definitions for Clockify projects and their tasks.
"""

from typing import Any, Dict

from mcp.server.fastmcp import FastMCP

from clockify_mcp_server.api.service import ClockifyService
from clockify_mcp_server.helpers.defaults import resolve_workspace_id
from clockify_mcp_server.tools.registry import ToolParam, ToolSpec, register_tools
from clockify_mcp_server.utils.formatters import PROJECT_FIELDS, TASK_FIELDS


async def get_projects_on_workspace(service: ClockifyService, args: Dict[str, Any]):
    workspace_id = await resolve_workspace_id(service, args.get("workspaceId"))
    return await service.get_workspace_projects(workspace_id)


async def get_tasks_on_project(service: ClockifyService, args: Dict[str, Any]):
    workspace_id = await resolve_workspace_id(service, args.get("workspaceId"))
    return await service.get_project_tasks(workspace_id, args["projectId"])


PROJECT_TOOLS = [
    ToolSpec(
        name="get_projects_on_workspace",
        title="Get Projects on Workspace",
        description="Get all projects on a workspace (defaults to active workspace if not specified)",
        action="fetch projects on workspace",
        call=get_projects_on_workspace,
        fields=PROJECT_FIELDS,
        params=(
            ToolParam(
                "workspaceId",
                "The ID of the workspace to get projects from (optional, defaults to active workspace)",
            ),
        ),
    ),
    ToolSpec(
        name="get_tasks_on_project",
        title="Get Tasks on Project",
        description="Get all tasks on a project",
        action="fetch tasks on project",
        call=get_tasks_on_project,
        fields=TASK_FIELDS,
        params=(
            ToolParam("workspaceId", "The ID of the workspace (optional, defaults to active workspace)"),
            ToolParam("projectId", "The ID of the project to get tasks from", required=True),
        ),
    ),
]


def register_project_tools(mcp: FastMCP, service: ClockifyService):
    """
    Register all project-related MCP tools.

    Args:
        mcp: The FastMCP instance
        service: The Clockify service instance
    """
    register_tools(mcp, service, PROJECT_TOOLS)
