"""
MCP tool definitions for Clockify time entries.

This module provides MCP tools for listing, adding and duplicating time
entries. Timestamps are passed to Clockify as given; Clockify validates them.
"""

from typing import Any, Dict, List

from mcp.server.fastmcp import FastMCP

from clockify_mcp_server.api.service import ClockifyService, build_query_string
from clockify_mcp_server.helpers.defaults import resolve_user_id, resolve_workspace_id
from clockify_mcp_server.tools.registry import ToolParam, ToolSpec, register_tools
from clockify_mcp_server.utils.formatters import TIME_ENTRY_FIELDS, TIME_ENTRY_LIST_FIELDS

WORKSPACE_PARAM = ToolParam("workspaceId", "The ID of the workspace (optional, defaults to active workspace)")


async def get_time_entries(service: ClockifyService, args: Dict[str, Any]):
    workspace_id = await resolve_workspace_id(service, args.get("workspaceId"))
    user_id = await resolve_user_id(service, args.get("userId"))

    query_string = build_query_string({"start": args.get("start"), "end": args.get("end")})
    return await service.get_user_time_entries(workspace_id, user_id, query_string)


async def add_time_entry(service: ClockifyService, args: Dict[str, Any]):
    workspace_id = await resolve_workspace_id(service, args.get("workspaceId"))
    return await service.add_time_entry(
        workspace_id,
        description=args["description"],
        start=args["start"],
        end=args["end"],
        project_id=args["projectId"],
        task_id=args.get("taskId"),
        tag_ids=args.get("tagIds"),
    )


async def duplicate_time_entry(service: ClockifyService, args: Dict[str, Any]):
    workspace_id = await resolve_workspace_id(service, args.get("workspaceId"))
    user_id = await resolve_user_id(service, args.get("userId"))
    return await service.duplicate_time_entry(workspace_id, user_id, args["timeEntryId"])


TIME_ENTRY_TOOLS = [
    ToolSpec(
        name="get_time_entries",
        title="Get Time Entries",
        description="Get time entries for a user within a date range",
        action="fetch time entries",
        call=get_time_entries,
        fields=TIME_ENTRY_LIST_FIELDS,
        params=(
            WORKSPACE_PARAM,
            ToolParam("userId", "The ID of the user to get time entries for (optional, defaults to self)"),
            ToolParam("start", "Start date (ISO 8601 format)"),
            ToolParam("end", "End date (ISO 8601 format)"),
        ),
    ),
    ToolSpec(
        name="add_time_entry",
        title="Add Time Entry",
        description="Add time entry for authenticated user",
        action="add time entry",
        call=add_time_entry,
        fields=TIME_ENTRY_FIELDS,
        params=(
            WORKSPACE_PARAM,
            ToolParam("projectId", "The ID of the project", required=True),
            ToolParam("description", "Description of the time entry", required=True),
            ToolParam("start", "Start date (ISO 8601 format)", required=True),
            ToolParam("end", "End date (ISO 8601 format)", required=True),
            ToolParam("taskId", "The ID of the task (optional)"),
            ToolParam("tagIds", "Array of tag IDs (optional)", type=List[str]),
        ),
    ),
    ToolSpec(
        name="duplicate_time_entry",
        title="Duplicate Time Entry",
        description="Duplicate an existing time entry of a user",
        action="duplicate time entry",
        call=duplicate_time_entry,
        fields=TIME_ENTRY_FIELDS,
        params=(
            WORKSPACE_PARAM,
            ToolParam("userId", "The ID of the user owning the time entry (optional, defaults to self)"),
            ToolParam("timeEntryId", "The ID of the time entry to duplicate", required=True),
        ),
    ),
]


def register_time_entry_tools(mcp: FastMCP, service: ClockifyService):
    """
    Register all time entry-related MCP tools.

    Args:
        mcp: The FastMCP instance
        service: The Clockify service instance
    """
    register_tools(mcp, service, TIME_ENTRY_TOOLS)
