"""
Helpers that fill in the workspace and user a tool call omitted.

An omitted (None) workspace defaults to the current user's active workspace
and an omitted user defaults to the current user. An empty string is passed
through as given. Each lookup completes before the caller issues the request
that depends on it.
"""

from typing import Optional

from clockify_mcp_server.api.service import ClockifyService


async def resolve_workspace_id(service: ClockifyService, workspace_id: Optional[str] = None) -> str:
    """
    Return workspace_id, or the active workspace ID of the current user if it was omitted.

    Args:
        service: The Clockify service
        workspace_id: Workspace ID supplied by the caller, if any

    Returns:
        str: The workspace ID to use
    """
    if workspace_id is not None:
        return workspace_id
    return await service.get_active_workspace_id()


async def resolve_user_id(service: ClockifyService, user_id: Optional[str] = None) -> str:
    """Return user_id, or the current user's ID if it was omitted."""
    if user_id is not None:
        return user_id
    current_user = await service.get_current_user()
    if not current_user or not current_user.get("id"):
        raise ValueError("Clockify did not return an ID for the current user")
    return current_user["id"]
