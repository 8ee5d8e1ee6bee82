"""
Clockify service layer.

One method per Clockify resource action. Each method is a thin wrapper over
ClockifyApiClient.request with a fixed endpoint template; errors from the
client propagate unchanged.
"""

from typing import Any, Dict, List, Optional
from urllib.parse import quote

from clockify_mcp_server.api.client import ClockifyApiClient

# Characters left unescaped by JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"


def build_query_string(params: Dict[str, Optional[str]]) -> str:
    """
    Build a query string from the parameters that were actually supplied.

    Args:
        params: Query parameters; None values are left out entirely

    Returns:
        str: "?key=value&..." or an empty string if nothing was supplied
    """
    pairs = [
        f"{key}={quote(str(value), safe=_URI_COMPONENT_SAFE)}"
        for key, value in params.items()
        if value is not None
    ]
    return f"?{'&'.join(pairs)}" if pairs else ""


class ClockifyService:
    """Typed facade over the Clockify REST API."""

    def __init__(self, client: ClockifyApiClient):
        self.client = client

    # User methods
    async def get_current_user(self) -> Dict[str, Any]:
        return await self.client.request("/user")

    async def get_user_profile(self, workspace_id: str, user_id: str) -> Dict[str, Any]:
        return await self.client.request(f"/workspaces/{workspace_id}/member-profile/{user_id}")

    # Workspace methods
    async def get_workspace(self, workspace_id: str) -> Dict[str, Any]:
        return await self.client.request(f"/workspaces/{workspace_id}")

    async def get_active_workspace(self) -> Dict[str, Any]:
        """Fetch the workspace recorded as active on the current user."""
        workspace_id = await self.get_active_workspace_id()
        return await self.get_workspace(workspace_id)

    async def get_active_workspace_id(self) -> str:
        current_user = await self.get_current_user()
        if not current_user or not current_user.get("activeWorkspace"):
            raise ValueError("Current Clockify user has no active workspace")
        return current_user["activeWorkspace"]

    async def get_workspaces(self) -> List[Dict[str, Any]]:
        return await self.client.request("/workspaces")

    async def get_workspace_users(self, workspace_id: str) -> List[Dict[str, Any]]:
        return await self.client.request(f"/workspaces/{workspace_id}/users")

    # Client methods
    async def get_workspace_clients(self, workspace_id: str) -> List[Dict[str, Any]]:
        return await self.client.request(f"/workspaces/{workspace_id}/clients")

    # Project methods
    async def get_workspace_projects(self, workspace_id: str) -> List[Dict[str, Any]]:
        return await self.client.request(f"/workspaces/{workspace_id}/projects")

    async def get_project_tasks(self, workspace_id: str, project_id: str) -> List[Dict[str, Any]]:
        return await self.client.request(f"/workspaces/{workspace_id}/projects/{project_id}/tasks")

    # Time entry methods
    async def get_user_time_entries(
        self,
        workspace_id: str,
        user_id: str,
        query_string: str = ""
    ) -> List[Dict[str, Any]]:
        """
        Fetch a user's time entries.

        Args:
            workspace_id: The workspace ID
            user_id: The user whose entries are fetched
            query_string: Pre-built query string (see build_query_string), appended verbatim
        """
        endpoint = f"/workspaces/{workspace_id}/user/{user_id}/time-entries{query_string}"
        return await self.client.request(endpoint)

    async def add_time_entry(
        self,
        workspace_id: str,
        description: str,
        start: str,
        end: str,
        project_id: str,
        task_id: Optional[str] = None,
        tag_ids: Optional[List[str]] = None
    ) -> Dict[str, Any]:
        """
        Create a time entry for the authenticated user.

        Optional fields that are not given are left out of the request body.
        """
        entry = {
            "description": description,
            "start": start,
            "end": end,
            "projectId": project_id,
            "taskId": task_id,
            "tagIds": tag_ids,
        }
        payload = {k: v for k, v in entry.items() if v is not None}
        return await self.client.request(f"/workspaces/{workspace_id}/time-entries", "POST", payload)

    async def duplicate_time_entry(self, workspace_id: str, user_id: str, entry_id: str) -> Dict[str, Any]:
        return await self.client.request(
            f"/workspaces/{workspace_id}/user/{user_id}/time-entries/{entry_id}/duplicate",
            "POST"
        )
