"""
Response shaping and MCP payload formatting.

Clockify returns large objects; tools only expose a pinned set of fields per
entity. Each whitelist is a sequence of (output_key, source_key) pairs so the
output order is stable and a field can be renamed at the boundary (time entry
listings return "tags" where create/duplicate return "tagIds").
"""

import json
from typing import Any, Dict, Optional, Sequence, Tuple

from mcp.types import CallToolResult, TextContent

from clockify_mcp_server.config import JSON_INDENT_SPACES

FieldMap = Sequence[Tuple[str, str]]


def _fields(*names: str) -> Tuple[Tuple[str, str], ...]:
    return tuple((name, name) for name in names)


USER_FIELDS = _fields("id", "name", "email", "activeWorkspace", "profilePicture", "memberships")

WORKSPACE_USER_FIELDS = _fields(
    "id", "name", "email", "status", "activeWorkspace", "profilePicture", "memberships"
)

WORKSPACE_FIELDS = _fields("id", "name", "imageUrl")

CLIENT_FIELDS = _fields(
    "id", "name", "address", "email", "note", "archived", "currencyCode", "currencyId"
)

PROJECT_FIELDS = _fields("id", "name", "note", "public", "duration", "color", "memberships")

TASK_FIELDS = _fields(
    "id",
    "name",
    "status",
    "duration",
    "assigneeId",
    "assigneeIds",
    "billable",
    "budgetEstimate",
    "costRate",
    "estimate",
    "hourlyRate",
    "projectId",
    "userGroupIds",
)

TIME_ENTRY_LIST_FIELDS = (
    ("id", "id"),
    ("description", "description"),
    ("projectId", "projectId"),
    ("taskId", "taskId"),
    ("billable", "billable"),
    ("timeInterval", "timeInterval"),
    ("userId", "userId"),
    ("workspaceId", "workspaceId"),
    ("tagIds", "tags"),
    ("costRate", "costRate"),
    ("hourlyRate", "hourlyRate"),
    ("customFieldValues", "customFieldValues"),
    ("isLocked", "isLocked"),
    ("kioskId", "kioskId"),
    ("type", "type"),
)

TIME_ENTRY_FIELDS = _fields(
    "id",
    "description",
    "billable",
    "customFieldValues",
    "isLocked",
    "kioskId",
    "projectId",
    "tagIds",
    "taskId",
    "timeInterval",
    "type",
    "userId",
    "workspaceId",
)


def project_entity(raw: Dict[str, Any], fields: FieldMap) -> Dict[str, Any]:
    """
    Reduce a raw Clockify entity to the whitelisted fields.

    Fields missing from the raw entity are left out rather than defaulted.
    """
    return {out_key: raw[src_key] for out_key, src_key in fields if src_key in raw}


def shape(raw: Any, fields: FieldMap) -> Any:
    """
    Apply a field whitelist to a single entity or element-wise to a list.

    Raises:
        ValueError: If Clockify returned an empty or non-JSON body (None)
    """
    if raw is None:
        raise ValueError("Clockify returned an empty response")
    if isinstance(raw, list):
        return [project_entity(item, fields) for item in raw]
    return project_entity(raw, fields)


def format_json(data: Any) -> str:
    return json.dumps(data, indent=JSON_INDENT_SPACES, ensure_ascii=False)


def format_json_response(data: Any) -> CallToolResult:
    """Wrap data as a successful tool result holding pretty-printed JSON."""
    return CallToolResult(content=[TextContent(type="text", text=format_json(data))])


def format_error_response(action: str, error: Optional[BaseException]) -> CallToolResult:
    """
    Build the error tool result "Failed to <action>: <message>".

    Args:
        action: Tool-specific action phrase, e.g. "fetch current user"
        error: The caught exception; an empty message becomes "Unknown error"
    """
    message = (str(error) if error is not None else "") or "Unknown error"
    return CallToolResult(
        isError=True,
        content=[TextContent(type="text", text=f"Failed to {action}: {message}")],
    )
