import inspect
from typing import List, Optional

from mcp.types import CallToolResult

from clockify_mcp_server.errors import ClockifyApiError
from clockify_mcp_server.tools.registry import ToolParam, ToolSpec, build_signature, make_tool_function, run_tool
from clockify_mcp_server.utils.formatters import WORKSPACE_FIELDS


def make_spec(call, params=()):
    return ToolSpec(
        name="get_things",
        title="Get Things",
        description="Get things",
        action="fetch things",
        call=call,
        fields=WORKSPACE_FIELDS,
        params=params,
    )


async def test_run_tool_shapes_success(service):
    async def call(service, args):
        return [{"id": "w1", "name": "Main", "featureSubscriptionType": "PRO"}]

    result = await run_tool(make_spec(call), service, {})

    assert not result.isError
    assert result.content[0].text == '[\n  {\n    "id": "w1",\n    "name": "Main"\n  }\n]'


async def test_run_tool_converts_upstream_errors(service):
    async def call(service, args):
        raise ClockifyApiError(404, "Not Found", "Workspace not found")

    result = await run_tool(make_spec(call), service, {})

    assert result.isError is True
    assert result.content[0].text == "Failed to fetch things: Clockify API error: 404 Not Found - Workspace not found"


async def test_run_tool_reports_unknown_error_for_empty_messages(service):
    async def call(service, args):
        raise KeyError

    result = await run_tool(make_spec(call), service, {})

    assert result.isError is True
    assert result.content[0].text == "Failed to fetch things: Unknown error"


async def test_run_tool_contains_shaping_failures(service):
    async def call(service, args):
        return [1, 2]

    result = await run_tool(make_spec(call), service, {})

    assert result.isError is True
    assert result.content[0].text.startswith("Failed to fetch things: ")


async def test_run_tool_passes_arguments_to_call(service):
    seen = {}

    async def call(service, args):
        seen.update(args)
        return {"id": args["workspaceId"]}

    result = await run_tool(make_spec(call), service, {"workspaceId": "w9"})

    assert seen == {"workspaceId": "w9"}
    assert result.content[0].text == '{\n  "id": "w9"\n}'


def test_build_signature_marks_required_and_optional_parameters():
    signature = build_signature(
        (
            ToolParam("workspaceId", "The workspace"),
            ToolParam("projectId", "The project", required=True),
            ToolParam("tagIds", "Tags", type=List[str]),
        )
    )

    workspace = signature.parameters["workspaceId"]
    project = signature.parameters["projectId"]
    tags = signature.parameters["tagIds"]

    assert workspace.default is None
    assert workspace.annotation.__origin__ == Optional[str]
    assert project.default is inspect.Parameter.empty
    assert project.annotation.__origin__ is str
    assert tags.annotation.__origin__ == Optional[List[str]]
    assert all(p.kind is inspect.Parameter.KEYWORD_ONLY for p in signature.parameters.values())
    assert signature.return_annotation is CallToolResult


async def test_make_tool_function_wraps_run_tool(service):
    async def call(service, args):
        return {"id": "w1", "name": "Main", "imageUrl": "", "hourlyRate": {}}

    tool = make_tool_function(make_spec(call, (ToolParam("workspaceId", "The workspace"),)), service)

    assert tool.__name__ == "get_things"
    assert list(inspect.signature(tool).parameters) == ["workspaceId"]
    result = await tool(workspaceId=None)
    assert result.content[0].text == '{\n  "id": "w1",\n  "name": "Main",\n  "imageUrl": ""\n}'
