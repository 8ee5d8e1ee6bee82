"""
Data-driven MCP tool registration.

Each tool is described by a ToolSpec: its name, title, description, input
parameters, the service call it makes, the field whitelist applied to the
result and the action phrase used in error messages. register_tools turns
the ToolSpecs into FastMCP tools that share one handler, run_tool.
"""

import inspect
import logging
from dataclasses import dataclass
from typing import Annotated, Any, Awaitable, Callable, Dict, Optional, Sequence

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult
from pydantic import Field

from clockify_mcp_server.api.service import ClockifyService
from clockify_mcp_server.utils.formatters import (
    FieldMap,
    format_error_response,
    format_json_response,
    shape,
)

logger = logging.getLogger(__name__)

ToolCall = Callable[[ClockifyService, Dict[str, Any]], Awaitable[Any]]


@dataclass(frozen=True)
class ToolParam:
    """
    One named tool argument.

    Attributes:
        name: Argument name as seen by the caller (e.g. "workspaceId")
        description: Human-readable purpose of the argument
        type: Python type of the argument (str, List[str], ...)
        required: Whether the caller must supply it
    """

    name: str
    description: str
    type: Any = str
    required: bool = False


@dataclass(frozen=True)
class ToolSpec:
    """
    Declaration of one MCP tool.

    Attributes:
        name: Unique, stable tool name
        title: Human-readable title
        description: Tool description shown to the agent
        action: Phrase completing "Failed to ..." in error results
        call: Coroutine function taking (service, arguments) and returning the raw Clockify result
        fields: Field whitelist applied to the result
        params: Input parameters
    """

    name: str
    title: str
    description: str
    action: str
    call: ToolCall
    fields: FieldMap
    params: Sequence[ToolParam] = ()


async def run_tool(spec: ToolSpec, service: ClockifyService, arguments: Dict[str, Any]) -> CallToolResult:
    """
    Execute a tool and return its MCP result.

    Never raises: any failure while resolving defaults, calling Clockify or
    shaping the response becomes an error result.

    Args:
        spec: The tool being executed
        service: The Clockify service
        arguments: Validated tool arguments; omitted optional ones may be absent or None

    Returns:
        CallToolResult: Pretty-printed JSON on success, "Failed to ..." text with isError on failure
    """
    try:
        result = await spec.call(service, arguments)
        shaped = shape(result, spec.fields)
    except Exception as e:
        logger.warning("Tool %s failed: %s", spec.name, e)
        return format_error_response(spec.action, e)

    return format_json_response(shaped)


def build_signature(params: Sequence[ToolParam]) -> inspect.Signature:
    """
    Build a keyword-only function signature from tool parameters.

    FastMCP derives the tool's input schema from this signature, so optional
    parameters default to None and each carries its description.
    """
    parameters = []
    for param in params:
        annotation = param.type if param.required else Optional[param.type]
        parameters.append(
            inspect.Parameter(
                param.name,
                inspect.Parameter.KEYWORD_ONLY,
                default=inspect.Parameter.empty if param.required else None,
                annotation=Annotated[annotation, Field(description=param.description)],
            )
        )
    return inspect.Signature(parameters, return_annotation=CallToolResult)


def make_tool_function(spec: ToolSpec, service: ClockifyService) -> Callable[..., Awaitable[CallToolResult]]:
    """Create the coroutine function FastMCP calls for a tool."""

    async def tool(**arguments: Any) -> CallToolResult:
        return await run_tool(spec, service, arguments)

    tool.__name__ = spec.name
    tool.__qualname__ = spec.name
    tool.__doc__ = spec.description
    tool.__signature__ = build_signature(spec.params)
    return tool


def register_tools(mcp: FastMCP, service: ClockifyService, specs: Sequence[ToolSpec]):
    """
    Register a group of tools on the MCP server.

    Args:
        mcp: The FastMCP instance
        service: The Clockify service the tools call
        specs: Tool declarations to register
    """
    for spec in specs:
        mcp.add_tool(
            make_tool_function(spec, service),
            name=spec.name,
            title=spec.title,
            description=spec.description,
            structured_output=False,
        )
        logger.info("Registered tool %s", spec.name)
