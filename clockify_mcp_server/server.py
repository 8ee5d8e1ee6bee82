"""
Clockify MCP Server

This is the main entry point for the Clockify MCP server.
It creates an MCP server that provides tools for interacting with Clockify.
"""

import logging
import sys
from typing import Optional

import httpx
from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

from clockify_mcp_server.api.client import ClockifyApiClient
from clockify_mcp_server.api.service import ClockifyService
from clockify_mcp_server.config import ClockifyConfig
from clockify_mcp_server.errors import ConfigurationError
from clockify_mcp_server.tools.client_tools import register_client_tools
from clockify_mcp_server.tools.project_tools import register_project_tools
from clockify_mcp_server.tools.time_entry_tools import register_time_entry_tools
from clockify_mcp_server.tools.user_tools import register_user_tools
from clockify_mcp_server.tools.workspace_tools import register_workspace_tools
from clockify_mcp_server.utils.formatters import USER_FIELDS, WORKSPACE_FIELDS, format_json, shape

logger = logging.getLogger(__name__)

# System instructions for MCP
system_instructions = """
Most Clockify tools take an optional workspaceId. When it is omitted the
authenticated user's active workspace is used; likewise an omitted userId
means the authenticated user. Timestamps are ISO 8601 strings and are passed
to Clockify unchanged.
"""


def create_mcp_server(config: ClockifyConfig, transport: Optional[httpx.AsyncBaseTransport] = None) -> FastMCP:
    """
    Create and configure the MCP server with Clockify tools.

    Args:
        config: Loaded Clockify configuration
        transport: Optional httpx transport for the API client (tests)

    Returns:
        FastMCP: The configured MCP server
    """
    mcp = FastMCP("clockify", instructions=system_instructions, log_level=config.log_level)

    api_client = ClockifyApiClient(config, transport=transport)
    service = ClockifyService(api_client)

    # Register tools
    register_user_tools(mcp, service)
    register_workspace_tools(mcp, service)
    register_client_tools(mcp, service)
    register_project_tools(mcp, service)
    register_time_entry_tools(mcp, service)

    # Register resources
    @mcp.resource("clockify://user", mime_type="application/json")
    async def current_user() -> str:
        """The currently authenticated Clockify user."""
        user = await service.get_current_user()
        return format_json(shape(user, USER_FIELDS))

    @mcp.resource("clockify://workspaces", mime_type="application/json")
    async def workspaces() -> str:
        """All workspaces available to the authenticated Clockify user."""
        response = await service.get_workspaces()
        return format_json(shape(response, WORKSPACE_FIELDS))

    return mcp


def main():
    load_dotenv()

    try:
        config = ClockifyConfig.from_env()
    except ConfigurationError as e:
        logging.basicConfig(stream=sys.stderr, level=logging.ERROR)
        logger.error("Error: %s", e)
        sys.exit(1)

    logging.basicConfig(
        stream=sys.stderr,
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        mcp = create_mcp_server(config)
        logger.info("Starting Clockify MCP server against %s", config.base_url)
        mcp.run()
    except Exception:
        logger.exception("Clockify MCP server failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
