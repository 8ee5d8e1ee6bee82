"""
Clockify MCP Server

Exposes the Clockify time-tracking REST API as MCP tools.
"""

__version__ = "0.1.0"
