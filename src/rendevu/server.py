"""FastMCP server exposing the Cal.com tools."""

from __future__ import annotations

from fastmcp import FastMCP

from rendevu.client import CalcomClient
from rendevu.tools import register_all_tools

SERVER_NAME = "rendevu"


def create_server(client: CalcomClient | None = None) -> FastMCP:
    """
    Create the MCP server with every Cal.com tool registered.

    Args:
        client: Optional pre-built client. When omitted, each tool call
            builds one from CALCOM_API_KEY.
    """
    mcp = FastMCP(SERVER_NAME)
    register_all_tools(mcp, client)
    return mcp
