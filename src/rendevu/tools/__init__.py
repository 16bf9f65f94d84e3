"""
Cal.com tools - schedules, event types, bookings, slots, profile and OAuth clients.

Each module exposes ``register_tools(mcp, client=None)``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rendevu.tools import bookings, event_types, oauth_clients, profile, schedules, slots

if TYPE_CHECKING:
    from fastmcp import FastMCP

    from rendevu.client import CalcomClient

TOOL_MODULES = [schedules, event_types, bookings, slots, profile, oauth_clients]


def register_all_tools(mcp: FastMCP, client: CalcomClient | None = None) -> None:
    """Register every Cal.com tool with the MCP server."""
    for module in TOOL_MODULES:
        module.register_tools(mcp, client)


__all__ = ["register_all_tools", "TOOL_MODULES"]
