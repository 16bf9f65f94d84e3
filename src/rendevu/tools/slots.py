"""Cal.com availability slot tools."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field, PositiveInt

from rendevu.tools.common import ToolParams, client_resolver, format_result

if TYPE_CHECKING:
    from fastmcp import FastMCP

    from rendevu.client import CalcomClient


class SlotQuery(ToolParams):
    start: str = Field(min_length=1)
    end: str = Field(min_length=1)
    event_type_id: PositiveInt | None = None
    event_type_slug: str | None = None
    username: str | None = None
    time_zone: str | None = None


def register_tools(mcp: FastMCP, client: CalcomClient | None = None) -> None:
    """Register Cal.com slot tools with the MCP server."""
    get_client = client_resolver(client)

    @mcp.tool()
    async def calcom_get_available_slots(
        start: str,
        end: str,
        event_type_id: int | None = None,
        event_type_slug: str | None = None,
        username: str | None = None,
        time_zone: str | None = None,
    ) -> dict:
        """
        Get available time slots for booking, grouped by date.

        Use this when you need to:
        - Find open times before creating or rescheduling a booking
        - Offer booking options to users

        Identify the event type either by ID or by slug plus username.

        Args:
            start: Start date in YYYY-MM-DD format
            end: End date in YYYY-MM-DD format
            event_type_id: Event type ID to check availability for
            event_type_slug: Event type slug (requires username)
            username: Owner of the event type slug
            time_zone: Timezone for the returned slots (e.g., "America/New_York")

        Returns:
            Dict with slots keyed by date, or error
        """
        query = SlotQuery(
            start=start,
            end=end,
            event_type_id=event_type_id,
            event_type_slug=event_type_slug,
            username=username,
            time_zone=time_zone,
        )
        calcom = get_client()
        if isinstance(calcom, dict):
            return calcom
        return format_result(
            await calcom.get_available_slots(**query.model_dump(exclude_none=True))
        )
