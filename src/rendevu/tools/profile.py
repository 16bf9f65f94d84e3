"""Cal.com user profile tools."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from pydantic import PositiveInt

from rendevu.tools.common import ToolParams, client_resolver, format_result

if TYPE_CHECKING:
    from fastmcp import FastMCP

    from rendevu.client import CalcomClient


class UpdateProfileParams(ToolParams):
    name: str | None = None
    bio: str | None = None
    time_zone: str | None = None
    week_start: str | None = None
    time_format: Literal[12, 24] | None = None
    default_schedule_id: PositiveInt | None = None


def register_tools(mcp: FastMCP, client: CalcomClient | None = None) -> None:
    """Register Cal.com profile tools with the MCP server."""
    get_client = client_resolver(client)

    @mcp.tool()
    async def calcom_get_profile() -> dict:
        """
        Get the authenticated user's Cal.com profile.

        Returns:
            Dict with username, name, email, timezone and other settings, or error
        """
        calcom = get_client()
        if isinstance(calcom, dict):
            return calcom
        return format_result(await calcom.get_me())

    @mcp.tool()
    async def calcom_update_profile(
        name: str | None = None,
        bio: str | None = None,
        time_zone: str | None = None,
        week_start: str | None = None,
        time_format: int | None = None,
        default_schedule_id: int | None = None,
    ) -> dict:
        """
        Update the authenticated user's profile. Only the fields given are changed.

        Args:
            name: Display name
            bio: Bio/description
            time_zone: Timezone (e.g., "America/New_York")
            week_start: First day of the week (e.g., "Monday")
            time_format: 12 or 24
            default_schedule_id: Default schedule ID

        Returns:
            Dict with updated profile or error
        """
        params = UpdateProfileParams(
            name=name,
            bio=bio,
            time_zone=time_zone,
            week_start=week_start,
            time_format=time_format,
            default_schedule_id=default_schedule_id,
        )
        calcom = get_client()
        if isinstance(calcom, dict):
            return calcom
        return format_result(await calcom.update_me(params.body()))
