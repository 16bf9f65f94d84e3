"""
Cal.com schedule tools.

Schedules hold a user's weekly availability blocks and date overrides.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from pydantic import Field, PositiveInt

from rendevu.tools.common import (
    DATE_PATTERN,
    TIME_PATTERN,
    ToolParams,
    client_resolver,
    format_result,
)

if TYPE_CHECKING:
    from fastmcp import FastMCP

    from rendevu.client import CalcomClient

DayOfWeek = Literal["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


class AvailabilityBlock(ToolParams):
    days: list[DayOfWeek]
    start_time: str = Field(pattern=TIME_PATTERN)
    end_time: str = Field(pattern=TIME_PATTERN)


class ScheduleOverride(ToolParams):
    date: str = Field(pattern=DATE_PATTERN)
    start_time: str = Field(pattern=TIME_PATTERN)
    end_time: str = Field(pattern=TIME_PATTERN)


class ScheduleId(ToolParams):
    schedule_id: PositiveInt


class CreateScheduleParams(ToolParams):
    name: str = Field(min_length=1)
    time_zone: str = Field(min_length=1)
    is_default: bool
    availability: list[AvailabilityBlock] | None = None
    overrides: list[ScheduleOverride] | None = None


class UpdateScheduleParams(ToolParams):
    schedule_id: PositiveInt
    name: str | None = Field(default=None, min_length=1)
    time_zone: str | None = Field(default=None, min_length=1)
    is_default: bool | None = None
    availability: list[AvailabilityBlock] | None = None
    overrides: list[ScheduleOverride] | None = None


def register_tools(mcp: FastMCP, client: CalcomClient | None = None) -> None:
    """Register Cal.com schedule tools with the MCP server."""
    get_client = client_resolver(client)

    @mcp.tool()
    async def calcom_list_schedules() -> dict:
        """
        List all availability schedules for the authenticated user.

        Use this when you need to:
        - Discover schedule IDs before updating availability
        - See which schedule is the default

        Returns:
            Dict with list of schedules or error
        """
        calcom = get_client()
        if isinstance(calcom, dict):
            return calcom
        return format_result(await calcom.list_schedules())

    @mcp.tool()
    async def calcom_get_schedule(schedule_id: int) -> dict:
        """
        Get a schedule by ID, including availability blocks and overrides.

        Args:
            schedule_id: The ID of the schedule to retrieve

        Returns:
            Dict with schedule details or error
        """
        params = ScheduleId(schedule_id=schedule_id)
        calcom = get_client()
        if isinstance(calcom, dict):
            return calcom
        return format_result(await calcom.get_schedule(params.schedule_id))

    @mcp.tool()
    async def calcom_create_schedule(
        name: str,
        time_zone: str,
        is_default: bool,
        availability: list[dict] | None = None,
        overrides: list[dict] | None = None,
    ) -> dict:
        """
        Create a new availability schedule.

        Days are day names (e.g. "Monday") and times are 24-hour HH:MM. Cal.com
        defaults to Monday-Friday 09:00-17:00 when no availability is given.

        Args:
            name: Name of the schedule
            time_zone: Timezone (e.g., "America/New_York")
            is_default: Whether this is the user's default schedule
            availability: Blocks of {days, startTime, endTime}
            overrides: Date overrides of {date (YYYY-MM-DD), startTime, endTime}

        Returns:
            Dict with created schedule or error
        """
        params = CreateScheduleParams(
            name=name,
            time_zone=time_zone,
            is_default=is_default,
            availability=availability,
            overrides=overrides,
        )
        calcom = get_client()
        if isinstance(calcom, dict):
            return calcom
        return format_result(await calcom.create_schedule(params.body()))

    @mcp.tool()
    async def calcom_update_schedule(
        schedule_id: int,
        name: str | None = None,
        time_zone: str | None = None,
        is_default: bool | None = None,
        availability: list[dict] | None = None,
        overrides: list[dict] | None = None,
    ) -> dict:
        """
        Update an existing schedule. Only the fields given are changed.

        Args:
            schedule_id: The schedule ID to update
            name: New name for the schedule
            time_zone: New timezone
            is_default: Whether this should be the default schedule
            availability: New availability blocks (replaces existing)
            overrides: New overrides (replaces existing)

        Returns:
            Dict with updated schedule or error
        """
        params = UpdateScheduleParams(
            schedule_id=schedule_id,
            name=name,
            time_zone=time_zone,
            is_default=is_default,
            availability=availability,
            overrides=overrides,
        )
        calcom = get_client()
        if isinstance(calcom, dict):
            return calcom
        result = await calcom.update_schedule(
            params.schedule_id, params.body(exclude={"schedule_id"})
        )
        return format_result(result)

    @mcp.tool()
    async def calcom_delete_schedule(schedule_id: int) -> dict:
        """
        Delete a schedule by ID.

        Cal.com refuses to delete the default schedule when it is the only one.

        Args:
            schedule_id: The ID of the schedule to delete

        Returns:
            Dict with confirmation or error
        """
        params = ScheduleId(schedule_id=schedule_id)
        calcom = get_client()
        if isinstance(calcom, dict):
            return calcom
        result = await calcom.delete_schedule(params.schedule_id)
        return format_result(result, message=f"Schedule {params.schedule_id} deleted successfully")
