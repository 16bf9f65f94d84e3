"""
Cal.com event type tools.

Event types are the bookable meeting templates ("30 Minute Meeting") with
duration, locations, buffers and visibility settings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field, NonNegativeInt, PositiveInt

from rendevu.tools.common import ToolParams, client_resolver, format_result

if TYPE_CHECKING:
    from fastmcp import FastMCP

    from rendevu.client import CalcomClient


class Location(ToolParams):
    type: str
    link: str | None = None
    address: str | None = None
    phone: str | None = None


class EventTypeId(ToolParams):
    event_type_id: PositiveInt


class _EventTypeSettings(ToolParams):
    description: str | None = None
    locations: list[Location] | None = None
    schedule_id: PositiveInt | None = None
    hidden: bool | None = None
    requires_confirmation: bool | None = None
    disable_guests: bool | None = None
    minimum_booking_notice: NonNegativeInt | None = None
    before_event_buffer: NonNegativeInt | None = None
    after_event_buffer: NonNegativeInt | None = None
    slot_interval: PositiveInt | None = None


class CreateEventTypeParams(_EventTypeSettings):
    title: str = Field(min_length=1)
    slug: str = Field(min_length=1)
    length_in_minutes: PositiveInt


class UpdateEventTypeParams(_EventTypeSettings):
    event_type_id: PositiveInt
    title: str | None = Field(default=None, min_length=1)
    slug: str | None = Field(default=None, min_length=1)
    length_in_minutes: PositiveInt | None = None


def register_tools(mcp: FastMCP, client: CalcomClient | None = None) -> None:
    """Register Cal.com event type tools with the MCP server."""
    get_client = client_resolver(client)

    @mcp.tool()
    async def calcom_list_event_types() -> dict:
        """
        List all configured event types.

        Use this when you need to:
        - See what meeting types are available
        - Get event type IDs for booking or slot queries

        Returns:
            Dict with list of event types or error
        """
        calcom = get_client()
        if isinstance(calcom, dict):
            return calcom
        return format_result(await calcom.list_event_types())

    @mcp.tool()
    async def calcom_get_event_type(event_type_id: int) -> dict:
        """
        Get detailed information about an event type.

        Args:
            event_type_id: The event type ID

        Returns:
            Dict with event type details or error
        """
        params = EventTypeId(event_type_id=event_type_id)
        calcom = get_client()
        if isinstance(calcom, dict):
            return calcom
        return format_result(await calcom.get_event_type(params.event_type_id))

    @mcp.tool()
    async def calcom_create_event_type(
        title: str,
        slug: str,
        length_in_minutes: int,
        description: str | None = None,
        locations: list[dict] | None = None,
        schedule_id: int | None = None,
        hidden: bool | None = None,
        requires_confirmation: bool | None = None,
        disable_guests: bool | None = None,
        minimum_booking_notice: int | None = None,
        before_event_buffer: int | None = None,
        after_event_buffer: int | None = None,
        slot_interval: int | None = None,
    ) -> dict:
        """
        Create a new event type.

        Args:
            title: Display name (e.g., "30 Minute Meeting")
            slug: URL-friendly identifier (e.g., "30min")
            length_in_minutes: Duration of the event in minutes
            description: Description shown on the booking page
            locations: Meeting locations, each {type, link?, address?, phone?}
            schedule_id: Schedule that governs availability for this event type
            hidden: Hide from the public booking page
            requires_confirmation: Bookings must be confirmed by the organizer
            disable_guests: Prevent attendees from adding guests
            minimum_booking_notice: Minimum notice in minutes
            before_event_buffer: Buffer before the event in minutes
            after_event_buffer: Buffer after the event in minutes
            slot_interval: Slot interval in minutes

        Returns:
            Dict with created event type or error
        """
        params = CreateEventTypeParams(
            title=title,
            slug=slug,
            length_in_minutes=length_in_minutes,
            description=description,
            locations=locations,
            schedule_id=schedule_id,
            hidden=hidden,
            requires_confirmation=requires_confirmation,
            disable_guests=disable_guests,
            minimum_booking_notice=minimum_booking_notice,
            before_event_buffer=before_event_buffer,
            after_event_buffer=after_event_buffer,
            slot_interval=slot_interval,
        )
        calcom = get_client()
        if isinstance(calcom, dict):
            return calcom
        return format_result(await calcom.create_event_type(params.body()))

    @mcp.tool()
    async def calcom_update_event_type(
        event_type_id: int,
        title: str | None = None,
        slug: str | None = None,
        length_in_minutes: int | None = None,
        description: str | None = None,
        locations: list[dict] | None = None,
        schedule_id: int | None = None,
        hidden: bool | None = None,
        requires_confirmation: bool | None = None,
        disable_guests: bool | None = None,
        minimum_booking_notice: int | None = None,
        before_event_buffer: int | None = None,
        after_event_buffer: int | None = None,
        slot_interval: int | None = None,
    ) -> dict:
        """
        Update an existing event type. Only the fields given are changed.

        Args:
            event_type_id: The ID of the event type to update
            title: New display name
            slug: New URL slug
            length_in_minutes: New duration in minutes
            description: New description
            locations: New locations (replaces existing)
            schedule_id: New schedule ID
            hidden: Whether to hide from the public page
            requires_confirmation: Whether bookings require confirmation
            disable_guests: Whether guests are disabled
            minimum_booking_notice: Minimum notice in minutes
            before_event_buffer: Buffer before the event in minutes
            after_event_buffer: Buffer after the event in minutes
            slot_interval: Slot interval in minutes

        Returns:
            Dict with updated event type or error
        """
        params = UpdateEventTypeParams(
            event_type_id=event_type_id,
            title=title,
            slug=slug,
            length_in_minutes=length_in_minutes,
            description=description,
            locations=locations,
            schedule_id=schedule_id,
            hidden=hidden,
            requires_confirmation=requires_confirmation,
            disable_guests=disable_guests,
            minimum_booking_notice=minimum_booking_notice,
            before_event_buffer=before_event_buffer,
            after_event_buffer=after_event_buffer,
            slot_interval=slot_interval,
        )
        calcom = get_client()
        if isinstance(calcom, dict):
            return calcom
        result = await calcom.update_event_type(
            params.event_type_id, params.body(exclude={"event_type_id"})
        )
        return format_result(result)

    @mcp.tool()
    async def calcom_delete_event_type(event_type_id: int) -> dict:
        """
        Delete an event type by ID. This cannot be undone.

        Args:
            event_type_id: The ID of the event type to delete

        Returns:
            Dict with confirmation or error
        """
        params = EventTypeId(event_type_id=event_type_id)
        calcom = get_client()
        if isinstance(calcom, dict):
            return calcom
        result = await calcom.delete_event_type(params.event_type_id)
        return format_result(
            result, message=f"Event type {params.event_type_id} deleted successfully"
        )
