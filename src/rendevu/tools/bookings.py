"""
Cal.com booking tools.

Bookings are addressed by UID. Supports listing, lookup, creation,
rescheduling and cancellation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Any

from pydantic import AfterValidator, Field, PositiveInt

from rendevu.tools.common import ToolParams, check_email, client_resolver, format_result

if TYPE_CHECKING:
    from fastmcp import FastMCP

    from rendevu.client import CalcomClient

Email = Annotated[str, AfterValidator(check_email)]


class BookingFilters(ToolParams):
    status: str | None = None
    event_type_id: PositiveInt | None = None
    attendee_email: Email | None = None


class BookingUid(ToolParams):
    booking_uid: str = Field(min_length=1)


class CancelBookingParams(BookingUid):
    cancellation_reason: str | None = None


class RescheduleBookingParams(BookingUid):
    start: str = Field(min_length=1)
    rescheduling_reason: str | None = None


class BookingAttendee(ToolParams):
    name: str = Field(min_length=1)
    email: Email
    time_zone: str = Field(default="UTC", min_length=1)
    language: str | None = None


class CreateBookingParams(ToolParams):
    event_type_id: PositiveInt
    start: str = Field(min_length=1)
    attendee: BookingAttendee
    guests: list[Email] | None = None
    length_in_minutes: PositiveInt | None = None
    metadata: dict[str, Any] | None = None


def register_tools(mcp: FastMCP, client: CalcomClient | None = None) -> None:
    """Register Cal.com booking tools with the MCP server."""
    get_client = client_resolver(client)

    @mcp.tool()
    async def calcom_list_bookings(
        status: str | None = None,
        event_type_id: int | None = None,
        attendee_email: str | None = None,
    ) -> dict:
        """
        List Cal.com bookings with optional filters.

        Use this when you need to:
        - View upcoming or past bookings
        - Filter bookings by status, event type or attendee

        Args:
            status: Filter by status - "upcoming", "past", "cancelled", "unconfirmed"
            event_type_id: Filter by event type ID
            attendee_email: Filter by attendee email

        Returns:
            Dict with list of bookings or error
        """
        filters = BookingFilters(
            status=status,
            event_type_id=event_type_id,
            attendee_email=attendee_email,
        )
        calcom = get_client()
        if isinstance(calcom, dict):
            return calcom
        return format_result(await calcom.list_bookings(**filters.model_dump(exclude_none=True)))

    @mcp.tool()
    async def calcom_get_booking(booking_uid: str) -> dict:
        """
        Get detailed information about a booking by its UID.

        Args:
            booking_uid: The unique identifier of the booking

        Returns:
            Dict with booking details or error
        """
        params = BookingUid(booking_uid=booking_uid)
        calcom = get_client()
        if isinstance(calcom, dict):
            return calcom
        return format_result(await calcom.get_booking(params.booking_uid))

    @mcp.tool()
    async def calcom_create_booking(
        event_type_id: int,
        start: str,
        name: str,
        email: str,
        time_zone: str = "UTC",
        language: str | None = None,
        guests: list[str] | None = None,
        length_in_minutes: int | None = None,
        metadata: dict | None = None,
    ) -> dict:
        """
        Create a new booking for an event type.

        Args:
            event_type_id: The event type ID to book
            start: Start time in ISO 8601 UTC (e.g., "2025-01-15T10:00:00Z")
            name: Attendee name
            email: Attendee email
            time_zone: Attendee timezone (default: "UTC")
            language: Attendee language code (e.g., "en")
            guests: Additional guest emails
            length_in_minutes: Duration, for event types with multiple lengths
            metadata: Free-form key/value metadata stored on the booking

        Returns:
            Dict with created booking or error
        """
        params = CreateBookingParams(
            event_type_id=event_type_id,
            start=start,
            attendee=BookingAttendee(
                name=name, email=email, time_zone=time_zone, language=language
            ),
            guests=guests,
            length_in_minutes=length_in_minutes,
            metadata=metadata,
        )
        calcom = get_client()
        if isinstance(calcom, dict):
            return calcom
        return format_result(await calcom.create_booking(params.body()))

    @mcp.tool()
    async def calcom_cancel_booking(
        booking_uid: str,
        cancellation_reason: str | None = None,
    ) -> dict:
        """
        Cancel a booking by its UID.

        Args:
            booking_uid: The unique identifier of the booking to cancel
            cancellation_reason: Optional reason for cancellation

        Returns:
            Dict with cancellation confirmation or error
        """
        params = CancelBookingParams(
            booking_uid=booking_uid,
            cancellation_reason=cancellation_reason,
        )
        calcom = get_client()
        if isinstance(calcom, dict):
            return calcom
        result = await calcom.cancel_booking(
            params.booking_uid,
            cancellation_reason=params.cancellation_reason,
        )
        return format_result(result, message=f"Booking {params.booking_uid} cancelled successfully")

    @mcp.tool()
    async def calcom_reschedule_booking(
        booking_uid: str,
        start: str,
        rescheduling_reason: str | None = None,
    ) -> dict:
        """
        Reschedule a booking to a new time.

        Args:
            booking_uid: The unique identifier of the booking
            start: New start time in ISO 8601 format (e.g., 2025-01-15T10:00:00Z)
            rescheduling_reason: Optional reason for rescheduling

        Returns:
            Dict with the rescheduled booking or error
        """
        params = RescheduleBookingParams(
            booking_uid=booking_uid,
            start=start,
            rescheduling_reason=rescheduling_reason,
        )
        calcom = get_client()
        if isinstance(calcom, dict):
            return calcom
        result = await calcom.reschedule_booking(
            params.booking_uid,
            start=params.start,
            rescheduling_reason=params.rescheduling_reason,
        )
        return format_result(result)
