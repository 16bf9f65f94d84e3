"""
Webhook dispatch: maps each Cal.com lifecycle event to an async handler.

Handlers call the configured AI provider. Events without a handler succeed
with an informational message; a handler that raises yields a failed result
instead of propagating.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from rendevu.llm.models import (
    BriefAttendee,
    EmailBooking,
    EmailGenerationRequest,
    EmailGenerationResponse,
    EmailType,
    MeetingBriefRequest,
    MeetingSummaryRequest,
)
from rendevu.llm.provider import AIProvider
from rendevu.webhook.models import BookingPayload, WebhookEvent

logger = logging.getLogger(__name__)

EventHandler = Callable[[BookingPayload], Awaitable[Any]]

DEFAULT_RECIPIENT = "Attendee"


@dataclass(frozen=True)
class WebhookResult:
    success: bool
    event: WebhookEvent
    data: Any = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"success": self.success, "event": self.event.value}
        if self.data is not None:
            result["data"] = self.data
        if self.error is not None:
            result["error"] = self.error
        return result


def _dump(response: Any) -> Any:
    """Serialize provider responses to their camelCase JSON shape."""
    if hasattr(response, "to_json_dict"):
        return response.to_json_dict()
    return response


def meeting_duration_minutes(booking: BookingPayload) -> int:
    start = datetime.fromisoformat(booking.start_time.replace("Z", "+00:00"))
    end = datetime.fromisoformat(booking.end_time.replace("Z", "+00:00"))
    return round((end - start).total_seconds() / 60)


class WebhookHandler:
    """Dispatch table from WebhookEvent to handler coroutine."""

    def __init__(self, provider: AIProvider):
        self.provider = provider
        self._handlers: dict[WebhookEvent, EventHandler] = {}
        self._register_default_handlers()

    def _register_default_handlers(self) -> None:
        self._handlers[WebhookEvent.BOOKING_CREATED] = self._on_booking_created
        self._handlers[WebhookEvent.BOOKING_CONFIRMED] = self._on_booking_confirmed
        self._handlers[WebhookEvent.BOOKING_CANCELLED] = self._on_booking_cancelled
        self._handlers[WebhookEvent.BOOKING_RESCHEDULED] = self._on_booking_rescheduled
        self._handlers[WebhookEvent.MEETING_ENDED] = self._on_meeting_ended

    def register_handler(self, event: WebhookEvent, handler: EventHandler) -> None:
        """Add a handler for ``event``, replacing any existing one."""
        self._handlers[event] = handler

    async def handle(self, event: WebhookEvent, booking: BookingPayload) -> WebhookResult:
        handler = self._handlers.get(event)
        if handler is None:
            return WebhookResult(
                success=True,
                event=event,
                data={"message": f"No handler registered for event: {event.value}"},
            )

        try:
            data = await handler(booking)
        except Exception as e:
            logger.error(f"Webhook handler for {event.value} failed: {e}")
            return WebhookResult(success=False, event=event, error=str(e) or type(e).__name__)

        return WebhookResult(success=True, event=event, data=data)

    # --- Default handlers ---

    def _email_request(
        self,
        booking: BookingPayload,
        email_type: EmailType,
        additional_context: str | None = None,
    ) -> EmailGenerationRequest:
        recipient = booking.attendees[0].name if booking.attendees else DEFAULT_RECIPIENT
        return EmailGenerationRequest(
            type=email_type,
            booking=EmailBooking(
                title=booking.title,
                start_time=booking.start_time,
                end_time=booking.end_time,
                attendees=[a.email for a in booking.attendees],
                organizer=booking.organizer.name,
                location=booking.location or None,
            ),
            recipient_name=recipient or DEFAULT_RECIPIENT,
            additional_context=additional_context,
        )

    async def _send_email(self, booking: BookingPayload, email_type: EmailType, **kwargs: Any):
        email: EmailGenerationResponse = await self.provider.generate_email(
            self._email_request(booking, email_type, **kwargs)
        )
        return {"email": _dump(email)}

    async def _on_booking_created(self, booking: BookingPayload) -> dict[str, Any]:
        brief, email = await asyncio.gather(
            self.provider.generate_meeting_brief(
                MeetingBriefRequest(
                    title=booking.title,
                    description=booking.description,
                    attendees=[
                        BriefAttendee(name=a.name, email=a.email) for a in booking.attendees
                    ],
                )
            ),
            self.provider.generate_email(self._email_request(booking, "confirmation")),
        )
        return {"brief": _dump(brief), "email": _dump(email)}

    async def _on_booking_confirmed(self, booking: BookingPayload) -> dict[str, Any]:
        return await self._send_email(
            booking, "confirmation", additional_context="This booking has been confirmed."
        )

    async def _on_booking_cancelled(self, booking: BookingPayload) -> dict[str, Any]:
        return await self._send_email(booking, "cancellation")

    async def _on_booking_rescheduled(self, booking: BookingPayload) -> dict[str, Any]:
        return await self._send_email(booking, "reschedule")

    async def _on_meeting_ended(self, booking: BookingPayload) -> dict[str, Any]:
        summary, followup = await asyncio.gather(
            self.provider.generate_meeting_summary(
                MeetingSummaryRequest(
                    title=booking.title,
                    description=booking.description,
                    organizer=booking.organizer.name,
                    attendees=[a.name for a in booking.attendees],
                    duration=meeting_duration_minutes(booking),
                    notes=booking.additional_notes,
                )
            ),
            self.provider.generate_email(self._email_request(booking, "followup")),
        )
        return {"summary": _dump(summary), "followupEmail": _dump(followup)}
