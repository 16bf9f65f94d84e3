"""Cal.com webhook event tags and booking payload."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WebhookEvent(str, Enum):
    BOOKING_CREATED = "BOOKING_CREATED"
    BOOKING_RESCHEDULED = "BOOKING_RESCHEDULED"
    BOOKING_CANCELLED = "BOOKING_CANCELLED"
    BOOKING_CONFIRMED = "BOOKING_CONFIRMED"
    BOOKING_REJECTED = "BOOKING_REJECTED"
    BOOKING_REQUESTED = "BOOKING_REQUESTED"
    BOOKING_PAYMENT_INITIATED = "BOOKING_PAYMENT_INITIATED"
    BOOKING_PAID = "BOOKING_PAID"
    MEETING_STARTED = "MEETING_STARTED"
    MEETING_ENDED = "MEETING_ENDED"
    RECORDING_READY = "RECORDING_READY"


class _Payload(BaseModel):
    # Unknown keys are kept; Cal.com adds fields without versioning webhooks.
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="allow",
    )


class Person(_Payload):
    name: str
    email: str
    time_zone: str | None = None


class BookingPayload(_Payload):
    """Snapshot of a booking as delivered in a webhook body."""

    title: str
    start_time: str
    end_time: str
    organizer: Person
    attendees: list[Person] = Field(default_factory=list)
    id: int | None = None
    uid: str | None = None
    description: str | None = None
    location: str | None = None
    status: str | None = None
    additional_notes: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class WebhookPayload(_Payload):
    trigger_event: WebhookEvent
    payload: BookingPayload
