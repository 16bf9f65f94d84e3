"""Request/response models for the four generation operations.

Attributes are snake_case; JSON on the wire (HTTP bodies and model output)
uses the camelCase aliases.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _Model(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class TimeSlot(_Model):
    start: str
    end: str


# --- Meeting summary ---


class MeetingSummaryRequest(_Model):
    title: str
    organizer: str
    attendees: list[str]
    duration: int
    description: str | None = None
    notes: str | None = None
    transcript: str | None = None


class MeetingSummaryResponse(_Model):
    summary: str
    key_points: list[str]
    action_items: list[str]
    next_steps: list[str] | None = None


# --- Scheduling suggestion ---


class SchedulingPreferences(_Model):
    preferred_times: list[str] | None = None
    avoid_times: list[str] | None = None
    duration: int | None = None
    timezone: str | None = None


class SchedulingSuggestionRequest(_Model):
    user_message: str
    available_slots: list[TimeSlot] | None = None
    preferences: SchedulingPreferences | None = None


class SchedulingSuggestionResponse(_Model):
    suggestion: str
    recommended_slots: list[TimeSlot] | None = None
    reasoning: str | None = None


# --- Email ---

EmailType = Literal["confirmation", "reminder", "cancellation", "reschedule", "followup"]


class EmailBooking(_Model):
    title: str
    start_time: str
    end_time: str
    attendees: list[str]
    organizer: str
    location: str | None = None


class EmailGenerationRequest(_Model):
    type: EmailType
    booking: EmailBooking
    recipient_name: str
    additional_context: str | None = None


class EmailGenerationResponse(_Model):
    subject: str
    body: str


# --- Meeting brief ---


class BriefAttendee(_Model):
    name: str
    email: str


class PreviousMeeting(_Model):
    title: str
    date: str
    summary: str | None = None


class MeetingBriefRequest(_Model):
    title: str
    attendees: list[BriefAttendee]
    description: str | None = None
    previous_meetings: list[PreviousMeeting] | None = None


class MeetingBriefResponse(_Model):
    brief: str
    suggested_agenda: list[str]
    talking_points: list[str]
    questions_to_consider: list[str]
