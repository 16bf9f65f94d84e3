"""
LLM prompt templates for the generation operations.

Each operation has a fixed system instruction and a user template that
embeds the request fields as plain text and pins the expected JSON shape.
"""

from __future__ import annotations

import json

from rendevu.llm.models import (
    EmailGenerationRequest,
    MeetingBriefRequest,
    MeetingSummaryRequest,
    SchedulingSuggestionRequest,
)

JSON_ONLY = "Always respond with valid JSON only, no other text."

SUMMARY_SYSTEM_PROMPT = (
    "You are a professional meeting assistant. Analyze meetings and provide clear, "
    f"actionable summaries. {JSON_ONLY}"
)

SCHEDULING_SYSTEM_PROMPT = (
    "You are a smart scheduling assistant. Help users find optimal meeting times and "
    f"interpret natural language scheduling requests. {JSON_ONLY}"
)

EMAIL_SYSTEM_PROMPT = (
    "You are a professional email writer. Create clear, friendly, and professional "
    f"emails for scheduling-related communications. {JSON_ONLY}"
)

BRIEF_SYSTEM_PROMPT = (
    "You are a professional meeting preparation assistant. Help users prepare for "
    f"meetings by providing comprehensive briefs. {JSON_ONLY}"
)

SUMMARY_PROMPT = """Analyze this meeting and provide a structured summary:

Meeting Title: {title}
Description: {description}
Organizer: {organizer}
Attendees: {attendees}
Duration: {duration} minutes
{extra}
Respond ONLY with JSON in this exact format:
{{
  "summary": "A concise 2-3 sentence summary of the meeting",
  "keyPoints": ["Key point 1", "Key point 2"],
  "actionItems": ["Action item 1", "Action item 2"],
  "nextSteps": ["Next step 1", "Next step 2"]
}}"""

SCHEDULING_PROMPT = """Help with scheduling based on this request:

User Message: "{user_message}"
{extra}
Respond ONLY with JSON in this exact format:
{{
  "suggestion": "Your scheduling suggestion/response",
  "recommendedSlots": [{{"start": "ISO datetime", "end": "ISO datetime"}}],
  "reasoning": "Brief explanation of why these times are recommended"
}}"""

EMAIL_PROMPT = """Generate a professional {email_kind}:

Meeting Details:
- Title: {title}
- Start: {start_time}
- End: {end_time}
- Organizer: {organizer}
- Attendees: {attendees}
{location}
Recipient: {recipient_name}
{extra}
Respond ONLY with JSON in this exact format:
{{
  "subject": "Email subject line",
  "body": "Full email body (use \\n for line breaks)"
}}"""

BRIEF_PROMPT = """Generate a pre-meeting brief:

Upcoming Meeting: {title}
Description: {description}
Attendees: {attendees}
{extra}
Respond ONLY with JSON in this exact format:
{{
  "brief": "A 2-3 paragraph overview to prepare for this meeting",
  "suggestedAgenda": ["Agenda item 1", "Agenda item 2"],
  "talkingPoints": ["Talking point 1", "Talking point 2"],
  "questionsToConsider": ["Question 1", "Question 2"]
}}"""

EMAIL_KINDS = {
    "confirmation": "booking confirmation email",
    "reminder": "meeting reminder email",
    "cancellation": "meeting cancellation email",
    "reschedule": "meeting reschedule notification email",
    "followup": "post-meeting follow-up email",
}


def _lines(*lines: str | None) -> str:
    """Join the optional lines that are present, each newline-terminated."""
    return "".join(f"{line}\n" for line in lines if line)


def format_summary_prompt(request: MeetingSummaryRequest) -> str:
    return SUMMARY_PROMPT.format(
        title=request.title,
        description=request.description or "No description provided",
        organizer=request.organizer,
        attendees=", ".join(request.attendees),
        duration=request.duration,
        extra=_lines(
            f"Notes: {request.notes}" if request.notes else None,
            f"Transcript: {request.transcript}" if request.transcript else None,
        ),
    )


def format_scheduling_prompt(request: SchedulingSuggestionRequest) -> str:
    slots = preferences = None
    if request.available_slots is not None:
        slots = json.dumps([s.to_json_dict() for s in request.available_slots])
    if request.preferences is not None:
        preferences = json.dumps(request.preferences.to_json_dict())
    return SCHEDULING_PROMPT.format(
        user_message=request.user_message,
        extra=_lines(
            f"Available Slots: {slots}" if slots else None,
            f"Preferences: {preferences}" if preferences else None,
        ),
    )


def format_email_prompt(request: EmailGenerationRequest) -> str:
    booking = request.booking
    return EMAIL_PROMPT.format(
        email_kind=EMAIL_KINDS[request.type],
        title=booking.title,
        start_time=booking.start_time,
        end_time=booking.end_time,
        organizer=booking.organizer,
        attendees=", ".join(booking.attendees),
        location=_lines(f"- Location: {booking.location}" if booking.location else None),
        recipient_name=request.recipient_name,
        extra=_lines(
            f"Additional Context: {request.additional_context}"
            if request.additional_context
            else None
        ),
    )


def format_brief_prompt(request: MeetingBriefRequest) -> str:
    history = None
    if request.previous_meetings:
        history = "Previous Meetings with these attendees:\n" + "\n".join(
            f"- {m.title} ({m.date}): {m.summary or 'No summary'}"
            for m in request.previous_meetings
        )
    return BRIEF_PROMPT.format(
        title=request.title,
        description=request.description or "No description",
        attendees=", ".join(f"{a.name} ({a.email})" for a in request.attendees),
        extra=_lines(history),
    )
