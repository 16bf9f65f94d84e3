"""Shared fixtures for rendevu tests."""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from fastmcp import FastMCP

from rendevu.client import CalcomClient
from rendevu.llm.models import (
    EmailGenerationResponse,
    MeetingBriefResponse,
    MeetingSummaryResponse,
    SchedulingSuggestionResponse,
)
from rendevu.llm.provider import AIProvider
from rendevu.result import ApiResult


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep real credentials out of tests."""
    for var in (
        "CALCOM_API_KEY",
        "CALCOM_API_BASE_URL",
        "CALCOM_API_VERSION",
        "AI_PROVIDER",
        "AI_MODEL",
        "ANTHROPIC_API_KEY",
        "OPENAI_API_KEY",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def make_client():
    """Build a CalcomClient whose requests are answered by ``handler``."""

    def _make(handler) -> CalcomClient:
        return CalcomClient(
            api_key="test-api-key",
            base_url="https://cal.test/v2",
            transport=httpx.MockTransport(handler),
        )

    return _make


@pytest.fixture
def mock_client():
    """CalcomClient double; every API method returns an empty success by default."""
    client = MagicMock(spec=CalcomClient)
    for name in dir(CalcomClient):
        if name.startswith("_") or name == "from_config":
            continue
        setattr(client, name, AsyncMock(return_value=ApiResult.success({})))
    return client


@pytest.fixture
def mcp():
    """Create a FastMCP instance for testing."""
    return FastMCP("test-rendevu")


@pytest.fixture
def tool_fn(mcp):
    """Look up a registered tool's underlying coroutine function."""

    def _get(name: str):
        return mcp._tool_manager._tools[name].fn

    return _get


@pytest.fixture
def provider():
    """AIProvider double returning canned responses."""
    fake = MagicMock(spec=AIProvider)
    fake.name = "fake"
    fake.generate_meeting_summary = AsyncMock(
        return_value=MeetingSummaryResponse(
            summary="Discussed roadmap",
            key_points=["Q3 goals"],
            action_items=["Send notes"],
        )
    )
    fake.generate_scheduling_suggestion = AsyncMock(
        return_value=SchedulingSuggestionResponse(suggestion="Tuesday at 10:00")
    )
    fake.generate_email = AsyncMock(
        return_value=EmailGenerationResponse(subject="Your meeting", body="See you soon")
    )
    fake.generate_meeting_brief = AsyncMock(
        return_value=MeetingBriefResponse(
            brief="Intro call",
            suggested_agenda=["Introductions"],
            talking_points=["Pricing"],
            questions_to_consider=["Budget?"],
        )
    )
    return fake


@pytest.fixture
def booking_data():
    """A Cal.com webhook booking payload as it arrives on the wire."""
    return {
        "id": 42,
        "uid": "bk_123",
        "title": "Intro call",
        "description": "First conversation",
        "startTime": "2025-01-15T10:00:00Z",
        "endTime": "2025-01-15T10:30:00Z",
        "organizer": {"name": "Olivia", "email": "olivia@example.com", "timeZone": "UTC"},
        "attendees": [
            {"name": "Sam", "email": "sam@example.com", "timeZone": "Europe/Berlin"},
            {"name": "Kai", "email": "kai@example.com"},
        ],
        "location": "https://meet.example.com/abc",
        "additionalNotes": "Bring the deck",
        "metadata": {"source": "website"},
    }
