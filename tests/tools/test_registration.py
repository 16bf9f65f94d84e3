"""Tests for tool registration and credential handling across all Cal.com tools."""

from unittest.mock import AsyncMock, patch

from fastmcp import FastMCP

from rendevu.credentials import CREDENTIALS
from rendevu.result import ApiResult
from rendevu.server import create_server
from rendevu.tools import register_all_tools

EXPECTED_TOOLS = [
    "calcom_list_schedules",
    "calcom_get_schedule",
    "calcom_create_schedule",
    "calcom_update_schedule",
    "calcom_delete_schedule",
    "calcom_list_event_types",
    "calcom_get_event_type",
    "calcom_create_event_type",
    "calcom_update_event_type",
    "calcom_delete_event_type",
    "calcom_list_bookings",
    "calcom_get_booking",
    "calcom_create_booking",
    "calcom_cancel_booking",
    "calcom_reschedule_booking",
    "calcom_get_available_slots",
    "calcom_get_profile",
    "calcom_update_profile",
    "calcom_list_oauth_clients",
    "calcom_get_oauth_client",
    "calcom_create_oauth_client",
    "calcom_update_oauth_client",
    "calcom_delete_oauth_client",
]


class TestToolRegistration:
    """Tests for tool registration."""

    def test_all_tools_registered(self, mcp: FastMCP):
        """All 23 Cal.com tools are registered."""
        register_all_tools(mcp)

        assert sorted(mcp._tool_manager._tools) == sorted(EXPECTED_TOOLS)

    def test_help_includes_key_instructions(self):
        """The Cal.com help text says where to create an API key."""
        help_text = CREDENTIALS["calcom"].help

        assert help_text.startswith("Set CALCOM_API_KEY environment variable")
        assert "Settings > Developer > API Keys" in help_text

    def test_create_server(self, mock_client):
        """create_server returns a named server with every tool."""
        mcp = create_server(mock_client)

        assert mcp.name == "rendevu"
        for tool_name in EXPECTED_TOOLS:
            assert tool_name in mcp._tool_manager._tools


class TestCredentialHandling:
    """Tests for credential handling."""

    async def test_no_credentials_returns_error(self, mcp: FastMCP, tool_fn):
        """Tools without credentials return a helpful error."""
        register_all_tools(mcp)

        result = await tool_fn("calcom_list_bookings")()

        assert "not configured" in result["error"]
        assert "CALCOM_API_KEY" in result["help"]

    async def test_blank_credential_is_not_configured(self, mcp: FastMCP, tool_fn, monkeypatch):
        """An empty API key counts as missing."""
        monkeypatch.setenv("CALCOM_API_KEY", "")
        register_all_tools(mcp)

        result = await tool_fn("calcom_get_profile")()

        assert "not configured" in result["error"]

    async def test_client_built_from_environment(self, mcp: FastMCP, tool_fn, monkeypatch):
        """With CALCOM_API_KEY set, tools build a client from the environment."""
        monkeypatch.setenv("CALCOM_API_KEY", "env-key")
        monkeypatch.setenv("CALCOM_API_BASE_URL", "https://cal.internal/v2")
        register_all_tools(mcp)

        with patch(
            "rendevu.client.CalcomClient.get_me",
            new=AsyncMock(return_value=ApiResult.success({"username": "olivia"})),
        ):
            result = await tool_fn("calcom_get_profile")()

        assert result == {"data": {"username": "olivia"}}

    async def test_injected_client_used(self, mcp: FastMCP, tool_fn, mock_client):
        """An injected client is used even without environment credentials."""
        register_all_tools(mcp, mock_client)

        await tool_fn("calcom_list_schedules")()

        mock_client.list_schedules.assert_awaited_once()
