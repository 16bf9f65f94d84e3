"""Tests for Cal.com OAuth client tools."""

import pytest
from pydantic import ValidationError

from rendevu.result import ApiResult
from rendevu.tools import oauth_clients
from rendevu.tools.oauth_clients import SECRET_WARNING


@pytest.fixture
def oauth_tools(mcp, tool_fn, mock_client):
    oauth_clients.register_tools(mcp, mock_client)
    return tool_fn


class TestCreateOAuthClient:
    """Tests for calcom_create_oauth_client."""

    async def test_create_returns_secret_warning(self, oauth_tools, mock_client):
        mock_client.create_oauth_client.return_value = ApiResult.success(
            {"clientId": "cl_1", "clientSecret": "s3cret"}
        )

        result = await oauth_tools("calcom_create_oauth_client")(
            name="My App",
            redirect_uris=["https://app.example.com/callback"],
            permissions=["BOOKING_READ", "BOOKING_WRITE"],
        )

        assert result["data"]["clientSecret"] == "s3cret"
        assert result["message"] == SECRET_WARNING
        mock_client.create_oauth_client.assert_awaited_once_with(
            {
                "name": "My App",
                "redirectUris": ["https://app.example.com/callback"],
                "permissions": ["BOOKING_READ", "BOOKING_WRITE"],
            }
        )

    @pytest.mark.parametrize(
        "overrides",
        [
            {"redirect_uris": []},
            {"redirect_uris": ["not a url"]},
            {"redirect_uris": ["ftp://example.com/cb"]},
            {"permissions": []},
            {"permissions": ["EVERYTHING"]},
            {"logo": "logo.png"},
        ],
    )
    async def test_invalid_input_rejected(self, oauth_tools, mock_client, overrides):
        kwargs = {
            "name": "My App",
            "redirect_uris": ["https://app.example.com/callback"],
            "permissions": ["*"],
        }
        kwargs.update(overrides)

        with pytest.raises(ValidationError):
            await oauth_tools("calcom_create_oauth_client")(**kwargs)

        mock_client.create_oauth_client.assert_not_awaited()


class TestManageOAuthClients:
    """Tests for list, get, update and delete."""

    async def test_list(self, oauth_tools, mock_client):
        mock_client.list_oauth_clients.return_value = ApiResult.success([{"id": "cl_1"}])

        result = await oauth_tools("calcom_list_oauth_clients")()

        assert result == {"data": [{"id": "cl_1"}]}

    async def test_get_empty_id_rejected(self, oauth_tools, mock_client):
        with pytest.raises(ValidationError):
            await oauth_tools("calcom_get_oauth_client")("")

        mock_client.get_oauth_client.assert_not_awaited()

    async def test_update(self, oauth_tools, mock_client):
        await oauth_tools("calcom_update_oauth_client")("cl_1", are_emails_enabled=False)

        mock_client.update_oauth_client.assert_awaited_once_with(
            "cl_1", {"areEmailsEnabled": False}
        )

    async def test_delete_message(self, oauth_tools, mock_client):
        result = await oauth_tools("calcom_delete_oauth_client")("cl_1")

        assert result["message"] == "OAuth client cl_1 deleted successfully"
