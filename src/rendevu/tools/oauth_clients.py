"""
Cal.com OAuth client tools.

OAuth clients belong to an organization and let platform customers manage
users and bookings on their behalf.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Literal

from pydantic import AfterValidator, Field

from rendevu.tools.common import ToolParams, check_url, client_resolver, format_result

if TYPE_CHECKING:
    from fastmcp import FastMCP

    from rendevu.client import CalcomClient

Url = Annotated[str, AfterValidator(check_url)]

OAuthPermission = Literal[
    "EVENT_TYPE_READ",
    "EVENT_TYPE_WRITE",
    "BOOKING_READ",
    "BOOKING_WRITE",
    "SCHEDULE_READ",
    "SCHEDULE_WRITE",
    "APPS_READ",
    "APPS_WRITE",
    "PROFILE_READ",
    "PROFILE_WRITE",
    "*",
]

SECRET_WARNING = (
    "OAuth client created successfully. Save these credentials securely - "
    "the secret cannot be retrieved later."
)


class OAuthClientId(ToolParams):
    client_id: str = Field(min_length=1)


class _OAuthClientSettings(ToolParams):
    logo: Url | None = None
    booking_redirect_uri: Url | None = None
    booking_cancel_redirect_uri: Url | None = None
    booking_reschedule_redirect_uri: Url | None = None
    are_emails_enabled: bool | None = None
    are_default_event_types_enabled: bool | None = None
    are_calendar_events_enabled: bool | None = None


class CreateOAuthClientParams(_OAuthClientSettings):
    name: str = Field(min_length=1)
    redirect_uris: list[Url] = Field(min_length=1)
    permissions: list[OAuthPermission] = Field(min_length=1)


class UpdateOAuthClientParams(_OAuthClientSettings):
    client_id: str = Field(min_length=1)
    name: str | None = Field(default=None, min_length=1)
    redirect_uris: list[Url] | None = None


def register_tools(mcp: FastMCP, client: CalcomClient | None = None) -> None:
    """Register Cal.com OAuth client tools with the MCP server."""
    get_client = client_resolver(client)

    @mcp.tool()
    async def calcom_list_oauth_clients() -> dict:
        """
        List all OAuth clients for the authenticated organization.

        Returns:
            Dict with list of OAuth clients or error
        """
        calcom = get_client()
        if isinstance(calcom, dict):
            return calcom
        return format_result(await calcom.list_oauth_clients())

    @mcp.tool()
    async def calcom_get_oauth_client(client_id: str) -> dict:
        """
        Get an OAuth client by ID, including permissions and redirect URIs.

        Args:
            client_id: The unique identifier of the OAuth client

        Returns:
            Dict with OAuth client details or error
        """
        params = OAuthClientId(client_id=client_id)
        calcom = get_client()
        if isinstance(calcom, dict):
            return calcom
        return format_result(await calcom.get_oauth_client(params.client_id))

    @mcp.tool()
    async def calcom_create_oauth_client(
        name: str,
        redirect_uris: list[str],
        permissions: list[str],
        logo: str | None = None,
        booking_redirect_uri: str | None = None,
        booking_cancel_redirect_uri: str | None = None,
        booking_reschedule_redirect_uri: str | None = None,
        are_emails_enabled: bool | None = None,
        are_default_event_types_enabled: bool | None = None,
        are_calendar_events_enabled: bool | None = None,
    ) -> dict:
        """
        Create a new OAuth client.

        The response includes the client secret, which cannot be retrieved again.

        Args:
            name: Name of the OAuth client application
            redirect_uris: Valid redirect URIs for OAuth callbacks
            permissions: Permission scopes, e.g. ["BOOKING_READ"]; "*" grants all
            logo: URL of the application logo
            booking_redirect_uri: Redirect after a successful booking
            booking_cancel_redirect_uri: Redirect after a cancellation
            booking_reschedule_redirect_uri: Redirect after a reschedule
            are_emails_enabled: Enable email notifications
            are_default_event_types_enabled: Create default event types for managed users
            are_calendar_events_enabled: Create calendar events for managed users

        Returns:
            Dict with client ID and secret, or error
        """
        params = CreateOAuthClientParams(
            name=name,
            redirect_uris=redirect_uris,
            permissions=permissions,
            logo=logo,
            booking_redirect_uri=booking_redirect_uri,
            booking_cancel_redirect_uri=booking_cancel_redirect_uri,
            booking_reschedule_redirect_uri=booking_reschedule_redirect_uri,
            are_emails_enabled=are_emails_enabled,
            are_default_event_types_enabled=are_default_event_types_enabled,
            are_calendar_events_enabled=are_calendar_events_enabled,
        )
        calcom = get_client()
        if isinstance(calcom, dict):
            return calcom
        result = await calcom.create_oauth_client(params.body())
        return format_result(result, message=SECRET_WARNING)

    @mcp.tool()
    async def calcom_update_oauth_client(
        client_id: str,
        name: str | None = None,
        logo: str | None = None,
        redirect_uris: list[str] | None = None,
        booking_redirect_uri: str | None = None,
        booking_cancel_redirect_uri: str | None = None,
        booking_reschedule_redirect_uri: str | None = None,
        are_emails_enabled: bool | None = None,
        are_default_event_types_enabled: bool | None = None,
        are_calendar_events_enabled: bool | None = None,
    ) -> dict:
        """
        Update an OAuth client. Permissions cannot be changed after creation.

        Args:
            client_id: The unique identifier of the OAuth client to update
            name: New name
            logo: New logo URL
            redirect_uris: New redirect URIs (replaces existing)
            booking_redirect_uri: New redirect after a successful booking
            booking_cancel_redirect_uri: New redirect after a cancellation
            booking_reschedule_redirect_uri: New redirect after a reschedule
            are_emails_enabled: Enable/disable email notifications
            are_default_event_types_enabled: Enable/disable default event types
            are_calendar_events_enabled: Enable/disable calendar event creation

        Returns:
            Dict with updated OAuth client or error
        """
        params = UpdateOAuthClientParams(
            client_id=client_id,
            name=name,
            logo=logo,
            redirect_uris=redirect_uris,
            booking_redirect_uri=booking_redirect_uri,
            booking_cancel_redirect_uri=booking_cancel_redirect_uri,
            booking_reschedule_redirect_uri=booking_reschedule_redirect_uri,
            are_emails_enabled=are_emails_enabled,
            are_default_event_types_enabled=are_default_event_types_enabled,
            are_calendar_events_enabled=are_calendar_events_enabled,
        )
        calcom = get_client()
        if isinstance(calcom, dict):
            return calcom
        result = await calcom.update_oauth_client(
            params.client_id, params.body(exclude={"client_id"})
        )
        return format_result(result)

    @mcp.tool()
    async def calcom_delete_oauth_client(client_id: str) -> dict:
        """
        Delete an OAuth client. This invalidates every token issued to it.

        Args:
            client_id: The unique identifier of the OAuth client to delete

        Returns:
            Dict with confirmation or error
        """
        params = OAuthClientId(client_id=client_id)
        calcom = get_client()
        if isinstance(calcom, dict):
            return calcom
        result = await calcom.delete_oauth_client(params.client_id)
        return format_result(
            result, message=f"OAuth client {params.client_id} deleted successfully"
        )
