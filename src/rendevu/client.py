"""
Cal.com API client.

Wraps the Cal.com v2 REST API. Every call performs exactly one HTTP request
and returns an ApiResult; timeouts, network failures and malformed bodies are
reported as error results instead of raised.

API Reference: https://cal.com/docs/api-reference/v2
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from rendevu.config import CALCOM_API_BASE, CALCOM_API_VERSION, DEFAULT_TIMEOUT, CalcomConfig
from rendevu.result import (
    INVALID_RESPONSE,
    NETWORK_ERROR,
    PARSE_ERROR,
    TIMEOUT,
    ApiResult,
)

logger = logging.getLogger(__name__)


class CalcomClient:
    """Async client for the Cal.com v2 API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = CALCOM_API_BASE,
        api_version: str = CALCOM_API_VERSION,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._api_version = api_version
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_config(cls, config: CalcomConfig, **kwargs: Any) -> CalcomClient:
        return cls(
            api_key=config.api_key,
            base_url=config.base_url,
            api_version=config.api_version,
            **kwargs,
        )

    @property
    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "cal-api-version": self._api_version,
            "Content-Type": "application/json",
        }

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> ApiResult:
        url = f"{self._base_url}{path}"
        query = {k: v for k, v in (params or {}).items() if v is not None}
        logger.debug(f"Cal.com request: {method} {path}")

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as http:
                response = await http.request(
                    method,
                    url,
                    headers=self._headers,
                    params=query or None,
                    json=body,
                )
        except httpx.TimeoutException:
            logger.warning(f"Cal.com request timed out: {method} {path}")
            return ApiResult.failure("Request timeout", TIMEOUT)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.warning(f"Cal.com network error on {method} {path}: {e}")
            return ApiResult.failure(str(e) or "Unknown error occurred", NETWORK_ERROR)

        try:
            data = response.json()
        except ValueError:
            logger.warning(
                f"Cal.com returned a non-JSON body (HTTP {response.status_code}) for {path}"
            )
            return ApiResult.failure("Invalid JSON response from API", PARSE_ERROR)

        if not response.is_success:
            return self._error_from_status(response, data)

        if not isinstance(data, dict) or "status" not in data:
            logger.warning(f"Cal.com response for {path} has no status field")
            return ApiResult.failure("Invalid response structure from API", INVALID_RESPONSE)

        return ApiResult.from_payload(data)

    def _error_from_status(self, response: httpx.Response, data: Any) -> ApiResult:
        """Map a non-2xx response, preferring the message and code the API supplied."""
        error_data = data if isinstance(data, dict) else {}
        nested = error_data.get("error")
        if isinstance(nested, dict):
            error_data = {**nested, **{k: v for k, v in error_data.items() if k != "error"}}

        message = error_data.get("message") or (
            f"HTTP {response.status_code}: {response.reason_phrase}"
        )
        code = error_data.get("code") or str(response.status_code)
        logger.warning(f"Cal.com API error {code}: {message}")
        return ApiResult.failure(str(message), str(code))

    # --- Schedules ---

    async def list_schedules(self) -> ApiResult:
        """Get all schedules for the authenticated user."""
        return await self._request("GET", "/schedules")

    async def get_schedule(self, schedule_id: int) -> ApiResult:
        return await self._request("GET", f"/schedules/{schedule_id}")

    async def create_schedule(self, data: dict[str, Any]) -> ApiResult:
        return await self._request("POST", "/schedules", body=data)

    async def update_schedule(self, schedule_id: int, data: dict[str, Any]) -> ApiResult:
        return await self._request("PATCH", f"/schedules/{schedule_id}", body=data)

    async def delete_schedule(self, schedule_id: int) -> ApiResult:
        return await self._request("DELETE", f"/schedules/{schedule_id}")

    # --- Event Types ---

    async def list_event_types(self) -> ApiResult:
        """Get all event types for the authenticated user."""
        return await self._request("GET", "/event-types")

    async def get_event_type(self, event_type_id: int) -> ApiResult:
        return await self._request("GET", f"/event-types/{event_type_id}")

    async def create_event_type(self, data: dict[str, Any]) -> ApiResult:
        return await self._request("POST", "/event-types", body=data)

    async def update_event_type(self, event_type_id: int, data: dict[str, Any]) -> ApiResult:
        return await self._request("PATCH", f"/event-types/{event_type_id}", body=data)

    async def delete_event_type(self, event_type_id: int) -> ApiResult:
        return await self._request("DELETE", f"/event-types/{event_type_id}")

    # --- Bookings ---

    async def list_bookings(
        self,
        status: str | None = None,
        event_type_id: int | None = None,
        attendee_email: str | None = None,
    ) -> ApiResult:
        """List bookings, optionally filtered by status, event type or attendee."""
        params = {
            "status": status,
            "eventTypeId": event_type_id,
            "attendeeEmail": attendee_email,
        }
        return await self._request("GET", "/bookings", params=params)

    async def get_booking(self, booking_uid: str) -> ApiResult:
        return await self._request("GET", f"/bookings/{booking_uid}")

    async def create_booking(self, data: dict[str, Any]) -> ApiResult:
        return await self._request("POST", "/bookings", body=data)

    async def reschedule_booking(
        self,
        booking_uid: str,
        start: str,
        rescheduling_reason: str | None = None,
    ) -> ApiResult:
        data: dict[str, Any] = {"start": start}
        if rescheduling_reason is not None:
            data["reschedulingReason"] = rescheduling_reason
        return await self._request("POST", f"/bookings/{booking_uid}/reschedule", body=data)

    async def cancel_booking(
        self,
        booking_uid: str,
        cancellation_reason: str | None = None,
    ) -> ApiResult:
        """Cancel a booking. An absent reason is omitted, never sent as an empty string."""
        data: dict[str, Any] = {}
        if cancellation_reason is not None:
            data["cancellationReason"] = cancellation_reason
        return await self._request("POST", f"/bookings/{booking_uid}/cancel", body=data)

    # --- Slots ---

    async def get_available_slots(
        self,
        start: str,
        end: str,
        event_type_id: int | None = None,
        event_type_slug: str | None = None,
        username: str | None = None,
        time_zone: str | None = None,
    ) -> ApiResult:
        """Get available slots for an event type within a date range."""
        params = {
            "eventTypeId": event_type_id,
            "eventTypeSlug": event_type_slug,
            "username": username,
            "start": start,
            "end": end,
            "timeZone": time_zone,
        }
        return await self._request("GET", "/slots", params=params)

    # --- Profile ---

    async def get_me(self) -> ApiResult:
        return await self._request("GET", "/me")

    async def update_me(self, data: dict[str, Any]) -> ApiResult:
        return await self._request("PATCH", "/me", body=data)

    # --- OAuth Clients ---

    async def list_oauth_clients(self) -> ApiResult:
        return await self._request("GET", "/oauth-clients")

    async def get_oauth_client(self, client_id: str) -> ApiResult:
        return await self._request("GET", f"/oauth-clients/{client_id}")

    async def create_oauth_client(self, data: dict[str, Any]) -> ApiResult:
        return await self._request("POST", "/oauth-clients", body=data)

    async def update_oauth_client(self, client_id: str, data: dict[str, Any]) -> ApiResult:
        return await self._request("PATCH", f"/oauth-clients/{client_id}", body=data)

    async def delete_oauth_client(self, client_id: str) -> ApiResult:
        return await self._request("DELETE", f"/oauth-clients/{client_id}")
