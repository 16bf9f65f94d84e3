"""Tests for the Cal.com API client, using httpx.MockTransport."""

import json

import httpx
import pytest

from rendevu.client import CalcomClient
from rendevu.config import CalcomConfig
from rendevu.result import INVALID_RESPONSE, NETWORK_ERROR, PARSE_ERROR, TIMEOUT


def ok(data=None):
    return httpx.Response(200, json={"status": "success", "data": data})


class Recorder:
    """Transport handler that records requests and replies with a fixed response."""

    def __init__(self, response=None):
        self.response = response or ok({})
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_body(self):
        return json.loads(self.last.content) if self.last.content else None


class TestRequestShape:
    """Tests for headers, URLs and bodies."""

    async def test_headers(self, make_client):
        """Every request carries bearer auth, API version and JSON content type."""
        recorder = Recorder()
        await make_client(recorder).get_me()

        headers = recorder.last.headers
        assert headers["authorization"] == "Bearer test-api-key"
        assert headers["cal-api-version"] == "2024-06-11"
        assert headers["content-type"] == "application/json"

    async def test_from_config(self):
        """from_config applies base URL and API version."""
        recorder = Recorder()
        config = CalcomConfig(
            api_key="k", base_url="https://cal.internal/v2/", api_version="2025-01-01"
        )
        client = CalcomClient.from_config(config, transport=httpx.MockTransport(recorder))

        await client.list_schedules()

        assert str(recorder.last.url) == "https://cal.internal/v2/schedules"
        assert recorder.last.headers["cal-api-version"] == "2025-01-01"

    @pytest.mark.parametrize(
        "call,method,path",
        [
            (lambda c: c.list_schedules(), "GET", "/v2/schedules"),
            (lambda c: c.get_schedule(3), "GET", "/v2/schedules/3"),
            (lambda c: c.update_schedule(3, {"name": "x"}), "PATCH", "/v2/schedules/3"),
            (lambda c: c.delete_schedule(3), "DELETE", "/v2/schedules/3"),
            (lambda c: c.create_event_type({"title": "t"}), "POST", "/v2/event-types"),
            (lambda c: c.get_booking("abc"), "GET", "/v2/bookings/abc"),
            (lambda c: c.update_me({"bio": "b"}), "PATCH", "/v2/me"),
            (lambda c: c.delete_oauth_client("cl_1"), "DELETE", "/v2/oauth-clients/cl_1"),
        ],
    )
    async def test_routes(self, make_client, call, method, path):
        """Operations map to the documented verb and path."""
        recorder = Recorder()
        await call(make_client(recorder))

        assert recorder.last.method == method
        assert recorder.last.url.path == path

    async def test_list_bookings_without_filters_sends_no_query(self, make_client):
        recorder = Recorder()
        await make_client(recorder).list_bookings()

        assert recorder.last.url.query == b""

    async def test_list_bookings_filters(self, make_client):
        """Only provided filters are sent, with camelCase names."""
        recorder = Recorder()
        await make_client(recorder).list_bookings(status="upcoming", event_type_id=5)

        params = recorder.last.url.params
        assert params["status"] == "upcoming"
        assert params["eventTypeId"] == "5"
        assert "attendeeEmail" not in params

    async def test_cancel_without_reason_sends_empty_object(self, make_client):
        recorder = Recorder()
        await make_client(recorder).cancel_booking("bk_1")

        assert recorder.last.method == "POST"
        assert recorder.last.url.path == "/v2/bookings/bk_1/cancel"
        assert recorder.last_body() == {}

    async def test_cancel_with_reason(self, make_client):
        recorder = Recorder()
        await make_client(recorder).cancel_booking("bk_1", cancellation_reason="Sick")

        assert recorder.last_body() == {"cancellationReason": "Sick"}

    async def test_reschedule(self, make_client):
        recorder = Recorder()
        await make_client(recorder).reschedule_booking(
            "bk_1", "2025-01-16T10:00:00Z", rescheduling_reason="Conflict"
        )

        assert recorder.last.url.path == "/v2/bookings/bk_1/reschedule"
        assert recorder.last_body() == {
            "start": "2025-01-16T10:00:00Z",
            "reschedulingReason": "Conflict",
        }

    async def test_slots_query(self, make_client):
        recorder = Recorder()
        await make_client(recorder).get_available_slots(
            start="2025-01-15", end="2025-01-16", event_type_id=9, time_zone="UTC"
        )

        assert recorder.last.url.path == "/v2/slots"
        assert dict(recorder.last.url.params) == {
            "eventTypeId": "9",
            "start": "2025-01-15",
            "end": "2025-01-16",
            "timeZone": "UTC",
        }


class TestResponses:
    """Tests for mapping responses and failures into ApiResult."""

    async def test_success(self, make_client):
        result = await make_client(Recorder(ok([{"id": 1}]))).list_event_types()

        assert result.is_success
        assert result.data == [{"id": 1}]

    async def test_timeout(self, make_client):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        result = await make_client(handler).list_schedules()

        assert result.error.code == TIMEOUT
        assert result.error.message == "Request timeout"

    async def test_network_error(self, make_client):
        def handler(request):
            raise httpx.ConnectError("Connection refused", request=request)

        result = await make_client(handler).list_schedules()

        assert result.error.code == NETWORK_ERROR
        assert "Connection refused" in result.error.message

    @pytest.mark.parametrize("status", [200, 500])
    async def test_non_json_body(self, make_client, status):
        """Unparseable bodies are parse errors regardless of status."""
        response = httpx.Response(status, text="<html>oops</html>")

        result = await make_client(Recorder(response)).get_me()

        assert result.error.code == PARSE_ERROR
        assert result.error.message == "Invalid JSON response from API"

    async def test_http_error_without_details(self, make_client):
        """Status code and reason phrase stand in for a missing message and code."""
        result = await make_client(Recorder(httpx.Response(404, json={}))).get_schedule(1)

        assert result.error.code == "404"
        assert result.error.message == "HTTP 404: Not Found"

    async def test_http_error_passes_upstream_code_through(self, make_client):
        response = httpx.Response(
            400,
            json={"status": "error", "error": {"code": "BadRequestException", "message": "Bad"}},
        )

        result = await make_client(Recorder(response)).create_booking({})

        assert result.error.code == "BadRequestException"
        assert result.error.message == "Bad"

    async def test_http_error_top_level_message(self, make_client):
        response = httpx.Response(401, json={"message": "Invalid API key"})

        result = await make_client(Recorder(response)).get_me()

        assert result.error.code == "401"
        assert result.error.message == "Invalid API key"

    async def test_missing_status_field(self, make_client):
        response = httpx.Response(200, json={"data": []})

        result = await make_client(Recorder(response)).list_schedules()

        assert result.error.code == INVALID_RESPONSE
        assert result.error.message == "Invalid response structure from API"

    async def test_non_object_body(self, make_client):
        result = await make_client(Recorder(httpx.Response(200, json=[1, 2]))).list_schedules()

        assert result.error.code == INVALID_RESPONSE

    async def test_error_envelope_on_2xx(self, make_client):
        response = httpx.Response(
            200, json={"status": "error", "error": {"code": "CONFLICT", "message": "Taken"}}
        )

        result = await make_client(Recorder(response)).create_booking({})

        assert result.error.code == "CONFLICT"

    async def test_envelope_extras_preserved(self, make_client):
        """Keys beyond status/data, such as pagination, survive unchanged."""
        response = httpx.Response(
            200,
            json={
                "status": "success",
                "data": [{"id": 1}],
                "pagination": {"totalItems": 40, "hasNextPage": True},
            },
        )

        result = await make_client(Recorder(response)).list_bookings()

        assert result.to_dict() == {
            "status": "success",
            "data": [{"id": 1}],
            "pagination": {"totalItems": 40, "hasNextPage": True},
        }

    async def test_unrecognized_status_kept(self, make_client):
        """A status other than success or error is returned as reported."""
        response = httpx.Response(200, json={"status": "pending", "data": {"id": 3}})

        result = await make_client(Recorder(response)).get_booking("bk_3")

        assert result.is_success
        assert result.status == "pending"
        assert result.data == {"id": 3}

    async def test_invalid_url(self):
        """A malformed base URL is reported as a network error, not raised."""
        client = CalcomClient(
            api_key="k",
            base_url="https://cal.test:notaport/v2",
            transport=httpx.MockTransport(Recorder()),
        )

        result = await client.get_me()

        assert result.error.code == NETWORK_ERROR
