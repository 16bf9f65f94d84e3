"""
HTTP surface: Cal.com webhook receiver and direct AI generation routes.

Routes:
    POST /webhook/calcom    - dispatch a Cal.com lifecycle event
    POST /ai/summary        - meeting summary
    POST /ai/scheduling     - scheduling suggestion
    POST /ai/email          - booking email
    POST /ai/brief          - pre-meeting brief
    GET  /ai/health         - provider status
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ValidationError
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from rendevu.llm.factory import get_default_provider
from rendevu.llm.models import (
    EmailGenerationRequest,
    MeetingBriefRequest,
    MeetingSummaryRequest,
    SchedulingSuggestionRequest,
)
from rendevu.llm.provider import AIProvider, GenerationError
from rendevu.webhook.handler import WebhookHandler
from rendevu.webhook.models import WebhookPayload

logger = logging.getLogger(__name__)


async def _read_json(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        return None


def _missing_fields(error: ValidationError) -> str:
    fields = []
    for item in error.errors():
        name = ".".join(str(part) for part in item["loc"])
        if name and name not in fields:
            fields.append(name)
    return ", ".join(fields)


def create_http_app(
    provider: AIProvider | None = None,
    handler: WebhookHandler | None = None,
) -> Starlette:
    """
    Build the Starlette app.

    Args:
        provider: AI provider for the /ai routes; defaults to the provider
            configured by AI_PROVIDER.
        handler: Webhook dispatcher; defaults to one backed by ``provider``.

    Raises:
        ValueError: If no provider is given and the configured one cannot
            be constructed.
    """
    if provider is None:
        provider = handler.provider if handler is not None else get_default_provider()
    if handler is None:
        handler = WebhookHandler(provider)

    async def calcom_webhook(request: Request) -> JSONResponse:
        body = await _read_json(request)
        if not isinstance(body, dict) or "triggerEvent" not in body or "payload" not in body:
            return JSONResponse({"error": "Invalid webhook payload"}, status_code=400)

        try:
            webhook = WebhookPayload.model_validate(body)
        except ValidationError as e:
            return JSONResponse(
                {"error": "Invalid webhook payload", "detail": _missing_fields(e)},
                status_code=400,
            )

        logger.info(f"Received Cal.com webhook: {webhook.trigger_event.value}")
        result = await handler.handle(webhook.trigger_event, webhook.payload)
        return JSONResponse(result.to_dict(), status_code=200 if result.success else 500)

    def ai_route(
        request_model: type[BaseModel],
        generate: Callable[[Any], Awaitable[Any]],
    ) -> Callable[[Request], Awaitable[JSONResponse]]:
        async def endpoint(request: Request) -> JSONResponse:
            body = await _read_json(request)
            if not isinstance(body, dict):
                return JSONResponse(
                    {"error": "Request body must be a JSON object"}, status_code=400
                )
            try:
                params = request_model.model_validate(body)
            except ValidationError as e:
                return JSONResponse(
                    {"error": f"Missing required fields: {_missing_fields(e)}"},
                    status_code=400,
                )

            try:
                response = await generate(params)
            except GenerationError as e:
                logger.error(f"{request.url.path} generation failed: {e}")
                return JSONResponse({"error": str(e)}, status_code=500)
            except Exception as e:
                logger.exception(f"{request.url.path} provider call failed: {e}")
                return JSONResponse(
                    {"error": str(e) or "Internal server error"}, status_code=500
                )
            return JSONResponse(response.to_json_dict())

        return endpoint

    async def health(request: Request) -> JSONResponse:
        return JSONResponse(
            {
                "status": "ok",
                "provider": provider.name,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        )

    routes = [
        Route("/webhook/calcom", calcom_webhook, methods=["POST"]),
        Route(
            "/ai/summary",
            ai_route(MeetingSummaryRequest, provider.generate_meeting_summary),
            methods=["POST"],
        ),
        Route(
            "/ai/scheduling",
            ai_route(SchedulingSuggestionRequest, provider.generate_scheduling_suggestion),
            methods=["POST"],
        ),
        Route(
            "/ai/email",
            ai_route(EmailGenerationRequest, provider.generate_email),
            methods=["POST"],
        ),
        Route(
            "/ai/brief",
            ai_route(MeetingBriefRequest, provider.generate_meeting_brief),
            methods=["POST"],
        ),
        Route("/ai/health", health, methods=["GET"]),
    ]

    return Starlette(routes=routes)
