"""AI provider contract shared by every generative-text backend."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from rendevu.llm import prompts
from rendevu.llm.models import (
    EmailGenerationRequest,
    EmailGenerationResponse,
    MeetingBriefRequest,
    MeetingBriefResponse,
    MeetingSummaryRequest,
    MeetingSummaryResponse,
    SchedulingSuggestionRequest,
    SchedulingSuggestionResponse,
)

logger = logging.getLogger(__name__)

MAX_TOKENS = 4096

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class GenerationError(Exception):
    """Raised when a backend returns no usable output. Not retried."""


def extract_json(text: str) -> dict[str, Any]:
    """Parse the outermost ``{...}`` span in ``text``.

    Models often wrap JSON in prose or code fences; everything before the
    first ``{`` and after the last ``}`` is ignored.
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        raise GenerationError("No JSON found in response")
    try:
        return json.loads(text[start : end + 1])
    except json.JSONDecodeError as e:
        raise GenerationError(f"Invalid JSON in response: {e}") from e


class AIProvider(ABC):
    """
    Four-operation generation contract.

    Callers depend only on this interface; which backend runs it is chosen
    once at startup by ``rendevu.llm.factory``.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider identifier, reported by health checks."""

    @abstractmethod
    async def generate_meeting_summary(
        self, request: MeetingSummaryRequest
    ) -> MeetingSummaryResponse: ...

    @abstractmethod
    async def generate_scheduling_suggestion(
        self, request: SchedulingSuggestionRequest
    ) -> SchedulingSuggestionResponse: ...

    @abstractmethod
    async def generate_email(self, request: EmailGenerationRequest) -> EmailGenerationResponse: ...

    @abstractmethod
    async def generate_meeting_brief(
        self, request: MeetingBriefRequest
    ) -> MeetingBriefResponse: ...


class BaseChatProvider(AIProvider):
    """Implements the contract on top of a single system+user chat round trip.

    Subclasses set up their SDK client in ``__init__`` and implement ``_chat``.
    """

    model: str

    @abstractmethod
    async def _chat(self, system: str, prompt: str) -> str:
        """Send one request and return the text of the reply."""

    async def _generate(
        self, system: str, prompt: str, response_model: type[ResponseT]
    ) -> ResponseT:
        text = await self._chat(system, prompt)
        data = extract_json(text)
        try:
            return response_model.model_validate(data)
        except ValidationError as e:
            logger.warning(f"{self.name} returned JSON that is not a {response_model.__name__}")
            raise GenerationError(
                f"Response did not match {response_model.__name__}: {e.error_count()} error(s)"
            ) from e

    async def generate_meeting_summary(
        self, request: MeetingSummaryRequest
    ) -> MeetingSummaryResponse:
        return await self._generate(
            prompts.SUMMARY_SYSTEM_PROMPT,
            prompts.format_summary_prompt(request),
            MeetingSummaryResponse,
        )

    async def generate_scheduling_suggestion(
        self, request: SchedulingSuggestionRequest
    ) -> SchedulingSuggestionResponse:
        return await self._generate(
            prompts.SCHEDULING_SYSTEM_PROMPT,
            prompts.format_scheduling_prompt(request),
            SchedulingSuggestionResponse,
        )

    async def generate_email(self, request: EmailGenerationRequest) -> EmailGenerationResponse:
        return await self._generate(
            prompts.EMAIL_SYSTEM_PROMPT,
            prompts.format_email_prompt(request),
            EmailGenerationResponse,
        )

    async def generate_meeting_brief(self, request: MeetingBriefRequest) -> MeetingBriefResponse:
        return await self._generate(
            prompts.BRIEF_SYSTEM_PROMPT,
            prompts.format_brief_prompt(request),
            MeetingBriefResponse,
        )
