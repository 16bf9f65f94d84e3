"""Generative-text providers for meeting summaries, emails, briefs and scheduling help."""

from rendevu.llm.anthropic import AnthropicProvider
from rendevu.llm.factory import ProviderType, create_provider, get_default_provider
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
from rendevu.llm.openai import OpenAIProvider
from rendevu.llm.provider import AIProvider, BaseChatProvider, GenerationError, extract_json

__all__ = [
    # Contract
    "AIProvider",
    "BaseChatProvider",
    "GenerationError",
    "extract_json",
    # Providers
    "AnthropicProvider",
    "OpenAIProvider",
    "ProviderType",
    "create_provider",
    "get_default_provider",
    # Models
    "MeetingSummaryRequest",
    "MeetingSummaryResponse",
    "SchedulingSuggestionRequest",
    "SchedulingSuggestionResponse",
    "EmailGenerationRequest",
    "EmailGenerationResponse",
    "MeetingBriefRequest",
    "MeetingBriefResponse",
]
