"""Provider selection."""

from __future__ import annotations

import logging
from enum import Enum

from rendevu.config import load_ai_config
from rendevu.llm.anthropic import AnthropicProvider
from rendevu.llm.openai import OpenAIProvider
from rendevu.llm.provider import AIProvider

logger = logging.getLogger(__name__)


class ProviderType(str, Enum):
    ANTHROPIC = "anthropic"
    OPENAI = "openai"


PROVIDERS: dict[ProviderType, type[AIProvider]] = {
    ProviderType.ANTHROPIC: AnthropicProvider,
    ProviderType.OPENAI: OpenAIProvider,
}


def create_provider(
    provider: ProviderType | str = ProviderType.ANTHROPIC,
    api_key: str | None = None,
    model: str | None = None,
) -> AIProvider:
    """
    Construct the provider named by ``provider``.

    Raises:
        ValueError: If the provider is unknown or its API key is missing.
    """
    try:
        provider_type = ProviderType(provider)
    except ValueError:
        raise ValueError(f"Unknown AI provider: {provider}") from None

    kwargs: dict[str, str] = {}
    if api_key:
        kwargs["api_key"] = api_key
    if model:
        kwargs["model"] = model
    instance = PROVIDERS[provider_type](**kwargs)
    logger.info(f"Using AI provider: {instance.name}")
    return instance


def get_default_provider() -> AIProvider:
    """Provider from AI_PROVIDER / AI_MODEL, defaulting to Anthropic."""
    config = load_ai_config()
    return create_provider(config.provider, model=config.model)
