"""Anthropic (Claude) provider using the official async SDK."""

import anthropic

from rendevu.credentials import CREDENTIALS
from rendevu.llm.provider import MAX_TOKENS, BaseChatProvider, GenerationError

DEFAULT_MODEL = "claude-sonnet-4-20250514"


class AnthropicProvider(BaseChatProvider):
    """
    Claude-backed provider.

    Claude has no JSON response mode, so the reply text is searched for the
    first JSON object.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_MODEL,
        max_tokens: int = MAX_TOKENS,
    ):
        """
        Initialize the Anthropic provider.

        Args:
            api_key: Anthropic API key. If not provided, uses ANTHROPIC_API_KEY.
            model: Model to use (default: claude-sonnet-4-20250514)
            max_tokens: Output size limit per request
        """
        self.api_key = api_key or CREDENTIALS["anthropic"].get()
        if not self.api_key:
            raise ValueError(
                "Anthropic API key required. Set ANTHROPIC_API_KEY env var or pass api_key."
            )
        self.model = model
        self.max_tokens = max_tokens
        self._client = anthropic.AsyncAnthropic(api_key=self.api_key)

    @property
    def name(self) -> str:
        return "anthropic"

    async def _chat(self, system: str, prompt: str) -> str:
        response = await self._client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            system=system,
            messages=[{"role": "user", "content": prompt}],
        )

        content = response.content[0] if response.content else None
        if content is None or content.type != "text" or not content.text:
            raise GenerationError("Unexpected response type from Claude")
        return content.text
