"""OpenAI provider, called through LiteLLM's unified async completion API."""

import litellm

from rendevu.credentials import CREDENTIALS
from rendevu.llm.provider import MAX_TOKENS, BaseChatProvider, GenerationError

DEFAULT_MODEL = "gpt-4o"


class OpenAIProvider(BaseChatProvider):
    """
    OpenAI-backed provider.

    Requests JSON mode so the reply is a bare object; the same JSON extraction
    as other providers still runs on it.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_MODEL,
        max_tokens: int = MAX_TOKENS,
    ):
        """
        Initialize the OpenAI provider.

        Args:
            api_key: OpenAI API key. If not provided, uses OPENAI_API_KEY.
            model: Model to use (default: gpt-4o)
            max_tokens: Output size limit per request
        """
        self.api_key = api_key or CREDENTIALS["openai"].get()
        if not self.api_key:
            raise ValueError(
                "OpenAI API key required. Set OPENAI_API_KEY env var or pass api_key."
            )
        self.model = model
        self.max_tokens = max_tokens

    @property
    def name(self) -> str:
        return "openai"

    async def _chat(self, system: str, prompt: str) -> str:
        response = await litellm.acompletion(
            model=self.model,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": prompt},
            ],
            max_tokens=self.max_tokens,
            response_format={"type": "json_object"},
            api_key=self.api_key,
        )

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise GenerationError("No response from OpenAI")
        return content
