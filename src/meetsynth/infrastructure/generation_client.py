"""OpenAI-compatible chat completion client for summary generation."""

import logging

from openai import AsyncOpenAI, OpenAIError

from meetsynth.errors import ServiceMisconfiguredError, UpstreamServiceError
from meetsynth.services.prompt_builder import GenerationRequest

logger = logging.getLogger(__name__)

EMPTY_COMPLETION_TEXT = "No summary generated"


class GenerationClient:
    """Async client for an OpenAI-compatible chat completions endpoint."""

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str | None = None,
        temperature: float = 0.3,
        max_tokens: int = 2048,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Provider API key; an empty key leaves the client unconfigured
            model: Model name sent with every request
            base_url: Alternative OpenAI-compatible endpoint (e.g. Groq)
            temperature: Sampling temperature
            max_tokens: Maximum output tokens
        """
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.client: AsyncOpenAI | None = None
        if api_key:
            self.client = AsyncOpenAI(api_key=api_key, base_url=base_url or None)

    @property
    def is_configured(self) -> bool:
        """Check that credentials are present."""
        return self.client is not None

    async def generate(self, request: GenerationRequest) -> str:
        """Run one chat completion and return its text.

        Raises:
            ServiceMisconfiguredError: If no API key is configured
            UpstreamServiceError: If the provider call fails
        """
        if self.client is None:
            raise ServiceMisconfiguredError("Generation API key is not configured")

        try:
            completion = await self.client.chat.completions.create(
                model=self.model,
                messages=request.messages,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except (OpenAIError, TimeoutError) as e:
            logger.error(f"Generation request failed: {e}")
            raise UpstreamServiceError(f"Failed to generate summary: {e}") from e

        content = ""
        if completion.choices:
            content = (completion.choices[0].message.content or "").strip()
        return content or EMPTY_COMPLETION_TEXT

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self.client is not None:
            await self.client.close()
