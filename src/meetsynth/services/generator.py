"""Summary generation pipeline: truncate, classify, prompt, generate, persist."""

import logging

from meetsynth.domain.summary import Summary
from meetsynth.errors import ServiceMisconfiguredError, ValidationError
from meetsynth.infrastructure.generation_client import EMPTY_COMPLETION_TEXT, GenerationClient
from meetsynth.repositories.summary_repo import SummaryRepository
from meetsynth.services.classifier import classify_text, keyword_hits
from meetsynth.services.prompt_builder import build_request
from meetsynth.services.truncator import DEFAULT_MAX_CHARS, is_truncated, truncate_text

logger = logging.getLogger(__name__)


class SummaryGenerator:
    """Turns submitted text into a persisted Summary.

    Every step before the repository write is side-effect free, so a failure
    anywhere up to and including the generation call leaves no row behind.
    Identical submissions are not deduplicated; each call makes one
    generation request and one new row.
    """

    def __init__(
        self,
        summary_repo: SummaryRepository,
        client: GenerationClient,
        max_input_chars: int = DEFAULT_MAX_CHARS,
    ) -> None:
        self.summary_repo = summary_repo
        self.client = client
        self.max_input_chars = max_input_chars

    async def generate(self, text: str, custom_prompt: str | None) -> Summary:
        """Generate and store a summary.

        Args:
            text: Raw submitted text
            custom_prompt: User instructions, may be empty

        Returns:
            The stored Summary with its ID and timestamps

        Raises:
            ValidationError: If text is blank
            ServiceMisconfiguredError: If the generation client has no credentials
            UpstreamServiceError: If the generation call fails
        """
        if not text or not text.strip():
            raise ValidationError("text is required")

        if not self.client.is_configured:
            logger.warning("Generation API key not configured")
            raise ServiceMisconfiguredError("Generation API key is not configured")

        bounded = truncate_text(text, self.max_input_chars)
        if is_truncated(bounded):
            logger.info(f"Truncated input from {len(text)} to {len(bounded)} characters")

        document_type = classify_text(bounded)
        resume_hits, meeting_hits = keyword_hits(bounded)
        logger.info(
            f"Classified input as '{document_type}' "
            f"(resume hits={resume_hits}, meeting hits={meeting_hits})"
        )

        request = build_request(bounded, document_type, custom_prompt)
        generated = (await self.client.generate(request)).strip() or EMPTY_COMPLETION_TEXT

        model = await self.summary_repo.create(
            original_text=bounded,
            custom_prompt=request.instructions,
            generated_summary=generated,
            document_type=document_type,
            model=self.client.model,
        )
        logger.info(f"Stored summary {model.id}")
        return Summary.from_model(model)
