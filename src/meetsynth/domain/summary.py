"""Summary domain entity."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any


def effective_summary(generated_summary: str, edited_summary: str | None) -> str:
    """Return the authoritative summary text: the edit when present, else the generated text."""
    if edited_summary is not None:
        return edited_summary
    return generated_summary


@dataclass
class Summary:
    """Represents a generated summary and its optional user edit."""

    id: int | None
    original_text: str
    custom_prompt: str
    generated_summary: str
    document_type: str
    model: str
    edited_summary: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def effective_summary(self) -> str:
        """Text used for display and dispatch."""
        return effective_summary(self.generated_summary, self.edited_summary)

    @classmethod
    def from_model(cls, model: Any) -> "Summary":
        """Create Summary from a SummaryModel row."""
        return cls(
            id=model.id,
            original_text=model.original_text,
            custom_prompt=model.custom_prompt,
            generated_summary=model.generated_summary,
            document_type=model.document_type,
            model=model.model,
            edited_summary=model.edited_summary,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
