"""Pydantic schemas for API request/response models.

JSON field names are camelCase; Python attributes stay snake_case.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serializing to camelCase and accepting either case."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# --- Summaries ---


class GenerateRequest(CamelModel):
    """Request to generate a summary. ``customPrompt`` may be empty."""

    text: str
    custom_prompt: str


class EditSummaryRequest(CamelModel):
    """Request to store an edited summary."""

    edited_summary: str


class SummaryResponse(CamelModel):
    """Response schema for a stored summary."""

    id: int
    original_text: str
    custom_prompt: str
    generated_summary: str
    edited_summary: str | None = None
    effective_summary: str
    document_type: str
    created_at: datetime
    updated_at: datetime


class SummaryDetailResponse(CamelModel):
    """Response schema wrapping a single summary."""

    summary: SummaryResponse


class SummaryListResponse(CamelModel):
    """Response schema for the summary list."""

    summaries: list[SummaryResponse]
    count: int


class EditSummaryResponse(CamelModel):
    message: str
    summary_id: int


class MessageResponse(CamelModel):
    message: str


# --- Email ---


class SendEmailRequest(CamelModel):
    """Request to email a summary to several recipients."""

    summary_id: int
    recipient_emails: list[str] = Field(default_factory=list)
    subject: str | None = None
    message: str | None = None


class RecipientResultResponse(CamelModel):
    """Outcome for one recipient."""

    email: str
    success: bool
    message_id: str | None = None
    error: str | None = None


class SendEmailResponse(CamelModel):
    """Aggregate dispatch outcome."""

    message: str
    total_recipients: int
    successful_sends: int
    failed_sends: int
    results: list[RecipientResultResponse]
    warnings: str | None = None


class DeliveryLogResponse(CamelModel):
    """Response schema for one delivery log row."""

    id: int
    summary_id: int
    recipient_emails: str
    sent_at: datetime
    status: str


class DeliveryLogListResponse(CamelModel):
    email_logs: list[DeliveryLogResponse]
    count: int


class EmailTestRequest(CamelModel):
    test_email: str


class EmailTestResponse(CamelModel):
    message: str
    message_id: str
