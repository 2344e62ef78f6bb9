"""Summary API endpoints."""

from fastapi import APIRouter, status

from meetsynth.api.dependencies import GeneratorDep, SummaryRepoDep
from meetsynth.api.v1.schemas import (
    EditSummaryRequest,
    EditSummaryResponse,
    GenerateRequest,
    MessageResponse,
    SummaryDetailResponse,
    SummaryListResponse,
    SummaryResponse,
)
from meetsynth.domain.summary import Summary
from meetsynth.errors import NotFoundError, ValidationError

router = APIRouter(prefix="/summaries", tags=["summaries"])


def _not_found(summary_id: int) -> NotFoundError:
    return NotFoundError(f"No summary found with ID {summary_id}")


@router.post(
    "/generate",
    response_model=SummaryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def generate_summary(
    request: GenerateRequest,
    generator: GeneratorDep,
) -> SummaryResponse:
    """Generate a summary from text and optional instructions."""
    summary = await generator.generate(request.text, request.custom_prompt)
    return SummaryResponse.model_validate(summary)


@router.get("", response_model=SummaryListResponse)
async def list_summaries(summary_repo: SummaryRepoDep) -> SummaryListResponse:
    """List all summaries, newest first."""
    models = await summary_repo.list_summaries()
    summaries = [
        SummaryResponse.model_validate(Summary.from_model(m)) for m in models
    ]
    return SummaryListResponse(summaries=summaries, count=len(summaries))


@router.get("/{summary_id}", response_model=SummaryDetailResponse)
async def get_summary(
    summary_id: int,
    summary_repo: SummaryRepoDep,
) -> SummaryDetailResponse:
    """Get a single summary by ID."""
    model = await summary_repo.get_by_id(summary_id)
    if model is None:
        raise _not_found(summary_id)
    return SummaryDetailResponse(
        summary=SummaryResponse.model_validate(Summary.from_model(model))
    )


@router.put("/{summary_id}", response_model=EditSummaryResponse)
async def edit_summary(
    summary_id: int,
    request: EditSummaryRequest,
    summary_repo: SummaryRepoDep,
) -> EditSummaryResponse:
    """Store an edited version of a summary."""
    if not request.edited_summary.strip():
        raise ValidationError("editedSummary is required")

    updated = await summary_repo.set_edited_summary(summary_id, request.edited_summary)
    if not updated:
        raise _not_found(summary_id)
    return EditSummaryResponse(
        message="Summary updated successfully",
        summary_id=summary_id,
    )


@router.delete("/{summary_id}", response_model=MessageResponse)
async def delete_summary(
    summary_id: int,
    summary_repo: SummaryRepoDep,
) -> MessageResponse:
    """Delete a summary. Its delivery logs are kept."""
    deleted = await summary_repo.delete(summary_id)
    if not deleted:
        raise _not_found(summary_id)
    return MessageResponse(message="Summary deleted successfully")
