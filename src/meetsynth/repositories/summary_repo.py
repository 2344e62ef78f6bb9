"""Summary repository for database operations."""

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from meetsynth.infrastructure.models import SummaryModel, utcnow


class SummaryRepository:
    """Repository for Summary CRUD operations.

    Writes are keyed by primary key with no version check, so concurrent
    edits and deletes resolve as last writer wins.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session."""
        self.session = session

    async def create(
        self,
        original_text: str,
        custom_prompt: str,
        generated_summary: str,
        document_type: str,
        model: str,
    ) -> SummaryModel:
        """Create a new summary with no edit."""
        now = utcnow()
        summary = SummaryModel(
            original_text=original_text,
            custom_prompt=custom_prompt,
            generated_summary=generated_summary,
            edited_summary=None,
            document_type=document_type,
            model=model,
            created_at=now,
            updated_at=now,
        )
        self.session.add(summary)
        await self.session.flush()
        return summary

    async def get_by_id(self, summary_id: int) -> SummaryModel | None:
        """Get a summary by its ID."""
        stmt = select(SummaryModel).where(SummaryModel.id == summary_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_summaries(self) -> list[SummaryModel]:
        """List all summaries, newest first."""
        stmt = select(SummaryModel).order_by(
            SummaryModel.created_at.desc(), SummaryModel.id.desc()
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def count(self) -> int:
        """Get total summary count."""
        stmt = select(func.count(SummaryModel.id))
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def set_edited_summary(self, summary_id: int, edited_summary: str) -> bool:
        """Store a user edit.

        Returns:
            False if no summary has this ID; nothing is written in that case
        """
        stmt = (
            update(SummaryModel)
            .where(SummaryModel.id == summary_id)
            .values(edited_summary=edited_summary, updated_at=utcnow())
        )
        result = await self.session.execute(stmt)
        return result.rowcount > 0

    async def delete(self, summary_id: int) -> bool:
        """Delete a summary permanently.

        Returns:
            False if no summary has this ID
        """
        stmt = delete(SummaryModel).where(SummaryModel.id == summary_id)
        result = await self.session.execute(stmt)
        return result.rowcount > 0
