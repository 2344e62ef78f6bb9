"""Delivery log repository for the email audit trail."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from meetsynth.domain.delivery import DeliveryStatus, join_recipients
from meetsynth.infrastructure.models import DeliveryLogModel, utcnow


class DeliveryLogRepository:
    """Append-only repository for DeliveryLog rows."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session."""
        self.session = session

    async def append(
        self,
        summary_id: int,
        recipient_emails: list[str],
        status: DeliveryStatus,
    ) -> DeliveryLogModel:
        """Record one dispatch attempt."""
        log = DeliveryLogModel(
            summary_id=summary_id,
            recipient_emails=join_recipients(recipient_emails),
            status=status,
            sent_at=utcnow(),
        )
        self.session.add(log)
        await self.session.flush()
        return log

    async def list_for_summary(self, summary_id: int) -> list[DeliveryLogModel]:
        """List logs for a summary ID, most recent first.

        Logs of deleted summaries are still returned.
        """
        stmt = (
            select(DeliveryLogModel)
            .where(DeliveryLogModel.summary_id == summary_id)
            .order_by(DeliveryLogModel.sent_at.desc(), DeliveryLogModel.id.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
