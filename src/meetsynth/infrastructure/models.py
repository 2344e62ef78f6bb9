"""SQLAlchemy ORM models."""

from datetime import UTC, datetime

from sqlalchemy import DateTime, Index, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.types import TypeDecorator


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


def _as_utc(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class UTCDateTime(TypeDecorator):
    """Timezone-aware datetime column that always reads back in UTC.

    SQLite drops the offset on storage, so values are normalised to UTC on
    the way in and have UTC re-attached on the way out.
    """

    impl = DateTime
    cache_ok = True

    def __init__(self) -> None:
        super().__init__(timezone=True)

    def process_bind_param(self, value: datetime | None, dialect) -> datetime | None:
        return _as_utc(value)

    def process_result_value(self, value: datetime | None, dialect) -> datetime | None:
        return _as_utc(value)


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class SummaryModel(Base):
    """SQLAlchemy model for summaries table.

    ``edited_summary`` is the only column changed after creation; writing it
    also moves ``updated_at``.
    """

    __tablename__ = "summaries"
    __table_args__ = (Index("ix_summaries_created_at", "created_at"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    original_text: Mapped[str] = mapped_column(Text, nullable=False)
    custom_prompt: Mapped[str] = mapped_column(Text, nullable=False)
    generated_summary: Mapped[str] = mapped_column(Text, nullable=False)
    edited_summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    document_type: Mapped[str] = mapped_column(String(20), default="general", nullable=False)
    model: Mapped[str] = mapped_column(String(100), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(), default=utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime(), default=utcnow, nullable=False
    )


class DeliveryLogModel(Base):
    """SQLAlchemy model for email_logs table.

    Status:
        - 'sent': every recipient accepted the message
        - 'partial': at least one recipient failed (including all of them)

    ``summary_id`` is not a foreign key; logs stay in place after their
    summary is deleted.
    """

    __tablename__ = "email_logs"
    __table_args__ = (Index("ix_email_logs_summary_id", "summary_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    summary_id: Mapped[int] = mapped_column(Integer, nullable=False)
    recipient_emails: Mapped[str] = mapped_column(Text, nullable=False)
    sent_at: Mapped[datetime] = mapped_column(
        UTCDateTime(), default=utcnow, nullable=False
    )
    status: Mapped[str] = mapped_column(String(20), default="sent", nullable=False)
