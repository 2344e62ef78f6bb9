"""Tests for DeliveryLogRepository."""

import pytest

from meetsynth.repositories.delivery_log_repo import DeliveryLogRepository
from meetsynth.repositories.summary_repo import SummaryRepository


class TestDeliveryLogRepository:
    @pytest.mark.asyncio
    async def test_append_joins_recipients(self, test_session):
        repo = DeliveryLogRepository(test_session)

        log = await repo.append(7, ["a@example.com", "b@example.com"], "sent")

        assert log.id is not None
        assert log.summary_id == 7
        assert log.recipient_emails == "a@example.com, b@example.com"
        assert log.status == "sent"
        assert log.sent_at is not None

    @pytest.mark.asyncio
    async def test_list_for_summary_most_recent_first(self, test_session):
        repo = DeliveryLogRepository(test_session)
        first = await repo.append(1, ["a@example.com"], "sent")
        second = await repo.append(1, ["b@example.com"], "partial")
        await repo.append(2, ["c@example.com"], "sent")

        logs = await repo.list_for_summary(1)

        assert [log.id for log in logs] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_list_for_unknown_summary_is_empty(self, test_session):
        repo = DeliveryLogRepository(test_session)
        assert await repo.list_for_summary(42) == []

    @pytest.mark.asyncio
    async def test_logs_survive_summary_deletion(self, test_session):
        summary_repo = SummaryRepository(test_session)
        log_repo = DeliveryLogRepository(test_session)
        summary = await summary_repo.create(
            original_text="Text.",
            custom_prompt="Be brief",
            generated_summary="Generated.",
            document_type="general",
            model="test-model",
        )
        await log_repo.append(summary.id, ["a@example.com"], "sent")

        await summary_repo.delete(summary.id)

        logs = await log_repo.list_for_summary(summary.id)
        assert len(logs) == 1
        assert logs[0].summary_id == summary.id
