"""Tests for summary and delivery domain helpers."""

from meetsynth.domain.delivery import (
    STATUS_PARTIAL,
    STATUS_SENT,
    DispatchResult,
    RecipientResult,
    delivery_status,
    join_recipients,
)
from meetsynth.domain.summary import Summary, effective_summary


def _make_summary(**kwargs) -> Summary:
    defaults = {
        "id": 1,
        "original_text": "Text.",
        "custom_prompt": "Be brief",
        "generated_summary": "Generated.",
        "document_type": "general",
        "model": "test-model",
    }
    defaults.update(kwargs)
    return Summary(**defaults)


class TestEffectiveSummary:
    def test_generated_when_no_edit(self):
        assert _make_summary().effective_summary == "Generated."

    def test_edit_supersedes_generated(self):
        assert _make_summary(edited_summary="Edited.").effective_summary == "Edited."

    def test_empty_edit_still_supersedes(self):
        # Presence, not truthiness, decides
        assert effective_summary("Generated.", "") == ""

    def test_function_and_property_agree(self):
        summary = _make_summary(edited_summary="Edited.")
        assert summary.effective_summary == effective_summary(
            summary.generated_summary, summary.edited_summary
        )


class TestDeliveryStatus:
    def test_no_failures_is_sent(self):
        assert delivery_status(0) == STATUS_SENT

    def test_any_failure_is_partial(self):
        assert delivery_status(1) == STATUS_PARTIAL
        assert delivery_status(10) == STATUS_PARTIAL

    def test_join_keeps_order_and_duplicates(self):
        assert join_recipients(["b@x.io", "a@x.io", "b@x.io"]) == "b@x.io, a@x.io, b@x.io"


class TestDispatchResult:
    def _results(self, outcomes: list[bool]) -> list[RecipientResult]:
        return [
            RecipientResult(
                email=f"user{i}@example.com",
                success=ok,
                message_id=f"<{i}@test>" if ok else None,
                error=None if ok else "refused",
            )
            for i, ok in enumerate(outcomes)
        ]

    def test_counts_add_up(self):
        for outcomes in ([True], [False], [True, False, True], [False, False], []):
            dispatch = DispatchResult(summary_id=1, results=self._results(outcomes))
            assert dispatch.successful_sends + dispatch.failed_sends == dispatch.total_recipients

    def test_all_success(self):
        dispatch = DispatchResult(summary_id=1, results=self._results([True, True]))
        assert dispatch.status == STATUS_SENT
        assert dispatch.warnings is None

    def test_all_failed_is_partial(self):
        dispatch = DispatchResult(summary_id=1, results=self._results([False, False]))
        assert dispatch.status == STATUS_PARTIAL
        assert dispatch.successful_sends == 0

    def test_warnings_list_failed_addresses(self):
        dispatch = DispatchResult(summary_id=1, results=self._results([True, False]))
        assert dispatch.warnings == "Some emails failed to send: user1@example.com"
