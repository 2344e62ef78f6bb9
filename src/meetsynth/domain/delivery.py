"""Delivery domain entities: per-recipient outcomes and dispatch aggregates."""

from dataclasses import dataclass, field
from typing import Literal

DeliveryStatus = Literal["sent", "partial"]

STATUS_SENT: DeliveryStatus = "sent"
STATUS_PARTIAL: DeliveryStatus = "partial"

RECIPIENT_SEPARATOR = ", "


def join_recipients(recipient_emails: list[str]) -> str:
    """Join a recipient list into the single stored value, order and duplicates kept."""
    return RECIPIENT_SEPARATOR.join(recipient_emails)


def delivery_status(failed_count: int) -> DeliveryStatus:
    """Status for a dispatch: any failure at all makes it partial."""
    return STATUS_SENT if failed_count == 0 else STATUS_PARTIAL


@dataclass
class MailMessage:
    """A single outgoing message for one recipient."""

    recipient: str
    subject: str
    html_body: str
    text_body: str


@dataclass
class RecipientResult:
    """Outcome of sending to one recipient."""

    email: str
    success: bool
    message_id: str | None = None
    error: str | None = None


@dataclass
class DispatchResult:
    """Aggregate outcome of one dispatch to many recipients."""

    summary_id: int
    results: list[RecipientResult] = field(default_factory=list)

    @property
    def total_recipients(self) -> int:
        return len(self.results)

    @property
    def successful_sends(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def failed_sends(self) -> int:
        return sum(1 for r in self.results if not r.success)

    @property
    def failed_emails(self) -> list[str]:
        return [r.email for r in self.results if not r.success]

    @property
    def status(self) -> DeliveryStatus:
        return delivery_status(self.failed_sends)

    @property
    def warnings(self) -> str | None:
        """Human-readable warning listing failed addresses, or None."""
        failed = self.failed_emails
        if not failed:
            return None
        return f"Some emails failed to send: {', '.join(failed)}"
