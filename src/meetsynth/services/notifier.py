"""Email dispatch of summaries with per-recipient outcome tracking."""

import asyncio
import logging
from datetime import UTC, datetime

from meetsynth.domain.delivery import DispatchResult, MailMessage, RecipientResult
from meetsynth.domain.summary import Summary
from meetsynth.errors import (
    NotFoundError,
    ServiceMisconfiguredError,
    UpstreamServiceError,
    ValidationError,
)
from meetsynth.infrastructure.mail_transport import SMTPMailTransport
from meetsynth.repositories.delivery_log_repo import DeliveryLogRepository
from meetsynth.repositories.summary_repo import SummaryRepository
from meetsynth.services.email_renderer import (
    RenderedEmail,
    render_summary_email,
    render_test_email,
)

logger = logging.getLogger(__name__)


def _breaks_header(address: str) -> bool:
    return "\r" in address or "\n" in address


class SummaryNotifier:
    """Sends a stored summary to many recipients and logs the dispatch."""

    def __init__(
        self,
        summary_repo: SummaryRepository,
        delivery_log_repo: DeliveryLogRepository,
        transport: SMTPMailTransport,
    ) -> None:
        self.summary_repo = summary_repo
        self.delivery_log_repo = delivery_log_repo
        self.transport = transport

    def _require_transport(self) -> None:
        if not self.transport.is_configured:
            logger.warning("Email credentials not configured")
            raise ServiceMisconfiguredError("Email credentials are not configured")

    async def _send_one(self, email: str, rendered: RenderedEmail) -> RecipientResult:
        """Send to a single recipient, capturing failure instead of raising."""
        message = MailMessage(
            recipient=email,
            subject=rendered.subject,
            html_body=rendered.html_body,
            text_body=rendered.text_body,
        )
        try:
            message_id = await self.transport.send(message)
        except Exception as e:
            logger.error(f"Failed to send email to {email}: {e}")
            return RecipientResult(email=email, success=False, error=str(e) or type(e).__name__)
        return RecipientResult(email=email, success=True, message_id=message_id)

    async def send(
        self,
        summary_id: int,
        recipient_emails: list[str],
        subject: str | None = None,
        message: str | None = None,
    ) -> DispatchResult:
        """Email a summary to every recipient and record one delivery log.

        Sends run concurrently and independently: a failing recipient is
        recorded in the result and never stops the others. Recipients are
        used as given, duplicates included.

        Raises:
            ValidationError: If the recipient list is empty or has blank or multi-line entries
            ServiceMisconfiguredError: If the transport has no credentials
            NotFoundError: If the summary does not exist
        """
        if not recipient_emails:
            raise ValidationError("recipientEmails must be a non-empty list")
        if any(not email or not email.strip() for email in recipient_emails):
            raise ValidationError("recipientEmails must not contain blank addresses")
        if any(_breaks_header(email) for email in recipient_emails):
            raise ValidationError("recipientEmails must not contain line breaks")

        self._require_transport()

        model = await self.summary_repo.get_by_id(summary_id)
        if model is None:
            raise NotFoundError(f"No summary found with ID {summary_id}")
        summary = Summary.from_model(model)

        rendered = render_summary_email(
            summary,
            sent_at=datetime.now(UTC),
            subject=subject,
            message=message,
        )

        results = await asyncio.gather(
            *(self._send_one(email, rendered) for email in recipient_emails)
        )
        dispatch = DispatchResult(summary_id=summary_id, results=list(results))

        await self.delivery_log_repo.append(
            summary_id=summary_id,
            recipient_emails=recipient_emails,
            status=dispatch.status,
        )

        logger.info(
            f"Dispatched summary {summary_id}: "
            f"{dispatch.successful_sends}/{dispatch.total_recipients} sent"
        )
        return dispatch

    async def send_test(self, address: str) -> str:
        """Send a configuration test email to one address.

        Returns:
            The Message-ID of the sent email

        Raises:
            ValidationError: If the address is blank or spans lines
            ServiceMisconfiguredError: If the transport has no credentials
            UpstreamServiceError: If sending fails
        """
        if not address or not address.strip():
            raise ValidationError("testEmail is required")
        if _breaks_header(address):
            raise ValidationError("testEmail must not contain line breaks")

        self._require_transport()

        rendered = render_test_email()
        message = MailMessage(
            recipient=address.strip(),
            subject=rendered.subject,
            html_body=rendered.html_body,
            text_body=rendered.text_body,
        )
        try:
            return await self.transport.send(message)
        except OSError as e:
            logger.error(f"Test email to {address} failed: {e}")
            raise UpstreamServiceError(f"Failed to send test email: {e}") from e
