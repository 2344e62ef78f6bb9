"""Email dispatch API endpoints."""

from fastapi import APIRouter

from meetsynth.api.dependencies import DeliveryLogRepoDep, NotifierDep
from meetsynth.api.v1.schemas import (
    DeliveryLogListResponse,
    DeliveryLogResponse,
    EmailTestRequest,
    EmailTestResponse,
    RecipientResultResponse,
    SendEmailRequest,
    SendEmailResponse,
)

router = APIRouter(prefix="/email", tags=["email"])


@router.post(
    "/send",
    response_model=SendEmailResponse,
    response_model_exclude_none=True,
)
async def send_summary_email(
    request: SendEmailRequest,
    notifier: NotifierDep,
) -> SendEmailResponse:
    """Email a summary to every recipient."""
    dispatch = await notifier.send(
        summary_id=request.summary_id,
        recipient_emails=request.recipient_emails,
        subject=request.subject,
        message=request.message,
    )
    return SendEmailResponse(
        message="Email sending completed",
        total_recipients=dispatch.total_recipients,
        successful_sends=dispatch.successful_sends,
        failed_sends=dispatch.failed_sends,
        results=[RecipientResultResponse.model_validate(r) for r in dispatch.results],
        warnings=dispatch.warnings,
    )


@router.get("/logs/{summary_id}", response_model=DeliveryLogListResponse)
async def list_delivery_logs(
    summary_id: int,
    delivery_log_repo: DeliveryLogRepoDep,
) -> DeliveryLogListResponse:
    """List dispatch logs for a summary, most recent first."""
    logs = await delivery_log_repo.list_for_summary(summary_id)
    return DeliveryLogListResponse(
        email_logs=[DeliveryLogResponse.model_validate(log) for log in logs],
        count=len(logs),
    )


@router.post("/test", response_model=EmailTestResponse)
async def send_test_email(
    request: EmailTestRequest,
    notifier: NotifierDep,
) -> EmailTestResponse:
    """Send a test email to verify the mail configuration."""
    message_id = await notifier.send_test(request.test_email)
    return EmailTestResponse(message="Test email sent successfully", message_id=message_id)
