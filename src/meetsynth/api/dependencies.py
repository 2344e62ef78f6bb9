"""FastAPI dependency injection providers."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from meetsynth.config import get_settings
from meetsynth.infrastructure.database import get_session
from meetsynth.infrastructure.generation_client import GenerationClient
from meetsynth.infrastructure.mail_transport import SMTPMailTransport
from meetsynth.repositories.delivery_log_repo import DeliveryLogRepository
from meetsynth.repositories.summary_repo import SummaryRepository
from meetsynth.services.generator import SummaryGenerator
from meetsynth.services.notifier import SummaryNotifier

# Type alias for database session dependency
SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_generation_client(request: Request) -> GenerationClient:
    """Provide the process-wide generation client built at startup."""
    return request.app.state.generation_client


def get_mail_transport(request: Request) -> SMTPMailTransport:
    """Provide the process-wide mail transport built at startup."""
    return request.app.state.mail_transport


GenerationClientDep = Annotated[GenerationClient, Depends(get_generation_client)]
MailTransportDep = Annotated[SMTPMailTransport, Depends(get_mail_transport)]


async def get_summary_repository(
    session: SessionDep,
) -> AsyncGenerator[SummaryRepository, None]:
    """Provide SummaryRepository instance."""
    yield SummaryRepository(session)


async def get_delivery_log_repository(
    session: SessionDep,
) -> AsyncGenerator[DeliveryLogRepository, None]:
    """Provide DeliveryLogRepository instance."""
    yield DeliveryLogRepository(session)


SummaryRepoDep = Annotated[SummaryRepository, Depends(get_summary_repository)]
DeliveryLogRepoDep = Annotated[DeliveryLogRepository, Depends(get_delivery_log_repository)]


def get_summary_generator(
    summary_repo: SummaryRepoDep,
    client: GenerationClientDep,
) -> SummaryGenerator:
    """Provide SummaryGenerator wired to this request's session."""
    return SummaryGenerator(
        summary_repo,
        client,
        max_input_chars=get_settings().max_input_chars,
    )


def get_summary_notifier(
    summary_repo: SummaryRepoDep,
    delivery_log_repo: DeliveryLogRepoDep,
    transport: MailTransportDep,
) -> SummaryNotifier:
    """Provide SummaryNotifier wired to this request's session."""
    return SummaryNotifier(summary_repo, delivery_log_repo, transport)


# Type aliases for commonly used dependencies
GeneratorDep = Annotated[SummaryGenerator, Depends(get_summary_generator)]
NotifierDep = Annotated[SummaryNotifier, Depends(get_summary_notifier)]
