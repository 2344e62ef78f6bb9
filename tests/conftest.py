"""Pytest configuration and fixtures."""

import asyncio
import smtplib
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from meetsynth.api.dependencies import get_generation_client, get_mail_transport
from meetsynth.domain.delivery import MailMessage
from meetsynth.infrastructure.database import get_session
from meetsynth.infrastructure.models import Base
from meetsynth.main import app
from meetsynth.services.prompt_builder import GenerationRequest

# Test database URL (use in-memory SQLite for tests)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


class FakeGenerationClient:
    """In-memory stand-in for GenerationClient."""

    model = "test-model"

    def __init__(self) -> None:
        self.response = "Generated summary."
        self.error: Exception | None = None
        self.configured = True
        self.requests: list[GenerationRequest] = []

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def generate(self, request: GenerationRequest) -> str:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response


class FakeMailTransport:
    """In-memory stand-in for SMTPMailTransport.

    Addresses in ``failing`` are refused the way an SMTP server would.
    """

    def __init__(self) -> None:
        self.failing: set[str] = set()
        self.configured = True
        self.sent: list[MailMessage] = []
        self.attempted: list[str] = []

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def send(self, message: MailMessage) -> str:
        self.attempted.append(message.recipient)
        await asyncio.sleep(0)
        if message.recipient in self.failing:
            raise smtplib.SMTPRecipientsRefused(
                {message.recipient: (550, b"Mailbox unavailable")}
            )
        self.sent.append(message)
        return f"<{len(self.sent)}@meetsynth.test>"


@pytest.fixture
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    session_factory = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with session_factory() as session:
        yield session


@pytest.fixture
def generation_client() -> FakeGenerationClient:
    return FakeGenerationClient()


@pytest.fixture
def mail_transport() -> FakeMailTransport:
    return FakeMailTransport()


@pytest.fixture
async def client(
    test_session: AsyncSession,
    generation_client: FakeGenerationClient,
    mail_transport: FakeMailTransport,
) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client wired to the test session and fakes."""

    async def override_session() -> AsyncGenerator[AsyncSession, None]:
        try:
            yield test_session
            await test_session.commit()
        except Exception:
            await test_session.rollback()
            raise

    app.dependency_overrides[get_session] = override_session
    app.dependency_overrides[get_generation_client] = lambda: generation_client
    app.dependency_overrides[get_mail_transport] = lambda: mail_transport

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
