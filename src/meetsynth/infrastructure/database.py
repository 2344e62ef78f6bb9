"""SQLAlchemy async database setup."""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from meetsynth.config import get_settings
from meetsynth.infrastructure.models import Base

settings = get_settings()

# SQLite picks its own pool class; only size the pool for server databases
engine_kwargs: dict[str, Any] = {}
if not settings.database_url.startswith("sqlite"):
    engine_kwargs = {"pool_size": 5, "max_overflow": 10}

engine = create_async_engine(
    settings.database_url,
    echo=False,
    **engine_kwargs,
)

# Session factory
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def init_db() -> None:
    """Create tables that do not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Dependency for FastAPI to get database session."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
