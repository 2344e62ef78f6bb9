"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy import text

from meetsynth.api.v1.router import router as api_router
from meetsynth.config import Settings, get_settings
from meetsynth.errors import MeetSynthError, ValidationError
from meetsynth.infrastructure.generation_client import GenerationClient
from meetsynth.infrastructure.mail_transport import SMTPMailTransport

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

settings = get_settings()


def build_generation_client(app_settings: Settings) -> GenerationClient:
    """Create the generation client from settings."""
    if not app_settings.openai_api_key:
        logger.warning("OPENAI_API_KEY is not set; summary generation is disabled")
    return GenerationClient(
        api_key=app_settings.openai_api_key,
        model=app_settings.generation_model,
        base_url=app_settings.openai_base_url,
        temperature=app_settings.generation_temperature,
        max_tokens=app_settings.generation_max_tokens,
    )


def build_mail_transport(app_settings: Settings) -> SMTPMailTransport:
    """Create the SMTP transport from settings."""
    if not app_settings.smtp_username or not app_settings.smtp_password:
        logger.warning("SMTP credentials are not set; email dispatch is disabled")
    return SMTPMailTransport(
        host=app_settings.smtp_host,
        port=app_settings.smtp_port,
        username=app_settings.smtp_username,
        password=app_settings.smtp_password,
        sender=app_settings.sender_address,
        use_tls=app_settings.smtp_use_tls,
        timeout_seconds=app_settings.smtp_timeout_seconds,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    from meetsynth.infrastructure.database import engine, init_db

    logger.info("Starting MeetSynth application...")
    logger.info(f"Environment: {settings.environment}")

    await init_db()
    app.state.generation_client = build_generation_client(settings)
    app.state.mail_transport = build_mail_transport(settings)

    yield

    await app.state.generation_client.close()
    await engine.dispose()
    logger.info("Shutting down MeetSynth application...")


async def meetsynth_error_handler(request: Request, exc: MeetSynthError) -> JSONResponse:
    """Render service errors as a kind-plus-message body."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(exc.to_dict(), status_code=exc.status_code)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as validation errors (400)."""
    fields = sorted(
        {".".join(str(part) for part in err["loc"] if part != "body") for err in exc.errors()}
    )
    error = ValidationError(f"Missing or invalid fields: {', '.join(fields) or 'body'}")
    return JSONResponse(error.to_dict(), status_code=error.status_code)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    docs_kwargs = {}
    if settings.is_production:
        docs_kwargs = {"docs_url": None, "redoc_url": None, "openapi_url": None}

    app = FastAPI(
        title="MeetSynth",
        description="AI-generated summaries with multi-recipient email delivery",
        version="0.1.0",
        lifespan=lifespan,
        **docs_kwargs,
    )

    app.add_exception_handler(MeetSynthError, meetsynth_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Include routers
    app.include_router(api_router)

    @app.get("/health")
    async def health_check() -> JSONResponse:
        """Lightweight health check with DB connectivity test."""
        from meetsynth.infrastructure.database import async_session_factory

        try:
            async with async_session_factory() as session:
                await session.execute(text("SELECT 1"))
            return JSONResponse({"status": "healthy", "database": "connected"})
        except Exception as e:
            logger.warning(f"Health check failed: {e}")
            return JSONResponse(
                {"status": "unhealthy", "database": "disconnected"},
                status_code=503,
            )

    return app


# Create app instance
app = create_app()
