"""FastAPI application factory and configuration.

Relay entry point with lifespan management, middleware,
and router registration.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from aichatbot.api.routes import router as generate_router
from aichatbot.relay.config import RelayConfig, get_relay_config
from aichatbot.relay.generator import GenerationService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    # Startup
    logger.info(f"Starting AiChatBot relay (model: {app.state.generation_service.model})...")
    yield
    # Shutdown
    logger.info("Shutting down AiChatBot relay...")


def create_app(
    config: RelayConfig | None = None,
    service: GenerationService | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Configuration is validated here, so a missing credential stops the
    process before it serves any request.

    Args:
        config: Optional relay configuration. Loads from environment if not provided.
        service: Optional generation service. Built from ``config`` if not provided.

    Returns:
        Configured FastAPI application instance.

    Raises:
        ValidationError: If GEMINI_API_KEY is not set.
    """
    config = config or get_relay_config()

    application = FastAPI(
        title="AiChatBot Relay",
        description=(
            "Relays chat prompts to the Gemini API and returns the complete "
            "generated text."
        ),
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    application.state.generation_service = service or GenerationService(config)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=[config.allowed_origin],
        allow_methods=["POST"],
        allow_headers=["Content-Type"],
    )

    application.include_router(generate_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "aichatbot"}

    return application
