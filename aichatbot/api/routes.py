"""Generate endpoint relaying prompts to the upstream API.

Handles request validation, the upstream call, and uniform error conversion.
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from aichatbot.models.schemas import ErrorResponse, GenerateRequest, GenerateResponse
from aichatbot.relay.generator import GenerationError, GenerationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["generate"])

GENERATION_FAILED = "Something went wrong"


def get_generation_service(request: Request) -> GenerationService:
    """Return the generation service created with the application."""
    return request.app.state.generation_service


@router.post(
    "/generate",
    response_model=GenerateResponse,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
async def generate(
    body: GenerateRequest,
    service: GenerationService = Depends(get_generation_service),
) -> GenerateResponse | JSONResponse:
    """Generate a complete response for a prompt.

    Args:
        body: The prompt payload (JSON).
        service: Upstream generation service.

    Returns:
        GenerateResponse with the full generated text.

    Raises:
        422: Empty or missing prompt.
        500: Upstream generation failed for any reason.
    """
    try:
        text = await service.generate(body.prompt)
    except GenerationError as e:
        logger.error(f"Gemini error: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=GENERATION_FAILED).model_dump(),
        )

    return GenerateResponse(text=text)
