from pydantic import BaseModel, Field, field_validator


class GenerateRequest(BaseModel):
    """Request payload for the generate endpoint.

    Attributes:
        prompt: User's prompt, non-empty after trimming.
    """

    prompt: str = Field(..., min_length=1)

    @field_validator("prompt", mode="before")
    @classmethod
    def strip_prompt(cls, v: str) -> str:
        """Strip whitespace from prompt before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class GenerateResponse(BaseModel):
    """Complete generated text for one prompt."""

    text: str


class ErrorResponse(BaseModel):
    """Error payload returned with a non-2xx status.

    Carries no classification beyond "generation failed".
    """

    error: str
