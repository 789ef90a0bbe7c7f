"""Relay configuration with environment variable loading.

Pydantic-based configuration for the Gemini relay. A missing credential is a
startup-time misconfiguration: constructing the config raises before the
server accepts any request.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()


class RelayConfig(BaseModel):
    """Configuration for the Gemini relay.

    Attributes:
        gemini_api_key: API key for the upstream generation service.
        model_name: Gemini model identifier.
        allowed_origin: The only browser origin accepted by CORS.
    """

    gemini_api_key: str = Field(
        default_factory=lambda: os.getenv("GEMINI_API_KEY", ""),
        validate_default=True,
        description="API key for the Gemini API",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
        description="Model to use",
    )
    allowed_origin: str = Field(
        default_factory=lambda: os.getenv("ALLOWED_ORIGIN", "http://localhost:3000"),
        validate_default=True,
        description="UI origin allowed to call the relay",
    )

    @field_validator("gemini_api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError("GEMINI_API_KEY is required. Set it in .env")
        return v.strip()

    @field_validator("allowed_origin")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Browsers send the Origin header without a trailing slash."""
        return v.strip().rstrip("/")


def get_relay_config() -> RelayConfig:
    """Create relay configuration from environment.

    Returns:
        Configured RelayConfig instance.

    Raises:
        ValidationError: If GEMINI_API_KEY is not set.
    """
    return RelayConfig()
