"""Gemini generation service.

Wraps the google-genai async client behind a single ``generate`` call.
Every upstream failure is surfaced as ``GenerationError`` so the HTTP layer
can treat all failures uniformly.
"""

import logging

from google import genai

from aichatbot.relay.config import RelayConfig, get_relay_config

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Raised when the upstream API fails to produce a response."""


class GenerationService:
    """Service for one-shot text generation against Gemini.

    The upstream call is a single blocking request/response; no partial
    delivery and no retries.
    """

    def __init__(self, config: RelayConfig | None = None) -> None:
        """Initialize the generation service.

        Args:
            config: Optional relay configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_relay_config()
        self._client = genai.Client(api_key=self._config.gemini_api_key)

    @property
    def model(self) -> str:
        """Get the model name."""
        return self._config.model_name

    async def generate(self, prompt: str) -> str:
        """Generate the complete response text for a prompt.

        Args:
            prompt: The user's prompt, already validated as non-empty.

        Returns:
            The generated text.

        Raises:
            GenerationError: If the upstream call fails or returns no text.
        """
        try:
            response = await self._client.aio.models.generate_content(
                model=self._config.model_name,
                contents=prompt,
            )
        except Exception as e:
            raise GenerationError(f"Gemini request failed: {e}") from e

        try:
            text = response.text
        except (ValueError, AttributeError) as e:
            raise GenerationError(f"Malformed Gemini response: {e}") from e

        if text is None:
            raise GenerationError("Gemini response contained no text")

        logger.debug(f"Generated {len(text)} characters with {self.model}")
        return text
