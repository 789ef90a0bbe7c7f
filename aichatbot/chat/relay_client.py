"""HTTP client for the relay endpoint."""

import logging
import os
from typing import Protocol

import httpx

logger = logging.getLogger(__name__)

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5000")
RELAY_TIMEOUT = float(os.getenv("RELAY_TIMEOUT", "120"))


class RelayError(Exception):
    """Generation failed. Callers treat every cause the same way."""


class Relay(Protocol):
    async def generate(self, prompt: str) -> str: ...


class RelayClient:
    """Calls POST /api/generate and returns the complete text."""

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        timeout: float = RELAY_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def generate(self, prompt: str) -> str:
        """Send a prompt to the relay.

        Raises:
            RelayError: On any network, HTTP status, or payload failure.
        """
        async with httpx.AsyncClient(
            base_url=self._base_url, timeout=self._timeout, transport=self._transport
        ) as client:
            try:
                response = await client.post("/api/generate", json={"prompt": prompt})
                response.raise_for_status()
                data = response.json()
            except httpx.HTTPStatusError as e:
                raise RelayError(f"HTTP {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise RelayError(f"Connection failed: {e}") from e
            except ValueError as e:
                raise RelayError(f"Invalid JSON from relay: {e}") from e

        text = data.get("text") if isinstance(data, dict) else None
        if not isinstance(text, str):
            raise RelayError("Relay response has no text")
        return text
