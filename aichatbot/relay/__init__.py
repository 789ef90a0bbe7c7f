"""Relay to the upstream generation service.

Responsibilities:
    - Loading and validating the upstream credential at startup
    - Forwarding a prompt to Gemini and returning the full text

Maintains clean separation from the HTTP layer.
"""

from aichatbot.relay.config import RelayConfig, get_relay_config
from aichatbot.relay.generator import GenerationError, GenerationService

__all__ = ["GenerationError", "GenerationService", "RelayConfig", "get_relay_config"]
