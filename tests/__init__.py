"""Test package for AiChatBot.

Unit tests for isolated logic and integration tests for the relay endpoint.

Structure:
    - unit/: Individual function and class tests
    - integration/: HTTP-level tests against the FastAPI app

Leverages pytest with pytest-check for soft assertions.
"""
