"""FastAPI relay endpoint for the chat UI.

Endpoints:
    - GET /health: Service health status
    - POST /api/generate: Forward a prompt upstream and return the full text
"""

from aichatbot.api.app import create_app

__all__ = ["create_app"]
