"""Integration tests for the relay endpoint working as a system.

Coverage:
    - POST /api/generate through the real FastAPI app and middleware
    - CORS policy for the configured UI origin
    - Relay client against the app over ASGI transport
    - Live Gemini call (when GEMINI_API_KEY is configured)
"""
