"""AiChatBot - minimal chat relay for the Gemini generative-language API.

Combines FastAPI for the relay endpoint, google-genai for upstream generation,
NiceGUI for the chat interface, and Pydantic for data validation.

Components:
    - api: HTTP relay endpoint
    - relay: upstream configuration and generation service
    - chat: conversation store, response-display controller, submission flow
    - ui: Markdown rendering and the chat page
    - models: Request/response schemas
"""

__version__ = "0.1.0"
