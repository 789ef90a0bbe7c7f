"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Chat message display with a simulated typing effect
    - Stop button while a response is being revealed
    - Markdown rendering with copyable code blocks

Contains minimal business logic. Delegates all state changes to the chat package.
"""
