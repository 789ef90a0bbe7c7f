"""Unit tests for individual components in isolation.

Coverage:
    - chat/: Conversation store, display controller, submission flow, relay client
    - relay/: Configuration validation and the Gemini service wrapper
    - ui/: Markdown parsing and rendering

Uses fakes for timers and the relay. No UI harness needed.
"""
