"""Chat session logic, independent of any UI toolkit.

Responsibilities:
    - Append-only conversation store
    - Response-display controller (typing effect with stop)
    - Submission flow enforcing one exchange at a time
    - HTTP client for the relay endpoint
"""

from aichatbot.chat.conversation import Conversation, Message, Sender
from aichatbot.chat.display import (
    STOPPED_SUFFIX,
    TICK_INTERVAL,
    AsyncioTimer,
    ResponseDisplayController,
)
from aichatbot.chat.relay_client import RelayClient, RelayError
from aichatbot.chat.state import DisplayState, SessionState
from aichatbot.chat.submission import ERROR_MESSAGE, SubmissionFlow

__all__ = [
    "ERROR_MESSAGE",
    "STOPPED_SUFFIX",
    "TICK_INTERVAL",
    "AsyncioTimer",
    "Conversation",
    "DisplayState",
    "Message",
    "RelayClient",
    "RelayError",
    "ResponseDisplayController",
    "Sender",
    "SessionState",
    "SubmissionFlow",
]
