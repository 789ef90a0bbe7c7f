"""Session state shared by the submission flow and the display controller."""

from dataclasses import dataclass

from aichatbot.chat.conversation import Conversation


@dataclass
class DisplayState:
    """Transient state of one in-progress reveal.

    ``revealed_prefix`` is always a prefix of ``full_text`` and only grows
    while ``is_active``.
    """

    full_text: str
    revealed_prefix: str = ""
    is_active: bool = True


class SessionState:
    """Manages chat state for a user session.

    Attributes:
        conversation: Append-only message log.
        prompt: Current text of the input field.
        loading: True while an exchange is in progress (relay call or reveal).
        display: The active reveal, if any.
    """

    def __init__(self) -> None:
        self.conversation = Conversation()
        self.prompt: str = ""
        self.loading: bool = False
        self.display: DisplayState | None = None

    @property
    def is_revealing(self) -> bool:
        return self.display is not None and self.display.is_active

    @property
    def is_pending(self) -> bool:
        """Relay call in flight and no reveal started yet."""
        return self.loading and not self.is_revealing
