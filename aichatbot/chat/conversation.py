"""Conversation store: an append-only ordered log of chat messages."""

from collections.abc import Iterator
from enum import Enum

from pydantic import BaseModel, ConfigDict


class Sender(str, Enum):
    """Author of a chat message."""

    USER = "user"
    AI = "ai"


class Message(BaseModel):
    """A single chat message. Immutable once created.

    Attributes:
        sender: Who wrote the message (user or ai).
        text: The message text.
    """

    model_config = ConfigDict(frozen=True)

    sender: Sender
    text: str


class Conversation:
    """Ordered sequence of messages for one page session.

    Supports append and read only. Ordering is insertion order.
    """

    def __init__(self) -> None:
        self._messages: list[Message] = []

    def append(self, message: Message) -> None:
        self._messages.append(message)

    def add(self, sender: Sender, text: str) -> Message:
        """Create a message and append it.

        Returns:
            The appended message.
        """
        message = Message(sender=sender, text=text)
        self.append(message)
        return message

    def snapshot(self) -> tuple[Message, ...]:
        """Return the full ordered sequence as it is right now."""
        return tuple(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self.snapshot())
