"""Submission flow: user input, relay call, and controller invocation.

Enforces one active exchange at a time. While a reveal is running, a second
send is treated as a stop. While a relay call is pending and no reveal has
started, further submissions are ignored.
"""

import logging
from collections.abc import Callable

from aichatbot.chat.conversation import Sender
from aichatbot.chat.display import ResponseDisplayController
from aichatbot.chat.relay_client import Relay, RelayError
from aichatbot.chat.state import SessionState

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "⚠️ Error generating response. Please try again."


class SubmissionFlow:
    """Mediates between the input field, the relay, and the controller."""

    def __init__(
        self,
        state: SessionState,
        relay: Relay,
        controller: ResponseDisplayController,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        """Initialize the flow.

        Args:
            state: Session state, shared with the controller.
            relay: Relay endpoint client.
            controller: Display controller for successful responses.
            on_change: Called whenever the flow changes the conversation or
                the loading flag, before and after the relay call.
        """
        self.state = state
        self.relay = relay
        self.controller = controller
        self.on_change = on_change

    def _changed(self) -> None:
        if self.on_change:
            self.on_change()

    async def submit(self, prompt_text: str | None = None) -> None:
        """Submit a prompt, or stop the active reveal.

        Args:
            prompt_text: Text to send. Defaults to the session's current prompt.
        """
        text = self.state.prompt if prompt_text is None else prompt_text
        if not text.strip():
            return

        if self.controller.is_revealing:
            self.controller.cancel()
            return

        if self.state.is_pending:
            logger.debug("Ignoring submission while a relay call is pending")
            return

        self.state.conversation.add(Sender.USER, text)
        self.state.prompt = ""
        self.state.loading = True
        self._changed()

        try:
            response_text = await self.relay.generate(text)
        except RelayError as e:
            logger.error(f"Relay call failed: {e}")
            self.state.conversation.add(Sender.AI, ERROR_MESSAGE)
            self.state.loading = False
            self._changed()
            return

        self.controller.start(response_text)
        self._changed()

    def stop(self) -> None:
        """Stop button handler."""
        self.controller.cancel()
