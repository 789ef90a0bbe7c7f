"""Response-display controller with a simulated typing effect.

Reveals a complete response one character per tick and guarantees the
conversation receives exactly one terminal message per reveal, whether it
completes naturally or is stopped by the user.

The periodic tick is an explicit cancellable timer handle. The controller
owns at most one handle at a time and cancels it on every terminal
transition and before starting a new reveal.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Protocol

from aichatbot.chat.conversation import Sender
from aichatbot.chat.state import DisplayState, SessionState

logger = logging.getLogger(__name__)

# Seconds between ticks (15 ms)
TICK_INTERVAL = 0.015

STOPPED_SUFFIX = " *(Stopped)*"


class TimerHandle(Protocol):
    """A running periodic timer."""

    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], None]], TimerHandle]


class AsyncioTimer:
    """Periodic timer on the running asyncio event loop."""

    def __init__(self, interval: float, callback: Callable[[], None]) -> None:
        self._interval = interval
        self._callback = callback
        self._loop = asyncio.get_running_loop()
        self._active = True
        self._handle = self._loop.call_later(interval, self._fire)

    def _fire(self) -> None:
        if not self._active:
            return
        # Reschedule first so a cancel() from inside the callback sticks
        self._handle = self._loop.call_later(self._interval, self._fire)
        self._callback()

    def cancel(self) -> None:
        self._active = False
        self._handle.cancel()


class ResponseDisplayController:
    """Owns the incremental reveal of one AI response at a time.

    States:
        - Idle: no active DisplayState, no timer.
        - Revealing: timer running, each tick appends one character.
        - Terminating: timer cancelled, terminal message appended, back to Idle.

    Never raises; cancellation is a normal terminal transition.
    """

    def __init__(
        self,
        state: SessionState,
        timer_factory: TimerFactory = AsyncioTimer,
        interval: float = TICK_INTERVAL,
        on_update: Callable[[str], None] | None = None,
        on_finish: Callable[[], None] | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            state: Session state shared with the submission flow.
            timer_factory: Creates the periodic timer driving ticks.
            interval: Seconds between ticks.
            on_update: Called with the revealed prefix after every tick.
            on_finish: Called after each terminal transition.
        """
        self._state = state
        self._timer_factory = timer_factory
        self._interval = interval
        self._timer: TimerHandle | None = None
        self._disposed = False
        self.on_update = on_update
        self.on_finish = on_finish

    @property
    def is_revealing(self) -> bool:
        return self._state.is_revealing

    @property
    def has_timer(self) -> bool:
        return self._timer is not None

    def start(self, full_text: str) -> None:
        """Begin revealing ``full_text``.

        A reveal already in progress is replaced silently: its timer is
        cancelled and it produces no message. Does nothing once disposed.
        """
        if self._disposed:
            logger.debug("Ignoring start after dispose")
            self._state.loading = False
            return
        if self._state.display is not None:
            logger.debug("Replacing active reveal")
            self._state.display.is_active = False
        self._cancel_timer()

        self._state.display = DisplayState(full_text=full_text)
        self._timer = self._timer_factory(self._interval, self.tick)

    def tick(self) -> None:
        """Advance the reveal by one character, completing it when done."""
        display = self._state.display
        if display is None or not display.is_active:
            return

        revealed = len(display.revealed_prefix)
        if revealed < len(display.full_text):
            display.revealed_prefix += display.full_text[revealed]
            if self.on_update:
                self.on_update(display.revealed_prefix)

        if display.revealed_prefix == display.full_text:
            self._finish(display.full_text)

    def cancel(self) -> None:
        """Stop the active reveal, keeping what was shown so far.

        Nothing is appended when no character has been revealed yet.
        """
        display = self._state.display
        if display is None or not display.is_active:
            return

        prefix = display.revealed_prefix
        self._finish(prefix + STOPPED_SUFFIX if prefix else None)
        logger.info(f"Reveal stopped after {len(prefix)} of {len(display.full_text)} characters")

    def dispose(self) -> None:
        """Release the timer without touching the conversation.

        Called when the page is deleted. Later calls to :meth:`start` are
        ignored, so a relay response arriving afterwards starts no timer.
        """
        self._disposed = True
        self._cancel_timer()
        self._state.loading = False
        if self._state.display is not None:
            self._state.display.is_active = False
            self._state.display = None

    def _finish(self, text: str | None) -> None:
        self._cancel_timer()
        if self._state.display is not None:
            self._state.display.is_active = False
        self._state.display = None

        if text is not None:
            self._state.conversation.add(Sender.AI, text)
        self._state.loading = False

        if self.on_finish:
            self.on_finish()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
