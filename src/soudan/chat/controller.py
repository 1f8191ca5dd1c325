"""Conversation session controller.

Owns the session state and sequences one chat turn:

    IDLE --submit(text)--> SENDING --reply | failure--> IDLE

Steps up to building the outbound payload run synchronously inside
``submit`` so the user turn is visible before any I/O happens. The
exchange itself runs as an asyncio task; ``pending`` is cleared on
every exit path of that task.
"""

import asyncio
from collections.abc import Callable, Sequence
from typing import Any

from .config import FALLBACK_REPLY, GREETING
from .endpoint import ChatEndpoint, parse_reply
from .models import Role, SessionState, Turn

# Key that submits the draft; modified Enter inserts a newline instead
SUBMIT_KEY = "enter"

COMPONENT = "Chat"

StateListener = Callable[[SessionState], None]
DebugCallback = Callable[[str, str, str], None]


def build_outbound(history: Sequence[Turn], new_turn: Turn) -> list[Turn]:
    """Build the turns sent for a submission.

    Drops an assistant turn sitting at index 0 of the pre-submission
    history (the seeded greeting) and keeps every other turn in order,
    followed by the new user turn. The check is positional, not by
    identity.

    Args:
        history: History as it was before the new turn was appended
        new_turn: The user turn being submitted

    Returns:
        Outbound turns, oldest first
    """
    kept = [
        turn for index, turn in enumerate(history)
        if turn.role != Role.ASSISTANT or index != 0
    ]
    return kept + [new_turn]


class ConversationController:
    """Controller for a single chat session.

    Only one exchange may be in flight; ``submit`` is silently ignored
    while ``pending`` is set or when the text is blank.
    """

    def __init__(
        self,
        endpoint: ChatEndpoint,
        state: SessionState | None = None,
        greeting: str = GREETING,
    ) -> None:
        self._endpoint = endpoint
        self._state = state if state is not None else SessionState(Turn.assistant(greeting))
        self._listeners: list[StateListener] = []
        self._debug_callback: DebugCallback | None = None
        self._task: asyncio.Task | None = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def history(self) -> tuple[Turn, ...]:
        return self._state.history

    @property
    def pending(self) -> bool:
        return self._state.pending

    def add_listener(self, listener: StateListener) -> None:
        """Register a callable invoked with the state after every change."""
        self._listeners.append(listener)

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        """Set the debug callback for execution tracing.

        Args:
            callback: Function(level, component, message), or None to disable
        """
        self._debug_callback = callback

    def _debug(self, level: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, COMPONENT, message)

    def _notify(self) -> None:
        for listener in self._listeners:
            try:
                listener(self._state)
            except Exception as e:
                # Listener failures never reach submit() or the exchange task
                self._debug("error", f"State listener failed: {e}")

    def can_submit(self, text: str | None = None) -> bool:
        """Check whether submitting ``text`` (default: the draft) would be accepted."""
        candidate = self._state.draft if text is None else text
        return bool(candidate.strip()) and not self._state.pending

    def update_draft(self, text: str) -> None:
        """Replace the draft text."""
        if text == self._state.draft:
            return
        self._state.draft = text
        self._notify()

    def on_key(self, key: str) -> bool:
        """Handle a key press from the input widget.

        Args:
            key: Textual key name (e.g. "enter", "shift+enter")

        Returns:
            True if the key submitted the draft and the default newline
            insertion must be prevented
        """
        if key != SUBMIT_KEY:
            return False
        self.submit(self._state.draft)
        return True

    def submit(self, text: str) -> "asyncio.Task[None] | None":
        """Submit user text.

        Appends the user turn, clears the draft and marks the session
        pending before returning. The exchange runs in the returned task.

        Args:
            text: Raw user text, sent verbatim

        Returns:
            Task completing when the reply (or fallback) has been appended,
            or None if the submission was ignored
        """
        if not self.can_submit(text):
            self._debug("debug", "Submission ignored (blank text or pending)")
            return None

        previous = self._state.history
        turn = Turn.user(text)
        self._state.append(turn)
        self._state.draft = ""
        self._state.pending = True
        outbound = build_outbound(previous, turn)

        self._debug("info", f"Sending {len(outbound)} message(s)")
        self._task = task = asyncio.create_task(self._exchange(outbound))
        self._notify()
        return task

    async def wait(self) -> None:
        """Wait for the in-flight exchange, if any."""
        if self._task is not None:
            await self._task

    async def _exchange(self, outbound: list[Turn]) -> None:
        try:
            reply = await self._fetch_reply(outbound)
            self._state.append(Turn.assistant(reply))
        finally:
            self._state.pending = False
            self._task = None
            self._notify()

    async def _fetch_reply(self, outbound: list[Turn]) -> str:
        """Return the reply text, or the fallback on any failure."""
        try:
            data: Any = await self._endpoint.send(outbound)
        except Exception as e:
            self._debug("error", f"Exchange failed: {e}")
            return FALLBACK_REPLY

        text = parse_reply(data)
        if text is None:
            if isinstance(data, dict) and "error" in data:
                self._debug("warning", "Endpoint returned an error body")
            else:
                self._debug("warning", "Reply had no usable content")
            return FALLBACK_REPLY

        self._debug("info", f"Received reply ({len(text)} chars)")
        return text
