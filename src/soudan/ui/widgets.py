"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Turn bubble rendering and alignment
- Incremental history rendering and scrolling
- Draft editing and submit keys
- Log rendering and level filtering
"""

from collections.abc import Callable, Sequence

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click, Key
from textual.widgets import Button, LoadingIndicator, RichLog, Static, TextArea

from ..chat.controller import ConversationController
from ..chat.models import SessionState, Turn
from .config import INPUT_PLACEHOLDER, LOG_TIMESTAMP_FORMAT, NEWLINE_KEYS, LogLevel
from .formatting import turn_body, turn_header


class TurnBubble(Vertical):
    """A single turn that copies its content when clicked."""

    def __init__(self, turn: Turn, *args, **kwargs) -> None:
        super().__init__(*args, classes="turn-bubble", **kwargs)
        self._turn = turn

    @property
    def turn(self) -> Turn:
        return self._turn

    def compose(self) -> ComposeResult:
        yield Static(turn_header(self._turn), classes="turn-header", markup=False)
        yield Static(turn_body(self._turn), classes="turn-content")

    def on_click(self, event: Click) -> None:
        """Copy turn content to the clipboard when clicked."""
        event.stop()
        self.app.copy_to_clipboard(self._turn.content)
        self.app.notify("Copied to clipboard", timeout=2)


class TurnRow(Horizontal):
    """Full-width row aligning a bubble right (user) or left (assistant)."""

    def __init__(self, turn: Turn) -> None:
        side = "user-turn" if turn.is_user else "assistant-turn"
        super().__init__(classes=f"turn-row {side}")
        self._turn = turn

    def compose(self) -> ComposeResult:
        yield TurnBubble(self._turn)


class ChatHistoryWidget(VerticalScroll):
    """Scrollable conversation with a typing indicator after the last turn.

    History is append-only, so rendering only mounts turns beyond those
    already on screen. Rendering the same history twice is a no-op.
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._turns: list[Turn] = []

    def compose(self) -> ComposeResult:
        yield LoadingIndicator(id="typing-indicator")

    @property
    def rendered_turns(self) -> tuple[Turn, ...]:
        return tuple(self._turns)

    def render_history(self, history: Sequence[Turn]) -> None:
        """Bring the display in line with ``history``.

        Args:
            history: Full session history, oldest first
        """
        new_turns = list(history[len(self._turns):])
        if not new_turns:
            return
        indicator = self.query_one("#typing-indicator")
        for turn in new_turns:
            self.mount(TurnRow(turn), before=indicator)
            self._turns.append(turn)
        self._scroll_to_latest()

    def set_pending(self, pending: bool) -> None:
        """Show or hide the typing indicator."""
        indicator = self.query_one("#typing-indicator")
        if indicator.display == pending:
            return
        indicator.display = pending
        if pending:
            self._scroll_to_latest()

    def get_last_response(self) -> str | None:
        """Get the last assistant turn content."""
        for turn in reversed(self._turns):
            if not turn.is_user:
                return turn.content
        return None

    def _scroll_to_latest(self) -> None:
        # Sizes of freshly mounted rows are only known after the next refresh
        self.call_after_refresh(self.scroll_end, animate=False)


class DraftTextArea(TextArea):
    """Multi-line draft editor.

    Every key first goes to ``key_handler``; when it returns True the key
    is consumed (Enter submits). Shift+Enter and Ctrl+J insert a newline.
    """

    def __init__(self, key_handler: Callable[[str], bool], *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._key_handler = key_handler

    async def _on_key(self, event: Key) -> None:
        # Runs before TextArea._on_key; preventing default skips it
        if self.read_only:
            return
        if event.key in NEWLINE_KEYS:
            event.stop()
            event.prevent_default()
            self.insert("\n")
        elif self._key_handler(event.key):
            event.stop()
            event.prevent_default()


class ChatInputBar(Horizontal):
    """Draft editor plus Send button, bound to a conversation controller."""

    def __init__(self, controller: ConversationController, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._controller = controller

    def compose(self) -> ComposeResult:
        text_area = DraftTextArea(
            self._handle_key,
            id="chat-input",
            show_line_numbers=False,
            soft_wrap=True,
            placeholder=INPUT_PLACEHOLDER,
        )
        text_area.cursor_blink = False
        yield text_area
        yield Button("送信", id="send-btn", disabled=True).with_tooltip(
            "Submit message (Enter)"
        )

    def on_mount(self) -> None:
        text_area = self.query_one("#chat-input", DraftTextArea)
        text_area.highlight_cursor_line = False
        text_area.focus()

    def _handle_key(self, key: str) -> bool:
        text_area = self.query_one("#chat-input", DraftTextArea)
        self._controller.update_draft(text_area.text)
        return self._controller.on_key(key)

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        """Keep the controller's draft in step with the editor."""
        self._controller.update_draft(event.text_area.text)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            self._controller.submit(self._controller.state.draft)

    def sync(self, state: SessionState) -> None:
        """Reflect session state: cleared draft, disabled controls."""
        text_area = self.query_one("#chat-input", DraftTextArea)
        if text_area.text != state.draft:
            text_area.text = state.draft
        was_disabled = text_area.disabled
        text_area.disabled = state.pending
        self.query_one("#send-btn", Button).disabled = not self._controller.can_submit()
        if was_disabled and not state.pending:
            text_area.focus()

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", DraftTextArea).focus()


class DebugPanel(RichLog):
    """Log panel for real-time tracing with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    COMPONENT_COLORS = {
        "TUI": "cyan",
        "Chat": "green",
        "HTTP": "magenta",
    }

    LEVEL_COLORS = {
        LogLevel.DEBUG: "dim",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=True,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        """Hide by default."""
        self.display = False

    def write_entry(
        self,
        component: str,
        message: str,
        level: int = LogLevel.DEBUG
    ) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, Chat, HTTP)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        from datetime import datetime
        from rich.markup import escape

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        level_color = self.LEVEL_COLORS.get(level, "white")
        comp_color = self.COMPONENT_COLORS.get(component, "white")

        self.write(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{LogLevel.name(level):<7}[/] "
            f"[{comp_color}]\\[{component}][/] {escape(message)}"
        )

    def info(self, component: str, message: str) -> None:
        """Log an INFO level message."""
        self.write_entry(component, message, LogLevel.INFO)

    def show(self) -> None:
        """Show the log panel."""
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        """Hide the log panel."""
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True
