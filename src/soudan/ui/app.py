"""Main Textual TUI application.

Wires the conversation controller to the widgets: every state change
re-renders history, the typing indicator and the input controls.
"""

import asyncio

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, Static

from ..chat.controller import ConversationController
from ..chat.endpoint import ChatEndpoint
from ..chat.models import SessionState
from .config import APP_SUB_TITLE, APP_TITLE, INPUT_HINT, LogLevel
from .styles import APP_CSS
from .themes import VILLAGE_AMBER
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel


class SoudanApp(App):
    """Textual TUI for the consultation-room chat."""

    CSS = APP_CSS
    TITLE = APP_TITLE
    SUB_TITLE = APP_SUB_TITLE

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+r", "copy_last_response", "Copy Reply", priority=True),
        Binding("ctrl+d", "toggle_debug", "Log", priority=True),
    ]

    def __init__(
        self,
        endpoint: ChatEndpoint,
        log_level: str | None = None,
    ) -> None:
        super().__init__()
        self._endpoint = endpoint
        self._log_level = log_level
        self._controller = ConversationController(endpoint)

    @property
    def controller(self) -> ConversationController:
        return self._controller

    def compose(self) -> ComposeResult:
        yield Header()
        yield ChatHistoryWidget(id="chat-history")
        with Vertical(id="input-area"):
            yield ChatInputBar(self._controller, id="chat-input-bar")
            yield Static(INPUT_HINT, id="input-hint")
        yield DebugPanel(id="debug-panel")
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(VILLAGE_AMBER)
        self.theme = VILLAGE_AMBER.name

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")

        self._controller.set_debug_callback(self._route_debug)
        self._endpoint.set_debug_callback(self._route_debug)
        self._controller.add_listener(self._on_state_changed)
        self._on_state_changed(self._controller.state)

        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def _route_debug(self, level: str, component: str, message: str) -> None:
        """Route trace messages to the log panel."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        log_panel.write_entry(component, message, LogLevel.from_string(level))

    def _on_state_changed(self, state: SessionState) -> None:
        chat = self.query_one("#chat-history", ChatHistoryWidget)
        chat.render_history(state.history)
        chat.set_pending(state.pending)
        self.query_one("#chat-input-bar", ChatInputBar).sync(state)

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)

    def action_copy_last_response(self) -> None:
        """Copy last assistant reply to clipboard."""
        chat = self.query_one("#chat-history", ChatHistoryWidget)
        response = chat.get_last_response()
        if response:
            self.copy_to_clipboard(response)
            self.notify("Reply copied")
        else:
            self.notify("No reply to copy", severity="warning")


async def run_textual_tui(
    endpoint: ChatEndpoint,
    log_level: str | None = None,
) -> None:
    """Run the Textual TUI.

    Args:
        endpoint: Chat endpoint receiving the conversation
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = SoudanApp(endpoint=endpoint, log_level=log_level)
    try:
        async with endpoint:
            await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
