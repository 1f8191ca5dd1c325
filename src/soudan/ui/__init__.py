"""Terminal UI module for soudan.

Provides a Textual-based TUI for the consultation-room chat.

Module structure (Parnas principle - each module hides a design decision):
- config.py: Copy, key names and log levels
- formatting.py: Turn labels and plain-text transcripts
- widgets.py: Custom widgets (turn bubbles, draft editor, log panel)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palette
- app.py: Application orchestration (user interaction flow)
"""

from .app import SoudanApp, run_textual_tui
from .config import LogLevel
from .formatting import render_transcript
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel

__all__ = [
    "ChatHistoryWidget",
    "ChatInputBar",
    "DebugPanel",
    "LogLevel",
    "SoudanApp",
    "render_transcript",
    "run_textual_tui",
]
