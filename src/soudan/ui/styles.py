"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.

Layout:
- Header on top, footer at the bottom
- Conversation fills the middle, user turns right, assistant turns left
- Input bar and hint line pinned above the footer
"""

APP_CSS = """
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   Conversation
   ============================================ */
#chat-history {
    height: 1fr;
    padding: 1 2;
    background: $background;
    scrollbar-gutter: stable;
}

.turn-row {
    width: 100%;
    height: auto;
    margin: 0 0 1 0;

    &.user-turn {
        align-horizontal: right;
    }

    &.assistant-turn {
        align-horizontal: left;
    }
}

.turn-bubble {
    width: auto;
    max-width: 80%;
    height: auto;
    padding: 0 2;
}

.user-turn .turn-bubble {
    background: $primary;
    color: white;

    & .turn-header {
        color: white 70%;
    }
}

.assistant-turn .turn-bubble {
    background: $surface;
    color: $foreground;
    border: round $accent;

    & .turn-header {
        color: $primary;
    }
}

.turn-header {
    height: 1;
    text-style: bold;
}

.turn-content {
    width: auto;
    height: auto;
}

/* Typing indicator shown while a reply is pending */
#typing-indicator {
    width: 12;
    height: 3;
    background: $surface;
    border: round $accent;
    color: $primary;
    display: none;
}

/* ============================================
   Input Area
   ============================================ */
#input-area {
    height: auto;
    padding: 1 1 0 1;
    background: $panel;
    border-top: solid $accent;
}

ChatInputBar {
    height: 5;
}

#chat-input {
    width: 1fr;
    height: 100%;
    border: round $accent;
    background: $surface;

    &:focus {
        border: round $primary;
    }

    &:disabled {
        opacity: 60%;
    }
}

#send-btn {
    width: 10;
    height: 100%;
    margin: 0 0 0 1;
    min-width: 8;
    background: $primary;
    color: white;
    text-style: bold;
    border: none;

    &:hover {
        background: $primary-lighten-1;
    }

    &:disabled {
        background: $panel-darken-1;
        color: $foreground 50%;
    }
}

#input-hint {
    width: 100%;
    height: 1;
    text-align: center;
    color: $text-muted;
}

/* ============================================
   Debug/Log Panel
   ============================================ */
#debug-panel {
    height: auto;
    min-height: 6;
    max-height: 12;
    background: $surface;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    overflow-y: scroll;
    scrollbar-gutter: stable;
}
"""
