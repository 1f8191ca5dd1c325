"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Warm amber palette: cream background, amber accents, brown text
VILLAGE_AMBER = Theme(
    name="village-amber",
    primary="#d97706",      # Amber 600 - user bubbles, send button
    secondary="#78350f",    # Amber 900 - title text
    accent="#fcd34d",       # Amber 300 - borders
    foreground="#1f2937",   # Gray 800 - body text
    background="#fffbeb",   # Amber 50 - page background
    success="#d97706",
    warning="#b45309",
    error="#b91c1c",
    surface="#ffffff",      # Assistant bubbles
    panel="#ffedd5",        # Orange 100 - header and input bar
    dark=False,
    variables={
        "border": "#fcd34d",
        "border-blurred": "#fde68a",

        "scrollbar": "#fde68a",
        "scrollbar-hover": "#fcd34d",
        "scrollbar-active": "#d97706",
        "scrollbar-background": "#fffbeb",

        "footer-foreground": "#78350f",
        "footer-background": "#ffedd5",
        "footer-key-foreground": "#d97706",

        "text-muted": "#d97706",
        "text-disabled": "#d1d5db",

        "input-selection-background": "#d97706 30%",

        "button-foreground": "#ffffff",
        "button-color-foreground": "#ffffff",
    },
)
