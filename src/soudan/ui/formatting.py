"""Text formatting utilities for the TUI.

Hides how turns are labelled and flattened to plain text.
"""

from collections.abc import Sequence

from rich.text import Text

from ..chat.models import Turn
from .config import TURN_TIMESTAMP_FORMAT

USER_LABEL = "あなた"
ASSISTANT_LABEL = "村山"


def turn_label(turn: Turn) -> str:
    """Speaker label for a turn."""
    return USER_LABEL if turn.is_user else ASSISTANT_LABEL


def turn_header(turn: Turn) -> str:
    """Header line shown above a turn bubble, e.g. ``村山 · 09:41``."""
    return f"{turn_label(turn)} · {turn.created_at.strftime(TURN_TIMESTAMP_FORMAT)}"


def turn_body(turn: Turn) -> Text:
    """Turn content as a Rich Text.

    Content is never parsed as markup so brackets typed by the user
    render literally.
    """
    return Text(turn.content)


def render_transcript(history: Sequence[Turn]) -> str:
    """Render a history as plain text, one block per turn.

    Pure function of the history: rendering the same turns twice gives
    the same output.

    Args:
        history: Turns, oldest first

    Returns:
        Transcript with a header line per turn and blank lines between turns
    """
    blocks = []
    for turn in history:
        blocks.append(f"[{turn_label(turn)}]\n{turn.content}")
    return "\n\n".join(blocks)
