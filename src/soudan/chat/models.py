"""Data models for the conversation.

Hides the representation of turns, the session state that owns them,
and the wire format exchanged with the chat endpoint.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Speaker of a turn."""

    USER = "user"
    ASSISTANT = "assistant"


class Turn(BaseModel):
    """A single message in the conversation.

    Turns are frozen: once appended to a history they never change.
    """

    model_config = ConfigDict(frozen=True)

    role: Role = Field(description="Who sent the message: 'user' or 'assistant'")
    content: str = Field(description="Message text, possibly multi-line")
    created_at: datetime = Field(
        default_factory=datetime.now,
        exclude=True,
        description="Local creation time, used for display only"
    )

    @classmethod
    def user(cls, content: str) -> "Turn":
        return cls(role=Role.USER, content=content)

    @classmethod
    def assistant(cls, content: str) -> "Turn":
        return cls(role=Role.ASSISTANT, content=content)

    @property
    def is_user(self) -> bool:
        return self.role == Role.USER


class SessionState:
    """Conversation state for one running app instance.

    History is append-only and exposed as a tuple so callers cannot
    reorder or drop turns behind the controller's back.
    """

    def __init__(self, seed: Turn | None = None) -> None:
        self._history: list[Turn] = [seed] if seed is not None else []
        self.draft: str = ""
        self.pending: bool = False

    @property
    def history(self) -> tuple[Turn, ...]:
        return tuple(self._history)

    def append(self, turn: Turn) -> None:
        """Append a turn to the end of the history."""
        self._history.append(turn)

    def __len__(self) -> int:
        return len(self._history)

    def __repr__(self) -> str:
        return (
            f"SessionState(turns={len(self._history)}, "
            f"pending={self.pending}, draft={self.draft!r})"
        )


class ChatRequest(BaseModel):
    """Outbound request body: the conversation so far."""

    messages: list[Turn] = Field(description="Turns to send, oldest first")

    def to_payload(self) -> dict:
        return self.model_dump(mode="json")


class ContentItem(BaseModel):
    """One block of reply content. Unknown fields (e.g. 'type') are ignored."""

    text: str | None = None


class ChatReply(BaseModel):
    """Inbound success body. Only the first content item is consumed."""

    content: list[ContentItem] = Field(min_length=1)

    @property
    def text(self) -> str | None:
        return self.content[0].text or None
