"""
Soudan: a terminal consultation-room chat client.

This package follows Parnas's information hiding principles,
where each module hides a specific design decision.
"""

__version__ = "0.1.0"

from .chat import (
    ChatEndpoint,
    ConversationController,
    HttpChatEndpoint,
    Role,
    SessionState,
    Turn,
)

__all__ = [
    "ChatEndpoint",
    "ConversationController",
    "HttpChatEndpoint",
    "Role",
    "SessionState",
    "Turn",
]
