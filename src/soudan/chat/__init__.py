"""Conversation core: session state, endpoint client and controller."""

from .config import FALLBACK_REPLY, GREETING, ChatSettings, load_settings
from .controller import ConversationController, build_outbound
from .endpoint import ChatEndpoint, ChatEndpointError, HttpChatEndpoint, parse_reply
from .models import ChatReply, ChatRequest, ContentItem, Role, SessionState, Turn

__all__ = [
    "FALLBACK_REPLY",
    "GREETING",
    "ChatEndpoint",
    "ChatEndpointError",
    "ChatReply",
    "ChatRequest",
    "ChatSettings",
    "ContentItem",
    "ConversationController",
    "HttpChatEndpoint",
    "Role",
    "SessionState",
    "Turn",
    "build_outbound",
    "load_settings",
    "parse_reply",
]
