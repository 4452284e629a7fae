"""Conversation bookkeeping and the chat engine."""

from .engine import ChatEngine
from .history import ConversationNotFoundError, ConversationStore
from .models import Conversation, Message
from .render import render_message

__all__ = [
    "ChatEngine",
    "Conversation",
    "ConversationNotFoundError",
    "ConversationStore",
    "Message",
    "render_message",
]
