"""Conversation bookkeeping with optional JSON-file persistence."""

from pathlib import Path
from typing import List, Literal, Optional

import structlog
from pydantic import ValidationError

from .models import DEFAULT_TITLE, Conversation, ConversationState, Message, utc_now

logger = structlog.get_logger()

TITLE_MAX_LENGTH = 50


class ConversationNotFoundError(KeyError):
    """No conversation with the given id."""


class ConversationStore:
    """Holds conversations and tracks the active one.

    When ``path`` is given, state is loaded from it on construction and
    written back after every mutation.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path
        self._state = ConversationState()
        if path is not None:
            self._load()

    @property
    def conversations(self) -> List[Conversation]:
        return list(self._state.conversations)

    @property
    def active_conversation_id(self) -> Optional[str]:
        return self._state.active_conversation_id

    def get(self, conversation_id: str) -> Conversation:
        for conversation in self._state.conversations:
            if conversation.id == conversation_id:
                return conversation
        raise ConversationNotFoundError(conversation_id)

    def active(self) -> Optional[Conversation]:
        """Return the active conversation, if any."""
        if self._state.active_conversation_id is None:
            return None
        try:
            return self.get(self._state.active_conversation_id)
        except ConversationNotFoundError:
            return None

    def create(self) -> Conversation:
        """Start a new conversation, place it first and make it active."""
        conversation = Conversation()
        self._state.conversations.insert(0, conversation)
        self._state.active_conversation_id = conversation.id
        self._save()
        logger.debug("Conversation created", conversation_id=conversation.id)
        return conversation

    def select(self, conversation_id: str) -> Conversation:
        conversation = self.get(conversation_id)
        self._state.active_conversation_id = conversation.id
        self._save()
        return conversation

    def delete(self, conversation_id: str) -> None:
        """Delete a conversation; the active one falls back to the first left."""
        conversation = self.get(conversation_id)
        self._state.conversations.remove(conversation)
        if self._state.active_conversation_id == conversation_id:
            remaining = self._state.conversations
            self._state.active_conversation_id = remaining[0].id if remaining else None
        self._save()

    def rename(self, conversation_id: str, title: str) -> Conversation:
        conversation = self.get(conversation_id)
        conversation.title = title
        conversation.updated_at = utc_now()
        self._save()
        return conversation

    def add_message(
        self,
        conversation_id: str,
        sender: Literal["user", "assistant"],
        content: str,
        type: Literal["text", "plugin"] = "text",
        plugin_name: Optional[str] = None,
        plugin_data: Optional[dict] = None,
    ) -> Message:
        """Append a message.

        The first user message of an untitled conversation becomes its
        title, truncated to 50 characters.
        """
        conversation = self.get(conversation_id)
        message = Message(
            sender=sender,
            content=content,
            type=type,
            plugin_name=plugin_name,
            plugin_data=plugin_data,
        )
        conversation.messages.append(message)
        conversation.updated_at = utc_now()

        if conversation.title == DEFAULT_TITLE and sender == "user":
            title = content[:TITLE_MAX_LENGTH]
            if len(content) > TITLE_MAX_LENGTH:
                title += "..."
            conversation.title = title

        self._save()
        return message

    def clear(self, conversation_id: str) -> Conversation:
        """Drop all messages and reset the title."""
        conversation = self.get(conversation_id)
        conversation.messages = []
        conversation.title = DEFAULT_TITLE
        conversation.updated_at = utc_now()
        self._save()
        return conversation

    def _load(self) -> None:
        if self._path is None or not self._path.exists():
            return
        try:
            self._state = ConversationState.model_validate_json(
                self._path.read_text(encoding="utf-8")
            )
        except (OSError, ValidationError) as exc:
            logger.error("Failed to load saved conversations", path=str(self._path), error=str(exc))

    def _save(self) -> None:
        if self._path is None:
            return
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(self._state.model_dump_json(indent=2), encoding="utf-8")
