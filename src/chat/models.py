"""Pydantic models for conversations and their messages."""

import uuid
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from ..assistant.base import (
    CalculationRecord,
    DefinitionRecord,
    DefinitionSense,
    Payload,
    WeatherRecord,
)

DEFAULT_TITLE = "New Chat"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Message(BaseModel):
    """One chat message."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    sender: Literal["user", "assistant"]
    content: str
    type: Literal["text", "plugin"] = "text"
    plugin_name: Optional[str] = None
    plugin_data: Optional[Dict[str, Any]] = None
    timestamp: datetime = Field(default_factory=utc_now)


class Conversation(BaseModel):
    """A titled, ordered list of messages."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    title: str = DEFAULT_TITLE
    messages: List[Message] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class ConversationState(BaseModel):
    """Persisted state of the conversation store."""

    conversations: List[Conversation] = Field(default_factory=list)
    active_conversation_id: Optional[str] = None


def payload_to_data(payload: Payload) -> Dict[str, Any]:
    """Serialise a plugin payload, tagged with its kind."""
    return {"kind": payload.kind, **asdict(payload)}


def payload_from_data(data: Dict[str, Any]) -> Payload:
    """Rebuild a plugin payload from ``payload_to_data`` output."""
    fields = {key: value for key, value in data.items() if key != "kind"}
    kind = data.get("kind")
    if kind == WeatherRecord.kind:
        return WeatherRecord(**fields)
    if kind == CalculationRecord.kind:
        return CalculationRecord(**fields)
    if kind == DefinitionRecord.kind:
        senses = tuple(DefinitionSense(**sense) for sense in fields.pop("senses", ()))
        return DefinitionRecord(senses=senses, **fields)
    raise ValueError(f"Unknown payload kind: {kind!r}")
