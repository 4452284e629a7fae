"""Chat engine: records each user message and one assistant reply."""

import random
from typing import Optional

import structlog

from ..assistant.base import PluginMatch
from ..assistant.dispatcher import AssistantDispatcher
from ..assistant.registry import PluginRegistry
from .history import ConversationStore
from .models import Message, payload_to_data

logger = structlog.get_logger()

GENERIC_REPLIES = [
    "I understand you're asking about something. Try using one of my plugin commands "
    "like /weather, /calc, or /define for specific functionality!",
    "That's an interesting question! I can help you with weather information, "
    "calculations, or word definitions using my plugins.",
    "I'm here to help! Use /weather [city] for weather, /calc [expression] for math, "
    "or /define [word] for definitions.",
    "For the best experience, try my plugin commands. Type / to see available options!",
    "I can assist you with various tasks through my plugin system. "
    "What would you like to explore?",
]

ERROR_REPLY = "Sorry, I encountered an error processing your request. Please try again."


class ChatEngine:
    """Turn user text into one recorded assistant reply."""

    def __init__(
        self,
        registry: PluginRegistry,
        store: ConversationStore,
        dispatcher: Optional[AssistantDispatcher] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._registry = registry
        self._store = store
        self._dispatcher = dispatcher or AssistantDispatcher(registry)
        self._rng = rng or random.Random()

    def available_commands(self) -> list[str]:
        return self._registry.list_invocation_hints()

    async def handle_message(
        self,
        text: str,
        conversation_id: Optional[str] = None,
    ) -> Message:
        """Record ``text`` and the assistant's reply; return the reply.

        Uses the active conversation (creating one if needed) when
        ``conversation_id`` is not given.
        """
        if conversation_id is None:
            active = self._store.active() or self._store.create()
            conversation_id = active.id

        self._store.add_message(conversation_id, "user", text)

        try:
            outcome = await self._dispatcher.dispatch(text)
        except Exception as exc:
            logger.error("Error processing message", error=str(exc))
            return self._store.add_message(conversation_id, "assistant", ERROR_REPLY)

        if not isinstance(outcome, PluginMatch):
            return self._store.add_message(
                conversation_id, "assistant", self._rng.choice(GENERIC_REPLIES)
            )

        result = outcome.result
        if result.success and result.payload is not None:
            return self._store.add_message(
                conversation_id,
                "assistant",
                f"Successfully executed {outcome.plugin.name} plugin",
                type="plugin",
                plugin_name=outcome.plugin.name,
                plugin_data=payload_to_data(result.payload),
            )

        return self._store.add_message(
            conversation_id,
            "assistant",
            result.error_message or "Plugin execution failed",
        )
