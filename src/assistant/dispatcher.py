"""Assistant dispatcher — routes messages to plugins."""

import re

import structlog

from .base import (
    NO_MATCH,
    DispatchOutcome,
    ExecutionResult,
    FailureKind,
    PluginDescriptor,
    PluginMatch,
)
from .registry import PluginRegistry

logger = structlog.get_logger()


class AssistantDispatcher:
    """Route free-form text to the first matching plugin.

    Slash commands (exact patterns) are tried across the whole registry
    before any natural-language pattern, so a loose phrase pattern can
    never shadow an explicit command.
    """

    def __init__(self, registry: PluginRegistry) -> None:
        self._registry = registry

    async def dispatch(self, text: str) -> DispatchOutcome:
        """Dispatch text to a matching plugin.

        Returns NO_MATCH if nothing matches (caller falls back to chat).
        """
        plugins = self._registry.list_plugins()

        for plugin in plugins:
            match = plugin.exact_pattern.match(text)
            if match:
                return await self._invoke(plugin, text, match, stage="exact")

        for plugin in plugins:
            for pattern in plugin.natural_language_patterns:
                match = pattern.search(text)
                if match:
                    return await self._invoke(plugin, text, match, stage="natural")

        return NO_MATCH

    async def _invoke(
        self,
        plugin: PluginDescriptor,
        text: str,
        match: re.Match[str],
        stage: str,
    ) -> PluginMatch:
        try:
            result = await plugin.executor(text, match)
        except Exception as exc:
            logger.error(
                "Plugin handler failed",
                plugin=plugin.name,
                error=str(exc),
            )
            result = ExecutionResult.fail(FailureKind.INTERNAL, "Plugin execution failed")
        else:
            logger.info(
                "Plugin handled message",
                plugin=plugin.name,
                stage=stage,
                success=result.success,
            )
        return PluginMatch(plugin=plugin, result=result)
