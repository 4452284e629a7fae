"""Dictionary plugin — word definitions."""

import re

import structlog

from ...services.dictionary import DictionaryClient, fallback_definition
from ...services.fetch import UpstreamError
from ..base import ExecutionResult, FailureKind, PluginDescriptor

logger = structlog.get_logger()


class DictionaryPlugin:
    """Get definitions for any word."""

    name: str = "dictionary"
    description: str = "Get definitions for any word"
    invocation_hint: str = "/define [word]"
    exact_pattern: re.Pattern[str] = re.compile(r"^/define\s+(.+)$", re.I)
    patterns: list[re.Pattern[str]] = [
        re.compile(r"(?:define|definition of|what does|what's the meaning of) ([a-zA-Z]+)", re.I),
        re.compile(r"(?:meaning of) ([a-zA-Z]+)", re.I),
    ]

    def __init__(self, client: DictionaryClient) -> None:
        self._client = client

    async def execute(self, text: str, match: re.Match[str]) -> ExecutionResult:
        word = (match.group(1) or "").strip().lower()
        if not word:
            return ExecutionResult.fail(
                FailureKind.MISSING_ARGUMENT, "Please specify a word to define"
            )

        try:
            record = await self._client.define(word)
        except UpstreamError as exc:
            logger.warning("Dictionary lookup failed, using built-in entry", word=word, error=str(exc))
            record = fallback_definition(word)

        return ExecutionResult.ok(record)

    def descriptor(self) -> PluginDescriptor:
        return PluginDescriptor(
            name=self.name,
            description=self.description,
            exact_pattern=self.exact_pattern,
            invocation_hint=self.invocation_hint,
            natural_language_patterns=tuple(self.patterns),
            executor=self.execute,
        )
