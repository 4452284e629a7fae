"""Word definitions from the Free Dictionary API, with a built-in fallback."""

from typing import Any
from urllib.parse import quote

from ..assistant.base import DefinitionRecord, DefinitionSense
from .fetch import HttpFetcher, UpstreamError

DEFAULT_DICTIONARY_URL = "https://api.dictionaryapi.dev/api/v2/entries/en"

MAX_SENSES_PER_PART_OF_SPEECH = 3

BUILTIN_DEFINITIONS: dict[str, tuple[DefinitionSense, ...]] = {
    "hello": (
        DefinitionSense(
            part_of_speech="interjection",
            definition="Used as a greeting or to begin a telephone conversation.",
            example="Hello, how are you?",
        ),
    ),
    "computer": (
        DefinitionSense(
            part_of_speech="noun",
            definition="An electronic device for storing and processing data.",
            example="I use my computer for work.",
        ),
    ),
    "artificial": (
        DefinitionSense(
            part_of_speech="adjective",
            definition="Made or produced by human beings rather than occurring naturally.",
            example="Artificial intelligence is advancing rapidly.",
        ),
    ),
}

PLACEHOLDER_SENSE = DefinitionSense(
    part_of_speech="noun",
    definition="A sample definition for demonstration purposes.",
    example="This is an example sentence.",
)


def fallback_definition(word: str) -> DefinitionRecord:
    """Built-in entry for ``word``, or a single placeholder sense."""
    senses = BUILTIN_DEFINITIONS.get(word, (PLACEHOLDER_SENSE,))
    return DefinitionRecord(word=word, senses=senses)


def parse_entries(data: Any) -> DefinitionRecord:
    """Map the first entry of a dictionary response to a DefinitionRecord."""
    try:
        entry = data[0]
        senses: list[DefinitionSense] = []
        for meaning in entry["meanings"]:
            part_of_speech = meaning["partOfSpeech"]
            for item in meaning["definitions"][:MAX_SENSES_PER_PART_OF_SPEECH]:
                senses.append(
                    DefinitionSense(
                        part_of_speech=part_of_speech,
                        definition=item["definition"],
                        example=item.get("example"),
                    )
                )
        return DefinitionRecord(
            word=entry["word"],
            senses=tuple(senses),
            pronunciation=entry.get("phonetic") or None,
        )
    except (KeyError, IndexError, TypeError, AttributeError) as exc:
        raise UpstreamError(f"Malformed dictionary payload: {exc}") from exc


class DictionaryClient:
    """Look up English word definitions."""

    def __init__(
        self,
        fetcher: HttpFetcher,
        base_url: str = DEFAULT_DICTIONARY_URL,
    ) -> None:
        self._fetcher = fetcher
        self._base_url = base_url.rstrip("/")

    def build_url(self, word: str) -> str:
        return f"{self._base_url}/{quote(word, safe='')}"

    async def define(self, word: str) -> DefinitionRecord:
        """Return the definition of ``word``.

        Raises:
            UpstreamError: on transport failure, non-success status or an
                unexpected payload.
        """
        try:
            response = await self._fetcher.fetch(self.build_url(word))
        except Exception as exc:
            raise UpstreamError(f"Dictionary request failed: {exc}") from exc

        if not response.ok:
            raise UpstreamError(f"Dictionary request returned HTTP {response.status}")

        try:
            data = response.json()
        except ValueError as exc:
            raise UpstreamError(f"Dictionary response is not JSON: {exc}") from exc

        return parse_entries(data)
