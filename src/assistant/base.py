"""Core types for assistant plugins: descriptors, results, dispatch outcomes."""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Awaitable, ClassVar, Optional, Protocol, Union


class PresentationHint(str, Enum):
    """How the caller should render a result."""

    TEXT = "text"
    CARD = "card"
    TABLE = "table"
    IMAGE = "image"


class FailureKind(str, Enum):
    """Why a plugin invocation failed."""

    MISSING_ARGUMENT = "missing_argument"
    VALIDATION = "validation"
    UPSTREAM = "upstream"
    EVALUATION = "evaluation"
    INTERNAL = "internal"


@dataclass(frozen=True)
class WeatherRecord:
    """Current conditions for a location."""

    kind: ClassVar[str] = "weather"

    location: str
    temperature_celsius: int
    condition_text: str
    humidity_percent: int
    wind_speed_kph: int
    icon_id: str


@dataclass(frozen=True)
class CalculationRecord:
    """An evaluated arithmetic expression."""

    kind: ClassVar[str] = "calculation"

    expression_text: str
    result: Union[int, float, str]


@dataclass(frozen=True)
class DefinitionSense:
    """One meaning of a word."""

    part_of_speech: str
    definition: str
    example: Optional[str] = None


@dataclass(frozen=True)
class DefinitionRecord:
    """Dictionary entry for a word."""

    kind: ClassVar[str] = "definition"

    word: str
    senses: tuple[DefinitionSense, ...] = ()
    pronunciation: Optional[str] = None


Payload = Union[WeatherRecord, CalculationRecord, DefinitionRecord]


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome of one plugin invocation.

    A success carries a payload and no error message; a failure carries an
    error message, a failure kind and no payload. Use ``ok`` and ``fail``
    rather than the constructor.
    """

    success: bool
    presentation: PresentationHint
    payload: Optional[Payload] = None
    error_message: Optional[str] = None
    failure: Optional[FailureKind] = None

    def __post_init__(self) -> None:
        if self.success:
            if self.payload is None or self.error_message is not None:
                raise ValueError("Successful result must carry only a payload")
        elif self.error_message is None or self.payload is not None:
            raise ValueError("Failed result must carry only an error message")

    @classmethod
    def ok(
        cls,
        payload: Payload,
        presentation: PresentationHint = PresentationHint.CARD,
    ) -> "ExecutionResult":
        return cls(success=True, presentation=presentation, payload=payload)

    @classmethod
    def fail(
        cls,
        failure: FailureKind,
        message: str,
        presentation: PresentationHint = PresentationHint.TEXT,
    ) -> "ExecutionResult":
        return cls(
            success=False,
            presentation=presentation,
            error_message=message,
            failure=failure,
        )


class PluginExecutor(Protocol):
    """Callable that runs a plugin against the matched input."""

    def __call__(self, text: str, match: re.Match[str]) -> Awaitable[ExecutionResult]:
        ...


@dataclass(frozen=True)
class PluginDescriptor:
    """Static definition of one capability and how it is triggered."""

    name: str
    description: str
    exact_pattern: re.Pattern[str]
    invocation_hint: str
    executor: PluginExecutor = field(compare=False, repr=False)
    natural_language_patterns: tuple[re.Pattern[str], ...] = ()


class _NoMatch:
    """Sentinel outcome: no plugin matched the input."""

    _instance: ClassVar[Optional["_NoMatch"]] = None

    def __new__(cls) -> "_NoMatch":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_MATCH"


NO_MATCH = _NoMatch()


@dataclass(frozen=True)
class PluginMatch:
    """A plugin matched and was executed."""

    plugin: PluginDescriptor
    result: ExecutionResult


DispatchOutcome = Union[PluginMatch, _NoMatch]
