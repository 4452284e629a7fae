"""Assistant plugin system: registry, dispatcher and result types."""

from .base import (
    NO_MATCH,
    CalculationRecord,
    DefinitionRecord,
    DefinitionSense,
    DispatchOutcome,
    ExecutionResult,
    FailureKind,
    PluginDescriptor,
    PluginMatch,
    PresentationHint,
    WeatherRecord,
)
from .dispatcher import AssistantDispatcher
from .registry import PluginRegistry

__all__ = [
    "NO_MATCH",
    "AssistantDispatcher",
    "CalculationRecord",
    "DefinitionRecord",
    "DefinitionSense",
    "DispatchOutcome",
    "ExecutionResult",
    "FailureKind",
    "PluginDescriptor",
    "PluginMatch",
    "PluginRegistry",
    "PresentationHint",
    "WeatherRecord",
]
