"""Weather plugin — current conditions for a city."""

import random
import re
from typing import Optional

import structlog

from ...services.fetch import UpstreamError
from ...services.weather import WeatherClient, synthesize_weather
from ..base import ExecutionResult, FailureKind, PluginDescriptor

logger = structlog.get_logger()


class WeatherPlugin:
    """Look up the weather, substituting synthetic data if the lookup fails."""

    name: str = "weather"
    description: str = "Get current weather information for any city"
    invocation_hint: str = "/weather [city]"
    exact_pattern: re.Pattern[str] = re.compile(r"^/weather\s+(.+)$", re.I)
    patterns: list[re.Pattern[str]] = [
        re.compile(r"(?:what's|what is|how's|how is) the weather (?:in|for|at) ([^?]+)", re.I),
        re.compile(r"weather (?:in|for|at) ([^?]+)", re.I),
        re.compile(r"temperature (?:in|for|at) ([^?]+)", re.I),
    ]

    def __init__(self, client: WeatherClient, rng: Optional[random.Random] = None) -> None:
        self._client = client
        self._rng = rng or random.Random()

    async def execute(self, text: str, match: re.Match[str]) -> ExecutionResult:
        city = (match.group(1) or "").strip()
        if not city:
            return ExecutionResult.fail(
                FailureKind.MISSING_ARGUMENT, "Please specify a city name"
            )

        try:
            record = await self._client.current(city)
        except UpstreamError as exc:
            logger.warning("Weather lookup failed, using synthetic data", city=city, error=str(exc))
            record = synthesize_weather(city, self._rng)

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
