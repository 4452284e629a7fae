"""Built-in assistant plugins and the default registry."""

import random
from typing import Optional

from ...config.settings import Settings
from ...services.dictionary import DictionaryClient
from ...services.fetch import HttpFetcher
from ...services.weather import WeatherClient
from ..registry import PluginRegistry
from .calculator import CalculatorPlugin
from .dictionary import DictionaryPlugin
from .weather import WeatherPlugin

__all__ = [
    "CalculatorPlugin",
    "DictionaryPlugin",
    "WeatherPlugin",
    "create_default_registry",
]


def create_default_registry(
    settings: Settings,
    fetcher: HttpFetcher,
    rng: Optional[random.Random] = None,
) -> PluginRegistry:
    """Registry with weather, calculator and dictionary, in that order."""
    registry = PluginRegistry()
    weather_client = WeatherClient(
        fetcher,
        api_key=settings.weather_api_key_str,
        base_url=settings.weather_api_url,
    )
    dictionary_client = DictionaryClient(fetcher, base_url=settings.dictionary_api_url)

    registry.register(WeatherPlugin(weather_client, rng=rng).descriptor())
    registry.register(CalculatorPlugin().descriptor())
    registry.register(DictionaryPlugin(dictionary_client).descriptor())
    return registry
