"""Weather lookup against an OpenWeatherMap-compatible endpoint."""

import math
import random
from typing import Any, Optional
from urllib.parse import urlencode

from ..assistant.base import WeatherRecord
from .fetch import HttpFetcher, UpstreamError

DEFAULT_WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"

SYNTHETIC_CONDITIONS = ("Sunny", "Cloudy", "Rainy", "Partly Cloudy")
SYNTHETIC_ICON = "01d"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves upward."""
    return math.floor(value + 0.5)


def synthesize_weather(location: str, rng: Optional[random.Random] = None) -> WeatherRecord:
    """Plausible stand-in conditions used when the lookup fails."""
    rng = rng or random.Random()
    return WeatherRecord(
        location=location,
        temperature_celsius=rng.randint(5, 34),
        condition_text=rng.choice(SYNTHETIC_CONDITIONS),
        humidity_percent=rng.randint(40, 79),
        wind_speed_kph=rng.randint(5, 24),
        icon_id=SYNTHETIC_ICON,
    )


def parse_weather(data: Any) -> WeatherRecord:
    """Map a current-weather response body to a WeatherRecord.

    Temperatures arrive in Celsius (``units=metric``) and wind speed in
    metres per second.
    """
    try:
        conditions = data["weather"][0]
        return WeatherRecord(
            location=str(data["name"]),
            temperature_celsius=round_half_up(float(data["main"]["temp"])),
            condition_text=str(conditions["description"]),
            humidity_percent=int(data["main"]["humidity"]),
            wind_speed_kph=round_half_up(float(data["wind"]["speed"]) * 3.6),
            icon_id=str(conditions["icon"]),
        )
    except (KeyError, IndexError, TypeError, ValueError, OverflowError) as exc:
        raise UpstreamError(f"Malformed weather payload: {exc}") from exc


class WeatherClient:
    """Fetch current weather for a city."""

    def __init__(
        self,
        fetcher: HttpFetcher,
        api_key: str = "demo",
        base_url: str = DEFAULT_WEATHER_URL,
    ) -> None:
        self._fetcher = fetcher
        self._api_key = api_key
        self._base_url = base_url

    def build_url(self, city: str) -> str:
        query = urlencode({"q": city, "appid": self._api_key, "units": "metric"})
        return f"{self._base_url}?{query}"

    async def current(self, city: str) -> WeatherRecord:
        """Return current conditions for ``city``.

        Raises:
            UpstreamError: on transport failure, non-success status or an
                unexpected payload.
        """
        try:
            response = await self._fetcher.fetch(self.build_url(city))
        except Exception as exc:
            raise UpstreamError(f"Weather request failed: {exc}") from exc

        if not response.ok:
            raise UpstreamError(f"Weather request returned HTTP {response.status}")

        try:
            data = response.json()
        except ValueError as exc:
            raise UpstreamError(f"Weather response is not JSON: {exc}") from exc

        return parse_weather(data)
