"""Test weather plugin — upstream mapping and synthetic fallback."""

import json
import random
from unittest.mock import AsyncMock, MagicMock

import aiohttp

from src.assistant.base import FailureKind, PresentationHint, WeatherRecord
from src.assistant.plugins.weather import WeatherPlugin
from src.services.fetch import FetchResponse
from src.services.weather import SYNTHETIC_CONDITIONS, WeatherClient

OPENWEATHER_BODY = {
    "name": "London",
    "main": {"temp": 14.5, "humidity": 82},
    "weather": [{"description": "light rain", "icon": "10d"}],
    "wind": {"speed": 4.1},
}


def make_fetcher(response=None, error: Exception | None = None) -> MagicMock:
    fetcher = MagicMock()
    if error is not None:
        fetcher.fetch = AsyncMock(side_effect=error)
    else:
        fetcher.fetch = AsyncMock(return_value=response)
    return fetcher


class TestWeatherPlugin:
    """Test WeatherPlugin patterns and execution."""

    def _plugin(self, fetcher: MagicMock, seed: int = 7) -> WeatherPlugin:
        return WeatherPlugin(WeatherClient(fetcher, api_key="k"), rng=random.Random(seed))

    async def _run(self, plugin: WeatherPlugin, text: str):
        match = plugin.exact_pattern.match(text)
        assert match is not None
        return await plugin.execute(text, match)

    async def test_maps_upstream_response(self) -> None:
        fetcher = make_fetcher(FetchResponse(ok=True, status=200, body=json.dumps(OPENWEATHER_BODY)))
        plugin = self._plugin(fetcher)

        result = await self._run(plugin, "/weather  London ")

        assert result.success
        assert result.presentation is PresentationHint.CARD
        assert result.payload == WeatherRecord(
            location="London",
            temperature_celsius=15,
            condition_text="light rain",
            humidity_percent=82,
            wind_speed_kph=15,
            icon_id="10d",
        )
        url = fetcher.fetch.call_args.args[0]
        assert "q=London" in url
        assert "units=metric" in url
        assert "appid=k" in url

    async def test_blank_city_fails_without_fetch(self) -> None:
        fetcher = make_fetcher(FetchResponse(ok=True, status=200, body="{}"))
        plugin = self._plugin(fetcher)

        result = await self._run(plugin, "/weather   ")

        assert not result.success
        assert result.failure is FailureKind.MISSING_ARGUMENT
        assert result.error_message == "Please specify a city name"
        assert result.presentation is PresentationHint.TEXT
        fetcher.fetch.assert_not_called()

    async def test_fetch_error_falls_back_to_synthetic_data(self) -> None:
        for seed in range(50):
            fetcher = make_fetcher(error=aiohttp.ClientConnectionError("offline"))
            plugin = self._plugin(fetcher, seed=seed)

            result = await self._run(plugin, "/weather Paris")

            assert result.success
            record = result.payload
            assert isinstance(record, WeatherRecord)
            assert record.location == "Paris"
            assert 5 <= record.temperature_celsius <= 34
            assert 40 <= record.humidity_percent <= 79
            assert 5 <= record.wind_speed_kph <= 24
            assert record.condition_text in SYNTHETIC_CONDITIONS

    async def test_non_success_status_falls_back(self) -> None:
        fetcher = make_fetcher(FetchResponse(ok=False, status=401, body='{"cod": 401}'))
        plugin = self._plugin(fetcher)

        result = await self._run(plugin, "/weather Tokyo")

        assert result.success
        assert result.payload.location == "Tokyo"
        assert result.payload.icon_id == "01d"

    async def test_malformed_body_falls_back(self) -> None:
        fetcher = make_fetcher(FetchResponse(ok=True, status=200, body="not json"))
        plugin = self._plugin(fetcher)

        result = await self._run(plugin, "/weather Rome")

        assert result.success
        assert result.payload.location == "Rome"

    async def test_overflowing_numbers_fall_back(self) -> None:
        bodies = [
            '{"name": "Oslo", "main": {"temp": 1e400, "humidity": 50},'
            ' "weather": [{"description": "clear", "icon": "01d"}], "wind": {"speed": 2}}',
            '{"name": "Oslo", "main": {"temp": 4, "humidity": 50},'
            ' "weather": [{"description": "clear", "icon": "01d"}], "wind": {"speed": 1e400}}',
        ]
        for body in bodies:
            fetcher = make_fetcher(FetchResponse(ok=True, status=200, body=body))
            plugin = self._plugin(fetcher)

            result = await self._run(plugin, "/weather Oslo")

            assert result.success
            assert result.payload.location == "Oslo"
            assert 5 <= result.payload.temperature_celsius <= 34
            assert 5 <= result.payload.wind_speed_kph <= 24

    async def test_natural_language_patterns_capture_city(self) -> None:
        plugin = self._plugin(make_fetcher())
        cases = {
            "What's the weather in Berlin?": "Berlin",
            "how is the weather at New York": "New York",
            "weather for Cairo": "Cairo",
            "temperature in Lima?": "Lima",
        }
        for text, expected in cases.items():
            match = next((m for m in (p.search(text) for p in plugin.patterns) if m), None)
            assert match is not None, f"Pattern failed to match: {text}"
            assert match.group(1).strip() == expected
