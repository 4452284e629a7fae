"""Test weather response mapping and synthetic data."""

import random

import pytest

from src.services.fetch import UpstreamError
from src.services.weather import (
    SYNTHETIC_CONDITIONS,
    WeatherClient,
    parse_weather,
    round_half_up,
    synthesize_weather,
)


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        "value, expected",
        [(0.5, 1), (1.5, 2), (2.5, 3), (2.4, 2), (-0.5, 0), (-1.6, -2)],
    )
    def test_rounds_halves_up(self, value: float, expected: int) -> None:
        assert round_half_up(value) == expected


class TestParseWeather:
    def test_converts_wind_to_kph(self) -> None:
        record = parse_weather(
            {
                "name": "Oslo",
                "main": {"temp": -3.5, "humidity": 60},
                "weather": [{"description": "snow", "icon": "13n"}],
                "wind": {"speed": 10},
            }
        )
        assert record.wind_speed_kph == 36
        assert record.temperature_celsius == -3

    def test_missing_fields_raise_upstream_error(self) -> None:
        with pytest.raises(UpstreamError):
            parse_weather({"name": "Oslo", "main": {}})

    def test_empty_conditions_raise_upstream_error(self) -> None:
        with pytest.raises(UpstreamError):
            parse_weather({"name": "Oslo", "main": {"temp": 1, "humidity": 2}, "weather": []})

    def test_non_finite_temperature_raises_upstream_error(self) -> None:
        with pytest.raises(UpstreamError):
            parse_weather(
                {
                    "name": "Oslo",
                    "main": {"temp": float("inf"), "humidity": 2},
                    "weather": [{"description": "clear", "icon": "01d"}],
                    "wind": {"speed": 1},
                }
            )


class TestSynthesizeWeather:
    def test_values_within_bounds(self) -> None:
        rng = random.Random(0)
        for _ in range(200):
            record = synthesize_weather("Nowhere", rng)
            assert record.location == "Nowhere"
            assert 5 <= record.temperature_celsius <= 34
            assert 40 <= record.humidity_percent <= 79
            assert 5 <= record.wind_speed_kph <= 24
            assert record.condition_text in SYNTHETIC_CONDITIONS
            assert record.icon_id == "01d"


class TestWeatherClient:
    def test_build_url_encodes_city(self) -> None:
        client = WeatherClient(fetcher=None, api_key="abc", base_url="https://example.test/w")
        assert client.build_url("São Paulo") == (
            "https://example.test/w?q=S%C3%A3o+Paulo&appid=abc&units=metric"
        )
