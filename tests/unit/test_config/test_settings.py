"""Test settings loading from the environment."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from src.config.settings import Settings
from src.services.dictionary import DEFAULT_DICTIONARY_URL
from src.services.weather import DEFAULT_WEATHER_URL


class TestSettings:
    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.chdir(Path(__file__).parent)
        settings = Settings()

        assert settings.weather_api_url == DEFAULT_WEATHER_URL
        assert settings.dictionary_api_url == DEFAULT_DICTIONARY_URL
        assert settings.weather_api_key_str == "demo"
        assert settings.http_timeout_seconds == 10.0
        assert settings.history_path is None

    def test_environment_overrides(self, monkeypatch, tmp_path) -> None:
        monkeypatch.setenv("NEOCHAT_WEATHER_API_KEY", "secret")
        monkeypatch.setenv("NEOCHAT_HTTP_TIMEOUT_SECONDS", "2.5")
        monkeypatch.setenv("NEOCHAT_HISTORY_PATH", str(tmp_path / "h.json"))

        settings = Settings()

        assert settings.weather_api_key_str == "secret"
        assert "secret" not in repr(settings)
        assert settings.http_timeout_seconds == 2.5
        assert settings.history_path == tmp_path / "h.json"

    def test_timeout_must_be_positive(self, monkeypatch) -> None:
        monkeypatch.setenv("NEOCHAT_HTTP_TIMEOUT_SECONDS", "0")
        with pytest.raises(ValidationError):
            Settings()
