"""Application settings loaded from the environment."""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..services.dictionary import DEFAULT_DICTIONARY_URL
from ..services.weather import DEFAULT_WEATHER_URL


class Settings(BaseSettings):
    """Settings for the chat assistant.

    Every field can be set through a ``NEOCHAT_``-prefixed environment
    variable or a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="NEOCHAT_",
        env_file=".env",
        extra="ignore",
    )

    weather_api_url: str = DEFAULT_WEATHER_URL
    weather_api_key: SecretStr = SecretStr("demo")
    dictionary_api_url: str = DEFAULT_DICTIONARY_URL
    http_timeout_seconds: float = Field(default=10.0, gt=0)
    history_path: Optional[Path] = None
    log_level: str = "INFO"

    @property
    def weather_api_key_str(self) -> str:
        return self.weather_api_key.get_secret_value()


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings instance."""
    return Settings()
