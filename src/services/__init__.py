"""External data fetchers used by assistant plugins."""

from .dictionary import DictionaryClient
from .fetch import AiohttpFetcher, FetchResponse, HttpFetcher, UpstreamError
from .weather import WeatherClient

__all__ = [
    "AiohttpFetcher",
    "DictionaryClient",
    "FetchResponse",
    "HttpFetcher",
    "UpstreamError",
    "WeatherClient",
]
