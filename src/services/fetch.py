"""HTTP fetch interface and its aiohttp implementation."""

import json
from dataclasses import dataclass
from typing import Any, Optional, Protocol

import aiohttp
import structlog

logger = structlog.get_logger()


class UpstreamError(Exception):
    """An external lookup failed (network, status or payload shape)."""


@dataclass(frozen=True)
class FetchResponse:
    """Buffered HTTP response."""

    ok: bool
    status: int
    body: str

    def json(self) -> Any:
        """Decode the body as JSON."""
        return json.loads(self.body)


class HttpFetcher(Protocol):
    """Protocol for the network capability plugins depend on."""

    async def fetch(self, url: str) -> FetchResponse:
        """GET ``url`` and return the buffered response."""
        ...


class AiohttpFetcher:
    """HttpFetcher backed by aiohttp with a bounded total timeout."""

    def __init__(self, timeout_seconds: float = 10.0) -> None:
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
        return self._session

    async def fetch(self, url: str) -> FetchResponse:
        session = await self._get_session()
        async with session.get(url) as response:
            body = await response.text()
            ok = 200 <= response.status < 300
            if not ok:
                logger.warning("Upstream returned error status", url=url, status=response.status)
            return FetchResponse(ok=ok, status=response.status, body=body)

    async def close(self) -> None:
        """Close the underlying session."""
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None
