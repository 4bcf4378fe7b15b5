"""HTTP client helper."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import aiohttp
from multidict import CIMultiDict, CIMultiDictProxy

from ...core.exceptions import DatasourceHTTPError, RateLimitError


@dataclass(frozen=True)
class HTTPResponse:
    """Status, headers and raw body of one completed HTTP exchange."""

    status: int
    headers: CIMultiDictProxy[str] = field(
        default_factory=lambda: CIMultiDictProxy(CIMultiDict())
    )
    body: bytes = b""

    def header_values(self, name: str) -> list[str]:
        """All values of a repeated header, in response order."""
        return list(self.headers.getall(name, []))


class HTTPClient:
    """Async HTTP client wrapper.

    One aiohttp session is created lazily and reused across requests. Timeouts
    are applied per request so one client can serve callers with different
    deadlines.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def get(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> HTTPResponse:
        """GET request. The body is read in full; status is never raised."""
        kwargs: dict[str, Any] = {"headers": dict(headers) if headers else None}
        if timeout is not None:
            kwargs["timeout"] = aiohttp.ClientTimeout(total=timeout)

        async with self.session.get(url, **kwargs) as response:
            body = await response.read()
            return HTTPResponse(status=response.status, headers=response.headers, body=body)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def raise_for_status(status_code: int, retry_after: str | None = None) -> None:
    """Raise DatasourceHTTPError for a non-2xx status; RateLimitError for 429."""
    if is_success(status_code):
        return

    message = f"Datasource rejected request, returned status code: {status_code}."
    if status_code == 429:
        raise RateLimitError(message, retry_after=retry_after)
    raise DatasourceHTTPError(message, status_code=status_code, retry_after=retry_after)
