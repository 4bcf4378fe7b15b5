"""Okta datasource: one HTTP request for one page of one collection.

Architecture:
    The datasource never interprets pagination state; it fetches a fully built
    URL and reports what came back. Three outcomes are kept apart:

    - transport failed (connection error, timeout): raised as
      DatasourceTransportError / DatasourceTimeoutError
    - Okta answered with a non-200 status: returned as data (status code,
      Retry-After, no objects) so the caller applies its own retry policy
    - Okta answered 200 with something other than a JSON array of objects:
      raised as ParseError, the page is never partially returned
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import aiohttp

from oktasync.core import DatasourceTimeoutError, DatasourceTransportError, ParseError
from oktasync.pagination import CollectionPage
from oktasync.runtime.rest import HTTPClient, next_link

from .config import CONTENT_TYPE

logger = logging.getLogger(__name__)


def parse_response(body: bytes) -> list[dict[str, Any]]:
    """Parse a page body; it must be a JSON array of objects."""
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseError(f"Failed to unmarshal the datasource response: {e}.") from e

    if not isinstance(data, list):
        raise ParseError(
            "Failed to unmarshal the datasource response: expected a JSON array of objects, "
            f"got {type(data).__name__}."
        )

    for item in data:
        if not isinstance(item, dict):
            raise ParseError(
                "Failed to unmarshal the datasource response: expected a JSON array of objects, "
                f"found {type(item).__name__} element."
            )

    return data


class OktaDatasource:
    """Fetches single collection pages from Okta."""

    def __init__(self, http: HTTPClient | None = None) -> None:
        self._http = http or HTTPClient()

    async def fetch_collection_page(
        self, url: str, token: str, timeout_seconds: int
    ) -> CollectionPage:
        """GET one page.

        Args:
            url: Fully built request URL (or a cursor link)
            token: Authorization header value
            timeout_seconds: Deadline for the whole exchange

        Raises:
            DatasourceTimeoutError: If timeout_seconds elapsed
            DatasourceTransportError: On any other connection failure
            ParseError: If a 200 response body is not a JSON array of objects
        """
        headers = {"Authorization": token, "Content-Type": CONTENT_TYPE}

        logger.info("Sending HTTP request to datasource", extra={"url": url})

        try:
            response = await self._http.get(url, headers=headers, timeout=timeout_seconds)
        except asyncio.TimeoutError as e:
            logger.error(
                "HTTP request to datasource timed out",
                extra={"url": url, "timeout_seconds": timeout_seconds},
            )
            raise DatasourceTimeoutError(
                f"Failed to execute Okta request: request timed out after "
                f"{timeout_seconds} seconds.",
                timeout_seconds=timeout_seconds,
            ) from e
        except aiohttp.ClientError as e:
            logger.error("HTTP request to datasource failed", extra={"url": url, "error": str(e)})
            raise DatasourceTransportError(f"Failed to execute Okta request: {e}.") from e

        retry_after = response.headers.get("Retry-After")

        if response.status != 200:
            logger.error(
                "Datasource request failed",
                extra={
                    "url": url,
                    "status_code": response.status,
                    "retry_after": retry_after,
                    "body": response.body.decode("utf-8", errors="replace"),
                },
            )
            return CollectionPage(status_code=response.status, retry_after=retry_after)

        objects = parse_response(response.body)

        return CollectionPage(
            status_code=response.status,
            retry_after=retry_after,
            objects=objects,
            next_link=next_link(response.header_values("Link")),
        )

    async def close(self) -> None:
        """Close underlying HTTP resources."""
        await self._http.close()

    async def __aenter__(self) -> OktaDatasource:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
