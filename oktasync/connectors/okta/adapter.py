"""Okta adapter: the entry point the ingestion host calls for each page.

Architecture:
    The adapter validates the request shape, decodes the opaque cursor into a
    resume token, delegates to the TraversalController and encodes the next
    token back into an opaque string. Non-2xx statuses returned by the
    datasource are turned into DatasourceHTTPError here, carrying Retry-After,
    so the host can schedule its own retry.

    The adapter keeps no per-sync state: everything needed to resume lives in
    the cursor string, so one adapter can serve many concurrent syncs.
"""

from __future__ import annotations

import logging

from oktasync.core import EntityKind
from oktasync.models import GetPageRequest, Page
from oktasync.pagination import (
    PageRequest,
    TraversalController,
    classify,
    decode_cursor,
    encode_cursor,
    to_wire,
)
from oktasync.runtime.rest import raise_for_status
from oktasync.utils import project_objects

from .config import GROUP_MEMBER_SPEC, OktaConfig
from .datasource import OktaDatasource
from .endpoints import construct_endpoint, validate_page_request
from .validation import validate_get_page_request

logger = logging.getLogger(__name__)


class OktaAdapter:
    """Serves GetPage requests for Users, Groups, GroupMembers and Applications."""

    def __init__(self, datasource: OktaDatasource | None = None) -> None:
        self._datasource = datasource or OktaDatasource()
        self._controller = TraversalController(
            self._datasource,
            build_endpoint=construct_endpoint,
            member_specs={GROUP_MEMBER_SPEC.member: GROUP_MEMBER_SPEC},
            validate_request=validate_page_request,
        )

    async def get_page(self, request: GetPageRequest[OktaConfig]) -> Page:
        """Validate the request and return one page of objects.

        Raises:
            OktaSyncError: Subclass describing why the page could not be returned
        """
        validate_get_page_request(request)
        return await self.request_page_from_datasource(request)

    async def request_page_from_datasource(self, request: GetPageRequest[OktaConfig]) -> Page:
        """Fetch one page for an already validated request."""
        config = request.config or OktaConfig()
        entity = EntityKind(request.entity.external_id)

        address = request.address
        if not address.startswith("https://"):
            address = "https://" + address

        token = classify(decode_cursor(request.cursor), entity)

        page_request = PageRequest(
            entity=entity,
            page_size=request.page_size,
            base_url=address.rstrip("/"),
            token=request.auth.http_authorization if request.auth else "",
            api_version=config.api_version or "v1",
            filter=config.filters.get(entity.value),
            search=config.search.get(entity.value),
            cursor=token,
            request_timeout_seconds=config.request_timeout_seconds,
        )

        result = await self._controller.get_page(page_request)

        raise_for_status(result.status_code, result.retry_after)

        objects = project_objects(result.objects, request.entity.attributes)
        next_cursor = encode_cursor(to_wire(result.next_cursor))

        logger.debug(
            "Page ready",
            extra={
                "entity": entity.value,
                "object_count": len(objects),
                "has_next_cursor": bool(next_cursor),
            },
        )
        return Page(objects=objects, next_cursor=next_cursor)

    async def close(self) -> None:
        """Close underlying HTTP resources."""
        await self._datasource.close()

    async def __aenter__(self) -> OktaAdapter:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
