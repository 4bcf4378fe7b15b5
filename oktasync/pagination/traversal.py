"""Hierarchical traversal of flat and member (parent/child) collections.

Architecture:
    Flat entities are one level of link pagination: build the endpoint, fetch
    one page, hand back the "next" link as the item cursor.

    Member entities cannot be listed directly. The datasource only answers
    "children of parent X", so the controller walks the parent collection one
    parent at a time (page size 1) and, for the current parent, walks its
    children. Both positions live in the resume token, so one call performs at
    most two sequential requests:

        1. fetch_parent_page   only when no parent is being iterated
        2. fetch_child_page    always

    No state survives between calls except what is returned in next_cursor.

Token transitions for a member entity:

    Start / NextParentCursor --(1 parent)--> ChildCursor(parent, None, next parent link)
    ChildCursor --(child next link)--> ChildCursor(parent, child link, parent link)
    ChildCursor --(no child link, parent link)--> NextParentCursor(parent link)
    ChildCursor --(no child link, no parent link)--> None (sync complete)

See Also:
    - cursor.classify: builds the tagged token from caller input
    - connectors.okta.endpoints.construct_endpoint: URL for each request
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from typing import Any, Protocol

from ..core.enums import EntityKind
from ..core.exceptions import InvalidCursorError, ParseError, TooManyCollectionObjectsError
from .cursor import ChildCursor, ItemCursor, NextParentCursor, StartCursor
from .page import CollectionPage, PageRequest, PageResult

logger = logging.getLogger(__name__)

HTTP_OK = 200


class CollectionClient(Protocol):
    async def fetch_collection_page(
        self, url: str, token: str, timeout_seconds: int
    ) -> CollectionPage: ...


@dataclass(frozen=True)
class MemberEntitySpec:
    """How a member entity is derived from its parent collection."""

    member: EntityKind
    parent: EntityKind
    unique_id_attribute: str
    member_id_field: str
    parent_id_field: str

    def stamp(self, obj: dict[str, Any], parent_id: str) -> dict[str, Any]:
        """Give a child record a globally unique id and both foreign keys."""
        member_id = obj.get(self.unique_id_attribute)
        if not isinstance(member_id, str):
            raise ParseError(
                f"Failed to parse {self.unique_id_attribute} field in Okta "
                f"{self.member.value} response as string."
            )

        stamped = dict(obj)
        stamped[self.unique_id_attribute] = f"{member_id}-{parent_id}"
        stamped[self.member_id_field] = member_id
        stamped[self.parent_id_field] = parent_id
        return stamped


class TraversalController:
    """Turns one PageRequest into one PageResult, resolving parents when needed."""

    def __init__(
        self,
        client: CollectionClient,
        build_endpoint: Callable[[PageRequest], str],
        member_specs: Mapping[EntityKind, MemberEntitySpec] | None = None,
        validate_request: Callable[[PageRequest], None] | None = None,
    ) -> None:
        self._client = client
        self._build_endpoint = build_endpoint
        self._member_specs = dict(member_specs or {})
        self._validate_request = validate_request

    async def get_page(self, request: PageRequest) -> PageResult:
        """Fetch the next page for request.cursor.

        Raises:
            ConfigurationError: If the request or token is invalid (no request is sent)
            DatasourceTransportError: If an HTTP exchange fails
            InternalError: If a response breaks the expected shape
        """
        logger.info(
            "Starting datasource request",
            extra={"entity": request.entity.value, "page_size": request.page_size},
        )

        if self._validate_request is not None:
            self._validate_request(request)

        spec = self._member_specs.get(request.entity)
        if spec is None:
            result = await self._get_flat_page(request)
        else:
            result = await self._get_member_page(request, spec)

        logger.info(
            "Datasource request completed",
            extra={
                "entity": request.entity.value,
                "status_code": result.status_code,
                "object_count": len(result.objects),
                "has_next_cursor": result.next_cursor is not None,
            },
        )
        return result

    async def _get_flat_page(self, request: PageRequest) -> PageResult:
        if not isinstance(request.cursor, (StartCursor, ItemCursor)):
            raise InvalidCursorError(
                "Cursor must not contain CollectionID or CollectionCursor fields "
                f"for entity {request.entity.value}."
            )

        page = await self._fetch(request)
        if page.status_code != HTTP_OK:
            return PageResult(status_code=page.status_code, retry_after=page.retry_after)

        next_cursor = ItemCursor(item_cursor=page.next_link) if page.next_link else None
        return PageResult(
            status_code=page.status_code,
            retry_after=page.retry_after,
            objects=page.objects,
            next_cursor=next_cursor,
        )

    async def _get_member_page(self, request: PageRequest, spec: MemberEntitySpec) -> PageResult:
        token = request.cursor

        if isinstance(token, ItemCursor):
            raise InvalidCursorError(
                f"Cursor does not have CollectionID set for entity {request.entity.value}."
            )

        if isinstance(token, (StartCursor, NextParentCursor)):
            parent_cursor = token.parent_cursor if isinstance(token, NextParentCursor) else None
            parent_page = await self.fetch_parent_page(request, spec, parent_cursor)

            if parent_page.status_code != HTTP_OK:
                return PageResult(
                    status_code=parent_page.status_code, retry_after=parent_page.retry_after
                )

            count = len(parent_page.objects)
            if count > 1:
                raise TooManyCollectionObjectsError(count)

            if count == 0:
                if parent_page.next_link is None:
                    logger.info(
                        "No collection objects remaining, sync complete",
                        extra={"entity": request.entity.value},
                    )
                    return PageResult(status_code=HTTP_OK)
                # Empty parent page that still links onwards: move past it.
                return PageResult(
                    status_code=HTTP_OK,
                    next_cursor=NextParentCursor(parent_cursor=parent_page.next_link),
                )

            parent_id = parent_page.objects[0].get(spec.unique_id_attribute)
            if not isinstance(parent_id, str):
                raise ParseError(
                    f"Failed to parse {spec.unique_id_attribute} field in Okta "
                    f"{spec.parent.value} response as string."
                )
            token = ChildCursor(parent_id=parent_id, parent_cursor=parent_page.next_link)

        child_page = await self.fetch_child_page(request, token)
        if child_page.status_code != HTTP_OK:
            return PageResult(
                status_code=child_page.status_code, retry_after=child_page.retry_after
            )

        objects = [spec.stamp(obj, token.parent_id) for obj in child_page.objects]

        next_cursor: ChildCursor | NextParentCursor | None
        if child_page.next_link:
            next_cursor = ChildCursor(
                parent_id=token.parent_id,
                item_cursor=child_page.next_link,
                parent_cursor=token.parent_cursor,
            )
        elif token.parent_cursor:
            next_cursor = NextParentCursor(parent_cursor=token.parent_cursor)
        else:
            next_cursor = None

        return PageResult(
            status_code=child_page.status_code,
            retry_after=child_page.retry_after,
            objects=objects,
            next_cursor=next_cursor,
        )

    async def fetch_parent_page(
        self,
        request: PageRequest,
        spec: MemberEntitySpec,
        parent_cursor: str | None,
    ) -> CollectionPage:
        """Fetch exactly one parent, at parent_cursor or the start of the parent collection."""
        parent_request = replace(
            request,
            entity=spec.parent,
            page_size=1,
            filter=None,
            search=None,
            cursor=ItemCursor(item_cursor=parent_cursor) if parent_cursor else StartCursor(),
        )
        return await self._fetch(parent_request)

    async def fetch_child_page(self, request: PageRequest, token: ChildCursor) -> CollectionPage:
        """Fetch one page of the children of token.parent_id."""
        return await self._fetch(replace(request, cursor=token))

    async def _fetch(self, request: PageRequest) -> CollectionPage:
        url = self._build_endpoint(request)
        return await self._client.fetch_collection_page(
            url, request.token, request.request_timeout_seconds
        )
