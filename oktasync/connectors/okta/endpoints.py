"""Okta endpoint construction.

URL formats (v = api version, N = page size):

    [Users]             {base}/api/{v}/users?limit=N
    [Filtered Users]    {base}/api/{v}/users?filter=status+eq+%22ACTIVE%22&limit=N
    [Groups]            {base}/api/{v}/groups?filter=type+eq+%22OKTA_GROUP%22+or+...&limit=N
    [Applications]      {base}/api/{v}/apps?limit=N
    [GroupMembers]      {base}/api/{v}/groups/{groupId}/users?limit=N

Once a cursor link exists it is returned as is: Okta embeds filter, search,
limit and the `after` position in the links it issues.
"""

from __future__ import annotations

from urllib.parse import quote_plus

from oktasync.core import (
    EntityKind,
    FilterSearchConflictError,
    InvalidFilterError,
    InvalidSearchError,
    MissingParentError,
    UnsupportedEntityError,
)
from oktasync.pagination import ChildCursor, ItemCursor, PageRequest

from .config import DEFAULT_GROUP_FILTER, ENTITY_PATHS, MIN_QUERY_EXPRESSION_LENGTH


def encode_query_expression(expression: str) -> str:
    """Unescape `\\"` to `"` (config stores quotes escaped) and query-encode."""
    return quote_plus(expression.replace('\\"', '"'), safe="")


def encode_query_options(
    filter_: str | None, search: str | None
) -> tuple[str | None, str | None]:
    """Validate and encode the filter and search expressions for one entity.

    Raises:
        FilterSearchConflictError: If both are set
        InvalidFilterError: If the encoded filter is too short to be valid
        InvalidSearchError: If the encoded search is too short to be valid
    """
    if filter_ and search:
        raise FilterSearchConflictError()

    encoded_filter = None
    if filter_:
        encoded_filter = encode_query_expression(filter_)
        if len(encoded_filter) < MIN_QUERY_EXPRESSION_LENGTH:
            raise InvalidFilterError()

    encoded_search = None
    if search:
        encoded_search = encode_query_expression(search)
        if len(encoded_search) < MIN_QUERY_EXPRESSION_LENGTH:
            raise InvalidSearchError()

    return encoded_filter, encoded_search


def _cursor_link(token: object) -> str | None:
    if isinstance(token, (ItemCursor, ChildCursor)) and token.item_cursor:
        return token.item_cursor
    return None


def validate_page_request(request: PageRequest) -> None:
    """Checks that need no network access; run before the first request of a call.

    A request resuming from a cursor link is not checked: the link already
    carries the filter, search and limit it was issued with.
    """
    if _cursor_link(request.cursor) is None:
        encode_query_options(request.filter, request.search)


def construct_endpoint(request: PageRequest) -> str:
    """Build the URL for one page of request.entity.

    Raises:
        ConfigurationError: If filter/search are invalid, the entity is
            unsupported, or a member endpoint has no parent ID
    """
    token = request.cursor
    link = _cursor_link(token)
    if link is not None:
        return link

    filter_, search = encode_query_options(request.filter, request.search)
    entity = request.entity
    params: list[str] = []

    if entity is EntityKind.USER or entity is EntityKind.APPLICATION:
        path = ENTITY_PATHS[entity]
    elif entity is EntityKind.GROUP:
        path = ENTITY_PATHS[entity]
        if not filter_ and not search:
            filter_ = encode_query_expression(DEFAULT_GROUP_FILTER)
    elif entity is EntityKind.GROUP_MEMBER:
        if not isinstance(token, ChildCursor):
            raise MissingParentError()
        path = f"groups/{token.parent_id}/users"
        # The group members endpoint takes no filter or search.
        filter_ = search = None
    else:
        raise UnsupportedEntityError()

    if filter_:
        params.append(f"filter={filter_}")
    if search:
        params.append(f"search={search}")
    params.append(f"limit={request.page_size}")

    return f"{request.base_url}/api/{request.api_version}/{path}?{'&'.join(params)}"
