"""Composite resume token and its wire codec.

Architecture:
    The caller persists a single opaque string between page requests. On the
    wire that string is base64-encoded JSON with three optional fields:

        {"cursor": ..., "collectionId": ..., "collectionCursor": ...}

    `CompositeCursor` is that wire shape. Traversal code never branches on the
    raw fields: `classify()` turns them into one of the tagged shapes below,
    rejecting combinations that are invalid for the entity kind.

Shapes:
    - StartCursor: nothing fetched yet
    - ItemCursor: flat entities, next page link of the single collection
    - ChildCursor: member entities, iterating one parent's children
    - NextParentCursor: member entities, current parent exhausted

See Also:
    - TraversalController: consumes and produces these shapes
    - OktaAdapter: encodes/decodes at the caller boundary
"""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass
from typing import Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ..core.enums import EntityKind
from ..core.exceptions import InvalidCursorError


class CompositeCursor(BaseModel):
    """Wire form of the resume token."""

    cursor: str | None = None
    collection_id: str | None = Field(default=None, alias="collectionId")
    collection_cursor: str | None = Field(default=None, alias="collectionCursor")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


@dataclass(frozen=True)
class StartCursor:
    pass


@dataclass(frozen=True)
class ItemCursor:
    item_cursor: str


@dataclass(frozen=True)
class ChildCursor:
    parent_id: str
    item_cursor: str | None = None
    # Link to the next parent page, kept until this parent's children run out.
    parent_cursor: str | None = None


@dataclass(frozen=True)
class NextParentCursor:
    parent_cursor: str


ResumeToken = Union[StartCursor, ItemCursor, ChildCursor, NextParentCursor]


def decode_cursor(raw: str) -> CompositeCursor | None:
    """Decode the caller's opaque cursor string. Empty string means no cursor."""
    if not raw:
        return None

    try:
        payload = base64.b64decode(raw, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidCursorError(f"Failed to decode base64 cursor: {e}.") from e

    try:
        return CompositeCursor.model_validate_json(payload)
    except PydanticValidationError as e:
        raise InvalidCursorError(f"Failed to unmarshal JSON cursor: {e}.") from e


def encode_cursor(cursor: CompositeCursor | None) -> str:
    """Encode a cursor for the caller. None encodes to the empty string."""
    if cursor is None:
        return ""
    payload = cursor.model_dump_json(by_alias=True, exclude_none=True)
    return base64.b64encode(payload.encode("utf-8")).decode("ascii")


def classify(cursor: CompositeCursor | None, entity: EntityKind) -> ResumeToken:
    """Reconstruct the tagged token shape from wire fields.

    Raises:
        InvalidCursorError: If the field combination is not valid for the entity
    """
    if cursor is None:
        return StartCursor()

    # Empty strings are treated as absent fields.
    if not entity.is_member_entity:
        if cursor.collection_id or cursor.collection_cursor:
            raise InvalidCursorError(
                "Cursor must not contain CollectionID or CollectionCursor fields "
                f"for entity {entity.value}."
            )
        if cursor.cursor:
            return ItemCursor(item_cursor=cursor.cursor)
        return StartCursor()

    if cursor.collection_id:
        return ChildCursor(
            parent_id=cursor.collection_id,
            item_cursor=cursor.cursor or None,
            parent_cursor=cursor.collection_cursor or None,
        )

    # A member page position is meaningless without the parent it belongs to.
    if cursor.cursor:
        raise InvalidCursorError(
            f"Cursor does not have CollectionID set for entity {entity.value}."
        )

    if cursor.collection_cursor:
        return NextParentCursor(parent_cursor=cursor.collection_cursor)

    return StartCursor()


def to_wire(token: ResumeToken | None) -> CompositeCursor | None:
    """Flatten a tagged token back to wire fields. Start and None both encode as no cursor."""
    if token is None or isinstance(token, StartCursor):
        return None
    if isinstance(token, ItemCursor):
        return CompositeCursor(cursor=token.item_cursor) if token.item_cursor else None
    if isinstance(token, ChildCursor):
        return CompositeCursor(
            cursor=token.item_cursor or None,
            collection_id=token.parent_id,
            collection_cursor=token.parent_cursor or None,
        )
    if isinstance(token, NextParentCursor):
        if not token.parent_cursor:
            return None
        return CompositeCursor(collection_cursor=token.parent_cursor)
    raise TypeError(f"Unknown resume token shape: {type(token).__name__}")
