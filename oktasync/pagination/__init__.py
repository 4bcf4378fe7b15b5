"""Resume tokens and hierarchical page traversal."""

from .cursor import (
    ChildCursor,
    CompositeCursor,
    ItemCursor,
    NextParentCursor,
    ResumeToken,
    StartCursor,
    classify,
    decode_cursor,
    encode_cursor,
    to_wire,
)
from .page import CollectionPage, PageRequest, PageResult
from .traversal import CollectionClient, MemberEntitySpec, TraversalController

__all__ = [
    "CompositeCursor",
    "ResumeToken",
    "StartCursor",
    "ItemCursor",
    "ChildCursor",
    "NextParentCursor",
    "classify",
    "decode_cursor",
    "encode_cursor",
    "to_wire",
    "PageRequest",
    "PageResult",
    "CollectionPage",
    "CollectionClient",
    "MemberEntitySpec",
    "TraversalController",
]
