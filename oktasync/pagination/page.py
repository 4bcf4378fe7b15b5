"""Page request/result types passed between the adapter, traversal and datasource."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..core.enums import EntityKind
from ..core.exceptions import InvalidPageRequestError
from .cursor import ResumeToken, StartCursor


@dataclass(frozen=True)
class PageRequest:
    """One page request for one entity kind.

    `base_url` has no trailing slash; `token` is the full Authorization header
    value ("SSWS ..." or "Bearer ...").
    """

    entity: EntityKind
    page_size: int
    base_url: str
    token: str
    api_version: str = "v1"
    filter: str | None = None
    search: str | None = None
    cursor: ResumeToken = field(default_factory=StartCursor)
    request_timeout_seconds: int = 120

    def __post_init__(self) -> None:
        if self.page_size <= 0:
            raise InvalidPageRequestError("Page size must be greater than 0.")


@dataclass(frozen=True)
class CollectionPage:
    """Raw outcome of one HTTP request for one page of one collection.

    A non-success status is data, not an error: objects is empty and the
    caller decides how to react to status_code / retry_after.
    """

    status_code: int
    retry_after: str | None = None
    objects: list[dict[str, Any]] = field(default_factory=list)
    next_link: str | None = None


@dataclass(frozen=True)
class PageResult:
    """Outcome of one traversal step. next_cursor None means the sync is complete."""

    status_code: int
    retry_after: str | None = None
    objects: list[dict[str, Any]] = field(default_factory=list)
    next_cursor: ResumeToken | None = None
