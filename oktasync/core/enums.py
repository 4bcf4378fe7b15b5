"""Core enumerations shared across the connector.

Architecture:
    This module defines the closed sets of values the connector routes on.
    Every entity kind the connector can fetch is a member of EntityKind, and
    every error surfaced to the caller carries an ErrorCode.

Design Decisions:
    - String enums: values are the exact external IDs / codes seen on the wire,
      so members serialise without a lookup table
    - Closed set: an unknown entity kind is rejected at parse time instead of
      being dispatched as an arbitrary string

Key Types:
    - EntityKind: Okta collections the connector can page through
    - ErrorCode: Caller-facing classification of a failure
"""

from __future__ import annotations

from enum import Enum


class EntityKind(str, Enum):
    """Okta entity kinds, named by their external ID."""

    USER = "User"
    GROUP = "Group"
    GROUP_MEMBER = "GroupMember"
    APPLICATION = "Application"

    @property
    def is_member_entity(self) -> bool:
        """True when members are derived from a parent collection (groups)."""
        return self is EntityKind.GROUP_MEMBER

    @classmethod
    def parse(cls, external_id: str) -> EntityKind | None:
        """Return the kind for an external ID, or None when unsupported."""
        try:
            return cls(external_id)
        except ValueError:
            return None


class ErrorCode(str, Enum):
    """Classification attached to every error returned to the caller."""

    INVALID_DATASOURCE_CONFIG = "INVALID_DATASOURCE_CONFIG"
    INVALID_ENTITY_CONFIG = "INVALID_ENTITY_CONFIG"
    INVALID_PAGE_REQUEST_CONFIG = "INVALID_PAGE_REQUEST_CONFIG"
    DATASOURCE_FAILED = "DATASOURCE_FAILED"
    INTERNAL = "INTERNAL"
