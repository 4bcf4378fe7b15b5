"""Caller-facing data models."""

from .request import (
    AttributeConfig,
    CommonConfig,
    DatasourceAuth,
    EntityConfig,
    GetPageRequest,
    Page,
)

__all__ = [
    "CommonConfig",
    "AttributeConfig",
    "EntityConfig",
    "DatasourceAuth",
    "GetPageRequest",
    "Page",
]
