"""Caller-facing request/response models for page fetches."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field


class CommonConfig(BaseModel):
    """Settings shared by every datasource config."""

    request_timeout_seconds: int = Field(default=120, gt=0, alias="requestTimeoutSeconds")

    model_config = ConfigDict(populate_by_name=True)


ConfigT = TypeVar("ConfigT", bound=CommonConfig)


class AttributeConfig(BaseModel):
    """One requested attribute. external_id is a key or a "$."-prefixed JSON path."""

    external_id: str = Field(..., min_length=1, alias="externalId")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class EntityConfig(BaseModel):
    """Entity being synced and the attributes requested for it."""

    external_id: str = Field(..., alias="externalId")
    attributes: list[AttributeConfig] = Field(default_factory=list)
    child_entities: list[EntityConfig] = Field(default_factory=list, alias="childEntities")

    model_config = ConfigDict(populate_by_name=True)


class DatasourceAuth(BaseModel):
    """Credentials for the datasource. http_authorization is the raw header value."""

    http_authorization: str = Field(default="", alias="httpAuthorization")

    model_config = ConfigDict(populate_by_name=True)


class GetPageRequest(BaseModel, Generic[ConfigT]):
    """Inbound page request from the ingestion host.

    cursor is the opaque string returned as next_cursor by the previous call,
    or empty for the first page of a sync.
    """

    address: str
    auth: DatasourceAuth | None = None
    entity: EntityConfig
    config: ConfigT | None = None
    page_size: int = Field(..., alias="pageSize")
    cursor: str = ""
    ordered: bool = False

    model_config = ConfigDict(populate_by_name=True)


class Page(BaseModel):
    """One page of objects. An empty next_cursor marks the end of the sync."""

    objects: list[dict[str, Any]] = Field(default_factory=list)
    next_cursor: str = Field(default="", alias="nextCursor")

    model_config = ConfigDict(populate_by_name=True)
