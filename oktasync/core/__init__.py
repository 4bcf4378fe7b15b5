"""Core components."""

from .enums import EntityKind, ErrorCode
from .exceptions import (
    ConfigurationError,
    DatasourceHTTPError,
    DatasourceTimeoutError,
    DatasourceTransportError,
    FilterSearchConflictError,
    InternalError,
    InvalidCursorError,
    InvalidDatasourceConfigError,
    InvalidEntityConfigError,
    InvalidFilterError,
    InvalidPageRequestError,
    InvalidSearchError,
    MissingParentError,
    OktaSyncError,
    ParseError,
    RateLimitError,
    TooManyCollectionObjectsError,
    UnsupportedEntityError,
)

__all__ = [
    "EntityKind",
    "ErrorCode",
    "OktaSyncError",
    "ConfigurationError",
    "InvalidDatasourceConfigError",
    "InvalidEntityConfigError",
    "UnsupportedEntityError",
    "InvalidFilterError",
    "InvalidSearchError",
    "FilterSearchConflictError",
    "InvalidPageRequestError",
    "InvalidCursorError",
    "MissingParentError",
    "DatasourceTransportError",
    "DatasourceTimeoutError",
    "DatasourceHTTPError",
    "RateLimitError",
    "InternalError",
    "ParseError",
    "TooManyCollectionObjectsError",
]
