"""Custom exception hierarchy.

Every error carries a stable, user-facing message and an ErrorCode. The
hierarchy separates four families:

- ConfigurationError: the request or its config can never succeed as sent
- DatasourceTransportError: the HTTP exchange itself failed (connection, timeout)
- DatasourceHTTPError: Okta answered with a non-success status
- InternalError: the response broke the expected contract, or a bug
"""

from __future__ import annotations

from .enums import ErrorCode


class OktaSyncError(Exception):
    """Base exception for all connector errors."""

    code: ErrorCode = ErrorCode.INTERNAL
    retryable: bool = False

    def __init__(self, message: str, code: ErrorCode | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class ConfigurationError(OktaSyncError):
    """Request, entity or datasource configuration is invalid."""


class InvalidDatasourceConfigError(ConfigurationError):
    code = ErrorCode.INVALID_DATASOURCE_CONFIG


class InvalidEntityConfigError(ConfigurationError):
    code = ErrorCode.INVALID_ENTITY_CONFIG


class UnsupportedEntityError(InvalidEntityConfigError):
    """Entity external ID is not one the connector can fetch."""

    def __init__(self, message: str = "Provided entity external ID is invalid.") -> None:
        super().__init__(message)


class InvalidFilterError(InvalidEntityConfigError):
    def __init__(self, message: str = "Provided filter is invalid.") -> None:
        super().__init__(message)


class InvalidSearchError(InvalidEntityConfigError):
    def __init__(self, message: str = "Provided search syntax is invalid.") -> None:
        super().__init__(message)


class FilterSearchConflictError(InvalidEntityConfigError):
    """Filter and search were both configured for one entity."""

    def __init__(
        self, message: str = "Provided filter and search are mutually exclusive."
    ) -> None:
        super().__init__(message)


class InvalidPageRequestError(ConfigurationError):
    code = ErrorCode.INVALID_PAGE_REQUEST_CONFIG


class InvalidCursorError(InvalidPageRequestError):
    """Resume token could not be decoded or has the wrong shape for the entity."""


class MissingParentError(InvalidPageRequestError):
    """A member endpoint was requested without a parent collection ID."""

    def __init__(
        self,
        message: str = "Unable to construct group member endpoint without valid cursor.",
    ) -> None:
        super().__init__(message)


class DatasourceTransportError(OktaSyncError):
    """The request to the datasource could not be completed."""

    retryable = True


class DatasourceTimeoutError(DatasourceTransportError):
    """The configured request timeout elapsed before a response arrived."""

    def __init__(self, message: str, timeout_seconds: int) -> None:
        super().__init__(message)
        self.timeout_seconds = timeout_seconds


class DatasourceHTTPError(OktaSyncError):
    """Datasource answered with a non-success HTTP status."""

    code = ErrorCode.DATASOURCE_FAILED
    retryable = True

    def __init__(
        self,
        message: str,
        status_code: int,
        retry_after: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.retry_after = retry_after


class RateLimitError(DatasourceHTTPError):
    """Datasource rate limit exceeded."""

    def __init__(self, message: str, retry_after: str | None = None) -> None:
        super().__init__(message, status_code=429, retry_after=retry_after)


class InternalError(OktaSyncError):
    """Fatal error: contract violation by the datasource or a bug."""


class ParseError(InternalError):
    """Datasource response could not be parsed into a list of objects."""


class TooManyCollectionObjectsError(InternalError):
    """Parent lookup returned more than the single collection object requested."""

    def __init__(self, count: int) -> None:
        super().__init__(
            f"Too many collection objects returned in response; expected 1, got {count}."
        )
        self.count = count
