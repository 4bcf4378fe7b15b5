"""GetPage request validation for the Okta connector."""

from __future__ import annotations

from oktasync.core import (
    EntityKind,
    InvalidDatasourceConfigError,
    InvalidEntityConfigError,
    InvalidPageRequestError,
    UnsupportedEntityError,
)
from oktasync.models import GetPageRequest

from .config import AUTH_SCHEME_PREFIXES, UNIQUE_ID_ATTRIBUTE, OktaConfig


def validate_address(address: str) -> None:
    """Only https is accepted; an address without a scheme is treated as https."""
    if address.startswith("http://"):
        raise InvalidDatasourceConfigError("The provided HTTP protocol is not supported.")

    scheme, sep, _ = address.partition("://")
    if sep and scheme != "https":
        raise InvalidDatasourceConfigError(f'Scheme "{scheme}" is not supported.')


def validate_get_page_request(request: GetPageRequest[OktaConfig]) -> None:
    """Validate the fields of a GetPage request before anything is fetched.

    Raises:
        ConfigurationError: Describing the first problem found
    """
    if request.config is None:
        raise InvalidDatasourceConfigError("Okta config is invalid: request contains no config.")
    try:
        request.config.validate_config()
    except ValueError as e:
        raise InvalidDatasourceConfigError(f"Okta config is invalid: {e}.") from e

    validate_address(request.address)

    if request.auth is None or not request.auth.http_authorization:
        raise InvalidDatasourceConfigError(
            "Provided datasource auth is missing required http authorization credentials."
        )

    if EntityKind.parse(request.entity.external_id) is None:
        raise UnsupportedEntityError()

    if not request.auth.http_authorization.startswith(AUTH_SCHEME_PREFIXES):
        raise InvalidDatasourceConfigError(
            'Provided auth token is missing required "Bearer " or "SSWS " prefix.'
        )

    if not any(attr.external_id == UNIQUE_ID_ATTRIBUTE for attr in request.entity.attributes):
        raise InvalidEntityConfigError(
            "Requested entity attributes are missing unique ID attribute."
        )

    if request.entity.child_entities:
        raise InvalidEntityConfigError("Requested entity does not support child entities.")

    if request.ordered:
        raise InvalidEntityConfigError("Ordered must be set to false.")

    if request.page_size <= 0:
        raise InvalidPageRequestError("Page size must be greater than 0.")
