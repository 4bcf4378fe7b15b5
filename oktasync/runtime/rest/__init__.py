"""REST runtime abstractions."""

from .http_client import HTTPClient, HTTPResponse, is_success, raise_for_status
from .links import next_link, value_from_list

__all__ = [
    "HTTPClient",
    "HTTPResponse",
    "is_success",
    "raise_for_status",
    "next_link",
    "value_from_list",
]
