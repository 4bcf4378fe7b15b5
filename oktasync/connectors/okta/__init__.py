"""Okta connector."""

from .adapter import OktaAdapter
from .config import GROUP_MEMBER_SPEC, OktaConfig
from .datasource import OktaDatasource, parse_response
from .endpoints import construct_endpoint, encode_query_options
from .validation import validate_get_page_request

__all__ = [
    "OktaAdapter",
    "OktaConfig",
    "OktaDatasource",
    "GROUP_MEMBER_SPEC",
    "construct_endpoint",
    "encode_query_options",
    "parse_response",
    "validate_get_page_request",
]
