"""Link header parsing.

A response may carry several Link header values, each possibly holding several
comma separated relations:

    <https://example.okta.com/api/v1/users?limit=2>; rel="self",
    <https://example.okta.com/api/v1/users?after=00u1&limit=2>; rel="next"

Only the "next" relation is used; it is the opaque cursor for the next page.
"""

from __future__ import annotations

from collections.abc import Iterable

NEXT_RELATION_SUFFIX = '>;rel="next"'
LINK_TARGET_PREFIX = "https://"


def _strip_whitespace(value: str) -> str:
    return "".join(value.split())


def value_from_list(
    values: Iterable[str], included_prefix: str, excluded_suffix: str
) -> str | None:
    """Return the first value that ends at excluded_suffix, starting from included_prefix.

    Whitespace is ignored in values, prefix and suffix. For each value the text
    before the suffix is taken and the last occurrence of the prefix in it marks
    the start of the result, so earlier relations in the same value are skipped.
    """
    prefix = _strip_whitespace(included_prefix)
    suffix = _strip_whitespace(excluded_suffix)

    for raw in values:
        value = _strip_whitespace(raw)

        end = value.find(suffix)
        if end == -1:
            continue
        value = value[:end]

        start = value.rfind(prefix)
        if start == -1:
            continue

        return value[start:]

    return None


def next_link(values: Iterable[str]) -> str | None:
    """Extract the "next" page URL from Link header values, or None at the last page."""
    return value_from_list(values, LINK_TARGET_PREFIX, NEXT_RELATION_SUFFIX)
