"""Unit tests for Okta endpoint construction."""

from __future__ import annotations

import pytest

from oktasync.connectors.okta.endpoints import (
    construct_endpoint,
    encode_query_expression,
    encode_query_options,
    validate_page_request,
)
from oktasync.core import (
    EntityKind,
    FilterSearchConflictError,
    InvalidFilterError,
    InvalidSearchError,
    MissingParentError,
)
from oktasync.pagination import ChildCursor, ItemCursor, NextParentCursor, PageRequest

BASE = "https://acme.okta.com"


def _request(entity: EntityKind, **kwargs) -> PageRequest:
    kwargs.setdefault("page_size", 100)
    return PageRequest(entity=entity, base_url=BASE, token="SSWS t", **kwargs)


class TestEncodeQuery:
    def test_escaped_quotes_are_unescaped_then_encoded(self):
        assert encode_query_expression('status eq \\"ACTIVE\\"') == "status+eq+%22ACTIVE%22"

    def test_everything_outside_unreserved_is_encoded(self):
        assert encode_query_expression("profile/x eq 1") == "profile%2Fx+eq+1"

    def test_conflict_checked_first(self):
        with pytest.raises(FilterSearchConflictError):
            encode_query_options("a", "b")

    def test_short_filter(self):
        with pytest.raises(InvalidFilterError):
            encode_query_options("id eq", None)

    def test_short_search(self):
        with pytest.raises(InvalidSearchError):
            encode_query_options(None, "a eq")

    def test_minimum_length_accepted(self):
        assert encode_query_options("id eq x", None) == ("id+eq+x", None)

    def test_unset_is_none(self):
        assert encode_query_options(None, "") == (None, None)


class TestConstructEndpoint:
    def test_users(self):
        assert construct_endpoint(_request(EntityKind.USER)) == f"{BASE}/api/v1/users?limit=100"

    def test_users_with_filter(self):
        url = construct_endpoint(_request(EntityKind.USER, filter='status eq \\"ACTIVE\\"'))
        assert url == f"{BASE}/api/v1/users?filter=status+eq+%22ACTIVE%22&limit=100"

    def test_users_with_search(self):
        url = construct_endpoint(
            _request(EntityKind.USER, search='profile.department eq "Engineering"')
        )
        assert url == (
            f"{BASE}/api/v1/users?search=profile.department+eq+%22Engineering%22&limit=100"
        )

    def test_groups_get_default_filter(self):
        url = construct_endpoint(_request(EntityKind.GROUP, page_size=1))
        assert url == (
            f"{BASE}/api/v1/groups?filter=type+eq+%22OKTA_GROUP%22+or+type+eq+%22APP_GROUP%22"
            "&limit=1"
        )

    def test_groups_search_replaces_default_filter(self):
        url = construct_endpoint(_request(EntityKind.GROUP, search='profile.name sw "eng"'))
        assert url == f"{BASE}/api/v1/groups?search=profile.name+sw+%22eng%22&limit=100"

    def test_groups_custom_filter(self):
        url = construct_endpoint(_request(EntityKind.GROUP, filter='type eq "OKTA_GROUP"'))
        assert url == f"{BASE}/api/v1/groups?filter=type+eq+%22OKTA_GROUP%22&limit=100"

    def test_applications(self):
        assert construct_endpoint(_request(EntityKind.APPLICATION, page_size=20)) == (
            f"{BASE}/api/v1/apps?limit=20"
        )

    def test_group_members(self):
        url = construct_endpoint(
            _request(EntityKind.GROUP_MEMBER, cursor=ChildCursor(parent_id="00g1"))
        )
        assert url == f"{BASE}/api/v1/groups/00g1/users?limit=100"

    def test_group_members_ignore_filter(self):
        url = construct_endpoint(
            _request(
                EntityKind.GROUP_MEMBER,
                filter='status eq "ACTIVE"',
                cursor=ChildCursor(parent_id="00g1"),
            )
        )
        assert url == f"{BASE}/api/v1/groups/00g1/users?limit=100"

    @pytest.mark.parametrize("cursor", [None, NextParentCursor(parent_cursor=f"{BASE}/g")])
    def test_group_members_need_parent(self, cursor):
        kwargs = {"cursor": cursor} if cursor else {}
        with pytest.raises(MissingParentError):
            construct_endpoint(_request(EntityKind.GROUP_MEMBER, **kwargs))

    def test_item_cursor_is_used_verbatim(self):
        link = f"{BASE}/api/v1/users?after=00u9&limit=100"
        assert construct_endpoint(_request(EntityKind.USER, cursor=ItemCursor(link))) == link

    def test_child_cursor_link_is_used_verbatim(self):
        link = f"{BASE}/api/v1/groups/00g1/users?after=00u9&limit=100"
        token = ChildCursor(parent_id="00g1", item_cursor=link)
        assert construct_endpoint(_request(EntityKind.GROUP_MEMBER, cursor=token)) == link

    def test_resumed_request_skips_filter_checks(self):
        link = f"{BASE}/api/v1/users?after=00u9&limit=100"
        validate_page_request(_request(EntityKind.USER, filter="x", cursor=ItemCursor(link)))
        token = ChildCursor(parent_id="00g1", item_cursor=link)
        validate_page_request(
            _request(EntityKind.GROUP_MEMBER, filter="a", search="b", cursor=token)
        )

    def test_first_page_checks_filter(self):
        with pytest.raises(FilterSearchConflictError):
            validate_page_request(_request(EntityKind.USER, filter="a", search="b"))

    def test_invalid_filter_fails_before_url(self):
        with pytest.raises(InvalidFilterError):
            construct_endpoint(_request(EntityKind.USER, filter="x"))

    def test_api_version_in_path(self):
        url = construct_endpoint(_request(EntityKind.USER, api_version="v2"))
        assert url == f"{BASE}/api/v2/users?limit=100"
