"""Shared Okta connector constants and datasource config.

This module centralizes API versions, default filters and field names used by
the endpoint builder, datasource and adapter so they can stay small and focused.

Example datasource config:

    {
        "requestTimeoutSeconds": 10,
        "apiVersion": "v1",
        "filters": {
            "User": "status eq \\"ACTIVE\\"",
            "Group": "type eq \\"OKTA_GROUP\\""
        },
        "search": {
            "User": "profile.department eq \\"Engineering\\""
        }
    }
"""

from __future__ import annotations

from pydantic import Field

from oktasync.core import EntityKind
from oktasync.models import CommonConfig
from oktasync.pagination import MemberEntitySpec

SUPPORTED_API_VERSIONS = frozenset({"v1"})

# Okta returns a typical maximum of 200 objects per page but documents that the
# maximum varies by org and may change, so no upper page size is enforced.

UNIQUE_ID_ATTRIBUTE = "id"

AUTH_SCHEME_PREFIXES = ("Bearer ", "SSWS ")

# Shortest valid Okta filter/search expression is of the form `id eq x`.
MIN_QUERY_EXPRESSION_LENGTH = 7

# Groups not useful to ingest are filtered out unless the caller sets a filter or search.
DEFAULT_GROUP_FILTER = 'type eq "OKTA_GROUP" or type eq "APP_GROUP"'

CONTENT_TYPE = "application/json;okta-response=omitCredentials,omitCredentialsLinks"

ENTITY_PATHS = {
    EntityKind.USER: "users",
    EntityKind.GROUP: "groups",
    EntityKind.APPLICATION: "apps",
}

GROUP_MEMBER_SPEC = MemberEntitySpec(
    member=EntityKind.GROUP_MEMBER,
    parent=EntityKind.GROUP,
    unique_id_attribute=UNIQUE_ID_ATTRIBUTE,
    member_id_field="userId",
    parent_id_field="groupId",
)


class OktaConfig(CommonConfig):
    """Datasource config sent with every page request.

    filters and search are keyed by entity external ID.
    """

    api_version: str | None = Field(default=None, alias="apiVersion")
    filters: dict[str, str] = Field(default_factory=dict)
    search: dict[str, str] = Field(default_factory=dict)

    def validate_config(self) -> None:
        """Raise ValueError describing the first invalid setting."""
        if not self.api_version:
            raise ValueError("apiVersion is not set")
        if self.api_version not in SUPPORTED_API_VERSIONS:
            raise ValueError(f"apiVersion is not supported: {self.api_version}")
