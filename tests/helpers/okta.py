"""In-memory Okta that serves pages by exact URL, plus page layout helpers."""

from __future__ import annotations

from typing import Any

from oktasync.pagination import CollectionPage

BASE_URL = "https://test-instance.oktapreview.com"
GROUP_FILTER = "filter=type+eq+%22OKTA_GROUP%22+or+type+eq+%22APP_GROUP%22"


class FakeCollectionClient:
    """Stands in for OktaDatasource; unknown URLs answer 404."""

    def __init__(self, pages: dict[str, CollectionPage]) -> None:
        self.pages = pages
        self.calls: list[str] = []
        self.closed = False

    async def fetch_collection_page(
        self, url: str, token: str, timeout_seconds: int
    ) -> CollectionPage:
        self.calls.append(url)
        return self.pages.get(url, CollectionPage(status_code=404))

    async def close(self) -> None:
        self.closed = True


def user(user_id: str) -> dict[str, Any]:
    return {"id": user_id, "status": "ACTIVE", "profile": {"login": f"{user_id}@example.com"}}


def group(group_id: str) -> dict[str, Any]:
    return {"id": group_id, "type": "OKTA_GROUP", "profile": {"name": f"Group {group_id}"}}


def first_group_url() -> str:
    return f"{BASE_URL}/api/v1/groups?{GROUP_FILTER}&limit=1"


def group_link(after: str) -> str:
    return f"{BASE_URL}/api/v1/groups?after={after}&limit=1&{GROUP_FILTER}"


def members_url(group_id: str, page_size: int) -> str:
    return f"{BASE_URL}/api/v1/groups/{group_id}/users?limit={page_size}"


def members_link(group_id: str, after: str, page_size: int) -> str:
    return f"{BASE_URL}/api/v1/groups/{group_id}/users?after={after}&limit={page_size}"


def build_group_member_pages(
    memberships: dict[str, list[str]], page_size: int
) -> dict[str, CollectionPage]:
    """Lay out group and member pages the way Okta links them.

    Groups are served one per page (the traversal always asks for limit=1);
    members of each group are split into pages of page_size.
    """
    pages: dict[str, CollectionPage] = {}
    group_ids = list(memberships)

    for index, group_id in enumerate(group_ids):
        url = first_group_url() if index == 0 else group_link(group_ids[index - 1])
        next_link = group_link(group_id) if index + 1 < len(group_ids) else None
        pages[url] = CollectionPage(status_code=200, objects=[group(group_id)], next_link=next_link)

        members = memberships[group_id]
        chunks = [members[i : i + page_size] for i in range(0, len(members), page_size)] or [[]]
        for chunk_index, chunk in enumerate(chunks):
            if chunk_index == 0:
                chunk_url = members_url(group_id, page_size)
            else:
                chunk_url = members_link(group_id, chunks[chunk_index - 1][-1], page_size)
            chunk_next = (
                members_link(group_id, chunk[-1], page_size)
                if chunk_index + 1 < len(chunks)
                else None
            )
            pages[chunk_url] = CollectionPage(
                status_code=200, objects=[user(u) for u in chunk], next_link=chunk_next
            )

    if not group_ids:
        pages[first_group_url()] = CollectionPage(status_code=200)

    return pages
