#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import os

from oktasync.connectors.okta import OktaAdapter, OktaConfig
from oktasync.models import GetPageRequest


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Page through an Okta entity and print object IDs")
    p.add_argument("entity", nargs="?", default="GroupMember")
    p.add_argument("page_size", nargs="?", type=int, default=50)
    p.add_argument("--max-pages", type=int, default=0, help="Stop after N pages (0 = all)")
    p.add_argument("--filter", default=None, help="Okta filter expression for the entity")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    address = os.environ["OKTA_ADDRESS"]
    token = os.environ["OKTA_TOKEN"]

    config = {"apiVersion": "v1", "requestTimeoutSeconds": 30}
    if args.filter:
        config["filters"] = {args.entity: args.filter}

    attributes = [{"externalId": "id"}]
    if args.entity == "GroupMember":
        attributes += [{"externalId": "userId"}, {"externalId": "groupId"}]

    cursor = ""
    pages = 0
    total = 0
    async with OktaAdapter() as adapter:
        while True:
            request = GetPageRequest[OktaConfig].model_validate(
                {
                    "address": address,
                    "auth": {"httpAuthorization": f"SSWS {token}"},
                    "entity": {"externalId": args.entity, "attributes": attributes},
                    "config": config,
                    "pageSize": args.page_size,
                    "cursor": cursor,
                }
            )
            page = await adapter.get_page(request)
            pages += 1
            total += len(page.objects)
            for obj in page.objects:
                print(obj)

            cursor = page.next_cursor
            if not cursor or (args.max_pages and pages >= args.max_pages):
                break

    print("=" * 65)
    print(f"Entity  : {args.entity}")
    print(f"Pages   : {pages}")
    print(f"Objects : {total}")
    print("=" * 65)


if __name__ == "__main__":
    asyncio.run(main())
