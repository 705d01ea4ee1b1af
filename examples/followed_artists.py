#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import os

from sonora.webapi import ClientOptions, Token, WebAPI


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List every artist you follow (cursor paging)")
    p.add_argument("limit", nargs="?", type=int, default=50)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    token = Token.from_scope_string(
        os.environ["SONORA_ACCESS_TOKEN"], os.environ.get("SONORA_TOKEN_SCOPES", "user-follow-read")
    )

    async with WebAPI(token=token, options=ClientOptions(default_limit=args.limit)) as api:
        page = await api.following.get_followed_artists()
        artists = await page.all_items()
        print("=" * 60)
        print(f"Followed artists : {len(artists)}")
        print("=" * 60)
        for artist in artists:
            genres = ", ".join(artist.genres[:3])
            print(f"{artist.name[:30]:30} | {genres}")
        print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
