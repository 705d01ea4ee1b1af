#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import os

from sonora.webapi import ClientOptions, Token, WebAPI


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List the tracks saved in your library, page by page")
    p.add_argument("pages", nargs="?", type=int, default=3)
    p.add_argument("limit", nargs="?", type=int, default=20)
    p.add_argument("--market", default=None)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    token = Token.from_scope_string(
        os.environ["SONORA_ACCESS_TOKEN"], os.environ.get("SONORA_TOKEN_SCOPES", "user-library-read")
    )

    async with WebAPI(token=token, options=ClientOptions(default_limit=args.limit)) as api:
        first = await api.library.get_saved_tracks(market=args.market)
        pages = await first.collect_forward(args.pages)
        print("=" * 72)
        print(f"Saved tracks : {first.total}")
        print(f"Pages read   : {len(pages)}")
        print("=" * 72)
        print(f"{'Added':22} | {'Track':30} | {'Artists':14}")
        print("-" * 72)
        for page in pages:
            for saved in page:
                artists = ", ".join(artist.name for artist in saved.track.artists)
                print(f"{saved.added_at:22} | {saved.track.name[:30]:30} | {artists[:14]:14}")
        print("=" * 72)


if __name__ == "__main__":
    asyncio.run(main())
