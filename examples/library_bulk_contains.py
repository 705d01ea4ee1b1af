#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import os

from sonora.webapi import ClientOptions, LibraryType, Token, TooManyIdentifiersError, WebAPI


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Check which tracks are saved in your library")
    p.add_argument("tracks", nargs="+", help="Track ids, URIs or open.spotify.com links")
    p.add_argument("--bulk", action="store_true", help="Split more than 50 ids into several requests")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    token = Token.from_scope_string(
        os.environ["SONORA_ACCESS_TOKEN"], os.environ.get("SONORA_TOKEN_SCOPES", "user-library-read")
    )

    async with WebAPI(token=token, options=ClientOptions(allow_bulk_requests=args.bulk)) as api:
        try:
            flags = await api.library.contains(LibraryType.TRACK, *args.tracks)
        except TooManyIdentifiersError as e:
            print(f"{e}")
            return
        for track, saved in zip(args.tracks, flags, strict=True):
            print(f"{'saved' if saved else '-----'} {track}")


if __name__ == "__main__":
    asyncio.run(main())
