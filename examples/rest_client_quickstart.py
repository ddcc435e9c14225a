#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from httpmanager import HttpClient, Resource, RestClient


class Post(Resource):
    id: int
    title: str
    body: str


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List or show resources via RestClient")
    p.add_argument("identifier", nargs="?", default=None)
    p.add_argument("--base-url", default="https://jsonplaceholder.typicode.com")
    p.add_argument("--path", default="/posts")
    return p.parse_args()


async def main() -> None:
    args = parse_args()

    async with HttpClient(args.base_url) as http:
        posts = RestClient(http, args.path, Post)
        if args.identifier is None:
            outcome = await posts.list()
            if outcome.is_failure:
                print(f"{outcome.error.title}: {outcome.error}")
                return
            print(f"{len(outcome.value)} posts")
            for post in outcome.value[:10]:
                print(f"{post.id:>4} | {post.title}")
        else:
            outcome = await posts.show(args.identifier)
            if outcome.is_failure:
                print(f"{outcome.error.title}: {outcome.error}")
            elif outcome.value is None:
                print("Nothing found")
            else:
                print(f"{outcome.value.id}: {outcome.value.title}\n\n{outcome.value.body}")


if __name__ == "__main__":
    asyncio.run(main())
