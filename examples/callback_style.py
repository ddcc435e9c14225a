#!/usr/bin/env python3
"""Callback-style calls from a synchronous caller.

The event loop runs on a worker thread; completions arrive there and are
handed back to the main thread through a queue.
"""

from __future__ import annotations

import argparse
import asyncio
import queue
import threading

from httpmanager import HttpClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch paths with completion callbacks")
    p.add_argument("paths", nargs="*", default=["/posts/1", "/posts/2", "/missing"])
    p.add_argument("--base-url", default="https://jsonplaceholder.typicode.com")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    loop = asyncio.new_event_loop()
    worker = threading.Thread(target=loop.run_forever, daemon=True)
    worker.start()

    http = HttpClient(args.base_url)
    results: queue.Queue = queue.Queue()

    for path in args.paths:
        http.get_with_callback(path, lambda outcome, p=path: results.put((p, outcome)), loop=loop)

    for _ in args.paths:
        path, outcome = results.get(timeout=60)
        if outcome.is_success:
            size = len(outcome.value) if outcome.value else 0
            print(f"{path:20} -> {size} bytes")
        else:
            print(f"{path:20} -> {outcome.error.title}")

    asyncio.run_coroutine_threadsafe(http.close(), loop).result(timeout=10)
    loop.call_soon_threadsafe(loop.stop)
    worker.join()


if __name__ == "__main__":
    main()
