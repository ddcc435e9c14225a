"""Shared fixtures for integration tests.

Integration tests run the real aiohttp transport against an in-process
``aiohttp.web`` server bound to localhost.
"""

from __future__ import annotations

import asyncio

import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

ITEMS = [
    {"id": "1", "name": "first", "created_at": "2021-09-21T10:00:00Z"},
    {"id": "2", "name": "second", "created_at": "2021-09-22T10:00:00Z"},
]


async def list_items(request: web.Request) -> web.Response:
    return web.json_response(ITEMS)


async def show_item(request: web.Request) -> web.Response:
    for item in ITEMS:
        if item["id"] == request.match_info["id"]:
            return web.json_response(item)
    return web.json_response({"detail": "not found"}, status=404)


async def create_item(request: web.Request) -> web.Response:
    payload = await request.json()
    return web.json_response({**payload, "echo_content_type": request.content_type}, status=201)


async def empty(request: web.Request) -> web.Response:
    return web.Response(status=200)


async def moved(request: web.Request) -> web.Response:
    raise web.HTTPFound("/items")


async def broken(request: web.Request) -> web.Response:
    return web.Response(status=500, text="boom")


async def slow(request: web.Request) -> web.Response:
    await asyncio.sleep(10)
    return web.json_response({})


def make_app() -> web.Application:
    app = web.Application()
    app.router.add_get("/items", list_items)
    app.router.add_post("/items", create_item)
    app.router.add_get("/items/{id}", show_item)
    app.router.add_get("/empty", empty)
    app.router.add_get("/moved", moved)
    app.router.add_get("/broken", broken)
    app.router.add_get("/slow", slow)
    return app


@pytest_asyncio.fixture
async def server():
    test_server = TestServer(make_app())
    await test_server.start_server()
    yield test_server
    await test_server.close()


@pytest_asyncio.fixture
async def base_url(server):
    return str(server.make_url("/"))
