"""Unit tests for the callback calling convention."""

from __future__ import annotations

import asyncio
import inspect
import threading

import pytest

from httpmanager.core import ClientError, Failure, Success
from httpmanager.io.rest import HttpClient, dispatch
from tests.fakes import FakeTransport, HangingTransport, respond


class TestDispatch:
    @pytest.mark.asyncio
    async def test_delivers_outcome_once(self):
        received = []

        async def work():
            return Success(1)

        await dispatch(work(), received.append)

        assert received == [Success(1)]

    @pytest.mark.asyncio
    async def test_unexpected_exception_becomes_failure(self):
        received = []

        async def work():
            raise RuntimeError("bug")

        outcome = await dispatch(work(), received.append)

        assert received == [outcome]
        assert isinstance(received[0], Failure)
        assert isinstance(received[0].error, RuntimeError)

    @pytest.mark.asyncio
    async def test_cancelled_call_never_completes(self):
        received = []
        transport = HangingTransport()
        client = HttpClient("https://api.example.com", transport)

        task = client.get_with_callback("/items", received.append)
        await transport.started.wait()
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        assert received == []
        assert transport.cancelled

    @pytest.mark.asyncio
    async def test_cancel_before_start_closes_coroutine(self):
        """Cancelling before the first step still closes the wrapped coroutine."""
        received = []

        async def work():
            return Success(None)

        coro = work()
        task = dispatch(coro, received.append)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
        await asyncio.sleep(0)

        assert received == []
        assert inspect.getcoroutinestate(coro) == inspect.CORO_CLOSED

    def test_requires_running_loop_without_explicit_loop(self):
        async def work():
            return Success(None)

        with pytest.raises(RuntimeError):
            dispatch(work(), lambda outcome: None)


class TestHttpClientCallbacks:
    @pytest.mark.asyncio
    async def test_get_with_callback_matches_awaited_result(self):
        transport = FakeTransport()
        respond(transport, 404, b"missing")
        client = HttpClient("https://api.example.com", transport)
        received = []

        await client.get_with_callback("/items/42", received.append)
        awaited = await client.get("/items/42")

        assert len(received) == 1
        assert type(received[0].error) is type(awaited.error) is ClientError

    @pytest.mark.asyncio
    async def test_request_with_callback_sends_body(self):
        transport = FakeTransport()
        client = HttpClient("https://api.example.com", transport)
        received = []

        await client.request_with_callback("post", "/items", received.append, b"{}")

        assert received == [Success(None)]
        assert transport.requests[0].body == b"{}"

    def test_callback_from_another_thread(self):
        """Completion is delivered on the loop's worker thread."""
        loop = asyncio.new_event_loop()
        worker = threading.Thread(target=loop.run_forever, daemon=True)
        worker.start()
        try:
            transport = FakeTransport()
            respond(transport, 200, b'{"ok": true}')
            client = HttpClient("https://api.example.com", transport)
            done = threading.Event()
            received = []

            def complete(outcome):
                received.append((outcome, threading.current_thread()))
                done.set()

            client.get_with_callback("/status", complete, loop=loop)

            assert done.wait(timeout=5)
            assert received[0][0] == Success(b'{"ok": true}')
            assert received[0][1] is worker
        finally:
            loop.call_soon_threadsafe(loop.stop)
            worker.join(timeout=5)
            loop.close()
