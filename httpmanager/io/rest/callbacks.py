"""Callback-style calling convention over the awaitable pipeline.

``dispatch`` schedules a coroutine that produces an ``Outcome`` and hands the
outcome to a completion callback exactly once. The callback runs on the event
loop that executed the coroutine; callers owning other state (UI, a worker
thread) must redispatch from inside the callback themselves.

A cancelled call never invokes the callback.
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import logging
from collections.abc import Callable, Coroutine
from typing import Any, TypeVar

from ...core.outcome import Failure, Outcome

T = TypeVar("T")

Completion = Callable[[Outcome[T]], None]

logger = logging.getLogger(__name__)


async def _run(coro: Coroutine[Any, Any, Outcome[T]], complete: Completion[T]) -> Outcome[T]:
    try:
        outcome = await coro
    except asyncio.CancelledError:
        logger.debug("Call cancelled, completion not invoked")
        raise
    except Exception as e:
        logger.exception("Unexpected error in scheduled call")
        outcome = Failure(e)
    complete(outcome)
    return outcome


def dispatch(
    coro: Coroutine[Any, Any, Outcome[T]],
    complete: Completion[T],
    *,
    loop: asyncio.AbstractEventLoop | None = None,
) -> asyncio.Task[Outcome[T]] | concurrent.futures.Future[Outcome[T]]:
    """Run ``coro`` without blocking and deliver its outcome to ``complete``.

    Args:
        coro: Coroutine returning an ``Outcome``
        complete: Completion callback, invoked once with the outcome
        loop: Event loop running in another thread; when omitted the
            coroutine is scheduled on the currently running loop

    Returns:
        The scheduled task (or thread-safe future when ``loop`` is given).
        It resolves to the delivered outcome and may be cancelled.

    Raises:
        RuntimeError: If ``loop`` is omitted and no event loop is running
    """
    if loop is not None:
        future: Any = asyncio.run_coroutine_threadsafe(_run(coro, complete), loop)
    else:
        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            coro.close()
            raise
        future = running.create_task(_run(coro, complete))
    # A call cancelled before its first step never starts ``coro``
    future.add_done_callback(lambda _: coro.close())
    return future
