"""Bridge between continuation-passing results and asyncio."""

from __future__ import annotations

import asyncio
import contextvars
import logging
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from fallible.continuation import Continuation, Deferred
    from fallible.result import Result

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")

logger = logging.getLogger(__name__)

# Set by resolve() while it starts a computation; tasks created by deferred() inherit it.
_fail: contextvars.ContextVar[Callable[[Exception], None]] = contextvars.ContextVar("fallible_fail")


async def resolve(computation: Deferred[U, E], *, timeout: float | None = None) -> Result[U, E]:
    """Run a deferred result and await the outcome handed to its continuation.

    The continuation may be called from any thread. Calls after the first are
    ignored. An exception raised by a coroutine adapted with :func:`deferred`
    is re-raised here unchanged.

    Args:
        computation: The function returned by ``map_async``, ``bind_async`` or ``ensure_async``.
        timeout: Seconds to wait for the continuation before raising ``TimeoutError``.
    """
    loop = asyncio.get_running_loop()
    future: asyncio.Future[Result[U, E]] = loop.create_future()

    def settle(outcome: Result[U, E]) -> None:
        if not future.done():
            future.set_result(outcome)
        else:
            logger.debug("Ignoring late outcome %r", outcome)

    def reject(exc: Exception) -> None:
        if not future.done():
            future.set_exception(exc)
        else:
            logger.debug("Ignoring late exception %r", exc)

    def complete(outcome: Result[U, E]) -> None:
        loop.call_soon_threadsafe(settle, outcome)

    def fail(exc: Exception) -> None:
        loop.call_soon_threadsafe(reject, exc)

    token = _fail.set(fail)
    try:
        computation(complete)
    finally:
        _fail.reset(token)
    if timeout is None:
        return await future
    return await asyncio.wait_for(future, timeout)


def deferred(fn: Callable[[T], Awaitable[U]]) -> Callable[[T, Continuation[U]], None]:
    """Adapt a coroutine function to the ``(value, continuation)`` shape of ``map_async``.

    The coroutine runs as a task on the running loop and its return value is
    handed to the continuation. If it raises inside :func:`resolve`, the
    exception is delivered to the awaiting caller; otherwise it surfaces on the task.
    """
    tasks: set[asyncio.Task[None]] = set()

    def start(value: T, k: Continuation[U]) -> None:
        async def run() -> None:
            try:
                transformed = await fn(value)
            except Exception as e:
                fail = _fail.get(None)
                if fail is None:
                    raise
                fail(e)
                return
            k(transformed)

        task = asyncio.get_running_loop().create_task(run())
        tasks.add(task)
        task.add_done_callback(tasks.discard)

    return start
