"""
supakit - Async Adapters.

Converts between future-based computations (asyncio futures and tasks,
concurrent.futures futures) and coroutines, and calls supabase-py methods
of either client flavour as coroutines.

Nothing here retries, buffers or times out. Exceptions pass through
unchanged in both directions.

Usage:
    task = as_task(auth.sign_in(client, email, password))  # starts now
    response = await as_coroutine(task)                     # same value

    future = pool.submit(blocking_call)
    value = await as_coroutine(future)
"""

import asyncio
import concurrent.futures
import inspect
import logging
from collections.abc import Awaitable, Callable, Coroutine
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def as_coroutine(
    future: "asyncio.Future[T] | concurrent.futures.Future[T]",
) -> Coroutine[Any, Any, T]:
    """
    Return a coroutine that awaits a future-based computation.

    concurrent.futures futures are bridged onto the running loop with
    asyncio.wrap_future. A failed future raises its own exception object.

    Raises:
        TypeError: `future` is not a future (raised here, not when awaited)
    """
    if not (isinstance(future, concurrent.futures.Future) or asyncio.isfuture(future)):
        raise TypeError(f"as_coroutine expects a future, got {type(future).__name__}")
    return _await_future(future)


async def _await_future(future: "asyncio.Future[T] | concurrent.futures.Future[T]") -> T:
    if isinstance(future, concurrent.futures.Future):
        return await asyncio.wrap_future(future)
    return await future


def as_task(awaitable: Awaitable[T]) -> "asyncio.Future[T]":
    """
    Start a coroutine on the running loop and return its task.

    Futures and tasks are returned unchanged. Must be called from inside a
    running event loop.
    """
    loop = asyncio.get_running_loop()
    return asyncio.ensure_future(awaitable, loop=loop)


def as_concurrent_future(
    coro: Coroutine[Any, Any, T],
    loop: asyncio.AbstractEventLoop,
) -> "concurrent.futures.Future[T]":
    """Schedule a coroutine on `loop` from another thread."""
    return asyncio.run_coroutine_threadsafe(coro, loop)


async def call(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """
    Call a supabase-py method and await its result, whatever its flavour.

    AsyncClient methods are coroutine functions and are awaited directly.
    Client methods block on network I/O, so they run in a worker thread.
    """
    if inspect.iscoroutinefunction(func):
        return await func(*args, **kwargs)

    logger.debug(f"Running {getattr(func, '__qualname__', func)!s} in a worker thread")
    result = await asyncio.to_thread(func, *args, **kwargs)

    # Some SDK methods are plain functions returning an awaitable
    if inspect.isawaitable(result):
        return await result
    return result


def run_sync(awaitable: Awaitable[T]) -> T:
    """Drive a coroutine to completion from synchronous code."""
    if inspect.iscoroutine(awaitable):
        return asyncio.run(awaitable)

    async def _await() -> T:
        return await awaitable

    return asyncio.run(_await())
