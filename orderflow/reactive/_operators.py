"""
Bridges between asyncio coroutines and RxPY observables.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

import rx
from rx import operators as ops


def from_async[T](factory: Callable[[], Awaitable[T]]) -> rx.Observable:
    """
    Cold observable over one coroutine call.

    The coroutine is created on subscription, so every subscriber runs
    it afresh. Emits the single result, or the raised exception as
    on_error.
    """
    return rx.defer(lambda _scheduler: rx.from_future(asyncio.ensure_future(factory())))


async def first_value(source: rx.Observable) -> Any:
    """Subscribe once and resolve with the first element (or the error)."""
    loop = asyncio.get_running_loop()
    future: asyncio.Future[Any] = loop.create_future()

    def on_next(value: Any) -> None:
        if not future.done():
            future.set_result(value)

    def on_error(exc: Exception) -> None:
        if not future.done():
            future.set_exception(exc)

    disposable = source.pipe(ops.first()).subscribe(
        on_next=on_next,
        on_error=on_error,
    )
    try:
        return await future
    finally:
        disposable.dispose()


__all__ = ("from_async", "first_value")
