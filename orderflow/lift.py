"""
Lift — Helpers for lifting step calls into LazyCoroResult.

Re-exports from combinators.lift with orderflow-specific additions.
Both helpers map exceptions through `on_error`, except those listed in
`passthrough`, which escape the LazyCoroResult unchanged.
"""

from __future__ import annotations

from collections.abc import Callable, Awaitable

from kungfu import LazyCoroResult, Result, Ok, Error

from combinators.lift import catching_async


type Passthrough = tuple[type[Exception], ...]


# ═══════════════════════════════════════════════════════════════════════════════
# orderflow-specific helpers
# ═══════════════════════════════════════════════════════════════════════════════

def from_awaitable[T, E](
    awaitable_fn: Callable[[], Awaitable[T]],
    on_error: Callable[[Exception], E],
    passthrough: Passthrough = (),
) -> LazyCoroResult[T, E]:
    """
    Create LazyCoroResult from async function.

    Example:
        update = from_awaitable(
            lambda: steps.update(order),
            on_error=as_fault,
            passthrough=(IllegalTransition,),
        )
    """
    def _map_error(exc: Exception) -> E:
        if isinstance(exc, passthrough):
            raise exc
        return on_error(exc)

    return catching_async(awaitable_fn, on_error=_map_error)


def from_optional[T, E](
    awaitable_fn: Callable[[], Awaitable[T | None]],
    on_missing: Callable[[], E],
    on_error: Callable[[Exception], E],
    passthrough: Passthrough = (),
) -> LazyCoroResult[T, E]:
    """
    Create LazyCoroResult from an async lookup that may return None.

    Ok(None) becomes Error(on_missing()).

    Example:
        find = from_optional(
            lambda: steps.retrieve(order_id),
            on_missing=OrderNotFound,
            on_error=as_fault,
        )
    """
    lookup = from_awaitable(awaitable_fn, on_error=on_error, passthrough=passthrough)

    async def _run() -> Result[T, E]:
        match await lookup:
            case Ok(None):
                return Error(on_missing())
            case result:
                return result

    return LazyCoroResult(_run)


__all__ = (
    # From combinators.lift
    "catching_async",
    # orderflow additions
    "Passthrough",
    "from_awaitable",
    "from_optional",
)
