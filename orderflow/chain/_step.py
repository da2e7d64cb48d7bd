"""
Chain step creation.
"""

from __future__ import annotations

from collections.abc import Callable, Awaitable
from kungfu import LazyCoroResult

from orderflow import lift as L
from orderflow.chain._types import Step

# ═══════════════════════════════════════════════════════════════════════════════
# step() — Primary Constructor
# ═══════════════════════════════════════════════════════════════════════════════


def step[T, E](
    action: LazyCoroResult[T, E],
    label: str = "step",
) -> Step[T, E]:
    """
    Create a chain step.

    Args:
        action: The operation to perform (LazyCoroResult)
        label: Name reported in ChainError when this step fails

    Returns:
        Step that can be chained with .then()

    Example:
        from orderflow import chain as C
        from orderflow import lift as L

        find = C.step(
            L.catching_async(
                lambda: steps.retrieve(order_id),
                on_error=as_fault,
            ),
            label="retrieve",
        )

        # Chain steps
        flow = find.then(lambda order: C.step(
            L.catching_async(
                lambda: steps.apply_discount(order),
                on_error=as_fault,
            ),
            label="discount",
        ))
    """
    return Step(action=action, label=label)


# ═══════════════════════════════════════════════════════════════════════════════
# from_async() — Create step from async callable
# ═══════════════════════════════════════════════════════════════════════════════


def from_async[T, E](
    action: Callable[[], Awaitable[T]],
    on_error: Callable[[Exception], E],
    label: str = "step",
    passthrough: L.Passthrough = (),
) -> Step[T, E]:
    """
    Create step from async callable with error handling.

    Exceptions in `passthrough` propagate out of run() instead of
    becoming a ChainError.

    Example:
        C.from_async(
            lambda: steps.update(order),
            on_error=as_fault,
            label="update",
        )
    """
    return Step(
        action=L.from_awaitable(action, on_error=on_error, passthrough=passthrough),
        label=label,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# from_optional() — Create step from a lookup that may return None
# ═══════════════════════════════════════════════════════════════════════════════


def from_optional[T, E](
    action: Callable[[], Awaitable[T | None]],
    on_missing: Callable[[], E],
    on_error: Callable[[Exception], E],
    label: str = "step",
    passthrough: L.Passthrough = (),
) -> Step[T, E]:
    """
    Create step whose None result is an error.

    Example:
        C.from_optional(
            lambda: steps.retrieve(order_id),
            on_missing=OrderNotFound,
            on_error=as_fault,
            label="retrieve",
        )
    """
    return Step(
        action=L.from_optional(
            action, on_missing=on_missing, on_error=on_error, passthrough=passthrough
        ),
        label=label,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("step", "from_async", "from_optional")
