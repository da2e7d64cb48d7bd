"""
Chain execution with short-circuiting on the first error.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from kungfu import Result, Ok, Error

from orderflow.chain._types import (
    Step,
    Then,
    ChainExpr,
    ChainResult,
    ChainError,
)

type Continuation = Callable[[Any], Step[Any, Any]]

# ═══════════════════════════════════════════════════════════════════════════════
# unwind() — Flatten left-nested Then into head + continuations
# ═══════════════════════════════════════════════════════════════════════════════

def unwind(chain: ChainExpr[Any, Any]) -> tuple[Step[Any, Any], list[Continuation]]:
    """Flatten `Then(Then(s, f), g)` into `(s, [f, g])`."""
    continuations: list[Continuation] = []
    node: ChainExpr[Any, Any] = chain
    while isinstance(node, Then):
        continuations.append(node.f)
        node = node.inner
    continuations.reverse()
    return node, continuations


# ═══════════════════════════════════════════════════════════════════════════════
# run() — Execute a chain
# ═══════════════════════════════════════════════════════════════════════════════

async def run[T, E](
    chain: ChainExpr[T, E],
) -> Result[ChainResult[T], ChainError[E]]:
    """
    Execute a chain of steps.

    Each continuation receives the previous step's value. The first Error
    stops the chain; later continuations are never called.

    Example:
        from orderflow import chain as C

        flow = (
            C.from_optional(find, on_missing=OrderNotFound, on_error=as_fault)
            .then(lambda order: C.from_async(lambda: discount(order), on_error=as_fault))
        )

        result = await C.run(flow)

        match result:
            case Ok(r):
                print(f"Success: {r.value}")
            case Error(e):
                print(f"Failed at step {e.step_failed}: {e.error}")
    """
    head, continuations = unwind(chain)

    current = head
    result = await current.action
    steps = 1

    for f in continuations:
        match result:
            case Ok(value):
                current = f(value)
                result = await current.action
                steps += 1
            case Error(e):
                return Error(ChainError(error=e, step_failed=steps, label=current.label))

    match result:
        case Ok(value):
            return Ok(ChainResult(value=value, steps_executed=steps))
        case Error(e):
            return Error(ChainError(error=e, step_failed=steps, label=current.label))


# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = ("unwind", "run")
