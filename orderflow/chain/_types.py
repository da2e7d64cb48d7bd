"""
Chain types — core data structures.
"""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Callable
from typing import Any

from kungfu import LazyCoroResult

# ═══════════════════════════════════════════════════════════════════════════════
# Step — Single Fallible Step
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Step[T, E]:
    """
    A single fallible step.

    The action is lazy: nothing runs until the chain is executed.
    """

    action: LazyCoroResult[T, E]
    label: str = "step"

    def then[U, E2](
        self,
        f: Callable[[T], Step[U, E2]],
    ) -> Then[T, U, E, E2]:
        """Chain another step after this one."""
        return Then(self, f)


# ═══════════════════════════════════════════════════════════════════════════════
# Chain AST — Composition
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Then[T, U, E, E2]:
    """Sequential composition (monadic bind)."""

    inner: Step[T, E] | Then[Any, T, Any, E]
    f: Callable[[T], Step[U, E2]]

    def then[V, E3](
        self,
        g: Callable[[U], Step[V, E3]],
    ) -> Then[U, V, E2, E3]:
        """Chain another step after the whole chain so far."""
        return Then(self, g)


# ═══════════════════════════════════════════════════════════════════════════════
# Result Types
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class ChainResult[T]:
    """Successful chain result with metadata."""

    value: T
    steps_executed: int


@dataclass(frozen=True, slots=True)
class ChainError[E]:
    """Chain error with the position of the failing step."""

    error: E
    step_failed: int
    label: str


# ═══════════════════════════════════════════════════════════════════════════════
# Chain Type (union for run())
# ═══════════════════════════════════════════════════════════════════════════════

type ChainExpr[T, E] = Step[T, E] | Then[Any, T, Any, E]

# ═══════════════════════════════════════════════════════════════════════════════
# Exports
# ═══════════════════════════════════════════════════════════════════════════════

__all__ = (
    "Step",
    "Then",
    "ChainExpr",
    "ChainResult",
    "ChainError",
)
